"""
Base class for text-generation providers.
"""
from abc import ABC, abstractmethod


class BaseTextProvider(ABC):
    """Abstract base class for LLM text providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if provider is available."""
        pass

    @abstractmethod
    def supports(self, model: str) -> bool:
        """Whether this provider can serve the given model id."""
        pass

    @abstractmethod
    async def generate(self, prompt: str, model: str, language: str = "english") -> str:
        """
        Generate text for a prompt.

        Streamed backends accumulate every chunk before returning, so the
        caller always receives the complete text.

        Args:
            prompt: Full user prompt
            model: Backend model id
            language: Output language name (english, indonesian)

        Returns:
            Generated text (may be empty if the backend produced nothing)
        """
        pass
