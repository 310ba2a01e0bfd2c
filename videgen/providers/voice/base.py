"""
Base class for voice/TTS providers.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class SynthesizedAudio:
    """Raw synthesis output as delivered by the backend."""
    data: bytes
    mime_type: str
    duration: Optional[float] = None  # only set when the backend reports it


class BaseVoiceProvider(ABC):
    """Abstract base class for voice/TTS providers."""

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
    async def synthesize(self, text: str, voice: str) -> SynthesizedAudio:
        """
        Synthesize speech from text.

        Args:
            text: Narration text
            voice: Backend-defined voice identifier

        Returns:
            SynthesizedAudio with the encoded bytes and their mime type
        """
        pass
