"""
Base class for image providers.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ImageData:
    """Image bytes returned by a provider."""
    data: bytes
    mime_type: str = "image/jpeg"


class BaseImageProvider(ABC):
    """Abstract base class for image providers (stock search or generative)."""

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
    async def fetch(self, query: str) -> ImageData:
        """
        Obtain one image for a visual concept.

        Args:
            query: Search query or generation prompt

        Returns:
            ImageData with the raw bytes
        """
        pass
