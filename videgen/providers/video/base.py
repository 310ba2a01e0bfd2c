"""
Base class for video assembly providers.
"""
from abc import ABC, abstractmethod
from typing import List

from videgen.models import TimedAsset


class BaseVideoProvider(ABC):
    """Abstract base class for video compositors."""

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
    async def compose(self, audio_url: str, images: List[TimedAsset]) -> str:
        """
        Combine narration audio and timed images into a playable video.

        Args:
            audio_url: Locator of the narration audio
            images: Timeline entries in display order

        Returns:
            Locator or URL of the finished video
        """
        pass
