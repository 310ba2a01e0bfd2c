"""
Image provider factory.
"""
import logging
from typing import Literal

from videgen.config import AIConfig

from .base import BaseImageProvider
from .dalle import DalleImageProvider
from .unsplash import UnsplashImageProvider

logger = logging.getLogger(__name__)

ProviderType = Literal["auto", "unsplash", "dalle"]


class ImageProviderFactory:
    """Factory for creating image providers."""

    @classmethod
    def create(cls, ai: AIConfig, provider: ProviderType = "auto") -> BaseImageProvider:
        candidates = {
            "unsplash": lambda: UnsplashImageProvider(access_key=ai.unsplash_access_key if ai.has_unsplash else None),
            "dalle": lambda: DalleImageProvider(api_key=ai.openai_api_key if ai.has_openai else None),
        }

        if provider == "auto":
            for name in ["unsplash", "dalle"]:
                p = candidates[name]()
                if p.is_available:
                    return p
            # Nothing configured: every fetch fails and the timeline degrades to placeholders
            logger.warning("No image provider configured - timelines will use placeholders")
            return candidates["unsplash"]()

        if provider not in candidates:
            logger.warning(f"Unknown image provider '{provider}', using unsplash")
            return candidates["unsplash"]()
        return candidates[provider]()


def get_image_provider(ai: AIConfig, provider: ProviderType = "auto") -> BaseImageProvider:
    return ImageProviderFactory.create(ai, provider)
