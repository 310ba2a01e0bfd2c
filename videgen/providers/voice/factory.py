"""
Voice provider factory.
"""
import logging
from typing import Literal

from videgen.config import AIConfig

from .base import BaseVoiceProvider, SynthesizedAudio
from .edge import EdgeTTSProvider
from .gemini_tts import GeminiTTSProvider
from .google_cloud import GoogleCloudTTSProvider
from ..exceptions import ProviderError

logger = logging.getLogger(__name__)

ProviderType = Literal["auto", "google", "gemini", "edge"]


class VoiceProviderFactory:
    """Factory for creating voice providers with automatic fallback."""

    @classmethod
    def create(cls, ai: AIConfig, provider: ProviderType = "auto") -> BaseVoiceProvider:
        candidates = {
            "google": lambda: GoogleCloudTTSProvider(api_key=ai.google_cloud_api_key if ai.has_google_cloud else None),
            "gemini": lambda: GeminiTTSProvider(api_key=ai.gemini_api_key if ai.has_gemini else None),
            "edge": EdgeTTSProvider,
        }

        if provider == "auto":
            for name in ["google", "gemini"]:
                p = candidates[name]()
                if p.is_available:
                    return p
            return EdgeTTSProvider()

        if provider not in candidates:
            logger.warning(f"Unknown voice provider '{provider}', using edge")
            return EdgeTTSProvider()
        return candidates[provider]()

    @classmethod
    def get_with_fallback(cls, ai: AIConfig, provider: ProviderType = "auto") -> BaseVoiceProvider:
        primary = cls.create(ai, provider)
        if isinstance(primary, EdgeTTSProvider):
            return primary
        return _FallbackVoiceProvider(primary)


class _FallbackVoiceProvider(BaseVoiceProvider):
    """Wrapper that falls back to edge-tts when the primary backend fails."""

    def __init__(self, primary: BaseVoiceProvider):
        self._primary = primary
        self._fallback = EdgeTTSProvider()

    @property
    def name(self) -> str:
        return f"{self._primary.name}+fallback"

    @property
    def is_available(self) -> bool:
        return True

    async def synthesize(self, text: str, voice: str) -> SynthesizedAudio:
        if self._primary.is_available:
            try:
                return await self._primary.synthesize(text, voice)
            except ProviderError as e:
                logger.warning(f"[VOICE] {self._primary.name} failed, falling back to edge-tts: {e}")
        return await self._fallback.synthesize(text, voice)


def get_voice_provider(ai: AIConfig, provider: ProviderType = "auto") -> BaseVoiceProvider:
    """Get a voice provider with automatic fallback to edge-tts."""
    return VoiceProviderFactory.get_with_fallback(ai, provider)
