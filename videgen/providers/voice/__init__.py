"""
Voice providers.
"""
from .base import BaseVoiceProvider, SynthesizedAudio
from .edge import EdgeTTSProvider
from .gemini_tts import GeminiTTSProvider
from .google_cloud import GoogleCloudTTSProvider
from .factory import VoiceProviderFactory, get_voice_provider

__all__ = [
    "BaseVoiceProvider",
    "SynthesizedAudio",
    "EdgeTTSProvider",
    "GeminiTTSProvider",
    "GoogleCloudTTSProvider",
    "VoiceProviderFactory",
    "get_voice_provider",
]
