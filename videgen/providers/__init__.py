"""
Providers Layer.

Narrow adapters for the external collaborators the pipeline depends on:
- Text generation (OpenAI, Gemini)
- Voice/TTS (Google Cloud TTS, Gemini TTS, edge-tts)
- Images (Unsplash, DALL-E)
- Video assembly (MoviePy)
"""
from .exceptions import ProviderError, ProviderUnavailable, ProviderResponseError

from .text import (
    BaseTextProvider,
    GeminiTextProvider,
    OpenAIChatProvider,
    RoutingTextProvider,
    get_text_provider,
)

from .voice import (
    BaseVoiceProvider,
    SynthesizedAudio,
    EdgeTTSProvider,
    GeminiTTSProvider,
    GoogleCloudTTSProvider,
    VoiceProviderFactory,
    get_voice_provider,
)

from .images import (
    BaseImageProvider,
    ImageData,
    DalleImageProvider,
    UnsplashImageProvider,
    ImageProviderFactory,
    get_image_provider,
)

from .video import (
    BaseVideoProvider,
    MoviePyVideoProvider,
    get_video_provider,
)

__all__ = [
    # Exceptions
    "ProviderError",
    "ProviderUnavailable",
    "ProviderResponseError",

    # Text
    "BaseTextProvider",
    "GeminiTextProvider",
    "OpenAIChatProvider",
    "RoutingTextProvider",
    "get_text_provider",

    # Voice
    "BaseVoiceProvider",
    "SynthesizedAudio",
    "EdgeTTSProvider",
    "GeminiTTSProvider",
    "GoogleCloudTTSProvider",
    "VoiceProviderFactory",
    "get_voice_provider",

    # Images
    "BaseImageProvider",
    "ImageData",
    "DalleImageProvider",
    "UnsplashImageProvider",
    "ImageProviderFactory",
    "get_image_provider",

    # Video
    "BaseVideoProvider",
    "MoviePyVideoProvider",
    "get_video_provider",
]
