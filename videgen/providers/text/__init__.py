"""
Text-generation providers.
"""
from .base import BaseTextProvider
from .gemini import GeminiTextProvider
from .openai_chat import OpenAIChatProvider
from .factory import RoutingTextProvider, get_text_provider

__all__ = [
    "BaseTextProvider",
    "GeminiTextProvider",
    "OpenAIChatProvider",
    "RoutingTextProvider",
    "get_text_provider",
]
