"""
Video assembly providers.
"""
from .base import BaseVideoProvider
from .moviepy_compositor import MoviePyVideoProvider
from .factory import get_video_provider

__all__ = [
    "BaseVideoProvider",
    "MoviePyVideoProvider",
    "get_video_provider",
]
