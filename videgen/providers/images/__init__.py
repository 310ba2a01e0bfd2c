"""
Image providers.
"""
from .base import BaseImageProvider, ImageData
from .dalle import DalleImageProvider
from .unsplash import UnsplashImageProvider
from .factory import ImageProviderFactory, get_image_provider

__all__ = [
    "BaseImageProvider",
    "ImageData",
    "DalleImageProvider",
    "UnsplashImageProvider",
    "ImageProviderFactory",
    "get_image_provider",
]
