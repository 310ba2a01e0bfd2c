"""
Unsplash image provider.
"""
import logging
from typing import Optional

import httpx

from .base import BaseImageProvider, ImageData
from ..exceptions import ProviderError, ProviderResponseError, ProviderUnavailable

logger = logging.getLogger(__name__)


class UnsplashImageProvider(BaseImageProvider):
    """Random landscape photo for a query, downloaded at the 'regular' size."""

    API_URL = "https://api.unsplash.com/photos/random"

    def __init__(
        self,
        access_key: Optional[str] = None,
        orientation: str = "landscape",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._access_key = access_key or ""
        self._orientation = orientation
        self.client = client or httpx.AsyncClient(timeout=30.0, follow_redirects=True)

    @property
    def name(self) -> str:
        return "unsplash"

    @property
    def is_available(self) -> bool:
        return bool(self._access_key)

    async def fetch(self, query: str) -> ImageData:
        if not self.is_available:
            raise ProviderUnavailable(self.name, "Missing UNSPLASH_ACCESS_KEY")

        try:
            response = await self.client.get(
                self.API_URL,
                params={"query": query, "orientation": self._orientation},
                headers={"Authorization": f"Client-ID {self._access_key}"},
            )
            if response.status_code != 200:
                raise ProviderResponseError(self.name, response.text[:200], response.status_code)

            image_url = (response.json().get("urls") or {}).get("regular")
            if not image_url:
                raise ProviderResponseError(self.name, f"No image url for '{query}'")

            download = await self.client.get(image_url)
            if download.status_code != 200:
                raise ProviderResponseError(self.name, "Image download failed", download.status_code)
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"Request failed: {e}") from e

        mime_type = download.headers.get("content-type", "image/jpeg").split(";")[0].strip()
        logger.debug(f"[UNSPLASH] '{query}' -> {len(download.content)} bytes ({mime_type})")
        return ImageData(data=download.content, mime_type=mime_type)
