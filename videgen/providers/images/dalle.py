"""
DALL-E 3 image provider - generates an image per visual concept.
"""
import base64
import logging
from typing import Optional

import httpx

from .base import BaseImageProvider, ImageData
from ..exceptions import ProviderError, ProviderResponseError, ProviderUnavailable

logger = logging.getLogger(__name__)


class DalleImageProvider(BaseImageProvider):
    """OpenAI images/generations with inline base64 output."""

    OPENAI_API_URL = "https://api.openai.com/v1/images/generations"

    def __init__(
        self,
        api_key: Optional[str] = None,
        size: str = "1792x1024",
        quality: str = "standard",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._api_key = api_key or ""
        self._size = size
        self._quality = quality
        self.client = client or httpx.AsyncClient(timeout=120.0)

    @property
    def name(self) -> str:
        return "dalle"

    @property
    def is_available(self) -> bool:
        return bool(self._api_key)

    async def fetch(self, query: str) -> ImageData:
        if not self.is_available:
            raise ProviderUnavailable(self.name, "Missing OPENAI_API_KEY")

        payload = {
            "model": "dall-e-3",
            "prompt": f"Educational explainer video background: {query}. Clean, photorealistic, no text.",
            "n": 1,
            "size": self._size,
            "quality": self._quality,
            "response_format": "b64_json",
        }

        try:
            response = await self.client.post(
                self.OPENAI_API_URL,
                headers={"Authorization": f"Bearer {self._api_key}"},
                json=payload,
            )
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"Request failed: {e}") from e

        if response.status_code != 200:
            raise ProviderResponseError(self.name, response.text[:500], response.status_code)

        data = response.json().get("data") or []
        if not data or not data[0].get("b64_json"):
            raise ProviderResponseError(self.name, "No image data in response")

        return ImageData(data=base64.b64decode(data[0]["b64_json"]), mime_type="image/png")
