"""
Google Gemini text provider (generativelanguage REST API, SSE streaming).
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx

from .base import BaseTextProvider
from ..exceptions import ProviderError, ProviderResponseError, ProviderUnavailable

logger = logging.getLogger(__name__)


def _chunk_text(payload: Dict[str, Any]) -> str:
    """Concatenate the text parts of one streamed response chunk."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = candidates[0].get("content", {}).get("parts", [])
    return "".join(part.get("text", "") for part in parts)


class GeminiTextProvider(BaseTextProvider):
    """Gemini generateContent over server-sent events."""

    GOOGLE_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(
        self,
        api_key: Optional[str] = None,
        temperature: float = 0.7,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._api_key = api_key or ""
        self._temperature = temperature
        self.client = client or httpx.AsyncClient(timeout=120.0)

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def is_available(self) -> bool:
        return bool(self._api_key)

    def supports(self, model: str) -> bool:
        return model.startswith("gemini-")

    async def generate(self, prompt: str, model: str, language: str = "english") -> str:
        if not self.is_available:
            raise ProviderUnavailable(self.name, "Missing GOOGLE_GEMINI_API_KEY")

        url = f"{self.GOOGLE_API_URL}/{model}:streamGenerateContent"
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "systemInstruction": {
                "parts": [{"text": f"Always answer in {language.capitalize()}."}]
            },
            "generationConfig": {"temperature": self._temperature},
        }

        parts = []
        try:
            async with self.client.stream(
                "POST",
                url,
                params={"alt": "sse", "key": self._api_key},
                json=payload,
            ) as response:
                if response.status_code != 200:
                    body = (await response.aread()).decode("utf-8", errors="replace")
                    raise ProviderResponseError(self.name, body[:500], response.status_code)

                async for line in response.aiter_lines():
                    if not line.startswith("data:"):
                        continue
                    data = line[len("data:"):].strip()
                    if not data:
                        continue
                    try:
                        parts.append(_chunk_text(json.loads(data)))
                    except json.JSONDecodeError:
                        logger.warning(f"[GEMINI] Skipping malformed stream chunk: {data[:100]}")
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"Request failed: {e}") from e

        text = "".join(parts).strip()
        logger.debug(f"[GEMINI] {model} returned {len(text)} chars")
        return text
