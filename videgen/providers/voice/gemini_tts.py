"""
Gemini speech generation voice provider.

Gemini returns bare 16-bit PCM (audio/L16;codec=pcm;rate=24000), which the
audio stage wraps in a WAV header before storing.
"""
import base64
import logging
from typing import Optional

import httpx

from .base import BaseVoiceProvider, SynthesizedAudio
from ..exceptions import ProviderError, ProviderResponseError, ProviderUnavailable

logger = logging.getLogger(__name__)


class GeminiTTSProvider(BaseVoiceProvider):
    """Gemini TTS via generateContent with an AUDIO response modality."""

    GOOGLE_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    MODEL = "gemini-2.5-flash-preview-tts"
    DEFAULT_VOICE = "Kore"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = MODEL,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._api_key = api_key or ""
        self._model = model
        self.client = client or httpx.AsyncClient(timeout=120.0)

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def is_available(self) -> bool:
        return bool(self._api_key)

    def _voice_name(self, voice: str) -> str:
        # Cloud TTS style ids (en-US-Neural2-J) mean nothing to Gemini
        if not voice or "-" in voice:
            return self.DEFAULT_VOICE
        return voice

    async def synthesize(self, text: str, voice: str) -> SynthesizedAudio:
        if not self.is_available:
            raise ProviderUnavailable(self.name, "Missing GOOGLE_GEMINI_API_KEY")

        payload = {
            "contents": [{"parts": [{"text": text}]}],
            "generationConfig": {
                "responseModalities": ["AUDIO"],
                "speechConfig": {
                    "voiceConfig": {
                        "prebuiltVoiceConfig": {"voiceName": self._voice_name(voice)}
                    }
                },
            },
        }

        try:
            response = await self.client.post(
                f"{self.GOOGLE_API_URL}/{self._model}:generateContent",
                params={"key": self._api_key},
                json=payload,
            )
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"Request failed: {e}") from e

        if response.status_code != 200:
            raise ProviderResponseError(self.name, response.text[:500], response.status_code)

        candidates = response.json().get("candidates", [])
        parts = candidates[0].get("content", {}).get("parts", []) if candidates else []

        chunks = []
        mime_type = "audio/L16;codec=pcm;rate=24000"
        for part in parts:
            inline = part.get("inlineData")
            if inline and inline.get("data"):
                chunks.append(base64.b64decode(inline["data"]))
                mime_type = inline.get("mimeType", mime_type)

        if not chunks:
            raise ProviderResponseError(self.name, "No audio data in response")

        return SynthesizedAudio(data=b"".join(chunks), mime_type=mime_type)
