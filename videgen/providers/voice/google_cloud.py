"""
Google Cloud Text-to-Speech voice provider.
"""
import base64
import logging
from typing import Optional

import httpx

from .base import BaseVoiceProvider, SynthesizedAudio
from ..exceptions import ProviderError, ProviderResponseError, ProviderUnavailable

logger = logging.getLogger(__name__)


def language_code_for(voice: str, default: str = "en-US") -> str:
    """Cloud TTS voice names start with their BCP-47 code: en-US-Neural2-J -> en-US."""
    parts = voice.split("-")
    if len(parts) >= 2 and len(parts[0]) in (2, 3) and len(parts[1]) in (2, 3):
        return f"{parts[0]}-{parts[1]}"
    return default


class GoogleCloudTTSProvider(BaseVoiceProvider):
    """Cloud TTS text:synthesize, MP3 output."""

    API_URL = "https://texttospeech.googleapis.com/v1/text:synthesize"

    def __init__(
        self,
        api_key: Optional[str] = None,
        speaking_rate: float = 1.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._api_key = api_key or ""
        self._speaking_rate = speaking_rate
        self.client = client or httpx.AsyncClient(timeout=120.0)

    @property
    def name(self) -> str:
        return "google"

    @property
    def is_available(self) -> bool:
        return bool(self._api_key)

    async def synthesize(self, text: str, voice: str) -> SynthesizedAudio:
        if not self.is_available:
            raise ProviderUnavailable(self.name, "Missing GOOGLE_CLOUD_API_KEY")

        payload = {
            "input": {"text": text},
            "voice": {"languageCode": language_code_for(voice), "name": voice},
            "audioConfig": {
                "audioEncoding": "MP3",
                "pitch": 0,
                "speakingRate": self._speaking_rate,
            },
        }

        try:
            response = await self.client.post(
                self.API_URL,
                params={"key": self._api_key},
                json=payload,
            )
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"Request failed: {e}") from e

        if response.status_code != 200:
            raise ProviderResponseError(self.name, response.text[:500], response.status_code)

        audio_content = response.json().get("audioContent")
        if not audio_content:
            raise ProviderResponseError(self.name, "No audio content received")

        return SynthesizedAudio(data=base64.b64decode(audio_content), mime_type="audio/mpeg")
