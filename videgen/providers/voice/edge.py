"""
edge-tts voice provider. Free, no API key required.
"""
import logging

import edge_tts
from edge_tts.exceptions import EdgeTTSException

from .base import BaseVoiceProvider, SynthesizedAudio
from ..exceptions import ProviderError

logger = logging.getLogger(__name__)


class EdgeTTSProvider(BaseVoiceProvider):
    """Microsoft Edge neural voices, streamed and accumulated in memory."""

    DEFAULT_VOICE = "en-US-GuyNeural"

    def __init__(self, rate: str = "+0%"):
        self._rate = rate

    @property
    def name(self) -> str:
        return "edge"

    @property
    def is_available(self) -> bool:
        return True

    def _voice_name(self, voice: str) -> str:
        if voice and voice.endswith("Neural"):
            return voice
        return self.DEFAULT_VOICE

    async def synthesize(self, text: str, voice: str) -> SynthesizedAudio:
        communicate = edge_tts.Communicate(text, self._voice_name(voice), rate=self._rate)

        chunks = []
        try:
            async for chunk in communicate.stream():
                if chunk["type"] == "audio":
                    chunks.append(chunk["data"])
        except EdgeTTSException as e:
            raise ProviderError(self.name, str(e)) from e

        return SynthesizedAudio(data=b"".join(chunks), mime_type="audio/mpeg")
