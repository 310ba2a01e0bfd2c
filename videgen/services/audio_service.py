"""
Audio Service - narration audio for a script.

Each call opens a new project: the audio is the first artifact stored under
it and its project id is what the timeline and assembly stages build on.
"""
import logging
import math
from typing import Optional

from videgen.config import PipelineConfig
from videgen.exceptions import GenerationError, ValidationError
from videgen.providers.voice import BaseVoiceProvider
from videgen.storage import ArtifactStore
from videgen.models import AudioResult

from .audio_format import extension_for, pcm_format_from_mime, wrap_pcm_as_wav
from .backend import call_backend

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to generate audio"


def count_words(text: str) -> int:
    return len((text or "").split())


def estimate_duration(text: str, words_per_minute: int = 150) -> int:
    """Spoken length in whole seconds: ceil(words / wpm * 60)."""
    words = count_words(text)
    return (words * 60 + words_per_minute - 1) // words_per_minute


class AudioService:
    """Synthesizes, normalizes the container, and stores narration audio."""

    def __init__(self, voice_provider: BaseVoiceProvider, store: ArtifactStore, config: PipelineConfig):
        self.voice_provider = voice_provider
        self.store = store
        self.config = config

    async def generate_audio(self, script: str, voice: Optional[str] = None) -> AudioResult:
        """
        Render narration audio into a freshly allocated project.

        Raises:
            ValidationError: empty script
            GenerationError: backend failure or no audio bytes
            StorageError: project or file could not be written
        """
        script = (script or "").strip()
        if not script:
            raise ValidationError("Script is required")

        voice = (voice or "").strip() or self.config.default_voice
        logger.info(f"[AUDIO] Synthesizing {count_words(script)} words with voice {voice}")

        audio = await call_backend(
            self.voice_provider.synthesize(script, voice),
            self.config.backend_timeout,
            "AUDIO",
            FAILURE_MESSAGE,
        )

        if audio is None or not audio.data:
            logger.error("[AUDIO] Backend returned no audio bytes")
            raise GenerationError(FAILURE_MESSAGE, detail="no audio content received")

        data, mime_type = audio.data, audio.mime_type
        extension = extension_for(mime_type)
        if extension is None:
            fmt = pcm_format_from_mime(mime_type)
            logger.info(
                f"[AUDIO] Wrapping raw '{mime_type}' samples as WAV "
                f"({fmt.sample_rate} Hz, {fmt.channels} ch, {fmt.bits_per_sample} bit)"
            )
            data, mime_type, extension = wrap_pcm_as_wav(data, fmt), "audio/wav", ".wav"

        if audio.duration:
            duration = math.ceil(audio.duration)
        else:
            duration = estimate_duration(script, self.config.words_per_minute)

        project_id = self.store.allocate_project()
        filename = f"audio{extension}"
        reference = await self.store.save(project_id, filename, data)

        logger.info(f"[AUDIO] Stored {len(data)} bytes at {reference} ({duration}s)")
        return AudioResult(
            reference=reference,
            project_id=project_id,
            duration=duration,
            mime_type=mime_type,
            filename=filename,
        )
