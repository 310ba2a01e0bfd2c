"""
Assembly Service - final video from narration audio and the image timeline.

Without a configured compositor the stage records what it would have
rendered (audio, ordered images, output format) next to the project's other
artifacts and answers with a well-known sample video, so the pipeline always
completes.
"""
import logging
import time
from datetime import datetime, timezone
from typing import List, Optional

from videgen.config import PipelineConfig
from videgen.exceptions import ValidationError
from videgen.providers.video import BaseVideoProvider
from videgen.storage import ArtifactStore
from videgen.models import TimedAsset

from .backend import call_backend

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to generate video"
MOCK_NOTE = "Mock video: no compositor configured. Set VIDEO_PROVIDER=moviepy to render."


class AssemblyService:
    """Delegates to the video provider, or records intent when there is none."""

    def __init__(
        self,
        video_provider: Optional[BaseVideoProvider],
        store: ArtifactStore,
        config: PipelineConfig,
    ):
        self.video_provider = video_provider
        self.store = store
        self.config = config

    async def generate_video(self, audio_url: str, images: List[TimedAsset]) -> str:
        """
        Compose the final video.

        Raises:
            ValidationError: missing audio reference or empty image list
            GenerationError: the compositor failed
            StorageError: degraded mode could not write its record
        """
        if not audio_url or not audio_url.strip():
            raise ValidationError("Audio URL is required")
        if not images:
            raise ValidationError("Images are required")

        ordered = sorted(images, key=lambda asset: asset.order)

        if self.video_provider is None or not self.video_provider.is_available:
            return await self._record_composition(audio_url, ordered)

        logger.info(f"[ASSEMBLY] Composing {len(ordered)} images with {self.video_provider.name}")
        video_url = await call_backend(
            self.video_provider.compose(audio_url, ordered),
            self.config.backend_timeout,
            "ASSEMBLY",
            FAILURE_MESSAGE,
        )
        logger.info(f"[ASSEMBLY] Video ready: {video_url}")
        return video_url

    async def _record_composition(self, audio_url: str, images: List[TimedAsset]) -> str:
        project_id = self.store.project_id_from_locator(audio_url) or self.store.allocate_project()
        record = {
            "audioUrl": audio_url,
            "images": [asset.to_dict() for asset in images],
            "resolution": self.config.video_resolution,
            "fps": self.config.video_fps,
            "generatedAt": datetime.now(timezone.utc).isoformat(),
            "note": MOCK_NOTE,
        }
        reference = await self.store.save_json(project_id, f"video-{int(time.time() * 1000)}.json", record)

        logger.info(f"[ASSEMBLY] No compositor - recorded composition at {reference}")
        return self.config.placeholder_video_url
