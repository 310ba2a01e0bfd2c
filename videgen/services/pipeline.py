"""
Pipeline Orchestrator.

Script -> Audio -> Timeline -> Assembly, strictly in order. The project id
and duration produced by the audio stage are handed to the timeline stage,
and the audio reference plus timeline to assembly. Any stage error
propagates and nothing downstream runs.
"""
import logging
from typing import Optional, Union

from videgen.config import AppConfig
from videgen.providers import (
    get_image_provider,
    get_text_provider,
    get_video_provider,
    get_voice_provider,
)
from videgen.storage import ArtifactStore
from videgen.models import Language, PipelineResult

from .assembly_service import AssemblyService
from .audio_service import AudioService
from .script_service import ScriptService
from .timeline_service import TimelineService

logger = logging.getLogger(__name__)


class Pipeline:
    """Holds the four stages and runs them end to end."""

    def __init__(
        self,
        script_service: ScriptService,
        audio_service: AudioService,
        timeline_service: TimelineService,
        assembly_service: AssemblyService,
    ):
        self.script_service = script_service
        self.audio_service = audio_service
        self.timeline_service = timeline_service
        self.assembly_service = assembly_service

    async def run(
        self,
        topic: str,
        language: Union[str, Language] = Language.ENGLISH,
        model: Optional[str] = None,
        voice: Optional[str] = None,
    ) -> PipelineResult:
        logger.info("=" * 60)
        logger.info(f"[PIPELINE] Starting: {topic}")
        logger.info("=" * 60)

        logger.info("[PIPELINE] 1/4 script")
        script = await self.script_service.generate_script(topic, language, model)

        logger.info("[PIPELINE] 2/4 audio")
        audio = await self.audio_service.generate_audio(script, voice)

        logger.info(f"[PIPELINE] 3/4 images (project {audio.project_id}, {audio.duration}s)")
        images = await self.timeline_service.recommend_images(script, audio.duration, audio.project_id)

        logger.info("[PIPELINE] 4/4 video")
        video_url = await self.assembly_service.generate_video(audio.reference, images)

        logger.info(f"[PIPELINE] Done: {video_url}")
        return PipelineResult(
            topic=topic.strip(),
            script=script,
            audio=audio,
            images=images,
            video_url=video_url,
        )


def build_pipeline(config: AppConfig, store: Optional[ArtifactStore] = None) -> Pipeline:
    """Wire the stages to the providers selected by configuration."""
    store = store or ArtifactStore(config.paths.temp_dir, url_prefix=config.pipeline.url_prefix)
    text_provider = get_text_provider(config.ai)

    return Pipeline(
        script_service=ScriptService(text_provider, config.pipeline),
        audio_service=AudioService(
            get_voice_provider(config.ai, config.ai.voice_provider),
            store,
            config.pipeline,
        ),
        timeline_service=TimelineService(
            text_provider,
            get_image_provider(config.ai, config.ai.image_provider),
            store,
            config.pipeline,
        ),
        assembly_service=AssemblyService(
            get_video_provider(config.ai, config.pipeline, store),
            store,
            config.pipeline,
        ),
    )
