"""
Video provider factory.
"""
import logging
from typing import Literal, Optional

from videgen.config import AIConfig, PipelineConfig
from videgen.storage import ArtifactStore

from .base import BaseVideoProvider
from .moviepy_compositor import MoviePyVideoProvider

logger = logging.getLogger(__name__)

ProviderType = Literal["mock", "moviepy"]


def get_video_provider(
    ai: AIConfig,
    pipeline: PipelineConfig,
    store: ArtifactStore,
) -> Optional[BaseVideoProvider]:
    """
    Build the configured compositor.

    Returns None for "mock", which puts the assembly stage in its
    record-only mode.
    """
    if ai.video_provider == "moviepy":
        return MoviePyVideoProvider(
            store,
            resolution=pipeline.video_resolution,
            fps=pipeline.video_fps,
        )
    if ai.video_provider != "mock":
        logger.warning(f"Unknown video provider '{ai.video_provider}', using mock")
    return None
