"""
MoviePy slideshow compositor.

Renders each timeline entry for its span over the narration track and writes
video.mp4 into the audio's project directory.
"""
import asyncio
import logging
from pathlib import Path
from typing import List, Tuple

from videgen.models import TimedAsset
from videgen.storage import ArtifactStore

from .base import BaseVideoProvider
from ..exceptions import ProviderError

logger = logging.getLogger(__name__)

PLACEHOLDER_COLOR = (79, 70, 229)


def parse_resolution(resolution: str) -> Tuple[int, int]:
    width, height = resolution.lower().split("x")
    return int(width), int(height)


class MoviePyVideoProvider(BaseVideoProvider):
    """Local compositor built on MoviePy / FFmpeg."""

    OUTPUT_FILENAME = "video.mp4"

    def __init__(self, store: ArtifactStore, resolution: str = "1920x1080", fps: int = 30):
        self._store = store
        self._size = parse_resolution(resolution)
        self._fps = fps

    @property
    def name(self) -> str:
        return "moviepy"

    @property
    def is_available(self) -> bool:
        return True

    async def compose(self, audio_url: str, images: List[TimedAsset]) -> str:
        audio_path = self._store.resolve(audio_url)
        project_id = self._store.project_id_from_locator(audio_url)
        if audio_path is None or project_id is None:
            raise ProviderError(self.name, f"Audio is not a stored artifact: {audio_url}")

        output_path = self._store.path_for(project_id, self.OUTPUT_FILENAME)
        segments = [(self._store.resolve(asset.reference), asset.span) for asset in images]

        logger.info(f"[MOVIEPY] Rendering {len(segments)} segments for project {project_id}")
        await asyncio.to_thread(self._render, audio_path, segments, output_path)
        return self._store.locator(project_id, self.OUTPUT_FILENAME)

    def _render(self, audio_path: Path, segments: List[Tuple[Path, float]], output_path: Path) -> None:
        from moviepy import AudioFileClip, ColorClip, ImageClip, concatenate_videoclips

        clips = []
        for image_path, span in segments:
            if image_path is None:
                clip = ColorClip(size=self._size, color=PLACEHOLDER_COLOR)
            else:
                clip = ImageClip(str(image_path)).resized(self._size)
            clips.append(clip.with_duration(span))

        audio = AudioFileClip(str(audio_path))
        video = concatenate_videoclips(clips, method="compose")
        if video.duration > audio.duration:
            video = video.subclipped(0, audio.duration)
        video = video.with_audio(audio)

        try:
            video.write_videofile(
                str(output_path),
                fps=self._fps,
                codec="libx264",
                audio_codec="aac",
                preset="medium",
                logger=None,
            )
        finally:
            video.close()
            audio.close()
            for clip in clips:
                clip.close()

        logger.info(f"[MOVIEPY] Video written to {output_path}")
