"""
Timeline Service - timed visual assets for a narration.

Step A asks the LLM for 4-8 visual concepts, Step B resolves one image per
concept in order. The narration is split into equal spans, one per concept.
A failed image never fails the timeline: that slot gets a placeholder that
still carries its prompt.
"""
import asyncio
import math
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple
from urllib.parse import quote

from videgen.config import PipelineConfig
from videgen.exceptions import GenerationError, StorageError, ValidationError
from videgen.providers.images import BaseImageProvider, ImageData
from videgen.providers.text import BaseTextProvider
from videgen.storage import ArtifactStore
from videgen.models import AssetKind, Language, TimedAsset

from .backend import call_backend
from .parsing import parse_string_list
from .prompts import build_concepts_prompt

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to recommend images"

MIN_ASSETS = 4
MAX_ASSETS = 8
FALLBACK_CONCEPTS = ("education", "learning", "knowledge", "study")

IMAGE_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


def normalize_concepts(concepts: Optional[Sequence[str]]) -> List[str]:
    """Clamp the concept list into [MIN_ASSETS, MAX_ASSETS]."""
    items = [c.strip() for c in (concepts or []) if c and c.strip()][:MAX_ASSETS]
    pad = 0
    while len(items) < MIN_ASSETS:
        items.append(FALLBACK_CONCEPTS[pad % len(FALLBACK_CONCEPTS)])
        pad += 1
    return items


def allocate_spans(count: int, total_duration: float) -> List[Tuple[float, float]]:
    """Equal, contiguous (start_offset, span) pairs covering [0, total_duration]."""
    span = total_duration / count
    return [(index * span, span) for index in range(count)]


def image_extension(mime_type: str) -> str:
    return IMAGE_EXTENSIONS.get((mime_type or "").split(";")[0].strip().lower(), ".jpg")


class TimelineService:
    """Extracts visual concepts and resolves them into stored, timed images."""

    def __init__(
        self,
        text_provider: BaseTextProvider,
        image_provider: BaseImageProvider,
        store: ArtifactStore,
        config: PipelineConfig,
    ):
        self.text_provider = text_provider
        self.image_provider = image_provider
        self.store = store
        self.config = config

    async def recommend_images(self, script: str, duration: float, project_id: str) -> List[TimedAsset]:
        """
        Build the image timeline for a narration.

        Args:
            script: Narration text
            duration: Narration length in seconds (from the audio stage)
            project_id: Project opened by the audio stage

        Raises:
            ValidationError: empty script, bad duration or project id
            GenerationError: the concept extraction call failed
            StorageError: the project directory could not be created
        """
        script = (script or "").strip()
        if not script:
            raise ValidationError("Script is required")
        if not project_id:
            raise ValidationError("Project ID is required")
        if duration is None or not math.isfinite(duration) or duration <= 0:
            raise ValidationError("Duration must be a finite number greater than zero")

        self.store.ensure_project_directory(project_id)

        concepts = await self.extract_concepts(script)
        spans = allocate_spans(len(concepts), float(duration))

        logger.info(
            f"[TIMELINE] {len(concepts)} concepts over {duration}s "
            f"({spans[0][1]:.2f}s each) for project {project_id}"
        )

        assets = []
        for index, (concept, (start_offset, span)) in enumerate(zip(concepts, spans)):
            await asyncio.sleep(self.config.pacing_delay)
            asset = await self._resolve_asset(project_id, concept, index + 1, start_offset, span)
            assets.append(asset)

        placeholders = sum(1 for a in assets if a.is_placeholder)
        if placeholders:
            logger.warning(f"[TIMELINE] {placeholders}/{len(assets)} images fell back to placeholders")
        return assets

    async def extract_concepts(self, script: str) -> List[str]:
        """Ask the LLM for visual concepts; unparseable output uses the generic list."""
        text = await call_backend(
            self.text_provider.generate(
                build_concepts_prompt(script, MIN_ASSETS, MAX_ASSETS),
                self.config.concept_model,
                Language.ENGLISH.value,
            ),
            self.config.backend_timeout,
            "TIMELINE",
            FAILURE_MESSAGE,
        )

        concepts = parse_string_list(text or "")
        if concepts is None:
            logger.warning(f"[TIMELINE] Could not parse concepts, using defaults: {(text or '')[:100]!r}")
            concepts = list(FALLBACK_CONCEPTS)
        elif not MIN_ASSETS <= len(concepts) <= MAX_ASSETS:
            logger.info(f"[TIMELINE] Got {len(concepts)} concepts, normalizing to {MIN_ASSETS}-{MAX_ASSETS}")

        return normalize_concepts(concepts)

    async def _resolve_asset(
        self,
        project_id: str,
        concept: str,
        order: int,
        start_offset: float,
        span: float,
    ) -> TimedAsset:
        try:
            image: ImageData = await call_backend(
                self.image_provider.fetch(concept),
                self.config.backend_timeout,
                "TIMELINE",
                FAILURE_MESSAGE,
            )
            if image is None or not image.data:
                raise GenerationError(FAILURE_MESSAGE, detail="empty image")

            filename = f"image-{order:02d}{image_extension(image.mime_type)}"
            reference = await self.store.save(project_id, filename, image.data)
            return TimedAsset(
                reference=reference,
                prompt=concept,
                start_offset=start_offset,
                span=span,
                order=order,
                kind=AssetKind.RESOLVED,
            )
        except (GenerationError, StorageError) as e:
            logger.warning(f"[TIMELINE] Image {order} '{concept}' failed: {e.detail or e.message}")
            return await self._placeholder(project_id, concept, order, start_offset, span, e)

    async def _placeholder(
        self,
        project_id: str,
        concept: str,
        order: int,
        start_offset: float,
        span: float,
        error: Exception,
    ) -> TimedAsset:
        reference = self.config.placeholder_image_template.format(query=quote(concept))
        marker = {
            "order": order,
            "prompt": concept,
            "placeholder": reference,
            "reason": getattr(error, "detail", None) or str(error),
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }
        try:
            await self.store.save_json(project_id, f"image-{order:02d}.placeholder.json", marker)
        except StorageError as e:
            logger.warning(f"[TIMELINE] Could not write placeholder marker {order}: {e.detail or e.message}")

        return TimedAsset(
            reference=reference,
            prompt=concept,
            start_offset=start_offset,
            span=span,
            order=order,
            kind=AssetKind.PLACEHOLDER,
        )
