"""
Generation endpoints - one per pipeline stage.

Each endpoint is stateless: the client carries the project id and artifact
locators from one call to the next.
"""
import logging

from fastapi import APIRouter, Depends

from videgen.exceptions import ValidationError
from videgen.services import Pipeline
from videgen.storage import validate_project_id

from ..dependencies import get_pipeline
from ..schemas import (
    DEFAULT_DURATION,
    AudioResponse,
    GenerateAudioRequest,
    GenerateScriptRequest,
    GenerateVideoRequest,
    ImagesResponse,
    RecommendImagesRequest,
    ScriptResponse,
    TimedAssetSchema,
    VideoResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Generation"])


@router.post("/generate-script", response_model=ScriptResponse)
async def generate_script(
    request: GenerateScriptRequest,
    pipeline: Pipeline = Depends(get_pipeline),
):
    """Write a narration script for a topic."""
    script = await pipeline.script_service.generate_script(
        request.topic,
        request.language,
        request.model,
    )
    return ScriptResponse(script=script)


@router.post("/generate-audio", response_model=AudioResponse)
async def generate_audio(
    request: GenerateAudioRequest,
    pipeline: Pipeline = Depends(get_pipeline),
):
    """Synthesize narration audio; opens a new project."""
    audio = await pipeline.audio_service.generate_audio(request.script, request.voice)
    return AudioResponse(
        audio_url=audio.reference,
        project_id=audio.project_id,
        duration=audio.duration,
    )


@router.post("/recommend-images", response_model=ImagesResponse)
async def recommend_images(
    request: RecommendImagesRequest,
    pipeline: Pipeline = Depends(get_pipeline),
):
    """Build the timed image list for a narration."""
    if not (request.script or "").strip():
        raise ValidationError("Script is required")
    if not request.project_id:
        raise ValidationError("Project ID is required")
    validate_project_id(request.project_id)

    images = await pipeline.timeline_service.recommend_images(
        request.script,
        DEFAULT_DURATION if request.duration is None else request.duration,
        request.project_id,
    )
    return ImagesResponse(images=[TimedAssetSchema.from_asset(asset) for asset in images])


@router.post("/generate-video", response_model=VideoResponse)
async def generate_video(
    request: GenerateVideoRequest,
    pipeline: Pipeline = Depends(get_pipeline),
):
    """Compose the final video from audio and the image timeline."""
    if not request.audio_url or not request.images:
        raise ValidationError("Audio URL and images are required")

    video_url = await pipeline.assembly_service.generate_video(
        request.audio_url,
        [image.to_asset() for image in request.images],
    )
    return VideoResponse(video_url=video_url)
