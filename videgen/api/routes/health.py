"""
Health check endpoints.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from videgen.config import AppConfig

from ..dependencies import get_config
from ..schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Liveness check. Does not contact any backend.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))


@router.get(
    "/health/config",
    status_code=status.HTTP_200_OK,
    summary="Configuration Status",
    description="Check API key configuration status (does not expose actual keys).",
)
async def config_status(config: AppConfig = Depends(get_config)) -> dict:
    """
    Configuration status endpoint.
    Returns which backends are configured without exposing sensitive keys.
    """
    status_info = config.validate()
    ai = status_info["ai"]

    notes = []
    if not ai["any_llm_available"]:
        notes.append("No LLM configured: set GOOGLE_GEMINI_API_KEY or OPENAI_API_KEY")
    if not ai["unsplash_configured"] and not ai["openai_configured"]:
        notes.append("No image source configured: every image will be a placeholder")
    if config.ai.video_provider == "mock":
        notes.append("Video assembly is mocked: set VIDEO_PROVIDER=moviepy to render")

    return {
        "status": "configured" if ai["any_llm_available"] else "partial",
        "apis": {
            "openai": "configured" if ai["openai_configured"] else "missing",
            "gemini": "configured" if ai["gemini_configured"] else "missing",
            "google_cloud_tts": "configured" if ai["google_cloud_tts_configured"] else "not_set",
            "unsplash": "configured" if ai["unsplash_configured"] else "not_set",
        },
        "providers": status_info["providers"],
        "capabilities": {
            "script_generation": ai["any_llm_available"],
            "audio_generation": True,  # edge-tts needs no key
            "image_search": ai["unsplash_configured"] or ai["openai_configured"],
            "video_rendering": config.ai.video_provider == "moviepy",
        },
        "notes": notes,
    }
