"""
Application Configuration - Environment Variable Management.
Loads and validates configuration from .env file.

Stage code never reads the environment: everything it needs is carried by
the AppConfig built here at startup and passed into the service constructors.
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from project root
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"

if ENV_FILE.exists():
    load_dotenv(ENV_FILE)
    logger.info(f"Loaded environment from {ENV_FILE}")

DEFAULT_MODEL = "gemini-2.0-flash-exp"
DEFAULT_VOICE = "en-US-Neural2-J"
PLACEHOLDER_VIDEO_URL = (
    "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4"
)
PLACEHOLDER_IMAGE_TEMPLATE = "https://via.placeholder.com/1920x1080/4F46E5/FFFFFF?text={query}"


def _is_configured(key: Optional[str]) -> bool:
    return bool(key and not key.startswith("PASTE_"))


@dataclass
class AIConfig:
    """Backend credentials and provider selection."""
    openai_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None  # Gemini text, Gemini TTS
    google_cloud_api_key: Optional[str] = None  # Cloud Text-to-Speech
    unsplash_access_key: Optional[str] = None
    voice_provider: str = "auto"  # auto, google, gemini, edge
    image_provider: str = "auto"  # auto, unsplash, dalle
    video_provider: str = "mock"  # mock, moviepy

    @property
    def has_openai(self) -> bool:
        return _is_configured(self.openai_api_key)

    @property
    def has_gemini(self) -> bool:
        return _is_configured(self.gemini_api_key)

    @property
    def has_google_cloud(self) -> bool:
        return _is_configured(self.google_cloud_api_key)

    @property
    def has_unsplash(self) -> bool:
        return _is_configured(self.unsplash_access_key)

    @property
    def has_any_llm(self) -> bool:
        return self.has_openai or self.has_gemini


@dataclass
class PathsConfig:
    """File system paths configuration."""
    temp_dir: Path

    @classmethod
    def detect(cls) -> "PathsConfig":
        """Resolve the artifact root, creating it if needed."""
        temp_dir = Path(os.getenv("TEMP_DIR", str(PROJECT_ROOT / "data" / "temp")))
        temp_dir.mkdir(parents=True, exist_ok=True)
        return cls(temp_dir=temp_dir)


@dataclass
class PipelineConfig:
    """Stage tuning shared by every request."""
    default_model: str = DEFAULT_MODEL
    concept_model: str = DEFAULT_MODEL
    default_voice: str = DEFAULT_VOICE
    words_per_minute: int = 150
    pacing_delay: float = 0.1  # seconds between image backend calls
    backend_timeout: float = 120.0  # seconds per backend call
    placeholder_video_url: str = PLACEHOLDER_VIDEO_URL
    placeholder_image_template: str = PLACEHOLDER_IMAGE_TEMPLATE
    video_resolution: str = "1920x1080"
    video_fps: int = 30
    url_prefix: str = "/temp"


@dataclass
class AppConfig:
    """Main Application Configuration."""
    ai: AIConfig
    paths: PathsConfig
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    port: int = 3000
    debug: bool = False

    def validate(self) -> dict:
        """Validate configuration and return status."""
        return {
            "ai": {
                "openai_configured": self.ai.has_openai,
                "gemini_configured": self.ai.has_gemini,
                "google_cloud_tts_configured": self.ai.has_google_cloud,
                "unsplash_configured": self.ai.has_unsplash,
                "any_llm_available": self.ai.has_any_llm,
            },
            "providers": {
                "voice": self.ai.voice_provider,
                "image": self.ai.image_provider,
                "video": self.ai.video_provider,
            },
            "temp_dir": str(self.paths.temp_dir),
        }

    def log_status(self):
        """Log configuration status (without exposing keys)."""
        status = self.validate()

        logger.info("=" * 50)
        logger.info("Configuration Status:")
        logger.info(f"  OpenAI API: {'OK' if status['ai']['openai_configured'] else 'NOT CONFIGURED'}")
        logger.info(f"  Gemini API: {'OK' if status['ai']['gemini_configured'] else 'NOT CONFIGURED'}")
        logger.info(f"  Cloud TTS API: {'OK' if status['ai']['google_cloud_tts_configured'] else 'NOT CONFIGURED'}")
        logger.info(f"  Unsplash API: {'OK' if status['ai']['unsplash_configured'] else 'NOT CONFIGURED'}")
        logger.info(f"  Voice provider: {self.ai.voice_provider}")
        logger.info(f"  Image provider: {self.ai.image_provider}")
        logger.info(f"  Video provider: {self.ai.video_provider}")
        logger.info(f"  Temp Dir: {self.paths.temp_dir}")
        logger.info("=" * 50)

        if not status['ai']['any_llm_available']:
            logger.warning("No LLM configured - script generation will fail")


def load_config() -> AppConfig:
    """Load configuration from environment variables."""
    ai_config = AIConfig(
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        gemini_api_key=os.getenv("GOOGLE_GEMINI_API_KEY"),
        google_cloud_api_key=os.getenv("GOOGLE_CLOUD_API_KEY"),
        unsplash_access_key=os.getenv("UNSPLASH_ACCESS_KEY"),
        voice_provider=os.getenv("VOICE_PROVIDER", "auto"),
        image_provider=os.getenv("IMAGE_PROVIDER", "auto"),
        video_provider=os.getenv("VIDEO_PROVIDER", "mock"),
    )

    default_model = os.getenv("DEFAULT_MODEL", DEFAULT_MODEL)
    pipeline_config = PipelineConfig(
        default_model=default_model,
        concept_model=os.getenv("CONCEPT_MODEL", default_model),
        default_voice=os.getenv("DEFAULT_VOICE", DEFAULT_VOICE),
        pacing_delay=float(os.getenv("PACING_DELAY_SECONDS", "0.1")),
        backend_timeout=float(os.getenv("BACKEND_TIMEOUT_SECONDS", "120")),
        placeholder_video_url=os.getenv("PLACEHOLDER_VIDEO_URL", PLACEHOLDER_VIDEO_URL),
    )

    return AppConfig(
        ai=ai_config,
        paths=PathsConfig.detect(),
        pipeline=pipeline_config,
        port=int(os.getenv("PORT", "3000")),
        debug=os.getenv("DEBUG", "false").lower() == "true",
    )
