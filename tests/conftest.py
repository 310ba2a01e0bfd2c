"""
Pytest configuration and fixtures for videgen tests.
"""
import os
import tempfile
from pathlib import Path
from typing import List, Optional

import pytest

# Set test environment before importing app modules
os.environ.setdefault("TEMP_DIR", tempfile.mkdtemp(prefix="videgen-test-"))
os.environ["VIDEO_PROVIDER"] = "mock"
os.environ["DEBUG"] = "false"

from videgen.config import AIConfig, AppConfig, PathsConfig, PipelineConfig
from videgen.providers import (
    BaseImageProvider,
    BaseTextProvider,
    BaseVideoProvider,
    BaseVoiceProvider,
    ImageData,
    ProviderError,
    SynthesizedAudio,
)
from videgen.services import (
    AssemblyService,
    AudioService,
    Pipeline,
    ScriptService,
    TimelineService,
)
from videgen.storage import ArtifactStore

SAMPLE_SCRIPT = (
    "Plants make their own food. Sunlight hits the leaves, chlorophyll captures it, "
    "and water plus carbon dioxide become sugar and oxygen. That is photosynthesis."
)
SAMPLE_CONCEPTS = '["green leaf in sunlight", "chlorophyll close up", "plant roots in water", "oxygen bubbles"]'


# =============================================================================
# Fake providers
# =============================================================================

class FakeTextProvider(BaseTextProvider):
    """Answers script prompts with a fixed script and concept prompts with a JSON list."""

    def __init__(self, script: str = SAMPLE_SCRIPT, concepts: str = SAMPLE_CONCEPTS,
                 error: Optional[Exception] = None, concepts_error: Optional[Exception] = None):
        self.script = script
        self.concepts = concepts
        self.error = error
        self.concepts_error = concepts_error
        self.calls: List[dict] = []

    @property
    def name(self) -> str:
        return "fake-text"

    @property
    def is_available(self) -> bool:
        return True

    def supports(self, model: str) -> bool:
        return True

    async def generate(self, prompt: str, model: str, language: str = "english") -> str:
        self.calls.append({"prompt": prompt, "model": model, "language": language})
        if "visual concepts" in prompt:
            if self.concepts_error:
                raise self.concepts_error
            return self.concepts
        if self.error:
            raise self.error
        return self.script


class FakeVoiceProvider(BaseVoiceProvider):
    def __init__(self, audio: Optional[SynthesizedAudio] = None, error: Optional[Exception] = None):
        self.audio = audio if audio is not None else SynthesizedAudio(b"ID3fake-mp3-bytes", "audio/mpeg")
        self.error = error
        self.calls: List[dict] = []

    @property
    def name(self) -> str:
        return "fake-voice"

    @property
    def is_available(self) -> bool:
        return True

    async def synthesize(self, text: str, voice: str) -> SynthesizedAudio:
        self.calls.append({"text": text, "voice": voice})
        if self.error:
            raise self.error
        return self.audio


class FakeImageProvider(BaseImageProvider):
    """Returns a tiny JPEG per query; queries in `fail_on` raise ProviderError."""

    def __init__(self, fail_on: Optional[set] = None, mime_type: str = "image/jpeg"):
        self.fail_on = fail_on or set()
        self.mime_type = mime_type
        self.queries: List[str] = []

    @property
    def name(self) -> str:
        return "fake-images"

    @property
    def is_available(self) -> bool:
        return True

    async def fetch(self, query: str) -> ImageData:
        self.queries.append(query)
        if query in self.fail_on:
            raise ProviderError(self.name, f"no result for {query}")
        return ImageData(data=b"\xff\xd8\xff" + query.encode(), mime_type=self.mime_type)


class FakeVideoProvider(BaseVideoProvider):
    def __init__(self, result: str = "/temp/rendered/video.mp4", error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[dict] = []

    @property
    def name(self) -> str:
        return "fake-video"

    @property
    def is_available(self) -> bool:
        return True

    async def compose(self, audio_url, images) -> str:
        self.calls.append({"audio_url": audio_url, "images": list(images)})
        if self.error:
            raise self.error
        return self.result


# =============================================================================
# Configuration and storage
# =============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def pipeline_config():
    """Stage config with no pacing and a short backend timeout."""
    return PipelineConfig(pacing_delay=0, backend_timeout=5)


@pytest.fixture
def app_config(temp_dir, pipeline_config):
    return AppConfig(
        ai=AIConfig(),
        paths=PathsConfig(temp_dir=temp_dir),
        pipeline=pipeline_config,
    )


@pytest.fixture
def artifact_store(temp_dir):
    return ArtifactStore(temp_dir)


# =============================================================================
# Providers and services
# =============================================================================

@pytest.fixture
def text_provider():
    return FakeTextProvider()


@pytest.fixture
def voice_provider():
    return FakeVoiceProvider()


@pytest.fixture
def image_provider():
    return FakeImageProvider()


@pytest.fixture
def script_service(text_provider, pipeline_config):
    return ScriptService(text_provider, pipeline_config)


@pytest.fixture
def audio_service(voice_provider, artifact_store, pipeline_config):
    return AudioService(voice_provider, artifact_store, pipeline_config)


@pytest.fixture
def timeline_service(text_provider, image_provider, artifact_store, pipeline_config):
    return TimelineService(text_provider, image_provider, artifact_store, pipeline_config)


@pytest.fixture
def assembly_service(artifact_store, pipeline_config):
    """Assembly without a compositor (records the composition)."""
    return AssemblyService(None, artifact_store, pipeline_config)


@pytest.fixture
def pipeline(script_service, audio_service, timeline_service, assembly_service):
    return Pipeline(script_service, audio_service, timeline_service, assembly_service)


# FastAPI test client fixture
@pytest.fixture
def test_client(app_config, pipeline):
    """Create a test client backed by fake providers."""
    from fastapi.testclient import TestClient
    from videgen.api.main import create_app
    return TestClient(create_app(app_config, pipeline))
