"""
End-to-end tests for the pipeline orchestrator.
"""
import asyncio

import pytest

from videgen.config import PLACEHOLDER_VIDEO_URL
from videgen.exceptions import GenerationError
from videgen.providers import ProviderError
from videgen.services import Pipeline, build_pipeline

from conftest import FakeImageProvider, FakeVoiceProvider


class TestPipelineRun:
    """Tests for Pipeline.run."""

    def test_photosynthesis_end_to_end(self, pipeline, artifact_store):
        result = asyncio.run(pipeline.run("Photosynthesis", "english"))

        assert result.topic == "Photosynthesis"
        assert result.script
        assert result.audio.reference == f"/temp/{result.project_id}/audio.mp3"
        assert 4 <= len(result.images) <= 8
        assert all(img.reference.startswith(f"/temp/{result.project_id}/") for img in result.images)
        assert result.video_url == PLACEHOLDER_VIDEO_URL

        project_dir = artifact_store.root / result.project_id
        names = sorted(p.name for p in project_dir.iterdir())
        assert "audio.mp3" in names
        assert sum(1 for n in names if n.startswith("image-")) == len(result.images)
        assert sum(1 for n in names if n.startswith("video-")) == 1

    def test_duration_flows_into_timeline(self, pipeline):
        result = asyncio.run(pipeline.run("Photosynthesis"))

        assert sum(img.span for img in result.images) == pytest.approx(result.audio.duration)

    def test_to_dict_uses_wire_names(self, pipeline):
        data = asyncio.run(pipeline.run("Photosynthesis")).to_dict()

        assert set(data) == {"topic", "script", "audioUrl", "projectId", "duration", "images", "videoUrl"}
        assert set(data["images"][0]) == {"imageUrl", "imagePrompt", "timestamp", "duration", "order", "kind"}

    def test_audio_failure_stops_downstream(
        self, script_service, timeline_service, assembly_service, artifact_store, pipeline_config,
        image_provider,
    ):
        from videgen.services import AudioService

        voice = FakeVoiceProvider(error=ProviderError("fake-voice", "down"))
        pipeline = Pipeline(
            script_service,
            AudioService(voice, artifact_store, pipeline_config),
            timeline_service,
            assembly_service,
        )

        with pytest.raises(GenerationError):
            asyncio.run(pipeline.run("Photosynthesis"))

        assert image_provider.queries == []
        assert list(artifact_store.root.iterdir()) == []

    def test_image_failures_do_not_stop_pipeline(
        self, script_service, audio_service, text_provider, assembly_service, artifact_store, pipeline_config,
    ):
        from videgen.services import TimelineService

        images = FakeImageProvider(fail_on={"chlorophyll close up"})
        pipeline = Pipeline(
            script_service,
            audio_service,
            TimelineService(text_provider, images, artifact_store, pipeline_config),
            assembly_service,
        )

        result = asyncio.run(pipeline.run("Photosynthesis"))

        assert [img.is_placeholder for img in result.images] == [False, True, False, False]
        assert result.video_url == PLACEHOLDER_VIDEO_URL


class TestBuildPipeline:
    """Tests for wiring the pipeline from configuration."""

    def test_unconfigured_backends(self, app_config):
        pipeline = build_pipeline(app_config)

        assert pipeline.audio_service.voice_provider.name == "edge"
        assert pipeline.assembly_service.video_provider is None
        assert pipeline.timeline_service.store.root == app_config.paths.temp_dir

    def test_shares_one_store(self, app_config):
        pipeline = build_pipeline(app_config)

        assert pipeline.audio_service.store is pipeline.timeline_service.store
        assert pipeline.timeline_service.store is pipeline.assembly_service.store
