"""
Tests for the HTTP API.
"""
from unittest.mock import AsyncMock

import pytest

from videgen.config import PLACEHOLDER_VIDEO_URL


def asset(order, url="/temp/p1/image-01.jpg"):
    return {
        "imageUrl": url,
        "imagePrompt": f"concept {order}",
        "timestamp": (order - 1) * 15.0,
        "duration": 15.0,
        "order": order,
    }


class TestHealth:
    """Tests for health endpoints."""

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["timestamp"]

    def test_config_status_never_exposes_keys(self, test_client, app_config):
        app_config.ai.openai_api_key = "sk-secret-value"

        response = test_client.get("/health/config")

        assert response.status_code == 200
        assert response.json()["apis"]["openai"] == "configured"
        assert "sk-secret-value" not in response.text


class TestGenerateScript:
    """Tests for POST /api/generate-script."""

    def test_success(self, test_client):
        response = test_client.post("/api/generate-script", json={"topic": "Photosynthesis"})

        assert response.status_code == 200
        assert "photosynthesis" in response.json()["script"]

    @pytest.mark.parametrize("body", [
        {},
        {"topic": ""},
        {"topic": "x", "language": "french"},
        {"topic": "x", "model": "not-a-model"},
    ])
    def test_rejected(self, test_client, text_provider, body):
        response = test_client.post("/api/generate-script", json=body)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert text_provider.calls == []

    def test_malformed_json(self, test_client):
        response = test_client.post(
            "/api/generate-script",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"

    def test_backend_failure_is_generic_500(self, test_client, text_provider):
        from videgen.providers import ProviderError

        text_provider.error = ProviderError("fake-text", "secret upstream detail")

        response = test_client.post("/api/generate-script", json={"topic": "Photosynthesis"})

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Failed to generate script"
        assert data["code"] == "GENERATION_ERROR"
        assert data["detail"] is None


class TestGenerateAudio:
    """Tests for POST /api/generate-audio."""

    def test_success_and_served(self, test_client):
        response = test_client.post("/api/generate-audio", json={"script": "Plants make food from light."})

        assert response.status_code == 200
        data = response.json()
        assert data["audioUrl"] == f"/temp/{data['projectId']}/audio.mp3"
        assert data["duration"] == 2

        served = test_client.get(data["audioUrl"])
        assert served.status_code == 200
        assert served.content == b"ID3fake-mp3-bytes"

    def test_empty_script(self, test_client, voice_provider):
        response = test_client.post("/api/generate-audio", json={"script": "  "})

        assert response.status_code == 400
        assert voice_provider.calls == []


class TestRecommendImages:
    """Tests for POST /api/recommend-images."""

    def test_success(self, test_client):
        response = test_client.post(
            "/api/recommend-images",
            json={"script": "A script.", "duration": 60, "projectId": "project-1-abcd1234"},
        )

        assert response.status_code == 200
        images = response.json()["images"]
        assert len(images) == 4
        assert images[1] == {
            "imageUrl": "/temp/project-1-abcd1234/image-02.jpg",
            "imagePrompt": "chlorophyll close up",
            "timestamp": 15.0,
            "duration": 15.0,
            "order": 2,
            "kind": "resolved",
        }
        assert test_client.get(images[0]["imageUrl"]).status_code == 200

    def test_default_duration(self, test_client):
        response = test_client.post("/api/recommend-images", json={"script": "A script.", "projectId": "p1"})

        images = response.json()["images"]
        assert sum(img["duration"] for img in images) == pytest.approx(60)

    @pytest.mark.parametrize("body", [
        {"script": "A script.", "duration": 60},
        {"script": "A script.", "duration": 60, "projectId": ""},
        {"script": "A script.", "duration": 60, "projectId": "../../etc"},
        {"script": "", "duration": 60, "projectId": "p1"},
        {"script": "A script.", "duration": 0, "projectId": "p1"},
        {"script": "A script.", "duration": "long", "projectId": "p1"},
    ])
    def test_rejected_without_backend_calls(self, test_client, text_provider, image_provider, body):
        response = test_client.post("/api/recommend-images", json=body)

        assert response.status_code == 400
        assert text_provider.calls == []
        assert image_provider.queries == []

    @pytest.mark.parametrize("duration", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_duration_rejected(self, test_client, text_provider, image_provider, artifact_store, duration):
        body = '{"script": "A script.", "duration": %s, "projectId": "p1"}' % duration

        response = test_client.post(
            "/api/recommend-images",
            content=body.encode(),
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert text_provider.calls == []
        assert image_provider.queries == []
        assert not (artifact_store.root / "p1").exists()

    def test_null_duration_uses_default(self, test_client):
        response = test_client.post(
            "/api/recommend-images",
            json={"script": "A script.", "duration": None, "projectId": "p1"},
        )

        assert response.status_code == 200
        images = response.json()["images"]
        assert sum(img["duration"] for img in images) == pytest.approx(60)


class TestDebugErrors:
    """Error bodies keep their JSON shape when DEBUG is on."""

    @pytest.fixture
    def debug_client(self, app_config, pipeline):
        from fastapi.testclient import TestClient
        from videgen.api.main import create_app

        app_config.debug = True
        return TestClient(create_app(app_config, pipeline), raise_server_exceptions=False)

    def test_unexpected_error_is_json(self, debug_client, pipeline):
        pipeline.script_service.generate_script = AsyncMock(side_effect=RuntimeError("boom"))

        response = debug_client.post("/api/generate-script", json={"topic": "Photosynthesis"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "detail": "boom",
            "code": "INTERNAL_ERROR",
            "status_code": 500,
        }

    def test_generation_detail_exposed(self, debug_client, text_provider):
        from videgen.providers import ProviderError

        text_provider.error = ProviderError("fake-text", "quota exceeded")

        response = debug_client.post("/api/generate-script", json={"topic": "Photosynthesis"})

        assert response.status_code == 500
        assert response.json()["code"] == "GENERATION_ERROR"
        assert "quota exceeded" in response.json()["detail"]


class TestGenerateVideo:
    """Tests for POST /api/generate-video."""

    def test_mock_assembly(self, test_client, artifact_store):
        artifact_store.ensure_project_directory("p1")

        response = test_client.post(
            "/api/generate-video",
            json={"audioUrl": "/temp/p1/audio.mp3", "images": [asset(i) for i in range(1, 5)]},
        )

        assert response.status_code == 200
        assert response.json()["videoUrl"] == PLACEHOLDER_VIDEO_URL
        assert len(list((artifact_store.root / "p1").glob("video-*.json"))) == 1

    @pytest.mark.parametrize("body", [
        {"images": [asset(1)]},
        {"audioUrl": "/temp/p1/audio.mp3"},
        {"audioUrl": "/temp/p1/audio.mp3", "images": []},
        {"audioUrl": "", "images": [asset(1)]},
    ])
    def test_rejected(self, test_client, body):
        response = test_client.post("/api/generate-video", json=body)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestStaticArtifacts:
    """Tests for the /temp mount."""

    def test_missing_artifact_is_404(self, test_client):
        assert test_client.get("/temp/p1/nothing.mp3").status_code == 404
