"""
Tests for configuration management.
"""
import pytest


class TestPathsConfig:
    """Tests for PathsConfig auto-detection."""

    def test_temp_dir_default(self, monkeypatch):
        """Temp directory should default to project root/data/temp."""
        monkeypatch.delenv("TEMP_DIR", raising=False)
        from videgen.config import PROJECT_ROOT, PathsConfig

        config = PathsConfig.detect()
        assert config.temp_dir == PROJECT_ROOT / "data" / "temp"

    def test_custom_temp_dir_from_env(self, temp_dir, monkeypatch):
        """TEMP_DIR env var should override default and be created."""
        target = temp_dir / "artifacts"
        monkeypatch.setenv("TEMP_DIR", str(target))

        from videgen.config import PathsConfig

        config = PathsConfig.detect()
        assert config.temp_dir == target
        assert target.is_dir()


class TestAIConfig:
    """Tests for AIConfig."""

    def test_ai_config_properties(self):
        """AI config properties should detect configured keys."""
        from videgen.config import AIConfig

        config = AIConfig(gemini_api_key="g-valid-key", openai_api_key=None)

        assert config.has_gemini is True
        assert config.has_openai is False
        assert config.has_any_llm is True

    def test_ai_config_rejects_placeholder_keys(self):
        """Placeholder keys starting with PASTE_ should not count as configured."""
        from videgen.config import AIConfig

        config = AIConfig(
            openai_api_key="PASTE_YOUR_KEY_HERE",
            unsplash_access_key="",
        )

        assert config.has_openai is False
        assert config.has_unsplash is False
        assert config.has_any_llm is False


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self, temp_dir, monkeypatch):
        for name in ["DEFAULT_MODEL", "CONCEPT_MODEL", "DEFAULT_VOICE", "PACING_DELAY_SECONDS",
                     "BACKEND_TIMEOUT_SECONDS", "PORT", "DEBUG", "VOICE_PROVIDER", "IMAGE_PROVIDER"]:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("TEMP_DIR", str(temp_dir))

        from videgen.config import load_config

        config = load_config()
        assert config.pipeline.default_model == "gemini-2.0-flash-exp"
        assert config.pipeline.concept_model == "gemini-2.0-flash-exp"
        assert config.pipeline.default_voice == "en-US-Neural2-J"
        assert config.pipeline.words_per_minute == 150
        assert config.pipeline.pacing_delay == pytest.approx(0.1)
        assert config.pipeline.backend_timeout == pytest.approx(120)
        assert config.port == 3000
        assert config.debug is False
        assert config.ai.voice_provider == "auto"

    def test_env_overrides(self, temp_dir, monkeypatch):
        monkeypatch.setenv("TEMP_DIR", str(temp_dir))
        monkeypatch.setenv("DEFAULT_MODEL", "gpt-4o-mini")
        monkeypatch.delenv("CONCEPT_MODEL", raising=False)
        monkeypatch.setenv("PACING_DELAY_SECONDS", "0")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("VIDEO_PROVIDER", "moviepy")

        from videgen.config import load_config

        config = load_config()
        assert config.pipeline.default_model == "gpt-4o-mini"
        assert config.pipeline.concept_model == "gpt-4o-mini"
        assert config.pipeline.pacing_delay == 0
        assert config.port == 8080
        assert config.debug is True
        assert config.ai.video_provider == "moviepy"

    def test_validate_does_not_expose_keys(self, app_config):
        app_config.ai.unsplash_access_key = "u-secret"

        status = app_config.validate()

        assert status["ai"]["unsplash_configured"] is True
        assert "u-secret" not in str(status)
        assert status["providers"] == {"voice": "auto", "image": "auto", "video": "mock"}
