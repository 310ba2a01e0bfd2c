"""
Script Service - narration text from a topic.
"""
import logging
from typing import Optional, Union

from videgen.config import PipelineConfig
from videgen.exceptions import GenerationError, ValidationError
from videgen.providers.text import BaseTextProvider
from videgen.models import Language, SUPPORTED_MODELS

from .backend import call_backend
from .prompts import build_script_prompt

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to generate script"


def resolve_language(language: Union[str, Language, None]) -> Language:
    if isinstance(language, Language):
        return language
    value = (language or Language.ENGLISH.value).strip().lower()
    try:
        return Language(value)
    except ValueError:
        supported = ", ".join(l.value for l in Language)
        raise ValidationError(f"Unsupported language: {value}", detail=f"Supported: {supported}")


def resolve_model(model: Optional[str], default: str) -> str:
    value = (model or default).strip()
    if value not in SUPPORTED_MODELS:
        raise ValidationError(f"Unsupported model: {value}", detail=f"Supported: {', '.join(SUPPORTED_MODELS)}")
    return value


class ScriptService:
    """Builds the language-specific prompt and delegates to the text provider."""

    def __init__(self, text_provider: BaseTextProvider, config: PipelineConfig):
        self.text_provider = text_provider
        self.config = config

    async def generate_script(
        self,
        topic: str,
        language: Union[str, Language, None] = Language.ENGLISH,
        model: Optional[str] = None,
    ) -> str:
        """
        Generate a narration script.

        Raises:
            ValidationError: empty topic, unknown language or model
            GenerationError: backend failure or empty output
        """
        topic = (topic or "").strip()
        if not topic:
            raise ValidationError("Topic is required")

        lang = resolve_language(language)
        model_id = resolve_model(model, self.config.default_model)

        logger.info(f"[SCRIPT] Generating {lang.value} script with {model_id}: {topic[:80]}")

        text = await call_backend(
            self.text_provider.generate(build_script_prompt(topic, lang), model_id, lang.value),
            self.config.backend_timeout,
            "SCRIPT",
            FAILURE_MESSAGE,
        )

        script = (text or "").strip()
        if len(script) >= 2 and script[0] == script[-1] == '"':
            script = script[1:-1].strip()

        if not script:
            logger.error(f"[SCRIPT] {model_id} returned no text")
            raise GenerationError(FAILURE_MESSAGE, detail="empty response")

        logger.info(f"[SCRIPT] Generated {len(script.split())} words")
        return script
