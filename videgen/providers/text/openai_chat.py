"""
OpenAI chat completions text provider.
"""
import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from .base import BaseTextProvider
from ..exceptions import ProviderError, ProviderUnavailable

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert educational script writer specializing in creating clear, "
    "engaging explainer video scripts. Always answer in {language_name}."
)


class OpenAIChatProvider(BaseTextProvider):
    """Streams a chat completion and returns the joined deltas."""

    MODEL_PREFIXES = ("gpt-", "o1", "o3", "o4")

    def __init__(
        self,
        api_key: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 500,
        client: Optional[AsyncOpenAI] = None,
    ):
        self._api_key = api_key or ""
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client = client or (AsyncOpenAI(api_key=self._api_key) if self._api_key else None)

    @property
    def name(self) -> str:
        return "openai"

    @property
    def is_available(self) -> bool:
        return self._client is not None

    def supports(self, model: str) -> bool:
        return model.startswith(self.MODEL_PREFIXES)

    async def generate(self, prompt: str, model: str, language: str = "english") -> str:
        if not self.is_available:
            raise ProviderUnavailable(self.name, "Missing OPENAI_API_KEY")

        messages = [
            {"role": "system", "content": SYSTEM_PROMPT.format(language_name=language.capitalize())},
            {"role": "user", "content": prompt},
        ]

        try:
            stream = await self._client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                stream=True,
            )

            parts = []
            async for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta.content
                if delta:
                    parts.append(delta)
        except OpenAIError as e:
            raise ProviderError(self.name, str(e)) from e

        text = "".join(parts).strip()
        logger.debug(f"[OPENAI] {model} returned {len(text)} chars")
        return text
