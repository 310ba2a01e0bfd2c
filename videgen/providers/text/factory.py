"""
Text provider factory.

A single routing provider fronts every configured LLM backend and picks one
by model id, so stages only ever see generate(prompt, model, language).
"""
from typing import List, Optional

from videgen.config import AIConfig

from .base import BaseTextProvider
from .gemini import GeminiTextProvider
from .openai_chat import OpenAIChatProvider
from ..exceptions import ProviderUnavailable


class RoutingTextProvider(BaseTextProvider):
    """Dispatches each call to the first provider that supports the model."""

    def __init__(self, providers: List[BaseTextProvider]):
        self._providers = list(providers)

    @property
    def name(self) -> str:
        return "+".join(p.name for p in self._providers) or "none"

    @property
    def is_available(self) -> bool:
        return any(p.is_available for p in self._providers)

    def supports(self, model: str) -> bool:
        return self._route(model) is not None

    def _route(self, model: str) -> Optional[BaseTextProvider]:
        for provider in self._providers:
            if provider.supports(model):
                return provider
        return None

    async def generate(self, prompt: str, model: str, language: str = "english") -> str:
        provider = self._route(model)
        if provider is None:
            raise ProviderUnavailable(self.name, f"No provider for model {model}")
        return await provider.generate(prompt, model, language)


def get_text_provider(ai: AIConfig) -> BaseTextProvider:
    """Build the routing text provider from configured credentials."""
    return RoutingTextProvider([
        GeminiTextProvider(api_key=ai.gemini_api_key if ai.has_gemini else None),
        OpenAIChatProvider(api_key=ai.openai_api_key if ai.has_openai else None),
    ])
