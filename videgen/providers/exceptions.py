"""
Provider exceptions.
"""
from typing import Optional


class ProviderError(Exception):
    """Base exception for provider errors."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        self.message = message
        super().__init__(f"[{provider}] {message}")


class ProviderUnavailable(ProviderError):
    """Provider is not available (missing API key, unsupported model, etc.)."""

    def __init__(self, provider: str, reason: str = "unavailable"):
        super().__init__(provider, f"Provider unavailable: {reason}")
        self.reason = reason


class ProviderResponseError(ProviderError):
    """Backend answered with a non-success status or an unusable payload."""

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None):
        if status_code is not None:
            message = f"HTTP {status_code}: {message}"
        super().__init__(provider, message)
        self.status_code = status_code
