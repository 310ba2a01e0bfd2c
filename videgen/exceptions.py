"""
Pipeline exceptions.

Every stage failure surfaces as one of these three kinds. The API layer maps
them to HTTP status codes (400 / 500 / 500).
"""
from typing import Optional


class PipelineError(Exception):
    """Base exception for pipeline errors."""

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class ValidationError(PipelineError):
    """Missing or malformed input. Always caller-fixable."""


class GenerationError(PipelineError):
    """A generative backend call failed or returned unusable output."""


class StorageError(PipelineError):
    """A project directory or artifact could not be created or written."""
