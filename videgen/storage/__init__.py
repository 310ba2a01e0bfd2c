"""
Storage Layer.

Per-project artifact directories on local disk.
"""
from .artifact_store import ArtifactStore, validate_project_id, validate_filename

__all__ = [
    "ArtifactStore",
    "validate_project_id",
    "validate_filename",
]
