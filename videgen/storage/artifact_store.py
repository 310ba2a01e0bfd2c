"""
Artifact Store - per-project directories under the temp root.

Every narration gets its own project directory; audio, images, placeholder
markers and composition records for that narration live inside it and are
served back as /temp/{project_id}/{filename}.
"""
import json
import logging
import re
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlparse

import aiofiles

from videgen.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)

PROJECT_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]{0,127}$")
FILENAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,254}$")
MAX_ALLOCATION_ATTEMPTS = 10


def validate_project_id(project_id: str) -> str:
    """Reject ids that could escape the temp root."""
    if not project_id or not PROJECT_ID_PATTERN.match(project_id):
        raise ValidationError("Invalid project id", detail=repr(project_id))
    return project_id


def validate_filename(filename: str) -> str:
    if not filename or ".." in filename or not FILENAME_PATTERN.match(filename):
        raise ValidationError("Invalid artifact filename", detail=repr(filename))
    return filename


class ArtifactStore:
    """Filesystem-backed store scoped by project id."""

    def __init__(self, root: Path, url_prefix: str = "/temp"):
        self._root = Path(root)
        self._url_prefix = "/" + url_prefix.strip("/")
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError("Failed to create artifact root", detail=str(e)) from e

    @property
    def root(self) -> Path:
        return self._root

    @property
    def url_prefix(self) -> str:
        return self._url_prefix

    def allocate_project(self) -> str:
        """
        Create a new, empty project directory and return its id.

        The directory is created with an exclusive mkdir, so two callers can
        never end up sharing one even if they generate the same candidate id.
        """
        for _ in range(MAX_ALLOCATION_ATTEMPTS):
            project_id = f"project-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
            try:
                (self._root / project_id).mkdir(parents=True, exist_ok=False)
            except FileExistsError:
                continue
            except OSError as e:
                logger.error(f"[STORE] Failed to create project directory: {e}")
                raise StorageError("Failed to create project directory", detail=str(e)) from e

            logger.info(f"[STORE] Allocated project {project_id}")
            return project_id

        raise StorageError("Failed to allocate a unique project id")

    def project_dir(self, project_id: str) -> Path:
        return self._root / validate_project_id(project_id)

    def ensure_project_directory(self, project_id: str) -> Path:
        """Create the project's directory if missing. Safe to call repeatedly."""
        directory = self.project_dir(project_id)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"[STORE] Failed to create {directory}: {e}")
            raise StorageError("Failed to create project directory", detail=str(e)) from e
        return directory

    def path_for(self, project_id: str, filename: str) -> Path:
        return self.project_dir(project_id) / validate_filename(filename)

    def locator(self, project_id: str, filename: str) -> str:
        """Externally addressable path for a stored artifact."""
        validate_project_id(project_id)
        validate_filename(filename)
        return f"{self._url_prefix}/{project_id}/{filename}"

    async def save(self, project_id: str, filename: str, data: bytes) -> str:
        """
        Write bytes into the project directory, replacing any existing file.

        Returns:
            Locator of the stored artifact
        """
        directory = self.ensure_project_directory(project_id)
        path = directory / validate_filename(filename)

        try:
            async with aiofiles.open(path, "wb") as f:
                await f.write(data)
        except OSError as e:
            logger.error(f"[STORE] Failed to write {path}: {e}")
            raise StorageError("Failed to save artifact", detail=str(e)) from e

        logger.debug(f"[STORE] Saved {len(data)} bytes to {path}")
        return self.locator(project_id, filename)

    async def save_json(self, project_id: str, filename: str, payload: Dict[str, Any]) -> str:
        data = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
        return await self.save(project_id, filename, data)

    async def read(self, project_id: str, filename: str) -> bytes:
        path = self.path_for(project_id, filename)
        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise StorageError(f"Artifact not found: {project_id}/{filename}") from e
        except OSError as e:
            raise StorageError("Failed to read artifact", detail=str(e)) from e

    def parse_locator(self, locator: str) -> Optional[Tuple[str, str]]:
        """Split a store locator into (project_id, filename), or None if foreign."""
        if not locator:
            return None

        path = urlparse(locator).path
        prefix = self._url_prefix + "/"
        if not path.startswith(prefix):
            return None

        parts = path[len(prefix):].split("/")
        if len(parts) != 2:
            return None

        project_id, filename = parts
        if not PROJECT_ID_PATTERN.match(project_id) or not FILENAME_PATTERN.match(filename):
            return None
        if ".." in filename:
            return None
        return project_id, filename

    def project_id_from_locator(self, locator: str) -> Optional[str]:
        parsed = self.parse_locator(locator)
        return parsed[0] if parsed else None

    def resolve(self, locator: str) -> Optional[Path]:
        """Map a locator back to an existing file on disk."""
        parsed = self.parse_locator(locator)
        if parsed is None:
            return None
        path = self._root / parsed[0] / parsed[1]
        return path if path.is_file() else None
