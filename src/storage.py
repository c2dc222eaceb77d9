"""FileStorage — sandboxed local filesystem for uploaded files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.config import settings

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

MAX_FILENAME_BYTES = 255


class FileStorage:
    """Local file storage rooted at ``settings.storage_dir``.

    Singleton accessed via ``FileStorage.get()``.  Pass an explicit *root*
    for test isolation (e.g. ``tmp_path / "storage"``).
    """

    _instance: FileStorage | None = None

    def __init__(self, root: Path | None = None) -> None:
        self._root = (root or settings.storage_dir).resolve()
        self._root.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get(cls) -> FileStorage:
        """Return the shared FileStorage instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def _reset(cls) -> None:
        """Clear the singleton (for tests)."""
        cls._instance = None

    @property
    def root(self) -> Path:
        return self._root

    # -- Path helpers ----------------------------------------------------------

    @staticmethod
    def validate_filename(name: str) -> str:
        """Return *name* unchanged if it is usable as a single path component.

        Rejects empty names, ``.`` and ``..``, path separators, NUL and other
        control characters, and names longer than 255 bytes in UTF-8.
        Raises ``ValueError`` otherwise.
        """
        if name in ("", ".", ".."):
            msg = f"Invalid filename: {name!r}"
            raise ValueError(msg)
        if "/" in name or "\\" in name:
            msg = f"Filename contains a path separator: {name!r}"
            raise ValueError(msg)
        if any(ord(ch) < 32 or ord(ch) == 127 for ch in name):
            msg = f"Filename contains control characters: {name!r}"
            raise ValueError(msg)
        if len(name.encode("utf-8")) > MAX_FILENAME_BYTES:
            msg = f"Filename longer than {MAX_FILENAME_BYTES} bytes: {name!r}"
            raise ValueError(msg)
        return name

    def resolve(self, name: str) -> Path:
        """Resolve a relative path to an absolute path inside the storage root.

        Splits on ``/``, validates each component, and verifies the resolved
        path is inside ``self._root`` (prevents directory traversal).
        """
        parts = [self.validate_filename(p) for p in name.split("/") if p]
        if not parts:
            msg = f"Empty storage path: {name!r}"
            raise ValueError(msg)
        target = self._root.joinpath(*parts).resolve()
        if not target.is_relative_to(self._root):
            msg = f"Path traversal detected: {name!r}"
            raise ValueError(msg)
        return target

    # -- File operations -------------------------------------------------------

    def store_as(self, directory: str, filename: str, content: bytes) -> Path:
        """Write *content* to ``<directory>/<filename>``, replacing any existing file.

        *filename* is kept exactly as given but must be a single path
        component, so a client supplied name can never address another
        directory. Returns the absolute path of the written file.
        """
        self.validate_filename(filename)
        target = self.resolve(f"{directory}/{filename}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        logger.info("Stored %s (%d bytes)", target.relative_to(self._root), len(content))
        return target

    def read_bytes(self, name: str) -> bytes:
        """Read raw bytes from a stored file."""
        target = self.resolve(name)
        if not target.exists():
            msg = f"File not found: {name}"
            raise FileNotFoundError(msg)
        return target.read_bytes()

    def exists(self, name: str) -> bool:
        """Check if a file exists in storage."""
        return self.resolve(name).exists()
