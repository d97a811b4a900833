# ABOUTME: Loads and saves the catalog as a single JSON document.
# ABOUTME: Missing file means first run; writes go through a temp file and an atomic replace.

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from readshelf.catalog.mapping import dict_to_record, record_to_dict
from readshelf.catalog.types import BookMetadata
from readshelf.errors import CatalogFormatError, CatalogIOError
from readshelf.storage.paths import PlatformPaths

logger = logging.getLogger(__name__)


def _ensure_parent(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CatalogIOError(f"Failed to create directory: {exc}") from exc


class CatalogStore:
    """Persists the catalog at the platform's catalog location.

    The location is resolved on every call, so configuration errors surface
    from the operation that needed it.
    """

    def __init__(self, paths: PlatformPaths) -> None:
        self._paths = paths

    @property
    def path(self) -> Path | None:
        return self._paths.catalog_path()

    def load(self) -> list[BookMetadata]:
        """Read the catalog.

        Returns an empty catalog when the platform has no catalog file or the
        file does not exist yet.

        Raises:
            ConfigurationError: If the catalog location cannot be resolved.
            CatalogIOError: If the file exists but cannot be read.
            CatalogFormatError: If the file is not a valid catalog document.
        """
        path = self.path
        if path is None:
            logger.info("Library initialized in memory (no catalog file on this platform)")
            return []

        if not path.exists():
            _ensure_parent(path)
            logger.info("No catalog at %s, starting empty", path)
            return []

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogIOError(f"Failed to read library: {exc}") from exc

        try:
            rows = json.loads(content)
        except json.JSONDecodeError as exc:
            raise CatalogFormatError(f"Failed to parse library: {exc}") from exc

        if not isinstance(rows, list):
            raise CatalogFormatError("Failed to parse library: expected a JSON array")

        books = [dict_to_record(row) for row in rows]
        logger.info("Loaded %d book(s) from %s", len(books), path)
        return books

    def save(self, books: Sequence[BookMetadata]) -> None:
        """Overwrite the catalog file with the full catalog.

        Raises:
            ConfigurationError: If the catalog location cannot be resolved.
            CatalogIOError: If the directory or file cannot be written.
        """
        path = self.path
        if path is None:
            logger.debug("Catalog kept in memory; %d book(s) not persisted", len(books))
            return

        _ensure_parent(path)
        content = json.dumps([record_to_dict(book) for book in books], indent=2)

        try:
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        except OSError as exc:
            raise CatalogIOError(f"Failed to write library: {exc}") from exc
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_path, path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise CatalogIOError(f"Failed to write library: {exc}") from exc
