import json
import logging
from typing import List, Optional

from repo_launcher.core.config.settings import settings
from repo_launcher.core.storage.domain.errors import STORAGE_ERRORS
from repo_launcher.core.storage.domain.interfaces import IKeyValueStore

logger = logging.getLogger(__name__)

class PinStore:
    """
    Ordered set of pinned repo paths, persisted as a JSON array.

    Pins are not checked against discovered repos: a stale pin is legal
    and simply never matches anything on render.
    """

    def __init__(self,
                 backend: IKeyValueStore,
                 legacy_backend: Optional[IKeyValueStore] = None,
                 key: Optional[str] = None):
        self.backend = backend
        self.legacy_backend = legacy_backend
        self.key = key or settings.PINS_KEY

    def get(self) -> List[str]:
        """Current pins; an unreadable store reads as no pins."""
        try:
            return self._read_current()
        except STORAGE_ERRORS as e:
            logger.warning(f"Pinned repos could not be read: {e}")
            return []

    def is_pinned(self, path: str) -> bool:
        return path in self.get()

    def toggle(self, path: str) -> List[str]:
        """
        Removes path if pinned, otherwise appends it.
        The whole updated list replaces the stored value. The legacy slot is
        kept in step so unpinning everything cannot resurrect old pins.
        Storage failures propagate: a list that could not be read is never
        overwritten.
        """
        pinned = self._read_current()
        if path in pinned:
            updated = [p for p in pinned if p != path]
            logger.info(f"Unpinned {path}")
        else:
            updated = pinned + [path]
            logger.info(f"Pinned {path}")

        self._write(updated)
        if self.legacy_backend is not None:
            self.legacy_backend.set(self.key, json.dumps(updated))
        return updated

    def migrate_if_empty(self) -> bool:
        """
        One-time import of pins from the legacy storage scheme.

        Only runs while the current list is empty, and only adopts a
        non-empty legacy list. Returns True if pins were imported.
        """
        if self.legacy_backend is None:
            return False

        try:
            if self._read_current():
                return False
            legacy = _decode_paths(self.legacy_backend.get(self.key), source="legacy")
            if not legacy:
                return False
            self._write(legacy)
        except STORAGE_ERRORS as e:
            # Nothing was adopted; the next start tries again.
            logger.warning(f"Skipping pin migration: {e}")
            return False

        logger.info(f"Migrated {len(legacy)} pinned repo(s) from legacy storage")
        return True

    def _read_current(self) -> List[str]:
        return _decode_paths(self.backend.get(self.key), source="current")

    def _write(self, paths: List[str]) -> None:
        self.backend.set(self.key, json.dumps(paths))

def _decode_paths(serialized: Optional[str], source: str) -> List[str]:
    """Parses a stored pin list; anything malformed reads as empty."""
    if not serialized:
        return []

    try:
        value = json.loads(serialized)
    except ValueError as e:
        logger.warning(f"Ignoring malformed {source} pin list: {e}")
        return []

    if not isinstance(value, list) or not all(isinstance(p, str) for p in value):
        logger.warning(f"Ignoring {source} pin list with unexpected shape")
        return []

    # Set semantics: keep the first occurrence of each path.
    return list(dict.fromkeys(value))
