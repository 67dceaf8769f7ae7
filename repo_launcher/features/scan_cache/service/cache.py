import json
import logging
from typing import Optional

from repo_launcher.core.config.settings import settings
from repo_launcher.core.storage.domain.errors import STORAGE_ERRORS
from repo_launcher.core.storage.domain.interfaces import IKeyValueStore
from repo_launcher.features.repo_scanner.domain.models import RepoSet
from ..domain.models import ScanSnapshot

logger = logging.getLogger(__name__)

class ScanCache:
    """
    Single-slot snapshot of the last scan, keyed by the raw folders text.
    An optimization for instant rendering, never a source of truth.
    """

    def __init__(self, backend: IKeyValueStore, slot_key: Optional[str] = None):
        self.backend = backend
        self.slot_key = slot_key or settings.SNAPSHOT_KEY

    def load(self, config_key: str) -> Optional[RepoSet]:
        """
        Returns the cached RepoSet if the stored key equals config_key exactly.
        Missing, unreadable, corrupt and mismatched snapshots are all a miss (None).
        """
        try:
            serialized = self.backend.get(self.slot_key)
        except STORAGE_ERRORS as e:
            logger.debug(f"Scan snapshot could not be read: {e}")
            return None

        if not serialized:
            return None

        try:
            snapshot = ScanSnapshot.from_dict(json.loads(serialized))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.debug(f"Ignoring unreadable scan snapshot: {e}")
            return None

        # Plain string equality: any textual change is a new key.
        if snapshot.config_key != config_key:
            logger.debug("Scan snapshot belongs to a different folders setting")
            return None

        return snapshot.data

    def store(self, config_key: str, data: RepoSet) -> None:
        """Overwrites the single slot unconditionally (last writer wins)."""
        snapshot = ScanSnapshot(config_key=config_key, data=data)
        self.backend.set(self.slot_key, json.dumps(snapshot.to_dict()))
