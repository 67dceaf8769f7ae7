import logging
from typing import Optional

from repo_launcher.core.storage.domain.errors import STORAGE_ERRORS
from repo_launcher.features.repo_scanner.domain.models import RepoSet
from repo_launcher.features.repo_scanner.service.api import discover_repos
from repo_launcher.features.repo_scanner.service.scanner import RepoScanner
from repo_launcher.features.scan_cache.service.cache import ScanCache

logger = logging.getLogger(__name__)

class RepoCatalog:
    """
    Keeps the repo list a caller is showing in step with the folders setting.

    - `initial()` serves the cached snapshot so the list renders instantly.
    - `refresh()` runs a fresh scan and writes it through to the cache.
    A scan that finishes after the folders setting changed is discarded.
    """

    def __init__(self, cache: ScanCache, scanner: Optional[RepoScanner] = None):
        self.cache = cache
        self.scanner = scanner or RepoScanner()
        self._current_key: Optional[str] = None
        self._current: Optional[RepoSet] = None

    @property
    def current(self) -> Optional[RepoSet]:
        return self._current

    @property
    def current_key(self) -> Optional[str]:
        return self._current_key

    def initial(self, folders_input: str) -> Optional[RepoSet]:
        """
        Snapshot for instant display, or None on a cache miss.
        Switching to a new key drops whatever was shown for the old one.
        """
        if folders_input != self._current_key:
            self._current = None
        self._current_key = folders_input

        snapshot = self.cache.load(folders_input)
        if snapshot is not None and self._current is None:
            self._current = snapshot
        return snapshot

    async def refresh(self, folders_input: str) -> Optional[RepoSet]:
        """
        Scans for folders_input and publishes the result if folders_input is
        still the current key when the scan completes. Returns None when
        the result was superseded by a newer key.
        """
        if folders_input != self._current_key:
            self._current = None
        self._current_key = folders_input

        data = await discover_repos(folders_input, self.scanner)

        if folders_input != self._current_key:
            logger.info("Discarding scan result for a superseded folders setting")
            return None

        self._current = data
        try:
            self.cache.store(folders_input, data)
        except STORAGE_ERRORS as e:
            logger.warning(f"Scan snapshot was not saved: {e}")
        return data
