import asyncio
import logging
import os
from typing import Dict, List, Optional, Sequence, Tuple

from ..domain.interfaces import IDirectoryReader
from ..domain.models import Repo
from ..data.directory_reader import LocalDirectoryReader
from ..data.workspace_marker import WorkspaceMarkerFinder

logger = logging.getLogger(__name__)

class RepoScanner:
    """
    Walks each source folder one level deep and builds Repo records.
    """

    def __init__(self,
                 reader: Optional[IDirectoryReader] = None,
                 marker_finder: Optional[WorkspaceMarkerFinder] = None):
        self.reader = reader or LocalDirectoryReader()
        self.marker_finder = marker_finder or WorkspaceMarkerFinder(self.reader)

    async def scan(self, source_folders: Sequence[str]) -> List[Repo]:
        """
        Lists all folders concurrently, then merges the listings in
        configured order so the first folder reaching a path owns it.

        Returns repos sorted by (name, path). Unreadable folders and
        entries are skipped, never raised.
        """
        # gather() keeps argument order regardless of completion order.
        listings = await asyncio.gather(
            *(asyncio.to_thread(self._list_candidates, folder) for folder in source_folders)
        )

        owners: Dict[str, Tuple[str, str]] = {}
        for folder, candidates in zip(source_folders, listings):
            for name, path in candidates:
                if path not in owners:
                    owners[path] = (name, folder)

        paths = list(owners)
        markers = await asyncio.gather(
            *(asyncio.to_thread(self.marker_finder.find, path) for path in paths)
        )

        repos = [
            Repo(name=owners[path][0], path=path, source_folder=owners[path][1], workspace_file=marker)
            for path, marker in zip(paths, markers)
        ]
        repos.sort(key=lambda repo: (repo.name, repo.path))

        logger.info(f"Scanned {len(source_folders)} folder(s), found {len(repos)} repo(s)")
        return repos

    def _list_candidates(self, source_folder: str) -> List[Tuple[str, str]]:
        """
        Returns (name, path) for every visible child directory of source_folder.
        """
        entries = self.reader.list_entries(source_folder)
        if entries is None:
            logger.debug(f"Skipping unreadable source folder: {source_folder}")
            return []

        candidates = []
        for entry in entries:
            if entry.startswith("."):
                continue

            path = os.path.join(source_folder, entry)
            if not self.reader.is_directory(path):
                continue

            candidates.append((entry, path))

        return candidates
