import os
from typing import Optional
from repo_launcher.core.config.settings import settings
from ..domain.interfaces import IDirectoryReader
from .directory_reader import LocalDirectoryReader

class WorkspaceMarkerFinder:
    """
    Finds the editor workspace file sitting directly inside a repo.
    A hidden marker (".name.code-workspace") beats a visible one.
    """

    def __init__(self, reader: Optional[IDirectoryReader] = None, suffix: Optional[str] = None):
        self.reader = reader or LocalDirectoryReader()
        self.suffix = suffix or settings.WORKSPACE_SUFFIX

    def find(self, repo_path: str) -> Optional[str]:
        entries = self.reader.list_entries(repo_path)
        if entries is None:
            return None

        markers = [entry for entry in entries if entry.endswith(self.suffix)]
        hidden = next((m for m in markers if m.startswith(".")), None)
        regular = next((m for m in markers if not m.startswith(".")), None)

        marker = hidden or regular
        return os.path.join(repo_path, marker) if marker else None
