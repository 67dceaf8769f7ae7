from typing import Optional

from repo_launcher.features.source_folders.service.parser import parse_source_folders
from ..domain.models import RepoSet
from .collisions import find_duplicate_names
from .scanner import RepoScanner

async def discover_repos(folders_input: str, scanner: Optional[RepoScanner] = None) -> RepoSet:
    """
    Public Service API: one full discovery pass for a raw folders setting.

    Args:
        folders_input: The unparsed folders setting.
        scanner: Optional scanner (tests inject one with a fake reader).

    Returns:
        RepoSet with sorted repos and the set of colliding names.
    """
    # 1. Resolve configured folders
    source_folders = parse_source_folders(folders_input)

    # 2. Scan
    scanner = scanner or RepoScanner()
    repos = await scanner.scan(source_folders)

    # 3. Collisions
    return RepoSet(repos=tuple(repos), duplicate_names=find_duplicate_names(repos))
