import asyncio
import logging
from typing import Dict, Iterable, Optional

from ..domain.interfaces import IGitStatusProbe
from ..domain.models import GitStatus
from ..data.git_adapter import GitCliAdapter

logger = logging.getLogger(__name__)

async def probe_status(path: str, probe: Optional[IGitStatusProbe] = None) -> GitStatus:
    """
    Public Service API: branch and dirty state for one repo.
    Both lookups are issued together.
    """
    probe = probe or GitCliAdapter()
    is_dirty, branch = await asyncio.gather(probe.is_dirty(path), probe.branch(path))
    return GitStatus(branch=branch, is_dirty=is_dirty)

async def probe_statuses(paths: Iterable[str], probe: Optional[IGitStatusProbe] = None) -> Dict[str, GitStatus]:
    """
    Public Service API: status for many repos at once.

    Each path is probed independently; a failure in one probe yields the
    neutral GitStatus for that path only.
    """
    probe = probe or GitCliAdapter()
    unique_paths = list(dict.fromkeys(paths))

    results = await asyncio.gather(
        *(probe_status(path, probe) for path in unique_paths),
        return_exceptions=True
    )

    statuses: Dict[str, GitStatus] = {}
    for path, result in zip(unique_paths, results):
        if isinstance(result, Exception):
            logger.warning(f"Git status probe failed for {path}: {result}")
            statuses[path] = GitStatus()
        else:
            statuses[path] = result
    return statuses
