from abc import ABC, abstractmethod
from typing import Optional

class IGitStatusProbe(ABC):
    """
    Contract for best-effort version-control status lookups.
    Implementations must return neutral defaults instead of raising.
    """

    @abstractmethod
    async def branch(self, path: str) -> Optional[str]:
        """
        Abbreviated name of the current HEAD ref, or None when the path is
        not a repository, HEAD is detached, or the lookup fails.
        """
        pass

    @abstractmethod
    async def is_dirty(self, path: str) -> bool:
        """
        True iff the working tree has uncommitted changes (tracked or untracked).
        False on any failure.
        """
        pass
