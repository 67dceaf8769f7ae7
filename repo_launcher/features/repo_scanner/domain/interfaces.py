from abc import ABC, abstractmethod
from typing import List, Optional

class IDirectoryReader(ABC):
    """
    Contract for the two filesystem questions a scan asks.
    Both are best-effort: failures come back as None / False, never as errors.
    """

    @abstractmethod
    def list_entries(self, path: str) -> Optional[List[str]]:
        """
        Returns the names of the immediate children of path,
        or None if the directory cannot be listed.
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """True if path exists and is a directory (symlinks followed)."""
        pass
