import logging
import os
import stat
from typing import List, Optional
from ..domain.interfaces import IDirectoryReader

logger = logging.getLogger(__name__)

class LocalDirectoryReader(IDirectoryReader):
    """
    Concrete implementation using os.listdir / os.stat.
    """

    def list_entries(self, path: str) -> Optional[List[str]]:
        try:
            # Sorted: marker selection takes the first match.
            return sorted(os.listdir(path))
        except (OSError, ValueError) as e:
            logger.debug(f"Cannot list {path}: {e}")
            return None

    def is_directory(self, path: str) -> bool:
        try:
            return stat.S_ISDIR(os.stat(path).st_mode)
        except (OSError, ValueError):
            return False
