from abc import ABC, abstractmethod
from typing import Optional

class IAppLauncher(ABC):
    """
    Contract for handing a path to an external application.
    """
    @abstractmethod
    def open(self, command: str, target: Optional[str], cwd: Optional[str] = None) -> None:
        """
        Starts `command` (a shell-style command line) with target appended,
        detached from the current process.

        Raises:
            LaunchError: if the application could not be started.
        """
        pass
