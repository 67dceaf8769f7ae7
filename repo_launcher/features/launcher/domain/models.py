from enum import Enum, unique

@unique
class LaunchAction(str, Enum):
    EDITOR = "editor"
    TERMINAL = "terminal"
    FILE_MANAGER = "file_manager"

class LaunchError(RuntimeError):
    """Raised when an external application could not be started."""
