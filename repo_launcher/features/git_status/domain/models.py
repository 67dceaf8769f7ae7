from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class GitStatus:
    """
    Live annotation for one repo. The default instance is the neutral
    value returned whenever status cannot be determined.
    """
    branch: Optional[str] = None
    is_dirty: bool = False
