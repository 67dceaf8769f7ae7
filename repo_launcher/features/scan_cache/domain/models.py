from dataclasses import dataclass
from typing import Any, Dict
from repo_launcher.features.repo_scanner.domain.models import RepoSet

@dataclass(frozen=True)
class ScanSnapshot:
    """
    The last full scan, tagged with the raw folders text that produced it.
    """
    config_key: str
    data: RepoSet

    def to_dict(self) -> Dict[str, Any]:
        return {"config_key": self.config_key, "data": self.data.to_dict()}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ScanSnapshot":
        config_key = payload["config_key"]
        if not isinstance(config_key, str):
            raise TypeError("config_key must be a string")
        return cls(config_key=config_key, data=RepoSet.from_dict(payload["data"]))
