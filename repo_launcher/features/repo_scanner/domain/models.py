from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

@dataclass(frozen=True)
class Repo:
    """
    A launchable immediate subdirectory of a source folder.
    Identity is `path`; all paths are absolute strings.
    """
    name: str
    path: str
    source_folder: str
    workspace_file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "source_folder": self.source_folder,
            "workspace_file": self.workspace_file,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Repo":
        workspace_file = data.get("workspace_file")
        for value in (data["name"], data["path"], data["source_folder"]):
            if not isinstance(value, str):
                raise TypeError(f"Expected string field, got {type(value).__name__}")
        if workspace_file is not None and not isinstance(workspace_file, str):
            raise TypeError("workspace_file must be a string or null")
        return cls(
            name=data["name"],
            path=data["path"],
            source_folder=data["source_folder"],
            workspace_file=workspace_file,
        )

@dataclass(frozen=True)
class RepoSet:
    """
    Result of one full scan: repos sorted by (name, path) and the names
    that occur more than once (used for disambiguation).
    """
    repos: Tuple[Repo, ...] = ()
    duplicate_names: FrozenSet[str] = field(default_factory=frozenset)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "repos": [repo.to_dict() for repo in self.repos],
            "duplicate_names": sorted(self.duplicate_names),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RepoSet":
        repos = data["repos"]
        names = data["duplicate_names"]
        if not isinstance(repos, list) or not isinstance(names, list):
            raise TypeError("repos and duplicate_names must be lists")
        return cls(
            repos=tuple(Repo.from_dict(item) for item in repos),
            duplicate_names=frozenset(str(name) for name in names),
        )
