# File: repo_launcher/core/config/settings.py

import os
import shutil
from pathlib import Path


class Settings:
    # --- Paths ---
    # Per-user state lives outside the source tree so installs stay read-only.
    DATA_DIR: Path = Path(os.getenv("REPO_LAUNCHER_DATA_DIR", str(Path.home() / ".repo-launcher")))

    # --- Database ---
    @property
    def DATABASE_URL(self) -> str:
        override = os.getenv("REPO_LAUNCHER_DATABASE_URL")
        if override:
            return override
        return f"sqlite:///{self.DATA_DIR / 'repo_launcher.db'}"

    # --- Scan Configuration ---
    # Raw text: newline, comma or semicolon separated folders. "~" is allowed.
    REPOS_FOLDERS: str = os.getenv("REPO_LAUNCHER_FOLDERS", "~/code")
    WORKSPACE_SUFFIX: str = os.getenv("REPO_LAUNCHER_WORKSPACE_SUFFIX", ".code-workspace")

    # --- Storage Keys ---
    CACHE_NAMESPACE: str = "repo-launcher"
    SNAPSHOT_KEY: str = "repo-data-snapshot-v1"
    PINS_KEY: str = "pinned-repos"
    LEGACY_PINS_NAMESPACE: str = "local-storage"

    # --- External Tools ---
    # Auto-detect git or use env var
    GIT_BINARY: str = os.getenv("GIT_BINARY_PATH", shutil.which("git") or "git")
    GIT_TIMEOUT_SECONDS: float = float(os.getenv("REPO_LAUNCHER_GIT_TIMEOUT", "5"))

    EDITOR_COMMAND: str = os.getenv("REPO_LAUNCHER_EDITOR", "code")
    TERMINAL_COMMAND: str = os.getenv("REPO_LAUNCHER_TERMINAL", "x-terminal-emulator")
    FILE_MANAGER_COMMAND: str = os.getenv("REPO_LAUNCHER_FILE_MANAGER", "xdg-open")

    def ensure_dirs(self):
        """Creates the data directory if it doesn't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
