import os
import shlex
from typing import Optional

from repo_launcher.core.config.settings import Settings, settings as default_settings
from repo_launcher.features.repo_scanner.domain.models import Repo
from ..domain.interfaces import IAppLauncher
from ..domain.models import LaunchAction
from ..data.process_launcher import ProcessLauncher

# Editors that understand multi-root workspace files.
WORKSPACE_EDITORS = {"code", "code-insiders", "codium", "cursor"}

def editor_supports_workspaces(editor_command: str) -> bool:
    try:
        parts = shlex.split(editor_command)
    except ValueError:
        return False
    if not parts:
        return False
    return os.path.basename(parts[0]) in WORKSPACE_EDITORS

def launch_target(repo: Repo, action: LaunchAction, editor_command: str) -> str:
    """
    What to hand the application: the workspace file for a workspace-aware
    editor when the repo has one, otherwise the repo directory.
    """
    if action == LaunchAction.EDITOR and repo.workspace_file and editor_supports_workspaces(editor_command):
        return repo.workspace_file
    return repo.path

def open_repo(repo: Repo,
              action: LaunchAction,
              settings: Settings = default_settings,
              launcher: Optional[IAppLauncher] = None) -> str:
    """
    Public Service API: open a repo in the configured editor, terminal or file manager.

    Returns:
        The target that was opened.
    """
    launcher = launcher or ProcessLauncher()
    target = launch_target(repo, action, settings.EDITOR_COMMAND)

    if action == LaunchAction.EDITOR:
        launcher.open(settings.EDITOR_COMMAND, target)
    elif action == LaunchAction.TERMINAL:
        # Terminals take the working directory, not an argument.
        launcher.open(settings.TERMINAL_COMMAND, None, cwd=target)
    else:
        launcher.open(settings.FILE_MANAGER_COMMAND, target)

    return target
