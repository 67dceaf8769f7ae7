import logging
import shlex
import subprocess
from typing import Optional
from ..domain.interfaces import IAppLauncher
from ..domain.models import LaunchError

logger = logging.getLogger(__name__)

class ProcessLauncher(IAppLauncher):
    def open(self, command: str, target: Optional[str], cwd: Optional[str] = None) -> None:
        try:
            cmd = shlex.split(command)
        except ValueError as e:
            raise LaunchError(f"Invalid command line {command!r}: {e}")
        if not cmd:
            raise LaunchError("No application configured")
        if target:
            cmd.append(target)

        logger.info(f"Launching: {' '.join(cmd)}")

        try:
            subprocess.Popen(
                cmd,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True
            )
        except OSError as e:
            logger.error(f"Launch failed: {e}")
            raise LaunchError(f"Could not start {cmd[0]}: {e}")
