import asyncio
import logging
import os
from typing import Optional
from repo_launcher.core.config.settings import settings
from ..domain.interfaces import IGitStatusProbe

logger = logging.getLogger(__name__)

class GitCliAdapter(IGitStatusProbe):
    """
    Shells out to the git binary. Every failure collapses to "no status".
    """

    def __init__(self, git_binary: Optional[str] = None, timeout: Optional[float] = None):
        self.git_binary = git_binary or settings.GIT_BINARY
        self.timeout = timeout if timeout is not None else settings.GIT_TIMEOUT_SECONDS

    async def branch(self, path: str) -> Optional[str]:
        output = await self._run_git(path, "rev-parse", "--abbrev-ref", "HEAD")
        if output is None:
            return None

        branch = output.strip()
        # rev-parse prints the literal "HEAD" when detached.
        if not branch or branch == "HEAD":
            return None
        return branch

    async def is_dirty(self, path: str) -> bool:
        output = await self._run_git(path, "status", "--porcelain")
        if output is None:
            return False
        return len(output.strip()) > 0

    async def _run_git(self, path: str, *args: str) -> Optional[str]:
        """
        Runs git with cwd=path. Returns stdout, or None if the path has no
        .git marker, git cannot be started, times out, or exits non-zero.
        """
        if not os.path.exists(os.path.join(path, ".git")):
            return None

        cmd = [self.git_binary, *args]

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=path,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except (OSError, ValueError) as e:
            logger.debug(f"Could not start {' '.join(cmd)} in {path}: {e}")
            return None

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.debug(f"git {' '.join(args)} timed out in {path}")
            try:
                process.kill()
                await process.wait()
            except ProcessLookupError:
                pass
            return None

        if process.returncode != 0:
            error_msg = stderr.decode(errors="replace").strip() if stderr else ""
            logger.debug(f"git {' '.join(args)} failed in {path}: {error_msg}")
            return None

        return stdout.decode("utf-8", errors="replace")
