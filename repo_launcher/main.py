"""
Command-line entry point for Repo Launcher.

Lists repos found under the configured folders (pinned first, with live git
status), toggles pins, forces rescans and opens a repo in the configured
editor, terminal or file manager.
"""

import argparse
import asyncio
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from repo_launcher.core.config.settings import settings
from repo_launcher.core.storage.data.memory_store import InMemoryKeyValueStore
from repo_launcher.features.catalog.service.catalog import RepoCatalog
from repo_launcher.features.git_status.data.git_adapter import GitCliAdapter
from repo_launcher.features.git_status.domain.interfaces import IGitStatusProbe
from repo_launcher.features.git_status.domain.models import GitStatus
from repo_launcher.features.git_status.service.api import probe_statuses
from repo_launcher.features.launcher.data.process_launcher import ProcessLauncher
from repo_launcher.features.launcher.domain.interfaces import IAppLauncher
from repo_launcher.features.launcher.domain.models import LaunchAction, LaunchError
from repo_launcher.features.launcher.service.api import open_repo
from repo_launcher.features.pins.service.pin_store import PinStore
from repo_launcher.features.repo_scanner.domain.models import Repo, RepoSet
from repo_launcher.features.scan_cache.service.cache import ScanCache
from repo_launcher.features.source_folders.data.path_resolver import normalize_path

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_AMBIGUOUS = 2


@dataclass
class Services:
    """Collaborators a command needs; tests swap in fakes."""
    catalog: RepoCatalog
    pins: PinStore
    probe: IGitStatusProbe
    launcher: IAppLauncher


def setup_logging(verbose: bool = False) -> None:
    """Logs go to stderr so stdout stays a clean listing."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-launcher",
        description="Find, pin and open the repos under your source folders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                          Show repos, pinned first
  %(prog)s --folders "~/code, ~/work" list
  %(prog)s pin ~/code/api                Pin or unpin a repo
  %(prog)s open api --terminal           Open a repo in the terminal
        """
    )
    parser.add_argument(
        "--folders",
        default=None,
        help="Folders to scan (newline, comma or semicolon separated). "
             "Defaults to $REPO_LAUNCHER_FOLDERS."
    )
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        help="Keep cache and pins in memory only"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="List repos")
    list_cmd.add_argument("--no-status", action="store_true", help="Skip git branch/dirty lookups")

    commands.add_parser("refresh", help="Rescan folders and update the cache")

    pin_cmd = commands.add_parser("pin", help="Toggle a pinned repo path")
    pin_cmd.add_argument("path", help="Repo path to pin or unpin")

    open_cmd = commands.add_parser("open", help="Open a repo")
    open_cmd.add_argument("repo", help="Repo name or path")
    target_group = open_cmd.add_mutually_exclusive_group()
    target_group.add_argument("--terminal", action="store_true", help="Open in the terminal")
    target_group.add_argument("--reveal", action="store_true", help="Show in the file manager")

    return parser


def build_services(args: argparse.Namespace) -> Services:
    if args.ephemeral:
        cache_backend = InMemoryKeyValueStore()
        legacy_backend = InMemoryKeyValueStore()
    else:
        # Deferred import: --ephemeral runs never create the database engine.
        from repo_launcher.core.database.connection import init_db
        from repo_launcher.core.storage.data.repository import SqlKeyValueStore

        init_db()
        cache_backend = SqlKeyValueStore(settings.CACHE_NAMESPACE)
        legacy_backend = SqlKeyValueStore(settings.LEGACY_PINS_NAMESPACE)

    return Services(
        catalog=RepoCatalog(ScanCache(cache_backend)),
        pins=PinStore(cache_backend, legacy_backend),
        probe=GitCliAdapter(),
        launcher=ProcessLauncher()
    )


def abbreviate_home(path: str) -> str:
    home = str(Path.home())
    if path == home or path.startswith(home + os.sep):
        return "~" + path[len(home):]
    return path


def printable(text: str) -> str:
    """File names that are not valid UTF-8 are shown with \\xNN escapes."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def format_repo_line(repo: Repo, status: Optional[GitStatus], show_source: bool) -> str:
    marker = "*" if status and status.is_dirty else " "
    line = f"  {marker} {printable(repo.name)}"
    if status and status.branch:
        line += f"  [{status.branch}]"
    if show_source:
        line += f"  ({printable(abbreviate_home(repo.source_folder))})"
    return line


def render(data: RepoSet, pinned_paths: List[str], statuses: Dict[str, GitStatus]) -> str:
    pinned = [repo for repo in data.repos if repo.path in pinned_paths]
    unpinned = [repo for repo in data.repos if repo.path not in pinned_paths]

    def lines_for(repos: List[Repo]) -> List[str]:
        return [
            format_repo_line(repo, statuses.get(repo.path), repo.name in data.duplicate_names)
            for repo in repos
        ]

    output: List[str] = []
    if pinned:
        output.append("Pinned")
        output.extend(lines_for(pinned))
        output.append("Repos")
    output.extend(lines_for(unpinned))
    return "\n".join(output)


def resolve_repo(repos: List[Repo], query: str) -> List[Repo]:
    """Exact path match first, then name match (may return several)."""
    wanted_path = normalize_path(query)
    by_path = [repo for repo in repos if repo.path == wanted_path]
    if by_path:
        return by_path
    return [repo for repo in repos if repo.name == query]


async def load_repos(catalog: RepoCatalog, folders_input: str) -> RepoSet:
    data = catalog.initial(folders_input)
    if data is None:
        data = await catalog.refresh(folders_input)
    return data or RepoSet()


async def cmd_list(args: argparse.Namespace, services: Services, folders_input: str) -> int:
    pinned_paths = services.pins.get()
    cached = services.catalog.initial(folders_input)

    async def show(data: RepoSet) -> None:
        statuses: Dict[str, GitStatus] = {}
        if not args.no_status:
            statuses = await probe_statuses([repo.path for repo in data.repos], services.probe)
        print(render(data, pinned_paths, statuses))

    if cached is not None:
        await show(cached)

    fresh = await services.catalog.refresh(folders_input)
    if fresh is not None and fresh != cached:
        if cached is not None:
            print("-- updated --")
        await show(fresh)
    return EXIT_OK


async def cmd_refresh(services: Services, folders_input: str) -> int:
    data = await services.catalog.refresh(folders_input) or RepoSet()
    print(f"Found {len(data.repos)} repo(s)")
    return EXIT_OK


def cmd_pin(args: argparse.Namespace, services: Services) -> int:
    path = normalize_path(args.path)
    if not path:
        print("A path is required", file=sys.stderr)
        return EXIT_NOT_FOUND

    updated = services.pins.toggle(path)
    state = "Pinned" if path in updated else "Unpinned"
    print(f"{state} {printable(path)}")
    return EXIT_OK


async def cmd_open(args: argparse.Namespace, services: Services, folders_input: str) -> int:
    data = await load_repos(services.catalog, folders_input)
    matches = resolve_repo(list(data.repos), args.repo)

    if not matches:
        print(f"No repo matches {args.repo!r}", file=sys.stderr)
        return EXIT_NOT_FOUND
    if len(matches) > 1:
        print(f"{args.repo!r} is ambiguous:", file=sys.stderr)
        for repo in matches:
            print(f"  {printable(repo.path)}", file=sys.stderr)
        return EXIT_AMBIGUOUS

    if args.terminal:
        action = LaunchAction.TERMINAL
    elif args.reveal:
        action = LaunchAction.FILE_MANAGER
    else:
        action = LaunchAction.EDITOR

    target = open_repo(matches[0], action, launcher=services.launcher)
    print(f"Opened {printable(target)}")
    return EXIT_OK


async def run(args: argparse.Namespace, services: Services) -> int:
    folders_input = args.folders if args.folders is not None else settings.REPOS_FOLDERS
    logger.debug(f"Folders setting: {folders_input!r}")

    # Pins from the previous storage scheme are imported once, before anything reads them.
    services.pins.migrate_if_empty()

    if args.command == "list":
        return await cmd_list(args, services, folders_input)
    if args.command == "refresh":
        return await cmd_refresh(services, folders_input)
    if args.command == "pin":
        return cmd_pin(args, services)
    return await cmd_open(args, services, folders_input)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    services = build_services(args)

    try:
        return asyncio.run(run(args, services))
    except LaunchError as e:
        print(str(e), file=sys.stderr)
        return EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
