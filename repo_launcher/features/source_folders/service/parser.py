import logging
import os
import re
import stat
from typing import List

from ..data.path_resolver import normalize_path

logger = logging.getLogger(__name__)

# Folder entries may be separated by newlines, commas or semicolons.
FOLDER_SEPARATORS = re.compile(r"[\n,;]")

def parse_source_folders(folders_input: str) -> List[str]:
    """
    Turns the raw folders setting into validated source folders.

    - Splits on newline, comma or semicolon and drops blank pieces.
    - Normalizes each piece (home expansion, absolute path).
    - Removes duplicates, keeping the first occurrence.
    - Keeps only paths that currently exist and are directories.

    Never raises: invalid entries are dropped silently.
    """
    folders: List[str] = []
    seen = set()

    for piece in FOLDER_SEPARATORS.split(folders_input or ""):
        folder = normalize_path(piece)
        if not folder or folder in seen:
            continue
        seen.add(folder)
        folders.append(folder)

    return [folder for folder in folders if _is_existing_directory(folder)]

def _is_existing_directory(path: str) -> bool:
    # Re-checked on every parse; validity is never cached.
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError) as e:
        logger.debug(f"Dropping source folder {path}: {e}")
        return False
