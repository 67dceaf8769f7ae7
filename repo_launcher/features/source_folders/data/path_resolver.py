import os
from pathlib import Path

class PathResolver:
    """
    Lexical path normalization. Never touches the filesystem beyond
    reading the current working directory.
    """

    @staticmethod
    def normalize(input_path: str) -> str:
        """
        Returns the absolute, normalized form of input_path,
        or "" when the input is blank (callers drop it).
        """
        trimmed = input_path.strip()
        if not trimmed:
            return ""

        # "~" is replaced textually, so "~/code" and "~code" both resolve under home.
        if trimmed.startswith("~"):
            trimmed = f"{Path.home()}{os.sep}{trimmed[1:]}"

        return os.path.abspath(trimmed)

def normalize_path(input_path: str) -> str:
    return PathResolver.normalize(input_path)
