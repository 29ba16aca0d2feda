"""Protected filesystem locations that wrappers must never delete.

Patterns are glob-style. Patterns starting with ~ are expanded to the
user's home directory. Windows drive paths are compared
case-insensitively.
"""

import fnmatch
import ntpath
import os
import re
from collections.abc import Iterable
from pathlib import Path, PureWindowsPath

from setupctl.core.paths import get_config_dir

_WINDOWS_DRIVE = re.compile(r"^[A-Za-z]:[\\/]")

# Locations protected only as themselves; their contents may be removed.
EXACT_PROTECTED_PATTERNS: list[str] = [
    "/",
    "?:/",
    "~",
]

# Locations protected together with everything beneath them.
TREE_PROTECTED_PATTERNS: list[str] = [
    # Windows
    "?:/Windows*",
    "?:/Program Files*",
    "?:/ProgramData*",
    "?:/Boot",
    "?:/Recovery",
    "?:/System Volume Information",
    "?:/$Recycle.Bin",
    # Unix
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/private/etc",
    "/lib*",
    "/proc",
    "/sbin",
    "/sys",
    "/usr",
    "/var",
    # macOS
    "/System",
    "/Library",
    # Credentials
    "~/.ssh",
    "~/.gnupg",
]


def _normalize(path: str) -> tuple[str, bool]:
    """Normalize a path for matching.

    Returns:
        Tuple of (posix-style absolute path, is_windows_path).
    """
    if _WINDOWS_DRIVE.match(path):
        if os.name == "nt":
            # Follows junctions and expands 8.3 short names
            path = str(Path(path).resolve())
        return PureWindowsPath(ntpath.normpath(path)).as_posix(), True
    return Path(path).expanduser().resolve().as_posix(), False


def _expand(pattern: str) -> str:
    """Expand a leading ~ in a pattern to the home directory."""
    if pattern == "~" or pattern.startswith("~/"):
        return Path.home().as_posix() + pattern[1:]
    return pattern


def _matches(path: str, pattern: str, windows: bool) -> bool:
    if windows:
        return fnmatch.fnmatchcase(path.lower(), pattern.lower())
    return fnmatch.fnmatchcase(path, pattern)


def is_protected_path(path: str, extra_patterns: Iterable[str] = ()) -> bool:
    """Check whether a path must not be deleted.

    A path is protected when it equals an exact-protected location, or
    equals or lies beneath a tree-protected location (built-in patterns,
    the setupctl config directory and any extra patterns).

    Args:
        path: Filesystem path to check; relative paths are resolved
            against the current directory.
        extra_patterns: Additional tree-protected glob patterns.

    Returns:
        True if the path matches any protected pattern, False otherwise.
    """
    normalized, windows = _normalize(path)
    candidate = normalized.rstrip("/") or "/"
    if windows and len(candidate) == 2:
        candidate += "/"

    for pattern in EXACT_PROTECTED_PATTERNS:
        if _matches(candidate, _expand(pattern), windows):
            return True

    tree_patterns = [*TREE_PROTECTED_PATTERNS, get_config_dir().as_posix(), *extra_patterns]
    for pattern in tree_patterns:
        expanded = _expand(pattern).rstrip("/")
        if _matches(candidate, expanded, windows) or _matches(
            candidate, expanded + "/*", windows
        ):
            return True

    return False
