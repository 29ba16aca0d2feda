"""Bootstrap package list files.

A list file is UTF-8 text with one package identifier per line. Blank
lines and lines starting with # are ignored.
"""

from pathlib import Path


class PackageListError(Exception):
    """Raised when a package list file cannot be read."""


def parse_package_list(text: str) -> list[str]:
    """Extract package identifiers from list file content.

    Args:
        text: File content.

    Returns:
        Trimmed identifiers in file order.
    """
    packages: list[str] = []
    for line in text.splitlines():
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        packages.append(entry)
    return packages


def read_package_list(path: Path) -> list[str]:
    """Read package identifiers from a list file.

    Args:
        path: Path to the list file.

    Returns:
        Trimmed identifiers in file order.

    Raises:
        PackageListError: If the file is missing, unreadable or not UTF-8.
    """
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise PackageListError(f"Package list not found: {path}") from e
    except UnicodeDecodeError as e:
        raise PackageListError(f"Package list is not valid UTF-8: {path}") from e
    except OSError as e:
        raise PackageListError(f"Failed to read package list {path}: {e}") from e
    return parse_package_list(text)


LIST_TEMPLATE = """\
# setupctl bootstrap list
#
# One package identifier per line, exactly as the package manager's
# catalog names it (e.g. winget IDs like Git.Git).
# Blank lines and lines starting with # are ignored.
"""
