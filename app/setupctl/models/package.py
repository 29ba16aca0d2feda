"""Package manager models.

Each supported package manager is a variant of a closed enum that knows
its own executable and how to build an exact-match install command.
"""

from enum import Enum


class PackageManager(str, Enum):
    """Package managers the bootstrap runner can drive."""

    WINGET = "winget"
    CHOCO = "choco"
    SCOOP = "scoop"
    APT = "apt"

    @property
    def executable(self) -> str:
        """Name of the executable that must be on PATH."""
        if self is PackageManager.APT:
            return "apt-get"
        return self.value

    def install_args(self, package: str) -> list[str]:
        """Build the install command for a single package identifier.

        Args:
            package: Package identifier, already trimmed.

        Returns:
            Command line as a list of arguments.

        Raises:
            ValueError: If the identifier is empty.
        """
        if not package:
            msg = "Package identifier cannot be empty"
            raise ValueError(msg)

        if self is PackageManager.WINGET:
            return [
                "winget",
                "install",
                "--id",
                package,
                "--exact",
                "--silent",
                "--accept-package-agreements",
                "--accept-source-agreements",
            ]
        if self is PackageManager.CHOCO:
            return ["choco", "install", package, "--yes", "--exact"]
        if self is PackageManager.SCOOP:
            return ["scoop", "install", package]
        return ["sudo", "apt-get", "install", "-y", package]

    def failure_hints(self) -> list[str]:
        """Remediation hints for a failed install."""
        if self is PackageManager.WINGET:
            return [
                "Check the identifier with 'winget search --exact <id>'.",
                "Some packages need an elevated (administrator) shell.",
            ]
        if self is PackageManager.CHOCO:
            return [
                "Check the identifier with 'choco search --exact <id>'.",
                "Chocolatey installs require an elevated (administrator) shell.",
            ]
        if self is PackageManager.SCOOP:
            return ["Check that the bucket providing this package is added ('scoop bucket list')."]
        return [
            "Run 'sudo apt-get update' to refresh package lists.",
            "Check the name with 'apt-cache policy <name>'.",
        ]
