"""Bootstrap a machine from a package list file."""

from setupctl.bootstrap.listfile import PackageListError, parse_package_list, read_package_list
from setupctl.bootstrap.runner import (
    BootstrapError,
    BootstrapRunner,
    BootstrapSummary,
    PackageInstall,
    PackageResult,
)

__all__ = [
    "BootstrapError",
    "BootstrapRunner",
    "BootstrapSummary",
    "PackageInstall",
    "PackageListError",
    "PackageResult",
    "parse_package_list",
    "read_package_list",
]
