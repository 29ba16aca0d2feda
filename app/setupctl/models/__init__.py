"""Data models for setupctl."""

from setupctl.models.outcome import CommandOutcome, ErrorKind, Outcome
from setupctl.models.package import PackageManager
from setupctl.models.scaffold import Framework, JsPackageManager

__all__ = [
    "CommandOutcome",
    "ErrorKind",
    "Framework",
    "JsPackageManager",
    "Outcome",
    "PackageManager",
]
