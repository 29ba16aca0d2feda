"""Command wrappers.

Each wrapper validates its arguments, runs one external command and
reports a CommandOutcome.
"""

from setupctl.wrappers.base import CommandWrapper, InvalidInputError
from setupctl.wrappers.files import MakeDirectory, NewFile, RemovePath
from setupctl.wrappers.git import GitClone, GitCommit, GitPull, GitPush, GitStatus, GitSwitch
from setupctl.wrappers.scaffold import Scaffold
from setupctl.wrappers.wifi import WifiConnect, WifiDisconnect, WifiProfiles, WifiStatus

__all__ = [
    "CommandWrapper",
    "GitClone",
    "GitCommit",
    "GitPull",
    "GitPush",
    "GitStatus",
    "GitSwitch",
    "InvalidInputError",
    "MakeDirectory",
    "NewFile",
    "RemovePath",
    "Scaffold",
    "WifiConnect",
    "WifiDisconnect",
    "WifiProfiles",
    "WifiStatus",
]
