"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path_factory: pytest.TempPathFactory):
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(config_home)}):
        yield config_home


@pytest.fixture
def package_list(tmp_path: Path) -> Path:
    """Package list with comments and blank lines."""
    path = tmp_path / "packages.txt"
    path.write_text("# comment\n\nGit.Git\nMicrosoft.PowerShell\n", encoding="utf-8")
    return path


@pytest.fixture
def mock_netsh_profiles_output() -> str:
    """Sample `netsh wlan show profiles` output."""
    return """
Profiles on interface Wi-Fi:

Group policy profiles (read only)
---------------------------------
    <None>

User profiles
-------------
    All User Profile     : HomeNet
    All User Profile     : Office 5G
    All User Profile     : Cafe-Guest
"""
