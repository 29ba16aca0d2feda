"""User configuration for setupctl.

Settings are loaded once per CLI invocation and handed to every wrapper
and runner explicitly. Configuration is stored in
~/.config/setupctl/config.toml; a missing file means all defaults.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from setupctl.core.paths import get_config_path, get_package_list_path
from setupctl.models.package import PackageManager
from setupctl.models.scaffold import JsPackageManager

logger = logging.getLogger(__name__)


class GitSettings(BaseModel):
    """Defaults for the git wrappers."""

    model_config = ConfigDict(extra="forbid")

    default_remote: Annotated[str, Field(min_length=1)] = "origin"
    default_branch: Annotated[str, Field(min_length=1)] = "main"


class WifiSettings(BaseModel):
    """Defaults for the WiFi wrappers."""

    model_config = ConfigDict(extra="forbid")

    interface: str | None = None


class ScaffoldSettings(BaseModel):
    """Defaults for project scaffolding."""

    model_config = ConfigDict(extra="forbid")

    package_manager: JsPackageManager = JsPackageManager.NPM


class Settings(BaseModel):
    """Top-level setupctl configuration.

    Attributes:
        package_manager: Package manager used by bootstrap.
        package_list: Bootstrap list file. None uses the config directory default.
        command_timeout: Seconds before an external command is abandoned (None = no limit).
        protected_paths: Extra glob patterns the remove wrapper must refuse.
        git: Git wrapper defaults.
        wifi: WiFi wrapper defaults.
        scaffold: Scaffolding defaults.
    """

    model_config = ConfigDict(extra="forbid")

    package_manager: PackageManager = PackageManager.WINGET
    package_list: Path | None = None
    command_timeout: Annotated[
        float | None,
        Field(ge=1, le=86400, description="Timeout in seconds (1-86400)"),
    ] = None
    protected_paths: list[str] = Field(default_factory=list)
    git: GitSettings = Field(default_factory=GitSettings)
    wifi: WifiSettings = Field(default_factory=WifiSettings)
    scaffold: ScaffoldSettings = Field(default_factory=ScaffoldSettings)

    @property
    def effective_package_list(self) -> Path:
        """Bootstrap list path, falling back to the config directory default."""
        if self.package_list is not None:
            return self.package_list.expanduser()
        return get_package_list_path()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Explicit config file. If None, the default path is used and a
            missing file yields default settings.

    Returns:
        Validated Settings object.

    Raises:
        ConfigNotFoundError: If an explicit path does not exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        logger.debug("No config at %s, using defaults", config_path)
        return Settings()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        settings: Settings to save.
        path: Destination. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # TOML has no null, so unset optionals are dropped
    data = settings.model_dump(mode="json", exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
