"""
Configuration loader — builds the CentralConfig for a function run.

The config comes from an explicit YAML file (``--config``), a
``mcdev-copado.yml`` found by walking up from the working directory,
or the environment variables the Copado function is started with.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from mcdev_copado.core.models.config import CentralConfig

logger = logging.getLogger(__name__)

# Default config filename
PROJECT_CONFIG_FILE = "mcdev-copado.yml"

# Environment variable → CentralConfig field
_ENV_FIELDS = {
    "MCDEV_CONFIG_FILE_PATH": "config_file_path",
    "MCDEV_INSTALL_LOCALLY": "install_mcdev_locally",
    "MCDEV_VERSION": "mcdev_version",
    "MCDEV_AUTH_FILE": "mcdev_auth_file",
    "MCDEV_DEBUG": "debug",
}

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


class MissingInputError(ConfigError):
    """Raised when a required input (credential, MID, version) is not set."""


class MissingConfigFileError(ConfigError):
    """Raised when an expected configuration file does not exist."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for mcdev-copado.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to mcdev-copado.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> CentralConfig:
    """Load and validate the central configuration.

    Args:
        path: Explicit path to a YAML (or JSON) config file. If None,
            searches upward and falls back to the environment.

    Returns:
        Validated CentralConfig model.

    Raises:
        MissingConfigFileError: If an explicit path does not exist.
        ConfigError: If the file is unreadable or invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found — using environment", PROJECT_CONFIG_FILE)
            return config_from_env()

    if not path.is_file():
        raise MissingConfigFileError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        return CentralConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def config_from_env(environ: Mapping[str, str] | None = None) -> CentralConfig:
    """Build the config from MCDEV_* environment variables."""
    env = os.environ if environ is None else environ
    data: dict[str, object] = {}
    for var, field in _ENV_FIELDS.items():
        if var not in env:
            continue
        value: object = env[var]
        if field in ("install_mcdev_locally", "debug"):
            value = str(value).strip().lower() in _TRUTHY
        data[field] = value

    try:
        return CentralConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in environment: {e}") from e
