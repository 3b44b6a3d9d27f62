"""
Central configuration — the settings a Copado function run starts with.

Created once by the caller and handed to every component.  Field names
are snake_case; the camelCase aliases match the payload Copado passes in.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# mcdev's project config and the auth file it reads credentials from
DEFAULT_CONFIG_FILE = ".mcdev.json"
DEFAULT_AUTH_FILE = ".mcdev-auth.json"


class CentralConfig(BaseModel):
    """Read-only settings shared by all helper components."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    config_file_path: Path = Field(default=Path(DEFAULT_CONFIG_FILE), alias="configFilePath")
    install_mcdev_locally: bool = Field(default=False, alias="installMcdevLocally")
    mcdev_version: str = Field(default="", alias="mcdevVersion")
    mcdev_auth_file: Path = Field(default=Path(DEFAULT_AUTH_FILE), alias="mcdevAuthFile")
    debug: bool = False

    @property
    def installs_from_branch(self) -> bool:
        """Whether ``mcdev_version`` names a branch (``#branch``) rather than a release."""
        return self.mcdev_version.startswith("#")
