"""
Business unit resolution — map a credential + MID to ``credential/bu``.

mcdev addresses business units as ``<credentialName>/<buName>``, while
Copado only knows the credential and the numeric MID of the tenant.
The mapping lives in mcdev's project config (``.mcdev.json``), which is
re-read on every call.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from mcdev_copado.adapters.shell.filesystem import load_json_file
from mcdev_copado.core.config.loader import ConfigError, MissingConfigFileError, MissingInputError
from mcdev_copado.core.models.config import CentralConfig
from mcdev_copado.core.models.mcdev_config import CredentialConfig
from mcdev_copado.core.observability.log import Log

logger = logging.getLogger(__name__)


class AmbiguousResolutionError(ConfigError):
    """Raised when a MID matches no business unit, or more than one."""

    def __init__(self, cred_name: str, mid: str | int, matches: list[str]):
        self.cred_name = cred_name
        self.mid = mid
        self.matches = matches
        super().__init__(f"MID {mid} not found for {cred_name}")


class BuResolver:
    """Resolve business units against the configured ``.mcdev.json``."""

    def __init__(self, config: CentralConfig, log: Log):
        self._config = config
        self._log = log

    def get_bu_name(self, cred_name: str, mid: str | int) -> str | None:
        """Return ``credName/buName`` for the business unit with this MID.

        Returns None when the credential is unknown or declares no
        business units.

        Raises:
            MissingInputError: If cred_name or mid is empty.
            MissingConfigFileError: If the config file does not exist.
            AmbiguousResolutionError: If not exactly one BU has this MID.
        """
        if not cred_name:
            raise MissingInputError('System Property "credentialName" not set')
        if not mid:
            raise MissingInputError('System Property "mid" not set')

        path = self._config.config_file_path
        if not path.is_file():
            raise MissingConfigFileError(f"Could not find config file {path}")

        credential = self._load_credential(path, cred_name)
        if credential is None or credential.business_units is None:
            logger.debug("No business units declared for credential %s", cred_name)
            return None

        matches = [
            bu_name
            for bu_name, bu_mid in credential.business_units.items()
            if bu_mid is not None and str(bu_mid) == str(mid)
        ]
        if len(matches) != 1:
            raise AmbiguousResolutionError(cred_name, mid, matches)

        cred_bu_name = f"{cred_name}/{matches[0]}"
        self._log.debug(f"BU Name is: {cred_bu_name}")
        return cred_bu_name

    @staticmethod
    def _load_credential(path: Path, cred_name: str) -> CredentialConfig | None:
        """Read the config file and validate only the requested credential."""
        try:
            data = load_json_file(path)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a JSON object in {path}, got {type(data).__name__}")
        credentials = data.get("credentials") or {}
        if not isinstance(credentials, dict):
            raise ConfigError(f"Expected \"credentials\" to be an object in {path}")

        entry = credentials.get(cred_name)
        if not entry:
            return None

        try:
            return CredentialConfig.model_validate(entry)
        except ValidationError as e:
            raise ConfigError(f"Invalid credential {cred_name!r} in {path}: {e}") from e
