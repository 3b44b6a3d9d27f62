"""
mcdev provisioning — install SFMC DevTools, write its credentials, push results.

Each step shells out through the fail-fast executor, so a failed npm or
git call raises CommandError to the function's entry point.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mcdev_copado.adapters.shell.command import CommandExecutor
from mcdev_copado.adapters.shell.filesystem import save_json_file
from mcdev_copado.core.config.loader import MissingInputError
from mcdev_copado.core.models.config import CentralConfig
from mcdev_copado.core.observability.log import Log

logger = logging.getLogger(__name__)

MCDEV_REPO = "accenture/sfmc-devtools"
_NPM_LINK_FLAGS = "--no-audit --no-fund --ignore-scripts --omit=dev --omit=peer --omit=optional"


class McdevTools:
    """Provide the mcdev CLI and its credentials for the current run."""

    def __init__(
        self,
        config: CentralConfig,
        log: Log,
        executor: CommandExecutor | None = None,
        cwd: Path | None = None,
    ):
        self._config = config
        self._log = log
        self._cwd = cwd or Path.cwd()
        self._executor = executor or CommandExecutor(log, cwd=self._cwd)

    def provide_mcdev_tools(self) -> None:
        """Install mcdev and print its version.

        Uses the pre-packaged mcdev via ``npm link`` unless the config asks
        for a local install, in which case ``mcdev_version`` selects either
        a release (``7.1.0``) or a branch of the git repo (``#develop``).
        """
        if (self._cwd / "package.json").is_file():
            self._log.debug("package.json found, assuming npm was already initialized")
        else:
            self._executor.exec_command("Initializing npm", ["npm init -y"], "Completed initializing NPM")

        if not self._config.install_mcdev_locally:
            self._executor.exec_command(
                "Initializing Accenture SFMC DevTools (packaged version)",
                [f"npm link mcdev {_NPM_LINK_FLAGS}", "mcdev --version"],
                "Completed installing Accenture SFMC DevTools",
            )
            return

        if self._config.installs_from_branch:
            installer = f"{MCDEV_REPO}{self._config.mcdev_version}"
        elif not self._config.mcdev_version:
            msg = "Please specify mcdev_version in pipeline & environment settings"
            self._log.error(msg)
            raise MissingInputError(msg)
        else:
            installer = f"mcdev@{self._config.mcdev_version}"

        logger.debug("Installing mcdev from %s", installer)
        self._executor.exec_command(
            f"Initializing Accenture SFMC DevTools ({installer})",
            [f"npm install {installer}", "node ./node_modules/mcdev/lib/cli.js --version"],
            "Completed installing Accenture SFMC DevTools",
        )

    def provide_mcdev_credentials(self, credentials: Mapping[str, Any]) -> Path:
        """Write the credentials file mcdev authenticates with.

        Returns:
            Path of the written file.
        """
        self._log.info("Provide authentication")
        target = self._config.mcdev_auth_file
        if not target.is_absolute():
            target = self._cwd / target
        save_json_file(target, dict(credentials), beautify=True)
        return target

    def push(self, destination_branch: str) -> None:
        """Push the current branch state after a successful deployment."""
        self._executor.exec_command(
            f"Pushing updates to {destination_branch} branch",
            [f'git push origin "{destination_branch}"'],
            "Completed pushing branch",
        )
