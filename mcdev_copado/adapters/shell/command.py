"""
Shell command executor — run CLI commands synchronously.

Commands run through the shell and inherit stdin/stdout/stderr, so the
output of mcdev, npm and git lands directly in the Copado job log.

Two contracts:
    exec_command               raises CommandError on failure
    exec_command_return_status returns the exit code instead

A list of commands is chained with ``&&``: the first failing step
aborts the rest and its exit code is the result.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from mcdev_copado.core.observability.log import Log

logger = logging.getLogger(__name__)

# None means the process never reported an exit code
# (killed by a signal, or it could not be started at all).
ExitStatus = int | None

Command = str | Sequence[str]


class CommandError(RuntimeError):
    """Raised by the fail-fast executor when a command does not succeed."""

    def __init__(self, command: str, status: ExitStatus, message: str):
        self.command = command
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}")


def join_command(command: Command) -> str:
    """Resolve a command or list of commands into one shell command line."""
    if isinstance(command, str):
        return command
    return " && ".join(command)


class CommandExecutor:
    """Run commands one at a time and report their outcome through ``log``."""

    def __init__(self, log: Log, cwd: Path | None = None):
        self._log = log
        self._cwd = cwd

    def exec_command(
        self,
        pre_msg: str | None,
        command: Command,
        post_msg: str | None = None,
    ) -> None:
        """Execute a command and raise :class:`CommandError` if it fails.

        The failure is logged without escalating so the caller decides
        whether it is fatal.
        """
        line = self._prepare(pre_msg, command)

        status, message = self._run(line)
        if status != 0:
            self._log.failure(f"{status}: {message}", escalate=False)
            raise CommandError(line, status, message)

        if post_msg is not None:
            self._log.debug(f"✔️  {post_msg}")

    def exec_command_return_status(
        self,
        pre_msg: str | None,
        command: Command,
        post_msg: str | None = None,
    ) -> ExitStatus:
        """Execute a command and return its exit code.

        Returns:
            0 on success, the process exit code on failure, or None if
            the process never produced one.
        """
        line = self._prepare(pre_msg, command)

        status, message = self._run(line)
        if status != 0:
            self._log.warn(f"❌  {status}: {message}")
            return status

        if post_msg is not None:
            self._log.progress(f"✔️  {post_msg}")
        return 0

    def _prepare(self, pre_msg: str | None, command: Command) -> str:
        if pre_msg is not None:
            self._log.progress(pre_msg)
        line = join_command(command)
        self._log.debug(f"⚡ {line}")
        return line

    def _run(self, line: str) -> tuple[ExitStatus, str]:
        """Run the command line and return (status, failure message)."""
        try:
            result = subprocess.run(line, shell=True, cwd=self._cwd, check=False)
        except OSError as e:
            logger.debug("Could not start %r: %s", line, e)
            return None, f"Command could not be started: {line}: {e}"

        if result.returncode == 0:
            return 0, ""
        if result.returncode < 0:
            return None, f"Command killed by signal {-result.returncode}: {line}"
        return result.returncode, f"Command failed: {line}"
