"""
Log — the leveled message sink handed to every helper component.

Copado shows ``progress`` messages to the user while the function runs
and treats anything written at ERROR as a failed function.  Components
must therefore be explicit about whether a failure should escalate:

    log.failure("3: Command failed: mcdev deploy", escalate=False)

logs at INFO and lets the raised exception decide the outcome, while

    log.error("Please specify mcdev_version")

logs at ERROR and fires the host's escalation hook.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from mcdev_copado.core.observability.logging_config import PROGRESS

EscalationHook = Callable[[str], None]


class Log:
    """Thin wrapper around a :class:`logging.Logger` with a progress level."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        on_escalate: EscalationHook | None = None,
    ):
        self._logger = logger or logging.getLogger("mcdev_copado")
        self._on_escalate = on_escalate

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, msg: str) -> None:
        self._logger.debug(msg)

    def progress(self, msg: str) -> None:
        self._logger.log(PROGRESS, msg)

    def info(self, msg: str) -> None:
        self._logger.info(msg)

    def warn(self, msg: str) -> None:
        self._logger.warning(msg)

    def error(self, msg: str) -> None:
        """Log an error that marks the surrounding function as failed."""
        self.failure(msg, escalate=True)

    def failure(self, msg: str, *, escalate: bool) -> None:
        """Report a failure, escalating to the host only when asked to.

        Non-escalating failures are logged at INFO so the host does not
        abort here; the caller is expected to raise instead.
        """
        if not escalate:
            self._logger.info(msg)
            return

        self._logger.error(msg)
        if self._on_escalate is not None:
            self._on_escalate(msg)
