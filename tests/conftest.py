"""
Shared test fixtures and configuration.
"""

import json
import logging
from pathlib import Path

import pytest

from mcdev_copado.core.models.config import CentralConfig
from mcdev_copado.core.observability.log import Log


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def escalations() -> list[str]:
    """Messages the host's escalation hook received."""
    return []


@pytest.fixture
def log(escalations: list[str]) -> Log:
    """A Log wired to record escalations."""
    return Log(logging.getLogger("mcdev_copado.tests"), on_escalate=escalations.append)


@pytest.fixture
def mcdev_json(tmp_path: Path) -> Path:
    """A .mcdev.json with one credential and two business units."""
    path = tmp_path / ".mcdev.json"
    path.write_text(json.dumps({
        "credentials": {
            "C1": {"eid": 100, "businessUnits": {"bu1": "100", "bu2": "200"}},
        },
    }))
    return path


@pytest.fixture
def central_config(mcdev_json: Path, tmp_path: Path) -> CentralConfig:
    """Config pointing at the temp .mcdev.json."""
    return CentralConfig(
        config_file_path=mcdev_json,
        mcdev_auth_file=tmp_path / ".mcdev-auth.json",
    )
