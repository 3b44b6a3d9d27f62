"""
Filesystem helpers — JSON files handed to or read from the mcdev CLI.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def save_json_file(path: Path | str, data: Any, beautify: bool = False) -> None:
    """Serialize ``data`` to JSON and write it to ``path``.

    Args:
        path: Destination file; overwritten if it exists.
        data: Any JSON-serializable structure.
        beautify: Indent with 4 spaces when True, single line otherwise.
    """
    if beautify:
        content = json.dumps(data, indent=4, ensure_ascii=False)
    else:
        content = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    target = Path(path)
    target.write_text(content, encoding="utf-8")
    logger.debug("Written %d bytes to %s", len(content), target)


def load_json_file(path: Path | str) -> Any:
    """Read and parse a UTF-8 JSON file."""
    return json.loads(Path(path).read_text(encoding="utf-8"))
