"""Adapters — bindings to the shell and filesystem.

Public re-exports for convenient access.
"""

from mcdev_copado.adapters.shell.command import CommandError, CommandExecutor, ExitStatus
from mcdev_copado.adapters.shell.filesystem import load_json_file, save_json_file

__all__ = [
    "CommandError",
    "CommandExecutor",
    "ExitStatus",
    "load_json_file",
    "save_json_file",
]
