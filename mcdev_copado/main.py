"""
mcdev-copado — CLI entrypoint.

Usage:
    python -m mcdev_copado.main --help
    python -m mcdev_copado.main exec "mcdev retrieve MyCred/MyBU"
    python -m mcdev_copado.main bu-name MyCred 7281698
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import NoReturn

import click

from mcdev_copado import __version__
from mcdev_copado.adapters.shell.command import CommandError, CommandExecutor
from mcdev_copado.adapters.shell.filesystem import load_json_file
from mcdev_copado.core.config.loader import ConfigError, load_config
from mcdev_copado.core.models.config import CentralConfig
from mcdev_copado.core.observability.log import Log
from mcdev_copado.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="mcdev-copado")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to mcdev-copado.yml (default: auto-detect, then environment).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """mcdev-copado — run SFMC DevTools steps inside a Copado function."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("MCDEV_LOG_LEVEL", "PROGRESS")

    setup_logging(
        level=level,
        log_file=os.environ.get("MCDEV_LOG_FILE"),
        log_file_level=os.environ.get("MCDEV_LOG_FILE_LEVEL"),
    )


def _fail(message: str, exit_code: int = 1) -> NoReturn:
    click.secho(f"❌ {message}", fg="red", err=True)
    sys.exit(exit_code)


def _config(ctx: click.Context) -> CentralConfig:
    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        _fail(str(e))


@cli.command("exec")
@click.argument("commands", nargs=-1, required=True)
@click.option("--status", "return_status", is_flag=True,
              help="Report the exit code instead of failing.")
@click.option("--pre", "pre_msg", default=None, help="Progress message shown before running.")
@click.option("--post", "post_msg", default=None, help="Message shown after success.")
def exec_command(
    commands: tuple[str, ...],
    return_status: bool,
    pre_msg: str | None,
    post_msg: str | None,
) -> None:
    """Run COMMANDS in order, stopping at the first failure."""
    executor = CommandExecutor(Log())

    if return_status:
        status = executor.exec_command_return_status(pre_msg, list(commands), post_msg)
        # No status (killed or never started) still has to fail the step
        sys.exit(1 if status is None else status)

    try:
        executor.exec_command(pre_msg, list(commands), post_msg)
    except CommandError as e:
        _fail(str(e), e.status or 1)


@cli.command("bu-name")
@click.argument("credential")
@click.argument("mid")
@click.pass_context
def bu_name(ctx: click.Context, credential: str, mid: str) -> None:
    """Print the credential/BU name mcdev uses for CREDENTIAL and MID."""
    from mcdev_copado.core.services.bu_resolver import BuResolver

    resolver = BuResolver(_config(ctx), Log())
    try:
        result = resolver.get_bu_name(credential, mid)
    except ConfigError as e:
        _fail(str(e))

    if result is None:
        click.secho(f"⚠️  No business units declared for {credential}", fg="yellow", err=True)
        return
    click.echo(result)


@cli.command("env-vars")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--pretty", is_flag=True, help="Indent the output.")
def env_vars(file: str, pretty: bool) -> None:
    """Normalize the environment variables stored in FILE (JSON)."""
    from mcdev_copado.core.services.env_vars import convert_env_variables

    try:
        data = load_json_file(file)
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in {file}: {e}")
    if not isinstance(data, dict):
        _fail(f"Expected a JSON object in {file}, got {type(data).__name__}")

    try:
        convert_env_variables(data)
    except ConfigError as e:
        _fail(str(e))

    click.echo(json.dumps(data, indent=4 if pretty else None, ensure_ascii=False))


@cli.command("install")
@click.pass_context
def install(ctx: click.Context) -> None:
    """Install SFMC DevTools as configured."""
    from mcdev_copado.core.services.mcdev_tools import McdevTools

    tools = McdevTools(_config(ctx), Log())
    try:
        tools.provide_mcdev_tools()
    except ConfigError as e:
        _fail(str(e))
    except CommandError as e:
        _fail(str(e), e.status or 1)


@cli.command("auth")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def auth(ctx: click.Context, file: str) -> None:
    """Write the mcdev credentials file from the credentials in FILE (JSON)."""
    from mcdev_copado.core.services.mcdev_tools import McdevTools

    try:
        credentials = load_json_file(file)
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in {file}: {e}")
    if not isinstance(credentials, dict):
        _fail(f"Expected a JSON object in {file}, got {type(credentials).__name__}")

    target = McdevTools(_config(ctx), Log()).provide_mcdev_credentials(credentials)
    click.echo(str(target))


@cli.command("push")
@click.argument("branch")
@click.pass_context
def push(ctx: click.Context, branch: str) -> None:
    """Push the current state to BRANCH on origin."""
    from mcdev_copado.core.services.mcdev_tools import McdevTools

    try:
        McdevTools(_config(ctx), Log()).push(branch)
    except CommandError as e:
        _fail(str(e), e.status or 1)


if __name__ == "__main__":
    cli()
