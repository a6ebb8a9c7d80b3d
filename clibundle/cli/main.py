# -*- coding: utf-8 -*-
"""``clibundle`` entry point."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from .. import __version__
from ..constant import DEFAULT_LOG_LEVEL, ENV_FILE, LOG_LEVEL_ENV, WORKING_DIR
from .ai_cmd import ai_group, apply_cmd
from .init_cmd import init_cmd
from .tools_cmd import install_cmd, list_cmd, uninstall_cmd, update_cmd
from .utils import prompt_choice

logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def resolve_log_level(option: Optional[str]) -> str:
    """``--log-level``, else ``$CLIBUNDLE_LOG_LEVEL``, else the default.

    An unknown environment value is reported and replaced by the default.
    """
    if option:
        return option
    level = os.environ.get(LOG_LEVEL_ENV, "").strip() or DEFAULT_LOG_LEVEL
    if level.lower() not in LOG_LEVELS:
        click.echo(
            click.style(
                f"Warning: ignoring unknown {LOG_LEVEL_ENV}={level!r}, "
                f"using {DEFAULT_LOG_LEVEL}",
                fg="yellow",
            ),
            err=True,
        )
        return DEFAULT_LOG_LEVEL
    return level


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level.upper())


def load_env_file(working_dir: Path) -> None:
    """Load ``<working_dir>/.env`` without overriding the environment."""
    env_path = working_dir / ENV_FILE
    if env_path.is_file():
        load_dotenv(env_path, override=False)
        logger.debug("Loaded environment variables from %s", env_path)
    else:
        logger.debug(
            ".env file not found at %s, using existing environment variables",
            env_path,
        )


_MENU = {
    "Install CLI Bundle Tools": "install",
    "Update CLI Bundle Tools": "update",
    "Uninstall CLI Bundle Tools": "uninstall",
    "Apply AI provider settings": "apply",
    "Exit": "exit",
}


def main_menu(ctx: click.Context) -> None:
    """Interactive menu shown when no sub-command is given."""
    click.echo(click.style(f"\n{'=' * 40}", fg="blue"))
    click.echo(click.style("  CLI Bundle Tool Manager", fg="blue"))
    click.echo(click.style(f"{'=' * 40}\n", fg="blue"))

    choice = _MENU[
        prompt_choice(
            "Please select an action:",
            options=list(_MENU),
            default="Exit",
        )
    ]
    if choice == "exit":
        click.echo("Goodbye!")
        return
    if choice == "apply":
        ctx.invoke(apply_cmd)
        return
    command = {
        "install": install_cmd,
        "update": update_cmd,
        "uninstall": uninstall_cmd,
    }[choice]
    ctx.invoke(command)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="clibundle")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help=f"Log level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
)
@click.option(
    "--working-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=f"Configuration directory (default: {WORKING_DIR})",
)
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: Optional[str],
    working_dir: Optional[Path],
) -> None:
    """CLI Bundle Tool Manager."""
    setup_logging(resolve_log_level(log_level))
    ctx.ensure_object(dict)
    if working_dir is not None or "working_dir" not in ctx.obj:
        ctx.obj["working_dir"] = (
            (working_dir or WORKING_DIR).expanduser().resolve()
        )
    load_env_file(ctx.obj["working_dir"])

    if ctx.invoked_subcommand is None:
        main_menu(ctx)


cli.add_command(init_cmd)
cli.add_command(install_cmd)
cli.add_command(update_cmd)
cli.add_command(uninstall_cmd)
cli.add_command(list_cmd)
cli.add_command(ai_group)


if __name__ == "__main__":
    cli()  # pylint: disable=no-value-for-parameter
