# -*- coding: utf-8 -*-
"""CLI command to scaffold tools.json and ai.json."""
from __future__ import annotations

import click

from ..providers import default_ai_config, save_ai_config
from ..tools import default_tools_data, save_tools_json
from .ai_cmd import ai_config_path
from .tools_cmd import tools_json_path
from .utils import prompt_confirm


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite existing files")
@click.pass_context
def init_cmd(ctx: click.Context, force: bool) -> None:
    """Initialize configuration files in the working dir."""
    tools_path = tools_json_path(ctx)
    ai_path = ai_config_path(ctx)

    existing = [p for p in (tools_path, ai_path) if p.is_file()]
    if existing and not force:
        click.echo(
            click.style("Configuration file already exists", fg="yellow"),
        )
        if not prompt_confirm(
            "Do you want to overwrite the existing configuration file?",
        ):
            click.echo(click.style("Initialization cancelled", fg="yellow"))
            return

    save_tools_json(default_tools_data(), tools_path)
    save_ai_config(default_ai_config(), ai_path)

    click.echo(click.style("✓ Configuration initialized", fg="green"))
    click.echo(f"Configuration file location: {tools_path}")
    click.echo(f"AI configuration file location: {ai_path}")
