# -*- coding: utf-8 -*-
"""CLI commands to install, update, uninstall and list AI CLI tools."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

import click

from ..constant import TOOLS_FILE
from ..exceptions import CliBundleError
from ..tools import PackageManager, ToolCatalog, ToolDefinition
from .utils import fail, prompt_confirm, prompt_multi_select


def tools_json_path(ctx: click.Context) -> Path:
    return (ctx.obj or {})["working_dir"] / TOOLS_FILE


def load_catalog(ctx: click.Context) -> ToolCatalog:
    try:
        return ToolCatalog.load(tools_json_path(ctx))
    except CliBundleError as e:
        fail(str(e))


def _package_manager(ctx: click.Context) -> PackageManager:
    # Tests put a fake on ctx.obj.
    return (ctx.obj or {}).get("package_manager") or PackageManager()


def show_summary(operation: str, success: int, failed: int) -> None:
    click.echo(f"\n{'═' * 40}")
    click.echo("  Operation Summary")
    click.echo(f"{'═' * 40}")
    click.echo(click.style(f"  [Success] {operation}: {success}", fg="green"))
    if failed:
        click.echo(click.style(f"  [Failed] {operation}: {failed}", fg="red"))
    click.echo(f"{'═' * 40}\n")


def _run_for_tools(
    operation: str,
    action: Callable[[str], bool],
    tools: List[ToolDefinition],
) -> None:
    success = failed = 0
    for tool in tools:
        click.echo(f"{operation}: {tool.name} ({tool.package_name})")
        if action(tool.package_name):
            success += 1
        else:
            failed += 1
    show_summary(operation, success, failed)
    if failed:
        raise SystemExit(1)


def _select_tools(
    catalog: ToolCatalog,
    tool_id: Optional[str],
    all_tools: bool,
    candidates: List[ToolDefinition],
    verb: str,
) -> List[ToolDefinition]:
    """Resolve the command's targets: one id, ``--all`` or interactive."""
    if all_tools:
        return candidates
    if tool_id:
        tool = catalog.get(tool_id)
        if tool is None:
            fail(f'Tool "{tool_id}" not found in configuration')
        return [tool]
    if not candidates:
        click.echo(click.style(f"No tools available to {verb}.", fg="yellow"))
        return []
    options = [(f"{t.name} - {t.install_type} package", t) for t in candidates]
    return prompt_multi_select(f"Select tools to {verb}:", options=options)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@click.command("install")
@click.argument("tool_id", required=False, default=None)
@click.option("--all", "-a", "all_tools", is_flag=True, help="All tools")
@click.pass_context
def install_cmd(
    ctx: click.Context,
    tool_id: Optional[str],
    all_tools: bool,
) -> None:
    """Install CLI tools (all not-yet-installed ones with --all)."""
    catalog = load_catalog(ctx)
    tools = _select_tools(
        catalog,
        tool_id,
        all_tools,
        catalog.uninstalled_tools(),
        "install",
    )
    _run_for_tools("Installation", _package_manager(ctx).install, tools)


@click.command("update")
@click.argument("tool_id", required=False, default=None)
@click.option("--all", "-a", "all_tools", is_flag=True, help="All tools")
@click.pass_context
def update_cmd(
    ctx: click.Context,
    tool_id: Optional[str],
    all_tools: bool,
) -> None:
    """Update CLI tools (all installed ones with --all)."""
    catalog = load_catalog(ctx)
    tools = _select_tools(
        catalog,
        tool_id,
        all_tools,
        catalog.installed_tools(),
        "update",
    )
    _run_for_tools("Update", _package_manager(ctx).update, tools)


@click.command("uninstall")
@click.argument("tool_id", required=False, default=None)
@click.option("--all", "-a", "all_tools", is_flag=True, help="All tools")
@click.option("--yes", "-y", is_flag=True, help="Do not ask to confirm")
@click.pass_context
def uninstall_cmd(
    ctx: click.Context,
    tool_id: Optional[str],
    all_tools: bool,
    yes: bool,
) -> None:
    """Uninstall CLI tools (all installed ones with --all)."""
    catalog = load_catalog(ctx)
    tools = _select_tools(
        catalog,
        tool_id,
        all_tools,
        catalog.installed_tools(),
        "uninstall",
    )
    if not tools:
        return
    names = "\n".join(t.name for t in tools)
    if not yes and not prompt_confirm(
        f"Are you sure you want to uninstall the following tools?\n{names}",
    ):
        click.echo("Cancelled.")
        return
    _run_for_tools("Uninstallation", _package_manager(ctx).uninstall, tools)


@click.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """List enabled tools with their installation status."""
    catalog = load_catalog(ctx)
    click.echo("\nAvailable Tools:")
    click.echo("================")
    for tool in catalog.enabled_tools():
        status = (
            click.style("✓ Installed", fg="green")
            if catalog.is_installed(tool)
            else click.style("✗ Not installed", fg="red")
        )
        click.echo(f"{tool.name} ({tool.id}): {status}")
