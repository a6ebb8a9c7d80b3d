# -*- coding: utf-8 -*-
"""CLI commands for AI providers, tool bindings and applying them."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..adapters import AdapterRegistry
from ..apply import ApplyEngine, ApplySummary
from ..constant import AI_CONFIG_FILE
from ..exceptions import CliBundleError
from ..providers import ProviderRegistry, mask_api_key
from ..settings import resolve_path
from .utils import fail, prompt_choice


def ai_config_path(ctx: click.Context) -> Path:
    """ai.json inside the working dir resolved by the root command."""
    return (ctx.obj or {})["working_dir"] / AI_CONFIG_FILE


def load_registry(ctx: click.Context) -> ProviderRegistry:
    try:
        return ProviderRegistry.load(ai_config_path(ctx))
    except CliBundleError as e:
        fail(str(e))


def print_summary(summary: ApplySummary) -> None:
    """One ✓ / ✗ line per target, error text for failures."""
    if summary.profile is not None:
        click.echo(f"Provider: {summary.profile}")
    for tool_id, provider_name in (summary.tools or {}).items():
        click.echo(f"{tool_id} → {provider_name}")

    if not summary.results:
        click.echo("No targets to apply.")
        return

    for r in summary.results:
        if r.ok:
            mark = click.style("✓", fg="green")
            click.echo(f"  {mark} {r.target}: {r.file} ({r.type})")
        else:
            mark = click.style("✗", fg="red")
            click.echo(
                f"  {mark} {r.target}: {r.file} ({r.type}) — {r.error}",
            )


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@click.group("ai")
def ai_group() -> None:
    """Manage AI providers and sync them into tool settings files."""


# ---------------------------------------------------------------------------
# providers / use
# ---------------------------------------------------------------------------


@ai_group.command("providers")
@click.pass_context
def providers_cmd(ctx: click.Context) -> None:
    """List providers; * marks the broadcast-mode active provider."""
    registry = load_registry(ctx)
    active = registry.get_active_provider_name()

    providers = registry.list_providers()
    if not providers:
        click.echo("No providers configured.")
        return

    supported = AdapterRegistry().supported_provider_types()
    for p in providers:
        marker = "*" if p.name == active else " "
        note = (
            ""
            if p.type in supported
            else click.style(" (no built-in adapters)", fg="yellow")
        )
        click.echo(f"\n{marker} {p.name} ({p.type}){note}")
        key = mask_api_key(p.api_key) or "(not set)"
        click.echo(f"    {'api_key':10s}: {key}")
        click.echo(f"    {'base_url':10s}: {p.base_url or '(not set)'}")
        click.echo(f"    {'model':10s}: {p.model or '(not set)'}")
    click.echo()


@ai_group.command("use")
@click.argument("name", required=False, default=None)
@click.pass_context
def use_cmd(ctx: click.Context, name: Optional[str]) -> None:
    """Set the broadcast-mode active provider."""
    registry = load_registry(ctx)
    if name is None:
        names = [p.name for p in registry.list_providers()]
        if not names:
            fail("no providers configured")
        name = prompt_choice(
            "Select provider:",
            options=names,
            default=registry.get_active_provider_name() or None,
        )
    try:
        registry.set_active_provider(name)
    except CliBundleError as e:
        fail(str(e))
    click.echo(f"✓ Active provider: {name}")


# ---------------------------------------------------------------------------
# tools / bind / enable / disable
# ---------------------------------------------------------------------------


@ai_group.command("tools")
@click.pass_context
def tools_cmd(ctx: click.Context) -> None:
    """Show per-tool provider bindings."""
    registry = load_registry(ctx)
    bindings = registry.get_tools_config()
    if not bindings:
        click.echo("No tool bindings configured.")
        return
    for tool_id, binding in bindings.items():
        status = (
            click.style("enabled", fg="green")
            if binding.enabled
            else click.style("disabled", fg="red")
        )
        missing = (
            ""
            if registry.get_provider_by_name(binding.provider)
            else click.style(" (provider missing)", fg="yellow")
        )
        click.echo(
            f"  {tool_id:16s} {binding.provider or '-'}{missing} [{status}]",
        )


@ai_group.command("bind")
@click.argument("tool_id")
@click.argument("provider_name")
@click.pass_context
def bind_cmd(ctx: click.Context, tool_id: str, provider_name: str) -> None:
    """Bind TOOL_ID to PROVIDER_NAME and enable it."""
    registry = load_registry(ctx)
    try:
        registry.set_tool_provider(tool_id, provider_name)
    except CliBundleError as e:
        fail(str(e))
    click.echo(f"✓ {tool_id} → {provider_name}")

    adapters = AdapterRegistry.from_providers(registry)
    known = adapters.supported_tool_ids() + [
        a.tool_id for a in adapters.custom_adapters()
    ]
    if tool_id not in known:
        click.echo(
            click.style(
                f"Warning: no adapter writes settings for {tool_id}; "
                f"known tools: {', '.join(adapters.supported_tool_ids())}",
                fg="yellow",
            ),
        )


def _set_enabled(ctx: click.Context, tool_id: str, enabled: bool) -> None:
    registry = load_registry(ctx)
    try:
        registry.enable_tool(tool_id, enabled)
    except CliBundleError as e:
        fail(str(e))
    click.echo(f"✓ {tool_id} {'enabled' if enabled else 'disabled'}")


@ai_group.command("enable")
@click.argument("tool_id")
@click.pass_context
def enable_cmd(ctx: click.Context, tool_id: str) -> None:
    """Enable the binding for TOOL_ID."""
    _set_enabled(ctx, tool_id, True)


@ai_group.command("disable")
@click.argument("tool_id")
@click.pass_context
def disable_cmd(ctx: click.Context, tool_id: str) -> None:
    """Disable the binding for TOOL_ID."""
    _set_enabled(ctx, tool_id, False)


# ---------------------------------------------------------------------------
# apply / targets
# ---------------------------------------------------------------------------


@ai_group.command("apply")
@click.option(
    "--profile",
    "profile_name",
    default=None,
    help="Broadcast one provider to every adapter of its type",
)
@click.option(
    "--tool",
    "tool_id",
    default=None,
    help="Apply only this tool's bound provider",
)
@click.pass_context
def apply_cmd(
    ctx: click.Context,
    profile_name: Optional[str],
    tool_id: Optional[str],
) -> None:
    """Write provider settings into tool configuration files.

    \b
    Examples:
      clibundle ai apply                          # all enabled tools
      clibundle ai apply --tool claude-code       # one tool
      clibundle ai apply --profile "OpenAI Official"
    """
    registry = load_registry(ctx)
    engine = ApplyEngine(registry)
    try:
        summary = engine.apply(profile_name=profile_name, tool_id=tool_id)
    except CliBundleError as e:
        fail(str(e))

    print_summary(summary)
    if not summary.ok:
        raise SystemExit(1)


@ai_group.command("targets")
@click.pass_context
def targets_cmd(ctx: click.Context) -> None:
    """Show built-in adapters and custom targets with resolved paths."""
    registry = load_registry(ctx)
    adapters = AdapterRegistry.from_providers(registry)

    click.echo("\n=== Built-in adapters ===")
    for provider_type, built_in in adapters.mappings.items():
        for a in built_in:
            click.echo(
                f"  [{provider_type}] {a.tool_id}: "
                f"{resolve_path(a.path)} ({a.type})",
            )
            for field, key_path in a.fields.items():
                click.echo(f"      {field} → {key_path}")

    custom = adapters.custom_adapters()
    click.echo("\n=== Custom targets ===")
    if not custom:
        click.echo("  (none)")
    for a in custom:
        label = a.tool_id or "(unnamed)"
        click.echo(f"  {label}: {resolve_path(a.path)} ({a.type})")
        for field, key_path in a.fields.items():
            click.echo(f"      {field} → {key_path}")
    click.echo()
