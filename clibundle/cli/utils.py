# -*- coding: utf-8 -*-
"""Interactive prompt helpers shared by CLI commands."""
from __future__ import annotations

from typing import List, NoReturn, Optional, Sequence, Tuple, TypeVar

import click

T = TypeVar("T")


def fail(message: str, code: int = 1) -> NoReturn:
    """Print *message* in red to stderr and exit with *code*."""
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    raise SystemExit(code)


def prompt_confirm(text: str, *, default: bool = False) -> bool:
    return click.confirm(text, default=default)


def prompt_choice(
    prompt_text: str,
    *,
    options: Sequence[str],
    default: Optional[str] = None,
) -> str:
    """Show numbered *options* and return the chosen label."""
    click.echo(prompt_text)
    for i, label in enumerate(options, start=1):
        click.echo(f"  {i}. {label}")
    default_idx = options.index(default) + 1 if default in options else None
    idx = click.prompt(
        "Enter number",
        type=click.IntRange(1, len(options)),
        default=default_idx,
    )
    return options[idx - 1]


def prompt_multi_select(
    prompt_text: str,
    *,
    options: Sequence[Tuple[str, T]],
) -> List[T]:
    """Let the user pick several options by number (``1,3`` or ``all``).

    Returns the selected values; an empty answer selects nothing.
    """
    click.echo(prompt_text)
    for i, (label, _) in enumerate(options, start=1):
        click.echo(f"  {i}. {label}")
    raw = click.prompt(
        "Numbers (comma separated, 'all' or empty to cancel)",
        default="",
        show_default=False,
    ).strip()
    if not raw:
        return []
    if raw.lower() == "all":
        return [value for _, value in options]

    chosen: List[T] = []
    for part in raw.split(","):
        part = part.strip()
        if not part.isdigit() or not 1 <= int(part) <= len(options):
            click.echo(
                click.style(f"Ignoring invalid choice: {part}", fg="yellow"),
            )
            continue
        value = options[int(part) - 1][1]
        if value not in chosen:
            chosen.append(value)
    return chosen
