# -*- coding: utf-8 -*-
"""Expand ``~`` and environment placeholders in configured target paths."""

from __future__ import annotations

import os
import re
from pathlib import Path

_BRACE_VAR = re.compile(r"\$\{([^}]+)\}")
_PERCENT_VAR = re.compile(r"%([^%]+)%")


def expand_home(raw: str) -> str:
    """Replace a leading ``~`` with the current user's home directory."""
    if not raw or not raw.startswith("~"):
        return raw
    rest = raw[1:].lstrip("/\\")
    return str(Path.home() / rest) if rest else str(Path.home())


def expand_env(raw: str) -> str:
    """Substitute ``${NAME}`` and ``%NAME%`` from the environment.

    Unset variables become the empty string.
    """
    if not raw:
        return raw
    raw = _BRACE_VAR.sub(lambda m: os.environ.get(m.group(1), ""), raw)
    return _PERCENT_VAR.sub(lambda m: os.environ.get(m.group(1), ""), raw)


def resolve_path(raw: str) -> Path:
    """Return the absolute, platform-native path for a configured *raw* path.

    Example: ``"~/.codex/${PROFILE}.toml"`` with ``PROFILE=work`` →
    ``/home/alice/.codex/work.toml``
    """
    return Path(os.path.abspath(expand_env(expand_home(raw))))
