# -*- coding: utf-8 -*-
"""Dotted-path access into nested settings documents.

A settings document is whatever the JSON or TOML codec produced: nested
mappings (``dict`` or tomlkit tables, which are ``dict`` subclasses),
arrays and scalars. A ``.`` in a key path always means descent; there is
no escaping for literal dots.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, MutableMapping


class ValueKind(str, Enum):
    """Shape of a value inside a settings document."""

    MAP = "map"
    ARRAY = "array"
    SCALAR = "scalar"


def kind_of(value: Any) -> ValueKind:
    """Classify *value*; ``None`` counts as a scalar."""
    if isinstance(value, dict):
        return ValueKind.MAP
    if isinstance(value, list):
        return ValueKind.ARRAY
    return ValueKind.SCALAR


def set_path(
    document: MutableMapping[str, Any],
    key_path: str,
    value: Any,
) -> None:
    """Set *value* at *key_path*, creating intermediate mappings.

    An intermediate segment holding anything other than a mapping is
    replaced by an empty mapping.
    """
    keys = key_path.split(".")
    current = document
    for key in keys[:-1]:
        if kind_of(current.get(key)) is not ValueKind.MAP:
            current[key] = {}
        # Re-read: tomlkit converts the assigned dict into a table item.
        current = current[key]
    current[keys[-1]] = value


def get_path(
    document: MutableMapping[str, Any],
    key_path: str,
    default: Any = None,
) -> Any:
    """Return the value at *key_path*, or *default* if any segment is
    missing or not a mapping."""
    current: Any = document
    for key in key_path.split("."):
        if kind_of(current) is not ValueKind.MAP or key not in current:
            return default
        current = current[key]
    return current
