# -*- coding: utf-8 -*-
"""Target settings files — path resolution, dotted-path access, JSON/TOML
store with atomic writes."""

from .document import ValueKind, get_path, kind_of, set_path
from .paths import expand_env, expand_home, resolve_path
from .store import (
    SUPPORTED_FORMATS,
    ReadOutcome,
    get_codec,
    read_document,
    write_document,
)

__all__ = [
    # document
    "ValueKind",
    "get_path",
    "kind_of",
    "set_path",
    # paths
    "expand_env",
    "expand_home",
    "resolve_path",
    # store
    "SUPPORTED_FORMATS",
    "ReadOutcome",
    "get_codec",
    "read_document",
    "write_document",
]
