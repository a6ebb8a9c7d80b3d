# -*- coding: utf-8 -*-
"""Read and write target settings files (JSON or TOML).

Reads are lenient: a missing file and a corrupt file both come back as an
empty document. Writes go to a sibling temporary file which then replaces
the destination, so a reader never sees a half-written file.

Read-modify-write is not locked across processes: two concurrent writers
to the same file race and the last rename wins.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, MutableMapping, NamedTuple, Optional

import tomlkit

from ..exceptions import UnsupportedFormat

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("json", "toml")


# ---------------------------------------------------------------------------
# Codecs
# ---------------------------------------------------------------------------


class _JsonCodec:
    name = "json"

    @staticmethod
    def empty() -> MutableMapping[str, Any]:
        return {}

    @staticmethod
    def loads(text: str) -> MutableMapping[str, Any]:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(
                f"top-level value is {type(data).__name__}, not an object",
            )
        return data

    @staticmethod
    def dumps(document: MutableMapping[str, Any]) -> str:
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


class _TomlCodec:
    name = "toml"

    @staticmethod
    def empty() -> MutableMapping[str, Any]:
        return tomlkit.document()

    @staticmethod
    def loads(text: str) -> MutableMapping[str, Any]:
        return tomlkit.parse(text)

    @staticmethod
    def dumps(document: MutableMapping[str, Any]) -> str:
        return tomlkit.dumps(document)


_CODECS = {
    _JsonCodec.name: _JsonCodec,
    _TomlCodec.name: _TomlCodec,
}


def get_codec(format_type: str):
    """Return the codec for *format_type* or raise ``UnsupportedFormat``."""
    codec = _CODECS.get(format_type)
    if codec is None:
        raise UnsupportedFormat(format_type)
    return codec


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------


class ReadOutcome(NamedTuple):
    """Result of parsing a settings file before leniency is applied.

    Exactly one of ``document`` / ``fault`` is set, except for a missing
    file where both are ``None``.
    """

    document: Optional[MutableMapping[str, Any]]
    fault: Optional[str]


def _try_read(path: Path, codec) -> ReadOutcome:
    try:
        text = path.read_text(encoding="utf-8")
        return ReadOutcome(codec.loads(text), None)
    except FileNotFoundError:
        return ReadOutcome(None, None)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # Permission errors, directories, json.JSONDecodeError and
        # tomlkit's ParseError all collapse to a fault.
        return ReadOutcome(None, str(e))


def read_document(path: Path, format_type: str) -> MutableMapping[str, Any]:
    """Load *path* as *format_type*; absent or unreadable files yield an
    empty document.

    Raises ``UnsupportedFormat`` for anything but ``json`` / ``toml``.
    """
    codec = get_codec(format_type)
    outcome = _try_read(path, codec)
    if outcome.fault is not None:
        logger.debug(
            "Ignoring unreadable %s file %s: %s",
            codec.name,
            path,
            outcome.fault,
        )
    if outcome.document is None:
        return codec.empty()
    return outcome.document


# ---------------------------------------------------------------------------
# Write
# ---------------------------------------------------------------------------


def _atomic_write_text(path: Path, text: str) -> None:
    """Write *text* to a temp file next to *path*, then replace *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=str(path.parent),
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        if path.exists():
            shutil.copymode(path, tmp)
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            try:
                os.remove(tmp)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp)


def write_document(
    path: Path,
    format_type: str,
    document: MutableMapping[str, Any],
) -> None:
    """Serialize *document* as *format_type* and atomically replace *path*.

    Raises ``UnsupportedFormat``, ``OSError`` or serialization errors; the
    apply engine turns these into per-target results.
    """
    codec = get_codec(format_type)
    text = codec.dumps(document)
    _atomic_write_text(path, text)
    logger.debug("Wrote %s file %s", codec.name, path)
