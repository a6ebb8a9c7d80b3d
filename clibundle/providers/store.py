# -*- coding: utf-8 -*-
"""Reading and writing the provider registry file (ai.json)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..constant import AI_CONFIG_FILE, WORKING_DIR
from ..exceptions import ConfigLoadError
from ..settings import write_document
from .defaults import default_ai_config
from .models import AIConfigData

logger = logging.getLogger(__name__)


def get_ai_config_path() -> Path:
    """Return the default ai.json path."""
    return WORKING_DIR / AI_CONFIG_FILE


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _normalize_active(active: Any, active_profile: Any) -> str:
    """Fold the legacy active-provider shapes into a provider name.

    v2: ``"active": "<name>"``; v1: ``"active": {"profileName": "<name>"}``
    or ``"activeProfile": "<name>"``.
    """
    if isinstance(active, str):
        return active
    if isinstance(active, dict) and isinstance(active.get("profileName"), str):
        return active["profileName"]
    if isinstance(active_profile, str):
        return active_profile
    return ""


def _parse_ai_config(raw: dict) -> AIConfigData:
    """Parse either ai.json shape into :class:`AIConfigData`.

    A non-empty v2 ``providers`` array wins over the v1 ``profiles`` array.
    """
    data = dict(raw)
    providers = data.pop("providers", None)
    profiles = data.pop("profiles", None)
    if not (isinstance(providers, list) and providers):
        providers = profiles if isinstance(profiles, list) else []
    data["providers"] = providers
    data["active"] = _normalize_active(
        data.pop("active", None),
        data.pop("activeProfile", None),
    )
    return AIConfigData.model_validate(data)


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------


def load_ai_config(
    path: Optional[Path] = None,
    *,
    create: bool = True,
) -> AIConfigData:
    """Load ai.json, writing the built-in defaults first if it is absent.

    Raises ``ConfigLoadError`` when the file exists but is not a valid
    registry document.
    """
    if path is None:
        path = get_ai_config_path()

    if not path.is_file():
        data = default_ai_config()
        if create:
            logger.info("Creating default AI configuration at %s", path)
            save_ai_config(data, path)
        return data

    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
        if not isinstance(raw, dict):
            raise ValueError("top-level value must be an object")
        return _parse_ai_config(raw)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and pydantic.ValidationError are ValueErrors.
        raise ConfigLoadError(path, str(e)) from e


def dump_ai_config(data: AIConfigData) -> dict:
    """Return the on-disk (v2) representation of *data*."""
    out: dict = data.model_dump(by_alias=True, mode="json")
    for provider in out["providers"]:
        if not provider.get("extra"):
            provider.pop("extra", None)
    if not out.get("common"):
        out.pop("common", None)
    if not out.get("targets"):
        out.pop("targets", None)
    # Mirror for readers of the v1 shape.
    out["activeProfile"] = data.active
    return out


def save_ai_config(
    data: AIConfigData,
    path: Optional[Path] = None,
) -> None:
    """Write *data* to ai.json (v2 shape, atomic replace)."""
    if path is None:
        path = get_ai_config_path()
    write_document(path, "json", dump_ai_config(data))


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Placeholders such as ``${OPENAI_API_KEY}`` are not secret and are
    returned unchanged.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if api_key.startswith("${") and api_key.endswith("}"):
        return api_key
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
