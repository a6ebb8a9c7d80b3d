# -*- coding: utf-8 -*-
"""Pydantic data models for providers, tool bindings and ai.json."""

from __future__ import annotations

import os
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from ..constant import AI_CONFIG_VERSION

_ENV_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")
_WHOLE_PLACEHOLDER = re.compile(r"^\$\{([^}]+)\}$")

# Provider-field names accepted in adapter mappings, besides ``extra`` keys.
_FIELD_ALIASES = {
    "apiKey": "api_key",
    "env:@apiKey": "api_key",
    "baseUrl": "base_url",
    "apiBase": "base_url",
    "model": "model",
    "name": "name",
    "type": "type",
}


def expand_placeholders(value: str) -> str:
    """Replace every ``${NAME}`` in *value*; unset variables become ``""``."""
    return _ENV_PLACEHOLDER.sub(
        lambda m: os.environ.get(m.group(1), ""),
        value,
    )


def placeholder_name(value: str) -> Optional[str]:
    """Return ``NAME`` if *value* is exactly ``${NAME}``, else ``None``."""
    match = _WHOLE_PLACEHOLDER.match(value or "")
    return match.group(1) if match else None


class Provider(BaseModel):
    """A named AI service credential / endpoint profile.

    ``api_key`` usually holds a ``${ENV_VAR}`` placeholder; it is only
    expanded on a copy at apply time, never in the stored registry.
    Unknown top-level keys (``proxy``, ``timeoutMs``, ...) are kept.
    """

    model_config = {"populate_by_name": True, "extra": "allow"}

    name: str = Field(..., description="Unique, user-facing identifier")
    type: str = Field(
        default="custom",
        description="Provider type: openai / anthropic / google / iflow / ...",
    )
    api_key: str = Field(default="", alias="apiKey")
    base_url: str = Field(default="", alias="baseUrl")
    model: str = Field(default="", description="Default model name")
    extra: Dict[str, Any] = Field(default_factory=dict)

    def resolve_env_vars(self) -> "Provider":
        """Return a copy with ``${NAME}`` expanded in every string field."""
        raw = self.model_dump(by_alias=True)
        for key, value in raw.items():
            if isinstance(value, str):
                raw[key] = expand_placeholders(value)
        return Provider.model_validate(raw)

    def get_field(self, field: str) -> Any:
        """Look up a provider field by its mapping name.

        Order: declared fields (``apiKey``, ``baseUrl``, ``model``, ...),
        then ``extra``, then unknown top-level keys. Missing → ``None``.
        """
        attr = _FIELD_ALIASES.get(field)
        if attr is not None:
            return getattr(self, attr)
        if field in self.extra:
            return self.extra[field]
        return (self.model_extra or {}).get(field)


class ToolBinding(BaseModel):
    """Which provider, if any, is active for one managed tool."""

    provider: str = Field(default="", description="Bound provider name")
    enabled: bool = Field(default=False)


class CustomTarget(BaseModel):
    """User-declared settings file target.

    Accepts the v1 ``mapping`` key as well as ``fields``; ``toolId`` falls
    back to ``name``.
    """

    model_config = {"populate_by_name": True}

    name: str = ""
    tool_id: str = Field(default="", alias="toolId")
    type: str = "json"
    path: str
    fields: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_mapping(cls, data: Any) -> Any:
        if isinstance(data, dict) and "fields" not in data:
            if isinstance(data.get("mapping"), dict):
                data = {**data, "fields": data["mapping"]}
                data.pop("mapping")
        return data

    @property
    def target_id(self) -> str:
        return self.tool_id or self.name


class AIConfigData(BaseModel):
    """Normalized content of ai.json.

    Both on-disk shapes (v1 ``profiles`` / ``activeProfile`` and v2
    ``providers`` / ``active``) are folded into this one model by the
    store at load time.
    """

    model_config = {"populate_by_name": True, "extra": "allow"}

    version: str = AI_CONFIG_VERSION
    description: str = "CLI Bundle AI configuration file - Multi-tool support"
    providers: List[Provider] = Field(default_factory=list)
    active: str = Field(default="", description="Broadcast-mode provider")
    common: Dict[str, Any] = Field(default_factory=dict)
    tools: Dict[str, ToolBinding] = Field(default_factory=dict)
    targets: List[CustomTarget] = Field(
        default_factory=list,
        description="v1 custom targets",
    )
    custom_targets: List[CustomTarget] = Field(
        default_factory=list,
        alias="customTargets",
    )
