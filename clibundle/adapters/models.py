# -*- coding: utf-8 -*-
"""Pydantic model for a settings-file adapter."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field


class Adapter(BaseModel):
    """Where each provider field lands inside one tool's settings file.

    ``fields`` maps a provider field name (``apiKey``, ``baseUrl``,
    ``model``, an ``extra`` key, ...) to a dotted path in the target
    document. ``type`` is kept as a free string so an unsupported format
    surfaces as a failed apply result instead of a validation error.
    """

    model_config = {"frozen": True}

    tool_id: str = Field(default="", description="Managed tool identifier")
    type: str = Field(default="json", description="json or toml")
    path: str = Field(..., description="Target path; may contain ~ / env")
    fields: Dict[str, str] = Field(default_factory=dict)
