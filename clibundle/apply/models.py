# -*- coding: utf-8 -*-
"""Result models returned by the apply engine."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ApplyResult(BaseModel):
    """Outcome of applying one adapter to one target file."""

    target: str = Field(..., description="Tool id, or the file path")
    file: str = Field(..., description="Resolved absolute path")
    type: str = Field(..., description="json / toml / the rejected type")
    ok: bool
    error: Optional[str] = None


class ApplySummary(BaseModel):
    """What an apply call did.

    Broadcast mode sets ``profile``; the tool-driven modes set ``tools``
    (tool id -> provider name).
    """

    profile: Optional[str] = None
    tools: Optional[Dict[str, str]] = None
    results: List[ApplyResult] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def failed(self) -> List[ApplyResult]:
        return [r for r in self.results if not r.ok]
