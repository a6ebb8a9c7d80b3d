# -*- coding: utf-8 -*-
"""Built-in provider profiles and tool bindings for a fresh ai.json."""

from __future__ import annotations

from typing import Dict, List

from .models import AIConfigData, Provider, ToolBinding

# ---------------------------------------------------------------------------
# Provider profiles
# ---------------------------------------------------------------------------

PROVIDER_OPENAI = Provider(
    name="OpenAI Official",
    type="openai",
    api_key="${OPENAI_API_KEY}",
    base_url="https://api.openai.com/v1",
    model="gpt-4o-mini",
)

PROVIDER_ANTHROPIC = Provider(
    name="Anthropic Official",
    type="anthropic",
    api_key="${ANTHROPIC_API_KEY}",
    base_url="https://api.anthropic.com",
    model="claude-3-5-sonnet-latest",
)

DEFAULT_PROVIDERS: List[Provider] = [PROVIDER_OPENAI, PROVIDER_ANTHROPIC]

# ---------------------------------------------------------------------------
# Tool bindings: tool_id -> provider
# ---------------------------------------------------------------------------

DEFAULT_TOOL_BINDINGS: Dict[str, ToolBinding] = {
    "openai-codex": ToolBinding(provider=PROVIDER_OPENAI.name, enabled=True),
    "claude-code": ToolBinding(provider=PROVIDER_ANTHROPIC.name, enabled=True),
}


def default_ai_config() -> AIConfigData:
    """Return a fresh ai.json model populated with the built-ins."""
    return AIConfigData(
        providers=[p.model_copy(deep=True) for p in DEFAULT_PROVIDERS],
        tools={
            tool_id: binding.model_copy()
            for tool_id, binding in DEFAULT_TOOL_BINDINGS.items()
        },
    )
