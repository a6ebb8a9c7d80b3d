# -*- coding: utf-8 -*-
"""Built-in adapter tables keyed by provider type, plus custom targets."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..providers import CustomTarget, Provider, ProviderRegistry
from .models import Adapter

# ---------------------------------------------------------------------------
# Built-in adapters
# ---------------------------------------------------------------------------

OPENAI_ADAPTERS: List[Adapter] = [
    Adapter(
        tool_id="openai-codex",
        type="json",
        path="~/.codex/auth.json",
        fields={"apiKey": "OPENAI_API_KEY"},
    ),
    Adapter(
        tool_id="openai-codex",
        type="toml",
        path="~/.codex/config.toml",
        fields={
            "baseUrl": "api.base_url",
            "model": "chat.default_model",
        },
    ),
]

ANTHROPIC_ADAPTERS: List[Adapter] = [
    Adapter(
        tool_id="claude-code",
        type="json",
        path="~/.claude/settings.json",
        fields={
            "baseUrl": "env.ANTHROPIC_BASE_URL",
            "apiKey": "env.ANTHROPIC_AUTH_TOKEN",
            "model": "claude.defaultModel",
        },
    ),
]

GOOGLE_ADAPTERS: List[Adapter] = [
    Adapter(
        tool_id="google-gemini",
        type="json",
        path="~/.gemini/settings.json",
        fields={
            "apiKey": "apiKey",
            "baseUrl": "baseUrl",
            "model": "model",
        },
    ),
]

IFLOW_ADAPTERS: List[Adapter] = [
    Adapter(
        tool_id="iflow-cli",
        type="json",
        path="~/.iflow/settings.json",
        fields={
            "apiKey": "apiKey",
            "baseUrl": "baseUrl",
            "model": "modelName",
            "proxy": "proxy",
        },
    ),
]

# Registry: provider type -> adapters, in apply order
PROVIDER_TYPE_MAPPINGS: Dict[str, List[Adapter]] = {
    "openai": OPENAI_ADAPTERS,
    "anthropic": ANTHROPIC_ADAPTERS,
    "google": GOOGLE_ADAPTERS,
    "iflow": IFLOW_ADAPTERS,
}


def adapter_from_target(target: CustomTarget) -> Adapter:
    """Turn a user-declared custom target into an adapter."""
    return Adapter(
        tool_id=target.target_id,
        type=target.type,
        path=target.path,
        fields=dict(target.fields),
    )


class AdapterRegistry:
    """Adapters for a provider: built-ins by provider type, plus custom
    targets declared in ai.json."""

    def __init__(
        self,
        mappings: Optional[Dict[str, List[Adapter]]] = None,
        custom_targets: Iterable[CustomTarget] = (),
    ) -> None:
        self.mappings = (
            mappings if mappings is not None else PROVIDER_TYPE_MAPPINGS
        )
        self.custom_targets = list(custom_targets)

    @classmethod
    def from_providers(cls, providers: ProviderRegistry) -> "AdapterRegistry":
        return cls(custom_targets=providers.get_targets())

    def adapters_for(
        self,
        provider: Provider,
        tool_id: Optional[str] = None,
    ) -> List[Adapter]:
        """Return built-in adapters for ``provider.type``, optionally only
        those for *tool_id*. Unknown types yield ``[]``."""
        adapters = self.mappings.get(provider.type, [])
        if tool_id is not None:
            adapters = [a for a in adapters if a.tool_id == tool_id]
        return list(adapters)

    def custom_adapters(self) -> List[Adapter]:
        return [adapter_from_target(t) for t in self.custom_targets]

    def declares_format(self, provider: Provider, format_type: str) -> bool:
        """Whether any built-in adapter for *provider* writes *format_type*."""
        return any(a.type == format_type for a in self.adapters_for(provider))

    def supported_provider_types(self) -> List[str]:
        return list(self.mappings)

    def supported_tool_ids(self) -> List[str]:
        seen: List[str] = []
        for adapters in self.mappings.values():
            for adapter in adapters:
                if adapter.tool_id not in seen:
                    seen.append(adapter.tool_id)
        return seen
