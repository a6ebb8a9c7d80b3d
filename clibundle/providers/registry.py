# -*- coding: utf-8 -*-
"""Provider registry: named profiles, the broadcast-mode active provider
and per-tool bindings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..exceptions import ProviderNotFound, ToolNotConfigured
from .models import AIConfigData, CustomTarget, Provider, ToolBinding
from .store import get_ai_config_path, load_ai_config, save_ai_config

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """In-memory view of ai.json with an explicit load / save lifecycle.

    Build one with :meth:`load` for the on-disk registry, or pass an
    :class:`AIConfigData` directly for an isolated in-memory registry.
    ``path=None`` means :meth:`save` is a no-op.
    """

    def __init__(
        self,
        data: Optional[AIConfigData] = None,
        path: Optional[Path] = None,
    ) -> None:
        self.data = data if data is not None else AIConfigData()
        self.path = path

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "ProviderRegistry":
        if path is None:
            path = get_ai_config_path()
        return cls(load_ai_config(path), path)

    def save(self) -> None:
        if self.path is None:
            return
        save_ai_config(self.data, self.path)
        logger.debug("Saved AI configuration to %s", self.path)

    # ------------------------------------------------------------------
    # Providers
    # ------------------------------------------------------------------

    def list_providers(self) -> List[Provider]:
        return list(self.data.providers)

    def get_provider_by_name(self, name: str) -> Optional[Provider]:
        """Return the provider called *name*, or ``None``."""
        for provider in self.data.providers:
            if provider.name == name:
                return provider
        return None

    def require_provider(self, name: str) -> Provider:
        provider = self.get_provider_by_name(name)
        if provider is None:
            raise ProviderNotFound(name)
        return provider

    @staticmethod
    def resolve_env_vars(provider: Provider) -> Provider:
        """Return a copy of *provider* with ``${VAR}`` placeholders expanded.

        The stored provider keeps its placeholders.
        """
        return provider.resolve_env_vars()

    # ------------------------------------------------------------------
    # Broadcast mode (single global active provider)
    # ------------------------------------------------------------------

    def get_active_provider_name(self) -> str:
        return self.data.active

    def get_active_provider(self) -> Optional[Provider]:
        name = self.get_active_provider_name()
        return self.get_provider_by_name(name) if name else None

    def set_active_provider(self, name: str) -> Provider:
        provider = self.require_provider(name)
        self.data.active = name
        self.save()
        return provider

    def get_common(self) -> Dict[str, Any]:
        return dict(self.data.common)

    def get_resolved_profile(self, name: Optional[str] = None) -> Provider:
        """Return *name* (default: the active provider) with ``common``
        defaults merged underneath it.

        ``extra`` is merged key by key; the profile wins on conflicts.
        """
        profile_name = name or self.get_active_provider_name()
        profile = self.get_provider_by_name(profile_name)
        if profile is None:
            raise ProviderNotFound(profile_name or "(no active provider)")
        common = self.get_common()
        own = profile.model_dump(by_alias=True, exclude_unset=True)
        merged = {**common, **own}
        if common.get("extra") or profile.extra:
            merged["extra"] = {**common.get("extra", {}), **profile.extra}
        return Provider.model_validate(merged)

    def get_targets(self) -> List[CustomTarget]:
        """Return custom targets: v1 ``targets`` then v2 ``customTargets``."""
        return [*self.data.targets, *self.data.custom_targets]

    # ------------------------------------------------------------------
    # Multi-tool mode (per-tool bindings)
    # ------------------------------------------------------------------

    def get_tools_config(self) -> Dict[str, ToolBinding]:
        return dict(self.data.tools)

    def get_enabled_tools(self) -> List[str]:
        return [
            tool_id
            for tool_id, binding in self.data.tools.items()
            if binding.enabled
        ]

    def get_tool_provider(self, tool_id: str) -> Optional[Provider]:
        """Return the provider bound to *tool_id* if the binding is enabled
        and the provider exists, else ``None``."""
        binding = self.data.tools.get(tool_id)
        if binding is None or not binding.enabled:
            return None
        return self.get_provider_by_name(binding.provider)

    def set_tool_provider(self, tool_id: str, provider_name: str) -> Provider:
        """Bind *tool_id* to *provider_name* and enable it."""
        provider = self.require_provider(provider_name)
        self.data.tools[tool_id] = ToolBinding(
            provider=provider_name,
            enabled=True,
        )
        self.save()
        return provider

    def enable_tool(self, tool_id: str, enabled: bool = True) -> None:
        binding = self.data.tools.get(tool_id)
        if binding is None:
            raise ToolNotConfigured(tool_id)
        binding.enabled = enabled
        self.save()

    def get_all_active_providers(self) -> List[Tuple[str, Provider]]:
        """Return ``(tool_id, provider)`` for every enabled binding whose
        provider exists, in binding order."""
        active: List[Tuple[str, Provider]] = []
        for tool_id, binding in self.data.tools.items():
            if not binding.enabled or not binding.provider:
                continue
            provider = self.get_provider_by_name(binding.provider)
            if provider is None:
                logger.debug(
                    "Skipping tool %s: provider %r not found",
                    tool_id,
                    binding.provider,
                )
                continue
            active.append((tool_id, provider))
        return active
