# -*- coding: utf-8 -*-
"""Apply providers to tool settings files.

Three scopes:

* broadcast (``profile_name``): one provider, every built-in adapter of
  its type plus every custom target;
* single tool (``tool_id``): the tool's bound provider, that tool's
  adapters only;
* all enabled tools (no arguments): each enabled binding with its own
  provider, then one sweep over the custom targets.

Adapters run one after another. A failing target becomes an
``ApplyResult(ok=False)`` and the remaining targets still run.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..adapters import Adapter, AdapterRegistry
from ..exceptions import ToolNotConfigured, UnsupportedFormat
from ..providers import Provider, ProviderRegistry, placeholder_name
from ..settings import read_document, resolve_path, set_path, write_document
from .models import ApplyResult, ApplySummary

logger = logging.getLogger(__name__)

API_KEY_FIELD = "apiKey"
# Marker form: read the key from the env var named by ``extra.apiKeyEnv``,
# falling back to ``apiKey``.
API_KEY_ENV_MARKER = "env:@apiKey"


# ---------------------------------------------------------------------------
# Single adapter
# ---------------------------------------------------------------------------


def _api_key_value(provider: Provider, field: str) -> str:
    if field == API_KEY_ENV_MARKER:
        env_name = provider.extra.get("apiKeyEnv")
        if env_name:
            return os.environ.get(env_name, "")
    value = provider.api_key
    env_name = placeholder_name(value)
    if env_name is not None:
        return os.environ.get(env_name, "")
    return value


def value_for_field(provider: Provider, field: str) -> Any:
    """Return the value *provider* contributes for mapping key *field*.

    ``apiKey`` is written as the real secret even when the provider still
    holds a ``${VAR}`` placeholder.
    """
    if field in (API_KEY_FIELD, API_KEY_ENV_MARKER):
        return _api_key_value(provider, field)
    return provider.get_field(field)


def apply_provider_to_adapter(
    provider: Provider,
    adapter: Adapter,
) -> ApplyResult:
    """Merge *provider*'s mapped fields into *adapter*'s target file.

    Only the mapped paths change; everything else in the file is kept.
    Missing or empty provider values leave the target key untouched.
    """
    target_path = resolve_path(adapter.path)
    target = adapter.tool_id or str(target_path)

    def _result(ok: bool, error: Optional[str] = None) -> ApplyResult:
        return ApplyResult(
            target=target,
            file=str(target_path),
            type=adapter.type,
            ok=ok,
            error=error,
        )

    try:
        document = read_document(target_path, adapter.type)
    except (UnsupportedFormat, OSError) as e:
        logger.warning("Skipping %s: %s", target_path, e)
        return _result(False, str(e))

    try:
        for field, key_path in adapter.fields.items():
            value = value_for_field(provider, field)
            if value is None or value == "":
                continue
            set_path(document, key_path, value)
        write_document(target_path, adapter.type, document)
    except (OSError, TypeError, ValueError) as e:
        logger.warning(
            "Failed to apply %s to %s: %s",
            provider.name,
            target_path,
            e,
        )
        return _result(False, str(e))

    logger.debug("Applied %s to %s", provider.name, target_path)
    return _result(True)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class ApplyEngine:
    """Resolve providers and adapters for a scope and apply them in order."""

    def __init__(
        self,
        providers: ProviderRegistry,
        adapters: Optional[AdapterRegistry] = None,
    ) -> None:
        self.providers = providers
        self.adapters = (
            adapters
            if adapters is not None
            else AdapterRegistry.from_providers(providers)
        )

    def apply(
        self,
        profile_name: Optional[str] = None,
        tool_id: Optional[str] = None,
    ) -> ApplySummary:
        """Apply for the scope selected by the arguments.

        Raises ``ProviderNotFound`` (broadcast) or ``ToolNotConfigured``
        (single tool); per-target failures are in the summary instead.
        """
        if profile_name:
            return self.apply_broadcast(profile_name)
        if tool_id:
            return self.apply_tool(tool_id)
        return self.apply_all()

    # ------------------------------------------------------------------
    # Scopes
    # ------------------------------------------------------------------

    def apply_broadcast(self, profile_name: str) -> ApplySummary:
        provider = self._resolve(profile_name)
        adapters = [
            *self.adapters.adapters_for(provider),
            *self.adapters.custom_adapters(),
        ]
        results = self._run(provider, adapters)
        return ApplySummary(profile=provider.name, results=results)

    def apply_tool(self, tool_id: str) -> ApplySummary:
        bound = self.providers.get_tool_provider(tool_id)
        if bound is None:
            raise ToolNotConfigured(tool_id)
        provider = self._resolve(bound.name)
        results = self._run(
            provider,
            self.adapters.adapters_for(provider, tool_id),
        )
        return ApplySummary(tools={tool_id: provider.name}, results=results)

    def apply_all(self) -> ApplySummary:
        active = self.providers.get_all_active_providers()
        tools: Dict[str, str] = {}
        results: List[ApplyResult] = []

        for tool_id, bound in active:
            provider = self._resolve(bound.name)
            tools[tool_id] = provider.name
            results.extend(
                self._run(
                    provider,
                    self.adapters.adapters_for(provider, tool_id),
                ),
            )

        for adapter in self.adapters.custom_adapters():
            chosen = self.choose_custom_target_provider(adapter, active)
            if chosen is None:
                logger.debug(
                    "No active provider declares %s targets; skipping %s",
                    adapter.type,
                    adapter.path,
                )
                continue
            provider = self._resolve(chosen.name)
            results.append(apply_provider_to_adapter(provider, adapter))

        return ApplySummary(tools=tools, results=results)

    def choose_custom_target_provider(
        self,
        adapter: Adapter,
        active: Sequence[Tuple[str, Provider]],
    ) -> Optional[Provider]:
        """Pick the provider for a custom target in all-tools mode.

        First active provider (binding order) whose built-in adapters
        write the target's format wins. Override to change the policy.
        """
        for _tool_id, provider in active:
            if self.adapters.declares_format(provider, adapter.type):
                return provider
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve(self, name: str) -> Provider:
        """``common`` defaults merged under the profile, env expanded."""
        return self.providers.get_resolved_profile(name).resolve_env_vars()

    @staticmethod
    def _run(
        provider: Provider,
        adapters: Sequence[Adapter],
    ) -> List[ApplyResult]:
        return [apply_provider_to_adapter(provider, a) for a in adapters]
