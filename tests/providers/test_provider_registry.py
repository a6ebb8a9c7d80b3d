"""Tests for ProviderRegistry."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from clibundle.exceptions import ProviderNotFound, ToolNotConfigured
from clibundle.providers import (
    AIConfigData,
    CustomTarget,
    Provider,
    ProviderRegistry,
    ToolBinding,
)


class TestLookup:
    def test_list_providers_keeps_order(
        self,
        registry: ProviderRegistry,
    ) -> None:
        assert [p.name for p in registry.list_providers()] == [
            "OpenAI Official",
            "Anthropic Official",
        ]

    def test_get_provider_by_name(self, registry: ProviderRegistry) -> None:
        assert registry.get_provider_by_name("OpenAI Official").type == (
            "openai"
        )
        assert registry.get_provider_by_name("nope") is None

    def test_require_provider_raises(
        self,
        registry: ProviderRegistry,
    ) -> None:
        with pytest.raises(ProviderNotFound) as exc_info:
            registry.require_provider("nope")
        assert exc_info.value.name == "nope"

    def test_resolve_env_vars_leaves_registry_untouched(
        self,
        registry: ProviderRegistry,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        stored = registry.get_provider_by_name("OpenAI Official")
        resolved = ProviderRegistry.resolve_env_vars(stored)
        assert resolved.api_key == "sk-test"
        assert stored.api_key == "${OPENAI_API_KEY}"


class TestActiveProvider:
    def test_get_active(self, registry: ProviderRegistry) -> None:
        assert registry.get_active_provider_name() == "OpenAI Official"
        assert registry.get_active_provider().type == "openai"

    def test_no_active(self) -> None:
        assert ProviderRegistry().get_active_provider() is None

    def test_set_active(self, registry: ProviderRegistry) -> None:
        registry.set_active_provider("Anthropic Official")
        assert registry.get_active_provider_name() == "Anthropic Official"

    def test_set_active_unknown_raises(
        self,
        registry: ProviderRegistry,
    ) -> None:
        with pytest.raises(ProviderNotFound):
            registry.set_active_provider("nope")
        assert registry.get_active_provider_name() == "OpenAI Official"


class TestResolvedProfile:
    def test_common_merged_underneath(self) -> None:
        data = AIConfigData(
            providers=[
                Provider(name="A", type="iflow", model="own-model"),
            ],
            active="A",
            common={"proxy": "http://proxy:3128", "model": "common-model"},
        )
        resolved = ProviderRegistry(data).get_resolved_profile()
        assert resolved.model == "own-model"
        assert resolved.get_field("proxy") == "http://proxy:3128"

    def test_common_fills_unset_declared_fields(self) -> None:
        data = AIConfigData(
            providers=[Provider(name="A", type="openai")],
            common={"baseUrl": "https://gateway.local/v1"},
        )
        resolved = ProviderRegistry(data).get_resolved_profile("A")
        assert resolved.base_url == "https://gateway.local/v1"

    def test_extra_merged_key_by_key(self) -> None:
        data = AIConfigData(
            providers=[Provider(name="A", extra={"b": 2, "c": 3})],
            common={"extra": {"a": 1, "b": 0}},
        )
        resolved = ProviderRegistry(data).get_resolved_profile("A")
        assert resolved.extra == {"a": 1, "b": 2, "c": 3}

    def test_unknown_profile_raises(self) -> None:
        with pytest.raises(ProviderNotFound):
            ProviderRegistry().get_resolved_profile("nope")

    def test_no_active_profile_raises(self) -> None:
        with pytest.raises(ProviderNotFound):
            ProviderRegistry().get_resolved_profile()


class TestToolBindings:
    def test_enabled_tools(self, registry: ProviderRegistry) -> None:
        registry.data.tools["google-gemini"] = ToolBinding(
            provider="OpenAI Official",
        )
        assert registry.get_enabled_tools() == [
            "openai-codex",
            "claude-code",
        ]

    def test_get_tool_provider(self, registry: ProviderRegistry) -> None:
        assert registry.get_tool_provider("claude-code").name == (
            "Anthropic Official"
        )

    def test_get_tool_provider_disabled(
        self,
        registry: ProviderRegistry,
    ) -> None:
        registry.enable_tool("claude-code", False)
        assert registry.get_tool_provider("claude-code") is None

    def test_get_tool_provider_unknown_or_dangling(
        self,
        registry: ProviderRegistry,
    ) -> None:
        registry.data.tools["x"] = ToolBinding(provider="gone", enabled=True)
        assert registry.get_tool_provider("x") is None
        assert registry.get_tool_provider("unknown") is None

    def test_set_tool_provider_binds_and_enables(
        self,
        registry: ProviderRegistry,
    ) -> None:
        registry.set_tool_provider("iflow-cli", "OpenAI Official")
        binding = registry.get_tools_config()["iflow-cli"]
        assert binding.provider == "OpenAI Official"
        assert binding.enabled is True

    def test_set_tool_provider_unknown_provider(
        self,
        registry: ProviderRegistry,
    ) -> None:
        with pytest.raises(ProviderNotFound):
            registry.set_tool_provider("iflow-cli", "nope")
        assert "iflow-cli" not in registry.get_tools_config()

    def test_enable_unknown_tool_raises(
        self,
        registry: ProviderRegistry,
    ) -> None:
        with pytest.raises(ToolNotConfigured) as exc_info:
            registry.enable_tool("nope")
        assert exc_info.value.tool_id == "nope"

    def test_all_active_providers_skips_dangling(
        self,
        registry: ProviderRegistry,
    ) -> None:
        registry.data.tools["x"] = ToolBinding(provider="gone", enabled=True)
        registry.data.tools["y"] = ToolBinding(
            provider="OpenAI Official",
            enabled=False,
        )
        active = registry.get_all_active_providers()
        assert [(t, p.name) for t, p in active] == [
            ("openai-codex", "OpenAI Official"),
            ("claude-code", "Anthropic Official"),
        ]


class TestTargets:
    def test_v1_targets_before_custom_targets(self) -> None:
        data = AIConfigData(
            targets=[CustomTarget(name="old", path="a.json")],
            custom_targets=[CustomTarget(tool_id="new", path="b.json")],
        )
        assert [t.target_id for t in ProviderRegistry(data).get_targets()] == [
            "old",
            "new",
        ]


class TestPersistence:
    def test_load_creates_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "ai.json"
        registry = ProviderRegistry.load(path)
        assert path.is_file()
        assert registry.get_enabled_tools() == ["openai-codex", "claude-code"]

    def test_mutations_are_saved(self, tmp_path: Path) -> None:
        path = tmp_path / "ai.json"
        registry = ProviderRegistry.load(path)
        registry.set_active_provider("Anthropic Official")
        registry.enable_tool("openai-codex", False)

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["active"] == "Anthropic Official"
        assert raw["tools"]["openai-codex"]["enabled"] is False

        reloaded = ProviderRegistry.load(path)
        assert reloaded.get_active_provider_name() == "Anthropic Official"
        assert reloaded.get_enabled_tools() == ["claude-code"]

    def test_in_memory_save_is_noop(
        self,
        registry: ProviderRegistry,
        tmp_path: Path,
    ) -> None:
        registry.set_active_provider("Anthropic Official")
        assert list(tmp_path.iterdir()) == []
