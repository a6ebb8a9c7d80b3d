"""Shared fixtures for clibundle tests."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import Callable

import pytest

from clibundle.providers import (
    AIConfigData,
    CustomTarget,
    Provider,
    ProviderRegistry,
    ToolBinding,
)

_PROVIDER_ENV_VARS = (
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "GEMINI_API_KEY",
    "IFLOW_API_KEY",
)


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user's home directory at a temp dir.

    Target paths such as ``~/.codex/auth.json`` resolve inside it.
    """
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    for name in _PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return home_dir


@pytest.fixture
def openai_provider() -> Provider:
    return Provider(
        name="OpenAI Official",
        type="openai",
        api_key="${OPENAI_API_KEY}",
        base_url="https://api.openai.com/v1",
        model="gpt-4o-mini",
    )


@pytest.fixture
def anthropic_provider() -> Provider:
    return Provider(
        name="Anthropic Official",
        type="anthropic",
        api_key="${ANTHROPIC_API_KEY}",
        base_url="https://api.anthropic.com",
        model="claude-3-5-sonnet-latest",
    )


@pytest.fixture
def registry(
    openai_provider: Provider,
    anthropic_provider: Provider,
) -> ProviderRegistry:
    """In-memory registry with both default tools bound and enabled."""
    data = AIConfigData(
        providers=[openai_provider, anthropic_provider],
        active="OpenAI Official",
        tools={
            "openai-codex": ToolBinding(
                provider="OpenAI Official",
                enabled=True,
            ),
            "claude-code": ToolBinding(
                provider="Anthropic Official",
                enabled=True,
            ),
        },
    )
    return ProviderRegistry(data)


@pytest.fixture
def custom_target(home: Path) -> CustomTarget:
    return CustomTarget(
        name="my-tool",
        type="json",
        path="~/.my-tool/config.json",
        fields={"apiKey": "auth.key", "model": "defaults.model"},
    )


@pytest.fixture
def deny_reads(monkeypatch: pytest.MonkeyPatch) -> Callable[[Path], None]:
    """Make reads of files inside a directory fail with EACCES.

    Permission bits do not stop root, so ``Path.read_text`` is patched.
    """
    denied = set()
    original = Path.read_text

    def read_text(self, *args, **kwargs):
        if self.parent in denied:
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return original(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", read_text)
    return denied.add
