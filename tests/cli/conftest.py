"""Fixtures for driving the ``clibundle`` command group."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Set, Tuple

import pytest
from click.testing import CliRunner, Result

from clibundle.cli.main import cli


class FakePackageManager:
    """Records package operations instead of running npm."""

    def __init__(self) -> None:
        self.failing: Set[str] = set()
        self.calls: List[Tuple[str, str]] = []

    def _record(self, operation: str, package_name: str) -> bool:
        self.calls.append((operation, package_name))
        return package_name not in self.failing

    def install(self, package_name: str) -> bool:
        return self._record("install", package_name)

    def update(self, package_name: str) -> bool:
        return self._record("update", package_name)

    def uninstall(self, package_name: str) -> bool:
        return self._record("uninstall", package_name)


@pytest.fixture(autouse=True)
def _restore_root_log_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    return tmp_path / "wd"


@pytest.fixture
def package_manager() -> FakePackageManager:
    return FakePackageManager()


@pytest.fixture
def installed_commands(monkeypatch: pytest.MonkeyPatch) -> Set[str]:
    """Commands the catalog sees on PATH; mutate to change."""
    commands: Set[str] = {"claude"}

    def which(command: str) -> Optional[str]:
        return f"/usr/bin/{command}" if command in commands else None

    monkeypatch.setattr("clibundle.tools.catalog.shutil.which", which)
    return commands


@pytest.fixture
def run_cli(
    workdir: Path,
    home: Path,
    package_manager: FakePackageManager,
    installed_commands: Set[str],
):
    runner = CliRunner()

    def run(*args: str, input: Optional[str] = None) -> Result:
        return runner.invoke(
            cli,
            ["--working-dir", str(workdir), *args],
            input=input,
            obj={"package_manager": package_manager},
        )

    return run
