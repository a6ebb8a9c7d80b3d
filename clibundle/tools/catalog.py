# -*- coding: utf-8 -*-
"""Catalog of installable AI CLI tools (tools.json)."""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from ..constant import TOOLS_CONFIG_VERSION, TOOLS_FILE, WORKING_DIR
from ..exceptions import ConfigLoadError
from ..settings import write_document

logger = logging.getLogger(__name__)


class ToolDefinition(BaseModel):
    """One installable CLI tool."""

    model_config = {"populate_by_name": True}

    id: str = Field(..., description="Tool identifier, e.g. claude-code")
    name: str = Field(..., description="Human-readable tool name")
    command: str = Field(..., description="Executable the tool installs")
    install_type: str = Field(default="npm", alias="installType")
    package_name: str = Field(..., alias="packageName")
    description: str = ""
    enabled: bool = True


class ToolsData(BaseModel):
    """Top-level structure of tools.json."""

    version: str = TOOLS_CONFIG_VERSION
    description: str = "CLI Bundle tools configuration file"
    tools: List[ToolDefinition] = Field(default_factory=list)


DEFAULT_TOOLS: List[ToolDefinition] = [
    ToolDefinition(
        id="claude-code",
        name="Claude Code",
        command="claude",
        package_name="@anthropic-ai/claude-code",
        description="Anthropic official Claude CLI tool",
    ),
    ToolDefinition(
        id="iflow-cli",
        name="iFlow CLI",
        command="iflow",
        package_name="@iflow-ai/iflow-cli",
        description="iFlow AI CLI tool",
    ),
    ToolDefinition(
        id="openai-codex",
        name="OpenAI Codex",
        command="codex",
        package_name="@openai/codex",
        description="OpenAI Codex CLI tool for code generation",
    ),
    ToolDefinition(
        id="google-gemini",
        name="Google Gemini CLI",
        command="gemini",
        package_name="@google/gemini-cli",
        description="Google Gemini AI CLI tool",
    ),
]


def get_tools_json_path() -> Path:
    """Return the default tools.json path."""
    return WORKING_DIR / TOOLS_FILE


def default_tools_data() -> ToolsData:
    return ToolsData(tools=[t.model_copy() for t in DEFAULT_TOOLS])


def load_tools_json(
    path: Optional[Path] = None,
    *,
    create: bool = True,
) -> ToolsData:
    """Load tools.json, writing the default catalog first if absent."""
    if path is None:
        path = get_tools_json_path()

    if not path.is_file():
        data = default_tools_data()
        if create:
            logger.info("Creating default tool catalog at %s", path)
            save_tools_json(data, path)
        return data

    try:
        with open(path, "r", encoding="utf-8") as fh:
            return ToolsData.model_validate(json.load(fh))
    except (OSError, ValueError) as e:
        raise ConfigLoadError(path, str(e)) from e


def save_tools_json(data: ToolsData, path: Optional[Path] = None) -> None:
    if path is None:
        path = get_tools_json_path()
    write_document(path, "json", data.model_dump(by_alias=True, mode="json"))


class ToolCatalog:
    """Query the tool catalog and probe which tools are installed.

    *which* resolves a command on ``PATH``; tests inject a fake.
    """

    def __init__(
        self,
        data: Optional[ToolsData] = None,
        which: Optional[Callable[[str], Optional[str]]] = None,
    ) -> None:
        self.data = data if data is not None else default_tools_data()
        self._which = which or shutil.which

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "ToolCatalog":
        return cls(load_tools_json(path))

    def enabled_tools(self) -> List[ToolDefinition]:
        return [t for t in self.data.tools if t.enabled]

    def get(self, tool_id: str) -> Optional[ToolDefinition]:
        for tool in self.data.tools:
            if tool.id == tool_id:
                return tool
        return None

    def is_installed(self, tool: ToolDefinition) -> bool:
        return self._which(tool.command) is not None

    def installed_tools(self) -> List[ToolDefinition]:
        return [t for t in self.enabled_tools() if self.is_installed(t)]

    def uninstalled_tools(self) -> List[ToolDefinition]:
        return [t for t in self.enabled_tools() if not self.is_installed(t)]
