# -*- coding: utf-8 -*-
"""Tool catalog and package installer."""

from .catalog import (
    DEFAULT_TOOLS,
    ToolCatalog,
    ToolDefinition,
    ToolsData,
    default_tools_data,
    get_tools_json_path,
    load_tools_json,
    save_tools_json,
)
from .installer import PackageManager

__all__ = [
    "DEFAULT_TOOLS",
    "PackageManager",
    "ToolCatalog",
    "ToolDefinition",
    "ToolsData",
    "default_tools_data",
    "get_tools_json_path",
    "load_tools_json",
    "save_tools_json",
]
