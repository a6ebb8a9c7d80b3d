# -*- coding: utf-8 -*-
"""Provider management — models, registry + persistent store."""

from .defaults import (
    DEFAULT_PROVIDERS,
    DEFAULT_TOOL_BINDINGS,
    default_ai_config,
)
from .models import (
    AIConfigData,
    CustomTarget,
    Provider,
    ToolBinding,
    expand_placeholders,
    placeholder_name,
)
from .registry import ProviderRegistry
from .store import (
    dump_ai_config,
    get_ai_config_path,
    load_ai_config,
    mask_api_key,
    save_ai_config,
)

__all__ = [
    # defaults
    "DEFAULT_PROVIDERS",
    "DEFAULT_TOOL_BINDINGS",
    "default_ai_config",
    # models
    "AIConfigData",
    "CustomTarget",
    "Provider",
    "ToolBinding",
    "expand_placeholders",
    "placeholder_name",
    # registry
    "ProviderRegistry",
    # store
    "dump_ai_config",
    "get_ai_config_path",
    "load_ai_config",
    "mask_api_key",
    "save_ai_config",
]
