# -*- coding: utf-8 -*-
import os
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("CLIBUNDLE_WORKING_DIR", "~/.clibundle"))
    .expanduser()
    .resolve()
)

AI_CONFIG_FILE = os.environ.get("CLIBUNDLE_AI_CONFIG_FILE", "ai.json")

TOOLS_FILE = os.environ.get("CLIBUNDLE_TOOLS_FILE", "tools.json")

# Optional dotenv file holding secrets referenced by ${VAR} placeholders.
ENV_FILE = ".env"

# Env key for log level (read by the CLI entry point).
LOG_LEVEL_ENV = "CLIBUNDLE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "info"

AI_CONFIG_VERSION = "2.1.0"
TOOLS_CONFIG_VERSION = "1.0.0"

# Package manager used for tool install / update / uninstall.
PACKAGE_MANAGER = os.environ.get("CLIBUNDLE_PACKAGE_MANAGER", "npm")
