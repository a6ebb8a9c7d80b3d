# -*- coding: utf-8 -*-
"""clibundle exception hierarchy.

Everything raised on purpose derives from :class:`CliBundleError`, so the
CLI can turn any of them into a one-line message and a non-zero exit code
without catching unrelated failures.
"""


class CliBundleError(Exception):
    """Base exception for all clibundle errors."""


class ProviderNotFound(CliBundleError):
    """Raised when a named provider is absent from the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Provider not found: {name}")
        self.name = name


class ToolNotConfigured(CliBundleError):
    """Raised when a tool has no binding, or its binding is disabled."""

    def __init__(self, tool_id: str) -> None:
        super().__init__(f"Tool not configured or disabled: {tool_id}")
        self.tool_id = tool_id


class UnsupportedFormat(CliBundleError):
    """Raised by the settings store for a format other than json / toml.

    The apply engine never lets this escape: it becomes a failed
    ``ApplyResult`` for the adapter that declared the format.
    """

    def __init__(self, format_type: str) -> None:
        super().__init__(f"Unsupported type: {format_type}")
        self.format_type = format_type


class ConfigLoadError(CliBundleError):
    """Raised when clibundle's own registry file cannot be parsed."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = path
        self.reason = reason
