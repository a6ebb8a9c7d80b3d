# -*- coding: utf-8 -*-
"""Apply engine — project providers into tool settings files."""

from .engine import ApplyEngine, apply_provider_to_adapter, value_for_field
from .models import ApplyResult, ApplySummary

__all__ = [
    "ApplyEngine",
    "ApplyResult",
    "ApplySummary",
    "apply_provider_to_adapter",
    "value_for_field",
]
