# -*- coding: utf-8 -*-
"""Adapters — where provider fields land in each tool's settings file."""

from .models import Adapter
from .registry import (
    PROVIDER_TYPE_MAPPINGS,
    AdapterRegistry,
    adapter_from_target,
)

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "PROVIDER_TYPE_MAPPINGS",
    "adapter_from_target",
]
