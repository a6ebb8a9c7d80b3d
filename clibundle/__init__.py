# -*- coding: utf-8 -*-
"""clibundle — manage AI assistant CLI tools and sync their provider
settings."""

__version__ = "2.1.0"
