"""Configuration loading for lingssg projects."""
from __future__ import annotations

from .manager import ENV_PREFIX, PROJECT_CONFIG_DIR, ConfigManager
from .site import SiteConfig

__all__ = ["ConfigManager", "SiteConfig", "ENV_PREFIX", "PROJECT_CONFIG_DIR"]
