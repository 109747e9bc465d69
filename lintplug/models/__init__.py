"""Data models for lintplug."""

from .config import Settings, get_settings, reset_settings
from .plugin import (
    PluginDeclaration,
    Configuration,
    InstallConfig,
    InstallDecision,
    Classification,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "PluginDeclaration",
    "Configuration",
    "InstallConfig",
    "InstallDecision",
    "Classification",
]
