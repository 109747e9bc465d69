"""Dependency provider functions."""

from typing import Callable

from lintplug.config import ConfigLoader
from lintplug.core.container import get_container
from lintplug.models import InstallConfig
from lintplug.plugins import PluginInstaller, PluginLocator, SignatureChecker


def get_config_loader() -> ConfigLoader:
    """
    Get config loader instance.

    Returns:
        ConfigLoader instance
    """
    return get_container().resolve("ConfigLoader")


def get_plugin_locator() -> PluginLocator:
    """
    Get plugin locator instance.

    Returns:
        PluginLocator instance
    """
    return get_container().resolve("PluginLocator")


def get_plugin_installer() -> PluginInstaller:
    """
    Get plugin installer instance.

    Returns:
        PluginInstaller instance
    """
    return get_container().resolve("PluginInstaller")


def get_signature_checker_factory() -> Callable[[InstallConfig], SignatureChecker]:
    """Get the callable building a signature checker for one plugin."""
    return get_container().resolve("SignatureChecker")
