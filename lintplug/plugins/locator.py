"""Locating installed plugin binaries."""

import os
import stat
from pathlib import Path
from typing import Optional

from lintplug.errors import PluginNotFoundError
from lintplug.models import InstallConfig, get_settings
from lintplug.utils import get_logger

logger = get_logger(__name__)

LOCAL_PLUGIN_DIR = Path(".lintplug.d") / "plugins"
HOME_PLUGIN_DIR = Path("~") / ".lintplug.d" / "plugins"


class PluginLocator:
    """Resolves the plugin directory and the binary path of a plugin."""

    def __init__(self, plugin_dir: Optional[str] = None):
        """
        Initialize plugin locator.

        Args:
            plugin_dir: Directory overriding settings and defaults
        """
        self.plugin_dir = plugin_dir

    def plugin_root(self, install_config: InstallConfig) -> Path:
        """
        Get the directory plugins are installed into.

        Precedence: config file, locator override, settings/environment,
        ``./.lintplug.d/plugins`` when present, ``~/.lintplug.d/plugins``.
        """
        for candidate in (install_config.plugin_dir, self.plugin_dir, get_settings().plugin_dir):
            if candidate:
                return Path(candidate).expanduser()

        if LOCAL_PLUGIN_DIR.is_dir():
            return LOCAL_PLUGIN_DIR
        return HOME_PLUGIN_DIR.expanduser()

    def install_path(self, install_config: InstallConfig) -> Path:
        """Where the binary of a sourced plugin is expected."""
        return self.plugin_root(install_config) / install_config.relative_install_path()

    def find(self, install_config: InstallConfig) -> Path:
        """
        Find the installed binary of a plugin.

        Args:
            install_config: Plugin to look up

        Returns:
            Path to the binary

        Raises:
            PluginNotFoundError: If the binary is not installed
            OSError: If the plugin directory cannot be inspected
        """
        path = self.install_path(install_config)

        try:
            mode = os.stat(path).st_mode
        except FileNotFoundError as e:
            raise PluginNotFoundError(
                e.errno, f'Plugin "{install_config.name}" not found', str(path)
            ) from e

        if not stat.S_ISREG(mode):
            raise OSError(f"{path} is not a regular file")

        logger.debug(f'Found plugin "{install_config.name}" at {path}')
        return path
