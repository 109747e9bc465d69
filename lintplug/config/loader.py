"""Loading of per-directory ``.lintplug.toml`` files."""

import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional
from pydantic import ValidationError

from lintplug.errors import ConfigError
from lintplug.models import Configuration, PluginDeclaration, get_settings
from lintplug.utils import get_logger

logger = get_logger(__name__)


class ConfigLoader:
    """Reads and validates the configuration of the current working directory."""

    def __init__(self, config_name: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_name: File name looked up when no explicit path is given
        """
        self.config_name = config_name or get_settings().config_file

    def load(self, config_path: Optional[str] = None) -> Configuration:
        """
        Load configuration relative to the current working directory.

        Args:
            config_path: Explicit config file; must exist when given

        Returns:
            Parsed configuration. An empty one when no file is present and
            no explicit path was requested.

        Raises:
            ConfigError: If the file is missing, malformed or invalid
        """
        if config_path:
            path = Path(config_path)
            if not path.is_file():
                raise ConfigError(f"failed to load file: {config_path} does not exist")
        else:
            path = Path(self.config_name)
            if not path.is_file():
                logger.debug(f"{self.config_name} not found, using default config")
                return Configuration()

        logger.debug(f"Loading config file: {path}")

        try:
            with open(path, "rb") as f:
                raw = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"{path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"failed to load file: {e}") from e

        return self.parse(raw, str(path))

    def parse(self, raw: Dict[str, Any], path: Optional[str] = None) -> Configuration:
        """
        Build a configuration from decoded TOML.

        Args:
            raw: Decoded TOML document
            path: Source file, used in error messages

        Returns:
            Validated configuration
        """
        source = path or "<config>"
        settings_table = raw.get("config", {})
        plugin_tables = raw.get("plugin", {})

        if not isinstance(settings_table, dict):
            raise ConfigError(f'{source}: "config" must be a table')
        if not isinstance(plugin_tables, dict):
            raise ConfigError(f'{source}: "plugin" must be a table of plugin tables')

        plugins: List[PluginDeclaration] = []
        for name, table in plugin_tables.items():
            if not isinstance(table, dict):
                raise ConfigError(f'{source}: plugin "{name}" must be a table')
            try:
                plugins.append(PluginDeclaration(name=name, **table))
            except (ValidationError, TypeError) as e:
                raise ConfigError(f'{source}: plugin "{name}": {_describe(e)}') from e

        plugin_dir = settings_table.get("plugin_dir")
        if plugin_dir is not None and not isinstance(plugin_dir, str):
            raise ConfigError(f'{source}: "plugin_dir" must be a string')

        logger.debug(f"Loaded {len(plugins)} plugin declaration(s) from {source}")
        return Configuration(path=path, plugin_dir=plugin_dir, plugins=plugins)


def _describe(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(err["msg"] for err in error.errors())
    return str(error)
