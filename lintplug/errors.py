"""Exception hierarchy for plugin provisioning."""

from typing import Optional


class LintplugError(Exception):
    """Base class for all lintplug errors."""


class WorkspaceError(LintplugError):
    """Working directories could not be resolved."""


class ConfigError(LintplugError):
    """A configuration file is missing, malformed or invalid."""


class PluginNotFoundError(FileNotFoundError):
    """The plugin binary is not present in the plugin directory."""


class PluginInstallError(LintplugError):
    """Download, verification or extraction of a plugin release failed."""

    def __init__(self, message: str, plugin_name: Optional[str] = None):
        self.plugin_name = plugin_name
        super().__init__(message)


class InitError(LintplugError):
    """
    Fatal error for the working directory being initialized.

    The message names the failed operation and carries the cause, e.g.
    ``Failed to load config; <cause>``.
    """

    operation = "initialize"

    def __init__(self, cause: Exception, directory: Optional[str] = None):
        self.cause = cause
        self.directory = directory
        super().__init__(f"Failed to {self.operation}; {cause}")


class ConfigLoadError(InitError):
    """Configuration for the directory could not be loaded."""

    operation = "load config"


class PluginLookupError(InitError):
    """Searching for an installed plugin failed for a reason other than absence."""

    operation = "find a plugin"


class InstallationError(InitError):
    """The installer failed to provision a plugin."""

    operation = "install a plugin"


class WorkingDirectoryError(InitError):
    """A resolved working directory could not be entered."""

    operation = "change working directory"
