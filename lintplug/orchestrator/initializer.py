"""Installation of declared plugins across working directories."""

from pathlib import Path
from typing import Callable, Optional, Sequence
from rich.console import Console

from lintplug.config import ConfigLoader
from lintplug.core.dependencies import (
    get_config_loader,
    get_plugin_installer,
    get_plugin_locator,
    get_signature_checker_factory,
)
from lintplug.errors import (
    ConfigError,
    ConfigLoadError,
    InstallationError,
    PluginLookupError,
    PluginNotFoundError,
    WorkingDirectoryError,
    WorkspaceError,
)
from lintplug.models import Classification, InstallConfig, InstallDecision
from lintplug.orchestrator.report import DirectoryReport, RunSummary
from lintplug.plugins import PluginInstaller, PluginLocator, SignatureChecker
from lintplug.utils import get_logger
from lintplug.workspace import working_directory

logger = get_logger(__name__)

BANNER = "Installing plugins on each working directory..."
SEPARATOR = "=" * 52
NO_SIGNING_KEY_WARNING = (
    'No signing key configured. Set "signing_key" to verify that the release '
    "is signed by the plugin developer"
)


def classify_plugin(install_config: InstallConfig, locator: PluginLocator) -> Classification:
    """
    Decide what to do with one declared plugin.

    Args:
        install_config: Plugin to classify
        locator: Locator used to search for the installed binary

    Returns:
        Classification with the decision, plus the binary path when already
        installed or the lookup error when the search failed
    """
    if install_config.is_manually_managed():
        return Classification(InstallDecision.MANUALLY_MANAGED, install_config)

    try:
        path = locator.find(install_config)
    except PluginNotFoundError:
        return Classification(InstallDecision.NEEDS_INSTALL, install_config)
    except Exception as e:
        return Classification(InstallDecision.LOOKUP_FAILED, install_config, error=e)

    return Classification(InstallDecision.ALREADY_INSTALLED, install_config, path=path)


class PluginInitializer:
    """Installs missing plugins for a sequence of working directories."""

    def __init__(
        self,
        console: Console,
        recursive: bool = False,
        config_path: Optional[str] = None,
        loader: Optional[ConfigLoader] = None,
        locator: Optional[PluginLocator] = None,
        installer: Optional[PluginInstaller] = None,
        signature_checker: Optional[Callable[[InstallConfig], SignatureChecker]] = None,
    ):
        """
        Initialize plugin initializer.

        Args:
            console: User-facing output stream
            recursive: Multi-directory mode with buffered per-directory reports
            config_path: Config file override, resolved in each directory
            loader: Config loader (default: from the container)
            locator: Plugin locator (default: from the container)
            installer: Plugin installer (default: from the container)
            signature_checker: Factory building a checker per plugin
        """
        self.console = console
        self.recursive = recursive
        self.config_path = config_path
        self.loader = loader or get_config_loader()
        self.locator = locator or get_plugin_locator()
        self.installer = installer or get_plugin_installer()
        self.signature_checker = signature_checker or get_signature_checker_factory()
        self.summary = RunSummary(recursive=recursive)

    def run(self, working_dirs: Sequence[Path]) -> RunSummary:
        """
        Process working directories in order, stopping at the first failure.

        Args:
            working_dirs: Directories to process

        Returns:
            Summary of the run

        Raises:
            WorkingDirectoryError: If a directory cannot be entered
            InitError: For the first directory that fails
        """
        if self.recursive:
            self.console.print(BANNER, markup=False, highlight=False)
            self.console.print()

        for wd in working_dirs:
            try:
                with working_directory(wd):
                    self.install_directory(wd)
            except WorkspaceError as e:
                raise WorkingDirectoryError(e, str(wd)) from e
            self.summary.directories += 1

        final = self.summary.final_message()
        if final:
            self.console.print(final, markup=False, highlight=False)

        logger.debug(
            f"Processed {self.summary.directories} working director(ies), "
            f"installed={self.summary.installed}"
        )
        return self.summary

    def install_directory(self, wd: Path) -> DirectoryReport:
        """
        Install the missing plugins of the current working directory.

        In recursive mode whatever is still buffered when the directory
        finishes is flushed to the console, so every directory shows its
        header and per-plugin lines even when nothing was installed.

        Args:
            wd: Directory being processed, as shown to the user

        Returns:
            The directory's report

        Raises:
            ConfigLoadError: If the configuration cannot be loaded
            PluginLookupError: If searching for a plugin fails
            InstallationError: If installing a plugin fails
        """
        report = DirectoryReport(self.console, buffered=self.recursive)
        report.append(SEPARATOR)
        report.append(f"working directory: {wd}")
        report.append("")

        try:
            config = self.loader.load(self.config_path)
        except ConfigError as e:
            report.flush()
            raise ConfigLoadError(e, str(wd)) from e

        found = False
        for declaration in config.plugins:
            result = classify_plugin(InstallConfig.from_declaration(config, declaration), self.locator)

            if result.decision is InstallDecision.MANUALLY_MANAGED:
                continue
            found = True

            if result.decision is InstallDecision.NEEDS_INSTALL:
                self._install(result.install_config, report, wd)
            elif result.decision is InstallDecision.LOOKUP_FAILED:
                report.flush()
                raise PluginLookupError(result.error, str(wd)) from result.error
            else:
                report.write(f'Plugin "{declaration.name}" is already installed')

        if not found:
            report.append("No plugins to install")

        report.flush()
        report.dump_to_log()
        return report

    def _install(self, install_config: InstallConfig, report: DirectoryReport, wd: Path) -> None:
        report.emit(f'Installing "{install_config.name}" plugin...')

        if not self.signature_checker(install_config).has_signing_key():
            report.emit(NO_SIGNING_KEY_WARNING, style="yellow")

        try:
            self.installer.install(install_config)
        except Exception as e:
            raise InstallationError(e, str(wd)) from e

        self.summary.installed = True
        report.emit(
            f'Installed "{install_config.name}" '
            f"(source: {install_config.source}, version: {install_config.version})"
        )
