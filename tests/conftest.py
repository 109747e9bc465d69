"""Pytest configuration and shared fixtures."""

import io
import pytest
import tempfile
from pathlib import Path
from typing import Generator, List, Optional
from loguru import logger
from rich.console import Console

from lintplug.core.container import reset_container
from lintplug.models import InstallConfig, reset_settings
from lintplug.plugins import PluginLocator


class FakeInstaller:
    """Installer double that writes an empty binary where the locator looks."""

    def __init__(self, locator: PluginLocator, error: Optional[Exception] = None):
        self.locator = locator
        self.error = error
        self.calls: List[str] = []

    def install(self, install_config: InstallConfig) -> Path:
        self.calls.append(install_config.name)
        if self.error:
            raise self.error
        path = self.locator.install_path(install_config)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"#!/bin/sh\n")
        return path


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def plugin_dir(temp_dir: Path) -> Path:
    """Plugin directory used by the locator and installer."""
    path = temp_dir / "plugins"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path: Path) -> Generator[None, None, None]:
    """Run every test from a scratch directory with fresh settings and container."""
    for name in ("LINTPLUG_PLUGIN_DIR", "LINTPLUG_GITHUB_TOKEN", "GITHUB_TOKEN", "LINTPLUG_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    reset_container()
    yield
    reset_settings()
    reset_container()


@pytest.fixture
def use_plugin_dir(monkeypatch, plugin_dir: Path) -> Path:
    """Point settings at the temporary plugin directory."""
    monkeypatch.setenv("LINTPLUG_PLUGIN_DIR", str(plugin_dir))
    reset_settings()
    return plugin_dir


@pytest.fixture
def locator(use_plugin_dir: Path) -> PluginLocator:
    """Locator searching the temporary plugin directory."""
    return PluginLocator()


@pytest.fixture
def fake_installer(locator: PluginLocator) -> FakeInstaller:
    """Installer double bound to the test locator."""
    return FakeInstaller(locator)


@pytest.fixture
def failing_installer(locator: PluginLocator) -> FakeInstaller:
    """Installer double that always fails."""
    from lintplug.errors import PluginInstallError

    return FakeInstaller(locator, error=PluginInstallError("release v0.1.0 not found", "aws"))


@pytest.fixture
def install_binary(locator: PluginLocator):
    """Place a plugin binary in the plugin directory."""

    def _install(name: str, source: str, version: str) -> Path:
        path = locator.install_path(InstallConfig(name=name, source=source, version=version))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"#!/bin/sh\n")
        return path

    return _install


@pytest.fixture
def write_config():
    """Write a ``.lintplug.toml`` into a directory, creating it if needed."""

    def _write(directory: Path, content: str, name: str = ".lintplug.toml") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def output() -> io.StringIO:
    """Buffer receiving user-facing output."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Plain console writing into the output buffer."""
    return Console(file=output, force_terminal=False, color_system=None, width=200)


@pytest.fixture
def debug_log() -> Generator[List[str], None, None]:
    """Collect the messages of debug log records."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def aws_config() -> str:
    """Config declaring one sourced plugin."""
    return """
[plugin.aws]
source = "github.com/lintplug/lintplug-ruleset-aws"
version = "0.1.0"
"""
