"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from lintplug import __version__
from lintplug.cli.main import app
from lintplug.core import get_container
from lintplug.errors import PluginInstallError

AWS_SOURCE = "github.com/lintplug/lintplug-ruleset-aws"


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def use_fake_installer(fake_installer):
    """Register the installer double in the global container."""
    get_container().register_singleton("PluginInstaller", fake_installer)
    return fake_installer


class TestInitCommand:
    """Test `lintplug init`."""

    def test_installs_missing_plugin(self, runner, temp_dir, write_config, aws_config, use_fake_installer):
        """Missing plugins are installed and the command succeeds."""
        write_config(temp_dir, aws_config)

        result = runner.invoke(app, ["init", "--chdir", str(temp_dir)])

        assert result.exit_code == 0
        assert 'Installing "aws" plugin...' in result.output
        assert f'Installed "aws" (source: {AWS_SOURCE}, version: 0.1.0)' in result.output
        assert use_fake_installer.calls == ["aws"]

    def test_already_installed(self, runner, temp_dir, write_config, aws_config, install_binary, use_fake_installer):
        """Installed plugins are reported and not reinstalled."""
        install_binary("aws", AWS_SOURCE, "0.1.0")
        write_config(temp_dir, aws_config)

        result = runner.invoke(app, ["init", "--chdir", str(temp_dir)])

        assert result.exit_code == 0
        assert 'Plugin "aws" is already installed' in result.output
        assert use_fake_installer.calls == []

    def test_recursive(self, runner, temp_dir, write_config, aws_config, install_binary, use_fake_installer, monkeypatch):
        """Recursive runs print a banner and a summary."""
        install_binary("aws", AWS_SOURCE, "0.1.0")
        write_config(temp_dir / "a", aws_config)
        write_config(temp_dir / "b", "")
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(app, ["init", "--recursive"])

        assert result.exit_code == 0
        assert result.output.startswith("Installing plugins on each working directory...")
        assert "working directory: a" in result.output
        assert "working directory: b" in result.output
        assert "No plugins to install" in result.output
        assert result.output.rstrip().endswith("All plugins are already installed")

    def test_config_error_exits_with_error(self, runner, temp_dir, write_config, aws_config, use_fake_installer, monkeypatch):
        """The first failing directory stops the run with exit code 1."""
        write_config(temp_dir / "a", "[plugin.aws\n")
        write_config(temp_dir / "b", aws_config)
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(app, ["init", "--recursive"])

        assert result.exit_code == 1
        assert "Error: Failed to load config;" in result.output
        assert "working directory: b" not in result.output
        assert use_fake_installer.calls == []

    def test_install_error_exits_with_error(self, runner, temp_dir, write_config, aws_config, use_fake_installer):
        """Installer failures exit with code 1."""
        use_fake_installer.error = PluginInstallError("release v0.1.0 not found", "aws")
        write_config(temp_dir, aws_config)

        result = runner.invoke(app, ["init", "--chdir", str(temp_dir)])

        assert result.exit_code == 1
        assert "Error: Failed to install a plugin;" in result.output

    def test_missing_chdir(self, runner, temp_dir):
        """Unresolvable working directories exit with code 1."""
        result = runner.invoke(app, ["init", "--chdir", str(temp_dir / "missing")])

        assert result.exit_code == 1
        assert "Error: Failed to find workspaces;" in result.output

    def test_custom_config(self, runner, temp_dir, write_config, aws_config, use_fake_installer):
        """--config selects another file name."""
        write_config(temp_dir, aws_config, name="ci.toml")

        result = runner.invoke(app, ["init", "--chdir", str(temp_dir), "--config", "ci.toml"])

        assert result.exit_code == 0
        assert use_fake_installer.calls == ["aws"]

    def test_recursive_custom_config(self, runner, temp_dir, write_config, aws_config, use_fake_installer, monkeypatch):
        """--config also selects the file that marks recursive working directories."""
        write_config(temp_dir / "a", aws_config, name="ci.toml")
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(app, ["init", "--recursive", "--config", "ci.toml"])

        assert result.exit_code == 0
        assert "working directory: a" in result.output
        assert use_fake_installer.calls == ["aws"]

    def test_vanished_working_directory(self, runner, temp_dir, monkeypatch):
        """A directory that cannot be entered exits with code 1."""
        monkeypatch.setattr(
            "lintplug.cli.main.resolve_working_dirs", lambda *args, **kwargs: [temp_dir / "missing"]
        )

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "Error: Failed to change working directory;" in result.output


class TestVersionCommand:
    """Test `lintplug version`."""

    def test_version(self, runner):
        """The package version is printed."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"v{__version__}" in result.output
