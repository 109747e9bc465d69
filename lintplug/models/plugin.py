"""Data models for plugin declarations and install decisions."""

import re
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

BINARY_PREFIX = "lintplug-ruleset-"
SUPPORTED_SOURCE_HOSTS = ("github.com",)

_VERSION_RE = re.compile(
    r"^\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$"
)


class PluginDeclaration(BaseModel):
    """One ``[plugin.<name>]`` table from a configuration file."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Plugin name")
    source: Optional[str] = Field(None, description="Source repository, e.g. github.com/org/repo")
    version: Optional[str] = Field(None, description="Exact release version")
    signing_key: Optional[str] = Field(None, description="PGP public key of the plugin developer")

    @field_validator("source")
    @classmethod
    def validate_source(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        parts = value.split("/")
        if len(parts) != 3 or not all(parts):
            raise ValueError(
                f'plugin source "{value}" is invalid. Must be in the format "github.com/owner/repo"'
            )
        if parts[0] not in SUPPORTED_SOURCE_HOSTS:
            raise ValueError(f'plugin source host "{parts[0]}" is not supported')
        return value

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        if not _VERSION_RE.match(value):
            raise ValueError(f'plugin version "{value}" is not a semantic version (e.g. "0.1.0")')
        return value


class Configuration(BaseModel):
    """Loaded configuration for one working directory."""

    path: Optional[str] = Field(None, description="File the configuration was read from")
    plugin_dir: Optional[str] = Field(None, description="Plugin directory override")
    plugins: List[PluginDeclaration] = Field(default_factory=list)


class InstallConfig(BaseModel):
    """Everything the locator and installer need to know about one plugin."""

    name: str
    source: Optional[str] = None
    version: Optional[str] = None
    signing_key: Optional[str] = None
    plugin_dir: Optional[str] = None

    @classmethod
    def from_declaration(cls, config: Configuration, declaration: PluginDeclaration) -> "InstallConfig":
        return cls(
            name=declaration.name,
            source=declaration.source,
            version=declaration.version,
            signing_key=declaration.signing_key,
            plugin_dir=config.plugin_dir,
        )

    def is_manually_managed(self) -> bool:
        """A plugin without source or version must be installed by hand."""
        return not self.source or not self.version

    @property
    def owner(self) -> str:
        return self.source.split("/")[1]

    @property
    def repo(self) -> str:
        return self.source.split("/")[2]

    @property
    def binary_name(self) -> str:
        name = f"{BINARY_PREFIX}{self.name}"
        if sys.platform == "win32":
            name += ".exe"
        return name

    def relative_install_path(self) -> Path:
        """Location of the binary below the plugin directory."""
        return Path(self.source) / self.version / self.binary_name

    def asset_name(self, os_name: str, arch: str) -> str:
        return f"{BINARY_PREFIX}{self.name}_{os_name}_{arch}.zip"

    def tag_name(self) -> str:
        return f"v{self.version}"


class InstallDecision(str, Enum):
    """What to do with one declared plugin in one working directory."""

    MANUALLY_MANAGED = "manually_managed"
    ALREADY_INSTALLED = "already_installed"
    NEEDS_INSTALL = "needs_install"
    LOOKUP_FAILED = "lookup_failed"


@dataclass
class Classification:
    """An install decision plus whatever the lookup produced."""

    decision: InstallDecision
    install_config: InstallConfig
    path: Optional[Path] = None
    error: Optional[Exception] = None
