"""Signing key checks for plugin releases."""

from lintplug.models import InstallConfig


class SignatureChecker:
    """Reports whether a release of a plugin can be checked against a developer key."""

    def __init__(self, install_config: InstallConfig):
        self.install_config = install_config

    def has_signing_key(self) -> bool:
        return bool(self.install_config.signing_key and self.install_config.signing_key.strip())
