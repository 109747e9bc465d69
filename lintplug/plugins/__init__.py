"""Plugin lookup, signature checks and installation."""

from .locator import PluginLocator
from .signature import SignatureChecker
from .installer import PluginInstaller, parse_checksums, platform_pair

__all__ = [
    "PluginLocator",
    "SignatureChecker",
    "PluginInstaller",
    "parse_checksums",
    "platform_pair",
]
