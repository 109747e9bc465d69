"""Plugin provisioning for the lintplug static-analysis tool."""

__version__ = "0.1.0"
