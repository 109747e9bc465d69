"""Plugin provisioning across working directories."""

from .report import DirectoryReport, RunSummary
from .initializer import PluginInitializer, classify_plugin

__all__ = ["DirectoryReport", "RunSummary", "PluginInitializer", "classify_plugin"]
