"""Core dependency injection and container."""

from .container import Container, get_container, reset_container
from .dependencies import (
    get_config_loader,
    get_plugin_installer,
    get_plugin_locator,
    get_signature_checker_factory,
)

__all__ = [
    "Container",
    "get_container",
    "reset_container",
    "get_config_loader",
    "get_plugin_installer",
    "get_plugin_locator",
    "get_signature_checker_factory",
]
