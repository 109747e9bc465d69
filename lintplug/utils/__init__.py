"""Utility functions and helpers."""

from .logger import setup_logging, get_logger, SecretRedactor

__all__ = ["setup_logging", "get_logger", "SecretRedactor"]
