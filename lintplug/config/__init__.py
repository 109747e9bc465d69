"""Project configuration loading."""

from .loader import ConfigLoader

__all__ = ["ConfigLoader"]
