"""
Shared utilities for the relay services
"""

from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]

__version__ = "1.0.0"
