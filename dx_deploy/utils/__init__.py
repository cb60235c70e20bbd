"""Utility functions for dx_deploy."""

from dx_deploy.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
