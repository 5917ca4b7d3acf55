"""Utility functions for swfshape.

This module provides utility functions including:

- Logging setup and configuration
- Decode statistics tracking
"""

from swfshape.utils.logging import (
    DecodeLogger,
    DecodeStats,
    configure_logging,
)

__all__ = [
    "DecodeLogger",
    "DecodeStats",
    "configure_logging",
]
