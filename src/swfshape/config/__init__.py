"""Configuration management for swfshape.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- DecodeConfig: Coordinate conversion settings
- OutputConfig: Decoded JSON output settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- SwfShapeSettings: Main application settings
"""

from swfshape.config.settings import (
    DecodeConfig,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    SwfShapeSettings,
    get_default_settings,
)

__all__ = [
    "DecodeConfig",
    "LoggingConfig",
    "OutputConfig",
    "ProcessingConfig",
    "SwfShapeSettings",
    "get_default_settings",
]
