"""Configuration settings for swfshape."""

from pathlib import Path

from pydantic import BaseModel, Field


class DecodeConfig(BaseModel):
    """Configuration for shape decoding."""

    coordinate_scale: float = Field(
        default=1.0,
        gt=0.0,
        description="Multiplier applied to fixed-point coordinates (0.05 converts twips to pixels)",
    )


class OutputConfig(BaseModel):
    """Configuration for decoded shape output."""

    include_svg: bool = Field(
        default=True,
        description="Add SVG path data next to the command list of each path",
    )
    svg_precision: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Maximum decimals per coordinate in SVG path data",
    )
    indent: int | None = Field(
        default=2,
        ge=0,
        description="JSON indentation (None = compact)",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SwfShapeSettings(BaseModel):
    """Main application settings."""

    decode: DecodeConfig = Field(default_factory=DecodeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SwfShapeSettings:
    """Get default application settings."""
    return SwfShapeSettings()
