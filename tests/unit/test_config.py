"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from swfshape.config import DecodeConfig, OutputConfig, SwfShapeSettings, get_default_settings


def test_defaults():
    settings = get_default_settings()
    assert settings.decode.coordinate_scale == 1.0
    assert settings.output.include_svg is True
    assert settings.output.svg_precision == 3
    assert settings.processing.max_workers is None
    assert settings.logging.log_file is None


@pytest.mark.parametrize("scale", [0.0, -1.0])
def test_scale_must_be_positive(scale):
    with pytest.raises(ValidationError):
        DecodeConfig(coordinate_scale=scale)


def test_svg_precision_range():
    with pytest.raises(ValidationError):
        OutputConfig(svg_precision=11)


def test_worker_dump_round_trip():
    """Test that the sections sent to workers rebuild equal settings."""
    settings = SwfShapeSettings(decode=DecodeConfig(coordinate_scale=0.05))
    dumped = settings.model_dump(include={"decode", "output"})
    assert SwfShapeSettings(**dumped).decode == settings.decode
