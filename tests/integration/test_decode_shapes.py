"""End-to-end decoding of the fixture shapes."""

from pathlib import Path

import pytest
from fontTools.pens.recordingPen import RecordingPen

from swfshape.core import decode_shape
from swfshape.domain import CommandType, Rgba8, SolidFill
from swfshape.exceptions import InvalidStyleIndexError
from swfshape.io import ShapeReader

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def load(name: str):
    with ShapeReader(FIXTURES_DIR / name) as reader:
        return reader.definition


class TestSquares:
    """Two filled squares, the first one outlined."""

    @pytest.fixture
    def shape(self):
        return decode_shape(load("squares.json"))

    def test_path_order(self, shape):
        """Test fills in table order followed by the line."""
        assert len(shape.paths) == 3
        assert shape.paths[0].fill == SolidFill(Rgba8(255, 0, 0))
        assert shape.paths[1].fill == SolidFill(Rgba8(0, 0, 255))
        assert shape.paths[2].line is not None
        assert shape.paths[2].line.width == 20

    def test_squares_are_closed(self, shape):
        for styled in shape.paths:
            pen = RecordingPen()
            styled.path.draw(pen)
            assert pen.value[-1] == ("closePath", ())
            assert styled.path.subpath_count == 1

    def test_bounds(self, shape):
        red, blue, line = shape.paths
        assert red.path.control_bounds() == (0.0, 0.0, 100.0, 100.0)
        assert blue.path.control_bounds() == (200.0, 0.0, 300.0, 100.0)
        assert line.path.control_bounds() == red.path.control_bounds()
        assert shape.control_bounds() == (0.0, 0.0, 300.0, 100.0)

    def test_scaled_to_pixels(self):
        shape = decode_shape(load("squares.json"), scale=0.05)
        assert shape.control_bounds() == pytest.approx((0.0, 0.0, 15.0, 5.0))


class TestTriangle:
    """A right-filled curved triangle followed by a new style table."""

    @pytest.fixture
    def shape(self):
        return decode_shape(load("triangle.json"))

    def test_two_layers(self, shape):
        assert len(shape.paths) == 2
        assert shape.paths[0].fill == SolidFill(Rgba8(255, 0, 0))
        assert shape.paths[1].fill == SolidFill(Rgba8(0, 128, 0))

    def test_right_fill_chain(self, shape):
        """Test that reversed right-fill edges join into one closed chain."""
        commands = shape.paths[0].path.commands
        assert [c.command_type for c in commands] == [
            CommandType.MOVE_TO,
            CommandType.QUAD_TO,
            CommandType.LINE_TO,
            CommandType.LINE_TO,
        ]
        assert [[p.to_tuple() for p in c.points] for c in commands] == [
            [(50.0, 100.0)],
            [(100.0, 50.0), (100.0, 0.0)],
            [(0.0, 0.0)],
            [(50.0, 100.0)],
        ]

    def test_second_layer_starts_at_move(self, shape):
        commands = shape.paths[1].path.commands
        assert commands[0].end.to_tuple() == (200.0, 0.0)
        assert shape.paths[1].path.control_bounds() == (200.0, 0.0, 210.0, 10.0)

    def test_svg(self, shape):
        svg = shape.paths[0].path.to_svg_path()
        assert svg.startswith("M50 100Q100 50 100 0")
        assert svg.endswith("Z")


def test_invalid_style_index():
    with pytest.raises(InvalidStyleIndexError) as exc_info:
        decode_shape(load("invalid_style.json"))
    assert exc_info.value.kind == "left fill"
