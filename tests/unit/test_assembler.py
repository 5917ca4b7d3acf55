"""Tests for shape assembly."""

from swfshape.core.assembler import assemble_layer, assemble_shape
from swfshape.core.style_layer import SegmentSet, StyleLayer
from swfshape.domain import LineStyle, Rgba8, Segment, SolidFill, Vector2D

RED = SolidFill(Rgba8(255, 0, 0))
BLUE = SolidFill(Rgba8(0, 0, 255))
THIN = LineStyle(width=20)

EDGE = Segment(Vector2D(0, 0), Vector2D(10, 0))


class TestAssembleLayer:
    """Tests for assemble_layer."""

    def test_empty_bags_are_skipped(self):
        layer = StyleLayer(
            fills=(SegmentSet(RED), SegmentSet(BLUE, (EDGE,))),
            lines=(SegmentSet(THIN),),
        )
        paths = assemble_layer(layer)
        assert len(paths) == 1
        assert paths[0].fill == BLUE

    def test_fills_before_lines(self):
        """Test that fills come first in table order, then lines."""
        layer = StyleLayer(
            fills=(SegmentSet(RED, (EDGE,)), SegmentSet(BLUE, (EDGE,))),
            lines=(SegmentSet(THIN, (EDGE,)),),
        )
        paths = assemble_layer(layer)
        assert [p.fill for p in paths] == [RED, BLUE, None]
        assert paths[2].line == THIN


class TestAssembleShape:
    """Tests for assemble_shape."""

    def test_layers_in_creation_order(self):
        first = StyleLayer(lines=(SegmentSet(THIN, (EDGE,)),))
        second = StyleLayer(fills=(SegmentSet(RED, (EDGE,)),))
        shape = assemble_shape([first, second])
        assert shape.paths[0].line == THIN
        assert shape.paths[1].fill == RED

    def test_no_layers(self):
        assert assemble_shape([]).paths == ()

    def test_scale_applies_to_all_paths(self):
        layer = StyleLayer(fills=(SegmentSet(RED, (EDGE,)),))
        shape = assemble_shape([layer], scale=0.5)
        assert shape.paths[0].path.control_bounds() == (0.0, 0.0, 5.0, 0.0)
