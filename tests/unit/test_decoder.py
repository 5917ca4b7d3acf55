"""Tests for the shape record walker."""

import pytest

from swfshape.core.decoder import ShapeDecoder, decode_layers, decode_shape
from swfshape.domain import (
    CommandType,
    CurvedEdge,
    LineStyle,
    Rgba8,
    Segment,
    ShapeDefinition,
    ShapeStyles,
    SolidFill,
    StraightEdge,
    StyleChange,
    Vector2D,
)
from swfshape.exceptions import InvalidStyleIndexError

RED = SolidFill(Rgba8(255, 0, 0))
BLUE = SolidFill(Rgba8(0, 0, 255))
THIN = LineStyle(width=20)

TWO_FILLS = ShapeStyles(fill=(RED, BLUE), line=(THIN,))


def edge(dx: int, dy: int) -> StraightEdge:
    return StraightEdge(Vector2D(dx, dy))


SQUARE_EDGES = (edge(10, 0), edge(0, 10), edge(-10, 0), edge(0, -10))


@pytest.fixture
def decoder() -> ShapeDecoder:
    """Create a decoder with two fills and one line style."""
    return ShapeDecoder(TWO_FILLS)


class TestShapeDecoder:
    """Tests for ShapeDecoder state handling."""

    def test_pen_starts_at_origin(self, decoder: ShapeDecoder):
        assert decoder.pen == Vector2D(0, 0)

    def test_straight_edge_moves_pen(self, decoder: ShapeDecoder):
        decoder.apply_straight_edge(Vector2D(10, 5))
        decoder.apply_straight_edge(Vector2D(-3, 2))
        assert decoder.pen == Vector2D(7, 7)

    def test_curved_edge_positions(self, decoder: ShapeDecoder):
        """Test that the anchor delta is relative to the control point."""
        decoder.apply_style_change(StyleChange(left_fill=1))
        decoder.apply_curved_edge(Vector2D(5, 5), Vector2D(5, -5))
        assert decoder.pen == Vector2D(10, 0)

        layer = decoder.finalize()[0]
        assert layer.fill_segments(1) == (
            Segment(Vector2D(0, 0), Vector2D(10, 0), Vector2D(5, 5)),
        )

    def test_move_to_sets_pen_without_segment(self, decoder: ShapeDecoder):
        decoder.apply_style_change(StyleChange(left_fill=1, move_to=Vector2D(100, 100)))
        assert decoder.pen == Vector2D(100, 100)
        decoder.apply(edge(10, 0))

        layer = decoder.finalize()[0]
        assert layer.fill_segments(1) == (Segment(Vector2D(100, 100), Vector2D(110, 100)),)

    def test_right_fill_is_reversed(self, decoder: ShapeDecoder):
        decoder.apply(StyleChange(right_fill=2))
        decoder.apply(edge(10, 0))

        layer = decoder.finalize()[0]
        assert layer.fill_segments(2) == (
            Segment(start=Vector2D(10, 0), end=Vector2D(0, 0), control=None),
        )

    @pytest.mark.parametrize(
        "record, kind",
        [
            (StyleChange(left_fill=0), "left"),
            (StyleChange(right_fill=0), "right"),
            (StyleChange(line_style=0), "line"),
        ],
    )
    def test_zero_selector_records_nothing(self, decoder: ShapeDecoder, record, kind):
        """Test that a selector of 0 leaves its bag empty."""
        decoder.apply(StyleChange(left_fill=1, right_fill=2, line_style=1))
        decoder.apply(record)
        decoder.apply(edge(10, 0))

        layer = decoder.finalize()[0]
        if kind == "left":
            assert layer.fill_segments(1) == ()
        elif kind == "right":
            assert layer.fill_segments(2) == ()
        else:
            assert layer.line_segments(1) == ()
        assert layer.segment_count == 2

    def test_new_styles_freezes_layer(self, decoder: ShapeDecoder):
        decoder.apply(StyleChange(left_fill=1))
        decoder.apply(edge(10, 0))
        decoder.apply(StyleChange(new_styles=ShapeStyles(fill=(BLUE,)), left_fill=1))
        decoder.apply(edge(0, 10))

        assert len(decoder.completed_layers) == 1
        first, second = decoder.finalize()
        assert first.fill_segments(1) == (Segment(Vector2D(0, 0), Vector2D(10, 0)),)
        assert second.fill_segments(1) == (Segment(Vector2D(10, 0), Vector2D(10, 10)),)
        assert second.fills[0].style == BLUE

    def test_new_styles_resets_selectors_not_pen(self, decoder: ShapeDecoder):
        decoder.apply(StyleChange(left_fill=1, line_style=1))
        decoder.apply(edge(10, 0))
        decoder.apply(StyleChange(new_styles=TWO_FILLS))
        decoder.apply(edge(0, 10))

        assert decoder.pen == Vector2D(10, 10)
        layers = decoder.finalize()
        assert layers[1].segment_count == 0

    def test_selectors_index_new_table(self, decoder: ShapeDecoder):
        """Test that selectors in the same record apply to the new table."""
        three = ShapeStyles(fill=(RED, BLUE, RED))
        decoder.apply(StyleChange(new_styles=three, left_fill=3))
        decoder.apply(edge(1, 1))
        assert decoder.finalize()[1].fill_segments(3) == (Segment(Vector2D(0, 0), Vector2D(1, 1)),)

    def test_invalid_selector_after_new_styles(self, decoder: ShapeDecoder):
        with pytest.raises(InvalidStyleIndexError):
            decoder.apply(StyleChange(new_styles=ShapeStyles(fill=(RED,)), left_fill=2))

    @pytest.mark.parametrize(
        "record",
        [
            StyleChange(left_fill=5),
            StyleChange(right_fill=3),
            StyleChange(line_style=2),
            StyleChange(left_fill=-1),
        ],
    )
    def test_invalid_selector(self, decoder: ShapeDecoder, record):
        with pytest.raises(InvalidStyleIndexError):
            decoder.apply(record)

    def test_finalize_without_changes(self, decoder: ShapeDecoder):
        layers = decoder.finalize()
        assert len(layers) == 1
        assert layers[0].segment_count == 0

    def test_finalize_consumes_decoder(self, decoder: ShapeDecoder):
        decoder.finalize()
        with pytest.raises(RuntimeError, match="already finalized"):
            decoder.finalize()
        with pytest.raises(RuntimeError, match="already finalized"):
            decoder.apply(edge(1, 0))
        with pytest.raises(RuntimeError, match="already finalized"):
            decoder.apply(StyleChange(left_fill=1))

    def test_unknown_record(self, decoder: ShapeDecoder):
        with pytest.raises(TypeError):
            decoder.apply("not a record")  # type: ignore[arg-type]


class TestDecodeShape:
    """Tests for decode_shape."""

    def test_unit_square(self):
        """Test that a closed square with a left fill gives one path with one subpath."""
        definition = ShapeDefinition(
            initial_styles=ShapeStyles(fill=(RED,)),
            records=(StyleChange(left_fill=1), *SQUARE_EDGES),
        )
        shape = decode_shape(definition)

        assert len(shape.paths) == 1
        assert shape.line_paths == []
        styled = shape.paths[0]
        assert styled.fill == RED
        assert styled.path.subpath_count == 1
        assert [c.end.to_tuple() for c in styled.path.commands] == [
            (0.0, 0.0),
            (10.0, 0.0),
            (10.0, 10.0),
            (0.0, 10.0),
            (0.0, 0.0),
        ]

    def test_disjoint_edges_share_one_path(self):
        """Test that unconnected edges of one style become subpaths of one path."""
        definition = ShapeDefinition(
            initial_styles=ShapeStyles(fill=(RED,)),
            records=(
                StyleChange(left_fill=1),
                edge(10, 0),
                StyleChange(move_to=Vector2D(50, 50)),
                edge(10, 0),
            ),
        )
        shape = decode_shape(definition)

        assert len(shape.paths) == 1
        commands = shape.paths[0].path.commands
        assert [c.command_type for c in commands].count(CommandType.MOVE_TO) == 2

    def test_same_index_in_two_layers(self):
        """Test that a style table change splits geometry into separate paths."""
        definition = ShapeDefinition(
            initial_styles=ShapeStyles(fill=(RED,)),
            records=(
                StyleChange(left_fill=1),
                *SQUARE_EDGES,
                StyleChange(new_styles=ShapeStyles(fill=(RED,)), left_fill=1, move_to=Vector2D(100, 0)),
                *SQUARE_EDGES,
            ),
        )
        shape = decode_shape(definition)

        assert len(shape.paths) == 2
        first, second = shape.paths
        assert first.fill == second.fill == RED
        assert first.path.control_bounds() == (0.0, 0.0, 10.0, 10.0)
        assert second.path.control_bounds() == (100.0, 0.0, 110.0, 10.0)

    def test_one_edge_three_styles(self):
        """Test that an edge feeding left, right and line gives three paths."""
        definition = ShapeDefinition(
            initial_styles=TWO_FILLS,
            records=(StyleChange(left_fill=1, right_fill=2, line_style=1), edge(10, 0)),
        )
        shape = decode_shape(definition)

        assert [p.fill for p in shape.paths] == [RED, BLUE, None]
        assert shape.paths[2].line == THIN
        left, right, line = (p.path.commands for p in shape.paths)
        assert [c.end.to_tuple() for c in left] == [(0.0, 0.0), (10.0, 0.0)]
        assert [c.end.to_tuple() for c in right] == [(10.0, 0.0), (0.0, 0.0)]
        assert [c.end.to_tuple() for c in line] == [(0.0, 0.0), (10.0, 0.0)]

    def test_invalid_index_rejects_whole_shape(self):
        """Test that an out-of-range selector fails without partial output."""
        definition = ShapeDefinition(
            initial_styles=TWO_FILLS,
            records=(StyleChange(left_fill=1), edge(10, 0), StyleChange(left_fill=5), edge(0, 10)),
        )
        with pytest.raises(InvalidStyleIndexError) as exc_info:
            decode_shape(definition)
        assert exc_info.value.index == 5
        assert exc_info.value.table_length == 2

    def test_scale(self):
        definition = ShapeDefinition(
            initial_styles=ShapeStyles(fill=(RED,)),
            records=(StyleChange(left_fill=1), edge(20, 0)),
        )
        shape = decode_shape(definition, scale=0.05)
        assert shape.paths[0].path.commands[-1].end.to_tuple() == (1.0, 0.0)

    def test_curve_passes_through(self):
        definition = ShapeDefinition(
            initial_styles=ShapeStyles(line=(THIN,)),
            records=(StyleChange(line_style=1), CurvedEdge(Vector2D(5, 5), Vector2D(5, -5))),
        )
        shape = decode_shape(definition)
        command = shape.paths[0].path.commands[1]
        assert command.command_type is CommandType.QUAD_TO
        assert [p.to_tuple() for p in command.points] == [(5.0, 5.0), (10.0, 0.0)]

    def test_no_records(self):
        shape = decode_shape(ShapeDefinition(initial_styles=TWO_FILLS))
        assert shape.paths == ()

    def test_layers_match_shape(self):
        """Test that decode_layers is the walk behind decode_shape."""
        definition = ShapeDefinition(
            initial_styles=ShapeStyles(fill=(RED,)),
            records=(
                StyleChange(left_fill=1),
                *SQUARE_EDGES,
                StyleChange(new_styles=ShapeStyles(line=(THIN,)), line_style=1),
                edge(5, 5),
            ),
        )
        layers = decode_layers(definition)

        assert len(layers) == 2
        assert layers[0].fill_segments(1)[0] == Segment(Vector2D(0, 0), Vector2D(10, 0))
        assert layers[1].line_segments(1) == (Segment(Vector2D(0, 0), Vector2D(5, 5)),)
        assert len(decode_shape(definition).paths) == 2
