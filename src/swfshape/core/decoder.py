"""Shape record walker.

The decoder owns the pen position and the active style layer. Edge records
move the pen and feed segments into the layer; style change records select
styles, move the pen or, when they carry a new style table, freeze the
active layer and start a fresh one.

Key components:
- ShapeDecoder: Stateful walker, consumed by finalize()
- decode_layers: Walk a ShapeDefinition into frozen style layers
- decode_shape: Pure entry point from ShapeDefinition to Shape
"""

import logging

from swfshape.core.assembler import assemble_shape
from swfshape.core.style_layer import StyleLayer, StyleLayerBuilder
from swfshape.domain import (
    ORIGIN,
    CurvedEdge,
    Segment,
    Shape,
    ShapeDefinition,
    ShapeRecord,
    ShapeStyles,
    StraightEdge,
    StyleChange,
    Vector2D,
)

logger = logging.getLogger(__name__)


class ShapeDecoder:
    """Walks shape records and collects style layers.

    Example:
        decoder = ShapeDecoder(definition.initial_styles)
        for record in definition.records:
            decoder.apply(record)
        layers = decoder.finalize()
    """

    def __init__(self, styles: ShapeStyles) -> None:
        """Initialize the decoder with the initial style table.

        Args:
            styles: Style table active before any record
        """
        self._pen: Vector2D = ORIGIN
        self._active_layer: StyleLayerBuilder | None = StyleLayerBuilder.from_styles(styles)
        self._completed_layers: list[StyleLayer] = []

    @property
    def pen(self) -> Vector2D:
        """Current pen position."""
        return self._pen

    @property
    def completed_layers(self) -> tuple[StyleLayer, ...]:
        """Layers frozen so far, in creation order."""
        return tuple(self._completed_layers)

    def _layer(self) -> StyleLayerBuilder:
        if self._active_layer is None:
            raise RuntimeError("Decoder already finalized.")
        return self._active_layer

    def apply(self, record: ShapeRecord) -> None:
        """Apply any shape record.

        Args:
            record: Edge or style change record

        Raises:
            TypeError: If record is not a shape record
            InvalidStyleIndexError: If a style change selects a missing style
        """
        if isinstance(record, StraightEdge):
            self.apply_straight_edge(record.delta)
        elif isinstance(record, CurvedEdge):
            self.apply_curved_edge(record.control_delta, record.anchor_delta)
        elif isinstance(record, StyleChange):
            self.apply_style_change(record)
        else:
            raise TypeError(f"Unsupported shape record: {type(record).__name__}")

    def apply_straight_edge(self, delta: Vector2D) -> None:
        layer = self._layer()
        end = self._pen + delta
        layer.add_segment(Segment(self._pen, end))
        self._pen = end

    def apply_curved_edge(self, control_delta: Vector2D, anchor_delta: Vector2D) -> None:
        layer = self._layer()
        control = self._pen + control_delta
        end = control + anchor_delta
        layer.add_segment(Segment(self._pen, end, control))
        self._pen = end

    def apply_style_change(self, record: StyleChange) -> None:
        """Apply every field present on a style change record.

        A new style table is installed first, so the selectors of the same
        record index into the new table.

        Args:
            record: Style change record

        Raises:
            InvalidStyleIndexError: If a selector is outside the table
        """
        if record.new_styles is not None:
            self._set_new_styles(record.new_styles)

        layer = self._layer()
        if record.left_fill is not None:
            layer.set_left_fill(record.left_fill)
        if record.right_fill is not None:
            layer.set_right_fill(record.right_fill)
        if record.line_style is not None:
            layer.set_line_style(record.line_style)
        if record.move_to is not None:
            self._pen = record.move_to

    def _set_new_styles(self, styles: ShapeStyles) -> None:
        previous = self._layer()
        self._active_layer = StyleLayerBuilder.from_styles(styles)
        self._completed_layers.append(previous.build())
        logger.debug(
            "New style table: %d fills, %d lines (layer %d)",
            len(styles.fill), len(styles.line), len(self._completed_layers),
        )

    def finalize(self) -> list[StyleLayer]:
        """Freeze the active layer and return every layer in order.

        The decoder cannot be used afterwards.

        Returns:
            All style layers in creation order

        Raises:
            RuntimeError: If called twice
        """
        layer = self._layer()
        self._active_layer = None
        layers = [*self._completed_layers, layer.build()]
        self._completed_layers = []
        return layers


def decode_layers(definition: ShapeDefinition) -> list[StyleLayer]:
    """Walk every record of a definition and return its style layers.

    Raises:
        InvalidStyleIndexError: If any record selects a missing style
    """
    decoder = ShapeDecoder(definition.initial_styles)
    for record in definition.records:
        decoder.apply(record)
    layers = decoder.finalize()
    logger.debug(
        "Decoded %d records into %d layers", len(definition.records), len(layers)
    )
    return layers


def decode_shape(definition: ShapeDefinition, scale: float = 1.0) -> Shape:
    """Decode a shape definition into styled paths.

    Args:
        definition: Initial styles and record stream
        scale: Coordinate multiplier applied on float conversion

    Returns:
        Decoded shape

    Raises:
        InvalidStyleIndexError: If any record selects a missing style; no
            partial shape is returned
    """
    return assemble_shape(decode_layers(definition), scale=scale)
