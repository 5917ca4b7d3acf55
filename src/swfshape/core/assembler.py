"""Assemble frozen style layers into the output shape."""

from collections.abc import Iterable

from swfshape.core.joiner import join_segments
from swfshape.core.style_layer import StyleLayer
from swfshape.domain import Shape, StyledPath


def assemble_layer(layer: StyleLayer, scale: float = 1.0) -> list[StyledPath]:
    """Join every non-empty bag of one layer, fills first, then lines.

    Args:
        layer: Frozen style layer
        scale: Coordinate multiplier applied on float conversion

    Returns:
        Styled paths in table order
    """
    paths: list[StyledPath] = []
    for fill_set in layer.fills:
        if fill_set.segments:
            paths.append(
                StyledPath(path=join_segments(fill_set.segments, scale), fill=fill_set.style)
            )
    for line_set in layer.lines:
        if line_set.segments:
            paths.append(
                StyledPath(path=join_segments(line_set.segments, scale), line=line_set.style)
            )
    return paths


def assemble_shape(layers: Iterable[StyleLayer], scale: float = 1.0) -> Shape:
    """Flatten layers, in creation order, into a Shape."""
    paths: list[StyledPath] = []
    for layer in layers:
        paths.extend(assemble_layer(layer, scale))
    return Shape(paths=tuple(paths))
