"""Per-style segment accumulation.

A style layer spans the records between two style table changes. While a
layer is active, every edge is routed into the segment bag of each style
currently selected for it: the left fill bag receives the edge as drawn,
the right fill bag receives it reversed and the line bag receives it as
drawn. Reversing right fill edges keeps every fill region traced in the
same rotational sense.

Selectors use the wire convention at the boundary (0 = no style) and are
held internally as Optional 1-based indices.
"""

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from swfshape.domain import FillStyle, LineStyle, Segment, ShapeStyles
from swfshape.exceptions import InvalidStyleIndexError

logger = logging.getLogger(__name__)

S = TypeVar("S")

StyleIndex = int | None


def resolve_selector(kind: str, value: int, table_length: int) -> StyleIndex:
    """Convert a wire style selector to an optional style index.

    Args:
        kind: Selector name used in error messages
        value: Wire value (0 clears the selector)
        table_length: Number of entries in the style table

    Returns:
        None for 0, otherwise the validated 1-based index

    Raises:
        InvalidStyleIndexError: If value is outside 0..=table_length
    """
    if value == 0:
        return None
    if value < 0 or value > table_length:
        raise InvalidStyleIndexError(kind, value, table_length)
    return value


def _table_position(kind: str, index: int, table_length: int) -> int:
    if index < 1 or index > table_length:
        raise InvalidStyleIndexError(kind, index, table_length)
    return index - 1


@dataclass(frozen=True)
class SegmentSet(Generic[S]):
    """For a given style, the contributed segments in definition order."""

    style: S
    segments: tuple[Segment, ...] = ()


@dataclass(frozen=True)
class StyleLayer:
    """Frozen segment bags of one style table epoch.

    Attributes:
        fills: One segment set per fill style, in table order
        lines: One segment set per line style, in table order
    """

    fills: tuple[SegmentSet[FillStyle], ...] = ()
    lines: tuple[SegmentSet[LineStyle], ...] = ()

    def fill_segments(self, index: int) -> tuple[Segment, ...]:
        """Segments contributed to the 1-based fill style index.

        Raises:
            InvalidStyleIndexError: If index is outside 1..=len(fills)
        """
        return self.fills[_table_position("fill", index, len(self.fills))].segments

    def line_segments(self, index: int) -> tuple[Segment, ...]:
        """Segments contributed to the 1-based line style index.

        Raises:
            InvalidStyleIndexError: If index is outside 1..=len(lines)
        """
        return self.lines[_table_position("line", index, len(self.lines))].segments

    @property
    def segment_count(self) -> int:
        return sum(len(s.segments) for s in self.fills) + sum(
            len(s.segments) for s in self.lines
        )


@dataclass
class StyleLayerBuilder:
    """Mutable accumulator for the active style layer.

    Example:
        builder = StyleLayerBuilder.from_styles(styles)
        builder.set_left_fill(1)
        builder.add_segment(segment)
        layer = builder.build()
    """

    fill_styles: tuple[FillStyle, ...]
    line_styles: tuple[LineStyle, ...]
    left_fill: StyleIndex = None
    right_fill: StyleIndex = None
    line_style: StyleIndex = None
    _fill_bags: list[list[Segment]] = field(default_factory=list, init=False, repr=False)
    _line_bags: list[list[Segment]] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._fill_bags = [[] for _ in self.fill_styles]
        self._line_bags = [[] for _ in self.line_styles]

    @classmethod
    def from_styles(cls, styles: ShapeStyles) -> "StyleLayerBuilder":
        """Start an empty layer for a style table; all selectors unset."""
        return cls(fill_styles=tuple(styles.fill), line_styles=tuple(styles.line))

    def set_left_fill(self, value: int) -> None:
        self.left_fill = resolve_selector("left fill", value, len(self.fill_styles))

    def set_right_fill(self, value: int) -> None:
        self.right_fill = resolve_selector("right fill", value, len(self.fill_styles))

    def set_line_style(self, value: int) -> None:
        self.line_style = resolve_selector("line", value, len(self.line_styles))

    def add_segment(self, segment: Segment) -> None:
        """Route a segment into the bags of every selected style.

        Args:
            segment: Edge as drawn by the pen
        """
        if self.left_fill is not None:
            self._fill_bags[self.left_fill - 1].append(segment)
        if self.right_fill is not None:
            self._fill_bags[self.right_fill - 1].append(segment.reverse())
        if self.line_style is not None:
            self._line_bags[self.line_style - 1].append(segment)

    def build(self) -> StyleLayer:
        """Freeze the accumulated segments into an immutable layer.

        Returns:
            StyleLayer holding a snapshot of every bag
        """
        layer = StyleLayer(
            fills=tuple(
                SegmentSet(style, tuple(bag))
                for style, bag in zip(self.fill_styles, self._fill_bags)
            ),
            lines=tuple(
                SegmentSet(style, tuple(bag))
                for style, bag in zip(self.line_styles, self._line_bags)
            ),
        )
        logger.debug(
            "Layer frozen: %d fill styles, %d line styles, %d segments",
            len(layer.fills), len(layer.lines), layer.segment_count,
        )
        return layer
