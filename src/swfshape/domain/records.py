"""Shape record types.

A shape definition is an initial style table followed by an ordered list of
records. Edge records are relative to the current pen position; style
change records select styles, move the pen or install a new style table.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from swfshape.domain.geometry import Vector2D
from swfshape.domain.styles import ShapeStyles


@dataclass(frozen=True, slots=True)
class StraightEdge:
    """Straight line from the pen position to pen + delta."""

    delta: Vector2D

    def to_dict(self) -> dict[str, Any]:
        return {"type": "straight_edge", "delta": self.delta.to_dict()}


@dataclass(frozen=True, slots=True)
class CurvedEdge:
    """Quadratic curve relative to the pen position.

    The control point is pen + control_delta and the end point is
    control + anchor_delta.
    """

    control_delta: Vector2D
    anchor_delta: Vector2D

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "curved_edge",
            "control_delta": self.control_delta.to_dict(),
            "anchor_delta": self.anchor_delta.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class StyleChange:
    """Style selection and pen repositioning.

    Every field is optional and independent. Style selectors use the wire
    convention: 0 clears the selector, n selects entry n of the table.

    Attributes:
        new_styles: Replacement style table (starts a new layer)
        left_fill: Fill style for the region left of following edges
        right_fill: Fill style for the region right of following edges
        line_style: Stroke style for following edges
        move_to: Absolute pen position
    """

    new_styles: ShapeStyles | None = None
    left_fill: int | None = None
    right_fill: int | None = None
    line_style: int | None = None
    move_to: Vector2D | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "style_change",
            "new_styles": self.new_styles.to_dict() if self.new_styles is not None else None,
            "left_fill": self.left_fill,
            "right_fill": self.right_fill,
            "line_style": self.line_style,
            "move_to": self.move_to.to_dict() if self.move_to is not None else None,
        }


ShapeRecord = Union[StraightEdge, CurvedEdge, StyleChange]


def record_from_dict(data: dict[str, Any]) -> ShapeRecord:
    """Deserialize a record from its to_dict() form.

    Args:
        data: Dictionary with a "type" discriminator

    Returns:
        Shape record

    Raises:
        ValueError: If the record type is unknown
    """
    record_type = data["type"]
    if record_type == "straight_edge":
        return StraightEdge(delta=Vector2D.from_dict(data["delta"]))
    if record_type == "curved_edge":
        return CurvedEdge(
            control_delta=Vector2D.from_dict(data["control_delta"]),
            anchor_delta=Vector2D.from_dict(data["anchor_delta"]),
        )
    if record_type == "style_change":
        new_styles = data.get("new_styles")
        move_to = data.get("move_to")
        return StyleChange(
            new_styles=ShapeStyles.from_dict(new_styles) if new_styles is not None else None,
            left_fill=data.get("left_fill"),
            right_fill=data.get("right_fill"),
            line_style=data.get("line_style"),
            move_to=Vector2D.from_dict(move_to) if move_to is not None else None,
        )
    raise ValueError(f"Unknown shape record type: {record_type!r}")


@dataclass(frozen=True)
class ShapeDefinition:
    """A complete shape as read from the input format.

    Attributes:
        initial_styles: Style table active before the first record
        records: Edge and style change records in stream order
    """

    initial_styles: ShapeStyles
    records: tuple[ShapeRecord, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the shape definition
        """
        return {
            "initial_styles": self.initial_styles.to_dict(),
            "records": [record.to_dict() for record in self.records],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeDefinition":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a shape definition

        Returns:
            ShapeDefinition instance
        """
        return cls(
            initial_styles=ShapeStyles.from_dict(data["initial_styles"]),
            records=tuple(record_from_dict(r) for r in data["records"]),
        )
