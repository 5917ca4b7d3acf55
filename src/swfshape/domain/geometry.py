"""Core geometric types for shape decoding.

This module defines the fundamental geometric types used by the decoder:
- Vector2D: A fixed-point coordinate or delta as stored in shape records
- Point: A floating point coordinate as emitted in output paths
- Segment: A directed straight or quadratic edge between two coordinates
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Vector2D:
    """An integer 2D vector in fixed-point input units (twips).

    Used both for absolute pen positions and for the relative deltas
    carried by edge records.

    Attributes:
        x: X component
        y: Y component
    """

    x: int
    y: int

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def to_point(self, scale: float = 1.0) -> "Point":
        """Convert to an output point.

        Args:
            scale: Multiplier applied after float conversion

        Returns:
            Point with floating point coordinates
        """
        return Point(float(self.x) * scale, float(self.y) * scale)

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vector2D":
        return cls(x=int(data["x"]), y=int(data["y"]))


ORIGIN = Vector2D(0, 0)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in output space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Segment:
    """A directed edge between two fixed-point coordinates.

    A segment with a control point is a quadratic Bezier curve, otherwise
    it is a straight line. Segments are immutable and hashable, equality is
    exact coordinate equality.

    Attributes:
        start: Start coordinate
        end: End coordinate
        control: Quadratic control point (None for straight lines)
    """

    start: Vector2D
    end: Vector2D
    control: Vector2D | None = None

    @property
    def is_curved(self) -> bool:
        return self.control is not None

    def reverse(self) -> "Segment":
        """Return the same edge traversed in the opposite direction.

        The control point of a quadratic curve is shared by both
        directions, so only the endpoints swap.

        Returns:
            Reversed segment
        """
        return Segment(start=self.end, end=self.start, control=self.control)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with start, end and control fields
        """
        return {
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "control": self.control.to_dict() if self.control is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with start, end and control fields

        Returns:
            Segment instance
        """
        control = data.get("control")
        return cls(
            start=Vector2D.from_dict(data["start"]),
            end=Vector2D.from_dict(data["end"]),
            control=Vector2D.from_dict(control) if control is not None else None,
        )
