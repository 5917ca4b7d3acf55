"""Decoded shape output types.

A decoded Shape is an ordered list of StyledPath values. Each StyledPath is
one geometry Path (possibly several disjoint subpaths) tagged with exactly
one fill or line style.

Paths speak the fontTools pen protocol, so they can be replayed into any
pen (recording, SVG, bounds, glyph building) without conversion code.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fontTools.pens.basePen import AbstractPen
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.svgPathPen import SVGPathPen

from swfshape.domain.geometry import Point
from swfshape.domain.styles import FillStyle, LineStyle, fill_style_from_dict


class CommandType(str, Enum):
    """Path drawing command."""

    MOVE_TO = "move_to"
    LINE_TO = "line_to"
    QUAD_TO = "quad_to"


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single path command.

    MOVE_TO and LINE_TO carry one point. QUAD_TO carries (control, end).

    Attributes:
        command_type: Kind of command
        points: Command operands
    """

    command_type: CommandType
    points: tuple[Point, ...]

    @property
    def end(self) -> Point:
        """Point the pen rests on after this command."""
        return self.points[-1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.command_type.value,
            "points": [list(p.to_tuple()) for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathCommand":
        return cls(
            command_type=CommandType(data["type"]),
            points=tuple(Point(x, y) for x, y in data["points"]),
        )


def move_to(point: Point) -> PathCommand:
    return PathCommand(CommandType.MOVE_TO, (point,))


def line_to(point: Point) -> PathCommand:
    return PathCommand(CommandType.LINE_TO, (point,))


def quad_to(control: Point, end: Point) -> PathCommand:
    return PathCommand(CommandType.QUAD_TO, (control, end))


@dataclass(frozen=True)
class Path:
    """An ordered list of path commands.

    Every subpath starts with a MOVE_TO command.

    Attributes:
        commands: Commands in drawing order
    """

    commands: tuple[PathCommand, ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        return len(self.commands) == 0

    def subpaths(self) -> list[tuple[PathCommand, ...]]:
        """Split the command list at each MOVE_TO.

        Returns:
            List of command tuples, one per subpath
        """
        result: list[tuple[PathCommand, ...]] = []
        current: list[PathCommand] = []
        for command in self.commands:
            if command.command_type is CommandType.MOVE_TO and current:
                result.append(tuple(current))
                current = []
            current.append(command)
        if current:
            result.append(tuple(current))
        return result

    @property
    def subpath_count(self) -> int:
        return sum(1 for c in self.commands if c.command_type is CommandType.MOVE_TO)

    def draw(self, pen: AbstractPen) -> None:
        """Replay the path into a fontTools pen.

        A subpath whose last point equals its first point is closed with
        closePath(); any other subpath ends with endPath().

        Args:
            pen: Any object implementing the fontTools pen protocol
        """
        for subpath in self.subpaths():
            first = subpath[0].end
            for command in subpath:
                if command.command_type is CommandType.MOVE_TO:
                    pen.moveTo(command.end.to_tuple())
                elif command.command_type is CommandType.LINE_TO:
                    pen.lineTo(command.end.to_tuple())
                else:
                    control, end = command.points
                    pen.qCurveTo(control.to_tuple(), end.to_tuple())
            if len(subpath) > 1 and subpath[-1].end == first:
                pen.closePath()
            else:
                pen.endPath()

    def to_svg_path(self, precision: int = 3) -> str:
        """Render the path as SVG path data.

        Args:
            precision: Maximum number of decimals per coordinate

        Returns:
            SVG path "d" attribute string
        """
        pen = SVGPathPen(None, ntos=lambda v: _format_number(v, precision))
        self.draw(pen)
        return pen.getCommands()

    def control_bounds(self) -> tuple[float, float, float, float] | None:
        """Bounding box of all on- and off-curve points.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y), or None for empty paths
        """
        pen = ControlBoundsPen(None)
        self.draw(pen)
        return pen.bounds

    def to_dict(self) -> dict[str, Any]:
        return {"commands": [c.to_dict() for c in self.commands]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        return cls(commands=tuple(PathCommand.from_dict(c) for c in data["commands"]))


def _format_number(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class StyledPath:
    """A path tagged with the single style that renders it.

    Attributes:
        path: Geometry
        fill: Fill style (None for strokes)
        line: Line style (None for fills)

    Raises:
        ValueError: If not exactly one of fill and line is set
    """

    path: Path
    fill: FillStyle | None = None
    line: LineStyle | None = None

    def __post_init__(self) -> None:
        if (self.fill is None) == (self.line is None):
            raise ValueError("StyledPath needs exactly one of fill or line")

    @property
    def is_fill(self) -> bool:
        return self.fill is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = self.path.to_dict()
        if self.fill is not None:
            data["fill"] = self.fill.to_dict()
        elif self.line is not None:
            data["line"] = self.line.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StyledPath":
        fill = data.get("fill")
        line = data.get("line")
        return cls(
            path=Path.from_dict(data),
            fill=fill_style_from_dict(fill) if fill is not None else None,
            line=LineStyle.from_dict(line) if line is not None else None,
        )


@dataclass(frozen=True)
class Shape:
    """A decoded shape: styled paths in rendering order.

    Attributes:
        paths: Styled paths, layer by layer, fills before lines
    """

    paths: tuple[StyledPath, ...] = field(default_factory=tuple)

    @property
    def fill_paths(self) -> list[StyledPath]:
        return [p for p in self.paths if p.is_fill]

    @property
    def line_paths(self) -> list[StyledPath]:
        return [p for p in self.paths if not p.is_fill]

    def control_bounds(self) -> tuple[float, float, float, float] | None:
        """Union of the control bounds of every path.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y), or None for empty shapes
        """
        pen = ControlBoundsPen(None)
        for styled in self.paths:
            styled.path.draw(pen)
        return pen.bounds

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the shape
        """
        return {"paths": [p.to_dict() for p in self.paths]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Shape":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a shape

        Returns:
            Shape instance
        """
        return cls(paths=tuple(StyledPath.from_dict(p) for p in data["paths"]))
