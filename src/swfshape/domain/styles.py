"""Fill and line style values.

The decoder treats styles as opaque values: only their position in the
style table matters while walking the records. These types exist so that
readers and writers can carry the style data through to the output paths.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Rgba8:
    """Straight (non-premultiplied) 8-bit RGBA color.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha channel (0-255)
    """

    r: int
    g: int
    b: int
    a: int = 255

    def normalized(self) -> tuple[float, float, float, float]:
        """Return the channels scaled to the unit interval.

        Returns:
            Tuple of (r, g, b, a) floats in [0, 1]
        """
        return (self.r / 255, self.g / 255, self.b / 255, self.a / 255)

    def to_dict(self) -> dict[str, Any]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rgba8":
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 255))


@dataclass(frozen=True, slots=True)
class Matrix:
    """Affine transform attached to gradient and bitmap fills.

    Values are carried through unchanged.
    """

    scale_x: float = 1.0
    scale_y: float = 1.0
    rotate_skew0: float = 0.0
    rotate_skew1: float = 0.0
    translate_x: int = 0
    translate_y: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "scale_x": self.scale_x,
            "scale_y": self.scale_y,
            "rotate_skew0": self.rotate_skew0,
            "rotate_skew1": self.rotate_skew1,
            "translate_x": self.translate_x,
            "translate_y": self.translate_y,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Matrix":
        return cls(**data)


IDENTITY = Matrix()


class FillType(str, Enum):
    """Kind of fill style."""

    SOLID = "solid"
    GRADIENT = "gradient"
    BITMAP = "bitmap"


class GradientKind(str, Enum):
    """Gradient geometry."""

    LINEAR = "linear"
    RADIAL = "radial"
    FOCAL_RADIAL = "focal_radial"


class SpreadMode(str, Enum):
    """Gradient behavior outside of the [0, 255] ratio range."""

    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"


@dataclass(frozen=True, slots=True)
class GradientStop:
    """A color stop of a gradient.

    Attributes:
        ratio: Position of the stop (0-255)
        color: Color at this position
    """

    ratio: int
    color: Rgba8

    def to_dict(self) -> dict[str, Any]:
        return {"ratio": self.ratio, "color": self.color.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GradientStop":
        return cls(ratio=data["ratio"], color=Rgba8.from_dict(data["color"]))


@dataclass(frozen=True, slots=True)
class SolidFill:
    """Fill with a single color."""

    color: Rgba8

    @property
    def fill_type(self) -> FillType:
        return FillType.SOLID

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.fill_type.value, "color": self.color.to_dict()}


@dataclass(frozen=True, slots=True)
class GradientFill:
    """Linear, radial or focal radial gradient fill.

    Attributes:
        kind: Gradient geometry
        stops: Color stops in ratio order
        matrix: Gradient space to shape space transform
        spread: Spread mode outside of the stop range
        focal_point: Focal point offset (-1.0 to 1.0), focal gradients only
    """

    kind: GradientKind
    stops: tuple[GradientStop, ...]
    matrix: Matrix = IDENTITY
    spread: SpreadMode = SpreadMode.PAD
    focal_point: float = 0.0

    @property
    def fill_type(self) -> FillType:
        return FillType.GRADIENT

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.fill_type.value,
            "kind": self.kind.value,
            "stops": [stop.to_dict() for stop in self.stops],
            "matrix": self.matrix.to_dict(),
            "spread": self.spread.value,
            "focal_point": self.focal_point,
        }


@dataclass(frozen=True, slots=True)
class BitmapFill:
    """Fill with a bitmap character referenced by id.

    Attributes:
        bitmap_id: Character id of the bitmap
        matrix: Bitmap space to shape space transform
        repeating: Tile the bitmap (False clips it)
        smoothed: Use smoothing when sampling
    """

    bitmap_id: int
    matrix: Matrix = IDENTITY
    repeating: bool = True
    smoothed: bool = True

    @property
    def fill_type(self) -> FillType:
        return FillType.BITMAP

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.fill_type.value,
            "bitmap_id": self.bitmap_id,
            "matrix": self.matrix.to_dict(),
            "repeating": self.repeating,
            "smoothed": self.smoothed,
        }


FillStyle = Union[SolidFill, GradientFill, BitmapFill]


def fill_style_from_dict(data: dict[str, Any]) -> FillStyle:
    """Deserialize any fill style from its dictionary form.

    Args:
        data: Dictionary produced by a fill style's to_dict()

    Returns:
        Fill style instance

    Raises:
        ValueError: If the fill type is unknown
    """
    fill_type = FillType(data["type"])
    if fill_type is FillType.SOLID:
        return SolidFill(color=Rgba8.from_dict(data["color"]))
    if fill_type is FillType.GRADIENT:
        return GradientFill(
            kind=GradientKind(data["kind"]),
            stops=tuple(GradientStop.from_dict(s) for s in data["stops"]),
            matrix=Matrix.from_dict(data["matrix"]),
            spread=SpreadMode(data.get("spread", SpreadMode.PAD.value)),
            focal_point=data.get("focal_point", 0.0),
        )
    return BitmapFill(
        bitmap_id=data["bitmap_id"],
        matrix=Matrix.from_dict(data["matrix"]),
        repeating=data.get("repeating", True),
        smoothed=data.get("smoothed", True),
    )


@dataclass(frozen=True, slots=True)
class LineStyle:
    """Stroke style.

    Attributes:
        width: Stroke width in input units (twips)
        color: Stroke color
        fill: Fill used to paint the stroke instead of the color
    """

    width: int
    color: Rgba8 = Rgba8(0, 0, 0, 255)
    fill: FillStyle | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "color": self.color.to_dict(),
            "fill": self.fill.to_dict() if self.fill is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LineStyle":
        fill = data.get("fill")
        return cls(
            width=data["width"],
            color=Rgba8.from_dict(data["color"]),
            fill=fill_style_from_dict(fill) if fill is not None else None,
        )


@dataclass(frozen=True)
class ShapeStyles:
    """A style table: the fill and line styles addressable by index.

    Indices used by shape records are 1-based; 0 means "no style".

    Attributes:
        fill: Fill styles in table order
        line: Line styles in table order
    """

    fill: tuple[FillStyle, ...] = field(default_factory=tuple)
    line: tuple[LineStyle, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "fill": [style.to_dict() for style in self.fill],
            "line": [style.to_dict() for style in self.line],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeStyles":
        return cls(
            fill=tuple(fill_style_from_dict(s) for s in data.get("fill", [])),
            line=tuple(LineStyle.from_dict(s) for s in data.get("line", [])),
        )
