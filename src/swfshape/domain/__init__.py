"""Domain models for swfshape.

This module contains the value types flowing through the decoder: input
coordinates and records, style tables, intermediate segments and the
decoded output paths. All models are designed to be:

- Immutable (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of any particular input file format

Key classes:
- Vector2D: A fixed-point coordinate or delta
- Segment: A directed straight or quadratic edge
- ShapeStyles: A fill/line style table
- ShapeDefinition: Initial styles plus the record stream
- Path, StyledPath, Shape: Decoded output
"""

from swfshape.domain.geometry import ORIGIN, Point, Segment, Vector2D
from swfshape.domain.records import (
    CurvedEdge,
    ShapeDefinition,
    ShapeRecord,
    StraightEdge,
    StyleChange,
    record_from_dict,
)
from swfshape.domain.shape import (
    CommandType,
    Path,
    PathCommand,
    Shape,
    StyledPath,
    line_to,
    move_to,
    quad_to,
)
from swfshape.domain.styles import (
    BitmapFill,
    FillStyle,
    FillType,
    GradientFill,
    GradientKind,
    GradientStop,
    LineStyle,
    Matrix,
    Rgba8,
    ShapeStyles,
    SolidFill,
    SpreadMode,
    fill_style_from_dict,
)

__all__: list[str] = [
    # Enums
    "CommandType",
    "FillType",
    "GradientKind",
    "SpreadMode",
    # Geometry
    "ORIGIN",
    "Point",
    "Segment",
    "Vector2D",
    # Styles
    "BitmapFill",
    "FillStyle",
    "GradientFill",
    "GradientStop",
    "LineStyle",
    "Matrix",
    "Rgba8",
    "ShapeStyles",
    "SolidFill",
    "fill_style_from_dict",
    # Records
    "CurvedEdge",
    "ShapeDefinition",
    "ShapeRecord",
    "StraightEdge",
    "StyleChange",
    "record_from_dict",
    # Output
    "Path",
    "PathCommand",
    "Shape",
    "StyledPath",
    "line_to",
    "move_to",
    "quad_to",
]
