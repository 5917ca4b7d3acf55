"""Converters between the shape AST JSON format and domain models.

The AST format uses camelCase keys and PascalCase type discriminators:

- Shape: {"initialStyles": {"fill": [...], "line": [...]}, "records": [...]}
- DefineShape tag: {"shape": <Shape>, ...}
- Records: {"type": "StraightEdge", "delta": {"x", "y"}}
           {"type": "CurvedEdge", "controlDelta", "anchorDelta"}
           {"type": "StyleChange", "newStyles", "leftFill", "rightFill",
            "lineStyle", "moveTo"}  (every field optional)

Decoded shapes are written back with the domain's own to_dict() layout.
"""

from typing import Any

from swfshape.domain import (
    BitmapFill,
    CurvedEdge,
    FillStyle,
    GradientFill,
    GradientKind,
    GradientStop,
    LineStyle,
    Matrix,
    Rgba8,
    Shape,
    ShapeDefinition,
    ShapeRecord,
    ShapeStyles,
    SolidFill,
    SpreadMode,
    StraightEdge,
    StyleChange,
    Vector2D,
)
from swfshape.exceptions import ShapeFormatError

_GRADIENT_KINDS = {
    "LinearGradient": GradientKind.LINEAR,
    "RadialGradient": GradientKind.RADIAL,
    "FocalGradient": GradientKind.FOCAL_RADIAL,
}

_SPREAD_MODES = {
    "Pad": SpreadMode.PAD,
    "Reflect": SpreadMode.REFLECT,
    "Repeat": SpreadMode.REPEAT,
}


def ast_to_definition(data: dict[str, Any]) -> ShapeDefinition:
    """Convert a shape AST (or a DefineShape tag wrapping one) to a ShapeDefinition.

    Args:
        data: Parsed JSON object

    Returns:
        Domain shape definition

    Raises:
        ShapeFormatError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise ShapeFormatError(f"expected an object, got {type(data).__name__}")

    shape = data.get("shape", data)
    try:
        styles = _convert_styles(shape["initialStyles"])
        records = tuple(_convert_record(r) for r in shape["records"])
    except ShapeFormatError:
        raise
    except KeyError as e:
        raise ShapeFormatError(f"missing field {e}") from e
    except (AttributeError, TypeError, ValueError) as e:
        raise ShapeFormatError(str(e)) from e

    return ShapeDefinition(initial_styles=styles, records=records)


def shape_to_output(shape: Shape, include_svg: bool = True, svg_precision: int = 3) -> dict[str, Any]:
    """Convert a decoded shape to its JSON output form.

    Args:
        shape: Decoded shape
        include_svg: Add an "svg" path data string to every path
        svg_precision: Maximum decimals in SVG path data

    Returns:
        JSON-serializable dictionary
    """
    paths = []
    for styled in shape.paths:
        entry = styled.to_dict()
        if include_svg:
            entry["svg"] = styled.path.to_svg_path(precision=svg_precision)
        paths.append(entry)
    return {"paths": paths}


def _convert_vector(data: dict[str, Any]) -> Vector2D:
    return Vector2D(x=int(data["x"]), y=int(data["y"]))


def _convert_color(data: dict[str, Any]) -> Rgba8:
    return Rgba8(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 255))


def _convert_matrix(data: dict[str, Any] | None) -> Matrix:
    if data is None:
        return Matrix()
    return Matrix(
        scale_x=float(data.get("scaleX", 1.0)),
        scale_y=float(data.get("scaleY", 1.0)),
        rotate_skew0=float(data.get("rotateSkew0", 0.0)),
        rotate_skew1=float(data.get("rotateSkew1", 0.0)),
        translate_x=int(data.get("translateX", 0)),
        translate_y=int(data.get("translateY", 0)),
    )


def _convert_fill_style(data: dict[str, Any]) -> FillStyle:
    fill_type = data["type"]

    if fill_type == "Solid":
        return SolidFill(color=_convert_color(data["color"]))

    if fill_type in _GRADIENT_KINDS:
        gradient = data["gradient"]
        return GradientFill(
            kind=_GRADIENT_KINDS[fill_type],
            stops=tuple(
                GradientStop(ratio=c["ratio"], color=_convert_color(c["color"]))
                for c in gradient["colors"]
            ),
            matrix=_convert_matrix(data.get("matrix")),
            spread=_SPREAD_MODES.get(gradient.get("spread", "Pad"), SpreadMode.PAD),
            focal_point=float(data.get("focalPoint", gradient.get("focalPoint", 0.0))),
        )

    if fill_type == "Bitmap":
        return BitmapFill(
            bitmap_id=data["bitmapId"],
            matrix=_convert_matrix(data.get("matrix")),
            repeating=data.get("repeating", True),
            smoothed=data.get("smoothed", True),
        )

    raise ShapeFormatError(f"unknown fill style type {fill_type!r}")


def _convert_line_style(data: dict[str, Any]) -> LineStyle:
    fill_data = data.get("fill")
    fill = _convert_fill_style(fill_data) if fill_data is not None else None

    # A solid stroke fill is just the stroke color
    if isinstance(fill, SolidFill):
        return LineStyle(width=data["width"], color=fill.color)
    if "color" in data:
        return LineStyle(width=data["width"], color=_convert_color(data["color"]), fill=fill)
    if fill is None:
        return LineStyle(width=data["width"])
    return LineStyle(width=data["width"], fill=fill)


def _convert_styles(data: dict[str, Any]) -> ShapeStyles:
    return ShapeStyles(
        fill=tuple(_convert_fill_style(s) for s in data.get("fill", [])),
        line=tuple(_convert_line_style(s) for s in data.get("line", [])),
    )


def _convert_record(data: dict[str, Any]) -> ShapeRecord:
    record_type = data["type"]

    if record_type == "StraightEdge":
        return StraightEdge(delta=_convert_vector(data["delta"]))

    if record_type == "CurvedEdge":
        return CurvedEdge(
            control_delta=_convert_vector(data["controlDelta"]),
            anchor_delta=_convert_vector(data["anchorDelta"]),
        )

    if record_type == "StyleChange":
        new_styles = data.get("newStyles")
        move_to = data.get("moveTo")
        return StyleChange(
            new_styles=_convert_styles(new_styles) if new_styles is not None else None,
            left_fill=_optional_int(data.get("leftFill")),
            right_fill=_optional_int(data.get("rightFill")),
            line_style=_optional_int(data.get("lineStyle")),
            move_to=_convert_vector(move_to) if move_to is not None else None,
        )

    raise ShapeFormatError(f"unknown shape record type {record_type!r}")


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)
