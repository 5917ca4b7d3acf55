"""Shape writer for saving decoded shapes as JSON."""

import json
from pathlib import Path

from swfshape.domain import Shape
from swfshape.exceptions import ShapeSaveError
from swfshape.io.converter import shape_to_output

DECODED_SUFFIX = ".decoded.json"


class ShapeWriter:
    """Writes a decoded shape to a JSON file.

    Example:
        writer = ShapeWriter(shape, Path("squares.decoded.json"))
        writer.save()
    """

    def __init__(
        self,
        shape: Shape,
        output_path: Path,
        include_svg: bool = True,
        svg_precision: int = 3,
        indent: int | None = 2,
    ) -> None:
        """Initialize the writer.

        Args:
            shape: Decoded shape to write
            output_path: Destination file
            include_svg: Add SVG path data to each path
            svg_precision: Maximum decimals in SVG path data
            indent: JSON indentation (None = compact)
        """
        self._shape = shape
        self._output_path = output_path
        self._include_svg = include_svg
        self._svg_precision = svg_precision
        self._indent = indent

    @staticmethod
    def get_decoded_path(input_path: Path, output_dir: Path | None = None) -> Path:
        """Generate the output path for a shape file.

        "squares.json" becomes "squares.decoded.json", placed next to the
        input unless an output directory is given.

        Args:
            input_path: Path of the shape AST file
            output_dir: Directory for the output (default: input's directory)

        Returns:
            Output path
        """
        directory = output_dir if output_dir is not None else input_path.parent
        return directory / f"{input_path.stem}{DECODED_SUFFIX}"

    def save(self) -> None:
        """Serialize the shape and write it out.

        Raises:
            ShapeSaveError: If the file cannot be written
        """
        data = shape_to_output(
            self._shape,
            include_svg=self._include_svg,
            svg_precision=self._svg_precision,
        )
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            with self._output_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=self._indent)
                f.write("\n")
        except OSError as e:
            raise ShapeSaveError(str(self._output_path), str(e)) from e
