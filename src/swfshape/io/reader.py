"""Shape reader for loading shape definition JSON files.

This module provides the ShapeReader class for loading shape AST files
and converting them into domain models.
"""

import json
from pathlib import Path

from swfshape.domain import ShapeDefinition
from swfshape.exceptions import ShapeLoadError
from swfshape.io.converter import ast_to_definition


class ShapeReader:
    """Loads shape AST JSON files.

    Example:
        reader = ShapeReader(Path("squares.json"))
        reader.load()
        definition = reader.definition
    """

    def __init__(self, shape_path: Path) -> None:
        """Initialize the shape reader.

        Args:
            shape_path: Path to a shape or DefineShape AST JSON file
        """
        self._shape_path = shape_path
        self._definition: ShapeDefinition | None = None

    def load(self) -> None:
        """Load and convert the shape file.

        Raises:
            FileNotFoundError: If shape file does not exist
            ShapeLoadError: If the file is not valid JSON
            ShapeFormatError: If the JSON is not a valid shape
        """
        if not self._shape_path.exists():
            raise FileNotFoundError(f"Shape file not found: {self._shape_path}")

        try:
            with self._shape_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ShapeLoadError(str(self._shape_path), str(e)) from e

        self._definition = ast_to_definition(data)

    @property
    def definition(self) -> ShapeDefinition:
        """Return the loaded shape definition.

        Raises:
            RuntimeError: If shape has not been loaded yet
        """
        if self._definition is None:
            raise RuntimeError("Shape not loaded. Call load() first.")

        return self._definition

    @property
    def record_count(self) -> int:
        """Return the number of records in the loaded shape.

        Raises:
            RuntimeError: If shape has not been loaded yet
        """
        return len(self.definition.records)

    def close(self) -> None:
        """Drop the loaded definition."""
        self._definition = None

    def __enter__(self) -> "ShapeReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
