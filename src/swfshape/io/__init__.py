"""Shape I/O layer for swfshape.

This module handles reading shape definitions and writing decoded shapes.
It provides a clean abstraction layer between the JSON file formats and
the domain models.

Key responsibilities:
- Load shape AST JSON (bare shapes or DefineShape tags)
- Convert AST representations to domain models
- Write decoded shapes with the ".decoded.json" naming convention

Key classes:
- ShapeReader: Load shape definitions
- ShapeWriter: Save decoded shapes
"""

from swfshape.io.reader import ShapeReader
from swfshape.io.writer import ShapeWriter

__all__ = [
    "ShapeReader",
    "ShapeWriter",
]
