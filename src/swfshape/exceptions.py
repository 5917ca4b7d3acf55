"""Exception hierarchy for swfshape."""


class SwfShapeError(Exception):
    """Base exception for all swfshape errors."""

    pass


class StyleError(SwfShapeError):
    """Errors related to fill or line style tables."""

    pass


class InvalidStyleIndexError(StyleError):
    """A style selector points outside the active style table.

    Valid selectors are 0 (no style) and 1..=table_length.
    """

    def __init__(self, kind: str, index: int, table_length: int) -> None:
        self.kind = kind
        self.index = index
        self.table_length = table_length
        super().__init__(
            f"Invalid {kind} style index {index} (table has {table_length} entries)"
        )


class ShapeIOError(SwfShapeError):
    """Errors related to reading or writing shape files."""

    pass


class ShapeLoadError(ShapeIOError):
    """Error loading a shape definition file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load shape '{path}': {reason}")


class ShapeSaveError(ShapeIOError):
    """Error saving a decoded shape."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save shape '{path}': {reason}")


class OutputCollisionError(ShapeIOError):
    """Two inputs would be written to the same output file."""

    def __init__(self, path: str, output: str, claimed_by: str) -> None:
        self.path = path
        self.output = output
        self.claimed_by = claimed_by
        super().__init__(
            f"Output '{output}' for '{path}' is already written by '{claimed_by}'"
        )


class ShapeFormatError(ShapeIOError):
    """Malformed or unsupported shape record data."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid shape data: {details}")


class ProcessingCancelledError(SwfShapeError):
    """Processing was cancelled by user."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Processing cancelled: {processed_count} completed, {pending_count} pending"
        )
