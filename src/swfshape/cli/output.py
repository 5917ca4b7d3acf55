"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from swfshape.domain import Shape

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Create a rich progress bar for batch decoding.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]swfshape[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    console.print(f"\n{SYM_STEP} {message}")


def print_shape_info(shape_path: str, record_count: int, fill_count: int, line_count: int) -> None:
    """Print shape definition information.

    Args:
        shape_path: Path to the shape file
        record_count: Number of records
        fill_count: Entries in the initial fill style table
        line_count: Entries in the initial line style table
    """
    line1 = Text("  ")
    line1.append(shape_path)
    console.print(line1)
    console.print(
        f"  {record_count:,} records {SYM_DOT} {fill_count} fills {SYM_DOT} {line_count} lines"
    )


def _format_bounds(bounds: tuple[float, float, float, float] | None) -> str:
    if bounds is None:
        return "-"
    return "({:g}, {:g}) – ({:g}, {:g})".format(*bounds)


def print_shape_table(shape: Shape) -> None:
    """Print one row per styled path.

    Args:
        shape: Decoded shape
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("#", justify="right")
    table.add_column("Style")
    table.add_column("Subpaths", justify="right")
    table.add_column("Commands", justify="right")
    table.add_column("Bounds")

    for i, styled in enumerate(shape.paths):
        style = "-"
        if styled.fill is not None:
            style = f"fill {styled.fill.fill_type.value}"
        elif styled.line is not None:
            style = f"line {styled.line.width}"
        table.add_row(
            str(i),
            style,
            str(styled.path.subpath_count),
            str(len(styled.path.commands)),
            _format_bounds(styled.path.control_bounds()),
        )

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_success(
    total_time_s: float,
    processed: int,
    paths: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total processing time in seconds
        processed: Number of shapes decoded
        paths: Total number of styled paths emitted
        errors: Number of errors encountered
        avg_time_ms: Average decoding time per shape in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} shapes {SYM_DOT} {paths} paths {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg")


def print_shape_errors(errors: list[tuple[str, str]]) -> None:
    for name, message in errors:
        line = Text(f"  {SYM_ERR} ", style="red")
        line.append(name, style="bold")
        line.append(f": {message}")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of shapes decoded before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} shapes completed {SYM_DOT} {cancelled} tasks cancelled")
