"""CLI application entry point for swfshape.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from swfshape import __version__
from swfshape.cli.output import (
    console,
    create_progress,
    print_cancellation_summary,
    print_error,
    print_header,
    print_processing_info,
    print_shape_errors,
    print_shape_info,
    print_shape_table,
    print_step,
    print_success,
)
from swfshape.config import (
    DecodeConfig,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    SwfShapeSettings,
)
from swfshape.core import ShapeProcessor, decode_shape
from swfshape.exceptions import ProcessingCancelledError, SwfShapeError
from swfshape.io import ShapeReader

app = typer.Typer(
    name="swfshape",
    help="Decode SWF shape records into styled, joined vector paths.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]swfshape[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def decode(
    inputs: Annotated[
        list[Path],
        typer.Argument(
            help="Shape AST JSON files to decode",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for decoded files (default: next to each input)",
        ),
    ] = None,
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            "-s",
            help="Coordinate multiplier (0.05 converts twips to pixels)",
        ),
    ] = 1.0,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    no_svg: Annotated[
        bool,
        typer.Option(
            "--no-svg",
            help="Omit SVG path data from the output",
        ),
    ] = False,
    summary: Annotated[
        bool,
        typer.Option(
            "--summary",
            help="Print the decoded paths of each shape and exit without writing",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Decode shape definitions into styled paths.

    Every input is written to {name}.decoded.json with one entry per styled
    path: fill paths first, then line paths, layer by layer.

    Example:
        swfshape squares.json triangle.json -o decoded/
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    for path in inputs:
        if not path.is_file():
            print_error(
                f"Input file not found: {path}",
                details="Please provide paths to shape AST JSON files.",
            )
            raise typer.Exit(code=1)

    try:
        settings = SwfShapeSettings(
            decode=DecodeConfig(coordinate_scale=scale),
            output=OutputConfig(include_svg=not no_svg),
            processing=ProcessingConfig(max_workers=workers),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1) from None

    if not quiet:
        print_header(__version__)

    try:
        if summary:
            _handle_summary(inputs, settings, quiet)
            raise typer.Exit(code=0)

        if not quiet:
            actual_workers = workers if workers else os.cpu_count() or 1
            print_step(f"Decoding {len(inputs)} shapes")
            print_processing_info(actual_workers, is_auto=(workers is None))

        processor = ShapeProcessor(settings)
        stats = None

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Decoding {len(inputs)} shapes", total=len(inputs)
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    stats = processor.process(
                        inputs=inputs,
                        output_dir=output_dir,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                stats = processor.process(
                    inputs=inputs,
                    output_dir=output_dir,
                    max_workers=workers,
                )
        except (KeyboardInterrupt, ProcessingCancelledError):
            if not quiet:
                current = processor.decode_logger.stats
                print_cancellation_summary(
                    processed=current.processed_count,
                    cancelled=current.cancelled_count,
                )
            raise typer.Exit(code=130) from None

        if stats.errors:
            print_shape_errors(stats.errors)

        if not quiet:
            print_success(
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                paths=stats.paths_emitted,
                errors=stats.error_count,
                avg_time_ms=stats.avg_shape_time_ms if verbose else None,
            )

        if stats.error_count:
            raise typer.Exit(code=1)

    except SwfShapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_summary(inputs: list[Path], settings: SwfShapeSettings, quiet: bool) -> None:
    """Handle --summary mode.

    Decodes each input in-process and prints its paths.

    Args:
        inputs: Shape files
        settings: Application settings
        quiet: Suppress headers
    """
    for path in inputs:
        reader = ShapeReader(path)
        reader.load()
        definition = reader.definition
        reader.close()

        if not quiet:
            print_step("Shape")
            print_shape_info(
                shape_path=str(path),
                record_count=len(definition.records),
                fill_count=len(definition.initial_styles.fill),
                line_count=len(definition.initial_styles.line),
            )

        shape = decode_shape(definition, scale=settings.decode.coordinate_scale)
        print_shape_table(shape)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
