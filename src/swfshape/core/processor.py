"""Parallel processing orchestration for batch shape decoding.

Shapes are independent of each other, so a batch of shape files is decoded
with one task per file in a ProcessPoolExecutor.

Key components:
- decode_file: Top-level picklable function for parallel execution
- ShapeProcessor: Main orchestrator class for batch decoding
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from swfshape.config import SwfShapeSettings
from swfshape.core.assembler import assemble_shape
from swfshape.core.decoder import decode_layers
from swfshape.exceptions import OutputCollisionError, ProcessingCancelledError
from swfshape.io import ShapeReader, ShapeWriter
from swfshape.utils import DecodeLogger, DecodeStats, configure_logging


def decode_file(
    input_path: str,
    output_path: str,
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Decode one shape file and write the result.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        input_path: Path of the shape AST JSON file
        output_path: Path of the decoded JSON file to write
        config_dict: Serialized settings (decode and output sections)

    Returns:
        Dictionary containing either:
        - Success: {"name": str, "output": str, "layers": int, "paths": int, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "name": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()
    name = Path(input_path).name

    try:
        settings = SwfShapeSettings(**config_dict)

        reader = ShapeReader(Path(input_path))
        reader.load()
        definition = reader.definition
        reader.close()

        layers = decode_layers(definition)
        shape = assemble_shape(layers, scale=settings.decode.coordinate_scale)

        writer = ShapeWriter(
            shape,
            Path(output_path),
            include_svg=settings.output.include_svg,
            svg_precision=settings.output.svg_precision,
            indent=settings.output.indent,
        )
        writer.save()

        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": name,
            "output": output_path,
            "layers": len(layers),
            "paths": len(shape.paths),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "name": name,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class ShapeProcessor:
    """Orchestrates parallel decoding of shape files.

    Example:
        settings = SwfShapeSettings()
        processor = ShapeProcessor(settings)
        stats = processor.process(
            inputs=[Path("squares.json"), Path("triangle.json")],
            output_dir=Path("out"),
            max_workers=4,
        )
    """

    def __init__(self, config: SwfShapeSettings) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Application settings
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=True,
        )
        self.decode_logger = DecodeLogger(self.logger)

    def process(
        self,
        inputs: Sequence[Path],
        output_dir: Path | None = None,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> DecodeStats:
        """Decode a batch of shape files in parallel.

        Args:
            inputs: Shape AST JSON files
            output_dir: Directory for decoded files (default: next to each input)
            max_workers: Maximum worker processes (None = config, then auto)
            progress_callback: Optional callback(completed, total, shape_name, success)

        Returns:
            DecodeStats with counts, timing and error details

        Raises:
            ProcessingCancelledError: If processing is cancelled by user
        """
        stats = self.decode_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        config_dict = self.config.model_dump(include={"decode", "output"})
        tasks = self._plan_outputs(inputs, output_dir)

        self.logger.info(
            "Starting batch decoding",
            shape_count=len(tasks),
            max_workers=max_workers,
        )

        total = len(tasks)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for input_path, output_path in tasks.items():
                self.decode_logger.log_shape_start(input_path)
                future = executor.submit(decode_file, input_path, output_path, config_dict)
                pending_futures[future] = input_path

            try:
                for future in as_completed(list(pending_futures)):
                    input_path = pending_futures.pop(future)
                    success = False

                    try:
                        result = future.result()

                        if "error" in result:
                            self.decode_logger.log_shape_error(
                                shape_name=input_path,
                                error=Exception(result["error"]),
                                traceback=result.get("traceback"),
                            )
                        else:
                            success = True
                            self.decode_logger.log_shape_complete(
                                shape_name=input_path,
                                layers=result["layers"],
                                paths=result["paths"],
                                duration_ms=result.get("duration_ms", 0.0),
                            )

                    except Exception as e:
                        self.decode_logger.log_shape_error(
                            shape_name=input_path,
                            error=e,
                            traceback=traceback.format_exc(),
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, input_path, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise ProcessingCancelledError(
                    stats.processed_count, stats.cancelled_count
                ) from None

        stats.end_time = time.time()

        self.logger.info(
            "Batch decoding complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            paths=stats.paths_emitted,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _plan_outputs(
        self, inputs: Sequence[Path], output_dir: Path | None
    ) -> dict[str, str]:
        """Map each input to its output file.

        An input whose output file is already claimed by an earlier input
        (same stem under one output directory, or the same file given
        twice) is not decoded and is recorded as an error.

        Returns:
            Dictionary of input path to output path, in input order
        """
        tasks: dict[str, str] = {}
        claimed: dict[Path, str] = {}

        for path in inputs:
            output = ShapeWriter.get_decoded_path(path, output_dir)
            key = output.resolve()
            if key in claimed:
                self.decode_logger.log_shape_error(
                    shape_name=str(path),
                    error=OutputCollisionError(str(path), str(output), claimed[key]),
                )
                continue
            claimed[key] = str(path)
            tasks[str(path)] = str(output)

        return tasks
