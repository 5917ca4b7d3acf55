"""Logging utilities for swfshape."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class DecodeStats:
    """Statistics from a decoding run."""

    processed_count: int = 0
    error_count: int = 0
    layers_decoded: int = 0
    paths_emitted: int = 0
    cancelled_count: int = 0
    was_cancelled: bool = False
    errors: list[tuple[str, str]] = field(default_factory=list)
    shape_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_shape_time_ms(self) -> float | None:
        if not self.shape_timings_ms:
            return None
        return sum(self.shape_timings_ms) / len(self.shape_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"swfshape_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("swfshape")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class DecodeLogger:
    """Logger for tracking decoding progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = DecodeStats()

    def log_shape_start(self, shape_name: str) -> None:
        """Log start of shape decoding."""
        self._logger.debug("Decoding shape", shape=shape_name)

    def log_shape_complete(
        self,
        shape_name: str,
        layers: int,
        paths: int,
        duration_ms: float,
    ) -> None:
        """Log successful shape decoding."""
        self._logger.info(
            "Shape decoded",
            shape=shape_name,
            layers=layers,
            paths=paths,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.layers_decoded += layers
        self._stats.paths_emitted += paths
        self._stats.shape_timings_ms.append(duration_ms)

    def log_shape_error(
        self,
        shape_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log shape decoding error."""
        self._logger.error(
            "Shape decoding failed",
            shape=shape_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((shape_name, str(error)))

    @property
    def stats(self) -> DecodeStats:
        """Get current decoding statistics."""
        return self._stats
