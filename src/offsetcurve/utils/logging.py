"""Logging utilities for Offsetcurve."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

_FILE_HANDLER = "offsetcurve-file"
_CONSOLE_HANDLER = "offsetcurve-console"
_HANDLER_NAMES = (_FILE_HANDLER, _CONSOLE_HANDLER)


@dataclass
class SearchStats:
    """Statistics from one shortest-path search."""

    vertex_count: int = 0
    committed_count: int = 0
    relaxation_count: int = 0
    stale_pops: int = 0
    path_vertex_count: int = 0
    path_length: float = 0.0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_ms(self) -> float:
        """Calculate search duration in milliseconds."""
        if self.start_time is not None and self.end_time is not None:
            return (self.end_time - self.start_time) * 1000
        return 0.0


def _processors() -> list:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ]


def get_logger(name: str = "offsetcurve") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger of the same name.

    Levels and handlers come from stdlib logging, so the logger is silent
    below WARNING until configure_logging() (or the host application)
    sets up handlers.

    Args:
        name: Stdlib logger name

    Returns:
        Bound structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(root_logger.handlers):
        if handler.get_name() in _HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_CONSOLE_HANDLER)
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger()
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class OffsetCurveLogger:
    """Logger for pipeline stages and search statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()

    def log_raw_curve(self, raw_count: int, simplified_count: int, tolerance: float) -> None:
        """Log raw offset generation and simplification."""
        self._logger.debug(
            "Raw offset curve built",
            raw_vertices=raw_count,
            simplified_vertices=simplified_count,
            tolerance=tolerance,
        )

    def log_noding(self, fragment_count: int) -> None:
        """Log noding result."""
        self._logger.debug("Raw curve noded", fragments=fragment_count)

    def log_search(self, strategy: str, stats: SearchStats) -> None:
        """Log a completed shortest-path search."""
        self._logger.info(
            "Offset curve resolved",
            strategy=strategy,
            vertices=stats.vertex_count,
            committed=stats.committed_count,
            relaxations=stats.relaxation_count,
            stale_pops=stats.stale_pops,
            path_vertices=stats.path_vertex_count,
            path_length=round(stats.path_length, 6),
            duration_ms=round(stats.duration_ms, 2),
        )

    def log_failure(self, distance: float, error: Exception) -> None:
        """Log a failed offset computation."""
        self._logger.error(
            "Offset curve failed",
            distance=distance,
            error=str(error),
            error_type=type(error).__name__,
        )
