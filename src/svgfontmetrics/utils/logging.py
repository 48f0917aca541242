"""Logging utilities for svgfontmetrics."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_MARKER = "_svgfontmetrics_handler"


@dataclass
class MeasurementStats:
    """Statistics from measuring glyph outlines."""

    measured_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by the previous call.

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
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARKER, True)
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

    logger = structlog.get_logger("svgfontmetrics")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class MetricsLogger:
    """Logger for tracking glyph measurement and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("svgfontmetrics")
        self._stats = MeasurementStats()

    def log_glyph_measured(self, character: str, bounds: tuple[float, ...]) -> None:
        """Log a glyph whose outline was measured."""
        self._logger.debug("Glyph measured", glyph=character, bounds=list(bounds))
        self._stats.measured_count += 1

    def log_glyph_skipped(self, character: str, reason: str) -> None:
        """Log a glyph that contributes nothing to the metrics."""
        self._logger.debug("Glyph skipped", glyph=character, reason=reason)
        self._stats.skipped_count += 1

    def log_glyph_error(self, character: str, error: Exception) -> None:
        """Log a glyph whose path data could not be interpreted."""
        self._logger.warning(
            "Glyph path rejected",
            glyph=character,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((character, str(error)))

    def log_font_loaded(
        self,
        source: str,
        glyph_count: int,
        units_per_em: float,
        dropped: int,
    ) -> None:
        """Log a summary of a loaded font."""
        self._logger.info(
            "Font loaded",
            source=source,
            glyphs=glyph_count,
            upm=units_per_em,
            dropped=dropped,
        )

    @property
    def stats(self) -> MeasurementStats:
        """Get current measurement statistics."""
        return self._stats
