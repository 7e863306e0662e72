"""Logging utilities for paint3d."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from one or more frames."""

    buffered: int = 0
    culled_near: int = 0
    culled_backface: int = 0
    skipped: int = 0
    drawn: int = 0
    paths_drawn: int = 0
    frames: int = 0
    timings_ms: list[float] = field(default_factory=list)

    @property
    def culled(self) -> int:
        """Total faces rejected before buffering."""
        return self.culled_near + self.culled_backface + self.skipped

    @property
    def total_ms(self) -> float:
        """Total time spent drawing buffers."""
        return sum(self.timings_ms)


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

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("paint3d")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class FrameLogger:
    """Logger for tracking render pipeline activity and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("paint3d.render")
        self._stats = RenderStats()

    def log_shape_buffered(
        self,
        num_faces: int,
        buffered: int,
        culled_near: int,
        culled_backface: int,
        skipped: int,
    ) -> None:
        """Log the outcome of buffering one shape."""
        self._logger.debug(
            "Shape buffered",
            faces=num_faces,
            buffered=buffered,
            culled_near=culled_near,
            culled_backface=culled_backface,
            skipped=skipped,
        )
        self._stats.buffered += buffered
        self._stats.culled_near += culled_near
        self._stats.culled_backface += culled_backface
        self._stats.skipped += skipped

    def log_buffer_drawn(self, drawn: int, duration_ms: float) -> None:
        """Log a drawn frame."""
        self._logger.debug(
            "Buffer drawn",
            faces=drawn,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.drawn += drawn
        self._stats.frames += 1
        self._stats.timings_ms.append(duration_ms)

    def log_path_drawn(self, num_curves: int, fill: bool) -> None:
        """Log a drawn path."""
        self._logger.debug("Path drawn", curves=num_curves, fill=fill)
        self._stats.paths_drawn += 1

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
