"""
Structured Logging with structlog

stdout is reserved for the session protocol, so every handler configured
here writes to stderr or to a log file.

Events:
    outline_converted   one per successful conversion (nodes, errors flag, duration)
    conversion_failed   one per failed conversion (error type and message)
"""

import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars

from codegraph_outline.models import OutlineFile, iter_nodes

SLOW_CONVERSION_MS = 1000.0


def setup_logging(level: str = "INFO", format: str = "console", log_file: str | None = None) -> None:
    """
    Setup structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: "json" for machine consumption, "console" for development
        log_file: Optional file to log into (defaults to stderr)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if log_file:
        logging.basicConfig(format="%(message)s", filename=log_file, level=numeric_level, force=True)
        colors = False
    else:
        logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level, force=True)
        colors = sys.stderr.isatty()

    if format == "json":
        renderer = [structlog.processors.EventRenamer("message"), structlog.processors.JSONRenderer()]
    else:
        renderer = [
            structlog.dev.ConsoleRenderer(colors=colors, exception_formatter=structlog.dev.RichTracebackFormatter())
        ]

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            *renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


@contextmanager
def request_context(number: int) -> Iterator[None]:
    """Tag every log event inside the block with the session request number."""
    with bound_contextvars(request=number):
        yield


class ConversionLog:
    """
    Logs exactly one event per file conversion.

    Example:
        ```python
        with ConversionLog(logger, "src/lib.rs") as conversion:
            conversion.record(converter.convert_source(source))
        # outline_converted file=src/lib.rs nodes=42 parsing_errors_detected=False duration_ms=...
        ```

    A failure inside the block is logged as ``conversion_failed`` and re-raised.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger, file: str, **extra):
        self.logger = logger
        self.file = file
        self.extra = extra
        self.outline: OutlineFile | None = None
        self.start_time = 0.0

    def record(self, outline: OutlineFile) -> OutlineFile:
        self.outline = outline
        return outline

    def __enter__(self) -> "ConversionLog":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb):
        duration_ms = round((time.perf_counter() - self.start_time) * 1000, 2)

        if exc_type is not None:
            self.logger.error(
                "conversion_failed",
                file=self.file,
                error_type=exc_type.__name__,
                error_message=str(exc_val),
                duration_ms=duration_ms,
                **self.extra,
            )
            return False

        event = {"file": self.file, "duration_ms": duration_ms, **self.extra}
        if self.outline is not None:
            event["nodes"] = sum(1 for _ in iter_nodes(self.outline.children))
            event["parsing_errors_detected"] = self.outline.parsing_errors_detected

        if duration_ms > SLOW_CONVERSION_MS:
            self.logger.warning("outline_converted", slow=True, **event)
        else:
            self.logger.info("outline_converted", **event)
        return False
