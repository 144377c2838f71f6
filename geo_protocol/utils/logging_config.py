"""
Structured logging using structlog.

The library itself only emits events through :func:`get_logger`; the
embedding application decides how they are rendered. :func:`configure_logging`
is a small default for scripts and services that have no structlog setup of
their own.
"""
import logging
import structlog


def configure_logging(log_level: str = "INFO", json_output: bool = False):
    """
    Route geo-protocol events to stdout.

    Args:
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, render one JSON object per line; else
            human-readable console output

    Example:
        >>> configure_logging(log_level="WARNING", json_output=True)
    """
    renderer = structlog.processors.JSONRenderer() if json_output \
        else structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        # Module-level loggers must follow later reconfiguration
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """
    Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("malformed_location_payload", reason="truncated", field_index=None)
    """
    return structlog.get_logger(name)
