"""Structured logging configuration using structlog.

Log events carry two correlation IDs so output from a dungeon generator can
be traced back to the run and map layer that produced it:

- ``run_id``: one generation run (one CLI invocation, one seed).
- ``layer``: the stage within that run, such as "rooms" or "corridors".

Output is JSON for machines or a colored console rendering for humans.
"""

import logging
import sys
import uuid
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from dungen_geometry.config import settings

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)
_layer: ContextVar[str | None] = ContextVar("layer", default=None)

_CORRELATION_VARS: dict[str, ContextVar[str | None]] = {
    "run_id": _run_id,
    "layer": _layer,
}


def new_run_id() -> str:
    """Return a short random identifier for a generation run."""
    return uuid.uuid4().hex[:12]


def set_correlation_context(
    run_id: str | None = None,
    layer: str | None = None,
) -> None:
    """Set correlation IDs for the current context.

    IDs passed as None are left unchanged.

    Args:
        run_id: Identifier of the generation run.
        layer: Name of the map layer or stage being generated.
    """
    if run_id is not None:
        _run_id.set(run_id)
    if layer is not None:
        _layer.set(layer)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    for var in _CORRELATION_VARS.values():
        var.set(None)


@contextmanager
def correlation_context(
    run_id: str | None = None,
    layer: str | None = None,
) -> Iterator[None]:
    """Scope correlation IDs to a block, restoring the previous IDs on exit.

    Example:
        with correlation_context(run_id=new_run_id(), layer="rooms"):
            logger.info("Placing rooms", count=12)
    """
    tokens = [
        (var, var.set(value))
        for var, value in ((_run_id, run_id), (_layer, layer))
        if value is not None
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor that copies set correlation IDs into the event."""
    _ = logger, method_name  # Required by structlog processor signature
    for key, var in _CORRELATION_VARS.items():
        value = var.get()
        if value is not None:
            event_dict[key] = value
    return event_dict


def _renderer_processors(log_format: str) -> list[Processor]:
    if log_format == "json":
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Safe to call repeatedly; the latest call wins.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
            Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
        *_renderer_processors(log_format),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force replaces handlers from earlier calls, whose stream may be stale.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger of the same name.

    Events are filtered by the stdlib level, so until ``configure_logging``
    runs only warnings and errors get through (to stderr, via stdlib's
    last-resort handler). Debug events from library code stay silent.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        A bound structlog logger instance.
    """
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.wrap_logger(
            logging.getLogger(name),
            wrapper_class=structlog.stdlib.BoundLogger,
        ),
    )
