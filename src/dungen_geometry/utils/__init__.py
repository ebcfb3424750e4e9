"""Shared utilities for dungen-geometry (structured logging)."""

from dungen_geometry.utils.logging import (
    clear_correlation_context,
    configure_logging,
    correlation_context,
    get_logger,
    new_run_id,
    set_correlation_context,
)

__all__ = [
    "clear_correlation_context",
    "configure_logging",
    "correlation_context",
    "get_logger",
    "new_run_id",
    "set_correlation_context",
]
