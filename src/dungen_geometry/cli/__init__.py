"""CLI module for dungen-geometry.

Provides commands for rendering shapes and sampling ranges.
"""

from __future__ import annotations

from dungen_geometry.cli.main import app

__all__ = ["app"]
