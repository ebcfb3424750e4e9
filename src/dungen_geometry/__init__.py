"""dungen-geometry: integer tile-grid geometry for procedural dungeon generation."""

__version__ = "0.1.0"
