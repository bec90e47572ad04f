"""Pydantic models for core Qwirkle domain objects."""

from .tile import Tile, format_tile, format_tile_queue

__all__ = [
    "Tile",
    "format_tile",
    "format_tile_queue",
]
