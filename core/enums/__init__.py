"""Core enums for Qwirkle tiles."""

from .colour import ALL_COLOURS, Colour, format_colour, is_colour
from .shape import ALL_SHAPES, Shape, format_shape, is_shape

__all__ = [
    "Colour",
    "Shape",
    "ALL_COLOURS",
    "ALL_SHAPES",
    "is_colour",
    "is_shape",
    "format_colour",
    "format_shape",
]
