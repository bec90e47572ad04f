from __future__ import annotations

from pydantic import BaseModel, Field

from core.enums.colour import Colour, format_colour
from core.enums.shape import Shape, format_shape


class Tile(BaseModel):
    """A Qwirkle tile with exactly one colour and one shape.

    Tiles are frozen, so two tiles are equal (and hash equal) iff both fields match.
    Integers outside the enums are kept as plain ints; use is_colour/is_shape to check them.
    """

    colour: Colour | int = Field(union_mode="left_to_right")
    shape: Shape | int = Field(union_mode="left_to_right")

    model_config = {
        "frozen": True,
    }

    def __str__(self) -> str:
        return format_tile(self)


def format_tile(tile: Tile) -> str:
    """Render a tile as "(ColourName ShapeName)", e.g. "(Red Circle)"."""
    return f"({format_colour(tile.colour)} {format_shape(tile.shape)})"


def format_tile_queue(queue: list[Tile]) -> str:
    return "[" + ", ".join(format_tile(tile) for tile in queue) + "]"
