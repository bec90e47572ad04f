from __future__ import annotations

from enum import Enum


class Shape(int, Enum):
    """The six distinct shapes used by Qwirkle tiles.

    Shape names mirror the printed tiles; the star shapes are named by their point count.
    """

    CIRCLE = 0
    FOUR_POINT_STAR = 1
    DIAMOND = 2
    SQUARE = 3
    EIGHT_POINT_STAR = 4
    CLOVER = 5

    @property
    def display_name(self) -> str:
        return SHAPE_NAMES[self]


ALL_SHAPES: tuple[Shape, ...] = (
    Shape.CIRCLE,
    Shape.FOUR_POINT_STAR,
    Shape.DIAMOND,
    Shape.SQUARE,
    Shape.EIGHT_POINT_STAR,
    Shape.CLOVER,
)

SHAPE_NAMES: dict[Shape, str] = {
    Shape.CIRCLE: "Circle",
    Shape.FOUR_POINT_STAR: "4ptStar",
    Shape.DIAMOND: "Diamond",
    Shape.SQUARE: "Square",
    Shape.EIGHT_POINT_STAR: "8ptStar",
    Shape.CLOVER: "Clover",
}

SHAPE_MAP: dict[Shape, int] = {shape: i for i, shape in enumerate(ALL_SHAPES)}

UNKNOWN_SHAPE = "Unknown Shape"


def is_shape(value: int) -> bool:
    """Return True if the integer value is one of the declared shapes."""
    return isinstance(value, int) and not isinstance(value, bool) and value in SHAPE_NAMES


def format_shape(value: int) -> str:
    if not is_shape(value):
        return UNKNOWN_SHAPE
    return SHAPE_NAMES[Shape(value)]
