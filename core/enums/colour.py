from __future__ import annotations

from enum import Enum


class Colour(int, Enum):
    """The six distinct colours used by Qwirkle tiles.

    Values follow the declared order, which is also the order the tile queue is built in.
    """

    RED = 0
    ORANGE = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    PURPLE = 5

    @property
    def display_name(self) -> str:
        return COLOUR_NAMES[self]


ALL_COLOURS: tuple[Colour, ...] = (
    Colour.RED,
    Colour.ORANGE,
    Colour.YELLOW,
    Colour.GREEN,
    Colour.BLUE,
    Colour.PURPLE,
)

COLOUR_NAMES: dict[Colour, str] = {
    Colour.RED: "Red",
    Colour.ORANGE: "Orange",
    Colour.YELLOW: "Yellow",
    Colour.GREEN: "Green",
    Colour.BLUE: "Blue",
    Colour.PURPLE: "Purple",
}

COLOUR_MAP: dict[Colour, int] = {colour: i for i, colour in enumerate(ALL_COLOURS)}

UNKNOWN_COLOUR = "Unknown Colour"


def is_colour(value: int) -> bool:
    """Return True if the integer value is one of the declared colours."""
    return isinstance(value, int) and not isinstance(value, bool) and value in COLOUR_NAMES


def format_colour(value: int) -> str:
    """Return the colour's name, or "Unknown Colour" for anything outside the enum."""
    if not is_colour(value):
        return UNKNOWN_COLOUR
    return COLOUR_NAMES[Colour(value)]
