"""
Tile queue construction for Qwirkle.

The queue is filled by walking every (colour, shape) pair in declared order and
adding up to ``quantity`` copies of each, until ``count`` tiles have been placed.
"""

from __future__ import annotations

import numpy as np

from core.enums.colour import ALL_COLOURS, COLOUR_MAP, is_colour
from core.enums.shape import ALL_SHAPES, SHAPE_MAP, is_shape
from core.models.tile import Tile
from logging_utils import get_logger

# Defaults for a full game: every tile is present three times, 6 * 6 * 3 = 108 tiles.
TILE_QUANTITY = 3
TILE_COUNT = 108

logger = get_logger(__name__)


def build_tile_queue(count: int = TILE_COUNT, quantity: int = TILE_QUANTITY) -> list[Tile]:
    """Build an ordered queue of at most ``count`` tiles.

    Colours are iterated Red to Purple and, inside each colour, shapes Circle to Clover.
    Building stops as soon as ``count`` tiles are in the queue, even in the middle of
    a pair's copies, so the result can be shorter than ``36 * quantity``.

    Args:
        count: Maximum number of tiles in the queue
        quantity: Maximum number of copies of each distinct tile

    Returns:
        The ordered queue. Non-positive arguments give an empty list.
    """
    queue: list[Tile] = []
    if count <= 0:
        logger.debug("Requested %d tiles, returning an empty queue", count)
        return queue

    for colour in ALL_COLOURS:
        for shape in ALL_SHAPES:
            tile = Tile(colour=colour, shape=shape)
            for _ in range(quantity):
                queue.append(tile)
                if len(queue) >= count:
                    logger.debug("Built tile queue with %d tiles (count reached)", len(queue))
                    return queue

    logger.debug("Built tile queue with %d tiles (all pairs exhausted)", len(queue))
    return queue


def tile_composition(queue: list[Tile]) -> np.ndarray:
    """Count the copies of each distinct tile in the queue.

    Returns a (colours x shapes) integer matrix in declared enum order, so
    ``matrix[COLOUR_MAP[c], SHAPE_MAP[s]]`` is the number of ``Tile(c, s)`` in the queue. Tiles with an unknown colour or
    shape are not counted.
    """
    matrix = np.zeros((len(ALL_COLOURS), len(ALL_SHAPES)), dtype=np.int64)
    for tile in queue:
        if not (is_colour(tile.colour) and is_shape(tile.shape)):
            continue
        matrix[COLOUR_MAP[tile.colour], SHAPE_MAP[tile.shape]] += 1
    return matrix
