from __future__ import annotations

import random

from core.models.tile import Tile
from logging_utils import get_logger

TILE_SHUFFLE_SEED = 1337

logger = get_logger(__name__)


def swap_tiles(queue: list[Tile], a: int, b: int) -> list[Tile]:
    """Swap the tiles at indices a and b in place and return the same queue."""
    queue[a], queue[b] = queue[b], queue[a]
    return queue


def shuffle_tile_queue(queue: list[Tile], rng: random.Random | None = None) -> list[Tile]:
    """Shuffle the queue in place by swapping every position with a random one.

    Each index in turn is swapped with an index drawn uniformly from the whole queue.
    This is not Fisher-Yates and the resulting permutations are not exactly uniform.

    Args:
        queue: The tile queue, altered during the call
        rng: Random source; a generator seeded with TILE_SHUFFLE_SEED is used when omitted

    Returns:
        The same queue object, shuffled
    """
    if rng is None:
        rng = random.Random(TILE_SHUFFLE_SEED)

    size = len(queue)
    for index in range(size):
        swap_tiles(queue, index, rng.randrange(size))

    logger.debug("Shuffled tile queue with %d tiles", size)
    return queue
