"""
Pydantic models for configuration management of the tile queue.

A configuration can be read from a JSON file holding a single object, e.g.
``{"tile_count": 108, "tile_quantity": 3, "shuffle_seed": 1337}``. Missing keys
fall back to the defaults of a full game.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field

from deck.builder import TILE_COUNT, TILE_QUANTITY
from deck.shuffler import TILE_SHUFFLE_SEED


class DeckConfiguration(BaseModel):
    """
    Settings for building and shuffling one tile queue.

    Values are not range-checked; the builder turns out-of-range values into a short or
    empty queue.
    """

    tile_count: int = Field(default=TILE_COUNT, description="Number of tiles in the queue")
    tile_quantity: int = Field(default=TILE_QUANTITY, description="Copies of each distinct tile")
    shuffle_seed: int = Field(default=TILE_SHUFFLE_SEED, description="Seed for the shuffle's random source")

    model_config = {
        "extra": "forbid",
    }


def load_configuration(json_file_path: str | Path) -> DeckConfiguration:
    """Load a DeckConfiguration from a JSON file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not UTF-8 encoded JSON
        pydantic.ValidationError: If the JSON does not describe a valid configuration
    """
    with open(json_file_path, encoding="utf-8") as f:
        data = json.load(f)

    return DeckConfiguration.model_validate(data)
