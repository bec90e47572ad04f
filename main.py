#!/usr/bin/env python3
"""
Qwirkle Tile Queue Runner

Builds the queue of game tiles, shuffles it with a fixed seed and prints it.
"""

from __future__ import annotations

import argparse
import random
import sys

from pydantic import ValidationError

from config_models import DeckConfiguration, load_configuration
from core.models.tile import Tile, format_tile_queue
from deck.builder import build_tile_queue, tile_composition
from deck.shuffler import shuffle_tile_queue
from logging_utils import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build and shuffle a Qwirkle tile queue")
    parser.add_argument("--config", help="Path to JSON file containing a deck configuration")
    parser.add_argument("--count", type=int, help="Number of tiles in the queue")
    parser.add_argument("--quantity", type=int, help="Copies of each distinct tile")
    parser.add_argument("--seed", type=int, help="Seed for the shuffle")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (defaults to the LOG_LEVEL environment variable)",
    )
    return parser.parse_args(argv)


def resolve_configuration(args: argparse.Namespace) -> DeckConfiguration:
    """Merge the optional config file with command line overrides."""
    config = load_configuration(args.config) if args.config else DeckConfiguration()

    overrides = {
        "tile_count": args.count,
        "tile_quantity": args.quantity,
        "shuffle_seed": args.seed,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def run(config: DeckConfiguration) -> list[Tile]:
    queue = build_tile_queue(config.tile_count, config.tile_quantity)
    queue = shuffle_tile_queue(queue, random.Random(config.shuffle_seed))

    composition = tile_composition(queue)
    logger.info(
        "Queue ready: %d tiles, %d distinct, max %d copies per tile",
        len(queue),
        int((composition > 0).sum()),
        int(composition.max()),
    )
    return queue


def main(argv: list[str] | None = None) -> int:
    """Main runner function."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = resolve_configuration(args)
    except (OSError, ValueError, ValidationError) as e:
        print(f"❌ Error loading configuration: {e}")
        return 1

    logger.info("Using configuration: %s", config.model_dump_json())
    queue = run(config)

    print(f"This is the queue:\n{format_tile_queue(queue)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
