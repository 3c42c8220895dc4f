#!/usr/bin/env python3
"""
Validate the alpha-beta search against plain minimax.

This tests the full pipeline:
1. Random playouts from the starting position
2. Alpha-beta and unpruned minimax on every visited position
3. Verify scores (and root moves) match
"""

import argparse
import random
import sys
import time
import logging

from tqdm import tqdm

from mancala_engine.core import default_position, legal_turns
from mancala_engine.solver import AlphaBetaSearch, minimax

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    force=True,
)

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Compare alpha-beta with plain minimax")
    parser.add_argument("--games", type=int, default=20, help="Random playouts")
    parser.add_argument("--depth", type=int, default=3, help="Search depth")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    logger.info("=" * 70)
    logger.info(f"SEARCH VALIDATION - {args.games} games, depth {args.depth}")
    logger.info("=" * 70)

    rng = random.Random(args.seed)
    engine = AlphaBetaSearch(args.depth)
    checked = 0
    pruned_nodes = 0
    mismatches = 0
    start_time = time.time()

    for _ in tqdm(range(args.games), desc="Playouts", unit=" game"):
        position = default_position()

        while True:
            turns = legal_turns(position)
            if not turns:
                break

            engine.stats.nodes = 0
            pruned = engine.search(position, args.depth)
            full = minimax(position, args.depth)
            pruned_nodes += engine.stats.nodes
            checked += 1

            if pruned != full:
                mismatches += 1
                logger.error(f"Mismatch at {position.board} ({position.player} to move)")
                logger.error(f"   Alpha-beta: {pruned}")
                logger.error(f"   Minimax:    {full}")

            _, position = rng.choice(turns)

    elapsed = time.time() - start_time

    logger.info("")
    logger.info(f"Positions checked: {checked:,}")
    logger.info(f"Alpha-beta nodes:  {pruned_nodes:,}")
    logger.info(f"Time:              {elapsed:.1f}s")
    logger.info("")

    if mismatches:
        logger.error(f"VALIDATION FAILED - {mismatches} mismatches")
        return 1

    logger.info("VALIDATION PASSED - pruning never changed a result")
    return 0


if __name__ == "__main__":
    sys.exit(main())
