"""Wall (牌山) shuffling and the initial deal."""

import random
from typing import List, Optional, Sequence, Tuple

from .tile import Tile

NUM_SEATS = 4
HAND_SIZE = 13
# 13 per seat plus the dealer's extra tile
DEAL_SIZE = HAND_SIZE * NUM_SEATS + 1


class DealError(ValueError):
    """The wall cannot supply a full deal."""


def shuffle_tiles(tiles: Sequence[Tile], seed: Optional[int] = None) -> List[Tile]:
    """Fisher-Yates shuffle into a new list.

    The same seed always yields the same order. Without a seed the
    generator is seeded from the OS.
    """
    rng = random.Random(seed)
    shuffled = list(tiles)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def deal_hands(wall: Sequence[Tile]) -> Tuple[List[List[Tile]], List[Tile]]:
    """Deal 13 tiles to each seat round-robin, then one more to the dealer.

    Returns:
        (hands, remaining_wall) where hands[0] is the dealer's 14 tiles.

    Raises:
        DealError: fewer than DEAL_SIZE tiles in the wall
    """
    if len(wall) < DEAL_SIZE:
        raise DealError(f"need at least {DEAL_SIZE} tiles to deal, got {len(wall)}")

    hands: List[List[Tile]] = [[] for _ in range(NUM_SEATS)]
    pos = 0
    for _ in range(HAND_SIZE):
        for seat in range(NUM_SEATS):
            hands[seat].append(wall[pos])
            pos += 1

    hands[0].append(wall[pos])
    pos += 1

    return hands, list(wall[pos:])
