"""Win (和了) eligibility.

Only a tile-count placeholder: a hand holding 14 tiles (counting each
meld as 3) is reported as able to win. No check is made that the tiles
actually form four sets and a pair.
"""

from hkmahjong.core.hand import Hand

WINNING_TILE_COUNT = 14


def can_win(hand: Hand) -> bool:
    """Tile-count stub; not real hand-completion detection."""
    return len(hand.tiles) + 3 * len(hand.melds) == WINNING_TILE_COUNT
