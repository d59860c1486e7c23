"""Meld (副露) data structure and meld validation for Chi/Pon/Kong."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Sequence

from .tile import Tile, tiles_equal, NUMBER_SUITS


class MeldType(Enum):
    CHI = "chi"    # 吃
    PON = "pon"    # 碰
    KONG = "kong"  # 杠


@dataclass(frozen=True)
class Meld:
    """A committed meld.

    Attributes:
        meld_type: Type of meld
        tiles: tuple of Tile
        is_concealed: False once the meld has been exposed by a claim
    """
    meld_type: MeldType
    tiles: tuple
    is_concealed: bool = True

    @property
    def is_kong(self) -> bool:
        return self.meld_type == MeldType.KONG

    @property
    def is_set(self) -> bool:
        """Pon or kong (a set of identical tiles)."""
        return self.meld_type in (MeldType.PON, MeldType.KONG)

    @property
    def first(self) -> Tile:
        return self.tiles[0]


class MeldCheck(NamedTuple):
    valid: bool
    meld_type: Optional[MeldType] = None


INVALID = MeldCheck(False)


def is_valid_meld(tiles: Sequence[Tile]) -> MeldCheck:
    """Classify 3 or 4 tiles as kong, pon, chi, or invalid."""
    if len(tiles) not in (3, 4):
        return INVALID

    if all(tiles_equal(t, tiles[0]) for t in tiles):
        return MeldCheck(True, MeldType.KONG if len(tiles) == 4 else MeldType.PON)

    if len(tiles) == 3 and _is_run(tiles):
        return MeldCheck(True, MeldType.CHI)

    return INVALID


def _is_run(tiles: Sequence[Tile]) -> bool:
    """Three consecutive ranks of one number suit."""
    if any(t.suit not in NUMBER_SUITS or t.rank is None for t in tiles):
        return False
    if len({t.suit for t in tiles}) != 1:
        return False
    ranks = sorted(t.rank for t in tiles)
    return ranks[1] == ranks[0] + 1 and ranks[2] == ranks[1] + 1
