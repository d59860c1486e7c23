"""Hand management - concealed tiles, melds, flowers."""

from dataclasses import dataclass, replace
from typing import Optional

from .tile import Tile, sort_tiles
from .meld import Meld


@dataclass(frozen=True)
class Hand:
    """A player's hand. Every change returns a new Hand.

    Attributes:
        tiles: Unmelded tiles, kept sorted for display
        melds: Committed melds
        flowers: Flower tiles set aside
        can_win: Win-eligibility flag, refreshed by the game engine
    """
    tiles: tuple = ()
    melds: tuple = ()
    flowers: tuple = ()
    can_win: bool = False

    def find(self, tile_id: str) -> Optional[Tile]:
        for t in self.tiles:
            if t.id == tile_id:
                return t
        return None

    def with_tile(self, tile: Tile) -> 'Hand':
        """Add a drawn tile and re-sort."""
        return replace(self, tiles=tuple(sort_tiles(self.tiles + (tile,))))

    def without_tile(self, tile_id: str) -> 'Hand':
        """Remove the tile with this id. Raises KeyError if absent."""
        if self.find(tile_id) is None:
            raise KeyError(tile_id)
        return replace(self, tiles=tuple(t for t in self.tiles if t.id != tile_id))

    def with_meld(self, meld: Meld) -> 'Hand':
        return replace(self, melds=self.melds + (meld,))

    @property
    def is_concealed(self) -> bool:
        """No exposed meld (門前)."""
        return all(m.is_concealed for m in self.melds)

    @property
    def all_tiles(self) -> tuple:
        """Unmelded tiles plus every meld's tiles (flowers excluded)."""
        meld_tiles = tuple(t for m in self.melds for t in m.tiles)
        return self.tiles + meld_tiles

    @property
    def total_tiles(self) -> int:
        return len(self.all_tiles)
