"""Tile definitions for Hong Kong Mahjong: suits, honors, the 136-tile set."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple


class TileSuit(Enum):
    CHARACTERS = "characters"  # 万子
    BAMBOOS = "bamboos"        # 索子
    DOTS = "dots"              # 筒子
    WINDS = "winds"            # 风牌
    DRAGONS = "dragons"        # 三元牌


class Wind(Enum):
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    NORTH = "north"

    @property
    def kanji(self) -> str:
        return _WIND_KANJI[self]


class Dragon(Enum):
    RED = "red"
    GREEN = "green"
    WHITE = "white"

    @property
    def kanji(self) -> str:
        return _DRAGON_KANJI[self]


_WIND_KANJI = {Wind.EAST: '東', Wind.SOUTH: '南', Wind.WEST: '西', Wind.NORTH: '北'}
_DRAGON_KANJI = {Dragon.RED: '中', Dragon.GREEN: '發', Dragon.WHITE: '白'}

NUMBER_SUITS = (TileSuit.CHARACTERS, TileSuit.BAMBOOS, TileSuit.DOTS)
HONOR_SUITS = (TileSuit.WINDS, TileSuit.DRAGONS)

# Sort orders
SUIT_ORDER = [TileSuit.CHARACTERS, TileSuit.BAMBOOS, TileSuit.DOTS,
              TileSuit.WINDS, TileSuit.DRAGONS]
WIND_ORDER = [Wind.EAST, Wind.SOUTH, Wind.WEST, Wind.NORTH]
DRAGON_ORDER = [Dragon.RED, Dragon.GREEN, Dragon.WHITE]

# Tile id prefixes, e.g. "char-1-0", "wind-east-3"
_ID_PREFIX = {
    TileSuit.CHARACTERS: "char",
    TileSuit.BAMBOOS: "bamboo",
    TileSuit.DOTS: "dots",
    TileSuit.WINDS: "wind",
    TileSuit.DRAGONS: "dragon",
}

_SUIT_CHAR = {TileSuit.CHARACTERS: 'c', TileSuit.BAMBOOS: 'b', TileSuit.DOTS: 'd'}

COPIES_PER_TILE = 4
TOTAL_TILES = 136


@dataclass(frozen=True)
class Tile:
    """One physical tile.

    `id` tells apart the four copies of a tile; it takes no part in
    rules comparisons, which go through `kind` / `tiles_equal`.

    Attributes:
        id: Unique label of this physical copy
        suit: Tile suit
        rank: 1-9 for characters/bamboos/dots, None for honors
        wind: Wind for wind tiles
        dragon: Dragon for dragon tiles
        is_flower: Bonus tile set aside from the structural hand
    """
    id: str
    suit: TileSuit
    rank: Optional[int] = None
    wind: Optional[Wind] = None
    dragon: Optional[Dragon] = None
    is_flower: bool = False

    @property
    def kind(self) -> Tuple:
        """Identity of the tile face, ignoring which copy it is."""
        return (self.suit, self.rank, self.wind, self.dragon, self.is_flower)

    @property
    def is_honor(self) -> bool:
        return self.suit in HONOR_SUITS

    @property
    def is_number_tile(self) -> bool:
        return self.suit in NUMBER_SUITS and self.rank is not None

    @property
    def is_terminal(self) -> bool:
        return self.is_number_tile and self.rank in (1, 9)

    @property
    def is_simple(self) -> bool:
        return self.is_number_tile and 2 <= self.rank <= 8

    @property
    def name(self) -> str:
        if self.wind is not None:
            return self.wind.kanji
        if self.dragon is not None:
            return self.dragon.kanji
        if self.rank is not None:
            return f"{self.rank}{_SUIT_CHAR[self.suit]}"
        return "花"

    def __repr__(self):
        return f"Tile({self.name}, {self.id})"


def tiles_equal(a: Tile, b: Tile) -> bool:
    """Whether two tiles have the same face (suit, rank, wind, dragon, flower)."""
    return a.kind == b.kind


def sort_key(tile: Tile) -> Tuple[int, int]:
    """Display order: suit, then rank / wind order / dragon order."""
    suit_idx = SUIT_ORDER.index(tile.suit)
    if tile.rank is not None:
        return (suit_idx, tile.rank)
    if tile.wind is not None:
        return (suit_idx, WIND_ORDER.index(tile.wind))
    if tile.dragon is not None:
        return (suit_idx, DRAGON_ORDER.index(tile.dragon))
    return (suit_idx, 0)


def sort_tiles(tiles: Iterable[Tile]) -> List[Tile]:
    """Return a new, stably sorted list of tiles."""
    return sorted(tiles, key=sort_key)


def create_tile_set() -> List[Tile]:
    """Build the full 136-tile set, 4 copies of each of the 34 faces."""
    tiles = []
    for suit in NUMBER_SUITS:
        prefix = _ID_PREFIX[suit]
        for rank in range(1, 10):
            for copy in range(COPIES_PER_TILE):
                tiles.append(Tile(f"{prefix}-{rank}-{copy}", suit, rank=rank))

    for wind in WIND_ORDER:
        for copy in range(COPIES_PER_TILE):
            tiles.append(Tile(f"wind-{wind.value}-{copy}", TileSuit.WINDS, wind=wind))

    for dragon in DRAGON_ORDER:
        for copy in range(COPIES_PER_TILE):
            tiles.append(Tile(f"dragon-{dragon.value}-{copy}", TileSuit.DRAGONS,
                              dragon=dragon))

    return tiles


def make_flower(number: int) -> Tile:
    """Create a flower tile (not part of the 136-tile set).

    Flowers have no suit of their own. CHARACTERS is a placeholder kept
    for the wire format; is_flower and the missing rank are what mark
    the tile, so it never counts as a number tile or matches one.
    """
    return Tile(f"flower-{number}", TileSuit.CHARACTERS, is_flower=True)


_HONOR_CHARS = {
    '東': (TileSuit.WINDS, Wind.EAST, None),
    '南': (TileSuit.WINDS, Wind.SOUTH, None),
    '西': (TileSuit.WINDS, Wind.WEST, None),
    '北': (TileSuit.WINDS, Wind.NORTH, None),
    '中': (TileSuit.DRAGONS, None, Dragon.RED),
    '發': (TileSuit.DRAGONS, None, Dragon.GREEN),
    '白': (TileSuit.DRAGONS, None, Dragon.WHITE),
}

_SUIT_FROM_CHAR = {'c': TileSuit.CHARACTERS, 'b': TileSuit.BAMBOOS, 'd': TileSuit.DOTS}


def make_tiles_from_string(s: str) -> List[Tile]:
    """Parse a shorthand string like '123c456b789d東東中' into tiles.

    Repeated faces get successive copy numbers, so '111c' yields
    char-1-0, char-1-1 and char-1-2.
    """
    tiles = []
    numbers = []
    used = {}

    def next_copy(key) -> int:
        copy = used.get(key, 0)
        if copy >= COPIES_PER_TILE:
            raise ValueError(f"more than {COPIES_PER_TILE} copies of {key} in {s!r}")
        used[key] = copy + 1
        return copy

    for ch in s:
        if ch.isdigit():
            if ch == '0':
                raise ValueError(f"rank 0 in tile string {s!r}")
            numbers.append(int(ch))
        elif ch in _SUIT_FROM_CHAR:
            suit = _SUIT_FROM_CHAR[ch]
            for n in numbers:
                copy = next_copy((suit, n))
                tiles.append(Tile(f"{_ID_PREFIX[suit]}-{n}-{copy}", suit, rank=n))
            numbers = []
        elif ch in _HONOR_CHARS:
            suit, wind, dragon = _HONOR_CHARS[ch]
            face = wind or dragon
            copy = next_copy((suit, face))
            tiles.append(Tile(f"{_ID_PREFIX[suit]}-{face.value}-{copy}", suit,
                              wind=wind, dragon=dragon))
        elif not ch.isspace():
            raise ValueError(f"unknown tile character {ch!r} in {s!r}")

    if numbers:
        raise ValueError(f"ranks without a suit letter in {s!r}")
    return tiles
