"""Score calculation - fan counting and fan-to-points conversion."""

from dataclasses import dataclass, field
from typing import List, NamedTuple

from hkmahjong.core.hand import Hand
from hkmahjong.core.meld import MeldType
from hkmahjong.core.tile import TileSuit, Wind, NUMBER_SUITS, HONOR_SUITS

BASE_POINTS = 8
FAN_CAP = 10
MINIMUM_FAN = 3  # Hong Kong rules


@dataclass
class ScoreResult:
    """Result of score calculation."""
    fan: int
    points: int
    description: List[str] = field(default_factory=list)


class SpecialPattern(NamedTuple):
    pattern: str
    fan: int


def calculate_score(hand: Hand, round_wind: Wind, seat_wind: Wind) -> ScoreResult:
    """Count fan for a hand presented as a winning hand.

    Does not check that the hand is complete; that is up to the caller.
    Rules are applied in a fixed order and each one that scores adds a
    line to the description. Composition rules look at the unmelded
    tiles only.
    """
    fan = 0
    description = []

    # Basic win
    fan += 1
    description.append("Basic win")

    if hand.is_concealed:
        fan += 1
        description.append("Concealed hand")

    if all(t.is_simple for t in hand.tiles):
        fan += 1
        description.append("All simples")

    dragon_sets = [m for m in hand.melds
                   if m.is_set and m.first.suit == TileSuit.DRAGONS]
    for meld in dragon_sets:
        fan += 1
        description.append(f"Dragon {meld.first.dragon.value} {meld.meld_type.value}")

    wind_sets = [m for m in hand.melds
                 if m.is_set and m.first.suit == TileSuit.WINDS]
    for meld in wind_sets:
        wind = meld.first.wind
        # Same fan either way; only the label marks seat/round wind
        fan += 1
        if wind == seat_wind or wind == round_wind:
            description.append(f"{wind.value} wind {meld.meld_type.value} (seat/round wind)")
        else:
            description.append(f"{wind.value} wind {meld.meld_type.value}")

    for meld in hand.melds:
        if meld.meld_type == MeldType.KONG:
            fan += 1
            description.append("Kong bonus")

    if hand.flowers:
        fan += len(hand.flowers)
        description.append(f"{len(hand.flowers)} flower(s)")

    return ScoreResult(fan=fan, points=fan_to_points(fan), description=description)


def fan_to_points(fan: int) -> int:
    """8 x 2^fan, with fan capped at FAN_CAP."""
    return BASE_POINTS * (2 ** min(fan, FAN_CAP))


def check_special_patterns(hand: Hand) -> List[SpecialPattern]:
    """Detect limit-style patterns.

    These are reported separately and are not added to calculate_score.
    """
    patterns = []
    tiles = hand.tiles
    suits = {t.suit for t in tiles}
    number_suits = suits.intersection(NUMBER_SUITS)
    honor_suits = suits.intersection(HONOR_SUITS)

    if len(number_suits) == 1 and not honor_suits:
        patterns.append(SpecialPattern("All one suit", 6))

    if len(number_suits) == 1 and len(honor_suits) == 1:
        patterns.append(SpecialPattern("Mixed one suit", 3))

    if all(t.is_honor or t.is_terminal for t in tiles):
        patterns.append(SpecialPattern("All terminals and honors", 13))

    return patterns


def get_minimum_fan() -> int:
    return MINIMUM_FAN


def meets_minimum_fan(score: ScoreResult) -> bool:
    return score.fan >= get_minimum_fan()
