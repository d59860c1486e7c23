"""Player state at the table."""

from dataclasses import dataclass, replace

from .hand import Hand
from .tile import Wind, WIND_ORDER


def player_id(seat: int) -> str:
    return f"player-{seat}"


@dataclass(frozen=True)
class PlayerState:
    """One seat at the table.

    Attributes:
        id: Stable id, "player-<seat>"
        name: Display name
        is_dealer: Whether this player is the dealer
        wind: Seat wind
        is_bot: Whether this seat is played by a bot
        hand: Current hand
    """
    id: str
    name: str
    is_dealer: bool
    wind: Wind
    is_bot: bool
    hand: Hand = Hand()

    @classmethod
    def for_seat(cls, seat: int, name: str, hand: Hand = Hand(),
                 human_seat: int = 0) -> 'PlayerState':
        """Seat 0 deals; winds follow seat order."""
        return cls(
            id=player_id(seat),
            name=name,
            is_dealer=(seat == 0),
            wind=WIND_ORDER[seat],
            is_bot=(seat != human_seat),
            hand=hand,
        )

    def with_hand(self, hand: Hand) -> 'PlayerState':
        return replace(self, hand=hand)

    def __repr__(self):
        return f"PlayerState({self.name}, {self.wind.kanji}, {len(self.hand.tiles)}枚)"
