"""Abstract player interface and GameView (read-only information barrier)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from hkmahjong.core.hand import Hand
from hkmahjong.core.tile import Tile, Wind
from hkmahjong.engine.action import Action, ActionType
from hkmahjong.engine.game import GameState, Phase, last_discard


@dataclass
class OpponentView:
    """Read-only view of an opponent (no hidden tiles)."""
    seat: int
    id: str
    name: str
    wind: Wind
    is_dealer: bool
    melds: tuple
    discards: tuple
    num_tiles: int


@dataclass
class GameView:
    """Read-only view of visible game state.

    Players only see their own hand, everyone's melds and rivers, and
    the size of the wall.
    """
    # Own hand (full access)
    my_hand: Hand
    my_seat: int
    my_id: str
    my_wind: Wind
    is_dealer: bool

    # Opponents (limited view)
    opponents: List[OpponentView] = field(default_factory=list)

    # Table state
    round_wind: Wind = Wind.EAST
    wall_remaining: int = 0
    phase: Phase = Phase.DRAWING
    current_player: str = ""
    last_discard: Optional[Tile] = None


class Player(ABC):
    """Abstract base class for all seat controllers."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def choose_action(self, game_view: GameView,
                      valid_actions: List[ActionType]) -> Action:
        """Pick one action; valid_actions comes from get_valid_actions."""
        ...


def build_game_view(state: GameState, seat: int) -> GameView:
    """Build a GameView for the given seat."""
    me = state.players[seat]

    opponents = []
    for i, p in enumerate(state.players):
        if i == seat:
            continue
        opponents.append(OpponentView(
            seat=i,
            id=p.id,
            name=p.name,
            wind=p.wind,
            is_dealer=p.is_dealer,
            melds=p.hand.melds,
            discards=state.discards[i],
            num_tiles=len(p.hand.tiles),
        ))

    return GameView(
        my_hand=me.hand,
        my_seat=seat,
        my_id=me.id,
        my_wind=me.wind,
        is_dealer=me.is_dealer,
        opponents=opponents,
        round_wind=state.round_wind,
        wall_remaining=len(state.wall),
        phase=state.phase,
        current_player=state.current_player,
        last_discard=last_discard(state),
    )
