"""Game state and turn flow: draw -> discard -> next player.

GameState is immutable. Every accepted action builds a new snapshot and
leaves the old one untouched, so process_action is a pure function of
(state, action).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence

from hkmahjong.core.hand import Hand
from hkmahjong.core.player_state import PlayerState
from hkmahjong.core.tile import Tile, Wind, create_tile_set, sort_tiles
from hkmahjong.core.wall import NUM_SEATS, deal_hands, shuffle_tiles
from hkmahjong.engine.action import Action, ActionResult, ActionType, CLAIM_ACTIONS
from hkmahjong.rules.win import can_win


class Phase(Enum):
    DRAWING = "drawing"
    DISCARDING = "discarding"
    CLAIMING = "claiming"  # reserved
    ENDED = "ended"        # reserved


class GameConfig:
    """Game configuration."""

    def __init__(
        self,
        player_names: Optional[List[str]] = None,
        seed: Optional[int] = None,
        human_seat: int = 0,
        log_dir: Optional[str] = None,
    ):
        self.player_names = list(player_names or ["You", "Bot 1", "Bot 2", "Bot 3"])
        self.seed = seed
        self.human_seat = human_seat
        self.log_dir = log_dir

        if len(self.player_names) != NUM_SEATS:
            raise ValueError(f"exactly {NUM_SEATS} players required, "
                             f"got {len(self.player_names)}")
        if not 0 <= human_seat < NUM_SEATS:
            raise ValueError(f"human_seat must be 0..{NUM_SEATS - 1}, got {human_seat}")


@dataclass(frozen=True)
class GameState:
    """One snapshot of the table.

    Attributes:
        players: Seats in turn order; seat 0 is the dealer
        current_player: Id of the player to act
        wall: Remaining draw pile, head first
        discards: One river per seat, oldest first
        round: Round number, starting at 1
        round_wind: Prevailing wind
        phase: Turn phase
        last_action: Most recent discard, for highlighting
    """
    players: tuple
    current_player: str
    wall: tuple
    discards: tuple
    round: int = 1
    round_wind: Wind = Wind.EAST
    phase: Phase = Phase.DISCARDING
    last_action: Optional[Action] = None

    def find_seat(self, player_id: str) -> Optional[int]:
        """Seat index of player_id, or None if nobody at the table has it."""
        for i, p in enumerate(self.players):
            if p.id == player_id:
                return i
        return None

    def seat_of(self, player_id: str) -> int:
        seat = self.find_seat(player_id)
        if seat is None:
            raise KeyError(player_id)
        return seat

    def player(self, player_id: str) -> PlayerState:
        return self.players[self.seat_of(player_id)]

    @property
    def current(self) -> PlayerState:
        return self.player(self.current_player)

    def _with_player(self, seat: int, player: PlayerState) -> tuple:
        players = list(self.players)
        players[seat] = player
        return tuple(players)


def _refresh(hand: Hand) -> Hand:
    return replace(hand, can_win=can_win(hand))


def create_game(player_names: Sequence[str], seed: Optional[int] = None,
                human_seat: int = 0) -> GameState:
    """Shuffle, deal and seat four players. The dealer opens by discarding."""
    if len(player_names) != NUM_SEATS:
        raise ValueError(f"exactly {NUM_SEATS} player names required, "
                         f"got {len(player_names)}")

    wall = shuffle_tiles(create_tile_set(), seed)
    hands, remaining = deal_hands(wall)

    players = tuple(
        PlayerState.for_seat(
            seat, name,
            hand=_refresh(Hand(tiles=tuple(sort_tiles(hands[seat])))),
            human_seat=human_seat,
        )
        for seat, name in enumerate(player_names)
    )

    return GameState(
        players=players,
        current_player=players[0].id,
        wall=tuple(remaining),
        discards=tuple(() for _ in range(NUM_SEATS)),
        round=1,
        round_wind=Wind.EAST,
        phase=Phase.DISCARDING,
    )


def create_game_from_config(config: GameConfig) -> GameState:
    return create_game(config.player_names, config.seed, config.human_seat)


def process_action(state: GameState, action: Action) -> ActionResult:
    """Apply an action. Never raises; failures come back as invalid results."""
    try:
        if action.action_type == ActionType.DRAW:
            return _process_draw(state, action)
        if action.action_type == ActionType.DISCARD:
            return _process_discard(state, action)
        if action.action_type in CLAIM_ACTIONS:
            return _process_claim(state, action)
        if action.action_type == ActionType.WIN:
            return ActionResult.reject("Declaring a win is not implemented yet")
        if action.action_type == ActionType.PASS:
            return _process_pass(state, action)
        return ActionResult.reject("Unknown action type")
    except Exception as e:
        return ActionResult.reject(str(e) or type(e).__name__)


def _process_draw(state: GameState, action: Action) -> ActionResult:
    if state.phase != Phase.DRAWING:
        return ActionResult.reject("Cannot draw in current phase")
    if action.player_id != state.current_player:
        return ActionResult.reject("Not your turn to draw")
    if not state.wall:
        return ActionResult.reject("Wall is empty")

    try:
        seat = state.seat_of(action.player_id)
    except KeyError:
        return ActionResult.reject("Player not found")

    player = state.players[seat]
    tile = state.wall[0]
    hand = _refresh(player.hand.with_tile(tile))

    return ActionResult.ok(replace(
        state,
        players=state._with_player(seat, player.with_hand(hand)),
        wall=state.wall[1:],
        phase=Phase.DISCARDING,
    ))


def _process_discard(state: GameState, action: Action) -> ActionResult:
    if state.phase != Phase.DISCARDING:
        return ActionResult.reject("Cannot discard in current phase")
    if action.player_id != state.current_player:
        return ActionResult.reject("Not your turn to discard")
    if not action.tile_id:
        return ActionResult.reject("No tile specified for discard")

    try:
        seat = state.seat_of(action.player_id)
    except KeyError:
        return ActionResult.reject("Player not found")

    player = state.players[seat]
    tile = player.hand.find(action.tile_id)
    if tile is None:
        return ActionResult.reject("Tile not in hand")

    hand = _refresh(player.hand.without_tile(tile.id))
    discards = list(state.discards)
    discards[seat] = discards[seat] + (tile,)

    return ActionResult.ok(replace(
        state,
        players=state._with_player(seat, player.with_hand(hand)),
        discards=tuple(discards),
        current_player=get_next_player(state, action.player_id),
        phase=Phase.DRAWING,
        last_action=action,
    ))


def _process_claim(state: GameState, action: Action) -> ActionResult:
    # TODO: claim window after a discard; validate with is_valid_meld and expose the meld
    return ActionResult.reject("Claiming not implemented yet")


def _process_pass(state: GameState, action: Action) -> ActionResult:
    return ActionResult.ok(replace(state, phase=Phase.DRAWING))


def get_next_player(state: GameState, current_id: str) -> str:
    """Next seat in fixed order, wrapping from the last seat to the first."""
    try:
        seat = state.seat_of(current_id)
    except KeyError:
        raise ValueError(f"Player not found: {current_id}") from None
    return state.players[(seat + 1) % len(state.players)].id


def get_valid_actions(state: GameState) -> List[ActionType]:
    """Action types currently legal. Claims are never offered yet."""
    actions = []
    if state.phase == Phase.DRAWING and state.wall:
        actions.append(ActionType.DRAW)
    if state.phase == Phase.DISCARDING:
        actions.append(ActionType.DISCARD)
    actions.append(ActionType.PASS)
    return actions


def last_discard(state: GameState) -> Optional[Tile]:
    """The tile named by last_action, if it is still at the tail of a river."""
    action = state.last_action
    if action is None or action.action_type != ActionType.DISCARD:
        return None
    river = state.discards[state.seat_of(action.player_id)]
    if river and river[-1].id == action.tile_id:
        return river[-1]
    return None
