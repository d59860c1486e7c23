"""Game session - the live snapshot plus its history.

The UI submits actions here. Each accepted action replaces the current
GameState and pushes the old one onto the history, which gives undo
and an audit trail for free.
"""

from typing import List, Optional

from hkmahjong.engine.action import Action, ActionResult, ActionType
from hkmahjong.engine.advice import AdviceProvider, request_teaching_tip
from hkmahjong.engine.event import EventBus, EventType, GameEvent
from hkmahjong.engine.game import (
    GameConfig, GameState, create_game_from_config, get_valid_actions,
    process_action,
)


class GameSession:
    """Owns the single live GameState of a match."""

    def __init__(self, config: GameConfig, event_bus: Optional[EventBus] = None):
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.state: GameState = create_game_from_config(config)
        self.history: List[GameState] = []

    def start(self):
        """Announce the initial deal to listeners."""
        self.event_bus.emit(GameEvent(EventType.GAME_START, {
            "config": self.config,
            "state": self.state,
        }))
        self._announce_turn()

    @property
    def valid_actions(self) -> List[ActionType]:
        return get_valid_actions(self.state)

    def submit(self, action: Action) -> ActionResult:
        """Apply an action to the live snapshot."""
        result = process_action(self.state, action)
        if not result.valid:
            self.event_bus.emit(GameEvent(EventType.ACTION_REJECTED, {
                "action": action,
                "error": result.error,
            }))
            return result

        previous = self.state
        self.history.append(previous)
        self.state = result.new_state
        self._emit_action(action, previous)
        if self.state.current_player != previous.current_player:
            self._announce_turn()
        return result

    def undo(self) -> GameState:
        """Restore the previous snapshot. Raises IndexError with no history."""
        if not self.history:
            raise IndexError("nothing to undo")
        undone = self.state
        self.state = self.history.pop()
        self.event_bus.emit(GameEvent(EventType.UNDO, {
            "undone": undone,
            "state": self.state,
        }))
        return self.state

    def teaching_tip(self, provider: AdviceProvider,
                     context: Optional[str] = None) -> str:
        tip = request_teaching_tip(self.state, provider, context)
        self.event_bus.emit(GameEvent(EventType.TIP, {"tip": tip}))
        return tip

    def _emit_action(self, action: Action, previous: GameState):
        # Pass is accepted from any id, so the seat may be unknown
        seat = self.state.find_seat(action.player_id)
        if action.action_type == ActionType.DRAW:
            self.event_bus.emit(GameEvent(EventType.DRAW, {
                "player": seat,
                "tile": previous.wall[0],
                "wall_remaining": len(self.state.wall),
            }))
        elif action.action_type == ActionType.DISCARD:
            self.event_bus.emit(GameEvent(EventType.DISCARD, {
                "player": seat,
                "tile": self.state.discards[seat][-1],
            }))
        elif action.action_type == ActionType.PASS:
            self.event_bus.emit(GameEvent(EventType.PASS, {
                "player": seat,
                "player_id": action.player_id,
            }))

    def _announce_turn(self):
        self.event_bus.emit(GameEvent(EventType.TURN_START, {
            "player": self.state.seat_of(self.state.current_player),
            "phase": self.state.phase,
        }))
