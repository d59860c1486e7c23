"""Game logger - records the deal and action stream for replay and debugging."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional

from hkmahjong.core.tile import Tile
from hkmahjong.engine.action import Action
from hkmahjong.engine.event import EventBus, EventType, GameEvent
from hkmahjong.ui.tile_display import tile_to_simple_str


def _tiles_str(tiles) -> List[str]:
    return [tile_to_simple_str(t) for t in tiles]


class GameLogger:
    """Records complete game data to a JSON log file."""

    def __init__(self, player_names: List[str], config_info: dict,
                 log_dir: Optional[str] = None):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.player_names = player_names
        self.config_info = config_info
        self.log_dir = log_dir

        self.deal: Optional[dict] = None
        self.actions: List[dict] = []

    def subscribe_events(self, event_bus: EventBus):
        """Subscribe to engine events for automatic logging."""
        event_bus.subscribe(EventType.GAME_START, self._on_game_start)
        event_bus.subscribe(EventType.DRAW, self._on_draw)
        event_bus.subscribe(EventType.DISCARD, self._on_discard)
        event_bus.subscribe(EventType.PASS, self._on_pass)
        event_bus.subscribe(EventType.ACTION_REJECTED, self._on_rejected)
        event_bus.subscribe(EventType.UNDO, self._on_undo)

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "config": self.config_info,
            "players": self.player_names,
            "deal": self.deal,
            "actions": self.actions,
        }

    def save(self) -> str:
        """Write the log to <log_dir>/game_<session>.json and return the path."""
        if not self.log_dir:
            raise ValueError("no log_dir configured")
        os.makedirs(self.log_dir, exist_ok=True)

        filepath = os.path.join(self.log_dir, f"game_{self.session_id}.json")
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)

        return filepath

    # --- Event handlers ---

    def _on_game_start(self, event: GameEvent):
        """Record the wall and initial hands."""
        state = event.data["state"]
        self.deal = {
            "wall": {
                "tile_ids": [t.id for t in state.wall],
                "tile_names": _tiles_str(state.wall),
            },
            "initial_hands": {},
        }
        for i, p in enumerate(state.players):
            self.deal["initial_hands"][self.player_names[i]] = {
                "seat": i,
                "wind": p.wind.kanji,
                "is_dealer": p.is_dealer,
                "tiles": _tiles_str(p.hand.tiles),
            }

    def _log_action(self, action_type: str, player: Optional[int], **kwargs):
        known = player is not None and 0 <= player < len(self.player_names)
        entry = {
            "action": action_type,
            "player": self.player_names[player] if known else "?",
            "seat": player,
        }

        for key, val in kwargs.items():
            if isinstance(val, Tile):
                entry[key] = tile_to_simple_str(val)
                entry[f"{key}_id"] = val.id
            else:
                entry[key] = val

        self.actions.append(entry)

    def _on_draw(self, event: GameEvent):
        d = event.data
        self._log_action("draw", d["player"], tile=d["tile"])

    def _on_discard(self, event: GameEvent):
        d = event.data
        self._log_action("discard", d["player"], tile=d["tile"])

    def _on_pass(self, event: GameEvent):
        d = event.data
        self._log_action("pass", d["player"], player_id=d.get("player_id"))

    def _on_rejected(self, event: GameEvent):
        action = event.data["action"]
        if isinstance(action, Action):
            action_type = getattr(action.action_type, "value", action.action_type)
            entry = {"action": action_type, "player_id": action.player_id}
        else:
            entry = {"action": repr(action), "player_id": None}
        entry["rejected"] = event.data["error"]
        self.actions.append(entry)

    def _on_undo(self, event: GameEvent):
        self.actions.append({"action": "undo"})
