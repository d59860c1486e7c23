"""Action definitions for the game engine."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from hkmahjong.core.meld import Meld

if TYPE_CHECKING:
    from hkmahjong.engine.game import GameState


class ActionType(Enum):
    DRAW = "draw"
    DISCARD = "discard"
    CHI = "chi"
    PON = "pon"
    KONG = "kong"
    WIN = "win"
    PASS = "pass"


CLAIM_ACTIONS = (ActionType.CHI, ActionType.PON, ActionType.KONG)


@dataclass(frozen=True)
class Action:
    """A player action."""
    action_type: ActionType
    player_id: str
    tile_id: Optional[str] = None  # The tile involved (discard)
    meld: Optional[Meld] = None    # Meld formed (for chi/pon/kong)

    def __repr__(self):
        parts = [self.action_type.value]
        if self.tile_id:
            parts.append(f"tile={self.tile_id}")
        return f"Action({', '.join(parts)}, {self.player_id})"


@dataclass(frozen=True)
class ActionResult:
    """Outcome of process_action.

    On success new_state holds the replacement snapshot; on failure
    error says why and the old snapshot stays current.
    """
    valid: bool
    error: Optional[str] = None
    new_state: Optional['GameState'] = None

    @classmethod
    def ok(cls, new_state: 'GameState') -> 'ActionResult':
        return cls(valid=True, new_state=new_state)

    @classmethod
    def reject(cls, error: str) -> 'ActionResult':
        return cls(valid=False, error=error)
