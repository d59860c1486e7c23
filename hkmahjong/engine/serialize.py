"""Plain-data encoding of game snapshots and actions.

Output is built from dicts, lists, str, int, bool and None only, so it
can go straight through json. Keys follow the camelCase names the web
client reads (currentPlayer, roundWind, lastAction, ...).
"""

from typing import Any, Dict, Optional

from hkmahjong.core.hand import Hand
from hkmahjong.core.meld import Meld, MeldType
from hkmahjong.core.player_state import PlayerState
from hkmahjong.core.tile import Dragon, Tile, TileSuit, Wind
from hkmahjong.engine.action import Action, ActionType
from hkmahjong.engine.game import GameState, Phase


def tile_to_dict(tile: Tile) -> Dict[str, Any]:
    d = {"id": tile.id, "suit": tile.suit.value}
    if tile.rank is not None:
        d["rank"] = tile.rank
    if tile.wind is not None:
        d["wind"] = tile.wind.value
    if tile.dragon is not None:
        d["dragon"] = tile.dragon.value
    if tile.is_flower:
        d["isFlower"] = True
    return d


def tile_from_dict(d: Dict[str, Any]) -> Tile:
    return Tile(
        id=d["id"],
        suit=TileSuit(d["suit"]),
        rank=d.get("rank"),
        wind=Wind(d["wind"]) if d.get("wind") else None,
        dragon=Dragon(d["dragon"]) if d.get("dragon") else None,
        is_flower=bool(d.get("isFlower", False)),
    )


def meld_to_dict(meld: Meld) -> Dict[str, Any]:
    return {
        "type": meld.meld_type.value,
        "tiles": [tile_to_dict(t) for t in meld.tiles],
        "isConcealed": meld.is_concealed,
    }


def meld_from_dict(d: Dict[str, Any]) -> Meld:
    return Meld(
        meld_type=MeldType(d["type"]),
        tiles=tuple(tile_from_dict(t) for t in d["tiles"]),
        is_concealed=bool(d["isConcealed"]),
    )


def hand_to_dict(hand: Hand) -> Dict[str, Any]:
    return {
        "tiles": [tile_to_dict(t) for t in hand.tiles],
        "melds": [meld_to_dict(m) for m in hand.melds],
        "flowers": [tile_to_dict(t) for t in hand.flowers],
        "canWin": hand.can_win,
    }


def hand_from_dict(d: Dict[str, Any]) -> Hand:
    return Hand(
        tiles=tuple(tile_from_dict(t) for t in d["tiles"]),
        melds=tuple(meld_from_dict(m) for m in d.get("melds", [])),
        flowers=tuple(tile_from_dict(t) for t in d.get("flowers", [])),
        can_win=bool(d.get("canWin", False)),
    )


def player_to_dict(player: PlayerState) -> Dict[str, Any]:
    return {
        "id": player.id,
        "name": player.name,
        "hand": hand_to_dict(player.hand),
        "isDealer": player.is_dealer,
        "wind": player.wind.value,
        "isBot": player.is_bot,
    }


def player_from_dict(d: Dict[str, Any]) -> PlayerState:
    return PlayerState(
        id=d["id"],
        name=d["name"],
        is_dealer=bool(d["isDealer"]),
        wind=Wind(d["wind"]),
        is_bot=bool(d["isBot"]),
        hand=hand_from_dict(d["hand"]),
    )


def action_to_dict(action: Action) -> Dict[str, Any]:
    d = {"type": action.action_type.value, "playerId": action.player_id}
    if action.tile_id is not None:
        d["tileId"] = action.tile_id
    if action.meld is not None:
        d["meld"] = meld_to_dict(action.meld)
    return d


def action_from_dict(d: Dict[str, Any]) -> Action:
    """Decode an action. Raises ValueError for an unknown type."""
    return Action(
        action_type=ActionType(d["type"]),
        player_id=d["playerId"],
        tile_id=d.get("tileId"),
        meld=meld_from_dict(d["meld"]) if d.get("meld") else None,
    )


def state_to_dict(state: GameState) -> Dict[str, Any]:
    d = {
        "players": [player_to_dict(p) for p in state.players],
        "currentPlayer": state.current_player,
        "wall": [tile_to_dict(t) for t in state.wall],
        "discards": [[tile_to_dict(t) for t in river] for river in state.discards],
        "round": state.round,
        "roundWind": state.round_wind.value,
        "phase": state.phase.value,
    }
    if state.last_action is not None:
        d["lastAction"] = action_to_dict(state.last_action)
    return d


def state_from_dict(d: Dict[str, Any]) -> GameState:
    last: Optional[Action] = None
    if d.get("lastAction"):
        last = action_from_dict(d["lastAction"])
    return GameState(
        players=tuple(player_from_dict(p) for p in d["players"]),
        current_player=d["currentPlayer"],
        wall=tuple(tile_from_dict(t) for t in d["wall"]),
        discards=tuple(tuple(tile_from_dict(t) for t in river) for river in d["discards"]),
        round=int(d.get("round", 1)),
        round_wind=Wind(d.get("roundWind", Wind.EAST.value)),
        phase=Phase(d["phase"]),
        last_action=last,
    )
