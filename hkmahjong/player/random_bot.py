"""Random bot - draws when it can, otherwise throws away a random tile."""

import random
from typing import List, Optional

from hkmahjong.engine.action import Action, ActionType
from hkmahjong.player.base import Player, GameView


class RandomBot(Player):
    """Bot with no strategy; reproducible when given a seed."""

    def __init__(self, name: str, seed: Optional[int] = None):
        super().__init__(name)
        self._rng = random.Random(seed)

    def choose_action(self, game_view: GameView,
                      valid_actions: List[ActionType]) -> Action:
        if ActionType.DRAW in valid_actions:
            return Action(ActionType.DRAW, game_view.my_id)

        if ActionType.DISCARD in valid_actions and game_view.my_hand.tiles:
            tile = self._rng.choice(game_view.my_hand.tiles)
            return Action(ActionType.DISCARD, game_view.my_id, tile_id=tile.id)

        return Action(ActionType.PASS, game_view.my_id)
