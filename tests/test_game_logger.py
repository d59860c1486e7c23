"""Tests for game_logger.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import json

import pytest

from hkmahjong.engine.action import Action, ActionType
from hkmahjong.engine.event import EventBus
from hkmahjong.engine.game import GameConfig
from hkmahjong.engine.game_logger import GameLogger
from hkmahjong.engine.session import GameSession

NAMES = ["A", "B", "C", "D"]


def make_logged_session(log_dir=None):
    bus = EventBus()
    logger = GameLogger(NAMES, {"seed": 5}, log_dir=log_dir)
    logger.subscribe_events(bus)
    session = GameSession(GameConfig(player_names=NAMES, seed=5), bus)
    session.start()
    return session, logger


class TestGameLogger:
    def test_records_deal(self):
        session, logger = make_logged_session()
        deal = logger.deal
        assert len(deal["wall"]["tile_ids"]) == 83
        assert deal["initial_hands"]["A"]["is_dealer"] is True
        assert deal["initial_hands"]["A"]["wind"] == "東"
        assert len(deal["initial_hands"]["B"]["tiles"]) == 13

    def test_records_actions(self):
        session, logger = make_logged_session()
        tile = session.state.players[0].hand.tiles[0]
        session.submit(Action(ActionType.DISCARD, "player-0", tile_id=tile.id))
        session.submit(Action(ActionType.DRAW, "player-1"))
        session.submit(Action(ActionType.DRAW, "player-1"))  # rejected
        session.undo()

        actions = logger.actions
        assert actions[0]["action"] == "discard"
        assert actions[0]["player"] == "A"
        assert actions[0]["tile_id"] == tile.id
        assert actions[1]["action"] == "draw"
        assert actions[1]["seat"] == 1
        assert actions[2]["rejected"] == "Cannot draw in current phase"
        assert actions[3] == {"action": "undo"}

    def test_unknown_player_and_bad_action(self):
        session, logger = make_logged_session()
        assert session.submit(Action(ActionType.PASS, "ghost")).valid
        assert not session.submit(None).valid

        assert logger.actions[0] == {
            "action": "pass", "player": "?", "seat": None, "player_id": "ghost",
        }
        assert logger.actions[1]["action"] == "None"
        assert logger.actions[1]["player_id"] is None
        assert logger.actions[1]["rejected"]

    def test_save(self, tmp_path):
        session, logger = make_logged_session(str(tmp_path))
        session.submit(Action(ActionType.PASS, "player-0"))
        path = logger.save()
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["session_id"] == logger.session_id
        assert data["players"] == NAMES
        assert data["actions"][0]["action"] == "pass"

    def test_save_without_dir(self):
        _, logger = make_logged_session()
        with pytest.raises(ValueError):
            logger.save()
