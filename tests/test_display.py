"""Tests for terminal rendering"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import io

from rich.console import Console

from hkmahjong.core.tile import make_tiles_from_string, make_flower
from hkmahjong.engine.action import Action, ActionType
from hkmahjong.engine.game import create_game, process_action
from hkmahjong.rules.scoring import ScoreResult
from hkmahjong.ui.board_layout import (
    render_action_prompt, render_board, render_score, render_tip,
)
from hkmahjong.ui.tile_display import (
    format_hand_with_indices, tile_to_rich_text, tile_to_simple_str, tiles_to_rich_text,
)


def make_console():
    return Console(file=io.StringIO(), width=120, color_system=None)


class TestTileDisplay:
    def test_simple_str(self):
        assert tile_to_simple_str(make_tiles_from_string("4d")[0]) == "4d"

    def test_rich_text(self):
        text = tile_to_rich_text(make_tiles_from_string("白")[0])
        assert text.plain == "[白]"
        assert tile_to_rich_text(make_flower(1)).plain == "[花]"

    def test_tiles_joined(self):
        text = tiles_to_rich_text(make_tiles_from_string("12c"))
        assert text.plain == "[1c] [2c]"

    def test_hand_indices(self):
        text = format_hand_with_indices(make_tiles_from_string("12c"))
        lines = text.plain.split("\n")
        assert lines[0].startswith("[1c]")
        assert lines[1].split() == ["1", "2"]


class TestBoardLayout:
    def test_render_board(self):
        state = create_game(["You", "B", "C", "D"], 11)
        tile = state.players[0].hand.tiles[0]
        state = process_action(
            state, Action(ActionType.DISCARD, "player-0", tile_id=tile.id)).new_state
        console = make_console()
        render_board(console, state)
        out = console.file.getvalue()
        assert "Hong Kong Mahjong" in out
        assert "Wall: 83 tiles" in out
        assert "(dealer)" in out
        assert f"[{tile.name}]" in out

    def test_render_prompt_score_tip(self):
        console = make_console()
        render_action_prompt(console, [ActionType.DRAW, ActionType.PASS])
        render_score(console, "You", ScoreResult(fan=3, points=64,
                                                 description=["Basic win", "Concealed hand"]))
        render_tip(console, "Keep pairs.")
        out = console.file.getvalue()
        assert "[d] draw" in out
        assert "3 fan  64 points" in out
        assert "Keep pairs." in out
