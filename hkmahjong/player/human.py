"""Human player - interfaces with the terminal for input."""

from typing import List, Union

from rich.console import Console

from hkmahjong.engine.action import Action, ActionType
from hkmahjong.player.base import Player, GameView
from hkmahjong.ui.board_layout import render_action_prompt

# Commands that are not game actions
TIP = "tip"
UNDO = "undo"
QUIT = "quit"


class HumanPlayer(Player):
    """Human player that reads commands from the console."""

    def __init__(self, name: str, console: Console):
        super().__init__(name)
        self.console = console

    def choose_action(self, game_view: GameView,
                      valid_actions: List[ActionType]) -> Action:
        """Prompt until a game action is entered."""
        while True:
            command = self.read_command(game_view, valid_actions)
            if isinstance(command, Action):
                return command
            self.console.print("  [yellow]Only game actions are accepted here.[/yellow]")

    def read_command(self, game_view: GameView,
                     valid_actions: List[ActionType]) -> Union[Action, str]:
        """Return an Action, or one of TIP / UNDO / QUIT."""
        render_action_prompt(self.console, valid_actions)
        me = game_view.my_id
        tiles = game_view.my_hand.tiles
        while True:
            try:
                raw = self.console.input("  > ").strip().lower()
            except EOFError:
                return QUIT

            if raw == "q":
                return QUIT
            if raw == "h":
                return TIP
            if raw == "u":
                return UNDO
            if raw == "p" and ActionType.PASS in valid_actions:
                return Action(ActionType.PASS, me)
            if raw == "d" and ActionType.DRAW in valid_actions:
                return Action(ActionType.DRAW, me)
            if raw.isdigit() and ActionType.DISCARD in valid_actions:
                idx = int(raw) - 1
                if 0 <= idx < len(tiles):
                    return Action(ActionType.DISCARD, me, tile_id=tiles[idx].id)

            self.console.print("  [red]Invalid input[/red]")
