"""Board layout rendering using Rich."""

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hkmahjong.engine.action import ActionType
from hkmahjong.engine.game import GameState, last_discard
from hkmahjong.rules.scoring import ScoreResult
from hkmahjong.ui.tile_display import format_hand_with_indices, tiles_to_rich_text

ACTION_LABELS = {
    ActionType.DRAW: "[d] draw",
    ActionType.DISCARD: "[1-14] discard",
    ActionType.PASS: "[p] pass",
}


def render_board(console: Console, state: GameState, my_seat: int = 0):
    """Render the table from one seat's point of view."""
    header = Text()
    header.append(f"  Round {state.round}  Round wind: {state.round_wind.kanji}")
    header.append(f"\n  Wall: {len(state.wall)} tiles  Phase: {state.phase.value}")
    console.print(Panel(header, title="[bold]Hong Kong Mahjong[/bold]", border_style="cyan"))

    highlight = last_discard(state)
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
    table.add_column("Seat")
    table.add_column("Player")
    table.add_column("Tiles", justify="right")
    table.add_column("Discards")

    for seat, player in enumerate(state.players):
        marker = "▶ " if player.id == state.current_player else "  "
        name = Text(f"{marker}{player.name}")
        if seat == my_seat:
            name.stylize("bold cyan")
        if player.is_dealer:
            name.append(" (dealer)", style="dim")
        table.add_row(
            player.wind.kanji,
            name,
            str(len(player.hand.tiles)),
            tiles_to_rich_text(state.discards[seat],
                               highlight_id=highlight.id if highlight else None),
        )
    console.print(table)
    console.print("─" * 60, style="dim")

    me = state.players[my_seat]
    console.print(f"  {me.name}'s hand:")
    console.print(format_hand_with_indices(me.hand.tiles))
    if me.hand.melds:
        for meld in me.hand.melds:
            console.print(tiles_to_rich_text(meld.tiles))


def render_action_prompt(console: Console, actions: List[ActionType]):
    labels = [ACTION_LABELS[a] for a in actions if a in ACTION_LABELS]
    # Plain Text so the bracketed keys are not read as markup
    console.print(Text(f"  Actions: {'  '.join(labels)}  [h] tip  [u] undo  [q] quit"))


def render_score(console: Console, player_name: str, result: ScoreResult):
    """Display a fan breakdown."""
    table = Table(title=f"{player_name}", show_header=False, box=None)
    for line in result.description:
        table.add_row(line)
    table.add_row(Text(f"{result.fan} fan  {result.points} points", style="bold"))
    console.print(Panel(table, border_style="green"))


def render_tip(console: Console, tip: str):
    console.print(Panel(Text(tip), title="[bold]Tip[/bold]", border_style="yellow"))
