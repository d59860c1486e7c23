#!/usr/bin/env python3
"""Hong Kong Mahjong - Terminal CLI Game"""

import argparse

from rich.console import Console
from rich.panel import Panel

from hkmahjong.engine.action import ActionType
from hkmahjong.engine.event import EventBus, EventType, GameEvent
from hkmahjong.engine.game import GameConfig, Phase
from hkmahjong.engine.game_logger import GameLogger
from hkmahjong.engine.session import GameSession
from hkmahjong.player.base import build_game_view
from hkmahjong.player.human import HumanPlayer, QUIT, TIP, UNDO
from hkmahjong.player.random_bot import RandomBot
from hkmahjong.rules.scoring import calculate_score
from hkmahjong.ui.board_layout import render_board, render_score, render_tip
from hkmahjong.ui.tile_display import tile_to_rich_text

console = Console()


def offline_tip(description: str) -> str:
    """Stand-in advice provider used when no remote provider is wired up."""
    if "drawing phase" in description:
        return "Draw first, then look for tiles that do not belong to any pair or run."
    return ("Discard isolated honors and terminals early; keep tiles that "
            "can still become runs or pungs.")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="shuffle seed")
    parser.add_argument("--name", default="You", help="your display name")
    parser.add_argument("--log-dir", default=None, help="write a JSON game log here")
    return parser.parse_args(argv)


def create_session(args):
    config = GameConfig(
        player_names=[args.name, "Bot 1", "Bot 2", "Bot 3"],
        seed=args.seed,
        log_dir=args.log_dir,
    )
    event_bus = EventBus()

    def on_discard(event: GameEvent):
        seat = event.data["player"]
        if seat != config.human_seat:
            text = tile_to_rich_text(event.data["tile"])
            console.print(f"  {config.player_names[seat]} discards ", text)

    def on_rejected(event: GameEvent):
        console.print(f"  [red]{event.data['error']}[/red]")

    event_bus.subscribe(EventType.DISCARD, on_discard)
    event_bus.subscribe(EventType.ACTION_REJECTED, on_rejected)

    logger = None
    if config.log_dir:
        logger = GameLogger(config.player_names, {
            "seed": config.seed,
            "human_seat": config.human_seat,
        }, log_dir=config.log_dir)
        logger.subscribe_events(event_bus)

    return GameSession(config, event_bus), logger


def play_game(args):
    """Play one hand until the wall runs out or the player quits."""
    session, logger = create_session(args)
    human_seat = session.config.human_seat
    human = HumanPlayer(args.name, console)
    bots = {
        seat: RandomBot(name, seed=None if args.seed is None else args.seed + seat)
        for seat, name in enumerate(session.config.player_names)
        if seat != human_seat
    }

    session.start()
    console.print("\n  [bold]Game start![/bold]")

    while True:
        state = session.state
        valid = session.valid_actions
        if state.phase == Phase.DRAWING and ActionType.DRAW not in valid:
            console.print(Panel("The wall is empty. Exhaustive draw.", border_style="cyan"))
            break

        seat = state.seat_of(state.current_player)
        view = build_game_view(state, seat)

        if seat in bots:
            session.submit(bots[seat].choose_action(view, valid))
            continue

        render_board(console, state, my_seat=human_seat)
        me = state.players[human_seat]
        if me.hand.can_win and state.phase == Phase.DISCARDING:
            render_score(console, "Hand value if complete",
                         calculate_score(me.hand, state.round_wind, me.wind))

        command = human.read_command(view, valid)
        if command == QUIT:
            break
        if command == TIP:
            render_tip(console, session.teaching_tip(offline_tip))
        elif command == UNDO:
            _undo_to_human_turn(session, human_seat)
        else:
            session.submit(command)

    if logger is not None:
        console.print(f"  [dim]Log saved: {logger.save()}[/dim]")


def _undo_to_human_turn(session: GameSession, human_seat: int):
    """Roll back bot moves too, until it is the human's turn again."""
    try:
        session.undo()
        while session.state.seat_of(session.state.current_player) != human_seat:
            session.undo()
    except IndexError:
        console.print("  [yellow]Nothing to undo[/yellow]")


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    try:
        play_game(args)
    except KeyboardInterrupt:
        console.print("\n\n  [dim]Bye[/dim]\n")


if __name__ == "__main__":
    main()
