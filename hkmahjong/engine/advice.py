"""Teaching tips from an external advice provider.

The engine only writes a plain-text description of the table; the
provider is any callable that turns that text into a tip string.
"""

from typing import Callable, Optional

from hkmahjong.engine.game import GameState

AdviceProvider = Callable[[str], str]

FALLBACK_TIP = (
    "Focus on completing simple sets like pungs (3 identical tiles) and "
    "chis (3 consecutive tiles of the same suit). Keep your hand organized "
    "and watch what other players discard!"
)


def hand_context(state: GameState, seat: int = 0) -> str:
    return f"Player has {len(state.players[seat].hand.tiles)} tiles in hand."


def describe_situation(state: GameState, context: Optional[str] = None) -> str:
    """One-paragraph description of the table for the advice provider."""
    text = (
        f"Currently in {state.phase.value} phase with {len(state.players)} players. "
        f"Wall has {len(state.wall)} tiles remaining. "
        f"Current player: {state.current_player}."
    )
    if context:
        text += f" Additional context: {context}"
    return text


def request_teaching_tip(state: GameState, provider: AdviceProvider,
                         context: Optional[str] = None) -> str:
    """Ask the provider for a tip; fall back to a fixed tip if it fails."""
    if context is None:
        context = hand_context(state)
    try:
        tip = provider(describe_situation(state, context))
    except Exception:
        return FALLBACK_TIP
    if not isinstance(tip, str) or not tip.strip():
        return FALLBACK_TIP
    return tip
