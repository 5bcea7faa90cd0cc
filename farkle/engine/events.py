"""
Farkle - Game Event Definitions

Event types describing what a reducer step did, derived by comparing the
state before and after an action. Outer layers use them to drive sounds,
notifications or broadcasts; the reducer uses them for logging.
"""

from enum import Enum, auto

from farkle.engine.actions import (
    Bank,
    EndTurn,
    GameAction,
    LoadSaved,
    NewGame,
    Roll,
    Setup,
    ToggleDie,
)
from farkle.engine.base import GameState, get_winner


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    DICE_ROLLED = auto()
    DICE_HELD = auto()
    TURN_BANKED = auto()
    PLAYER_BUST = auto()
    TURN_ADVANCED = auto()
    GAME_WON = auto()
    GAME_RESET = auto()
    STATE_LOADED = auto()
    STATE_UPDATED = auto()


_SIMPLE_EVENT_MAP: dict[type, GameEvent] = {
    Setup: GameEvent.GAME_STARTED,
    ToggleDie: GameEvent.DICE_HELD,
    EndTurn: GameEvent.TURN_ADVANCED,
    NewGame: GameEvent.GAME_RESET,
    LoadSaved: GameEvent.STATE_LOADED,
}


def classify_transition(
    previous: GameState, current: GameState, action: GameAction
) -> GameEvent | None:
    """
    Determine the game event produced by one reducer step.

    Args:
        previous: State before the action
        current: State returned by the reducer
        action: The dispatched action

    Returns:
        The matching GameEvent, or None if the action was rejected
    """
    if current is previous:
        return None

    if isinstance(action, Roll):
        # A farkle ends the turn immediately, leaving no roll behind
        if not current.has_roll:
            return GameEvent.PLAYER_BUST
        return GameEvent.DICE_ROLLED

    if isinstance(action, Bank):
        if get_winner(current) is not None and get_winner(previous) is None:
            return GameEvent.GAME_WON
        return GameEvent.TURN_BANKED

    return _SIMPLE_EVENT_MAP.get(type(action), GameEvent.STATE_UPDATED)
