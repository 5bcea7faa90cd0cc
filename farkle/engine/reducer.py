"""
Farkle - Game Reducer

A pure state machine over GameState. Each action produces a new state value
built with dataclasses.replace; rejected actions return the input state
object unchanged so callers can detect rejection by identity.

The only outside dependency is the dice roller, injected as a callable that
maps a dice count to that many faces. Breaking that contract is a bug in the
integration, so it raises instead of being absorbed as a game event.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Callable, Sequence

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
from farkle.engine.base import (
    EMPTY_DICE,
    FARKLE_SCHEMA_VERSION,
    MAX_PLAYERS,
    NUM_DICE,
    GameSettings,
    GameState,
    PlayerState,
    get_winner,
)
from farkle.engine.events import classify_transition
from farkle.engine.scoring import score_roll, selection_score
from farkle.engine.validators import validate_player_count, validate_roll_result

logger = logging.getLogger(__name__)

DiceRoller = Callable[[int], Sequence[int]]

__all__ = [
    "DiceRoller",
    "GameReducer",
    "create_game_reducer",
    "create_initial_state",
    "get_winner",
    "pending_points",
    "roll_dice",
]


def roll_dice(count: int) -> tuple[int, ...]:
    """
    Roll the specified number of D6 dice.

    Args:
        count: Number of dice to roll

    Returns:
        Tuple of random faces
    """
    return tuple(random.randint(1, 6) for _ in range(count))


def normalize_players(names: Sequence[str]) -> tuple[PlayerState, ...]:
    """Trim names, default blanks to "Player N" and keep at most six."""
    return tuple(
        PlayerState(name=name.strip() or f"Player {seat + 1}")
        for seat, name in enumerate(list(names)[:MAX_PLAYERS])
    )


def create_initial_state(
    players: Sequence[str] = (),
    settings: GameSettings | None = None
) -> GameState:
    """
    Create a fresh game with every score at zero.

    Args:
        players: Player names; may be empty for an unseated table
        settings: Game rules (defaults when omitted)

    Returns:
        New GameState

    Raises:
        ValueError: If more than six players are supplied
    """
    if players:
        validate_player_count(len(players), MAX_PLAYERS)
    return GameState(
        players=normalize_players(players),
        settings=settings or GameSettings(),
    )


def pending_points(state: GameState) -> int:
    """Points a bank would add right now: subtotal plus clean selection."""
    return state.turn_subtotal + _selected_score(state, state.selected_indices)


def _selected_score(state: GameState, indices: Sequence[int]) -> int:
    """Score of exactly the given dice of the current roll."""
    return selection_score(state.current_dice[:len(state.last_roll)], indices)


def _current_dice(roll: tuple[int, ...]) -> tuple[int | None, ...]:
    """Spread a roll into the six dice slots."""
    return roll[:NUM_DICE] + EMPTY_DICE[len(roll):]


def _end_turn(state: GameState) -> GameState:
    """Clear the dice and subtotal and pass play to the next seat."""
    next_index = state.active_player_index
    if state.players:
        next_index = (state.active_player_index + 1) % len(state.players)

    return replace(
        state,
        active_player_index=next_index,
        current_dice=EMPTY_DICE,
        selected_indices=(),
        turn_subtotal=0,
        available_dice_count=NUM_DICE,
        last_roll=(),
        last_evaluation=None,
    )


class GameReducer:
    """
    Turn-based Farkle state machine.

    Example:
        reducer = GameReducer(roll_dice)
        state = reducer(create_initial_state(), Setup(("Ann", "Bo")))
        state = reducer(state, Roll())
    """

    def __init__(self, roller: DiceRoller = roll_dice) -> None:
        self._roller = roller

    def __call__(self, state: GameState | None, action: GameAction) -> GameState:
        return self.reduce(state, action)

    def reduce(self, state: GameState | None, action: GameAction) -> GameState:
        """
        Apply one action to a state.

        Args:
            state: Current state (None for a brand new table)
            action: Action to apply

        Returns:
            The next state, or the same object if the action was rejected

        Raises:
            ValueError: If the roller breaks its contract
        """
        if state is None:
            state = GameState()

        if isinstance(action, Setup):
            next_state = self._setup(state, action)
        elif isinstance(action, Roll):
            next_state = self._roll(state)
        elif isinstance(action, ToggleDie):
            next_state = self._toggle_die(state, action.index)
        elif isinstance(action, Bank):
            next_state = self._bank(state)
        elif isinstance(action, EndTurn):
            next_state = _end_turn(state)
        elif isinstance(action, NewGame):
            next_state = self._new_game(state)
        elif isinstance(action, LoadSaved):
            next_state = replace(action.state, schema_version=FARKLE_SCHEMA_VERSION)
        else:
            return state

        event = classify_transition(state, next_state, action)
        if event is None:
            logger.debug("Rejected %s", type(action).__name__)
        else:
            logger.debug("%s -> %s", type(action).__name__, event.name)
        return next_state

    def _setup(self, state: GameState, action: Setup) -> GameState:
        if not 1 <= len(action.players) <= MAX_PLAYERS:
            return state
        return GameState(players=normalize_players(action.players), settings=state.settings)

    def _roll(self, state: GameState) -> GameState:
        if not state.players:
            return state

        working = state
        if state.has_roll:
            points = _selected_score(state, state.selected_indices)
            if points <= 0:
                return state
            working = replace(
                state,
                turn_subtotal=state.turn_subtotal + points,
                selected_indices=(),
            )

        dice_to_roll = working.available_dice_count or NUM_DICE
        roll = validate_roll_result(self._roller(dice_to_roll), dice_to_roll)
        evaluation = score_roll(roll)

        rolled = replace(
            working,
            current_dice=_current_dice(roll),
            selected_indices=(),
            last_roll=roll,
            last_evaluation=evaluation,
            available_dice_count=dice_to_roll,
        )

        if evaluation.farkle:
            logger.info(
                "Farkle for %s on %s, %d points lost",
                rolled.active_player.name, roll, rolled.turn_subtotal,
            )
            return _end_turn(replace(rolled, turn_subtotal=0))

        return rolled

    def _toggle_die(self, state: GameState, index: int) -> GameState:
        if not state.has_roll:
            return state
        if not (0 <= index < len(state.last_roll)):
            return state

        selected = set(state.selected_indices)
        selected.symmetric_difference_update({index})
        next_indices = tuple(sorted(selected))

        if not next_indices:
            return replace(
                state,
                selected_indices=(),
                available_dice_count=len(state.last_roll),
            )

        if _selected_score(state, next_indices) <= 0:
            return state

        return replace(
            state,
            selected_indices=next_indices,
            available_dice_count=len(state.last_roll) - len(next_indices),
        )

    def _bank(self, state: GameState) -> GameState:
        if not state.players:
            return state

        active = state.players[state.active_player_index]
        tentative = active.total_score + pending_points(state)
        settings = state.settings

        players = state.players
        if not settings.exact_win or tentative <= settings.win_target:
            players = tuple(
                replace(player, total_score=tentative)
                if seat == state.active_player_index else player
                for seat, player in enumerate(state.players)
            )
            logger.info("%s banked, total now %d", active.name, tentative)
        else:
            logger.info(
                "%s would overshoot %d with %d, bank refused",
                active.name, settings.win_target, tentative,
            )

        return _end_turn(replace(state, players=players))

    def _new_game(self, state: GameState) -> GameState:
        return GameState(
            players=tuple(replace(player, total_score=0) for player in state.players),
            settings=state.settings,
        )


def create_game_reducer(
    roller: DiceRoller = roll_dice
) -> Callable[[GameState | None, GameAction], GameState]:
    """Build a reduce(state, action) function bound to a dice roller."""
    return GameReducer(roller).reduce
