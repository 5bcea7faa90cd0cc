"""
Farkle - Game Engine Base Classes

This module defines the foundational data structures used throughout the
game engine. All classes are immutable (frozen dataclasses) so that every
state transition produces a new value and never mutates an existing one.
"""

from dataclasses import dataclass, field

from farkle.engine.validators import validate_score, validate_target_score


FARKLE_SCHEMA_VERSION = 1
DEFAULT_WIN_TARGET = 10000
NUM_DICE = 6
MAX_PLAYERS = 6
EMPTY_DICE: tuple[int | None, ...] = (None,) * NUM_DICE


@dataclass(frozen=True)
class ScoreLine:
    """
    A single scoring combination applied within one evaluation.

    Attributes:
        points: Points awarded for this combination
        label: Human-readable description (e.g. "Three 4s")
        used_indices: Die indices consumed by this combination
    """
    points: int
    label: str
    used_indices: tuple[int, ...]


@dataclass(frozen=True)
class ScoreEvaluation:
    """
    Result of scoring one roll.

    Attributes:
        best_points: Maximum achievable total
        best_used_indices: Indices used to reach it (sorted, unique)
        lines: Combinations composing the total, in selection order
        farkle: True when nothing scores
        hot_dice: True when every rolled die is used
    """
    best_points: int
    best_used_indices: tuple[int, ...]
    lines: tuple[ScoreLine, ...]
    farkle: bool
    hot_dice: bool

    def __str__(self) -> str:
        if self.farkle:
            return "FARKLE! No scoring dice."
        lines = [f"Total: {self.best_points} points"]
        for line in self.lines:
            lines.append(f"  - {line.label}: {line.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class PlayerState:
    """A seated player and their banked score."""
    name: str
    total_score: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Player name cannot be empty.")
        validate_score(self.total_score)


@dataclass(frozen=True)
class GameSettings:
    """
    Rules that can vary between games.

    Attributes:
        win_target: Score needed to win
        exact_win: If True, a bank that would overshoot the target is refused
    """
    win_target: int = DEFAULT_WIN_TARGET
    exact_win: bool = False

    def __post_init__(self) -> None:
        validate_target_score(self.win_target)


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a Farkle game.

    Attributes:
        players: Seated players in turn order
        active_player_index: Seat whose turn it is
        current_dice: Six slots holding rolled faces, None when unrolled
        selected_indices: Indices of the dice picked from the last roll
        turn_subtotal: Points committed this turn but not yet banked
        available_dice_count: Dice that the next roll will throw (0 = hot dice)
        last_roll: Faces of the most recent roll
        last_evaluation: Score evaluation of the most recent roll
        settings: Rules for this game
        schema_version: Persisted-state compatibility tag
    """
    players: tuple[PlayerState, ...] = field(default_factory=tuple)
    active_player_index: int = 0
    current_dice: tuple[int | None, ...] = EMPTY_DICE
    selected_indices: tuple[int, ...] = field(default_factory=tuple)
    turn_subtotal: int = 0
    available_dice_count: int = NUM_DICE
    last_roll: tuple[int, ...] = field(default_factory=tuple)
    last_evaluation: ScoreEvaluation | None = None
    settings: GameSettings = field(default_factory=GameSettings)
    schema_version: int = FARKLE_SCHEMA_VERSION

    @property
    def active_player(self) -> PlayerState | None:
        """The player whose turn it is, or None before setup."""
        if not self.players:
            return None
        return self.players[self.active_player_index]

    @property
    def has_roll(self) -> bool:
        """Returns True while a roll is awaiting selection."""
        return len(self.last_roll) > 0

    @property
    def selected_values(self) -> tuple[int, ...]:
        """Faces of the currently selected dice."""
        return tuple(self.last_roll[i] for i in self.selected_indices)


def get_winner(state: GameState) -> PlayerState | None:
    """
    Find the first player, in seat order, who has reached the win target.

    With exact_win the target must be hit exactly; otherwise reaching or
    passing it wins.

    Args:
        state: Game state to inspect

    Returns:
        The winning player, or None if nobody has won yet
    """
    target = state.settings.win_target
    for player in state.players:
        if state.settings.exact_win:
            if player.total_score == target:
                return player
        elif player.total_score >= target:
            return player
    return None
