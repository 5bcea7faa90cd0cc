"""
Farkle - Game Actions

Immutable action values dispatched to the game reducer.
"""

from dataclasses import dataclass, field
from typing import Union

from farkle.engine.base import GameState


@dataclass(frozen=True)
class Setup:
    """Seat a new table of players. Names are trimmed; blanks get defaults."""
    players: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence of names but store a tuple
        object.__setattr__(self, "players", tuple(self.players))


@dataclass(frozen=True)
class Roll:
    """Commit the current selection and roll the available dice."""


@dataclass(frozen=True)
class ToggleDie:
    """Add or remove one die of the current roll from the selection."""
    index: int


@dataclass(frozen=True)
class Bank:
    """Add the turn subtotal and pending selection to the active player."""


@dataclass(frozen=True)
class EndTurn:
    """Give up the turn without scoring."""


@dataclass(frozen=True)
class NewGame:
    """Reset every score while keeping the players and settings."""


@dataclass(frozen=True)
class LoadSaved:
    """Replace the whole state with a previously saved one."""
    state: GameState


GameAction = Union[Setup, Roll, ToggleDie, Bank, EndTurn, NewGame, LoadSaved]
