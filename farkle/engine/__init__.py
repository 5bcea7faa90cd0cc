"""
Farkle Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles optimal scoring, bust detection, hot dice and turn sequencing.
"""

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
    DEFAULT_WIN_TARGET,
    FARKLE_SCHEMA_VERSION,
    GameSettings,
    GameState,
    PlayerState,
    ScoreEvaluation,
    ScoreLine,
    get_winner,
)
from farkle.engine.events import GameEvent, classify_transition
from farkle.engine.reducer import (
    DiceRoller,
    GameReducer,
    create_game_reducer,
    create_initial_state,
    pending_points,
    roll_dice,
)
from farkle.engine.scoring import ScoringEngine, score_roll, selection_score

__all__ = [
    # Data Classes
    "GameSettings",
    "GameState",
    "PlayerState",
    "ScoreEvaluation",
    "ScoreLine",
    # Actions
    "Bank",
    "EndTurn",
    "GameAction",
    "LoadSaved",
    "NewGame",
    "Roll",
    "Setup",
    "ToggleDie",
    # Events
    "GameEvent",
    "classify_transition",
    # Engines
    "DiceRoller",
    "GameReducer",
    "ScoringEngine",
    "create_game_reducer",
    "create_initial_state",
    "get_winner",
    "pending_points",
    "roll_dice",
    "score_roll",
    "selection_score",
    # Constants
    "DEFAULT_WIN_TARGET",
    "FARKLE_SCHEMA_VERSION",
]
