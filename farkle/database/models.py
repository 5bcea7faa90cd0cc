"""
Farkle - Database Models

Pydantic models for persisted games. SavedGame mirrors the engine's
GameState field for field so it can be stored as JSON and loaded back
through the LoadSaved action.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from farkle.engine.base import (
    DEFAULT_WIN_TARGET,
    FARKLE_SCHEMA_VERSION,
    NUM_DICE,
    GameSettings,
    GameState,
    PlayerState,
    ScoreEvaluation,
    ScoreLine,
)


class SavedScoreLine(BaseModel):
    points: int
    label: str
    used_indices: list[int] = Field(default_factory=list)


class SavedEvaluation(BaseModel):
    best_points: int = 0
    best_used_indices: list[int] = Field(default_factory=list)
    lines: list[SavedScoreLine] = Field(default_factory=list)
    farkle: bool = True
    hot_dice: bool = False

    def to_evaluation(self) -> ScoreEvaluation:
        return ScoreEvaluation(
            best_points=self.best_points,
            best_used_indices=tuple(self.best_used_indices),
            lines=tuple(
                ScoreLine(points=line.points, label=line.label, used_indices=tuple(line.used_indices))
                for line in self.lines
            ),
            farkle=self.farkle,
            hot_dice=self.hot_dice,
        )


class SavedPlayer(BaseModel):
    name: str = Field(min_length=1)
    total_score: int = Field(default=0, ge=0)


class SavedSettings(BaseModel):
    win_target: int = Field(default=DEFAULT_WIN_TARGET, gt=0)
    exact_win: bool = False


class SavedGame(BaseModel):
    """Serializable snapshot of a GameState."""

    players: list[SavedPlayer] = Field(default_factory=list, max_length=6)
    active_player_index: int = Field(default=0, ge=0)
    current_dice: list[int | None] = Field(
        default_factory=lambda: [None] * NUM_DICE,
        min_length=NUM_DICE,
        max_length=NUM_DICE,
    )
    selected_indices: list[int] = Field(default_factory=list)
    turn_subtotal: int = Field(default=0, ge=0)
    available_dice_count: int = Field(default=NUM_DICE, ge=0, le=NUM_DICE)
    last_roll: list[int] = Field(default_factory=list, max_length=NUM_DICE)
    last_evaluation: SavedEvaluation | None = None
    settings: SavedSettings = Field(default_factory=SavedSettings)
    schema_version: int = FARKLE_SCHEMA_VERSION

    @classmethod
    def from_state(cls, state: GameState) -> "SavedGame":
        """Snapshot an engine state."""
        evaluation = None
        if state.last_evaluation is not None:
            evaluation = SavedEvaluation(
                best_points=state.last_evaluation.best_points,
                best_used_indices=list(state.last_evaluation.best_used_indices),
                lines=[
                    SavedScoreLine(points=line.points, label=line.label, used_indices=list(line.used_indices))
                    for line in state.last_evaluation.lines
                ],
                farkle=state.last_evaluation.farkle,
                hot_dice=state.last_evaluation.hot_dice,
            )

        return cls(
            players=[SavedPlayer(name=p.name, total_score=p.total_score) for p in state.players],
            active_player_index=state.active_player_index,
            current_dice=list(state.current_dice),
            selected_indices=list(state.selected_indices),
            turn_subtotal=state.turn_subtotal,
            available_dice_count=state.available_dice_count,
            last_roll=list(state.last_roll),
            last_evaluation=evaluation,
            settings=SavedSettings(
                win_target=state.settings.win_target,
                exact_win=state.settings.exact_win,
            ),
            schema_version=state.schema_version,
        )

    def to_state(self) -> GameState:
        """
        Rebuild the engine state.

        The stored schema_version is kept as is; the reducer stamps the
        current version when the state is loaded.
        """
        return GameState(
            players=tuple(PlayerState(name=p.name, total_score=p.total_score) for p in self.players),
            active_player_index=self.active_player_index,
            current_dice=tuple(self.current_dice),
            selected_indices=tuple(self.selected_indices),
            turn_subtotal=self.turn_subtotal,
            available_dice_count=self.available_dice_count,
            last_roll=tuple(self.last_roll),
            last_evaluation=self.last_evaluation.to_evaluation() if self.last_evaluation else None,
            settings=GameSettings(
                win_target=self.settings.win_target,
                exact_win=self.settings.exact_win,
            ),
            schema_version=self.schema_version,
        )


class SavedGameRecord(BaseModel):
    """Mirrors the `saved_games` table."""

    id: str
    state: SavedGame
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
