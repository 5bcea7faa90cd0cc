"""
Farkle - Saved Game Manager

CRUD operations for the `saved_games` table. Each row holds one game's
state as JSON, keyed by a caller-chosen id.
"""

import logging

from supabase import Client

from farkle.config.settings import get_settings
from farkle.database.models import SavedGame, SavedGameRecord
from farkle.engine.base import GameState

logger = logging.getLogger(__name__)


class SavedGameManager:
    """Manages saved game states in Supabase."""

    def __init__(self, client: Client, table_name: str | None = None) -> None:
        self.client = client
        self.table = client.table(table_name or get_settings().saved_games_table)

    def save(self, game_id: str, state: GameState) -> SavedGameRecord:
        """Insert or overwrite the saved state for a game."""
        snapshot = SavedGame.from_state(state)
        data = (
            self.table
            .upsert({
                "id": game_id,
                "state": snapshot.model_dump(mode="json"),
            })
            .execute()
        )
        logger.info("Saved game %s", game_id)
        return SavedGameRecord.model_validate(data.data[0])

    def get(self, game_id: str) -> GameState | None:
        """Load a saved state, ready to dispatch through LoadSaved."""
        data = (
            self.table
            .select("*")
            .eq("id", game_id)
            .execute()
        )
        if not data.data:
            return None
        record = SavedGameRecord.model_validate(data.data[0])
        return record.state.to_state()

    def delete(self, game_id: str) -> None:
        """Delete a saved game."""
        self.table.delete().eq("id", game_id).execute()
        logger.info("Deleted saved game %s", game_id)
