"""
Farkle Database Layer.

Supabase integration for persisting saved games.
"""

from farkle.database.client import get_supabase_client
from farkle.database.models import SavedGame, SavedGameRecord
from farkle.database.saved_games import SavedGameManager

__all__ = [
    "get_supabase_client",
    "SavedGame",
    "SavedGameManager",
    "SavedGameRecord",
]
