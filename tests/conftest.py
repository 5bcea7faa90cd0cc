"""
Farkle - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from collections import deque
from typing import Sequence

import pytest

from farkle.engine.actions import Setup
from farkle.engine.base import GameSettings, GameState, PlayerState
from farkle.engine.reducer import GameReducer, create_initial_state


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_rolls() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Common roll patterns with expected best scores.

    Returns:
        Dict mapping name to (dice_values, expected_points, description)
    """
    return {
        # Singles
        "single_one": ((1,), 100, "Single 1"),
        "single_five": ((5,), 50, "Single 5"),
        "two_ones": ((1, 1), 200, "Two 1s"),
        "one_and_five": ((1, 5), 150, "One 1 and one 5"),

        # Three of a kind
        "three_ones": ((1, 1, 1), 1000, "Three 1s"),
        "three_twos": ((2, 2, 2), 200, "Three 2s"),
        "three_sixes": ((6, 6, 6), 600, "Three 6s"),

        # No multipliers beyond three
        "four_twos": ((2, 2, 2, 2), 200, "Four 2s score as a triple"),
        "four_ones": ((1, 1, 1, 1), 1100, "Three 1s + single 1"),

        # Six-dice specials
        "straight": ((1, 2, 3, 4, 5, 6), 1500, "Straight"),
        "straight_shuffled": ((6, 4, 2, 5, 3, 1), 1500, "Straight shuffled"),
        "three_pairs": ((2, 2, 3, 3, 4, 4), 1500, "Three pairs"),
        "two_triplets": ((2, 2, 2, 3, 3, 3), 2500, "Two triplets"),
        "four_and_pair": ((4, 4, 4, 4, 6, 6), 1500, "Four of a kind + a pair"),

        # Mixed combinations
        "three_ones_plus_five": ((1, 1, 1, 5, 2, 4), 1050, "Three 1s + single 5"),
        "three_fours_plus_one": ((4, 4, 4, 1), 500, "Three 4s + single 1"),
        "bust_roll": ((2, 3, 4, 6, 2, 3), 0, "Bust roll"),
    }


@pytest.fixture
def bust_rolls() -> list[tuple[int, ...]]:
    """Rolls that should result in a farkle."""
    return [
        (2,),
        (3,),
        (4,),
        (6,),
        (2, 3),
        (4, 6),
        (2, 3, 4, 6),
        (2, 2, 3, 3, 4),
        (2, 3, 4, 6, 2, 3),
    ]


@pytest.fixture
def hot_dice_rolls() -> list[tuple[int, ...]]:
    """Rolls where every die scores."""
    return [
        (1, 2, 3, 4, 5, 6),
        (1, 1, 1, 5, 5, 5),
        (2, 2, 3, 3, 6, 6),
        (1, 5, 1, 5, 1, 5),
        (5,),
        (1, 5),
    ]


# =============================================================================
# REDUCER FIXTURES
# =============================================================================

class ScriptedRoller:
    """Dice roller that replays queued rolls and records each request."""

    def __init__(self, *rolls: Sequence[int]) -> None:
        self.rolls = deque(tuple(roll) for roll in rolls)
        self.requests: list[int] = []

    def queue(self, *rolls: Sequence[int]) -> None:
        self.rolls.extend(tuple(roll) for roll in rolls)

    def __call__(self, count: int) -> tuple[int, ...]:
        self.requests.append(count)
        return self.rolls.popleft()


@pytest.fixture
def roller() -> ScriptedRoller:
    return ScriptedRoller()


@pytest.fixture
def reducer(roller: ScriptedRoller) -> GameReducer:
    return GameReducer(roller)


@pytest.fixture
def two_player_state(reducer: GameReducer) -> GameState:
    """A fresh game for Ann and Bo with default settings."""
    return reducer(create_initial_state(), Setup(("Ann", "Bo")))


@pytest.fixture
def exact_win_state() -> GameState:
    """Ann at 9,900 of an exact 10,000 target, Ann to play."""
    state = create_initial_state(("Ann", "Bo"), GameSettings(win_target=10000, exact_win=True))
    players = (PlayerState(name="Ann", total_score=9900), state.players[1])
    return GameState(players=players, settings=state.settings)
