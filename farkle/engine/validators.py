"""
Farkle - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

MIN_FACE = 1
MAX_FACE = 6


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 1,
    max_count: int | None = 6
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    if not values:
        if min_count > 0:
            raise ValueError(f"At least {min_count} dice required.")
        return tuple()

    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        # bool is an int subclass but never a die face
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (MIN_FACE <= value <= MAX_FACE):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between {MIN_FACE} and {MAX_FACE}."
            )

    return values_tuple


def validate_roll_result(values: Sequence[int], requested: int) -> tuple[int, ...]:
    """
    Validate the output of an injected dice roller.

    Args:
        values: Faces returned by the roller
        requested: Number of dice that were asked for

    Returns:
        Validated faces as a tuple

    Raises:
        ValueError: If the roller broke its contract
    """
    values_tuple = tuple(values)
    if len(values_tuple) != requested:
        raise ValueError(
            f"Roller returned {len(values_tuple)} dice for requested {requested}."
        )
    return validate_dice_values(values_tuple, min_count=requested, max_count=requested)


def validate_score(score: int, allow_negative: bool = False) -> int:
    """
    Validate a score value.

    Args:
        score: Score to validate
        allow_negative: Whether negative scores are allowed

    Returns:
        Validated score

    Raises:
        ValueError: If score is invalid
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if not allow_negative and score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_player_count(count: int, max_players: int = 6) -> int:
    """
    Validate number of players.

    Args:
        count: Number of players
        max_players: Largest table size allowed

    Returns:
        Validated count

    Raises:
        ValueError: If count is not between 1 and max_players
    """
    if not isinstance(count, int):
        raise ValueError(f"Player count must be an integer, got {type(count).__name__}.")

    if not (1 <= count <= max_players):
        raise ValueError(f"Game setup requires 1-{max_players} players, got {count}.")

    return count


def validate_target_score(score: int) -> int:
    """
    Validate target score for a game.

    Args:
        score: Target score to validate

    Returns:
        Validated score

    Raises:
        ValueError: If score is not a positive integer
    """
    if not isinstance(score, int) or isinstance(score, bool):
        raise ValueError(f"Target score must be an integer, got {type(score).__name__}.")

    if score <= 0:
        raise ValueError(f"Target score must be positive, got {score}.")

    return score
