"""
Farkle - Scoring Engine

Finds the best way to score a roll of up to six dice. Every legal
combination of the still-available dice is tried recursively over a bitmask
of die indices (at most 64 masks), memoized per call.

Scoring Rules:
    - Single 1: 100 points
    - Single 5: 50 points
    - Three 1s: 1,000 points
    - Three of X (2-6): X × 100 points
    - 1-2-3-4-5-6 (Straight): 1,500 points
    - Three pairs: 1,500 points
    - Four of a kind + a pair: 1,500 points
    - Two triplets: 2,500 points

The six-dice combinations only apply when all six dice are available.
"""

from typing import NamedTuple, Sequence

from farkle.engine.base import NUM_DICE, ScoreEvaluation, ScoreLine
from farkle.engine.validators import validate_dice_values


class _Path(NamedTuple):
    """A partial solution: total points, dice used and lines applied."""
    points: int
    used_indices: tuple[int, ...]
    lines: tuple[ScoreLine, ...]


_EMPTY_PATH = _Path(points=0, used_indices=(), lines=())


class ScoringEngine:
    """
    Stateless optimal scorer for six-sided Farkle dice.

    All methods are class methods operating on immutable data.
    """

    # Scoring values
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50
    THREE_ONES_POINTS = 1000
    STRAIGHT_POINTS = 1500
    THREE_PAIRS_POINTS = 1500
    TWO_TRIPLETS_POINTS = 2500
    FOUR_AND_PAIR_POINTS = 1500

    @classmethod
    def score_roll(cls, dice: Sequence[int]) -> ScoreEvaluation:
        """
        Calculate the best score for a roll.

        Ties on points are broken by using more dice, then by the
        lexicographically smaller sorted index sequence.

        Args:
            dice: Between 1 and 6 face values

        Returns:
            ScoreEvaluation describing the best way to score the roll

        Raises:
            ValueError: If the dice are malformed
        """
        values = validate_dice_values(dice, min_count=1, max_count=NUM_DICE)
        memo: dict[int, _Path] = {}

        def solve(mask: int) -> _Path:
            if mask in memo:
                return memo[mask]

            best = _EMPTY_PATH
            for move in cls._collect_moves(values, mask):
                move_mask = 0
                for index in move.used_indices:
                    move_mask |= 1 << index
                rest = solve(mask & ~move_mask)
                candidate = _Path(
                    points=move.points + rest.points,
                    used_indices=move.used_indices + rest.used_indices,
                    lines=(move,) + rest.lines,
                )
                if cls._is_better(candidate, best):
                    best = candidate

            memo[mask] = best
            return best

        best = solve((1 << len(values)) - 1)
        used = tuple(sorted(set(best.used_indices)))

        return ScoreEvaluation(
            best_points=best.points,
            best_used_indices=used,
            lines=best.lines,
            farkle=best.points == 0,
            hot_dice=len(used) == len(values),
        )

    @classmethod
    def selection_score(
        cls,
        dice: Sequence[int | None],
        indices: Sequence[int]
    ) -> int:
        """
        Score exactly the dice at the given indices.

        The selected dice are scored as a roll of their own. A selection
        only counts if every selected die is consumed by the best
        combination; otherwise it is worth nothing.

        Args:
            dice: Current dice, possibly with empty (None) slots
            indices: Indices of the selected dice

        Returns:
            Points for the selection, or 0 if it does not cleanly score
        """
        if not indices:
            return 0

        values: list[int] = []
        for index in indices:
            if not (0 <= index < len(dice)):
                return 0
            face = dice[index]
            if face is None:
                return 0
            values.append(face)

        evaluation = cls.score_roll(values)
        if len(evaluation.best_used_indices) != len(indices):
            return 0
        return evaluation.best_points

    @classmethod
    def _collect_moves(
        cls,
        values: tuple[int, ...],
        mask: int
    ) -> list[ScoreLine]:
        """List every combination available to the dice set in mask."""
        by_face: dict[int, list[int]] = {}
        for index, face in enumerate(values):
            if mask & (1 << index):
                by_face.setdefault(face, []).append(index)

        moves: list[ScoreLine] = []

        # Singles: 1s and 5s
        for face, indices in by_face.items():
            if face not in (1, 5):
                continue
            points = cls.SINGLE_ONE_POINTS if face == 1 else cls.SINGLE_FIVE_POINTS
            for index in indices:
                moves.append(ScoreLine(points=points, label=f"Single {face}", used_indices=(index,)))

        # Three of a kind
        for face, indices in by_face.items():
            if len(indices) < 3:
                continue
            points = cls.THREE_ONES_POINTS if face == 1 else face * 100
            moves.append(ScoreLine(points=points, label=f"Three {face}s", used_indices=tuple(indices[:3])))

        if sum(len(indices) for indices in by_face.values()) == NUM_DICE:
            moves.extend(cls._six_dice_moves(by_face))

        return moves

    @classmethod
    def _six_dice_moves(cls, by_face: dict[int, list[int]]) -> list[ScoreLine]:
        """
        Check the combinations that need all six dice.

        The shape of the face counts matches at most one of them.
        """
        counts = sorted(len(indices) for indices in by_face.values())
        all_indices = tuple(sorted(i for indices in by_face.values() for i in indices))

        if len(by_face) == 6:
            label, points = "Straight (1-6)", cls.STRAIGHT_POINTS
        elif counts == [2, 2, 2]:
            label, points = "Three pairs", cls.THREE_PAIRS_POINTS
        elif counts == [3, 3]:
            label, points = "Two triplets", cls.TWO_TRIPLETS_POINTS
        elif counts == [2, 4]:
            label, points = "Four of a kind + a pair", cls.FOUR_AND_PAIR_POINTS
        else:
            return []

        return [ScoreLine(points=points, label=label, used_indices=all_indices)]

    @staticmethod
    def _is_better(candidate: _Path, best: _Path) -> bool:
        """Returns True if candidate should replace best."""
        if candidate.points != best.points:
            return candidate.points > best.points
        if len(candidate.used_indices) != len(best.used_indices):
            return len(candidate.used_indices) > len(best.used_indices)
        candidate_sorted = sorted(candidate.used_indices)
        best_sorted = sorted(best.used_indices)
        if candidate_sorted != best_sorted:
            return candidate_sorted < best_sorted
        # Full tie: the later path wins
        return True


def score_roll(dice: Sequence[int]) -> ScoreEvaluation:
    """Calculate the best score for a roll. See ScoringEngine.score_roll."""
    return ScoringEngine.score_roll(dice)


def selection_score(dice: Sequence[int | None], indices: Sequence[int]) -> int:
    """Score exactly the selected dice. See ScoringEngine.selection_score."""
    return ScoringEngine.selection_score(dice, indices)
