"""
Farkle - Scoring Engine Tests

Tests for the optimal combination search over a roll.
"""

from itertools import combinations, product

import pytest
from farkle.engine.scoring import ScoringEngine, _Path, score_roll, selection_score


class TestSingleDieScoring:
    """Tests for single die scoring (1s and 5s)."""

    def test_single_one_scores_100(self):
        result = score_roll((1,))
        assert result.best_points == 100
        assert result.lines[0].label == "Single 1"

    def test_single_five_scores_50(self):
        result = score_roll((5,))
        assert result.best_points == 50
        assert result.lines[0].label == "Single 5"

    def test_one_and_five_score_150(self):
        result = score_roll((1, 5))
        assert result.best_points == 150
        assert result.best_used_indices == (0, 1)

    @pytest.mark.parametrize("value", [2, 3, 4, 6])
    def test_non_scoring_single_is_farkle(self, value: int):
        result = score_roll((value,))
        assert result.best_points == 0
        assert result.farkle


class TestThreeOfAKind:
    """Tests for three of a kind scoring."""

    def test_three_ones_scores_1000(self):
        result = score_roll((1, 1, 1))
        assert result.best_points == 1000
        assert [line.label for line in result.lines] == ["Three 1s"]

    @pytest.mark.parametrize("value,expected", [
        (2, 200),
        (3, 300),
        (4, 400),
        (5, 500),
        (6, 600),
    ])
    def test_three_of_kind_scores_value_times_100(self, value: int, expected: int):
        result = score_roll((value, value, value))
        assert result.best_points == expected
        assert result.lines[0].label == f"Three {value}s"

    def test_fourth_die_is_left_over(self):
        result = score_roll((3, 3, 3, 3))
        assert result.best_points == 300
        assert result.best_used_indices == (0, 1, 2)
        assert not result.hot_dice

    def test_triple_uses_first_three_matching_dice(self):
        result = score_roll((6, 2, 6, 6, 6))
        assert result.best_used_indices == (0, 2, 3)


class TestSixDiceSpecials:
    """Tests for combinations that need all six dice."""

    def test_straight(self):
        result = score_roll((1, 2, 3, 4, 5, 6))
        assert result.best_points == 1500
        assert result.hot_dice
        assert [line.label for line in result.lines] == ["Straight (1-6)"]
        assert result.lines[0].used_indices == (0, 1, 2, 3, 4, 5)

    def test_three_pairs(self):
        result = score_roll((2, 3, 4, 2, 3, 4))
        assert result.best_points == 1500
        assert [line.label for line in result.lines] == ["Three pairs"]

    def test_three_pairs_beats_singles(self):
        result = score_roll((1, 1, 5, 5, 6, 6))
        assert result.best_points == 1500
        assert result.hot_dice

    def test_two_triplets_beats_separate_triples(self):
        result = score_roll((1, 1, 1, 5, 5, 5))
        assert result.best_points == 2500
        assert [line.label for line in result.lines] == ["Two triplets"]

    def test_four_of_a_kind_and_pair(self):
        result = score_roll((4, 6, 4, 6, 4, 4))
        assert result.best_points == 1500
        assert [line.label for line in result.lines] == ["Four of a kind + a pair"]

    def test_four_ones_and_pair_prefers_special(self):
        # Three 1s + single 1 + two 5s = 1200 < 1500
        result = score_roll((1, 1, 1, 1, 5, 5))
        assert result.best_points == 1500

    def test_six_of_a_kind_is_two_separate_triples(self):
        # One face only, so "Two triplets" does not apply
        result = score_roll((2, 2, 2, 2, 2, 2))
        assert result.best_points == 400
        assert [line.label for line in result.lines] == ["Three 2s", "Three 2s"]
        assert result.hot_dice

    def test_specials_need_six_dice(self):
        result = score_roll((2, 2, 3, 3, 4))
        assert result.farkle


class TestBestCombination:
    """Tests for picking the optimal set of combinations."""

    def test_three_ones_plus_five(self):
        result = score_roll((1, 1, 1, 5, 2, 4))
        assert result.best_points == 1050
        assert result.best_used_indices == (0, 1, 2, 3)
        assert sorted(line.label for line in result.lines) == ["Single 5", "Three 1s"]
        assert not result.hot_dice

    def test_farkle_roll(self):
        result = score_roll((2, 3, 4, 6, 2, 3))
        assert result.farkle is True
        assert result.best_points == 0
        assert result.best_used_indices == ()
        assert result.lines == ()

    def test_lines_never_share_indices(self):
        result = score_roll((1, 1, 1, 1, 5, 3))
        used = [i for line in result.lines for i in line.used_indices]
        assert len(used) == len(set(used))
        assert sum(line.points for line in result.lines) == result.best_points

    def test_used_indices_sorted(self):
        result = score_roll((5, 3, 1))
        assert result.best_used_indices == (0, 2)

    def test_table(self, scoring_rolls):
        for name, (dice, expected, description) in scoring_rolls.items():
            assert score_roll(dice).best_points == expected, f"{name}: {description}"

    def test_bust_rolls(self, bust_rolls):
        for dice in bust_rolls:
            result = score_roll(dice)
            assert result.farkle, dice
            assert result.best_points == 0

    def test_hot_dice_rolls(self, hot_dice_rolls):
        for dice in hot_dice_rolls:
            assert score_roll(dice).hot_dice, dice


class TestTieBreak:
    """Tests for the deterministic tie-break."""

    def test_prefers_lower_indices_on_equal_score(self):
        # Any three of the four 2s give 200; the first three win
        result = score_roll((2, 2, 2, 2))
        assert result.best_used_indices == (0, 1, 2)

    def test_prefers_more_dice_on_equal_score(self):
        assert ScoringEngine._is_better(_path(100, (0, 1)), _path(100, (0,)))
        assert not ScoringEngine._is_better(_path(100, (0,)), _path(100, (0, 1)))

    def test_lexicographic_order(self):
        assert ScoringEngine._is_better(_path(100, (0, 3)), _path(100, (1, 2)))
        assert not ScoringEngine._is_better(_path(100, (1, 2)), _path(100, (0, 3)))

    def test_result_is_deterministic(self):
        first = score_roll((5, 1, 5, 3, 1, 2))
        second = score_roll((5, 1, 5, 3, 1, 2))
        assert first == second


class TestScoringProperties:
    """Invariants that must hold for every roll."""

    def test_flags_match_totals(self):
        for dice in product(range(1, 7), repeat=4):
            result = score_roll(dice)
            assert result.farkle == (result.best_points == 0)
            assert result.hot_dice == (len(result.best_used_indices) == len(dice))

    def test_supersets_never_score_worse(self):
        dice = (1, 5, 2, 2, 2, 6)
        for size in range(1, 6):
            for subset in combinations(range(6), size):
                sub_points = score_roll([dice[i] for i in subset]).best_points
                assert score_roll(dice).best_points >= sub_points


class TestSelectionScore:
    """Tests for scoring exactly the selected dice."""

    def test_clean_selection(self):
        assert selection_score((1, 2, 5, 3, 4, 6), (0, 2)) == 150

    def test_selection_with_dead_die_is_zero(self):
        assert selection_score((1, 2, 5, 3, 4, 6), (0, 1)) == 0

    def test_full_six_dice_special(self):
        assert selection_score((2, 2, 3, 3, 4, 4), (0, 1, 2, 3, 4, 5)) == 1500

    def test_partial_special_is_zero(self):
        assert selection_score((2, 2, 3, 3, 4, 4), (0, 1)) == 0

    def test_empty_selection(self):
        assert selection_score((1, 5), ()) == 0

    def test_out_of_range_index(self):
        assert selection_score((1, 5), (0, 7)) == 0

    def test_unrolled_slot(self):
        assert selection_score((1, None, None), (0, 1)) == 0


class TestInputValidation:
    """Tests for malformed input."""

    def test_empty_roll_rejected(self):
        with pytest.raises(ValueError, match="At least 1"):
            score_roll(())

    def test_seven_dice_rejected(self):
        with pytest.raises(ValueError, match="At most 6"):
            score_roll((1, 1, 1, 1, 1, 1, 1))

    @pytest.mark.parametrize("face", [0, 7, -1])
    def test_out_of_range_face_rejected(self, face: int):
        with pytest.raises(ValueError, match="between 1 and 6"):
            score_roll((1, face))

    def test_accepts_list(self):
        assert score_roll([1, 5]).best_points == 150


def _path(points: int, used: tuple[int, ...]) -> _Path:
    return _Path(points=points, used_indices=used, lines=())
