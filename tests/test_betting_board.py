"""Tests for betting board construction and winning slot determination."""

import pytest

from src.game_engine.betting_board import (
    NO_WINNING_SLOT,
    AnswerGroup,
    assign_to_slots,
    create_board,
    group_answers,
    slot_answers,
    slot_payout,
    winning_slot_index,
    winning_slot_value,
)
from src.game_engine.config import MIDDLE_SLOT_INDEX, SPECIAL_SLOT_INDEX
from src.game_engine.game_state import PlayerAnswer


# ── Helpers ──────────────────────────────────────────────────────────

def _answers(*values):
    """One answer per value, player ids p0, p1, ..."""
    return [PlayerAnswer(f"p{i}", value) for i, value in enumerate(values)]


def _groups(*values):
    return [AnswerGroup(v, (f"p{i}",)) for i, v in enumerate(values)]


def _placed(board):
    """Map of slot index -> answer value for every occupied slot."""
    return {
        slot.index: slot.answer_groups[0].answer
        for slot in board
        if slot.answer_groups
    }


# ── Grouping ─────────────────────────────────────────────────────────

class TestGroupAnswers:
    def test_groups_equal_values_and_sorts(self):
        answers = [
            PlayerAnswer("1", 100),
            PlayerAnswer("2", 50),
            PlayerAnswer("3", 100),
        ]
        assert group_answers(answers) == [
            AnswerGroup(50, ("2",)),
            AnswerGroup(100, ("1", "3")),
        ]

    def test_empty(self):
        assert group_answers([]) == []

    def test_single_answer(self):
        assert group_answers([PlayerAnswer("1", 42)]) == [AnswerGroup(42, ("1",))]

    def test_int_and_float_of_same_value_share_a_group(self):
        groups = group_answers([PlayerAnswer("a", 75), PlayerAnswer("b", 75.0)])
        assert len(groups) == 1
        assert groups[0].player_ids == ("a", "b")

    def test_every_player_in_exactly_one_group(self):
        answers = _answers(5, 3, 5, 9, 3, 1, 0)
        groups = group_answers(answers)
        ids = [pid for g in groups for pid in g.player_ids]
        assert sorted(ids) == sorted(a.player_id for a in answers)
        values = [g.answer for g in groups]
        assert values == sorted(set(values))


# ── Slot assignment ──────────────────────────────────────────────────

class TestAssignToSlots:
    def test_empty_groups_give_empty_template(self):
        board = assign_to_slots([])
        assert len(board) == 8
        assert [s.index for s in board] == list(range(8))
        assert all(s.is_empty for s in board)

    def test_template_payouts(self):
        board = assign_to_slots([])
        assert [s.payout for s in board] == [6, 5, 4, 3, 2, 3, 4, 5]
        assert [s.is_special for s in board] == [True] + [False] * 7

    def test_single_group_in_middle(self):
        assert _placed(assign_to_slots(_groups(50))) == {4: 50}

    def test_three_groups_spread_from_middle(self):
        assert _placed(assign_to_slots(_groups(10, 20, 30))) == {3: 10, 4: 20, 5: 30}

    def test_seven_groups_fill_slots_one_to_seven(self):
        board = assign_to_slots(_groups(10, 20, 30, 40, 50, 60, 70))
        assert _placed(board) == {
            1: 10, 2: 20, 3: 30, 4: 40, 5: 50, 6: 60, 7: 70,
        }

    def test_two_groups_leave_middle_empty(self):
        board = assign_to_slots(_groups(50, 75))
        assert _placed(board) == {3: 50, 5: 75}
        assert board[MIDDLE_SLOT_INDEX].is_empty

    def test_four_groups(self):
        assert _placed(assign_to_slots(_groups(1, 2, 3, 4))) == {
            2: 1, 3: 2, 5: 3, 6: 4,
        }

    def test_six_groups(self):
        assert _placed(assign_to_slots(_groups(1, 2, 3, 4, 5, 6))) == {
            1: 1, 2: 2, 3: 3, 5: 4, 6: 5, 7: 6,
        }

    def test_eight_groups_drop_one_extreme_each_side(self):
        # Central groups 4 and 5 sit on 3 and 5; only three fit on each side
        board = assign_to_slots(_groups(1, 2, 3, 4, 5, 6, 7, 8))
        assert _placed(board) == {1: 2, 2: 3, 3: 4, 5: 5, 6: 6, 7: 7}

    def test_nine_groups_drop_both_extremes(self):
        board = assign_to_slots(_groups(1, 2, 3, 4, 5, 6, 7, 8, 9))
        assert _placed(board) == {
            1: 2, 2: 3, 3: 4, 4: 5, 5: 6, 6: 7, 7: 8,
        }

    @pytest.mark.parametrize("count", range(1, 12))
    def test_parity_invariant(self, count):
        groups = _groups(*range(count))
        board = assign_to_slots(groups)
        assert board[SPECIAL_SLOT_INDEX].is_empty
        if count % 2 == 0:
            assert board[MIDDLE_SLOT_INDEX].is_empty
        else:
            assert board[MIDDLE_SLOT_INDEX].answer_groups == (
                groups[(count - 1) // 2],
            )

    def test_values_ascend_with_slot_index(self):
        board = assign_to_slots(_groups(3, 8, 13, 21, 34))
        placed = _placed(board)
        ordered = [placed[i] for i in sorted(placed)]
        assert ordered == sorted(ordered)


class TestCreateBoard:
    def test_groups_duplicates_on_one_slot(self):
        board = create_board(_answers(75, 50, 75))
        assert board[3].answer_groups == (AnswerGroup(50, ("p1",)),)
        assert board[5].answer_groups == (AnswerGroup(75, ("p0", "p2")),)

    def test_idempotent(self):
        answers = _answers(4, 8, 15, 16, 23, 42)
        assert create_board(answers) == create_board(answers)

    def test_empty_answers(self):
        assert all(slot.is_empty for slot in create_board([]))


# ── Winning slot ─────────────────────────────────────────────────────

class TestWinningSlotIndex:
    def test_closest_without_going_over(self):
        board = create_board(_answers(50, 75, 100))
        assert winning_slot_index(board, 80) == 4

    def test_exact_match_wins(self):
        board = create_board(_answers(50, 75, 100))
        assert winning_slot_index(board, 100) == 5

    def test_lowest_guess_wins_when_only_it_is_under(self):
        board = create_board(_answers(50, 101, 150))
        assert winning_slot_index(board, 100) == 3

    def test_special_slot_when_answer_below_all(self):
        board = create_board(_answers(50, 75, 100))
        assert winning_slot_index(board, 30) == SPECIAL_SLOT_INDEX
        assert slot_payout(SPECIAL_SLOT_INDEX) == 6

    def test_equal_to_minimum_is_not_special(self):
        board = create_board(_answers(50, 75, 100))
        assert winning_slot_index(board, 50) == 3

    def test_even_board_winner(self):
        board = create_board(_answers(50, 75))
        assert winning_slot_index(board, 80) == 5
        assert winning_slot_index(board, 60) == 3

    def test_no_answers(self):
        assert winning_slot_index(create_board([]), 10) == NO_WINNING_SLOT

    def test_never_special_unless_below_minimum(self):
        answers = _answers(5, 10, 20, 40, 80)
        board = create_board(answers)
        for correct in [5, 6, 10, 39, 80, 1000]:
            assert winning_slot_index(board, correct) != SPECIAL_SLOT_INDEX
        assert winning_slot_index(board, 4.99) == SPECIAL_SLOT_INDEX

    def test_fractional_values(self):
        board = create_board(_answers(1.5, 2.25, 3.75))
        assert winning_slot_index(board, 2.3) == 4


class TestSlotHelpers:
    @pytest.mark.parametrize(
        "index,payout",
        [(0, 6), (1, 5), (2, 4), (3, 3), (4, 2), (5, 3), (6, 4), (7, 5)],
    )
    def test_payouts(self, index, payout):
        assert slot_payout(index) == payout

    @pytest.mark.parametrize("index", [-1, 8, 100])
    def test_payout_off_board_is_zero(self, index):
        assert slot_payout(index) == 0

    def test_slot_answers(self):
        board = create_board(_answers(50, 75, 100))
        assert slot_answers(board, 4) == [75]
        assert slot_answers(board, 1) == []
        assert slot_answers(board, SPECIAL_SLOT_INDEX) is None
        assert slot_answers(board, 9) is None

    def test_winning_slot_value(self):
        board = create_board(_answers(50, 75, 100))
        assert winning_slot_value(board, 5) == 100
        assert winning_slot_value(board, 7) is None
        assert winning_slot_value(board, SPECIAL_SLOT_INDEX) is None
