"""Round scoring - winning answer, bet payouts and score accumulation.

Scoring rules per player and round:
- 3 points for holding the answer on the winning slot (not for the
  special "lower than all guesses" slot)
- each chip on the winning slot pays that slot's multiplier
- the round bonus (0-based round index) is added only to players who
  already scored from the two sources above
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Optional, Tuple

from src.game_engine.betting_board import (
    NO_WINNING_SLOT,
    create_board,
    slot_payout,
    winning_slot_index,
    winning_slot_value,
)
from src.game_engine.config import ANSWER_BONUS_POINTS, SPECIAL_SLOT_INDEX
from src.game_engine.game_state import GameState, PlayerAnswer


class ScoringError(Exception):
    """Raised when a round cannot be scored."""

    pass


@dataclass(frozen=True)
class WinningAnswer:
    """Answer-level winner, independent of the betting board."""

    winning_answer: Optional[PlayerAnswer]
    winning_index: int
    sorted_answers: Tuple[PlayerAnswer, ...]


@dataclass(frozen=True)
class ScoringResult:
    """Outcome of one scored round.

    ``winning_index`` is the winning betting board slot, not a position in
    ``sorted_answers``.
    """

    winning_answer: Optional[PlayerAnswer]
    winning_index: int
    sorted_answers: Tuple[PlayerAnswer, ...]
    points_awarded: Dict[str, int] = field(default_factory=dict)
    winning_payout: int = 0
    round_bonus: int = 0


def winning_answer(
    answers: Iterable[PlayerAnswer], correct_answer: float
) -> WinningAnswer:
    """Find the closest answer without going over.

    If every answer is over, the lowest answer wins. Ties keep submission
    order, so the last tied submission below the correct answer is reported.
    """
    sorted_answers = tuple(sorted(answers, key=lambda a: a.answer))

    if not sorted_answers:
        return WinningAnswer(None, -1, sorted_answers)

    winning_index = 0
    for index, answer in enumerate(sorted_answers):
        if answer.answer <= correct_answer:
            winning_index = index

    return WinningAnswer(
        sorted_answers[winning_index], winning_index, sorted_answers
    )


def calculate_round_scores(state: GameState, correct_answer: float) -> ScoringResult:
    """Calculate the points each player earns for the current round.

    Raises:
        ScoringError: If no answers were recorded, so no winning slot exists.
    """
    answer_result = winning_answer(state.player_answers, correct_answer)

    board = create_board(state.player_answers)
    winning_slot = winning_slot_index(board, correct_answer)
    if winning_slot == NO_WINNING_SLOT:
        raise ScoringError("Cannot score a round without any answers")

    payout = slot_payout(winning_slot)
    winning_value = (
        None
        if winning_slot == SPECIAL_SLOT_INDEX
        else winning_slot_value(board, winning_slot)
    )
    round_bonus = state.current_question_index

    points_awarded = {}
    for player in state.players:
        points = 0

        player_answer = state.get_answer(player.id)
        if (
            winning_value is not None
            and player_answer is not None
            and player_answer.answer == winning_value
        ):
            points += ANSWER_BONUS_POINTS

        player_bet = state.get_bet(player.id)
        if player_bet is not None:
            chips = player_bet.bet_on_slot_indices.count(winning_slot)
            points += chips * payout

        if points > 0:
            points += round_bonus

        points_awarded[player.id] = points

    return ScoringResult(
        winning_answer=answer_result.winning_answer,
        winning_index=winning_slot,
        sorted_answers=answer_result.sorted_answers,
        points_awarded=points_awarded,
        winning_payout=payout,
        round_bonus=round_bonus,
    )


def apply_scores(state: GameState, scoring_result: ScoringResult) -> GameState:
    """Fold awarded points into player scores and score history.

    Players missing from ``points_awarded`` receive 0. Returns a new
    snapshot; ``state`` is left untouched.
    """
    players = []
    score_history = dict(state.score_history)

    for player in state.players:
        new_score = player.score + scoring_result.points_awarded.get(player.id, 0)
        players.append(replace(player, score=new_score))
        score_history[player.id] = score_history.get(player.id, ()) + (new_score,)

    return replace(state, players=tuple(players), score_history=score_history)
