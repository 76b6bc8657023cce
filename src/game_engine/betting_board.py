"""Betting board construction and winning slot determination.

Board layout (8 slots, top to bottom):

    [0] Lower than all guesses (6:1) - wins if the answer is below every guess
    [1] 5:1 - lowest answer group
    [2] 4:1
    [3] 3:1
    [4] 2:1 - median answer group
    [5] 3:1
    [6] 4:1
    [7] 5:1 - highest answer group

Answer groups are spread outward from the middle. With an even number of
groups the 2:1 slot stays empty and the two central groups share the 3:1
slots on either side.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from src.game_engine.config import (
    HIGHEST_ANSWER_SLOT_INDEX,
    LOWEST_ANSWER_SLOT_INDEX,
    MIDDLE_SLOT_INDEX,
    SLOT_DEFINITIONS,
    SPECIAL_SLOT_INDEX,
)
from src.game_engine.game_state import PlayerAnswer

NO_WINNING_SLOT = -1

_PAYOUTS = {index: payout for index, _, payout, _ in SLOT_DEFINITIONS}


@dataclass(frozen=True)
class AnswerGroup:
    """All players who submitted the same numeric guess."""

    answer: float
    player_ids: Tuple[str, ...]


@dataclass(frozen=True)
class BettingSlot:
    """One payout bucket on the betting board."""

    index: int
    label: str
    payout: int
    is_special: bool
    answer_groups: Tuple[AnswerGroup, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.answer_groups


def group_answers(answers: Iterable[PlayerAnswer]) -> List[AnswerGroup]:
    """Collapse identical guesses into groups sorted ascending by value."""
    groups: Dict[float, List[str]] = {}
    for answer in answers:
        groups.setdefault(answer.answer, []).append(answer.player_id)

    return [
        AnswerGroup(answer=value, player_ids=tuple(player_ids))
        for value, player_ids in sorted(groups.items(), key=lambda item: item[0])
    ]


def assign_to_slots(groups: List[AnswerGroup]) -> List[BettingSlot]:
    """Place sorted answer groups on the board, filling from the middle out.

    Odd count: the median goes to slot 4, lower groups to 3, 2, 1 and
    higher groups to 5, 6, 7.
    Even count: slot 4 stays empty, the two central groups go to slots 3
    and 5, then lower groups to 2, 1 and higher groups to 6, 7.
    Groups that do not fit at either extreme are left off the board.
    """
    placed: Dict[int, AnswerGroup] = {}

    if groups:
        count = len(groups)
        if count % 2 == 0:
            lower_middle = count // 2 - 1
            upper_middle = count // 2
            lower_slot = MIDDLE_SLOT_INDEX - 1
            upper_slot = MIDDLE_SLOT_INDEX + 1
        else:
            lower_middle = upper_middle = (count - 1) // 2
            lower_slot = upper_slot = MIDDLE_SLOT_INDEX

        group_idx, slot_idx = lower_middle, lower_slot
        while group_idx >= 0 and slot_idx >= LOWEST_ANSWER_SLOT_INDEX:
            placed[slot_idx] = groups[group_idx]
            group_idx -= 1
            slot_idx -= 1

        group_idx, slot_idx = upper_middle, upper_slot
        while group_idx < count and slot_idx <= HIGHEST_ANSWER_SLOT_INDEX:
            placed[slot_idx] = groups[group_idx]
            group_idx += 1
            slot_idx += 1

    return [
        BettingSlot(
            index=index,
            label=label,
            payout=payout,
            is_special=is_special,
            answer_groups=(placed[index],) if index in placed else (),
        )
        for index, label, payout, is_special in SLOT_DEFINITIONS
    ]


def create_board(answers: Iterable[PlayerAnswer]) -> List[BettingSlot]:
    """Build the full betting board from the round's answers."""
    return assign_to_slots(group_answers(answers))


def _answer_slots(board: List[BettingSlot]) -> List[BettingSlot]:
    """Non-special slots holding answers, in ascending slot index order."""
    return sorted(
        (slot for slot in board if not slot.is_special and slot.answer_groups),
        key=lambda slot: slot.index,
    )


def winning_slot_index(board: List[BettingSlot], correct_answer: float) -> int:
    """Determine the winning slot for a correct answer.

    - The special slot wins only if the correct answer is strictly below
      every guess on the board.
    - Otherwise the slot holding the largest guess not over the correct
      answer wins.
    - If every guess is over, the slot holding the lowest guess wins.

    Returns NO_WINNING_SLOT (-1) when the board holds no answers.
    """
    answer_slots = _answer_slots(board)
    if not answer_slots:
        return NO_WINNING_SLOT

    min_answer = min(
        group.answer for slot in answer_slots for group in slot.answer_groups
    )
    if correct_answer < min_answer:
        return SPECIAL_SLOT_INDEX

    winning_idx = NO_WINNING_SLOT
    closest = None
    for slot in answer_slots:
        for group in slot.answer_groups:
            if group.answer <= correct_answer and (
                closest is None or group.answer > closest
            ):
                closest = group.answer
                winning_idx = slot.index

    if winning_idx == NO_WINNING_SLOT:
        for slot in answer_slots:
            if any(group.answer == min_answer for group in slot.answer_groups):
                return slot.index

    return winning_idx


def slot_payout(slot_index: int) -> int:
    """Payout multiplier for a slot, 0 for an index off the board."""
    return _PAYOUTS.get(slot_index, 0)


def slot_answers(board: List[BettingSlot], slot_index: int) -> Optional[List[float]]:
    """Answer values held by a slot; None for the special slot or a bad index."""
    if not 0 <= slot_index < len(board):
        return None
    slot = board[slot_index]
    if slot.is_special:
        return None
    return [group.answer for group in slot.answer_groups]


def winning_slot_value(board: List[BettingSlot], slot_index: int) -> Optional[float]:
    """The single answer value a winning slot pays out on.

    None for the special slot, an empty slot, or an index off the board.
    """
    values = slot_answers(board, slot_index)
    if not values:
        return None
    return values[0]
