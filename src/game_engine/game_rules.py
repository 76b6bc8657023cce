"""Game rule enforcement and input validation."""

import math
from numbers import Real
from typing import Optional, Tuple

from src.game_engine.betting_board import create_board
from src.game_engine.config import SLOT_DEFINITIONS, SPECIAL_SLOT_INDEX
from src.game_engine.game_state import GamePhase, GameState


class ValidationError(Exception):
    """Raised when a submission violates game rules."""

    pass


class PhaseError(ValidationError):
    """Raised when an operation is attempted in the wrong game phase."""

    pass


class GameRules:
    """Enforces submission rules before anything enters the game state."""

    @staticmethod
    def require_phase(state: GameState, *phases: GamePhase, action: str) -> None:
        """Raise PhaseError unless the game is in one of ``phases``."""
        if state.phase not in phases:
            allowed = " or ".join(phase.value for phase in phases)
            raise PhaseError(
                f"Cannot {action} outside {allowed} phase "
                f"(current: {state.phase.value})"
            )

    @staticmethod
    def validate_answer(
        state: GameState, player_id: str, answer
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate an answer submission.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        if state.get_player(player_id) is None:
            return False, f"Player {player_id} not found"

        if isinstance(answer, bool) or not isinstance(answer, Real):
            return False, f"Invalid answer value: {answer!r} is not a number"

        try:
            value = float(answer)
        except OverflowError:
            return False, f"Invalid answer value: {answer!r}"

        if not math.isfinite(value) or value < 0:
            return False, f"Invalid answer value: {answer!r}"

        return True, None

    @staticmethod
    def validate_bet(
        state: GameState, player_id: str, slot_index
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate a bet chip placement against the current board.

        The special slot is always open; any other slot must hold an answer.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        if state.get_player(player_id) is None:
            return False, f"Player {player_id} not found"

        if (
            isinstance(slot_index, bool)
            or not isinstance(slot_index, int)
            or not 0 <= slot_index < len(SLOT_DEFINITIONS)
        ):
            return False, f"Invalid slot index: {slot_index!r}"

        if slot_index != SPECIAL_SLOT_INDEX:
            board = create_board(state.player_answers)
            if board[slot_index].is_empty:
                return False, f"Cannot bet on empty slot {slot_index}"

        return True, None

    @staticmethod
    def validate_player_name(name: str) -> Tuple[bool, Optional[str]]:
        if not isinstance(name, str) or not name.strip():
            return False, "Player name cannot be empty"
        return True, None
