"""Answer submission for the answering phase."""

import logging
from dataclasses import replace

from src.game_engine.game_rules import GameRules, ValidationError
from src.game_engine.game_state import GamePhase, GameState, PlayerAnswer

logger = logging.getLogger(__name__)


def submit_answer(state: GameState, player_id: str, answer) -> GameState:
    """Submit or replace a player's answer for the current question.

    Raises:
        PhaseError: If the game is not in the answering phase.
        ValidationError: If the player is unknown or the value is negative,
            non-finite or not a number.
    """
    GameRules.require_phase(state, GamePhase.ANSWERING, action="submit answer")

    is_valid, error_msg = GameRules.validate_answer(state, player_id, answer)
    if not is_valid:
        logger.warning("Rejected answer from %s: %s", player_id, error_msg)
        raise ValidationError(error_msg)

    answers = tuple(a for a in state.player_answers if a.player_id != player_id)
    return replace(
        state, player_answers=answers + (PlayerAnswer(player_id, answer),)
    )


def remove_answer(state: GameState, player_id: str) -> GameState:
    """Withdraw a player's answer, if any."""
    return replace(
        state,
        player_answers=tuple(
            a for a in state.player_answers if a.player_id != player_id
        ),
    )


def can_finish_answering(state: GameState) -> bool:
    """Whether every seated player has an answer in."""
    answered = {a.player_id for a in state.player_answers}
    return bool(state.players) and all(p.id in answered for p in state.players)
