"""Round lifecycle - game start, phase transitions, next round and reset."""

import logging
import random
from dataclasses import replace
from typing import Optional

from src.game_engine.game_rules import GameRules, PhaseError, ValidationError
from src.game_engine.game_state import (
    GamePhase,
    GameState,
    can_transition,
    validate_game_state,
)
from src.question_bank.selection import select_random

logger = logging.getLogger(__name__)


def start_game(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """Pick the game's questions and move from setup to answering.

    Raises:
        PhaseError: If the game is not in setup.
        ValidationError: If the setup is inconsistent or there are too few
            questions.
    """
    GameRules.require_phase(state, GamePhase.SETUP, action="start game")

    errors = validate_game_state(state)
    if errors:
        raise ValidationError(errors[0])

    available = len(state.filtered_questions)
    if available == 0:
        raise ValidationError("No questions available")

    if available < state.rounds_to_play:
        raise ValidationError(
            f"Not enough questions ({available} available, "
            f"{state.rounds_to_play} needed)"
        )

    game_questions = select_random(
        state.filtered_questions, state.rounds_to_play, rng=rng
    )

    logger.info(
        "Game started: %d players, %d rounds from %d questions",
        len(state.players),
        state.rounds_to_play,
        available,
    )

    return replace(
        state,
        game_questions=tuple(game_questions),
        current_question_index=0,
        player_answers=(),
        player_bets=(),
        score_history={player.id: (0,) for player in state.players},
        phase=GamePhase.ANSWERING,
    )


def advance_to_phase(state: GameState, phase: GamePhase) -> GameState:
    """Move to ``phase`` if the phase machine allows it.

    Raises:
        PhaseError: If the transition is not allowed.
    """
    if not can_transition(state.phase, phase):
        raise PhaseError(
            f"Cannot move from {state.phase.value} to {phase.value}"
        )
    logger.info("Phase %s -> %s", state.phase.value, phase.value)
    return state.with_phase(phase)


def next_round(state: GameState) -> GameState:
    """Start the next round, or end the game after the last question."""
    GameRules.require_phase(state, GamePhase.RESULTS, action="start next round")

    next_index = state.current_question_index + 1
    if next_index >= len(state.game_questions):
        logger.info("Game over after %d rounds", len(state.game_questions))
        return advance_to_phase(state, GamePhase.GAME_OVER)

    return replace(
        advance_to_phase(state, GamePhase.ANSWERING),
        current_question_index=next_index,
        player_answers=(),
        player_bets=(),
    )


def reset_game(state: GameState) -> GameState:
    """Return to setup, keeping players but clearing scores and round data."""
    return replace(
        state,
        players=tuple(replace(p, score=0) for p in state.players),
        current_question_index=0,
        player_answers=(),
        player_bets=(),
        game_questions=(),
        score_history={},
        phase=GamePhase.SETUP,
    )
