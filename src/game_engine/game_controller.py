"""Game controller - orchestrates a session over immutable game snapshots."""

import logging
import random
import uuid
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from src.game_engine import answer_manager, betting_manager, round_manager
from src.game_engine.betting_board import BettingSlot, create_board
from src.game_engine.game_rules import GameRules, ValidationError
from src.game_engine.game_state import (
    GamePhase,
    GameState,
    Player,
    PlayerAnswer,
    Question,
)
from src.game_engine.scoring_engine import (
    ScoringResult,
    apply_scores,
    calculate_round_scores,
)
from src.game_engine.standings import score_history_frame, standings_frame
from src.question_bank.selection import available_labels, filter_by_labels

logger = logging.getLogger(__name__)


class GameController:
    """Main controller for a Wits & Wagers session.

    Holds the current GameState and replaces it with the snapshot returned
    by each operation. Rejected operations leave the state untouched.

    The engine only emits records through module loggers; applications call
    ``src.logging_config.setup_logging()`` once at startup to route them to
    the console and the rotating log file.
    """

    def __init__(
        self,
        questions: Iterable[Question] = (),
        rng: Optional[random.Random] = None,
    ):
        self.state = GameState.create_initial(questions)
        self.rng = rng

    # ------------------------------------------------------------------
    # State getters
    # ------------------------------------------------------------------
    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def players(self) -> List[Player]:
        return list(self.state.players)

    def get_current_question(self) -> Optional[Question]:
        return self.state.current_question

    def get_current_round(self) -> int:
        """Current round number (0-based)."""
        return self.state.current_question_index

    def get_total_rounds(self) -> int:
        return self.state.rounds_to_play

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def add_player(self, name: str) -> Player:
        """Seat a new player.

        Raises:
            PhaseError: If the game has already started.
            ValidationError: If the name is blank.
        """
        GameRules.require_phase(self.state, GamePhase.SETUP, action="add players")

        is_valid, error_msg = GameRules.validate_player_name(name)
        if not is_valid:
            raise ValidationError(error_msg)

        player = Player(id=str(uuid.uuid4()), name=name.strip())
        self.state = replace(self.state, players=self.state.players + (player,))
        logger.info("Added player %s (%s)", player.name, player.id)
        return player

    def remove_player(self, player_id: str) -> None:
        GameRules.require_phase(
            self.state, GamePhase.SETUP, action="remove players"
        )
        self.state = replace(
            self.state,
            players=tuple(p for p in self.state.players if p.id != player_id),
        )

    def update_questions(self, questions: Iterable[Question]) -> None:
        """Replace the question pool, re-applying the current label filter."""
        GameRules.require_phase(
            self.state, GamePhase.SETUP, action="update questions"
        )
        questions = tuple(questions)
        self.state = replace(
            self.state,
            all_questions=questions,
            filtered_questions=tuple(
                filter_by_labels(questions, self.state.selected_labels)
            ),
        )

    def set_question_labels(self, labels: Iterable[str]) -> None:
        """Restrict the question pool to questions with any of ``labels``."""
        GameRules.require_phase(
            self.state, GamePhase.SETUP, action="change question labels"
        )
        labels = tuple(labels)
        self.state = replace(
            self.state,
            selected_labels=labels,
            filtered_questions=tuple(
                filter_by_labels(self.state.all_questions, labels)
            ),
        )
        logger.info(
            "Label filter %s: %d questions available",
            list(labels),
            len(self.state.filtered_questions),
        )

    def get_available_labels(self) -> List[str]:
        return available_labels(self.state.all_questions)

    def set_rounds_to_play(self, rounds: int) -> None:
        GameRules.require_phase(
            self.state, GamePhase.SETUP, action="change rounds"
        )
        if rounds < 1:
            raise ValidationError("Must have at least 1 round")
        self.state = replace(self.state, rounds_to_play=rounds)

    def start_game(self) -> None:
        self.state = round_manager.start_game(self.state, rng=self.rng)

    # ------------------------------------------------------------------
    # Answering
    # ------------------------------------------------------------------
    def submit_answer(self, player_id: str, answer) -> None:
        self.state = answer_manager.submit_answer(self.state, player_id, answer)

    def remove_answer(self, player_id: str) -> None:
        self.state = answer_manager.remove_answer(self.state, player_id)

    def can_finish_answering(self) -> bool:
        return answer_manager.can_finish_answering(self.state)

    def finish_answering(self) -> None:
        """Close answering and open the betting board.

        Raises:
            ValidationError: If a player has not answered yet.
        """
        if not answer_manager.can_finish_answering(self.state):
            raise ValidationError("All players must submit answers")
        self.state = round_manager.advance_to_phase(self.state, GamePhase.BETTING)

    def get_sorted_answers(self) -> List[PlayerAnswer]:
        """Current answers in ascending order (betting and results only)."""
        if self.state.phase not in (GamePhase.BETTING, GamePhase.RESULTS):
            return []
        return sorted(self.state.player_answers, key=lambda a: a.answer)

    # ------------------------------------------------------------------
    # Betting
    # ------------------------------------------------------------------
    def get_betting_board(self) -> List[BettingSlot]:
        """The round's board (betting and results only, empty otherwise)."""
        if self.state.phase not in (GamePhase.BETTING, GamePhase.RESULTS):
            return []
        return create_board(self.state.player_answers)

    def place_bet(self, player_id: str, slot_index: int) -> None:
        self.state = betting_manager.place_bet(self.state, player_id, slot_index)

    def remove_bet(self, player_id: str, chip_index: int) -> None:
        self.state = betting_manager.remove_bet(self.state, player_id, chip_index)

    def can_finish_betting(self) -> bool:
        return betting_manager.can_finish_betting(self.state)

    def finish_betting(self) -> ScoringResult:
        """Score the round, apply the points and move to results.

        Raises:
            ValidationError: If a player still has chips to place or there is
                no current question.
        """
        if not betting_manager.can_finish_betting(self.state):
            raise ValidationError("All players must place 2 bets")

        question = self.state.current_question
        if question is None:
            raise ValidationError("No current question")

        result = calculate_round_scores(self.state, question.answer)
        scored = apply_scores(self.state, result)
        self.state = round_manager.advance_to_phase(scored, GamePhase.RESULTS)

        logger.info(
            "Round %d scored: answer %s, winning slot %d (pays %d), points %s",
            self.state.current_question_index,
            question.answer,
            result.winning_index,
            result.winning_payout,
            result.points_awarded,
        )
        return result

    # ------------------------------------------------------------------
    # Round progression
    # ------------------------------------------------------------------
    def next_round(self) -> None:
        self.state = round_manager.next_round(self.state)

    def reset_game(self) -> None:
        self.state = round_manager.reset_game(self.state)
        logger.info("Game reset to setup")

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def get_sorted_players(self) -> List[Player]:
        """Players by score, highest first."""
        return sorted(self.state.players, key=lambda p: p.score, reverse=True)

    def get_winner(self) -> Optional[Player]:
        """The top scorer once the game is over, None before that."""
        if self.state.phase != GamePhase.GAME_OVER:
            return None
        ranked = self.get_sorted_players()
        return ranked[0] if ranked else None

    def get_game_summary(self) -> Dict:
        """Generate summary of game results.

        Returns dict with "error" key if the game is not over yet.
        """
        if self.state.phase != GamePhase.GAME_OVER:
            return {"error": "Game not over"}

        winner = self.get_winner()
        return {
            "rounds_played": len(self.state.game_questions),
            "winner": winner.name if winner else None,
            "standings": standings_frame(self.state).to_dict("records"),
            "score_history": score_history_frame(self.state),
        }
