"""Game state data models - immutable snapshots of a game session."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple

from src.game_engine.config import DEFAULT_ROUNDS_TO_PLAY, MIN_PLAYERS


class GamePhase(str, Enum):
    """Round lifecycle of a game session."""

    SETUP = "setup"
    ANSWERING = "answering"
    BETTING = "betting"
    RESULTS = "results"
    GAME_OVER = "game-over"


# Allowed forward transitions; any phase may also be reset to SETUP.
PHASE_TRANSITIONS = {
    GamePhase.SETUP: {GamePhase.ANSWERING},
    GamePhase.ANSWERING: {GamePhase.BETTING},
    GamePhase.BETTING: {GamePhase.RESULTS},
    GamePhase.RESULTS: {GamePhase.ANSWERING, GamePhase.GAME_OVER},
    GamePhase.GAME_OVER: set(),
}


def can_transition(current: GamePhase, target: GamePhase) -> bool:
    """Check whether the phase machine allows moving from current to target."""
    if target == GamePhase.SETUP:
        return True
    return target in PHASE_TRANSITIONS[current]


@dataclass(frozen=True)
class Player:
    """A seated player. Only ``score`` changes during a game."""

    id: str
    name: str
    score: int = 0


@dataclass(frozen=True)
class PlayerAnswer:
    """A player's numeric guess for the current question."""

    player_id: str
    answer: float


@dataclass(frozen=True)
class PlayerBet:
    """Chips a player has committed, as betting board slot indices."""

    player_id: str
    bet_on_slot_indices: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Question:
    """A trivia question with a numeric answer."""

    question: str
    answer: float
    labels: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GameState:
    """Complete game snapshot. Every transition returns a new instance."""

    players: Tuple[Player, ...] = ()
    all_questions: Tuple[Question, ...] = ()
    filtered_questions: Tuple[Question, ...] = ()
    game_questions: Tuple[Question, ...] = ()
    current_question_index: int = 0
    phase: GamePhase = GamePhase.SETUP
    player_answers: Tuple[PlayerAnswer, ...] = ()
    player_bets: Tuple[PlayerBet, ...] = ()
    score_history: Dict[str, Tuple[int, ...]] = field(default_factory=dict)
    rounds_to_play: int = DEFAULT_ROUNDS_TO_PLAY
    selected_labels: Tuple[str, ...] = ()

    @classmethod
    def create_initial(cls, questions=()) -> "GameState":
        """Factory method for a fresh game in the setup phase."""
        questions = tuple(questions)
        return cls(all_questions=questions, filtered_questions=questions)

    @property
    def current_question(self) -> Optional[Question]:
        """The question being played, or None outside a started game."""
        if 0 <= self.current_question_index < len(self.game_questions):
            return self.game_questions[self.current_question_index]
        return None

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_answer(self, player_id: str) -> Optional[PlayerAnswer]:
        for answer in self.player_answers:
            if answer.player_id == player_id:
                return answer
        return None

    def get_bet(self, player_id: str) -> Optional[PlayerBet]:
        for bet in self.player_bets:
            if bet.player_id == player_id:
                return bet
        return None

    def with_phase(self, phase: GamePhase) -> "GameState":
        return replace(self, phase=phase)


def validate_game_state(state: GameState) -> List[str]:
    """Return a list of consistency errors (empty if the state is valid)."""
    errors = []

    if len(state.players) < MIN_PLAYERS:
        errors.append(f"At least {MIN_PLAYERS} players required")

    if state.phase != GamePhase.SETUP and not state.game_questions:
        errors.append("No questions selected for game")

    if state.rounds_to_play < 1:
        errors.append("Must have at least 1 round")

    if state.current_question_index < 0:
        errors.append("Invalid question index")

    return errors
