from src.game_engine.betting_board import (
    AnswerGroup,
    BettingSlot,
    assign_to_slots,
    create_board,
    group_answers,
    slot_payout,
    winning_slot_index,
)
from src.game_engine.game_controller import GameController
from src.game_engine.game_rules import GameRules, PhaseError, ValidationError
from src.game_engine.game_state import (
    GamePhase,
    GameState,
    Player,
    PlayerAnswer,
    PlayerBet,
    Question,
)
from src.game_engine.scoring_engine import (
    ScoringError,
    ScoringResult,
    apply_scores,
    calculate_round_scores,
    winning_answer,
)

__all__ = [
    "AnswerGroup",
    "BettingSlot",
    "GameController",
    "GamePhase",
    "GameRules",
    "GameState",
    "PhaseError",
    "Player",
    "PlayerAnswer",
    "PlayerBet",
    "Question",
    "ScoringError",
    "ScoringResult",
    "ValidationError",
    "apply_scores",
    "assign_to_slots",
    "calculate_round_scores",
    "create_board",
    "group_answers",
    "slot_payout",
    "winning_answer",
    "winning_slot_index",
]
