"""Bet chip placement for the betting phase."""

import logging
from dataclasses import replace

from src.game_engine.config import MAX_BETS_PER_PLAYER
from src.game_engine.game_rules import GameRules, ValidationError
from src.game_engine.game_state import GamePhase, GameState, PlayerBet

logger = logging.getLogger(__name__)


def place_bet(state: GameState, player_id: str, slot_index: int) -> GameState:
    """Place one of a player's chips on a betting board slot.

    Chips beyond MAX_BETS_PER_PLAYER are ignored and the same snapshot is
    returned. Both chips may sit on the same slot.

    Raises:
        PhaseError: If the game is not in the betting phase.
        ValidationError: If the player is unknown, the index is off the
            board, or the slot holds no answer.
    """
    GameRules.require_phase(state, GamePhase.BETTING, action="place bet")

    is_valid, error_msg = GameRules.validate_bet(state, player_id, slot_index)
    if not is_valid:
        logger.warning("Rejected bet from %s: %s", player_id, error_msg)
        raise ValidationError(error_msg)

    existing = state.get_bet(player_id)
    if existing is None:
        return replace(
            state,
            player_bets=state.player_bets + (PlayerBet(player_id, (slot_index,)),),
        )

    if len(existing.bet_on_slot_indices) >= MAX_BETS_PER_PLAYER:
        logger.debug(
            "Ignoring extra chip from %s on slot %d", player_id, slot_index
        )
        return state

    updated = replace(
        existing,
        bet_on_slot_indices=existing.bet_on_slot_indices + (slot_index,),
    )
    return replace(
        state,
        player_bets=tuple(
            updated if b.player_id == player_id else b for b in state.player_bets
        ),
    )


def remove_bet(state: GameState, player_id: str, chip_index: int) -> GameState:
    """Take back a single chip (0 or 1) a player has placed."""
    bets = []
    for bet in state.player_bets:
        if bet.player_id == player_id:
            bet = replace(
                bet,
                bet_on_slot_indices=tuple(
                    slot
                    for i, slot in enumerate(bet.bet_on_slot_indices)
                    if i != chip_index
                ),
            )
        bets.append(bet)
    return replace(state, player_bets=tuple(bets))


def can_finish_betting(state: GameState) -> bool:
    """Whether every seated player has placed all of their chips."""
    if not state.players:
        return False
    for player in state.players:
        bet = state.get_bet(player.id)
        if bet is None or len(bet.bet_on_slot_indices) != MAX_BETS_PER_PLAYER:
            return False
    return True
