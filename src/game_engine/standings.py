"""Tabular score views for display."""

import pandas as pd

from src.game_engine.game_state import GameState

STANDINGS_COLUMNS = ["rank", "player_id", "name", "score"]


def score_history_frame(state: GameState) -> pd.DataFrame:
    """Cumulative scores per round, one column per player name.

    Row 0 is the starting score recorded when the game began. Players with
    shorter histories are padded with NaN.
    """
    columns = {}
    for player in state.players:
        history = state.score_history.get(player.id, ())
        columns[player.name] = pd.Series(history, dtype="float64")

    df = pd.DataFrame(columns)
    df.index.name = "round"
    return df


def standings_frame(state: GameState) -> pd.DataFrame:
    """Players ranked by score, highest first. Tied scores share a rank."""
    if not state.players:
        return pd.DataFrame(columns=STANDINGS_COLUMNS)

    df = pd.DataFrame(
        [
            {"player_id": p.id, "name": p.name, "score": p.score}
            for p in state.players
        ]
    )
    df["rank"] = df["score"].rank(method="min", ascending=False).astype(int)
    df = df.sort_values(["rank", "name"], kind="mergesort").reset_index(drop=True)
    return df[STANDINGS_COLUMNS]
