"""Shared fixtures for the game engine test suite."""

import random

import pytest

from src.game_engine.game_controller import GameController
from src.game_engine.game_state import Question


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def questions():
    """A small labelled question pool."""
    return [
        Question("Height of the Eiffel Tower in metres?", 330, ("geography", "europe")),
        Question("Year the Berlin Wall fell?", 1989, ("history", "europe")),
        Question("Keys on a standard piano?", 88, ("music",)),
        Question("Bones in the adult human body?", 206, ("science",)),
        Question("Length of the Nile in km?", 6650, ("geography", "africa")),
    ]


@pytest.fixture
def controller(questions):
    """Controller with a seeded question shuffle and no players."""
    return GameController(questions, rng=random.Random(7))


@pytest.fixture
def started_controller(controller):
    """Two-player, two-round game sitting in the answering phase."""
    controller.add_player("Ana")
    controller.add_player("Bruno")
    controller.set_rounds_to_play(2)
    controller.start_game()
    return controller
