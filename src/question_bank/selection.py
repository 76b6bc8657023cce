"""Question filtering by label and random selection for a game."""

import random
from typing import Iterable, List, Optional, Sequence

from src.game_engine.game_state import Question


def filter_by_labels(
    questions: Sequence[Question], labels: Iterable[str]
) -> List[Question]:
    """Keep questions carrying at least one of ``labels``.

    An empty label selection keeps every question.
    """
    wanted = set(labels)
    if not wanted:
        return list(questions)
    return [q for q in questions if wanted.intersection(q.labels)]


def select_random(
    questions: Sequence[Question],
    count: int,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """Pick up to ``count`` distinct questions in random order.

    Pass a seeded ``random.Random`` for a reproducible selection.
    """
    rng = rng or random.Random()
    count = max(0, min(count, len(questions)))
    return rng.sample(list(questions), count)


def available_labels(questions: Iterable[Question]) -> List[str]:
    """Sorted unique labels across all questions."""
    return sorted({label for q in questions for label in q.labels})
