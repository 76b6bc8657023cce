"""Question bank cleaning.

Handles the quirks of hand-edited question files:
- Comma-formatted answers (e.g., "3,904" -> 3904)
- Blank questions and missing, negative or non-finite answers (dropped)
- Labels given as a list or as a ";"-separated string
"""

import logging
import math
from typing import List, Tuple

import pandas as pd

from src.game_engine.game_state import Question
from src.question_bank.config import LABEL_SEPARATOR

logger = logging.getLogger(__name__)


class QuestionCleaner:
    """Validates raw question rows and converts them to Question objects."""

    def __init__(self, label_separator: str = LABEL_SEPARATOR):
        self.label_separator = label_separator

    @staticmethod
    def parse_answer(value) -> float:
        """Parse a numeric answer that may contain commas ('3,904.1' -> 3904.1).

        Unparseable values become NaN.
        """
        if isinstance(value, bool):
            return float("nan")
        if isinstance(value, (int, float)):
            return float(value)
        if value is None or pd.isna(value):
            return float("nan")
        s = str(value).replace(",", "").strip()
        if not s:
            return float("nan")
        try:
            return float(s)
        except ValueError:
            return float("nan")

    def normalize_labels(self, value) -> Tuple[str, ...]:
        """Turn a raw labels cell into a tuple of unique, stripped labels."""
        if isinstance(value, (list, tuple)):
            items = value
        elif isinstance(value, str):
            items = value.split(self.label_separator)
        else:
            return ()

        labels = []
        for item in items:
            label = str(item).strip()
            if label and label not in labels:
                labels.append(label)
        return tuple(labels)

    def clean(self, df: pd.DataFrame) -> pd.DataFrame:
        """Drop unusable rows and normalize answers and labels."""
        df = df.copy()

        df["question"] = df["question"].fillna("").astype(str).str.strip()
        df["answer"] = df["answer"].map(self.parse_answer)
        df["labels"] = df["labels"].map(self.normalize_labels)

        valid = (
            (df["question"] != "")
            & df["answer"].map(math.isfinite)
            & (df["answer"] >= 0)
        )

        dropped = int((~valid).sum())
        if dropped:
            logger.warning("Dropped %d invalid question rows", dropped)

        return df[valid].reset_index(drop=True)

    @staticmethod
    def to_questions(df: pd.DataFrame) -> List[Question]:
        """Convert cleaned rows to Question objects, keeping whole answers as ints."""
        questions = []
        for row in df.itertuples(index=False):
            answer = float(row.answer)
            questions.append(
                Question(
                    question=row.question,
                    answer=int(answer) if answer.is_integer() else answer,
                    labels=tuple(row.labels),
                )
            )
        return questions
