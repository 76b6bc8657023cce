"""Question file ingestion.

Reads question banks exported as either:
- JSON: a list of {"question", "answer", "labels"} records, labels as a list
- CSV: question, answer, labels columns, labels separated by ";"

Rows are returned raw; see cleaning.py for validation and conversion.
"""

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from src.game_engine.game_state import Question
from src.question_bank.cleaning import QuestionCleaner
from src.question_bank.config import (
    DEFAULT_QUESTIONS_FILE,
    REQUIRED_COLUMNS,
    SUPPORTED_SUFFIXES,
)

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when a question file cannot be read."""


class QuestionBankIngester:
    """Reads a question bank file into a pandas DataFrame."""

    def __init__(self, filepath: Optional[Path] = None):
        self.filepath = Path(filepath or DEFAULT_QUESTIONS_FILE)

    def read(self) -> pd.DataFrame:
        """Read the question file.

        Returns DataFrame with columns:
            question, answer, labels (labels empty when the file has none)

        Raises:
            FileNotFoundError: If the file does not exist.
            IngestionError: If the format is unsupported, the content cannot
                be parsed, or required columns are missing.
        """
        if not self.filepath.exists():
            raise FileNotFoundError(f"Question file not found: {self.filepath}")

        suffix = self.filepath.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise IngestionError(
                f"Unsupported question file type '{suffix}'. "
                f"Must be one of: {sorted(SUPPORTED_SUFFIXES)}"
            )

        logger.info("Reading questions: %s", self.filepath.name)

        try:
            if suffix == ".json":
                df = pd.read_json(self.filepath, orient="records", dtype=False)
            else:
                df = pd.read_csv(
                    self.filepath, dtype={"question": str, "labels": str}
                )
        except (ValueError, pd.errors.ParserError) as e:
            # EmptyDataError is a ValueError subclass
            raise IngestionError(
                f"Could not parse question file {self.filepath}: {e}"
            ) from e

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise IngestionError(
                f"Question file {self.filepath.name} missing columns: {missing}"
            )

        if "labels" not in df.columns:
            df["labels"] = None

        logger.info("Read %d question rows", len(df))
        return df[["question", "answer", "labels"]]


def load_questions(
    filepath: Optional[Path] = None, cleaner: Optional[QuestionCleaner] = None
) -> List[Question]:
    """Read, clean and convert a question bank file in one step."""
    cleaner = cleaner or QuestionCleaner()
    raw = QuestionBankIngester(filepath).read()
    return cleaner.to_questions(cleaner.clean(raw))
