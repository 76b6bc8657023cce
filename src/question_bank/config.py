from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Question files
QUESTIONS_DIR = PROJECT_ROOT / "data" / "questions"
DEFAULT_QUESTIONS_FILE = QUESTIONS_DIR / "questions.json"

SUPPORTED_SUFFIXES = {".json", ".csv"}

# Columns every question file must provide; "labels" is optional
REQUIRED_COLUMNS = ["question", "answer"]

# Separator for the labels column in CSV files (e.g. "history;europe")
LABEL_SEPARATOR = ";"
