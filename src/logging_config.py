import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FILENAME = "wits_wagers.log"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Configure logging for the Wits & Wagers engine.

    The rotating file always receives DEBUG records (ignored extra chips,
    phase moves); ``log_level`` only filters the console.
    """
    log_dir = Path(log_dir) if log_dir else Path(__file__).parent.parent / "logs"

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return  # Already configured

    log_dir.mkdir(parents=True, exist_ok=True)
    console_level = getattr(logging, log_level.upper(), logging.INFO)

    # Root passes everything; each handler applies its own threshold
    root_logger.setLevel(logging.DEBUG)

    # 5MB per file, keep 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILENAME, maxBytes=5 * 1024 * 1024, backupCount=3
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).info(
        "Logging initialized (console=%s, file=%s)",
        logging.getLevelName(console_level),
        log_dir / LOG_FILENAME,
    )
