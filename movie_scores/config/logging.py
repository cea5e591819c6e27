import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from movie_scores.config.environment import LOG_DIR

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 1

# marks the handlers installed here so a second setup does not duplicate them
_HANDLER_TAG = "_movie_scores_handler"


def _file_handler(path: Path, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(log_dir: Optional[Union[str, Path]] = None):
    """Send INFO and above to ``info.log`` and the console, ERROR and above to ``error.log``.

    Safe to call more than once, earlier handlers of this module are replaced.
    """
    logs_dir = Path(log_dir or LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    handlers = [
        _file_handler(logs_dir / "info.log", logging.INFO, formatter),
        _file_handler(logs_dir / "error.log", logging.ERROR, formatter),
        console_handler,
    ]

    root_logger = logging.getLogger()
    for old in [h for h in root_logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        root_logger.removeHandler(old)
        old.close()

    root_logger.setLevel(logging.INFO)
    for handler in handlers:
        setattr(handler, _HANDLER_TAG, True)
        root_logger.addHandler(handler)

    logging.info(f"Logging system initialized in {logs_dir}")
