import logging
from logging.handlers import RotatingFileHandler

import pytest

from movie_scores.config.logging import setup_logging


@pytest.fixture
def root_handlers():
    """Restore the root logger after each test."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)


def test_setup_logging_creates_log_files(tmp_path, root_handlers):
    log_dir = tmp_path / "nested" / "logs"
    setup_logging(log_dir)

    logging.getLogger("movie_scores.test").error("score write failed")
    for handler in root_handlers.handlers:
        handler.flush()

    assert "score write failed" in (log_dir / "info.log").read_text()
    assert "score write failed" in (log_dir / "error.log").read_text()


def test_error_log_skips_info(tmp_path, root_handlers):
    setup_logging(tmp_path)

    logging.getLogger("movie_scores.test").info("user 1 scored movie 1")
    for handler in root_handlers.handlers:
        handler.flush()

    assert "user 1 scored movie 1" in (tmp_path / "info.log").read_text()
    assert "user 1 scored movie 1" not in (tmp_path / "error.log").read_text()


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path, root_handlers):
    setup_logging(tmp_path)
    first = len(root_handlers.handlers)
    setup_logging(tmp_path)

    assert len(root_handlers.handlers) == first
    file_handlers = [h for h in root_handlers.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 2
