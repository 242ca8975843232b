# tests/test_logging.py
import logging

import pytest

from tutorhub.logging_config import HANDLER_PREFIX, setup_logging


def _ours(root):
    return [h for h in root.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


@pytest.fixture
def root_logger():
    """Detach the app's handlers for the test and put them back afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = _ours(root), root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    yield root
    for handler in _ours(root):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_logging_writes_to_logfile(root_logger, tmp_path):
    logfile = tmp_path / "tutorhub.log"

    setup_logging("debug", str(logfile))
    logging.getLogger("tutorhub.test").info("booked session %s", "abc")
    for handler in _ours(root_logger):
        handler.flush()

    assert root_logger.level == logging.DEBUG
    assert len(_ours(root_logger)) == 2
    assert "[INFO] tutorhub.test: booked session abc" in logfile.read_text(encoding="utf-8")


def test_setup_logging_configures_once(root_logger):
    setup_logging("INFO")
    setup_logging("INFO")

    assert len(_ours(root_logger)) == 1
