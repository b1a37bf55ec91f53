"""Test the centralized logging functionality."""

import logging
from io import StringIO

from pathmatrix.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


def test_centralized_logging():
    disable_debug_logging()
    logger = get_logger("pathmatrix.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    try:
        logger.info("Test info message")
        assert "Test info message" in log_capture.getvalue()

        log_capture.seek(0)
        log_capture.truncate(0)
        logger.debug("Test debug message")
        assert "Test debug message" not in log_capture.getvalue()

        enable_debug_logging()
        logger.debug("Test debug message after enable")
        assert "Test debug message after enable" in log_capture.getvalue()
    finally:
        logger.removeHandler(handler)
        disable_debug_logging()


def test_logger_naming():
    assert get_logger("pathmatrix.solver").name == "pathmatrix.solver"


def test_set_global_log_level():
    set_global_log_level(logging.WARNING)
    try:
        assert logging.getLogger("pathmatrix").level == logging.WARNING
    finally:
        set_global_log_level(logging.INFO)


def test_reset_and_custom_handler():
    stream = StringIO()
    reset_logging()
    try:
        setup_root_logger(
            level=logging.DEBUG,
            format_string="%(levelname)s:%(message)s",
            handler=logging.StreamHandler(stream),
        )
        root = logging.getLogger("pathmatrix")
        assert len(root.handlers) == 1
        get_logger("pathmatrix.x").debug("hello")
        assert "DEBUG:hello" in stream.getvalue()

        # A second setup call keeps the existing handler
        setup_root_logger(handler=logging.StreamHandler(StringIO()))
        assert len(root.handlers) == 1
    finally:
        reset_logging()
        setup_root_logger()


def test_default_format_applied():
    reset_logging()
    try:
        stream = StringIO()
        setup_root_logger(handler=logging.StreamHandler(stream))
        get_logger("pathmatrix.fmt").warning("formatted")
        assert " - pathmatrix.fmt - WARNING - formatted" in stream.getvalue()
    finally:
        reset_logging()
        setup_root_logger()
