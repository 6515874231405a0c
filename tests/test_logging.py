"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from flownet.algorithms.max_flow import maximum_flow
from flownet.config import MAX_FLOW_CONFIG
from flownet.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()
    MAX_FLOW_CONFIG.log_augmentations = False


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("flownet.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("flownet.module1")
    assert logger1.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING

    logger2 = get_logger("flownet.module2")
    assert logger2.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    handler = logging.StreamHandler(StringIO())
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("flownet")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_default_format_applied_to_handler():
    capture = StringIO()
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(capture))

    get_logger("flownet.test.format").info("hello")
    out = capture.getvalue()
    assert " - flownet.test.format - INFO - hello" in out


def test_handler_formatter_preserved():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setFormatter(logging.Formatter("LEVEL:%(levelname)s|MSG:%(message)s"))
    setup_root_logger(level=logging.INFO, handler=handler)

    get_logger("flownet.test.format").info("hello")
    assert "LEVEL:INFO|MSG:hello" in capture.getvalue()


def test_enable_debug_logging_with_augmentations(caplog):
    enable_debug_logging(augmentations=True)
    assert MAX_FLOW_CONFIG.log_augmentations is True

    with caplog.at_level(logging.DEBUG, logger="flownet"):
        maximum_flow(["s", "a", "t"], [("s", 2, "a"), ("a", 2, "t")], "s", "t")
    assert any(
        r.getMessage().startswith("Augmentation 1:") for r in caplog.records
    )

    disable_debug_logging()
    assert MAX_FLOW_CONFIG.log_augmentations is False


def test_solver_debug_output_reaches_root_handler():
    capture = StringIO()
    setup_root_logger(level=logging.DEBUG, handler=logging.StreamHandler(capture))

    maximum_flow(["s", "t"], [("s", 4, "t")], "s", "t")
    out = capture.getvalue()
    assert "Built flow network with 2 nodes and 1 arcs" in out
    assert "Maximum flow 's' -> 't' is 4 after 1 augmentations" in out
