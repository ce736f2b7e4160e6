"""
Tests for the logger factory
"""
import logging

from suikeys.core import PACKAGE_LOGGER, get_logger


def test_no_duplicate_handlers():
    first = get_logger("tests.logging.duplicate")
    second = get_logger("tests.logging.duplicate")
    assert first is second
    assert len(second.handlers) == 1, "Logger handlers duplicated on second call"


def test_package_loggers_share_handlers():
    """
    Loggers inside the package propagate to the package logger instead of holding their own handlers
    """
    derivation = get_logger("suikeys.wallet.derivation")
    mnemonic = get_logger("suikeys.wallet.mnemonic")
    package = logging.getLogger(PACKAGE_LOGGER)

    assert derivation.handlers == [] and mnemonic.handlers == []
    assert derivation.propagate and mnemonic.propagate
    assert len(package.handlers) == 1, "Package logger should hold a single console handler"


def test_prefix_outside_package():
    logger = get_logger("suikeysextra.module")
    assert len(logger.handlers) == 1, "Logger outside the package did not get its own handler"


def test_log_level():
    logger = get_logger("tests.logging.level", log_level="warning")
    assert logger.level == logging.WARNING


def test_log_file(tmp_path):
    log_file = tmp_path / "logs" / "suikeys.log"
    logger = get_logger("tests.logging.file", log_file=log_file, format_string="%(levelname)s %(message)s")
    logger.info("seed derived")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert log_file.read_text(encoding="utf-8").strip() == "INFO seed derived"
