import logging

from memokit.core.logging import setup_logging


def test_setup_logging_levels_and_single_handler():
    setup_logging(verbose=True)
    logger = logging.getLogger("memokit")
    assert logger.level == logging.DEBUG
    count = len(logger.handlers)

    setup_logging(verbose=False)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == count
