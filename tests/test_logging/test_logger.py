import pytest_check as check
from colourconv import LogLevel, logger
from colourconv._logging import Logger


def test_singleton() -> None:
    check.is_(Logger(), logger)


def test_set_level() -> None:
    check.equal(logger.level, LogLevel.ERROR)
    try:
        logger.set_level(LogLevel.TRACE)
        check.equal(logger.level, LogLevel.TRACE)
        logger.set_level(LogLevel.DEBUG)
        check.equal(logger.level, LogLevel.DEBUG)
        logger.trace('not printed')
    finally:
        logger.set_level(LogLevel.ERROR)
    check.equal(logger.level, LogLevel.ERROR)
