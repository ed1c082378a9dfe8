from __future__ import annotations

__all__: List[str] = []

import sys
from abc import ABC, ABCMeta
from enum import IntEnum
from threading import Lock
from typing import Any, Dict, List

import loguru


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


def _loguru_format(record: loguru.Record) -> str:
    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level.name: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>\n{exception}"
    )


class SingletonMeta(ABCMeta):
    _instances: Dict[object, Any] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        with cls._lock:
            if cls not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[cls] = instance
        return cls._instances[cls]


class Singleton(ABC, metaclass=SingletonMeta):
    ...


class Logger(Singleton):
    """Package logger writing to stderr through loguru"""

    __slots__ = ('__id', '__level')

    def __init__(self) -> None:
        self.__level = int(LogLevel.ERROR)
        ids_ = loguru.logger.configure(
            handlers=[
                dict(sink=sys.stderr, level=self.__level, format=_loguru_format, backtrace=True, diagnose=False)
            ],
        )
        self.__id = ids_.pop(0)

    @property
    def level(self) -> int:
        """Current minimum level of the stderr handler"""
        return self.__level

    def set_level(self, level: int) -> None:
        """
        Change the minimum level printed on stderr

        :param level:       New level, usually a LogLevel member
        """
        loguru.logger.remove(self.__id)
        self.__level = int(level)
        self.__id = loguru.logger.add(
            sys.stderr, level=self.__level, format=_loguru_format, backtrace=True, diagnose=False
        )

    def trace(self, message: str, /, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).trace(message)

    def debug(self, message: str, /, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).debug(message)

    def info(self, message: str, /, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).info(message)

    def warning(self, message: str, /, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).warning(message)


logger = Logger()
