# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging
import sys
from contextlib import contextmanager

from colorama import Fore

from npm_semver import get_logger
from npm_semver.environment import SemverSettings


class SemverStdoutFilter(logging.Filter):
    """
    Debug and info go to stdout
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


class SemverStderrFilter(logging.Filter):
    """
    Warning, error and critical go to stderr
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.WARNING


class SemverFormatter(logging.Formatter):
    """
    Prefix every message with its level name

    -  10 -> debug
    -  20 -> info (notice)
    -  30 -> warning
    -  40 -> error
    -  50 -> critical
    """

    fmt: str = '%(message)s'

    PREFIX = {
        logging.DEBUG: 'DEBUG',
        logging.INFO: 'NOTICE',
        logging.WARNING: 'WARNING',
        logging.ERROR: 'ERROR',
        logging.CRITICAL: 'FATAL',
    }

    COLOR = {
        logging.DEBUG: Fore.LIGHTBLACK_EX,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED,
    }

    def __init__(self, colored: bool = True) -> None:
        self.colored = colored

        super().__init__(fmt=self.fmt)

    def format(self, record: logging.LogRecord) -> str:
        prefix = self.PREFIX.get(record.levelno, record.levelname)
        message = super().format(record)
        if self.colored and sys.stdout.isatty() and sys.stderr.isatty():
            color = self.COLOR.get(record.levelno, '')
            return f'{color}{prefix}: {message}{Fore.RESET}'

        return f'{prefix}: {message}'


@contextmanager
def suppress_logging(level: int = logging.CRITICAL):
    """Suppress logging temporarily"""
    logging.disable(level)

    try:
        yield
    finally:
        logging.disable(logging.NOTSET)


def setup_logging() -> None:
    """setup logger for the semver tools"""
    logger = get_logger()
    settings = SemverSettings()

    if settings.DEBUG_MODE:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    # cleanup first
    logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(SemverStdoutFilter())
    stdout_handler.setFormatter(SemverFormatter(colored=not settings.NO_COLORS))
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.addFilter(SemverStderrFilter())
    stderr_handler.setFormatter(SemverFormatter(colored=not settings.NO_COLORS))
    logger.addHandler(stderr_handler)

    logger.propagate = False  # ends here, don't propagate to root logger
