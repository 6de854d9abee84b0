"""
Logging configuration for the profile_matcher CLI.

The library modules only create loggers; the console handler is installed here.
Calling setup_logging again swaps that handler and leaves any others alone.
"""
import logging
import sys
from typing import Optional, Union

CONSOLE_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Configure the root logger with a stdout handler.

    Args:
        level: Logging level, as an int or a name such as "DEBUG"

    Returns:
        Configured root logger
    """
    global _console_handler
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {name}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setLevel(level)
    _console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    root_logger.addHandler(_console_handler)

    return root_logger
