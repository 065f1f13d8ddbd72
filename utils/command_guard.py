"""
utils/command_guard.py
----------------------
Failure boundary for menu commands.
Any error raised while a command runs is reported and the session goes on.
"""

from functools import wraps
from typing import Callable

from utils.logger import get_logger

logger = get_logger(__name__)


def command_boundary(func: Callable):
    """
    Decorator that confines a failure to the command that raised it.

    Usage:
        @command_boundary
        def add_customer():
            ...

    Behavior:
        - Bad numbers or dates, backend rejections and failed lookups are
          logged at ERROR with their message, then control returns to the menu.
        - Statements that already succeeded inside the command are kept.
        - KeyboardInterrupt is not caught.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{func.__name__} failed: {e}")
            return None

    return wrapper
