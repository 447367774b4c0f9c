#!/usr/bin/env python3

"""Helpers for module loggers and call timing."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast, overload

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, typically called with ``__name__``."""
    return logging.getLogger(name)


@overload
def log_timing(func: F) -> F: ...


@overload
def log_timing(*, level: int = logging.DEBUG) -> Callable[[F], F]: ...


def log_timing(func: F | None = None, *, level: int = logging.DEBUG) -> Any:
    """
    Decorator logging how long each call of a function takes.

    Usable bare (``@log_timing``) or with a level
    (``@log_timing(level=logging.INFO)``). Durations are reported in
    milliseconds. A call ending in SystemExit is logged with its exit code at
    the given level; any other exception is logged at ERROR. Both re-raise.

    Args:
        func: Function to decorate when used bare
        level: Level for the start, completion and exit messages

    Returns:
        The wrapped function, or a decorator when called with arguments only
    """

    def decorate(target: F) -> F:
        logger = get_logger(target.__module__)
        name = target.__qualname__

        @wraps(target)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.log(level, f"Starting {name}")
            start = perf_counter()
            try:
                result = target(*args, **kwargs)
            except SystemExit as e:
                logger.log(level, f"{name} exited with code {e.code} after {_elapsed_ms(start)}")
                raise
            except Exception as e:
                logger.error(f"Failed {name} after {_elapsed_ms(start)}: {e}")
                raise
            logger.log(level, f"Completed {name} in {_elapsed_ms(start)}")
            return result

        return cast("F", wrapper)

    if func is not None:
        return decorate(func)
    return decorate


def _elapsed_ms(start: float) -> str:
    return f"{(perf_counter() - start) * 1000:.1f}ms"
