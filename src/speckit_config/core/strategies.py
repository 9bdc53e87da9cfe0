"""Ordered fallback chains.

Root and branch discovery are both expressed as a list of strategy
functions. Each strategy returns a value or ``None``; the chain takes the
first real answer and never calls a strategy twice.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_match(strategies: Iterable[Callable[..., T | None]], *args, **kwargs) -> T | None:
    """Run ``strategies`` in order and return the first usable result.

    ``None`` and empty strings are treated as a miss so that a command
    printing nothing falls through to the next strategy.

    Args:
        strategies: Strategy callables, highest priority first.
        *args: Positional arguments passed to every strategy.
        **kwargs: Keyword arguments passed to every strategy.

    Returns:
        The first non-empty result, or None if every strategy missed.
    """
    for strategy in strategies:
        name = getattr(strategy, "__name__", repr(strategy))
        result = strategy(*args, **kwargs)
        if result is None or result == "":
            logger.debug("Strategy %s: no result", name)
            continue
        logger.debug("Strategy %s: %s", name, result)
        return result
    return None
