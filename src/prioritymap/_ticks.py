"""
Tick counter for PriorityValue recency ordering.

Every write to a PriorityValue is stamped with a tick taken from a
TickCounter. Ticks only ever increase, so among entries with equal
priority the one with the larger tick was written last.

One counter is shared by the whole process (see shared_counter()) and is
the default clock for every PriorityValue and PriorityMap. Tests pass their
own counter to get deterministic ticks.

Example:
    >>> clock = TickCounter()
    >>> clock.next_tick(), clock.next_tick()
    (0, 1)
"""

from __future__ import annotations

import itertools as _itertools
import typing as _typing

# Monotonic write stamp
Tick: _typing.TypeAlias = int


class TickCounter:
    """
    Monotonic integer sequence.

    There is no reset: a counter can only move forward. Create a new
    counter if a fresh ordering is needed.

    Thread safety: NOT thread-safe. Callers that share a counter between
    threads must serialize access to it.
    """

    __slots__ = ("_counter", "_last")

    def __init__(self, start: int = 0) -> None:
        """
        Create a counter.

        Args:
            start: First tick to issue.
        """
        self._counter = _itertools.count(start)
        self._last: Tick | None = None

    @property
    def last(self) -> Tick | None:
        """Most recently issued tick, or None if none issued yet."""
        return self._last

    def next_tick(self) -> Tick:
        """Issue the next tick. Always greater than every earlier one."""
        self._last = next(self._counter)
        return self._last

    def __repr__(self) -> str:
        return f"TickCounter(last={self._last!r})"


_SHARED = TickCounter()


def shared_counter() -> TickCounter:
    """Return the process-wide counter used when no clock is given."""
    return _SHARED
