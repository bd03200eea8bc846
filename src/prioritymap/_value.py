"""
PriorityValue: a container holding one value per context, exposing one.

Each context (a string label naming a writer) holds at most one entry.
get() returns the value of the winning entry:

1. Highest priority wins
2. Among equal priorities, the most recently written wins

The winner is memoized and dropped on every mutation.

Example:
    >>> pv = PriorityValue()
    >>> pv.set("low", context="base", priority=1)
    >>> pv.set("high", context="user", priority=5)
    >>> pv.get()
    'high'
    >>> pv.delete("user")
    >>> pv.get()
    'low'
"""

from __future__ import annotations

import typing as _typing

import prioritymap._config as _config
import prioritymap._entry as _entry
import prioritymap._frozen as _frozen
import prioritymap._ticks as _ticks

_V = _typing.TypeVar("_V")
_D = _typing.TypeVar("_D")


def _check_context(context: object) -> None:
    """Raise TypeError unless context is a string label."""
    if not isinstance(context, str):
        raise TypeError(
            f"Context must be a string, got {type(context).__name__}"
        )


class PriorityValue(_typing.Generic[_V]):
    """
    Holds several contexts' values while only exposing one.

    Args:
        clock: Tick source for recency ordering. Defaults to the shared
            process-wide counter.
        config: Default context and priority. Defaults to
            PriorityConfig() ("Default", 1).

    Note:
        Not thread-safe. Serialize access externally if several threads
        write to the same instance.
    """

    __slots__ = ("_clock", "_config", "_contexts", "_cache")

    def __init__(
        self,
        *,
        clock: _ticks.TickCounter | None = None,
        config: _config.PriorityConfig | None = None,
    ) -> None:
        self._clock = clock if clock is not None else _ticks.shared_counter()
        self._config = config if config is not None else _config.PriorityConfig()
        self._contexts: dict[str, _entry.ContextEntry] = {}
        # (context, entry) of the current winner, None when not computed
        self._cache: tuple[str, _entry.ContextEntry] | None = None

    @property
    def clock(self) -> _ticks.TickCounter:
        """Tick source used to stamp writes."""
        return self._clock

    @property
    def config(self) -> _config.PriorityConfig:
        """Defaults in effect for this value."""
        return self._config

    @property
    def contexts(self) -> _frozen.FrozenMapping[str, _entry.ContextEntry]:
        """Read-only live view of context → entry."""
        return _frozen.FrozenMapping(self._contexts)

    # =========================================================================
    # Mutation
    # =========================================================================

    def _mutate(
        self,
        context: str | None,
        entry: _entry.ContextEntry | None,
    ) -> None:
        """
        Apply one change to the context table and drop the memoized winner.

        This is the only place _contexts is written.

        Args:
            context: Context to change. None means every context.
            entry: New entry for context, or None to remove it.
        """
        self._cache = None
        if context is None:
            self._contexts.clear()
        elif entry is None:
            self._contexts.pop(context, None)
        else:
            self._contexts[context] = entry

    def set(
        self,
        value: _V,
        context: str | None = None,
        priority: int | None = None,
    ) -> None:
        """
        Set the value for a context, replacing any earlier entry it had.

        Args:
            value: The value to contribute.
            context: Writer label. None uses config.default_context.
            priority: Rank of this value. None uses config.default_priority.

        Raises:
            TypeError: If context is not a string.
        """
        context = self._config.resolve_context(context)
        _check_context(context)
        entry = _entry.ContextEntry(
            created=self._clock.next_tick(),
            priority=self._config.resolve_priority(priority),
            value=value,
        )
        self._mutate(context, entry)

    def delete(self, context: str | None = None) -> None:
        """
        Remove a context's value. Does nothing if the context has none.

        Raises:
            TypeError: If context is not a string.
        """
        context = self._config.resolve_context(context)
        _check_context(context)
        self._mutate(context, None)

    def clear(self) -> None:
        """Remove every context's value."""
        self._mutate(None, None)

    # =========================================================================
    # Resolution
    # =========================================================================

    def _resolve(self) -> tuple[str, _entry.ContextEntry] | None:
        """Return the memoized winner, computing it if needed."""
        if self._cache is not None:
            return self._cache

        best: tuple[str, _entry.ContextEntry] | None = None
        for context, entry in self._contexts.items():
            if entry.outranks(best[1] if best is not None else None):
                best = (context, entry)

        self._cache = best
        return best

    @_typing.overload
    def get(self) -> _V | None: ...

    @_typing.overload
    def get(self, default: _D) -> _V | _D: ...

    def get(self, default: _typing.Any = None) -> _typing.Any:
        """
        Return the winning value.

        Args:
            default: Returned when no context holds a value.
        """
        winner = self._resolve()
        if winner is None:
            return default
        return winner[1].value

    def get_with_context(self) -> tuple[_V, str] | None:
        """
        Return the winning value together with the context that set it.

        Returns:
            (value, context), or None if empty.
        """
        winner = self._resolve()
        if winner is None:
            return None
        context, entry = winner
        return entry.value, context

    def is_empty(self) -> bool:
        """Check if no context currently holds a value."""
        return not self._contexts

    def __len__(self) -> int:
        """Return the number of contexts holding a value."""
        return len(self._contexts)

    def __contains__(self, context: object) -> bool:
        """Check if a context holds a value."""
        if not isinstance(context, str):
            return False
        return context in self._contexts

    def __repr__(self) -> str:
        winner = self._resolve()
        if winner is None:
            return f"{type(self).__name__}(<empty>)"
        context, entry = winner
        return (
            f"{type(self).__name__}({entry.value!r}, context={context!r}, "
            f"contexts={len(self._contexts)})"
        )


class PriorityBool(PriorityValue[bool]):
    """
    PriorityValue for on/off switches.

    Example:
        >>> flag = PriorityBool()
        >>> flag.enable("defaults", priority=0)
        >>> flag.disable("admin", priority=10)
        >>> flag.get()
        False
    """

    __slots__ = ()

    def enable(self, context: str | None = None, priority: int | None = None) -> None:
        """Set the value to True for context."""
        self.set(True, context, priority)

    def disable(self, context: str | None = None, priority: int | None = None) -> None:
        """Set the value to False for context."""
        self.set(False, context, priority)
