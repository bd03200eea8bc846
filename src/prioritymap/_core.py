"""
PriorityMap: a map whose keys each hold a PriorityValue.

Several contexts can set a value for the same key; get() returns the one
winning value per key (highest priority, then most recent). Each key's
contributions live in its own PriorityValue, and resolved values are
cached per key until a write or delete touches that key.

Keys whose last context is deleted are pruned, so every key present in the
map resolves to a value.

Thread safety: NOT thread-safe. Use external synchronization (e.g., one
``threading.Lock`` around the whole map) for concurrent access.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import prioritymap._config as _config
import prioritymap._entry as _entry
import prioritymap._frozen as _frozen
import prioritymap._ticks as _ticks
import prioritymap._value as _value

_logger = _logging.getLogger(__name__)

_K = _typing.TypeVar("_K", bound=_typing.Hashable)
_V = _typing.TypeVar("_V")
_D = _typing.TypeVar("_D")

# Marks "no value" so None can be stored and cached like any other value
_MISSING: _typing.Any = object()


class PriorityMap(_typing.Generic[_K, _V]):
    """
    A map that can hold several values per key but only returns one.

    The value returned is the most recent value with the highest priority.

    Example:
        >>> pmap = PriorityMap()
        >>> pmap.set("x", 1, "A", 1)
        >>> pmap.set("x", 2, "B", 5)
        >>> pmap.get("x")  # higher priority wins
        2
        >>> pmap.set("x", 3, "A", 5)
        >>> pmap.get("x")  # equal priority, later write wins
        3
        >>> pmap.delete("x", "A")
        >>> pmap.get("x")
        2

    Args:
        clock: Tick source shared by every slot. Defaults to the
            process-wide counter.
        config: Default context and priority for every slot.

    Note:
        ``is_empty()`` returns True when the map has no keys. Earlier
        releases of this structure reported the opposite (True when the map
        held keys); code that relied on that must switch to
        ``not pmap.is_empty()`` or ``len(pmap) > 0``.
    """

    def __init__(
        self,
        *,
        clock: _ticks.TickCounter | None = None,
        config: _config.PriorityConfig | None = None,
    ) -> None:
        self._clock = clock if clock is not None else _ticks.shared_counter()
        self._config = config if config is not None else _config.PriorityConfig()
        self._slots: dict[_K, _value.PriorityValue[_V]] = {}
        self._get_cache: dict[_K, _V] = {}

    @property
    def clock(self) -> _ticks.TickCounter:
        """Tick source shared by every slot."""
        return self._clock

    @property
    def config(self) -> _config.PriorityConfig:
        """Defaults in effect for every slot."""
        return self._config

    # =========================================================================
    # Single-key operations
    # =========================================================================

    @_typing.overload
    def get(self, key: _K) -> _V | None: ...

    @_typing.overload
    def get(self, key: _K, default: _D) -> _V | _D: ...

    def get(self, key: _K, default: _typing.Any = None) -> _typing.Any:
        """
        Return the winning value for key.

        Args:
            key: The key to look up.
            default: Returned when key has no value.
        """
        if key in self._get_cache:
            return self._get_cache[key]

        slot = self._slots.get(key)
        if slot is None:
            return default

        value = slot.get(_MISSING)
        if value is _MISSING:
            return default

        self._get_cache[key] = value
        return value

    def set(
        self,
        key: _K,
        value: _V,
        context: str | None = None,
        priority: int | None = None,
    ) -> None:
        """
        Set key's value for a context, taking priority into account.

        Args:
            key: The key to write.
            value: The value to contribute.
            context: Writer label. None uses config.default_context.
            priority: Rank of this value. None uses config.default_priority.

        Raises:
            TypeError: If context is not a string.
        """
        self._get_cache.pop(key, None)
        slot = self._slots.get(key)
        if slot is not None:
            slot.set(value, context, priority)
            return

        # Stored only after the write succeeds; keys never map to an empty slot
        slot = _value.PriorityValue(clock=self._clock, config=self._config)
        slot.set(value, context, priority)
        self._slots[key] = slot
        _logger.debug("Created slot for key %r", key)

    def delete(self, key: _K, context: str | None = None) -> None:
        """
        Remove a context's value for key.

        Does nothing if key or context holds no value. The key itself is
        removed once its last context is deleted.

        Raises:
            TypeError: If context is not a string.
        """
        self._get_cache.pop(key, None)
        slot = self._slots.get(key)
        if slot is None:
            return
        slot.delete(context)
        if slot.is_empty():
            del self._slots[key]
            _logger.debug("Pruned key %r (no contexts left)", key)

    def has(self, key: _K) -> bool:
        """Check if key currently resolves to a value."""
        return self.get(key, _MISSING) is not _MISSING

    def get_with_context(self, key: _K) -> tuple[_V, str] | None:
        """
        Return key's winning value and the context that set it.

        Returns:
            (value, context), or None if key has no value.
        """
        slot = self._slots.get(key)
        if slot is None:
            return None
        return slot.get_with_context()

    def contexts(self, key: _K) -> _frozen.FrozenMapping[str, _entry.ContextEntry]:
        """
        Return a read-only view of key's context → entry table.

        Empty if key is not present.
        """
        slot = self._slots.get(key)
        if slot is None:
            return _frozen.FrozenMapping({})
        return slot.contexts

    # =========================================================================
    # Whole-map operations
    # =========================================================================

    def to_dict(self) -> dict[_K, _V]:
        """
        Return a plain dict of key → winning value.

        The dict is a snapshot; later writes do not affect it.
        """
        result: dict[_K, _V] = {}
        for key in self._slots:
            value = self.get(key, _MISSING)
            if value is not _MISSING:
                result[key] = value
        return result

    def keys(self) -> list[_K]:
        """Return the keys currently present."""
        return list(self._slots)

    def values(self) -> list[_V]:
        """Return the winning values, in to_dict() order."""
        return list(self.to_dict().values())

    def items(self) -> list[tuple[_K, _V]]:
        """Return (key, winning value) pairs, in to_dict() order."""
        return list(self.to_dict().items())

    def for_each(self, callback: _typing.Callable[[_V, _K, PriorityMap[_K, _V]], object]) -> None:
        """
        Call callback(value, key, self) once per to_dict() entry.

        Iterates over a snapshot, so the callback may modify the map.
        """
        for key, value in self.to_dict().items():
            callback(value, key, self)

    def clear(self) -> None:
        """Remove every key and every cached result."""
        self._get_cache.clear()
        for slot in self._slots.values():
            slot.clear()
        self._slots.clear()
        _logger.debug("Cleared PriorityMap")

    def size(self) -> int:
        """Return the number of keys present."""
        return len(self._slots)

    def is_empty(self) -> bool:
        """Check if the map holds no keys."""
        return self.size() == 0

    # =========================================================================
    # Mapping protocol
    # =========================================================================

    def __getitem__(self, key: _K) -> _V:
        """
        Return the winning value for key.

        Raises:
            KeyError: If key has no value.
        """
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return _typing.cast(_V, value)

    def __setitem__(self, key: _K, value: _V) -> None:
        """Set key's value for the default context at the default priority."""
        self.set(key, value)

    def __delitem__(self, key: _K) -> None:
        """
        Delete key's value for the default context.

        Other contexts' values for key are left in place.

        Raises:
            KeyError: If key has no value for the default context.
        """
        slot = self._slots.get(key)
        if slot is None or self._config.default_context not in slot:
            raise KeyError(key)
        self.delete(key)

    def __contains__(self, key: object) -> bool:
        """Check if key currently resolves to a value."""
        try:
            return self.has(_typing.cast(_K, key))
        except TypeError:
            # Unhashable keys are never present
            return False

    def __iter__(self) -> _typing.Iterator[_K]:
        """Iterate over a snapshot of the keys."""
        return iter(self.keys())

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
