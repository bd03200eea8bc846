"""
Read-only view over a PriorityValue's contexts.

A PriorityValue memoizes its winner, so its context table must only change
through set()/delete()/clear(). FrozenMapping hands that table out without
giving callers a way to write to it behind the cache's back.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

_K = _typing.TypeVar("_K")
_V = _typing.TypeVar("_V")


class FrozenMapping(_abc.Mapping[_K, _V]):
    """
    Read-only view of a dict.

    The view is live: it reflects later changes to the wrapped dict.
    Use dict(view) for a snapshot.

    Example:
        >>> frozen = FrozenMapping({"A": 1})
        >>> frozen["A"]
        1
        >>> frozen["A"] = 2  # TypeError: immutable
    """

    __slots__ = ("_data",)

    def __init__(self, data: dict[_K, _V]) -> None:
        self._data = data

    def __getitem__(self, key: _K) -> _V:
        return self._data[key]

    def __iter__(self) -> _typing.Iterator[_K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with same content."""
        if isinstance(other, _abc.Mapping):
            return dict(self) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        """FrozenMapping is not hashable (the wrapped dict may change)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")
