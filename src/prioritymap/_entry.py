"""
ContextEntry: one context's contribution to a PriorityValue.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import typing as _typing

import prioritymap._ticks as _ticks


@_dataclasses.dataclass(frozen=True, slots=True)
class ContextEntry:
    """A value written by one context, with its priority and write tick."""

    created: _ticks.Tick
    priority: int
    value: _typing.Any

    def outranks(self, other: ContextEntry | None) -> bool:
        """
        Check whether this entry should replace other as the winner.

        Higher priority always wins. With equal priority, the entry
        written later (higher tick) wins. Ticks are unique, so the
        comparison never depends on scan order.

        Args:
            other: Current best entry, or None if there is none yet.

        Returns:
            True if this entry beats other.
        """
        if other is None:
            return True
        if self.priority > other.priority:
            return True
        return self.created > other.created and self.priority >= other.priority
