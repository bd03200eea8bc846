"""
prioritymap: layered values resolved by priority and recency.

Several writers ("contexts") may each set a value for the same key; readers
see exactly one value per key. Higher priority wins; among equal priorities
the most recent write wins.

Example:
    >>> from prioritymap import PriorityMap
    >>> flags = PriorityMap()
    >>> flags.set("dark_mode", False, context="defaults", priority=0)
    >>> flags.set("dark_mode", True, context="user", priority=10)
    >>> flags["dark_mode"]
    True
"""

from prioritymap._config import ConfigBase, PriorityConfig
from prioritymap._core import PriorityMap
from prioritymap._entry import ContextEntry
from prioritymap._frozen import FrozenMapping
from prioritymap._ticks import Tick, TickCounter, shared_counter
from prioritymap._value import PriorityBool, PriorityValue

__all__ = [
    "ConfigBase",
    "ContextEntry",
    "FrozenMapping",
    "PriorityBool",
    "PriorityConfig",
    "PriorityMap",
    "PriorityValue",
    "Tick",
    "TickCounter",
    "shared_counter",
]
