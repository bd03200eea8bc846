"""
Shared pytest fixtures for prioritymap tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import pytest as _pytest

import prioritymap


@_pytest.fixture
def clock() -> prioritymap.TickCounter:
    """Private tick counter so tests get deterministic ticks."""
    return prioritymap.TickCounter()


@_pytest.fixture
def pvalue(clock: prioritymap.TickCounter) -> prioritymap.PriorityValue[object]:
    """Empty PriorityValue using the test clock."""
    return prioritymap.PriorityValue(clock=clock)


@_pytest.fixture
def pmap(clock: prioritymap.TickCounter) -> prioritymap.PriorityMap[str, object]:
    """Empty PriorityMap using the test clock."""
    return prioritymap.PriorityMap(clock=clock)


@_pytest.fixture
def layered_map(
    pmap: prioritymap.PriorityMap[str, object],
) -> prioritymap.PriorityMap[str, object]:
    """Map with a few keys written by several contexts."""
    pmap.set("theme", "light", "defaults", 0)
    pmap.set("theme", "dark", "user", 10)
    pmap.set("font", "mono", "defaults", 0)
    pmap.set("debug", False, "defaults", 0)
    pmap.set("debug", True, "cli", 5)
    return pmap
