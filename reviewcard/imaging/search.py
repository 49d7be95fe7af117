"""Integer bisection shared by the font-size and wrap-width searches."""

from typing import Callable


def bisect(lower: int, upper: int, advance: Callable[[int], bool]) -> int:
    """
    Narrow ``[lower, upper)`` until it collapses to a single value and return it.

    ``advance(mid)`` returning True moves the lower bound up to ``mid``, False moves
    the upper bound down. The predicate may keep state between calls.
    """
    while upper - lower > 1:
        mid = (lower + upper) // 2
        if advance(mid):
            lower = mid
        else:
            upper = mid
    return lower
