"""
Bisection over a range of numbers (e.g. block numbers) to locate the pair of
adjacent numbers between which some state (e.g. the runtime spec version) changes.

    chopper = BinaryChopper((0, state_at(0)), (end, state_at(end)))
    n = chopper.next_value()
    while n is not None:
        chopper.set_state(state_at(n))
        n = chopper.next_value()
    (low, low_state), (high, high_state) = chopper.bounds
"""
from typing import Any, Optional, Tuple

Bound = Tuple[int, Any]


class BinaryChopper:
    def __init__(self, low: Bound, high: Bound):
        self.low = low
        self.high = high

    @property
    def bounds(self) -> Tuple[Bound, Bound]:
        return self.low, self.high

    def finished(self) -> bool:
        return self.low[0] == self.high[0] or self.low[0] + 1 == self.high[0]

    def next_value(self) -> Optional[int]:
        """
        Number whose state is needed next, or None once the bounds are equal or adjacent.
        """
        if self.finished():
            return None
        return self.mid()

    def set_state(self, state):
        """
        Hand over the state for the number returned by `next_value`.
        A state equal to the low state moves the low bound up, anything else moves the high bound down.
        """
        mid = self.mid()
        if state == self.low[1]:
            self.low = (mid, state)
        else:
            self.high = (mid, state)

    def mid(self) -> int:
        return (self.low[0] + self.high[0]) // 2


def find_changes(state_at, start: int, end: int):
    """
    Yield (number, new_state) for every number in (start, end] at which
    `state_at(number)` differs from `state_at(number - 1)`.

    States are assumed to never return to an earlier value, which holds for
    runtime spec versions.
    """
    low_state = state_at(start)
    high_state = state_at(end)
    while start != end and low_state != high_state:
        chopper = BinaryChopper((start, low_state), (end, high_state))
        n = chopper.next_value()
        while n is not None:
            chopper.set_state(state_at(n))
            n = chopper.next_value()
        _, (start, low_state) = chopper.bounds
        yield start, low_state
