"""Functions as values: passing, returning and capturing state in closures."""

from __future__ import annotations

import sys
from collections.abc import Callable

_SAMPLE_SENTENCE = "the sample function fits the accepted signature"
_ANNOUNCEMENT = "received a function argument"


def make_counter() -> Callable[[], int]:
    """Return a counter whose count starts at 0 and grows by one per call.

    Each counter keeps its own captured count, independent of other counters.
    """
    count = 0

    def counter() -> int:
        nonlocal count
        count += 1
        return count

    return counter


def announce_and_call(func: Callable[[], object]) -> Callable[[], object]:
    """Announce on stderr that a function was received, call it once and return it."""
    print(_ANNOUNCEMENT, file=sys.stderr)
    func()
    return func


def _sample() -> str:
    """Write the sample sentence to stderr and return it."""
    sentence = _SAMPLE_SENTENCE
    sys.stderr.write(sentence + "\n")
    return sentence


def demo() -> None:
    """Show functions passed as arguments and closures that keep their own state."""
    _sample()
    returned = announce_and_call(_sample)
    returned()

    counter = make_counter()
    print(counter())
    print(counter())

    inter1 = make_counter()
    inter2 = make_counter()
    print("inter1", inter1())
    print("inter2", inter2())
    print("inter1", inter1())