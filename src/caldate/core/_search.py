from __future__ import annotations

from typing import Callable, TypeVar

from .errors import OutOfRangeError

K = TypeVar("K")

DEFAULT_MAX_STEPS = 64


def find_enclosing_index(
    start_of: Callable[[int], K],
    target: K,
    *,
    guess: int,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> int:
    """
    Walk from `guess` to the unique n with start_of(n) <= target < start_of(n + 1).

    `start_of` must be strictly increasing. The walk gives up after `max_steps`
    moves in either direction and raises OutOfRangeError.
    """
    n = guess
    steps = 0
    while start_of(n) > target:
        n -= 1
        steps += 1
        if steps > max_steps:
            raise OutOfRangeError(f"No enclosing index within {max_steps} steps below {guess}")
    while start_of(n + 1) <= target:
        n += 1
        steps += 1
        if steps > max_steps:
            raise OutOfRangeError(f"No enclosing index within {max_steps} steps above {guess}")
    return n
