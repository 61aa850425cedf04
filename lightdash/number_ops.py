"""
Number helpers.
"""

import math
import random
from typing import Optional


def number_clamp(value: float, min: float, max: float) -> float:
    """
    Limits *value* to the inclusive range ``[min, max]``.

    Example::

        number_clamp(5, 0, 2)   # 2
        number_clamp(-1, 0, 2)  # 0
    """
    if value < min:
        return min
    elif value > max:
        return max
    else:
        return value


def number_in_range(value: float, min: float, max: float) -> bool:
    """Checks if *value* lies within the inclusive range ``[min, max]``."""
    return min <= value <= max


is_in_range = number_in_range


def number_random_float(min: float = 0, max: float = 1, rng: Optional[random.Random] = None) -> float:
    """
    Returns a random float between *min* and *max*.

    :param rng: Generator to draw from; the ``random`` module's shared one if omitted.
    """
    source = rng if rng is not None else random
    return source.uniform(min, max)


def number_random_int(min: float = 0, max: float = 1, rng: Optional[random.Random] = None) -> int:
    """
    Returns a random integer between *min* and *max*, both included.

    Float bounds are rounded inward, so ``number_random_int(0.5, 2.5)`` yields
    1 or 2.

    :param rng: Generator to draw from; the ``random`` module's shared one if omitted.
    :raises ValueError: If no integer lies within the bounds.
    """
    source = rng if rng is not None else random
    return source.randint(math.ceil(min), math.floor(max))
