"""Rounding used by every percentage shown to the user."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up.

    Python's ``round`` rounds halves to even (``round(0.5) == 0``); the app
    has always shown ``0.5 -> 1`` and ``37.5 -> 38``.

    Examples:
        >>> round_half_up(43.75), round_half_up(37.5), round_half_up(0.5)
        (44, 38, 1)
    """
    return math.floor(value + 0.5)
