"""Annual compounding factor shared by growth and discounting."""

from __future__ import annotations

import math


def compound_factor(rate_percent: float, years: int) -> float:
    """Return ``(1 + rate_percent / 100) ** years``.

    Float ``**`` raises ``OverflowError`` where IEEE-754 arithmetic would give
    an infinity; the factor saturates to a signed infinity instead.
    """
    base = 1.0 + rate_percent / 100.0
    try:
        return base ** years
    except OverflowError:
        if base < 0 and years % 2 == 1:
            return -math.inf
        return math.inf
