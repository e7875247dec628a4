"""Restating a future amount in today's money."""

from __future__ import annotations

import logging
import math

from investment_calculator.core.compounding import compound_factor
from investment_calculator.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def adjust_for_inflation(amount: float, inflation_rate_percent: float, years: int) -> float:
    """
    Discount ``amount`` back ``years`` years at an annual inflation rate.

    A negative rate is deflation and is accepted as-is. At -100% the
    denominator is zero and the result is ``inf``, ``-inf`` or ``nan``
    as IEEE-754 division would give.

    Raises:
        InvalidArgumentError: if ``years`` is negative.
    """
    if years < 0:
        raise InvalidArgumentError("years must be non-negative")

    factor = compound_factor(inflation_rate_percent, years)
    adjusted = _divide(amount, factor)
    logger.debug(
        "%s discounted at %s%% over %s years: %s",
        amount,
        inflation_rate_percent,
        years,
        adjusted,
    )
    return adjusted


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        # denominator may be -0.0 after underflow of a negative base
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
