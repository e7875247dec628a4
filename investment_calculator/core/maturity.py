"""Compound growth of a lump-sum investment."""

from __future__ import annotations

import logging

from investment_calculator.core.compounding import compound_factor
from investment_calculator.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def compute_maturity_value(principal: float, annual_rate_percent: float, years: int) -> float:
    """
    Return the value of ``principal`` after ``years`` of annual compounding.

    Args:
        principal: Initial investment amount.
        annual_rate_percent: Expected annual return in percent (5.5 means 5.5%).
        years: Investment duration in whole years.

    Raises:
        InvalidArgumentError: if the rate or the duration is negative.

    Results too large for a float are returned as ``inf``.
    """
    if annual_rate_percent < 0:
        raise InvalidArgumentError("rate must be non-negative")
    if years < 0:
        raise InvalidArgumentError("years must be non-negative")

    maturity_value = principal * compound_factor(annual_rate_percent, years)
    logger.debug(
        "maturity value of %s at %s%% over %s years: %s",
        principal,
        annual_rate_percent,
        years,
        maturity_value,
    )
    return maturity_value
