from __future__ import annotations

import math
from math import isclose

import pytest

from investment_calculator.core.errors import InvalidArgumentError
from investment_calculator.core.inflation import adjust_for_inflation
from investment_calculator.core.maturity import compute_maturity_value


def test_positive_inflation_discounts_value():
    value = adjust_for_inflation(10000, 2.5, 5)

    assert isclose(value, 10000 / 1.025**5, abs_tol=1e-6)
    assert value < 10000


def test_deflation_is_allowed_and_increases_value():
    value = adjust_for_inflation(10000, -2.5, 5)

    assert isclose(value, 10000 / 0.975**5, abs_tol=1e-6)
    assert value > 10000


def test_negative_years_raise():
    with pytest.raises(InvalidArgumentError, match="years must be non-negative"):
        adjust_for_inflation(5000, 2.0, -5)


def test_full_deflation_divides_by_zero_without_raising():
    """
    At -100% the denominator is zero; the result follows float division semantics.
    """
    assert adjust_for_inflation(5000, -100.0, 3) == math.inf
    assert adjust_for_inflation(-5000, -100.0, 3) == -math.inf
    assert math.isnan(adjust_for_inflation(0.0, -100.0, 3))


def test_full_deflation_over_zero_years_keeps_amount():
    assert adjust_for_inflation(5000, -100.0, 0) == 5000


def test_discount_factor_overflow_gives_zero():
    assert adjust_for_inflation(5000, 1e6, 100000) == 0.0


@pytest.mark.parametrize(
    "principal,rate,years",
    [
        (2500, 4.0, 12),
        (1000, 5.5, 10),
        (0, 7.0, 30),
        (123456, 0.0, 25),
        (1, 12.5, 40),
    ],
)
def test_inverse_of_maturity_value_when_rates_match(principal, rate, years):
    maturity = compute_maturity_value(principal, rate, years)

    assert isclose(adjust_for_inflation(maturity, rate, years), principal, abs_tol=1e-6)
