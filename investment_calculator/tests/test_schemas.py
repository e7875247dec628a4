from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from investment_calculator.schemas.investment import InvestmentParameters, InvestmentResult


def test_parameter_defaults():
    parameters = InvestmentParameters()

    assert parameters.amount == 1000
    assert parameters.rate == 5.5
    assert parameters.years == 10
    assert parameters.inflation == 6.5


def test_parameters_are_immutable():
    parameters = InvestmentParameters()

    with pytest.raises(ValidationError):
        parameters.amount = 5


def test_negative_amount_rejected():
    with pytest.raises(ValidationError):
        InvestmentParameters(amount=-1)


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        InvestmentParameters(principal=1000)


def test_negative_rate_and_years_pass_validation():
    """
    Range checks on rate and years belong to the calculators, not the schema.
    """
    parameters = InvestmentParameters(rate=-5.5, years=-1, inflation=-100.0)

    assert parameters.rate == -5.5
    assert parameters.years == -1


def test_result_accepts_non_finite_values():
    result = InvestmentResult(maturity_value=math.inf, inflation_adjusted_value=math.nan)

    assert math.isinf(result.maturity_value)
    assert math.isnan(result.inflation_adjusted_value)
