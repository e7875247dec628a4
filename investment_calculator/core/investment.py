"""Maturity value and inflation adjustment for one set of parameters."""

import logging

from investment_calculator.core.inflation import adjust_for_inflation
from investment_calculator.core.maturity import compute_maturity_value
from investment_calculator.schemas.investment import InvestmentParameters, InvestmentResult

logger = logging.getLogger(__name__)


def calculate_investment(parameters: InvestmentParameters) -> InvestmentResult:
    """Grow the amount at the expected rate, then discount it at the inflation rate."""
    logger.debug("calculating investment for %s", parameters)

    maturity_value = compute_maturity_value(parameters.amount, parameters.rate, parameters.years)
    adjusted_value = adjust_for_inflation(maturity_value, parameters.inflation, parameters.years)

    return InvestmentResult(
        maturity_value=maturity_value,
        inflation_adjusted_value=adjusted_value,
    )
