"""
Investment calculator - compound growth and inflation adjustment of a lump sum.
"""

import logging

from investment_calculator.environment_variables import INVESTMENT_CALCULATOR_LOG_LEVEL


def _configure_logging() -> None:
    """Send package logs to stderr at the level named by the environment."""
    package_logger = logging.getLogger(__name__)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        package_logger.addHandler(handler)

    level = logging.getLevelName(INVESTMENT_CALCULATOR_LOG_LEVEL.get().upper())
    # unknown names come back as "Level <name>"
    package_logger.setLevel(level if isinstance(level, int) else logging.WARNING)


_configure_logging()

from investment_calculator.core.errors import InvalidArgumentError
from investment_calculator.core.inflation import adjust_for_inflation
from investment_calculator.core.investment import calculate_investment
from investment_calculator.core.maturity import compute_maturity_value
from investment_calculator.schemas.investment import InvestmentParameters, InvestmentResult

__all__ = [
    "InvalidArgumentError",
    "InvestmentParameters",
    "InvestmentResult",
    "adjust_for_inflation",
    "calculate_investment",
    "compute_maturity_value",
]
__version__ = "0.1.0"
