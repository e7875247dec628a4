"""Data contracts for a single investment calculation."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_AMOUNT = 1000
DEFAULT_RATE = 5.5
DEFAULT_YEARS = 10
DEFAULT_INFLATION = 6.5


class InvestmentParameters(BaseModel):
    """Inputs required to compute a maturity value and its inflation-adjusted equivalent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    amount: int = Field(DEFAULT_AMOUNT, ge=0, description="Initial investment amount.")
    # rate and years are checked by the calculators themselves, which fail fast
    rate: float = Field(
        DEFAULT_RATE,
        description="Expected annual return rate in percent (e.g. 5.5 for 5.5%).",
    )
    years: int = Field(DEFAULT_YEARS, description="Investment duration in years.")
    inflation: float = Field(
        DEFAULT_INFLATION,
        description="Annual inflation rate in percent. Negative values model deflation.",
    )


class InvestmentResult(BaseModel):
    """Outcome of an investment calculation."""

    maturity_value: float
    inflation_adjusted_value: float
