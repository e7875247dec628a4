"""
Command-line entry point.

Usage:
    investment-calculator --amount 1000 --rate 5.5 --years 10 --inflation 6.5
    python -m investment_calculator -amount 2500 -years 12
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from investment_calculator.core.investment import calculate_investment
from investment_calculator.schemas.investment import (
    DEFAULT_AMOUNT,
    DEFAULT_INFLATION,
    DEFAULT_RATE,
    DEFAULT_YEARS,
    InvestmentParameters,
    InvestmentResult,
)

logger = logging.getLogger(__name__)

_VALUE_FLAGS = {"amount", "rate", "years", "inflation"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="investment-calculator",
        description="Calculate the maturity value of an investment and adjust it for inflation",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-amount", "--amount", type=int, default=DEFAULT_AMOUNT,
        help=f"Initial investment amount (default: {DEFAULT_AMOUNT})",
    )
    parser.add_argument(
        "-rate", "--rate", type=float, default=DEFAULT_RATE,
        help=f"Expected annual return rate in percent (default: {DEFAULT_RATE})",
    )
    parser.add_argument(
        "-years", "--years", type=int, default=DEFAULT_YEARS,
        help=f"Investment duration in years (default: {DEFAULT_YEARS})",
    )
    parser.add_argument(
        "-inflation", "--inflation", type=float, default=DEFAULT_INFLATION,
        help=f"Annual inflation rate in percent (default: {DEFAULT_INFLATION})",
    )
    return parser


def split_arguments(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Split `argv` into flags and the arguments after them.

    Flag parsing stops at the first argument that is not a flag, or after a
    bare ``--``. Everything from there on is left unparsed.
    """
    index = 0
    while index < len(argv):
        token = argv[index]
        if token == "--":
            return list(argv[:index]), list(argv[index + 1:])
        if token == "-" or not token.startswith("-"):
            break
        name = token.lstrip("-")
        if "=" not in name and name in _VALUE_FLAGS:
            # the next token is this flag's value, even when it looks like "-5.5"
            index += 1
        index += 1
    return list(argv[:index]), list(argv[index:])


def warn_unsupported(arguments: List[str]) -> None:
    """Tell the user which arguments were ignored."""
    print("Warning: the following arguments are currently unsupported:")
    for argument in arguments:
        print(f"  {argument}")
    print()


def print_result(result: InvestmentResult) -> None:
    print()
    print("                     Maturity value =", result.maturity_value)
    print("Maturity value after inflation adj. =", result.inflation_adjusted_value)
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run one calculation and print it.

    InvalidArgumentError from the calculators is not caught, so a negative
    rate or duration ends the process with a non-zero status.
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    flags, remaining = split_arguments(argv)
    args, unknown_flags = parser.parse_known_args(flags)
    unsupported = unknown_flags + remaining

    if unsupported:
        logger.info("ignoring unsupported arguments: %s", unsupported)
        warn_unsupported(unsupported)

    try:
        parameters = InvestmentParameters(
            amount=args.amount,
            rate=args.rate,
            years=args.years,
            inflation=args.inflation,
        )
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        parser.error(details)

    result = calculate_investment(parameters)
    print_result(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
