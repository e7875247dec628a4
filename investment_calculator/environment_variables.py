"""Environment variables read by the investment calculator."""

import os


class _EnvironmentVariable:
    """An environment variable converted to ``type_``, or ``default`` when unset."""

    def __init__(self, name: str, type_: type, default):
        self.name = name
        self.type = type_
        self.default = default

    def get(self):
        if (val := os.getenv(self.name)) is None:
            return self.default
        try:
            return self.type(val)
        except ValueError as e:
            raise ValueError(f"Failed to convert {val!r} for {self.name}: {e}") from e


#: Level of the ``investment_calculator`` logger: DEBUG, INFO, WARNING, ERROR or CRITICAL.
#: (default: ``WARNING``)
INVESTMENT_CALCULATOR_LOG_LEVEL = _EnvironmentVariable(
    "INVESTMENT_CALCULATOR_LOG_LEVEL", str, "WARNING"
)
