"""Exception hierarchy for the pricing and risk engine."""

from __future__ import annotations


class OptionsLabError(Exception):
    """Base class for all engine errors."""


class InvalidInputError(OptionsLabError, ValueError):
    """Raised when market or contract inputs are outside the valid domain."""


class UnknownStrategyError(OptionsLabError, KeyError):
    """Raised when a strategy name is not present in the catalog."""

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown strategy {self.name!r}; expected one of {list(self.available)}"
