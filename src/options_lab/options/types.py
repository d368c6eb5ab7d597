"""Shared option-pricing dataclasses and aliases."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import IntEnum, StrEnum
from typing import Literal, TypeAlias

from options_lab.options.errors import InvalidInputError

DAYS_PER_YEAR = 365.0
CONTRACT_MULTIPLIER = 100


class OptionType(StrEnum):
    """Canonical option side labels used across pricing code."""

    CALL = "call"
    PUT = "put"


# Tolerant input type accepted at system boundaries (config files/tests).
OptionTypeInput: TypeAlias = OptionType | Literal["call", "put", "C", "P"]


class Action(IntEnum):
    """Trade direction; the value is the sign applied to premium and Greeks."""

    SELL = -1
    BUY = 1


@dataclass(frozen=True)
class MarketState:
    """Immutable market snapshot used by every engine operation.

    New states are derived with :meth:`with_updates`; instances are never
    edited in place.
    """

    spot: float
    volatility: float
    rate: float = 0.0
    days_to_expiry: int = 30

    def __post_init__(self) -> None:
        for name in ("spot", "volatility", "rate", "days_to_expiry"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidInputError(f"{name} must be finite")
        if not self.spot > 0:
            raise InvalidInputError("spot must be > 0")
        if not self.volatility > 0:
            raise InvalidInputError("volatility must be > 0")
        if not self.rate >= 0:
            raise InvalidInputError("rate must be >= 0")
        if isinstance(self.days_to_expiry, bool) or self.days_to_expiry < 0:
            raise InvalidInputError("days_to_expiry must be an integer >= 0")
        if int(self.days_to_expiry) != self.days_to_expiry:
            raise InvalidInputError("days_to_expiry must be an integer >= 0")

    @property
    def time_to_expiry(self) -> float:
        """Time to expiry in years (calendar-day basis)."""
        return self.days_to_expiry / DAYS_PER_YEAR

    def with_updates(self, **changes: float) -> MarketState:
        """Return a new validated state with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class Greeks:
    """Sensitivities for one option.

    `theta` is per calendar day and `vega` per 1 volatility point.
    """

    delta: float
    gamma: float
    theta: float
    vega: float

    def scaled(self, factor: float) -> Greeks:
        """Return Greeks scaled by a scalar position multiplier."""
        return Greeks(
            delta=self.delta * factor,
            gamma=self.gamma * factor,
            theta=self.theta * factor,
            vega=self.vega * factor,
        )


@dataclass(frozen=True, slots=True)
class PricingResult:
    """Option premium and sensitivities for one leg at one market state."""

    premium: float
    greeks: Greeks

    @property
    def delta(self) -> float:
        return self.greeks.delta

    @property
    def gamma(self) -> float:
        return self.greeks.gamma

    @property
    def theta(self) -> float:
        return self.greeks.theta

    @property
    def vega(self) -> float:
        return self.greeks.vega


def normalize_option_type(option_type: OptionTypeInput) -> OptionType:
    """Normalize option type labels to :class:`OptionType`."""
    if isinstance(option_type, OptionType):
        return option_type
    if option_type in ("call", "C"):
        return OptionType.CALL
    if option_type in ("put", "P"):
        return OptionType.PUT
    raise InvalidInputError("option_type must be one of {'call', 'put', 'C', 'P'}")


def _check_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidInputError("quantity must be a positive integer")


@dataclass(frozen=True)
class LegTemplate:
    """Catalog leg with a strike expressed as a relative offset from spot.

    `offset=0.05` means a strike 5% above spot, `-0.05` 5% below.
    """

    option_type: OptionType
    action: Action
    offset: float
    quantity: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "option_type", normalize_option_type(self.option_type))
        if not isinstance(self.action, Action):
            raise InvalidInputError("action must be Action.BUY or Action.SELL")
        if not self.offset > -1.0:
            raise InvalidInputError("offset must be > -1")
        _check_quantity(self.quantity)


@dataclass(frozen=True)
class Leg:
    """One concrete option contract within a strategy."""

    option_type: OptionType
    action: Action
    strike: float
    quantity: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "option_type", normalize_option_type(self.option_type))
        if not isinstance(self.action, Action):
            raise InvalidInputError("action must be Action.BUY or Action.SELL")
        if not self.strike > 0:
            raise InvalidInputError("strike must be > 0")
        _check_quantity(self.quantity)

    @property
    def signed_quantity(self) -> int:
        """`sign(action) * quantity`, the weight used in every aggregation."""
        return int(self.action) * self.quantity

    @property
    def is_short(self) -> bool:
        return self.action is Action.SELL


@dataclass(frozen=True)
class StrategyTemplate:
    """Named, read-only catalog entry describing a multi-leg strategy.

    Descriptive fields are free text consumed by the presentation layer only.
    """

    name: str
    legs: tuple[LegTemplate, ...]
    requires_stock: bool = False
    risk: Literal["low", "medium", "high"] = "medium"
    view: str = "neutral"
    vol_view: str = "any"
    description: str = ""
    max_loss_note: str = ""
    margin_note: str = ""
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.legs:
            raise InvalidInputError(f"strategy {self.name!r} must have legs")

    @property
    def has_short_leg(self) -> bool:
        return any(leg.action is Action.SELL for leg in self.legs)


@dataclass(frozen=True, slots=True)
class PortfolioAggregate:
    """Net premium and Greeks of a set of legs.

    Sign convention: `net_premium < 0` is a net debit paid, `> 0` a net
    credit received.
    """

    net_premium: float
    net_delta: float
    net_gamma: float
    net_theta: float
    net_vega: float

    @classmethod
    def empty(cls) -> PortfolioAggregate:
        return cls(0.0, 0.0, 0.0, 0.0, 0.0)

    def __add__(self, other: PortfolioAggregate) -> PortfolioAggregate:
        if not isinstance(other, PortfolioAggregate):
            return NotImplemented
        return PortfolioAggregate(
            net_premium=self.net_premium + other.net_premium,
            net_delta=self.net_delta + other.net_delta,
            net_gamma=self.net_gamma + other.net_gamma,
            net_theta=self.net_theta + other.net_theta,
            net_vega=self.net_vega + other.net_vega,
        )

    @property
    def is_debit(self) -> bool:
        return self.net_premium < 0

    @property
    def greeks(self) -> Greeks:
        return Greeks(
            delta=self.net_delta,
            gamma=self.net_gamma,
            theta=self.net_theta,
            vega=self.net_vega,
        )

    def net_cost(self, contracts: int = 1) -> float:
        """Cash value of the net premium for `contracts` strategy units."""
        return self.net_premium * CONTRACT_MULTIPLIER * contracts
