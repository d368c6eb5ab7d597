"""Interface for option-pricing engines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from options_lab.options.types import Leg, MarketState, PricingResult


@runtime_checkable
class PriceModel(Protocol):
    """Minimum pricing capability required by the risk modules.

    `time_to_expiry` (years) overrides `state.time_to_expiry` when given, which
    lets stress tests roll time forward without building fractional-day states.
    """

    def price(
        self,
        leg: Leg,
        state: MarketState,
        *,
        time_to_expiry: float | None = None,
    ) -> float:
        """Return the premium of one contract of `leg`."""


@runtime_checkable
class GreeksModel(PriceModel, Protocol):
    """Extension of :class:`PriceModel` for engines that also provide sensitivities."""

    def price_and_greeks(
        self,
        leg: Leg,
        state: MarketState,
        *,
        time_to_expiry: float | None = None,
    ) -> PricingResult:
        """Return premium and sensitivities of one contract of `leg`."""
