"""Black-Scholes pricing engine."""

from __future__ import annotations

from options_lab.options.models.black_scholes import bs_price, bs_price_and_greeks
from options_lab.options.types import Leg, MarketState, PricingResult


class BlackScholesPricer:
    """Closed-form European pricer backed by the analytical formulas."""

    def price(
        self,
        leg: Leg,
        state: MarketState,
        *,
        time_to_expiry: float | None = None,
    ) -> float:
        return bs_price(
            S=state.spot,
            K=leg.strike,
            T=state.time_to_expiry if time_to_expiry is None else time_to_expiry,
            r=state.rate,
            sigma=state.volatility,
            option_type=leg.option_type,
        )

    def price_and_greeks(
        self,
        leg: Leg,
        state: MarketState,
        *,
        time_to_expiry: float | None = None,
    ) -> PricingResult:
        return bs_price_and_greeks(
            S=state.spot,
            K=leg.strike,
            T=state.time_to_expiry if time_to_expiry is None else time_to_expiry,
            r=state.rate,
            sigma=state.volatility,
            option_type=leg.option_type,
        )
