"""Net premium and Greeks across the legs of a strategy.

Greeks are combined by signed summation per leg. Cross-leg effects are not
modelled, so net Greeks are exact only as a sum of independent sensitivities.
"""

from __future__ import annotations

import logging
from typing import Sequence

from options_lab.options.engines import BlackScholesPricer, GreeksModel
from options_lab.options.types import (
    Leg,
    MarketState,
    PortfolioAggregate,
    PricingResult,
)

logger = logging.getLogger(__name__)


def price_legs(
    legs: Sequence[Leg],
    state: MarketState,
    *,
    pricer: GreeksModel | None = None,
) -> tuple[PricingResult, ...]:
    """Price every leg (one contract, unsigned) at `state`."""
    engine = pricer or BlackScholesPricer()
    return tuple(engine.price_and_greeks(leg, state) for leg in legs)


def aggregate(
    legs: Sequence[Leg],
    state: MarketState,
    *,
    pricer: GreeksModel | None = None,
) -> PortfolioAggregate:
    """Sum `sign(action) * quantity * X` over legs for each Greek.

    Premium is booked as a cash flow, `-sign(action) * quantity * premium`,
    so a net debit is negative and a net credit positive. An empty leg list
    aggregates to zero, so results are additive across any partition of legs.
    """
    net = PortfolioAggregate.empty()
    for leg, result in zip(legs, price_legs(legs, state, pricer=pricer)):
        weight = leg.signed_quantity
        net += PortfolioAggregate(
            net_premium=-result.premium * weight,
            net_delta=result.delta * weight,
            net_gamma=result.gamma * weight,
            net_theta=result.theta * weight,
            net_vega=result.vega * weight,
        )

    logger.debug(
        "Aggregated %d legs: net_premium=%.4f net_delta=%.4f",
        len(legs),
        net.net_premium,
        net.net_delta,
    )
    return net
