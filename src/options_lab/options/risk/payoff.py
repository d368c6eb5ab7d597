"""Expiry payoff curve, breakevens and P&L extremes for multi-leg strategies.

The curve is sampled over a fixed window `[0.55 * spot, 1.45 * spot]`. Each
leg contributes `sign * quantity * (intrinsic(S) - entry_premium) * 100`,
where `entry_premium` is priced at the current market state, so the curve
includes the cost basis.

Breakevens are midpoints of adjacent samples whose P&L changes sign, so their
precision is bounded by the sample spacing. Extremes are taken over the
sampled window only; see the `*_unbounded` flags on :class:`PayoffProfile`.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from options_lab.options.engines import BlackScholesPricer, PriceModel
from options_lab.options.errors import InvalidInputError
from options_lab.options.models.black_scholes import intrinsic_value
from options_lab.options.risk.types import PayoffPoint, PayoffProfile
from options_lab.options.types import (
    CONTRACT_MULTIPLIER,
    Leg,
    MarketState,
    OptionType,
)

logger = logging.getLogger(__name__)

DISPLAY_SAMPLE_COUNT = 101
BREAKEVEN_SAMPLE_COUNT = 201
PRICE_WINDOW = (0.55, 1.45)


def sample_price_grid(spot: float, sample_count: int) -> np.ndarray:
    """Uniform underlying-price grid over the fixed payoff window."""
    if not spot > 0:
        raise InvalidInputError("spot must be > 0")
    if isinstance(sample_count, bool) or int(sample_count) != sample_count:
        raise InvalidInputError("sample_count must be an integer")
    if sample_count < 2:
        raise InvalidInputError("sample_count must be >= 2")
    low, high = PRICE_WINDOW
    return np.linspace(low * spot, high * spot, int(sample_count))


def expiry_pnl(
    legs: Sequence[Leg],
    prices: ArrayLike,
    entry_premiums: Sequence[float],
) -> np.ndarray:
    """P&L at expiry for every price in `prices`, in cash per strategy unit."""
    if len(legs) != len(entry_premiums):
        raise InvalidInputError("legs and entry_premiums must have equal length")
    grid = np.asarray(prices, dtype=float)
    pnl = np.zeros_like(grid)
    for leg, premium in zip(legs, entry_premiums):
        intrinsic = intrinsic_value(grid, leg.strike, leg.option_type)
        pnl += leg.signed_quantity * (intrinsic - premium) * CONTRACT_MULTIPLIER
    return pnl


def find_breakevens(prices: ArrayLike, pnls: ArrayLike) -> tuple[float, ...]:
    """Midpoints of adjacent samples where P&L crosses zero.

    A crossing is `p0 < 0 <= p1` or `p1 < 0 <= p0`; zero counts as
    non-negative.
    """
    xs = np.asarray(prices, dtype=float)
    ys = np.asarray(pnls, dtype=float)
    if xs.shape != ys.shape:
        raise InvalidInputError("prices and pnls must have the same shape")

    breakevens: list[float] = []
    for i in range(1, len(xs)):
        prev_neg = ys[i - 1] < 0
        curr_neg = ys[i] < 0
        if prev_neg != curr_neg:
            breakevens.append(float((xs[i - 1] + xs[i]) / 2))
    return tuple(breakevens)


def net_call_slope(legs: Sequence[Leg], *, stock_lots: int = 0) -> int:
    """Payoff slope (per share) above all strikes.

    Net long calls plus `stock_lots`, the number of 100-share lots held
    alongside the options per strategy unit.
    """
    calls = sum(leg.signed_quantity for leg in legs if leg.option_type is OptionType.CALL)
    return calls + stock_lots


def payoff_curve(
    legs: Sequence[Leg],
    state: MarketState,
    sample_count: int = DISPLAY_SAMPLE_COUNT,
    *,
    stock_lots: int = 0,
    pricer: PriceModel | None = None,
) -> PayoffProfile:
    """Build the expiry payoff profile of `legs` around `state.spot`.

    Use `DISPLAY_SAMPLE_COUNT` for charts and `BREAKEVEN_SAMPLE_COUNT` when
    breakeven resolution matters; the algorithm is the same.

    The sampled curve covers the option legs only. `stock_lots` (100-share
    lots held per unit, e.g. 1 for a covered call) feeds the unbounded flags,
    so a call covered by stock is not reported as an unbounded loss.
    """
    if not legs:
        raise InvalidInputError("legs must not be empty")

    engine = pricer or BlackScholesPricer()
    prices = sample_price_grid(state.spot, sample_count)
    entry_premiums = [engine.price(leg, state) for leg in legs]
    pnls = expiry_pnl(legs, prices, entry_premiums)

    slope = net_call_slope(legs, stock_lots=stock_lots)
    profile = PayoffProfile(
        points=tuple(
            PayoffPoint(underlying_price=float(x), pnl=float(y))
            for x, y in zip(prices, pnls)
        ),
        breakevens=find_breakevens(prices, pnls),
        max_profit=float(pnls.max()),
        max_loss=float(pnls.min()),
        profit_unbounded=slope > 0,
        loss_unbounded=slope < 0,
    )

    logger.debug(
        "Payoff over %d samples: breakevens=%s max_profit=%.2f max_loss=%.2f",
        len(prices),
        profile.breakevens,
        profile.max_profit,
        profile.max_loss,
    )
    if profile.loss_unbounded:
        logger.debug("Sampled max_loss understates an unbounded upside loss")
    return profile
