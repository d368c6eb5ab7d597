"""High-level orchestration: strategy template + market state -> report."""

from __future__ import annotations

import logging

from options_lab.options.engines import BlackScholesPricer, GreeksModel
from options_lab.options.risk.aggregation import aggregate
from options_lab.options.risk.margin import estimate_margin
from options_lab.options.risk.payoff import (
    BREAKEVEN_SAMPLE_COUNT,
    DISPLAY_SAMPLE_COUNT,
    payoff_curve,
)
from options_lab.options.risk.scenarios import StressGrid
from options_lab.options.types import MarketState, StrategyTemplate
from options_lab.strategies.legs import resolve_legs

from .schemas import StrategyReport

logger = logging.getLogger(__name__)


def build_strategy_report(
    template: StrategyTemplate,
    state: MarketState,
    *,
    contracts: int = 1,
    sample_count: int = DISPLAY_SAMPLE_COUNT,
    breakeven_sample_count: int = BREAKEVEN_SAMPLE_COUNT,
    grid: StressGrid | None = None,
    pricer: GreeksModel | None = None,
) -> StrategyReport:
    """Resolve legs and run aggregation, payoff, stress and margin.

    Templates that require stock are treated as holding one 100-share lot
    per contract when deciding whether the payoff is unbounded.
    """
    engine = pricer or BlackScholesPricer()
    stress_grid = grid or StressGrid()

    legs = resolve_legs(template, state)
    stock_lots = 1 if template.requires_stock else 0
    logger.debug(
        "Analyzing %s: spot=%.2f vol=%.2f%% dte=%d contracts=%d",
        template.name,
        state.spot,
        state.volatility * 100,
        state.days_to_expiry,
        contracts,
    )

    net = aggregate(legs, state, pricer=engine)
    payoff = payoff_curve(
        legs, state, sample_count, stock_lots=stock_lots, pricer=engine
    )
    fine = payoff_curve(
        legs, state, breakeven_sample_count, stock_lots=stock_lots, pricer=engine
    )
    scenarios = stress_grid.run(legs, state, contracts=contracts, pricer=engine)
    margin = estimate_margin(legs, scenarios)

    if fine.loss_unbounded:
        logger.warning(
            "%s has unbounded upside loss; sampled max loss %.2f is a lower bound",
            template.name,
            fine.max_loss,
        )

    return StrategyReport(
        template=template,
        state=state,
        contracts=contracts,
        legs=legs,
        aggregate=net,
        payoff=payoff,
        breakevens=fine.breakevens,
        scenarios=scenarios,
        margin=margin,
    )
