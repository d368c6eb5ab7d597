"""Option risk building blocks: aggregation, payoff, stress and margin."""

from .aggregation import aggregate, price_legs
from .margin import (
    DEFAULT_MARGIN_MULTIPLIER,
    MarginModel,
    StressMarginProxyModel,
    estimate_margin,
)
from .payoff import (
    BREAKEVEN_SAMPLE_COUNT,
    DISPLAY_SAMPLE_COUNT,
    expiry_pnl,
    find_breakevens,
    net_call_slope,
    payoff_curve,
    sample_price_grid,
)
from .scenarios import DEFAULT_PCT_MOVES, DEFAULT_TIME_STEP_DAYS, StressGrid, stress
from .types import PayoffPoint, PayoffProfile, ScenarioRow

__all__ = [
    "aggregate",
    "price_legs",
    "PayoffPoint",
    "PayoffProfile",
    "ScenarioRow",
    "DISPLAY_SAMPLE_COUNT",
    "BREAKEVEN_SAMPLE_COUNT",
    "sample_price_grid",
    "expiry_pnl",
    "find_breakevens",
    "net_call_slope",
    "payoff_curve",
    "DEFAULT_PCT_MOVES",
    "DEFAULT_TIME_STEP_DAYS",
    "StressGrid",
    "stress",
    "DEFAULT_MARGIN_MULTIPLIER",
    "MarginModel",
    "StressMarginProxyModel",
    "estimate_margin",
]
