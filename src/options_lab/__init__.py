"""Options pricing and strategy risk engine."""

from options_lab.options import (
    Action,
    InvalidInputError,
    Leg,
    MarketState,
    OptionType,
    PortfolioAggregate,
    aggregate,
    bs_greeks,
    bs_price,
    estimate_margin,
    payoff_curve,
    stress,
)
from options_lab.strategies import STRATEGY_CATALOG, get_strategy, resolve_legs

__all__ = [
    "Action",
    "InvalidInputError",
    "Leg",
    "MarketState",
    "OptionType",
    "PortfolioAggregate",
    "STRATEGY_CATALOG",
    "aggregate",
    "bs_greeks",
    "bs_price",
    "estimate_margin",
    "get_strategy",
    "payoff_curve",
    "resolve_legs",
    "stress",
]
