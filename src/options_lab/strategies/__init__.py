"""Strategy templates and leg resolution."""

from .catalog import (
    STRATEGY_CATALOG,
    get_strategy,
    recommend_strategies,
    strategy_names,
)
from .legs import resolve_leg, resolve_legs, resolve_strike

__all__ = [
    "STRATEGY_CATALOG",
    "get_strategy",
    "recommend_strategies",
    "strategy_names",
    "resolve_leg",
    "resolve_legs",
    "resolve_strike",
]
