"""Dataclasses for strategy analysis reports."""

from __future__ import annotations

from dataclasses import dataclass

from options_lab.options.risk.types import PayoffProfile, ScenarioRow
from options_lab.options.types import (
    Leg,
    MarketState,
    PortfolioAggregate,
    StrategyTemplate,
)


@dataclass(frozen=True)
class StrategyReport:
    """Everything the presentation layer needs for one strategy at one state.

    `payoff` uses display resolution; `breakevens` come from the finer
    breakeven grid.
    """

    template: StrategyTemplate
    state: MarketState
    contracts: int
    legs: tuple[Leg, ...]
    aggregate: PortfolioAggregate
    payoff: PayoffProfile
    breakevens: tuple[float, ...]
    scenarios: tuple[ScenarioRow, ...]
    margin: float

    @property
    def net_cost(self) -> float:
        return self.aggregate.net_cost(self.contracts)
