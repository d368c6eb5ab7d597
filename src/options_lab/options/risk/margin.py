"""Stress-based collateral estimate for strategies with short legs.

This is a coarse heuristic for display and sizing, not a broker-accurate
Reg-T or Portfolio Margin computation:

    margin = multiplier * |min(base_pnl, vol_down_pnl over all rows)|

for any leg set containing a short leg, and zero otherwise. Vol-up rows are
excluded from the minimum.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence, runtime_checkable

from options_lab.options.engines import PriceModel
from options_lab.options.errors import InvalidInputError
from options_lab.options.risk.scenarios import StressGrid
from options_lab.options.risk.types import ScenarioRow
from options_lab.options.types import Leg, MarketState

DEFAULT_MARGIN_MULTIPLIER = 1.2


def estimate_margin(
    legs: Sequence[Leg],
    scenario_rows: Sequence[ScenarioRow],
    *,
    multiplier: float = DEFAULT_MARGIN_MULTIPLIER,
) -> float:
    """Return the heuristic margin requirement for `legs`."""
    if not multiplier > 0:
        raise InvalidInputError("multiplier must be > 0")
    if not any(leg.is_short for leg in legs):
        return 0.0
    if not scenario_rows:
        raise InvalidInputError("scenario_rows must not be empty for short legs")

    worst = min(min(row.base_pnl, row.vol_down_pnl) for row in scenario_rows)
    return multiplier * abs(worst)


@runtime_checkable
class MarginModel(Protocol):
    """Contract for position-level initial margin estimation."""

    def initial_margin_requirement(
        self,
        *,
        legs: Sequence[Leg],
        state: MarketState,
        contracts: int = 1,
        pricer: PriceModel | None = None,
    ) -> float:
        """Return initial margin requirement for `contracts` strategy units."""
        ...


@dataclass(frozen=True)
class StressMarginProxyModel:
    """Run the stress grid, then convert the worst loss to margin.

    Attributes:
        grid: Scenario grid used for revaluation.
        multiplier: Scalar applied to the worst stressed loss.
    """

    grid: StressGrid = field(default_factory=StressGrid)
    multiplier: float = DEFAULT_MARGIN_MULTIPLIER

    def __post_init__(self) -> None:
        if not self.multiplier > 0:
            raise InvalidInputError("multiplier must be > 0")

    def initial_margin_requirement(
        self,
        *,
        legs: Sequence[Leg],
        state: MarketState,
        contracts: int = 1,
        pricer: PriceModel | None = None,
    ) -> float:
        if not any(leg.is_short for leg in legs):
            return 0.0
        rows = self.grid.run(legs, state, contracts=contracts, pricer=pricer)
        return estimate_margin(legs, rows, multiplier=self.multiplier)
