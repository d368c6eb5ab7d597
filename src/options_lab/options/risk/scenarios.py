"""Scenario stress testing by full Black-Scholes revaluation.

Each scenario combines a spot move, a forward time step and a volatility
shock, and every leg is repriced exactly rather than through a Greeks
expansion, so large moves stay consistent with the pricer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from options_lab.options.engines import BlackScholesPricer, PriceModel
from options_lab.options.errors import InvalidInputError
from options_lab.options.models.black_scholes import EXPIRY_EPSILON_YEARS
from options_lab.options.risk.types import ScenarioRow
from options_lab.options.types import (
    CONTRACT_MULTIPLIER,
    DAYS_PER_YEAR,
    Leg,
    MarketState,
)

logger = logging.getLogger(__name__)

DEFAULT_PCT_MOVES: tuple[float, ...] = (-20.0, -10.0, -5.0, 0.0, 5.0, 10.0, 20.0)
DEFAULT_TIME_STEP_DAYS = 7


@dataclass(frozen=True)
class StressGrid:
    """Fixed grid of spot moves revalued after a time step.

    Notes:
        - `pct_moves` are percentages (`-20` means spot * 0.8).
        - time to expiry after the step is floored at the pricer's expiry
          epsilon, so it never goes negative.
        - each move is revalued at base, `vol_up_multiplier` and
          `vol_down_multiplier` times the current volatility.
    """

    pct_moves: tuple[float, ...] = DEFAULT_PCT_MOVES
    time_step_days: float = DEFAULT_TIME_STEP_DAYS
    vol_up_multiplier: float = 1.2
    vol_down_multiplier: float = 0.8

    def __post_init__(self) -> None:
        if not self.pct_moves:
            raise InvalidInputError("pct_moves must not be empty")
        if any(not pct > -100.0 for pct in self.pct_moves):
            raise InvalidInputError("pct_moves must be > -100")
        if not self.time_step_days >= 0:
            raise InvalidInputError("time_step_days must be >= 0")
        if not self.vol_up_multiplier > 0 or not self.vol_down_multiplier > 0:
            raise InvalidInputError("volatility multipliers must be > 0")

    def shocked_time(self, state: MarketState) -> float:
        """Time to expiry in years after rolling forward `time_step_days`."""
        return max(
            state.time_to_expiry - self.time_step_days / DAYS_PER_YEAR,
            EXPIRY_EPSILON_YEARS,
        )

    def run(
        self,
        legs: Sequence[Leg],
        state: MarketState,
        *,
        contracts: int = 1,
        pricer: PriceModel | None = None,
    ) -> tuple[ScenarioRow, ...]:
        """Return one :class:`ScenarioRow` per configured spot move.

        P&L per leg is `sign * quantity * (shocked_price - entry_price) * 100`,
        summed over legs and scaled by `contracts`.
        """
        if not legs:
            raise InvalidInputError("legs must not be empty")
        if isinstance(contracts, bool) or not isinstance(contracts, int) or contracts <= 0:
            raise InvalidInputError("contracts must be a positive integer")

        engine = pricer or BlackScholesPricer()
        entry_prices = [engine.price(leg, state) for leg in legs]
        shocked_t = self.shocked_time(state)
        vol_scenarios = (
            state.volatility,
            state.volatility * self.vol_up_multiplier,
            state.volatility * self.vol_down_multiplier,
        )

        rows: list[ScenarioRow] = []
        for pct in self.pct_moves:
            shocked_spot = state.spot * (1.0 + pct / 100.0)
            pnls = []
            for sigma in vol_scenarios:
                shocked_state = state.with_updates(spot=shocked_spot, volatility=sigma)
                pnl = 0.0
                for leg, entry_price in zip(legs, entry_prices):
                    shocked_price = engine.price(
                        leg, shocked_state, time_to_expiry=shocked_t
                    )
                    pnl += leg.signed_quantity * (shocked_price - entry_price)
                pnls.append(pnl * CONTRACT_MULTIPLIER * contracts)

            base, vol_up, vol_down = pnls
            rows.append(
                ScenarioRow(
                    pct_move=float(pct),
                    base_pnl=base,
                    vol_up_pnl=vol_up,
                    vol_down_pnl=vol_down,
                )
            )

        logger.debug(
            "Stressed %d legs over %d moves (dt=%s days, T'=%.6f)",
            len(legs),
            len(rows),
            self.time_step_days,
            shocked_t,
        )
        return tuple(rows)


def stress(
    legs: Sequence[Leg],
    state: MarketState,
    pct_moves: Sequence[float] = DEFAULT_PCT_MOVES,
    time_step_days: float = DEFAULT_TIME_STEP_DAYS,
    *,
    contracts: int = 1,
    pricer: PriceModel | None = None,
) -> tuple[ScenarioRow, ...]:
    """Reprice `legs` over spot moves after `time_step_days`, under three vols."""
    grid = StressGrid(pct_moves=tuple(pct_moves), time_step_days=time_step_days)
    return grid.run(legs, state, contracts=contracts, pricer=pricer)
