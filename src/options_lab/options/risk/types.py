"""Result dataclasses for payoff and stress analysis."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PayoffPoint:
    """One sample of the expiry P&L curve (cash, per strategy unit)."""

    underlying_price: float
    pnl: float


@dataclass(frozen=True)
class PayoffProfile:
    """Expiry payoff curve with derived breakevens and extremes.

    `max_profit` and `max_loss` are the largest and smallest sampled P&L, so
    they only describe the sampled price window. The `*_unbounded` flags are
    derived analytically from the legs and mark sides where the true extreme
    lies outside any window.
    """

    points: tuple[PayoffPoint, ...]
    breakevens: tuple[float, ...]
    max_profit: float
    max_loss: float
    profit_unbounded: bool = False
    loss_unbounded: bool = False

    @property
    def prices(self) -> tuple[float, ...]:
        return tuple(p.underlying_price for p in self.points)

    @property
    def pnls(self) -> tuple[float, ...]:
        return tuple(p.pnl for p in self.points)


@dataclass(frozen=True, slots=True)
class ScenarioRow:
    """Stressed P&L for one spot move under base, up and down volatility."""

    pct_move: float
    base_pnl: float
    vol_up_pnl: float
    vol_down_pnl: float

    @property
    def worst_pnl(self) -> float:
        return min(self.base_pnl, self.vol_up_pnl, self.vol_down_pnl)
