"""Pure builders turning engine outputs into tables and headline metrics."""

from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from options_lab.options.engines import GreeksModel
from options_lab.options.risk.aggregation import price_legs
from options_lab.options.risk.types import PayoffProfile, ScenarioRow
from options_lab.options.types import Leg, MarketState

from .schemas import StrategyReport

LEG_COLUMNS = [
    "action",
    "option_type",
    "strike",
    "quantity",
    "premium",
    "delta",
    "gamma",
    "theta",
    "vega",
]
SCENARIO_COLUMNS = ["pct_move", "base_pnl", "vol_up_pnl", "vol_down_pnl"]


def build_payoff_table(profile: PayoffProfile) -> pd.DataFrame:
    """Payoff curve as a frame indexed by underlying price."""
    frame = pd.DataFrame(
        {"underlying_price": profile.prices, "pnl": profile.pnls}
    )
    return frame.set_index("underlying_price")


def build_scenario_table(rows: Sequence[ScenarioRow]) -> pd.DataFrame:
    """Stress rows as a frame indexed by percentage move."""
    frame = pd.DataFrame(
        [
            (row.pct_move, row.base_pnl, row.vol_up_pnl, row.vol_down_pnl)
            for row in rows
        ],
        columns=SCENARIO_COLUMNS,
    )
    return frame.set_index("pct_move")


def build_legs_table(
    legs: Sequence[Leg],
    state: MarketState,
    *,
    pricer: GreeksModel | None = None,
) -> pd.DataFrame:
    """Per-leg unsigned premium and sign/quantity-adjusted Greeks."""
    records = []
    for leg, result in zip(legs, price_legs(legs, state, pricer=pricer)):
        signed = result.greeks.scaled(leg.signed_quantity)
        records.append(
            {
                "action": leg.action.name.lower(),
                "option_type": leg.option_type.value,
                "strike": leg.strike,
                "quantity": leg.quantity,
                "premium": result.premium,
                "delta": signed.delta,
                "gamma": signed.gamma,
                "theta": signed.theta,
                "vega": signed.vega,
            }
        )
    return pd.DataFrame.from_records(records, columns=LEG_COLUMNS)


def build_summary_metrics(report: StrategyReport) -> dict[str, Any]:
    """Headline metrics as a flat, JSON-compatible mapping."""
    agg = report.aggregate
    return {
        "strategy": report.template.name,
        "contracts": report.contracts,
        "spot": report.state.spot,
        "volatility": report.state.volatility,
        "rate": report.state.rate,
        "days_to_expiry": report.state.days_to_expiry,
        "net_premium": agg.net_premium,
        "net_cost": report.net_cost,
        "is_debit": agg.is_debit,
        "net_delta": agg.net_delta,
        "net_gamma": agg.net_gamma,
        "net_theta": agg.net_theta,
        "net_vega": agg.net_vega,
        "breakevens": list(report.breakevens),
        "max_profit": report.payoff.max_profit,
        "max_loss": report.payoff.max_loss,
        "profit_unbounded": report.payoff.profit_unbounded,
        "loss_unbounded": report.payoff.loss_unbounded,
        "margin": report.margin,
        "requires_stock": report.template.requires_stock,
    }
