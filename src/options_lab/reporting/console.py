"""Console-friendly formatting for strategy reports."""

from __future__ import annotations

from .builders import build_legs_table, build_scenario_table
from .schemas import StrategyReport


def _fmt_usd(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _fmt_extreme(value: float, unbounded: bool) -> str:
    text = _fmt_usd(value)
    return f"{text} (unbounded beyond window)" if unbounded else text


def format_strategy_report(report: StrategyReport) -> str:
    """Format a readable console report for one strategy analysis."""
    agg = report.aggregate
    cash_label = "Pay" if agg.is_debit else "Receive"
    breakevens = ", ".join(f"{b:.2f}" for b in report.breakevens) or "none"
    lines = [
        "=" * 48,
        f"{report.template.name} x{report.contracts}",
        "=" * 48,
        f"Spot / IV / DTE        : {report.state.spot:.2f} / "
        f"{report.state.volatility:.1%} / {report.state.days_to_expiry}d",
        f"Net premium            : {cash_label} {_fmt_usd(abs(report.net_cost))}",
        f"Net delta              : {agg.net_delta:+.4f}",
        f"Net gamma              : {agg.net_gamma:+.5f}",
        f"Net theta ($/day/sh)   : {agg.net_theta:+.4f}",
        f"Net vega (per 1% IV)   : {agg.net_vega:+.4f}",
        f"Breakevens             : {breakevens}",
        "Max profit             : "
        + _fmt_extreme(report.payoff.max_profit, report.payoff.profit_unbounded),
        "Max loss               : "
        + _fmt_extreme(report.payoff.max_loss, report.payoff.loss_unbounded),
        f"Margin estimate        : {_fmt_usd(report.margin)}",
    ]
    if report.template.requires_stock:
        lines.append("Note                   : requires 100 shares per contract")

    legs = build_legs_table(report.legs, report.state)
    scenarios = build_scenario_table(report.scenarios)
    lines += [
        "",
        "Legs",
        legs.to_string(index=False, float_format=lambda v: f"{v:.4f}"),
        "",
        "Scenarios (stressed P&L by spot move)",
        scenarios.to_string(float_format=lambda v: f"{v:,.2f}"),
    ]
    return "\n".join(lines)


def print_strategy_report(report: StrategyReport) -> None:
    print(format_strategy_report(report))
