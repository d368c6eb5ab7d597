"""Strategy report construction, tables and console output."""

from .builders import (
    build_legs_table,
    build_payoff_table,
    build_scenario_table,
    build_summary_metrics,
)
from .console import format_strategy_report, print_strategy_report
from .schemas import StrategyReport
from .service import build_strategy_report

__all__ = [
    "StrategyReport",
    "build_strategy_report",
    "build_payoff_table",
    "build_scenario_table",
    "build_legs_table",
    "build_summary_metrics",
    "format_strategy_report",
    "print_strategy_report",
]
