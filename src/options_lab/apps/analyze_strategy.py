#!/usr/bin/env python
"""Price a catalog strategy and print its risk report."""

from __future__ import annotations

import argparse
import logging
from typing import Any, Mapping

from options_lab.apps._cli import (
    add_dry_run_arg,
    add_print_config_arg,
    collect_logging_overrides,
    dumps_json,
    log_dry_run,
    print_config,
)
from options_lab.cli import (
    DEFAULT_LOGGING,
    add_config_arg,
    add_logging_args,
    build_config,
    resolve_path,
    setup_logging_from_config,
)
from options_lab.options.risk.payoff import (
    BREAKEVEN_SAMPLE_COUNT,
    DISPLAY_SAMPLE_COUNT,
)
from options_lab.options.risk.scenarios import (
    DEFAULT_PCT_MOVES,
    DEFAULT_TIME_STEP_DAYS,
    StressGrid,
)
from options_lab.options.types import MarketState
from options_lab.reporting import (
    build_strategy_report,
    build_summary_metrics,
    print_strategy_report,
)
from options_lab.strategies import get_strategy, strategy_names

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": DEFAULT_LOGGING,
    "dry_run": False,
    "strategy": "Bull Call Spread",
    "contracts": 1,
    "market": {
        "spot": 100.0,
        "volatility": 0.25,
        "rate": 0.05,
        "days_to_expiry": 30,
    },
    "payoff": {
        "sample_count": DISPLAY_SAMPLE_COUNT,
        "breakeven_sample_count": BREAKEVEN_SAMPLE_COUNT,
    },
    "stress": {
        "pct_moves": list(DEFAULT_PCT_MOVES),
        "time_step_days": DEFAULT_TIME_STEP_DAYS,
        "vol_up_multiplier": 1.2,
        "vol_down_multiplier": 0.8,
    },
    "output": {
        "summary_json": None,
    },
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Price an option strategy and report Greeks, payoff and stress."
    )
    add_config_arg(parser)
    add_logging_args(parser)
    add_print_config_arg(parser)
    add_dry_run_arg(parser)

    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="Print catalog strategy names and exit.",
    )
    parser.add_argument("--strategy", type=str, default=None)
    parser.add_argument("--contracts", type=int, default=None)
    parser.add_argument("--spot", type=float, default=None)
    parser.add_argument("--volatility", type=float, default=None)
    parser.add_argument("--rate", type=float, default=None)
    parser.add_argument("--dte", type=int, default=None, help="Days to expiry.")
    parser.add_argument("--samples", type=int, default=None)
    parser.add_argument("--pct-moves", type=float, nargs="+", default=None)
    parser.add_argument("--time-step-days", type=float, default=None)
    parser.add_argument(
        "--summary-json",
        type=str,
        default=None,
        help="Optional path for a JSON dump of the headline metrics.",
    )
    return parser.parse_args(argv)


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    if args.strategy is not None:
        overrides["strategy"] = args.strategy
    if args.contracts is not None:
        overrides["contracts"] = args.contracts

    market: dict[str, Any] = {}
    if args.spot is not None:
        market["spot"] = args.spot
    if args.volatility is not None:
        market["volatility"] = args.volatility
    if args.rate is not None:
        market["rate"] = args.rate
    if args.dte is not None:
        market["days_to_expiry"] = args.dte
    if market:
        overrides["market"] = market

    if args.samples is not None:
        overrides["payoff"] = {"sample_count": args.samples}

    stress: dict[str, Any] = {}
    if args.pct_moves is not None:
        stress["pct_moves"] = args.pct_moves
    if args.time_step_days is not None:
        stress["time_step_days"] = args.time_step_days
    if stress:
        overrides["stress"] = stress

    if args.summary_json is not None:
        overrides["output"] = {"summary_json": args.summary_json}
    if args.dry_run:
        overrides["dry_run"] = True

    logging_overrides = collect_logging_overrides(args)
    if logging_overrides:
        overrides["logging"] = logging_overrides

    return overrides


def market_state_from_config(market: Mapping[str, Any]) -> MarketState:
    return MarketState(
        spot=float(market["spot"]),
        volatility=float(market["volatility"]),
        rate=float(market.get("rate", 0.0)),
        days_to_expiry=int(market["days_to_expiry"]),
    )


def stress_grid_from_config(stress: Mapping[str, Any]) -> StressGrid:
    return StressGrid(
        pct_moves=tuple(float(p) for p in stress["pct_moves"]),
        time_step_days=float(stress["time_step_days"]),
        vol_up_multiplier=float(stress.get("vol_up_multiplier", 1.2)),
        vol_down_multiplier=float(stress.get("vol_down_multiplier", 0.8)),
    )


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    if args.list_strategies:
        print("\n".join(strategy_names()))
        return

    config = build_config(DEFAULT_CONFIG, args.config, _build_overrides(args))
    if args.print_config:
        print_config(config)
        return

    setup_logging_from_config(config.get("logging"))
    logger = logging.getLogger(__name__)

    template = get_strategy(config["strategy"])
    state = market_state_from_config(config["market"])
    grid = stress_grid_from_config(config["stress"])
    contracts = int(config["contracts"])
    sample_count = int(config["payoff"]["sample_count"])
    breakeven_samples = int(config["payoff"]["breakeven_sample_count"])
    summary_path = resolve_path(config["output"].get("summary_json"))
    dry_run = bool(config.get("dry_run", False))

    logger.info("Strategy:    %s", template.name)
    logger.info("Market:      %s", state)
    logger.info("Contracts:   %d", contracts)
    logger.info("Stress grid: %s", grid)

    if dry_run:
        log_dry_run(
            logger,
            {
                "action": "analyze_strategy",
                "strategy": template.name,
                "market": config["market"],
                "contracts": contracts,
                "payoff": config["payoff"],
                "stress": config["stress"],
                "summary_json": summary_path,
            },
        )
        return

    report = build_strategy_report(
        template,
        state,
        contracts=contracts,
        sample_count=sample_count,
        breakeven_sample_count=breakeven_samples,
        grid=grid,
    )
    print_strategy_report(report)

    if summary_path is not None:
        summary_path.parent.mkdir(parents=True, exist_ok=True)
        summary_path.write_text(dumps_json(build_summary_metrics(report)), encoding="utf-8")
        logger.info("Summary written: %s", summary_path)


if __name__ == "__main__":
    main()
