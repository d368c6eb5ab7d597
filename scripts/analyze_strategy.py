#!/usr/bin/env python
"""
Analyze one catalog strategy with hard-coded market inputs.

This script is a thin wrapper around:
    options_lab.reporting.build_strategy_report
"""

import logging

from options_lab.options import MarketState
from options_lab.reporting import build_strategy_report, print_strategy_report
from options_lab.strategies import get_strategy
from options_lab.utils import setup_logging

STRATEGY = "Straddle"
SPOT = 100.0
VOLATILITY = 0.25
RATE = 0.05
DAYS_TO_EXPIRY = 30
CONTRACTS = 1

LOG_LEVEL = "INFO"
LOG_FMT_CONSOLE = "%(asctime)s %(levelname)s %(shortname)s - %(message)s"
LOG_FILE = None
LOG_COLORED = True


def main() -> None:
    setup_logging(
        LOG_LEVEL,
        fmt_console=LOG_FMT_CONSOLE,
        log_file=LOG_FILE,
        colored=LOG_COLORED,
    )
    logger = logging.getLogger(__name__)
    logger.info("Strategy: %s", STRATEGY)

    state = MarketState(
        spot=SPOT,
        volatility=VOLATILITY,
        rate=RATE,
        days_to_expiry=DAYS_TO_EXPIRY,
    )
    report = build_strategy_report(get_strategy(STRATEGY), state, contracts=CONTRACTS)
    print_strategy_report(report)


if __name__ == "__main__":
    main()
