"""Option pricing models, engines, risk analytics and shared types."""

from .engines import BlackScholesPricer, GreeksModel, PriceModel
from .errors import InvalidInputError, OptionsLabError, UnknownStrategyError
from .models import (
    EXPIRY_EPSILON_YEARS,
    bs_d1_d2,
    bs_delta,
    bs_gamma,
    bs_greeks,
    bs_price,
    bs_price_and_greeks,
    bs_theta,
    bs_vega,
    intrinsic_value,
    iv_hv_ratio,
    norm_cdf,
    norm_pdf,
    synthetic_smile,
)
from .risk import (
    BREAKEVEN_SAMPLE_COUNT,
    DEFAULT_PCT_MOVES,
    DISPLAY_SAMPLE_COUNT,
    MarginModel,
    PayoffPoint,
    PayoffProfile,
    ScenarioRow,
    StressGrid,
    StressMarginProxyModel,
    aggregate,
    estimate_margin,
    find_breakevens,
    payoff_curve,
    price_legs,
    stress,
)
from .types import (
    CONTRACT_MULTIPLIER,
    Action,
    Greeks,
    Leg,
    LegTemplate,
    MarketState,
    OptionType,
    OptionTypeInput,
    PortfolioAggregate,
    PricingResult,
    StrategyTemplate,
    normalize_option_type,
)

__all__ = [
    "OptionType",
    "OptionTypeInput",
    "Action",
    "MarketState",
    "Greeks",
    "PricingResult",
    "Leg",
    "LegTemplate",
    "StrategyTemplate",
    "PortfolioAggregate",
    "CONTRACT_MULTIPLIER",
    "normalize_option_type",
    "OptionsLabError",
    "InvalidInputError",
    "UnknownStrategyError",
    "PriceModel",
    "GreeksModel",
    "BlackScholesPricer",
    "EXPIRY_EPSILON_YEARS",
    "norm_cdf",
    "norm_pdf",
    "bs_d1_d2",
    "bs_price",
    "bs_delta",
    "bs_gamma",
    "bs_vega",
    "bs_theta",
    "bs_greeks",
    "bs_price_and_greeks",
    "intrinsic_value",
    "synthetic_smile",
    "iv_hv_ratio",
    "aggregate",
    "price_legs",
    "PayoffPoint",
    "PayoffProfile",
    "ScenarioRow",
    "DISPLAY_SAMPLE_COUNT",
    "BREAKEVEN_SAMPLE_COUNT",
    "find_breakevens",
    "payoff_curve",
    "DEFAULT_PCT_MOVES",
    "StressGrid",
    "stress",
    "MarginModel",
    "StressMarginProxyModel",
    "estimate_margin",
]
