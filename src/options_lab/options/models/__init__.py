"""Analytical option-pricing models."""

from .black_scholes import (
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
    is_expired,
    validate_pricing_inputs,
)
from .normal import norm_cdf, norm_pdf
from .smile import iv_hv_ratio, synthetic_smile

__all__ = [
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
    "is_expired",
    "validate_pricing_inputs",
    "synthetic_smile",
    "iv_hv_ratio",
]
