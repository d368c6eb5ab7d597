"""Black-Scholes pricing and Greeks for European options.

All functions share the argument order `(S, K, T, r, sigma, option_type)`.
`T` is in years. Inside `EXPIRY_EPSILON_YEARS` (about one hour) the option is
treated as expired and valued at intrinsic, which also keeps `sigma * sqrt(T)`
away from zero.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from options_lab.options.errors import InvalidInputError
from options_lab.options.models.normal import norm_cdf, norm_pdf
from options_lab.options.types import (
    DAYS_PER_YEAR,
    Greeks,
    OptionType,
    OptionTypeInput,
    PricingResult,
    normalize_option_type,
)

EXPIRY_EPSILON_YEARS = 1e-4


def validate_pricing_inputs(
    S: float, K: float, T: float, sigma: float, r: float = 0.0
) -> None:
    """Reject inputs outside the pricer's domain before any arithmetic.

    Non-finite values are rejected too; they would otherwise surface as NaN
    prices downstream.
    """
    checks = (
        ("spot", S),
        ("strike", K),
        ("time to expiry", T),
        ("volatility", sigma),
        ("rate", r),
    )
    for label, value in checks:
        if not np.isfinite(value):
            raise InvalidInputError(f"{label} must be finite, got {value!r}")
    if not S > 0:
        raise InvalidInputError(f"spot must be > 0, got {S!r}")
    if not K > 0:
        raise InvalidInputError(f"strike must be > 0, got {K!r}")
    if not sigma > 0:
        raise InvalidInputError(f"volatility must be > 0, got {sigma!r}")
    if not T >= 0:
        raise InvalidInputError(f"time to expiry must be >= 0, got {T!r}")


def is_expired(T: float) -> bool:
    """Whether `T` falls inside the near-expiry intrinsic-value regime."""
    return T <= EXPIRY_EPSILON_YEARS


def intrinsic_value(
    S: ArrayLike, K: float, option_type: OptionTypeInput = "call"
) -> float | np.ndarray:
    """Exercise value at spot `S`; vectorised over `S`."""
    opt_type = normalize_option_type(option_type)
    spot = np.asarray(S, dtype=float)
    if opt_type is OptionType.CALL:
        value = np.maximum(spot - K, 0.0)
    else:
        value = np.maximum(K - spot, 0.0)
    if np.ndim(S) == 0:
        return float(value)
    return value


def bs_d1_d2(S: float, K: float, T: float, r: float, sigma: float) -> tuple[float, float]:
    """Compute d1 and d2; requires `T > 0` and `sigma > 0`."""
    if T <= 0 or sigma <= 0:
        raise InvalidInputError("T and sigma must be positive")
    vol_sqrt_t = sigma * np.sqrt(T)
    d1 = (np.log(S / K) + (r + 0.5 * sigma**2) * T) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return float(d1), float(d2)


def bs_price(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionTypeInput = "call",
) -> float:
    """Black-Scholes premium (no dividends)."""
    opt_type = normalize_option_type(option_type)
    validate_pricing_inputs(S, K, T, sigma, r)
    if is_expired(T):
        return intrinsic_value(S, K, opt_type)

    d1, d2 = bs_d1_d2(S, K, T, r, sigma)
    discount = np.exp(-r * T)
    if opt_type is OptionType.CALL:
        return float(S * norm_cdf(d1) - K * discount * norm_cdf(d2))
    return float(K * discount * norm_cdf(-d2) - S * norm_cdf(-d1))


def bs_delta(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionTypeInput = "call",
) -> float:
    """Black-Scholes delta; a step function at expiry."""
    opt_type = normalize_option_type(option_type)
    validate_pricing_inputs(S, K, T, sigma, r)
    if is_expired(T):
        if opt_type is OptionType.CALL:
            return 1.0 if S >= K else 0.0
        return -1.0 if S <= K else 0.0

    d1, _ = bs_d1_d2(S, K, T, r, sigma)
    if opt_type is OptionType.CALL:
        return float(norm_cdf(d1))
    return float(norm_cdf(d1) - 1.0)


def bs_gamma(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Black-Scholes gamma (identical for calls and puts)."""
    validate_pricing_inputs(S, K, T, sigma, r)
    if is_expired(T):
        return 0.0
    d1, _ = bs_d1_d2(S, K, T, r, sigma)
    return float(norm_pdf(d1) / (S * sigma * np.sqrt(T)))


def bs_vega(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Black-Scholes vega per 1 volatility point (0.01)."""
    validate_pricing_inputs(S, K, T, sigma, r)
    if is_expired(T):
        return 0.0
    d1, _ = bs_d1_d2(S, K, T, r, sigma)
    return float(S * norm_pdf(d1) * np.sqrt(T) / 100.0)


def bs_theta(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionTypeInput = "call",
) -> float:
    """Black-Scholes theta per calendar day."""
    opt_type = normalize_option_type(option_type)
    validate_pricing_inputs(S, K, T, sigma, r)
    if is_expired(T):
        return 0.0
    d1, d2 = bs_d1_d2(S, K, T, r, sigma)
    decay = -(S * norm_pdf(d1) * sigma) / (2 * np.sqrt(T))
    carry = r * K * np.exp(-r * T)

    if opt_type is OptionType.CALL:
        theta_year = decay - carry * norm_cdf(d2)
    else:
        theta_year = decay + carry * norm_cdf(-d2)
    return float(theta_year / DAYS_PER_YEAR)


def bs_greeks(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionTypeInput = "call",
) -> Greeks:
    """Return delta, gamma, theta and vega for one option."""
    return Greeks(
        delta=bs_delta(S, K, T, r, sigma, option_type),
        gamma=bs_gamma(S, K, T, r, sigma),
        theta=bs_theta(S, K, T, r, sigma, option_type),
        vega=bs_vega(S, K, T, r, sigma),
    )


def bs_price_and_greeks(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionTypeInput = "call",
) -> PricingResult:
    """Return premium and Greeks for one option."""
    return PricingResult(
        premium=bs_price(S, K, T, r, sigma, option_type),
        greeks=bs_greeks(S, K, T, r, sigma, option_type),
    )
