"""Synthetic volatility smile for display purposes.

The curve is a stylised skew (OTM puts richer than OTM calls) around the ATM
volatility. Pricing never reads it; every engine prices at a flat volatility.
"""

from __future__ import annotations

import numpy as np

from options_lab.options.errors import InvalidInputError


def synthetic_smile(
    spot: float,
    atm_vol: float,
    *,
    n_points: int = 11,
    low: float = 0.75,
    step: float = 0.05,
) -> tuple[np.ndarray, np.ndarray]:
    """Return `(strikes, implied_vols)` over `spot * (low + i * step)`.

    With moneyness `m = K / S`:
    `iv = atm_vol * (1 + 0.18 (1 - m)^2 + 0.04 w (1 - m))`, where `w = -0.5`
    above the money and `1` otherwise.
    """
    if not spot > 0:
        raise InvalidInputError("spot must be > 0")
    if not atm_vol > 0:
        raise InvalidInputError("atm_vol must be > 0")
    if n_points < 2:
        raise InvalidInputError("n_points must be >= 2")
    if not low > 0 or not step > 0:
        raise InvalidInputError("low and step must be > 0")

    moneyness = low + step * np.arange(n_points)
    strikes = spot * moneyness
    skew_weight = np.where(moneyness > 1.0, -0.5, 1.0)
    ivs = atm_vol * (
        1.0 + 0.18 * (1.0 - moneyness) ** 2 + 0.04 * skew_weight * (1.0 - moneyness)
    )
    return strikes, ivs


def iv_hv_ratio(implied_vol: float, historical_vol: float | None = None) -> float:
    """Ratio of implied to historical volatility.

    Without a historical estimate, HV is proxied as `0.82 * implied_vol`.
    """
    if not implied_vol > 0:
        raise InvalidInputError("implied_vol must be > 0")
    hv = 0.82 * implied_vol if historical_vol is None else historical_vol
    if not hv > 0:
        raise InvalidInputError("historical_vol must be > 0")
    return implied_vol / hv
