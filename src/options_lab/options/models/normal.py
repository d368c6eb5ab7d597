"""Closed-form standard normal CDF/PDF.

The CDF uses the Abramowitz-Stegun 7.1.26 rational approximation of `erf`
(absolute error <= 1.5e-7). The approximation is evaluated on `|x|` and
reflected, so `cdf(-x) = 1 - cdf(x)` holds by construction. Both functions
accept scalars (returning `float`) or array-likes (returning `np.ndarray`).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

_P = 0.3275911
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429

_SQRT2 = np.sqrt(2.0)
_INV_SQRT_2PI = 1.0 / np.sqrt(2.0 * np.pi)


def _as_output(values: np.ndarray, like: ArrayLike) -> float | np.ndarray:
    if np.ndim(like) == 0:
        return float(values)
    return values


def _upper_tail(z: np.ndarray) -> np.ndarray:
    """Return `0.5 * erfc(z)` for `z >= 0`."""
    t = 1.0 / (1.0 + _P * z)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    return 0.5 * poly * np.exp(-z * z)


def norm_cdf(x: ArrayLike) -> float | np.ndarray:
    """Standard normal cumulative distribution function."""
    arr = np.asarray(x, dtype=float)
    tail = _upper_tail(np.abs(arr) / _SQRT2)
    return _as_output(np.where(arr < 0, tail, 1.0 - tail), x)


def norm_pdf(x: ArrayLike) -> float | np.ndarray:
    """Standard normal probability density function."""
    arr = np.asarray(x, dtype=float)
    return _as_output(_INV_SQRT_2PI * np.exp(-0.5 * arr * arr), x)
