import numpy as np
import pytest
from scipy.stats import norm

from options_lab.options import norm_cdf, norm_pdf


def test_norm_cdf_within_reference_precision():
    xs = np.linspace(-6.0, 6.0, 481)
    err = np.abs(norm_cdf(xs) - norm.cdf(xs))
    assert err.max() <= 1.5e-7


def test_norm_pdf_matches_reference():
    xs = np.linspace(-5.0, 5.0, 101)
    np.testing.assert_allclose(norm_pdf(xs), norm.pdf(xs), rtol=1e-12)


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.96, 3.3, 7.5])
def test_cdf_and_pdf_are_symmetric(x: float):
    assert norm_pdf(-x) == norm_pdf(x)
    assert norm_cdf(-x) == pytest.approx(1.0 - norm_cdf(x), abs=1e-15)


def test_cdf_is_bounded_and_monotonic():
    xs = np.linspace(-40.0, 40.0, 2001)
    values = norm_cdf(xs)
    assert values.min() >= 0.0
    assert values.max() <= 1.0
    assert np.all(np.diff(values) >= 0.0)


def test_scalar_in_scalar_out_and_array_in_array_out():
    assert isinstance(norm_cdf(0.3), float)
    assert isinstance(norm_pdf(0.3), float)
    out = norm_cdf([[-1.0, 0.0], [1.0, 2.0]])
    assert isinstance(out, np.ndarray)
    assert out.shape == (2, 2)
