import numpy as np
import pytest

from bivar.utils.stats import DegenerateVarianceError, regression_summary


def test_summary_recovers_line_with_noise():
    """
    Generate synthetic linear data with small Gaussian noise and confirm:
    - R^2 is high (> 0.9)
    - Residuals are zero-mean-ish
    - Z-residuals have ~unit scale
    """
    rng = np.random.default_rng(42)
    n = 500
    true_a, true_b = 0.5, 0.002  # intercept, slope
    x = rng.uniform(0, 1000, size=n)
    noise = rng.normal(0, 0.02, size=n)
    y = true_a + true_b * x + noise

    res = regression_summary(x, y)

    assert res.n == n
    assert res.r2 > 0.9, f"Low R^2: {res.r2}"
    assert abs(res.resid.mean()) < 1e-3, f"Residual mean too large: {res.resid.mean()}"
    z_std = float(np.std(res.z, ddof=2))
    assert 0.8 < z_std < 1.2, f"Unexpected z-residual std: {z_std}"

    assert abs(res.model.intercept - true_a) < 0.05, f"Intercept off: {res.model.intercept} vs {true_a}"
    assert abs(res.model.slope - true_b) < 5e-4, f"Slope off: {res.model.slope} vs {true_b}"


def test_summary_on_worked_example():
    x = [2, 4, 9, 10, 11, 14, 14, 15, 16, 19, 22]
    y = [5, 6, 10, 14, 15, 20, 22, 22, 23, 27, 33]
    res = regression_summary(x, y)

    r = np.corrcoef(x, y)[0, 1]
    assert res.r2 == pytest.approx(r ** 2)
    np.testing.assert_allclose(res.y_hat + res.resid, y)
    sse = float(np.sum(res.resid ** 2))
    assert res.sigma == pytest.approx(np.sqrt(sse / (len(x) - 2)))


def test_summary_perfect_fit_has_zero_sigma():
    res = regression_summary([1, 2, 3, 4], [3, 5, 7, 9])
    assert res.r2 == pytest.approx(1.0)
    assert res.sigma == pytest.approx(0.0, abs=1e-12)
    # z falls back to raw residuals when sigma is 0
    np.testing.assert_allclose(res.z, res.resid)


def test_summary_constant_y():
    res = regression_summary([1, 2, 3], [4, 4, 4])
    assert res.r2 == 0.0
    assert res.model.slope == 0.0


def test_summary_needs_three_pairs():
    with pytest.raises(DegenerateVarianceError):
        regression_summary([1, 2], [3, 4])
