"""
Bivariate statistics kernel: means, sums of squares/products, Pearson r and
one-predictor least squares.

All functions are pure. Inputs are anything NumPy can turn into a 1-D float
array (lists, tuples, arrays, pandas Series). Invalid input raises one of the
StatisticsError subclasses below; nothing is masked or dropped.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]


class StatisticsError(ValueError):
    """Base class for invalid-input failures."""


class EmptyInputError(StatisticsError):
    pass


class LengthMismatchError(StatisticsError):
    pass


class DegenerateVarianceError(StatisticsError):
    """Zero variance or zero degrees of freedom in a denominator."""


class NonFiniteValueError(StatisticsError):
    pass


def _as_sample(values: ArrayLike, name: str = "sample") -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.size == 0:
        raise EmptyInputError(f"{name} is empty")
    bad = ~np.isfinite(arr)
    if bad.any():
        raise NonFiniteValueError(
            f"{name} has {int(bad.sum())} non-finite value(s) (first at index {int(np.argmax(bad))})"
        )
    return arr


def _as_pair(x: ArrayLike, y: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    xa = _as_sample(x, "x")
    ya = _as_sample(y, "y")
    if xa.size != ya.size:
        raise LengthMismatchError(f"x has {xa.size} values but y has {ya.size}")
    return xa, ya


def _require_pairs(n: int, minimum: int = 2) -> None:
    if n < minimum:
        raise DegenerateVarianceError(f"Need at least {minimum} pairs, got {n}")


def _deviations(arr: np.ndarray) -> np.ndarray:
    # a constant sample deviates by exactly 0, even when its mean rounds
    if arr.min() == arr.max():
        return np.zeros_like(arr)
    return arr - arr.mean()


def _finite(value: float, what: str) -> float:
    if not np.isfinite(value):
        raise NonFiniteValueError(f"{what} overflowed; rescale the inputs")
    return value


# ---------- single-sample ----------

def mean(sample: ArrayLike) -> float:
    return float(_as_sample(sample).mean())


def sum_of_squares(sample: ArrayLike) -> float:
    """SS = sum((x_i - mean)^2), computed two-pass. Never negative."""
    d = _deviations(_as_sample(sample))
    return float(np.dot(d, d))


def variance(sample: ArrayLike, ddof: int = 1) -> float:
    arr = _as_sample(sample)
    dof = arr.size - ddof
    if dof <= 0:
        raise DegenerateVarianceError(f"Variance needs more than {ddof} value(s), got {arr.size}")
    d = _deviations(arr)
    return float(np.dot(d, d)) / dof


def standard_deviation(sample: ArrayLike, ddof: int = 1) -> float:
    return float(np.sqrt(variance(sample, ddof=ddof)))


# ---------- paired ----------

def sum_of_products(x: ArrayLike, y: ArrayLike) -> float:
    """SP = sum((x_i - mean x) * (y_i - mean y))."""
    xa, ya = _as_pair(x, y)
    return float(np.dot(_deviations(xa), _deviations(ya)))


def covariance(x: ArrayLike, y: ArrayLike, ddof: int = 1) -> float:
    xa, ya = _as_pair(x, y)
    dof = xa.size - ddof
    if dof <= 0:
        raise DegenerateVarianceError(f"Covariance needs more than {ddof} pair(s), got {xa.size}")
    return float(np.dot(_deviations(xa), _deviations(ya))) / dof


def correlation(x: ArrayLike, y: ArrayLike) -> float:
    """
    Pearson r = SP / sqrt(SSx * SSy).

    Raises DegenerateVarianceError if either sample is constant (or n < 2).
    The result is clipped to [-1, 1] to absorb rounding, like np.corrcoef.
    """
    xa, ya = _as_pair(x, y)
    _require_pairs(xa.size)
    dx, dy = _deviations(xa), _deviations(ya)
    ss_x = _finite(float(np.dot(dx, dx)), "sum of squares of x")
    ss_y = _finite(float(np.dot(dy, dy)), "sum of squares of y")
    if ss_x == 0 or ss_y == 0:
        which = "x" if ss_x == 0 else "y"
        raise DegenerateVarianceError(f"Correlation undefined: {which} is constant (sum of squares = 0)")
    sp = _finite(float(np.dot(dx, dy)), "sum of products")
    # sqrt each factor separately; SSx * SSy can overflow when each is finite
    r = sp / (np.sqrt(ss_x) * np.sqrt(ss_y))
    return float(np.clip(r, -1.0, 1.0))


# ---------- regression ----------

@dataclass(frozen=True)
class RegressionModel:
    """Fitted line Y' = slope * X + intercept."""
    slope: float        # b
    intercept: float    # a

    def predict(self, x_query: float) -> float:
        # Any real x is accepted; extrapolation is the caller's call.
        return self.slope * float(x_query) + self.intercept

    def residual(self, x_query: float, y_actual: float) -> float:
        """Prediction minus the observed value."""
        return self.predict(x_query) - float(y_actual)

    def predict_many(self, xs: ArrayLike) -> np.ndarray:
        return self.slope * np.asarray(xs, dtype=float).reshape(-1) + self.intercept

    def residuals(self, xs: ArrayLike, ys: ArrayLike) -> np.ndarray:
        xa, ya = _as_pair(xs, ys)
        return self.predict_many(xa) - ya


def fit_simple_linear_regression(x: ArrayLike, y: ArrayLike) -> RegressionModel:
    """
    Least-squares fit of y on x: b = SP / SSx, a = mean(y) - b * mean(x).

    Fails with DegenerateVarianceError when x is constant (slope undefined)
    or there are fewer than 2 pairs. A constant y is fine and gives b = 0.
    """
    xa, ya = _as_pair(x, y)
    _require_pairs(xa.size)
    dx = _deviations(xa)
    ss_x = _finite(float(np.dot(dx, dx)), "sum of squares of x")
    if ss_x == 0:
        raise DegenerateVarianceError("Slope undefined: x is constant (sum of squares = 0)")
    b = _finite(float(np.dot(dx, _deviations(ya))), "sum of products") / ss_x
    a = float(ya.mean()) - b * float(xa.mean())
    return RegressionModel(slope=b, intercept=a)


def fitted_range(x: ArrayLike) -> Tuple[float, float]:
    arr = _as_sample(x, "x")
    return float(arr.min()), float(arr.max())


def is_extrapolation(x_query: float, x_range: Tuple[float, float]) -> bool:
    lo, hi = x_range
    return not (lo <= float(x_query) <= hi)


@dataclass
class RegressionSummary:
    model: RegressionModel
    y_hat: np.ndarray
    resid: np.ndarray       # y - y_hat
    r2: float
    sigma: float            # standard error of the estimate, sqrt(SSE / (n - 2))
    z: np.ndarray           # standardized residuals

    @property
    def n(self) -> int:
        return int(self.y_hat.size)


def regression_summary(x: ArrayLike, y: ArrayLike) -> RegressionSummary:
    """
    Fit y = a + b*x and report fitted values, residuals, R^2, the standard
    error of the estimate, and z-residuals.

    - Needs at least 3 pairs (n - 2 residual degrees of freedom).
    - Residuals here are observed minus fitted, the usual table convention;
      RegressionModel.residual keeps the fitted-minus-observed sign.
    """
    xa, ya = _as_pair(x, y)
    _require_pairs(xa.size, minimum=3)
    model = fit_simple_linear_regression(xa, ya)

    y_hat = model.predict_many(xa)
    resid = ya - y_hat

    ss_res = float(np.dot(resid, resid))
    dy = _deviations(ya)
    ss_tot = float(np.dot(dy, dy))
    r2 = 1.0 - ss_res / ss_tot if ss_tot > 0 else 0.0
    sigma = float(np.sqrt(ss_res / (xa.size - 2)))
    z = resid / (sigma if sigma > 0 else 1.0)

    return RegressionSummary(model=model, y_hat=y_hat, resid=resid, r2=r2, sigma=sigma, z=z)
