"""
Reference numbers for a paired sample, computed by DuckDB's own aggregates.

Used to cross-check the kernel in bivar.utils.stats against an independent
statistics engine. DuckDB returns NULL on degenerate input (e.g. constant x),
which comes back here as None/NaN rather than an exception.
"""
from __future__ import annotations

from typing import Any

import duckdb
import numpy as np
import pandas as pd

from bivar.utils import stats

REFERENCE_SQL = """
    SELECT
      count(*)                AS n,
      avg(x)                  AS mean_x,
      avg(y)                  AS mean_y,
      regr_sxx(y, x)          AS ss_x,
      regr_syy(y, x)          AS ss_y,
      regr_sxy(y, x)          AS sp,
      corr(y, x)              AS r,
      regr_slope(y, x)        AS slope,
      regr_intercept(y, x)    AS intercept,
      regr_r2(y, x)           AS r2
    FROM pairs
"""


def reference_stats(x, y) -> dict[str, Any]:
    df = pd.DataFrame({
        "x": np.asarray(x, dtype=float).reshape(-1),
        "y": np.asarray(y, dtype=float).reshape(-1),
    })
    with duckdb.connect() as con:
        con.register("pairs", df)
        row = con.execute(REFERENCE_SQL).fetchdf().iloc[0].to_dict()
    return {k: (None if pd.isna(v) else v) for k, v in row.items()}


def compare_with_reference(x, y, tol: float = 1e-9) -> list[str]:
    """
    Return a list of mismatches between the kernel and DuckDB (empty if they agree).
    Tolerance is relative for values larger than 1 in magnitude, absolute otherwise.
    """
    ref = reference_stats(x, y)
    model = stats.fit_simple_linear_regression(x, y)
    ours = {
        "mean_x": stats.mean(x),
        "mean_y": stats.mean(y),
        "ss_x": stats.sum_of_squares(x),
        "ss_y": stats.sum_of_squares(y),
        "sp": stats.sum_of_products(x, y),
        "r": stats.correlation(x, y),
        "slope": model.slope,
        "intercept": model.intercept,
    }

    mismatches: list[str] = []
    for key, value in ours.items():
        expected = ref.get(key)
        if expected is None:
            mismatches.append(f"{key}: reference returned NULL (kernel={value:.6g})")
            continue
        expected = float(expected)
        if abs(value - expected) > tol * max(1.0, abs(expected)):
            mismatches.append(f"{key}: kernel={value:.10g} reference={expected:.10g}")
    return mismatches
