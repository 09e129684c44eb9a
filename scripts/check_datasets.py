#!/usr/bin/env python3
"""
Fast-fail contracts over the example datasets, plus a kernel-vs-DuckDB drift check.

Usage:
  python scripts/check_datasets.py
  python scripts/check_datasets.py --tolerance 1e-6 --dataset correlation_example
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import duckdb
import numpy as np

from bivar.utils import stats
from bivar.utils.config import CONFIG_PATH, load_cfg, tolerance
from bivar.utils.datasets import list_examples, load_example
from bivar.utils.reference import compare_with_reference


def _assert_ok(check, msg: str, failures: list[str]) -> bool:
    """Run `check`; record a failure (with the error text) if it raises a StatisticsError."""
    try:
        check()
    except stats.StatisticsError as e:
        failures.append(f"{msg}: {type(e).__name__}: {e}")
        return False
    return True


def check_dataset(name: str, tol: float) -> list[str]:
    df = load_example(name)
    missing = {"x", "y"} - set(df.columns)
    if missing:
        return [f"{name}: missing columns {sorted(missing)}"]
    return check_pairs(name, df["x"].to_numpy(dtype=float), df["y"].to_numpy(dtype=float), tol)


def check_pairs(name: str, x, y, tol: float) -> list[str]:
    """Contracts for one paired sample."""
    failures: list[str] = []

    # ---------- samples ----------
    ok = _assert_ok(lambda: stats.mean(x), f"{name}: x is not a valid sample", failures)
    ok &= _assert_ok(lambda: stats.mean(y), f"{name}: y is not a valid sample", failures)
    if not ok or not _assert_ok(lambda: stats.sum_of_products(x, y), f"{name}: x/y do not pair up", failures):
        return failures

    # ---------- variance ----------
    ok = _assert_ok(lambda: stats.correlation(x, y), f"{name}: correlation undefined", failures)
    ok &= _assert_ok(lambda: stats.fit_simple_linear_regression(x, y), f"{name}: slope undefined", failures)
    if not ok:
        return failures

    # ---------- invariants ----------
    r = stats.correlation(x, y)
    if not -1.0 <= r <= 1.0:
        failures.append(f"{name}: correlation out of range ({r})")
    b = stats.fit_simple_linear_regression(x, y).slope
    implied = b * np.sqrt(stats.sum_of_squares(x) / stats.sum_of_squares(y))
    if abs(implied - r) > max(tol, 1e-12):
        failures.append(f"{name}: r != b * sqrt(SSx/SSy) ({r} vs {implied})")

    # ---------- reference drift ----------
    failures.extend(f"{name}: {m}" for m in compare_with_reference(x, y, tol))
    return failures


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Example dataset contracts")
    p.add_argument("--config", default=str(CONFIG_PATH))
    p.add_argument("--dataset", nargs="+", choices=list_examples(), default=None)
    p.add_argument("--tolerance", type=float, default=None)
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    cfg = load_cfg(args.config)
    tol = args.tolerance if args.tolerance is not None else tolerance(cfg)
    names = args.dataset or list_examples()

    print(f"[check] DATASETS={','.join(names)} TOL={tol:g}")

    failures: list[str] = []
    for name in names:
        failures.extend(check_dataset(name, tol))

    if failures:
        print("\n[CHECK FAIL] One or more dataset contracts were violated:")
        for i, f in enumerate(failures, 1):
            print(f" {i:02d}. {f}")
        sys.exit(2)

    print("[check] All checks passed ✔")


if __name__ == "__main__":
    try:
        main()
    except duckdb.Error as e:
        print(f"[FATAL][DuckDB] {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"[FATAL] {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
