#!/usr/bin/env python3
"""
Print a worked correlation + regression example for one or more datasets.

Usage:
  python scripts/walkthrough.py
  python scripts/walkthrough.py --dataset regression_example --predict 12 30
  python scripts/walkthrough.py --glossary
Env (optional):
  BIVAR_CONFIG (default: config/config.yaml)
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import duckdb
import pandas as pd

from bivar.utils import stats
from bivar.utils.config import CONFIG_PATH, load_cfg, predict_points, tolerance
from bivar.utils.datasets import example_description, list_examples, load_example
from bivar.utils.glossary import GLOSSARY
from bivar.utils.reference import compare_with_reference


def print_glossary() -> None:
    width = max(len(k) for k in GLOSSARY)
    for term, text in GLOSSARY.items():
        print(f"  {term:<{width}}  {text}")


def residual_table(x, y, summary: stats.RegressionSummary) -> pd.DataFrame:
    return pd.DataFrame({
        "X": x,
        "Y": y,
        "Y'": summary.y_hat,
        "Y-Y'": summary.resid,
        "z": summary.z,
    })


def walk(name: str, queries: Sequence[float], tol: float) -> None:
    df = load_example(name)
    x = df["x"].to_numpy()
    y = df["y"].to_numpy()

    print(f"\n[walkthrough] {name}: {example_description(name)}")
    mx, my = stats.mean(x), stats.mean(y)
    ss_x, ss_y = stats.sum_of_squares(x), stats.sum_of_squares(y)
    sp = stats.sum_of_products(x, y)
    r = stats.correlation(x, y)
    summary = stats.regression_summary(x, y)
    model = summary.model

    print(f"  n = {len(df)}   mean X = {mx:.4f}   mean Y = {my:.4f}")
    print(f"  SSx = {ss_x:.4f}   SSy = {ss_y:.4f}   SP = {sp:.4f}")
    print(f"  r = SP / sqrt(SSx * SSy) = {r:.4f}")
    print(f"  b = SP / SSx = {model.slope:.4f}   a = mean Y - b * mean X = {model.intercept:.4f}")
    print(f"  Y' = {model.slope:.4f} X + {model.intercept:.4f}   R² = {summary.r2:.4f}   std. error = {summary.sigma:.4f}")
    print(residual_table(x, y, summary).to_string(index=False, float_format=lambda v: f"{v:.3f}"))

    x_range = stats.fitted_range(x)
    for q in queries:
        kind = "extrapolation" if stats.is_extrapolation(q, x_range) else "interpolation"
        print(f"  predict X = {q:g}: Y' = {model.predict(q):.4f} ({kind}, observed X in [{x_range[0]:g}, {x_range[1]:g}])")

    mismatches = compare_with_reference(x, y, tol)
    if mismatches:
        print(f"  [walkthrough] DuckDB reference DISAGREES (tol={tol:g}):")
        for m in mismatches:
            print(f"    - {m}")
    else:
        print(f"  [walkthrough] DuckDB reference agrees (tol={tol:g})")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Correlation & simple regression walkthrough")
    p.add_argument("--config", default=str(CONFIG_PATH))
    p.add_argument("--dataset", nargs="+", choices=list_examples(), default=None,
                   help="Datasets to walk through (default: from config, else all)")
    p.add_argument("--predict", nargs="+", type=float, default=None,
                   help="X values to predict for (default: from config)")
    p.add_argument("--tolerance", type=float, default=None)
    p.add_argument("--glossary", action="store_true", help="Print the glossary and exit")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    if args.glossary:
        print_glossary()
        return

    cfg = load_cfg(args.config)
    tol = args.tolerance if args.tolerance is not None else tolerance(cfg)
    names = args.dataset or cfg.get("datasets") or list_examples()

    print(f"[walkthrough] CONFIG={args.config} DATASETS={','.join(names)}")
    for name in names:
        queries = args.predict if args.predict is not None else predict_points(cfg, name)
        walk(name, queries, tol)


if __name__ == "__main__":
    try:
        main()
    except stats.StatisticsError as e:
        print(f"[FATAL][stats] {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
    except duckdb.Error as e:
        print(f"[FATAL][DuckDB] {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"[FATAL] {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
