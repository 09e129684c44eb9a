"""Hard-coded example datasets from the correlation/regression walkthrough."""
from __future__ import annotations

import pandas as pd

_EXAMPLES = {
    "correlation_example": {
        "description": "Eight paired observations with a strong positive linear association.",
        "x": [1, 3, 3, 5, 7, 8, 10, 10],
        "y": [2, 2, 4, 6, 9, 10, 11, 9],
    },
    "regression_example": {
        "description": "Eleven paired observations used to fit and read a prediction line.",
        "x": [2, 4, 9, 10, 11, 14, 14, 15, 16, 19, 22],
        "y": [5, 6, 10, 14, 15, 20, 22, 22, 23, 27, 33],
    },
    "negative_association": {
        "description": "As X rises Y falls: a negative correlation.",
        "x": [1, 2, 3, 4, 5, 6],
        "y": [10, 8, 8, 5, 3, 2],
    },
}


def list_examples() -> list[str]:
    return list(_EXAMPLES)


def example_description(name: str) -> str:
    return _lookup(name)["description"]


def load_example(name: str) -> pd.DataFrame:
    """Return the dataset as a fresh DataFrame with float columns `x` and `y`."""
    ex = _lookup(name)
    return pd.DataFrame({"x": ex["x"], "y": ex["y"]}, dtype=float)


def _lookup(name: str) -> dict:
    try:
        return _EXAMPLES[name]
    except KeyError:
        raise KeyError(f"Unknown dataset {name!r}; known: {', '.join(_EXAMPLES)}") from None
