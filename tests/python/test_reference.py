import pytest

from bivar.utils import reference, stats
from bivar.utils.datasets import list_examples, load_example
from bivar.utils.reference import compare_with_reference, reference_stats


@pytest.mark.parametrize("name", list_examples())
def test_kernel_matches_duckdb_on_examples(name):
    df = load_example(name)
    assert compare_with_reference(df["x"], df["y"], tol=1e-9) == []


def test_reference_values_for_correlation_example():
    df = load_example("correlation_example")
    ref = reference_stats(df["x"], df["y"])
    assert ref["n"] == 8
    assert ref["ss_x"] == pytest.approx(80.875)
    assert ref["sp"] == pytest.approx(81.625)
    assert stats.correlation(df["x"], df["y"]) == pytest.approx(ref["r"], abs=1e-12)


def test_reference_values_for_regression_example():
    df = load_example("regression_example")
    ref = reference_stats(df["x"], df["y"])
    model = stats.fit_simple_linear_regression(df["x"], df["y"])
    assert model.slope == pytest.approx(ref["slope"], abs=1e-12)
    assert model.intercept == pytest.approx(ref["intercept"], abs=1e-9)


def test_reference_returns_null_for_constant_x():
    ref = reference_stats([5, 5, 5, 5], [1, 2, 3, 4])
    assert ref["slope"] is None
    assert ref["r"] is None


def test_compare_agrees_on_exact_linear_data():
    x, y = [1, 2, 3, 4], [2, 4, 6, 8]
    assert compare_with_reference(x, y, tol=1e-12) == []


def test_compare_lists_each_disagreeing_quantity(monkeypatch):
    x, y = [1, 2, 3, 4], [2, 4, 6, 8]
    real = reference_stats(x, y)
    fake = dict(real, slope=real["slope"] + 0.5, r=None)
    monkeypatch.setattr(reference, "reference_stats", lambda *_: fake)

    mismatches = compare_with_reference(x, y, tol=1e-9)
    assert len(mismatches) == 2
    assert any(m.startswith("slope:") for m in mismatches)
    assert any(m.startswith("r: reference returned NULL") for m in mismatches)
