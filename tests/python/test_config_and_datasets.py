import pytest

from bivar.utils.config import DEFAULT_TOLERANCE, load_cfg, predict_points, tolerance
from bivar.utils.datasets import example_description, list_examples, load_example
from bivar.utils.glossary import GLOSSARY


def test_missing_config_is_empty(tmp_path):
    cfg = load_cfg(tmp_path / "nope.yaml")
    assert cfg == {}
    assert tolerance(cfg) == DEFAULT_TOLERANCE
    assert predict_points(cfg, "regression_example") == []


def test_config_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("tolerance: 1.0e-6\npredict_at:\n  regression_example: [12, 30]\n")
    cfg = load_cfg(path)
    assert tolerance(cfg) == pytest.approx(1e-6)
    assert predict_points(cfg, "regression_example") == [12.0, 30.0]
    assert predict_points(cfg, "correlation_example") == []


def test_empty_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_cfg(path) == {}


def test_examples_are_well_formed():
    assert {"correlation_example", "regression_example"} <= set(list_examples())
    for name in list_examples():
        df = load_example(name)
        assert list(df.columns) == ["x", "y"]
        assert len(df) >= 2
        assert example_description(name)


def test_load_example_returns_a_copy():
    df = load_example("correlation_example")
    df.loc[0, "x"] = 999.0
    assert load_example("correlation_example").loc[0, "x"] == 1.0


def test_unknown_example():
    with pytest.raises(KeyError, match="known: correlation_example"):
        load_example("nope")


def test_glossary_covers_terms():
    for term in ("r", "SS", "SP", "Regression", "Interpolation", "Extrapolation", "Homoscedasticity"):
        assert term in GLOSSARY
