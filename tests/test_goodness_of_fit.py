from __future__ import annotations

import pytest
from scipy import stats

from pmfkit.diagnostics import chi_square_test, frequency_table
from pmfkit.distributions import EnumeratedPmf


def test_frequency_table_groups_values() -> None:
    pmf = EnumeratedPmf([("x", 0.2), (None, 0.1), ("y", 0.2), ("x", 0.1), (None, 0.4)])
    draws = ["x", None, None, "y", None, "x"]
    table = frequency_table(draws, pmf)
    assert list(table["value"]) == ["x", None, "y"]
    assert list(table["observed"]) == [2, 3, 1]
    assert list(table["expected"]) == pytest.approx([0.3, 0.5, 0.2])
    assert table["observed_frac"].sum() == pytest.approx(1.0)


def test_exact_match_has_zero_statistic() -> None:
    pmf = EnumeratedPmf([("a", 1.0), ("b", 3.0)])
    result = chi_square_test(["a"] + ["b"] * 3, pmf)
    assert result["chi2"] == pytest.approx(0.0)
    assert result["dof"] == 1
    assert result["p_value"] == pytest.approx(1.0)
    assert result["num_draws"] == 4


def test_skewed_draws_are_rejected() -> None:
    pmf = EnumeratedPmf([("a", 1.0), ("b", 1.0)])
    result = chi_square_test(["a"] * 900 + ["b"] * 100, pmf)
    assert result["p_value"] < 1e-6


def test_unknown_draw_raises() -> None:
    pmf = EnumeratedPmf([("a", 1.0), ("b", 1.0)])
    with pytest.raises(ValueError):
        frequency_table(["c"], pmf)


def test_zero_probability_draw_raises() -> None:
    pmf = EnumeratedPmf([("a", 1.0), ("b", 1.0), ("z", 0.0)])
    with pytest.raises(ValueError):
        chi_square_test(["a", "z"], pmf)


def test_single_category_raises() -> None:
    pmf = EnumeratedPmf([("a", 1.0), ("z", 0.0)])
    with pytest.raises(ValueError):
        chi_square_test(["a", "a"], pmf)


def test_statistic_matches_pearson_formula() -> None:
    pmf = EnumeratedPmf([("a", 1.0), ("b", 1.0)])
    result = chi_square_test(["a"] * 30 + ["b"] * 70, pmf)
    assert result["chi2"] == pytest.approx(16.0)
    assert result["p_value"] == pytest.approx(stats.chi2.sf(16.0, 1))
