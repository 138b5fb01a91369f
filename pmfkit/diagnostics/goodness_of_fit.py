"""Goodness-of-fit checks for samples drawn from an enumerated PMF."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List

import numpy as np
import pandas as pd
from scipy import stats

from pmfkit.distributions.enumerated import EnumeratedPmf, values_equal


def _observed_counts(draws: Iterable[Any], support: List[Any]) -> np.ndarray:
    counts = np.zeros(len(support), dtype=np.int64)
    for draw in draws:
        for index, value in enumerate(support):
            if values_equal(draw, value):
                counts[index] += 1
                break
        else:
            raise ValueError(f"draw {draw!r} is not in the support of the distribution")
    return counts


def frequency_table(draws: Iterable[Any], pmf: EnumeratedPmf) -> pd.DataFrame:
    """Tabulate observed against expected frequencies per distinct value."""

    grouped = pmf.grouped()
    support = [value for value, _ in grouped]
    counts = _observed_counts(draws, support)
    total = int(counts.sum())
    return pd.DataFrame(
        {
            "value": pd.Series(support, dtype=object),
            "expected": [prob for _, prob in grouped],
            "observed": counts,
            "observed_frac": counts / total if total else np.zeros(len(support)),
        }
    )


def chi_square_test(draws: Iterable[Any], pmf: EnumeratedPmf) -> Dict[str, float]:
    """Pearson chi-square test of ``draws`` against ``pmf``.

    Categories with zero expected probability are dropped; a draw landing in
    one still raises since it cannot come from ``pmf``.
    """

    table = frequency_table(draws, pmf)
    impossible = table[(table["expected"] == 0.0) & (table["observed"] > 0)]
    if not impossible.empty:
        raise ValueError("draws contain values with zero probability")
    table = table[table["expected"] > 0.0]
    if len(table) < 2:
        raise ValueError("chi-square test needs at least two categories with positive probability")
    num_draws = int(table["observed"].sum())
    if num_draws == 0:
        raise ValueError("draws cannot be empty")
    probabilities = table["expected"].to_numpy(dtype=float)
    expected = probabilities / probabilities.sum() * num_draws
    observed = table["observed"].to_numpy(dtype=float)
    result = stats.chisquare(observed, expected)
    return {
        "chi2": float(result.statistic),
        "dof": float(len(table) - 1),
        "p_value": float(result.pvalue),
        "num_draws": float(num_draws),
    }


__all__ = ["chi_square_test", "frequency_table"]
