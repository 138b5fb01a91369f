"""Enumerated distributions and their samplers."""
from __future__ import annotations

from pmfkit.distributions.enumerated import EnumeratedPmf, values_equal
from pmfkit.distributions.moments import mean, variance
from pmfkit.distributions.sampler import SEARCH_STRATEGIES, WeightedSampler

__all__ = [
    "EnumeratedPmf",
    "SEARCH_STRATEGIES",
    "WeightedSampler",
    "mean",
    "values_equal",
    "variance",
]
