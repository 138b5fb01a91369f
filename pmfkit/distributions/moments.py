"""Moments of numeric-valued enumerated distributions."""
from __future__ import annotations

from typing import Optional

import numpy as np

from pmfkit.distributions.enumerated import EnumeratedPmf
from pmfkit.transform import Transformer, TransformerMap


def _numeric_support(pmf: EnumeratedPmf, transformer: Optional[Transformer]) -> np.ndarray:
    convert = transformer if transformer is not None else TransformerMap()
    return np.asarray([convert(value) for value in pmf.values], dtype=np.float64)


def mean(pmf: EnumeratedPmf, transformer: Optional[Transformer] = None) -> float:
    """Expected value of ``pmf`` after mapping each value through ``transformer``."""

    support = _numeric_support(pmf, transformer)
    return float(np.dot(pmf.probabilities, support))


def variance(pmf: EnumeratedPmf, transformer: Optional[Transformer] = None) -> float:
    support = _numeric_support(pmf, transformer)
    centre = float(np.dot(pmf.probabilities, support))
    return float(np.dot(pmf.probabilities, (support - centre) ** 2))


__all__ = ["mean", "variance"]
