"""Enumerated (discrete) probability mass functions.

An :class:`EnumeratedPmf` is built once from an ordered sequence of
``(value, weight)`` pairs.  Weights are validated in input order, normalized
to probabilities and accumulated into a cumulative table that samplers use
to map uniform draws onto sample-space values.

Duplicate values and ``None`` values are kept as separate slots.  Only
:meth:`EnumeratedPmf.probability` and :meth:`EnumeratedPmf.grouped`
aggregate them; :meth:`EnumeratedPmf.pmf` returns the raw entries.
"""
from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

import numpy as np

from pmfkit.errors import (
    DegenerateDistributionError,
    DimensionMismatchError,
    InvalidWeightError,
    NonFiniteWeightError,
    NotANumberError,
    NullArgumentError,
)

logger = logging.getLogger(__name__)


def values_equal(left: Any, right: Any) -> bool:
    """Equality used for probability queries; ``None`` only matches ``None``.

    Values whose ``==`` has no single truth value or fails (NumPy arrays,
    for instance) only match themselves by identity.
    """

    if left is None or right is None:
        return left is None and right is None
    if left is right:
        return True
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


def _validate_weight(weight: Any, index: int) -> float:
    if weight is None:
        raise NullArgumentError(f"weight at index {index} is None")
    if not isinstance(weight, numbers.Real):
        raise TypeError(
            f"weight at index {index} must be a real number, got {type(weight).__name__}"
        )
    try:
        value = float(weight)
    except OverflowError as exc:
        if weight < 0:
            raise InvalidWeightError(
                f"weight at index {index} is negative: {weight}", value=weight, index=index
            ) from exc
        raise NonFiniteWeightError(
            f"weight at index {index} overflows a double: {weight}", value=weight, index=index
        ) from exc
    if value < 0:
        raise InvalidWeightError(
            f"weight at index {index} is negative: {value}", value=value, index=index
        )
    if math.isinf(value):
        raise NonFiniteWeightError(
            f"weight at index {index} is not finite: {value}", value=value, index=index
        )
    if math.isnan(value):
        raise NotANumberError(f"weight at index {index} is NaN", value=value, index=index)
    return value


def _readonly(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class EnumeratedPmf:
    """Immutable probability mass function over an enumerated sample space.

    Args:
        entries: Ordered ``(value, weight)`` pairs.  Weights need not sum to
            one; they are normalized by their total.

    Raises:
        InvalidWeightError: a weight is negative.
        NonFiniteWeightError: a weight is infinite.
        NotANumberError: a weight is NaN.
        DegenerateDistributionError: the weights sum to zero or no entries
            were supplied.
    """

    def __init__(self, entries: Iterable[Tuple[Any, Any]]) -> None:
        values: List[Any] = []
        weights: List[float] = []
        for index, (value, weight) in enumerate(entries):
            weights.append(_validate_weight(weight, index))
            values.append(value)

        raw = np.asarray(weights, dtype=np.float64)
        total = float(raw.sum())
        if math.isinf(total):
            raise NonFiniteWeightError("sum of weights overflows to infinity", value=total)
        if total == 0.0:
            raise DegenerateDistributionError(
                f"weights sum to zero over {len(values)} entries"
            )

        self._values: Tuple[Any, ...] = tuple(values)
        self._probabilities = _readonly(raw / total)
        # np.cumsum accumulates sequentially, so every slot is the exact
        # running sum of the probabilities before it.
        self._cumulative = _readonly(np.cumsum(self._probabilities))
        logger.debug(
            "Built enumerated pmf with %d entries (cumulative tail %.17g)",
            len(self._values),
            self._cumulative[-1],
        )

    @classmethod
    def from_values(cls, values: Sequence[Any], weights: Sequence[Any]) -> "EnumeratedPmf":
        """Build from parallel ``values`` and ``weights`` sequences."""

        if len(values) != len(weights):
            raise DimensionMismatchError(
                f"got {len(values)} values but {len(weights)} weights"
            )
        return cls(zip(values, weights))

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> "EnumeratedPmf":
        """Build from a ``{value: weight}`` mapping in iteration order."""

        return cls(mapping.items())

    @property
    def values(self) -> Tuple[Any, ...]:
        return self._values

    @property
    def probabilities(self) -> np.ndarray:
        return self._probabilities

    @property
    def cumulative(self) -> np.ndarray:
        return self._cumulative

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self)})"

    def probability(self, x: Any) -> float:
        """Return ``P(X = x)`` summed over every entry equal to ``x``.

        This scans all entries, so each query is O(n).  Use :meth:`grouped`
        once when many queries are needed.
        """

        total = 0.0
        for value, prob in zip(self._values, self._probabilities):
            if values_equal(x, value):
                total += float(prob)
        return total

    def pmf(self) -> List[Tuple[Any, float]]:
        """Return ``(value, probability)`` pairs in input order, unmerged.

        When duplicate or ``None`` values were supplied the result is not a
        canonical PMF; aggregate by value (or call :meth:`grouped`).
        """

        return [(value, float(prob)) for value, prob in zip(self._values, self._probabilities)]

    def grouped(self) -> List[Tuple[Any, float]]:
        """Return one ``(value, probability)`` pair per distinct value.

        Values are ordered by first occurrence.  The sampling layout is
        unaffected.
        """

        groups: List[List[Any]] = []
        for value, prob in zip(self._values, self._probabilities):
            for group in groups:
                if values_equal(group[0], value):
                    group[1] += float(prob)
                    break
            else:
                groups.append([value, float(prob)])
        return [(value, prob) for value, prob in groups]

    def create_sampler(self, rng: Any, search: str = "binary"):
        """Return a :class:`~pmfkit.distributions.sampler.WeightedSampler`."""

        from pmfkit.distributions.sampler import WeightedSampler

        return WeightedSampler(self, rng, search=search)


__all__ = ["EnumeratedPmf", "values_equal"]
