"""Weighted sampling from an :class:`EnumeratedPmf`."""
from __future__ import annotations

import array
import bisect
from typing import Any, List, MutableSequence

import numpy as np

from pmfkit.distributions.enumerated import EnumeratedPmf
from pmfkit.errors import NotStrictlyPositiveError, NullArgumentError
from pmfkit.rng import UniformSource

SEARCH_STRATEGIES = ("binary", "linear")


def _check_count(count: Any) -> int:
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise TypeError(f"number of samples must be an integer, got {type(count).__name__}")
    if count <= 0:
        raise NotStrictlyPositiveError(
            f"number of samples must be strictly positive, got {count}", value=count
        )
    return int(count)


def _allocate_like(buffer: Any, count: int) -> Any:
    if isinstance(buffer, np.ndarray):
        dtype = buffer.dtype
        # Fixed-width string dtypes would truncate drawn values.
        if dtype.kind in "US":
            dtype = np.dtype(object)
        return np.empty(count, dtype=dtype)
    if isinstance(buffer, list):
        return [None] * count
    if isinstance(buffer, array.array):
        return array.array(buffer.typecode, bytes(buffer.itemsize * count))
    if isinstance(buffer, bytearray):
        return bytearray(count)
    try:
        return type(buffer)([None] * count)
    except (TypeError, ValueError):
        return [None] * count


class WeightedSampler:
    """Map uniform draws onto the values of a PMF via its cumulative table.

    The draw for ``u`` is the value at the smallest index ``i`` with
    ``cumulative[i] > u``.  Samples are reproducible only for the same input
    order, the same source implementation and the same source state.  With
    a 53-bit uniform source the smallest probability that can be selected
    reliably is 2**-53.

    Args:
        pmf: Distribution to sample from.  It may be shared by many samplers.
        rng: Object exposing ``random()`` returning a float in [0, 1).  The
            sampler never seeds or reseeds it.
        search: ``"binary"`` (O(log n) per draw) or ``"linear"`` (O(n)).
    """

    def __init__(self, pmf: EnumeratedPmf, rng: UniformSource, search: str = "binary") -> None:
        if pmf is None:
            raise NullArgumentError("pmf must not be None")
        if rng is None:
            raise NullArgumentError("rng must not be None")
        if search not in SEARCH_STRATEGIES:
            raise ValueError(
                f"Unknown search strategy '{search}'. Available: {', '.join(SEARCH_STRATEGIES)}"
            )
        self.pmf = pmf
        self.rng = rng
        self.search = search
        self._cumulative: List[float] = [float(c) for c in pmf.cumulative]
        nonzero = np.flatnonzero(pmf.probabilities)
        self._last_index = int(nonzero[-1])

    def _binary_index(self, u: float) -> int:
        return bisect.bisect_right(self._cumulative, u)

    def _linear_index(self, u: float) -> int:
        for index, edge in enumerate(self._cumulative):
            if edge > u:
                return index
        return len(self._cumulative)

    def index_for(self, u: float) -> int:
        """Return the sample-space index selected by the uniform value ``u``."""

        if self.search == "binary":
            index = self._binary_index(u)
        else:
            index = self._linear_index(u)
        # Rounding can leave cumulative[-1] just below 1.0.
        if index > self._last_index:
            index = self._last_index
        return index

    def draw(self) -> Any:
        """Draw one value."""

        return self.pmf.values[self.index_for(float(self.rng.random()))]

    def draw_many(self, count: int) -> List[Any]:
        """Draw ``count`` independent values into a new list."""

        count = _check_count(count)
        return [self.draw() for _ in range(count)]

    def draw_into(self, count: int, buffer: MutableSequence[Any]) -> MutableSequence[Any]:
        """Draw ``count`` values into ``buffer`` when it is large enough.

        The first ``count`` slots of ``buffer`` are overwritten and the rest
        left alone.  A shorter buffer is replaced by a new one of the same
        kind and exactly ``count`` long, so always use the returned object.
        """

        count = _check_count(count)
        if buffer is None:
            raise NullArgumentError("input buffer must not be None")
        out = buffer if len(buffer) >= count else _allocate_like(buffer, count)
        for slot in range(count):
            out[slot] = self.draw()
        return out


__all__ = ["SEARCH_STRATEGIES", "WeightedSampler"]
