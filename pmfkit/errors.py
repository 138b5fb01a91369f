"""Exception taxonomy for distribution construction and sampling."""
from __future__ import annotations

from typing import Any, Optional


class PmfkitError(Exception):
    """Base class for all errors raised by ``pmfkit``."""


class _WeightError(PmfkitError, ValueError):
    def __init__(self, message: str, value: Any = None, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.value = value
        self.index = index


class InvalidWeightError(_WeightError):
    """A supplied weight is negative."""


class NonFiniteWeightError(_WeightError):
    """A supplied weight is infinite."""


class NotANumberError(_WeightError):
    """A supplied weight is NaN."""


class DegenerateDistributionError(PmfkitError, ArithmeticError):
    """The weights sum to zero so no probability assignment exists."""


class NotStrictlyPositiveError(PmfkitError, ValueError):
    """A count argument is zero or negative."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class NullArgumentError(PmfkitError, TypeError):
    """A required argument is ``None``."""


class DimensionMismatchError(PmfkitError, ValueError):
    """Two parallel sequences have different lengths."""


__all__ = [
    "DegenerateDistributionError",
    "DimensionMismatchError",
    "InvalidWeightError",
    "NonFiniteWeightError",
    "NotANumberError",
    "NotStrictlyPositiveError",
    "NullArgumentError",
    "PmfkitError",
]
