"""Diagnostics for checking draws against their distribution."""
from __future__ import annotations

from .goodness_of_fit import chi_square_test, frequency_table

__all__ = ["chi_square_test", "frequency_table"]
