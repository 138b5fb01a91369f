"""Conversion of sample-space values to floats.

Numbers and numeric strings are handled by a default transformer.  Other
types are looked up in a :class:`TransformerMap` keyed by type; the default
transformer is supplied by the caller rather than shared globally.
"""
from __future__ import annotations

import math
import numbers
from typing import Any, Callable, Dict, List, Optional

from pmfkit.errors import NullArgumentError

Transformer = Callable[[Any], float]


class DefaultTransformer:
    """Convert real numbers and numeric strings to ``float``."""

    def __call__(self, value: Any) -> float:
        if value is None:
            raise NullArgumentError("cannot transform None")
        if isinstance(value, numbers.Real):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError as exc:
                raise ValueError(f"'{value}' is not a number") from exc
        raise ValueError(f"cannot transform {type(value).__name__} to float")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DefaultTransformer)

    def __hash__(self) -> int:
        return hash(DefaultTransformer)


class TransformerMap:
    """Type-keyed registry of value transformers."""

    def __init__(self, default: Optional[Transformer] = None) -> None:
        self.default: Transformer = default if default is not None else DefaultTransformer()
        self._map: Dict[type, Transformer] = {}

    def contains_type(self, key: type) -> bool:
        return key in self._map

    def contains_transformer(self, transformer: Transformer) -> bool:
        return any(existing == transformer for existing in self._map.values())

    def get(self, key: type) -> Optional[Transformer]:
        return self._map.get(key)

    def put(self, key: type, transformer: Transformer) -> Optional[Transformer]:
        """Register ``transformer`` for ``key``; return the one it replaced."""

        previous = self._map.get(key)
        self._map[key] = transformer
        return previous

    def remove(self, key: type) -> Optional[Transformer]:
        return self._map.pop(key, None)

    def clear(self) -> None:
        self._map.clear()

    def types(self) -> List[type]:
        return list(self._map)

    def transformers(self) -> List[Transformer]:
        return list(self._map.values())

    def _lookup(self, value_type: type) -> Optional[Transformer]:
        for klass in value_type.__mro__:
            if klass in self._map:
                return self._map[klass]
        return None

    def transform(self, value: Any) -> float:
        """Convert ``value``; unregistered non-numeric types give ``nan``."""

        if value is None or isinstance(value, (numbers.Real, str)):
            return self.default(value)
        transformer = self._lookup(type(value))
        if transformer is None:
            return math.nan
        return float(transformer(value))

    __call__ = transform

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, TransformerMap):
            return NotImplemented
        return self.default == other.default and self._map == other._map

    def __hash__(self) -> int:
        value = hash(self.default)
        for transformer in self._map.values():
            value = value * 31 + hash(transformer)
        return value


__all__ = ["DefaultTransformer", "Transformer", "TransformerMap"]
