"""Uniform random sources consumed by the samplers."""
from __future__ import annotations

import random
from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

import numpy as np
import torch


@runtime_checkable
class UniformSource(Protocol):
    """Anything with ``random()`` returning a float in [0, 1).

    ``numpy.random.Generator`` and ``random.Random`` already satisfy it.
    """

    def random(self) -> float:  # pragma: no cover - protocol
        ...


class TorchUniformSource:
    """Float64 uniforms drawn from a ``torch.Generator``."""

    def __init__(self, generator: Optional[torch.Generator] = None, seed: Optional[int] = None) -> None:
        if generator is None:
            generator = torch.Generator()
            if seed is not None:
                generator.manual_seed(int(seed))
        self.generator = generator

    def random(self) -> float:
        return float(torch.rand((), generator=self.generator, dtype=torch.float64).item())


def _numpy_source(seed: Optional[int]) -> np.random.Generator:
    return np.random.default_rng(seed)


def _python_source(seed: Optional[int]) -> random.Random:
    return random.Random(seed)


def _torch_source(seed: Optional[int]) -> TorchUniformSource:
    if seed is None:
        generator = torch.Generator()
        generator.seed()
        return TorchUniformSource(generator)
    return TorchUniformSource(seed=seed)


RANDOM_SOURCE_REGISTRY: Dict[str, Callable[[Optional[int]], Any]] = {
    "numpy": _numpy_source,
    "python": _python_source,
    "torch": _torch_source,
}


def build_random_source(name: str, seed: Optional[int] = None) -> UniformSource:
    """Instantiate a registered uniform source, seeded when ``seed`` is given."""

    key = str(name).lower()
    if key not in RANDOM_SOURCE_REGISTRY:
        available = ", ".join(sorted(RANDOM_SOURCE_REGISTRY))
        raise KeyError(f"Unknown random source '{name}'. Available: {available}")
    return RANDOM_SOURCE_REGISTRY[key](seed)


__all__ = [
    "RANDOM_SOURCE_REGISTRY",
    "TorchUniformSource",
    "UniformSource",
    "build_random_source",
]
