from __future__ import annotations

import random

import numpy as np
import pytest
import torch

from pmfkit.rng import RANDOM_SOURCE_REGISTRY, TorchUniformSource, UniformSource, build_random_source


@pytest.mark.parametrize("name", sorted(RANDOM_SOURCE_REGISTRY))
def test_registered_sources_are_reproducible(name: str) -> None:
    first = build_random_source(name, seed=9)
    second = build_random_source(name, seed=9)
    values_one = [first.random() for _ in range(5)]
    values_two = [second.random() for _ in range(5)]
    assert values_one == values_two
    assert all(0.0 <= value < 1.0 for value in values_one)


def test_unknown_source_lists_available() -> None:
    with pytest.raises(KeyError) as info:
        build_random_source("mersenne")
    assert "numpy" in str(info.value)


def test_builtin_generators_satisfy_protocol() -> None:
    assert isinstance(np.random.default_rng(0), UniformSource)
    assert isinstance(random.Random(0), UniformSource)
    assert isinstance(TorchUniformSource(seed=0), UniformSource)


def test_torch_source_wraps_given_generator() -> None:
    generator = torch.Generator().manual_seed(3)
    source = TorchUniformSource(generator)
    value = source.random()
    assert isinstance(value, float)
    expected = torch.rand((), generator=torch.Generator().manual_seed(3), dtype=torch.float64).item()
    assert value == expected
