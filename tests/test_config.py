from __future__ import annotations

import pytest

from pmfkit.utils.config import ConfigNode, distribution_entries, load_config, to_plain_dict


def test_config_merging() -> None:
    config = load_config("configs/experiments/fair_coin.yaml")
    assert isinstance(config, ConfigNode)
    assert config.experiment.name == "fair_coin"
    assert config.sampler.source == "numpy"
    assert config["sampler"]["num_draws"] == config.sampler.num_draws
    assert distribution_entries(config) == [("heads", 1.0), ("tails", 1.0)]


def test_defaults_and_overrides() -> None:
    config = load_config("configs/experiments/duplicates.yaml")
    assert config.experiment.name == "duplicates"
    assert config.sampler.search == "linear"
    assert config.sampler.source == "numpy"
    entries = distribution_entries(config)
    assert len(entries) == 5
    assert entries[1] == (None, 0.1)


def test_missing_config_raises() -> None:
    with pytest.raises(FileNotFoundError):
        load_config("configs/experiments/does_not_exist.yaml")


def test_entries_validation() -> None:
    with pytest.raises(KeyError):
        distribution_entries({"sampler": {}})
    with pytest.raises(TypeError):
        distribution_entries({"distribution": {"entries": [{"value": "a"}]}})


def test_to_plain_dict_unwraps() -> None:
    config = ConfigNode({"a": {"b": [{"c": 1}]}})
    plain = to_plain_dict(config)
    assert type(plain) is dict
    assert type(plain["a"]) is dict
    assert plain == {"a": {"b": [{"c": 1}]}}
