import json

import pytest

from pydantic import ValidationError

from hashmaps import ArrayMapConfiguration, ChainedHashMapConfiguration


def test_defaults():
    config = ChainedHashMapConfiguration()
    assert config.load_factor_threshold == 0.75
    assert config.initial_chain_count == 100
    assert config.chain_initial_capacity == 16
    assert ArrayMapConfiguration().initial_capacity == 10


@pytest.mark.parametrize("field", ["load_factor_threshold", "initial_chain_count", "chain_initial_capacity"])
def test_rejects_non_positive(field):
    with pytest.raises(ValidationError):
        ChainedHashMapConfiguration(**{field: 0})
    with pytest.raises(ValueError):
        ChainedHashMapConfiguration(**{field: -1})


def test_array_map_configuration_rejects_zero():
    with pytest.raises(ValidationError):
        ArrayMapConfiguration(initial_capacity=0)


@pytest.mark.parametrize("compact", [True, False])
def test_save_and_load(tmp_path, compact):
    path = str(tmp_path / "chained.cfg.json")
    config = ChainedHashMapConfiguration(load_factor_threshold=1.5, initial_chain_count=7, chain_initial_capacity=3)
    config.save(path, compact=compact)

    with open(path) as fp:
        assert json.load(fp) == {
            "load_factor_threshold": 1.5,
            "initial_chain_count": 7,
            "chain_initial_capacity": 3,
        }
    assert ChainedHashMapConfiguration.load(path) == config


def test_display(capsys):
    ArrayMapConfiguration(initial_capacity=4).display()
    assert json.loads(capsys.readouterr().out) == {"initial_capacity": 4}
