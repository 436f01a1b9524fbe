import json

import pytest

from tspga.config import Config, ConfigError, Mode, load_config, parse_config


def _test_section():
    return {
        "dataFile": "graphs/ftv47.atsp",
        "worseAcceptanceProbability": 0.4,
        "alpha": 0.99,
        "neighbourDefinition": 2,
        "stopSeconds": 10,
        "initialPathFromNearestNeighbour": True,
    }


def _simulation_section():
    section = _test_section()
    section.update(
        {"outputFileName": "out.csv", "runsNumber": 5, "showProgress": False}
    )
    return section


def test_parse_test_mode():
    config = parse_config({"mode": "test", "test": _test_section()})
    assert config.mode is Mode.TEST
    assert config.data_file == "graphs/ftv47.atsp"
    assert config.worse_acceptance_probability == 0.4
    assert config.alpha == 0.99
    assert config.neighbour_definition == 2
    assert config.stop_seconds == 10
    assert config.initial_path_from_nearest_neighbour is True
    assert config.output_file_name is None
    assert config.runs_number is None
    assert config.show_progress is None


def test_parse_simulation_mode():
    config = parse_config({"mode": "simulation", "simulation": _simulation_section()})
    assert config.mode is Mode.SIMULATION
    assert config.output_file_name == "out.csv"
    assert config.runs_number == 5
    assert config.show_progress is False


def test_mode_selects_its_own_section():
    data = {
        "mode": "test",
        "test": _test_section(),
        "simulation": dict(_simulation_section(), dataFile="other.atsp"),
    }
    assert parse_config(data).data_file == "graphs/ftv47.atsp"


def test_invalid_mode_raises():
    with pytest.raises(ConfigError):
        parse_config({"mode": "benchmark", "benchmark": _test_section()})


def test_missing_mode_raises():
    with pytest.raises(ConfigError):
        parse_config({"test": _test_section()})


@pytest.mark.parametrize("key", sorted(_simulation_section()))
def test_missing_simulation_key_raises(key):
    section = _simulation_section()
    del section[key]
    with pytest.raises(ConfigError):
        parse_config({"mode": "simulation", "simulation": section})


def test_wrong_type_raises():
    section = dict(_test_section(), initialPathFromNearestNeighbour="yes")
    with pytest.raises(ConfigError):
        parse_config({"mode": "test", "test": section})


def test_load_config_round_trip(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"mode": "simulation", "simulation": _simulation_section()}))
    config = load_config(path)
    assert config == Config(
        mode=Mode.SIMULATION,
        data_file="graphs/ftv47.atsp",
        worse_acceptance_probability=0.4,
        alpha=0.99,
        neighbour_definition=2,
        stop_seconds=10,
        initial_path_from_nearest_neighbour=True,
        output_file_name="out.csv",
        runs_number=5,
        show_progress=False,
    )


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.json")


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(path)