"""Loading of the JSON run configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Any, Mapping


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is invalid."""


class Mode(str, Enum):
    """The mode the program runs in."""

    TEST = "test"
    SIMULATION = "simulation"


@dataclass(frozen=True)
class Config:
    """Settings read from a configuration file."""

    mode: Mode
    data_file: str
    worse_acceptance_probability: float
    alpha: float
    neighbour_definition: int
    stop_seconds: int
    initial_path_from_nearest_neighbour: bool
    output_file_name: str | None = None
    runs_number: int | None = None
    show_progress: bool | None = None


def _field(section: Mapping[str, Any], key: str) -> Any:
    try:
        return section[key]
    except KeyError:
        raise ConfigError(f"missing configuration key: {key!r}") from None


def _string(section: Mapping[str, Any], key: str) -> str:
    value = _field(section, key)
    if not isinstance(value, str):
        raise ConfigError(f"{key!r} must be a string, got {value!r}")
    return value


def _number(section: Mapping[str, Any], key: str) -> float:
    value = _field(section, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key!r} must be a number, got {value!r}")
    return float(value)


def _integer(section: Mapping[str, Any], key: str) -> int:
    value = _field(section, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key!r} must be a number, got {value!r}")
    return int(value)


def _boolean(section: Mapping[str, Any], key: str) -> bool:
    value = _field(section, key)
    if not isinstance(value, bool):
        raise ConfigError(f"{key!r} must be a boolean, got {value!r}")
    return value


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = _field(data, key)
    if not isinstance(section, Mapping):
        raise ConfigError(f"{key!r} must be an object")
    return section


def parse_config(data: Mapping[str, Any]) -> Config:
    """Build a Config from an already decoded JSON document."""
    if not isinstance(data, Mapping):
        raise ConfigError("configuration must be a JSON object")
    mode_name = _string(data, "mode")
    try:
        mode = Mode(mode_name)
    except ValueError:
        raise ConfigError(
            f"invalid mode: {mode_name!r}, choose 'test' or 'simulation'"
        ) from None

    section = _section(data, mode.value)
    common = dict(
        mode=mode,
        data_file=_string(section, "dataFile"),
        worse_acceptance_probability=_number(section, "worseAcceptanceProbability"),
        alpha=_number(section, "alpha"),
        neighbour_definition=_integer(section, "neighbourDefinition"),
        stop_seconds=_integer(section, "stopSeconds"),
        initial_path_from_nearest_neighbour=_boolean(
            section, "initialPathFromNearestNeighbour"
        ),
    )
    if mode is Mode.TEST:
        return Config(**common)
    return Config(
        **common,
        output_file_name=_string(section, "outputFileName"),
        runs_number=_integer(section, "runsNumber"),
        show_progress=_boolean(section, "showProgress"),
    )


def load_config(file_name: str | PathLike[str]) -> Config:
    """Read and parse the JSON configuration file at file_name."""
    try:
        with open(file_name, encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise ConfigError(f"cannot open configuration file {file_name!s}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"configuration file is not valid JSON: {exc}") from exc
    return parse_config(data)