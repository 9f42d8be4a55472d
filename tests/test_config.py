import json

import pytest

from passcraft.config import DEFAULTS, config_path, load_config, request_from_config, save_config
from passcraft.errors import InvalidRequest
from passcraft.models import CharClass, MemorableRequest, PinRequest, UniformRequest


def test_path_from_environment(isolated_config):
    assert config_path() == str(isolated_config)


def test_missing_file_gives_defaults():
    assert load_config() == DEFAULTS


def test_save_and_merge(isolated_config):
    save_config({"pin": {"length": 8}})
    cfg = load_config()
    assert cfg["pin"]["length"] == 8
    assert cfg["pin"]["no_repeats"] is False
    assert cfg["memorable"] == DEFAULTS["memorable"]


def test_invalid_json_falls_back(isolated_config):
    isolated_config.write_text("{not json", encoding="utf-8")
    assert load_config() == DEFAULTS


def test_non_object_ignored(isolated_config):
    isolated_config.write_text(json.dumps([1, 2]), encoding="utf-8")
    assert load_config() == DEFAULTS


def test_defaults_build_default_requests():
    assert request_from_config("uniform") == UniformRequest()
    assert request_from_config("pin") == PinRequest()
    assert request_from_config("memorable") == MemorableRequest()


def test_overrides_and_none():
    req = request_from_config("pin", overrides={"length": 9, "exclude_digits": "07", "no_repeats": None})
    assert req.length == 9
    assert req.exclude_digits == frozenset({"0", "7"})
    assert req.no_repeats is False


def test_min_per_class_from_json_keys():
    req = request_from_config("uniform", overrides={"min_per_class": {"digit": 3}})
    assert req.min_per_class == {CharClass.DIGIT: 3}


def test_unknown_option():
    with pytest.raises(InvalidRequest):
        request_from_config("smart", overrides={"length": 5})


@pytest.mark.parametrize("overrides", [
    {"cfg": "x"},
    {"password_type": "pin"},
    {"exclude_digits": 5},
    {"exclude_digits": [1, 2, 33]},
])
def test_bad_pin_options_are_invalid(overrides):
    with pytest.raises(InvalidRequest):
        request_from_config("pin", overrides=overrides)


@pytest.mark.parametrize("overrides", [
    {"min_per_class": 3},
    {"min_per_class": {"digit": -1}},
    {"custom_symbols": 7},
])
def test_bad_uniform_options_are_invalid(overrides):
    with pytest.raises(InvalidRequest):
        request_from_config("uniform", overrides=overrides)
