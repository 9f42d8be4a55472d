# passcraft/config.py
"""
Settings persistence for passcraft: default request options per password type.
Settings saved as JSON in %APPDATA%/passcraft/config.json (Windows) or ~/.passcraft/config.json (fallback).
PASSCRAFT_CONFIG overrides the path.
"""

import copy
import json
import os
from typing import Any, Dict, Mapping, Optional

from loguru import logger

from .errors import InvalidRequest
from .models import REQUEST_TYPES, password_type_of

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "uniform": {
        "length": 16,
        "lower": True,
        "upper": True,
        "digits": True,
        "symbols": True,
        "custom_symbols": None,
        "exclude_similar": False,
        "exclude_ambiguous": False,
        "min_per_class": {"lower": 1, "upper": 1, "digit": 1, "symbol": 1},
    },
    "pin": {
        "length": 6,
        "exclude_digits": "",
        "no_repeats": False,
        "no_sequence": False,
        "strict": False,
    },
    "memorable": {
        "word_count": 3,
        "separator": "-",
        "capitalization": "first",
        "include_numbers": True,
        "number_position": "end",
    },
    "smart": {
        "complexity": "medium",
        "word_order": "random",
        "include_symbols": True,
    },
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "passcraft")
    return os.path.join(os.path.expanduser("~"), ".passcraft")


def config_path() -> str:
    return os.getenv("PASSCRAFT_CONFIG") or os.path.join(_appdata_dir(), "config.json")


def load_config() -> Dict[str, Dict[str, Any]]:
    """Stored settings merged over DEFAULTS, section by section."""
    out = copy.deepcopy(DEFAULTS)
    p = config_path()
    if not os.path.exists(p):
        return out
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("could not read config {}: {}", p, e)
        return out
    if not isinstance(data, dict):
        logger.warning("ignoring config {}: top level is not an object", p)
        return out
    for section, values in data.items():
        if section in out and isinstance(values, dict):
            out[section].update(values)
    return out


def save_config(cfg: Dict[str, Dict[str, Any]]) -> None:
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)


def request_from_config(
    password_type,
    overrides: Optional[Mapping[str, Any]] = None,
    cfg: Optional[Dict[str, Dict[str, Any]]] = None,
):
    """
    Build the typed request for `password_type` from config values, with
    the non-None entries of `overrides` applied on top.
    """
    ptype = password_type_of(password_type)
    cfg = cfg if cfg is not None else load_config()
    values = dict(cfg.get(ptype.value, DEFAULTS[ptype.value]))
    values.update({k: v for k, v in dict(overrides or {}).items() if v is not None})
    if "exclude_digits" in values:
        excluded = values["exclude_digits"] or ""
        if not isinstance(excluded, (str, list, tuple, set, frozenset)):
            raise InvalidRequest("exclude_digits must be a string or a list of digits")
        values["exclude_digits"] = frozenset(excluded)
    try:
        return REQUEST_TYPES[ptype](**values)
    except TypeError as e:
        raise InvalidRequest(f"unknown option for {ptype.value}: {e}") from e
