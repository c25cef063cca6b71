# strongpass/config.py
"""
Settings for strongpass front-ends.
Read from $STRONGPASS_CONFIG if set, otherwise ~/.strongpass/config.json.
Missing or broken files fall back to DEFAULTS, and so does any single value
of the wrong type; settings are never written back.
"""

import json
import os
from typing import Any, Dict, Optional

from loguru import logger

from .charset import GenerationConfig

CONFIG_ENV = "STRONGPASS_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "upper": True,
    "lower": True,
    "digits": True,
    "symbols": True,
    "exclude_ambiguous": False,
    "log_level": "WARNING",
}


def config_path() -> str:
    env = os.getenv(CONFIG_ENV)
    if env:
        return env
    return os.path.join(os.path.expanduser("~"), ".strongpass", "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config {}: {}", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config {}: expected a JSON object", p)
        return DEFAULTS.copy()

    # merge defaults, known keys with valid values only
    out = DEFAULTS.copy()
    for key, value in data.items():
        if key not in DEFAULTS:
            continue
        if not _valid(key, value):
            logger.warning("ignoring {}={!r} in config {}: keeping {!r}", key, value, p, DEFAULTS[key])
            continue
        out[key] = value
    return out


def _valid(key: str, value: Any) -> bool:
    if key == "length":
        # bool is an int subclass; reject it. Range is checked by GenerationConfig.
        return isinstance(value, int) and not isinstance(value, bool)
    if key == "log_level":
        if not isinstance(value, str):
            return False
        try:
            logger.level(value.upper())
        except ValueError:
            return False
        return True
    return isinstance(value, bool)


def default_generation_config(cfg: Dict[str, Any]) -> GenerationConfig:
    return GenerationConfig.from_flags(
        length=int(cfg["length"]),
        upper=bool(cfg["upper"]),
        lower=bool(cfg["lower"]),
        digits=bool(cfg["digits"]),
        symbols=bool(cfg["symbols"]),
        exclude_ambiguous=bool(cfg["exclude_ambiguous"]),
    )
