from __future__ import generator_stop

import logging
import os
import os.path
import sys
from functools import lru_cache
from importlib.util import find_spec
from typing import Any, Dict

import toml
from jsonschema import validate

from .strategies import get_strategy

logger = logging.getLogger(__name__)

APP_NAME = "kthselect"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "selection": {
        "strategy": "median_of_medians",
    },
}

SCHEMA = {
    "type": "object",
    "properties": {
        "selection": {
            "type": "object",
            "properties": {
                "strategy": {"type": "string"},
            },
        },
    },
}


def get_appdata_dir() -> str:
    if sys.platform == "win32":
        return os.getenv("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
    return os.getenv("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))


def read_toml(path: str) -> Any:
    with open(path, encoding="utf-8") as fr:
        return toml.load(fr)


def _load(name: str) -> Dict[str, Any]:

    configfilename = name + ".toml"

    # try appdata directory
    try:
        appdata_path = os.path.join(get_appdata_dir(), name, configfilename)
        return read_toml(appdata_path)
    except FileNotFoundError:
        pass

    # try module directory
    try:
        spec = find_spec(name)

        if spec is None:
            raise ImportError(f"No module named '{name}'")

        if spec.has_location:
            assert spec.origin  # for mypy
            modpath = os.path.dirname(spec.origin)
        else:
            try:
                modpath = spec.submodule_search_locations[0]  # type: ignore
            except (TypeError, IndexError):
                raise FileNotFoundError

        return read_toml(os.path.join(modpath, configfilename))
    except (ImportError, FileNotFoundError):
        pass

    # try working directory
    try:
        return read_toml(configfilename)
    except FileNotFoundError:
        raise FileNotFoundError(
            f"{configfilename} could not be found in application data, module path or current directory"
        )


def merge(defaults: Dict[str, Dict[str, Any]], obj: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:

    """Overlays the tables of `obj` on `defaults`. Top level values which are not tables are ignored."""

    out = {section: dict(values) for section, values in defaults.items()}
    for section, values in obj.items():
        if isinstance(values, dict):
            out.setdefault(section, {}).update(values)
    return out


def validate_config(obj: Dict[str, Any]) -> Dict[str, Any]:

    """Checks the structure of `obj` and that the configured strategy exists.
    Raises `jsonschema.ValidationError` or `UnknownStrategy`.
    """

    validate(obj, SCHEMA)
    if "selection" in obj and "strategy" in obj["selection"]:
        get_strategy(obj["selection"]["strategy"])
    return obj


def load(name: str = APP_NAME) -> Dict[str, Dict[str, Any]]:
    try:
        obj = _load(name)
    except FileNotFoundError as e:
        logger.debug("Using default configuration: %s", e)
        return merge(DEFAULTS, {})

    logger.debug("Loaded configuration for %s", name)
    return merge(DEFAULTS, validate_config(obj))


@lru_cache(maxsize=None)
def settings() -> Dict[str, Dict[str, Any]]:
    return load()


def default_strategy() -> str:
    return settings()["selection"]["strategy"]
