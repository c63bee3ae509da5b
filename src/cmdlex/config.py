"""Configuration loading — TOML file to hint store."""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cmdlex.errors import ConfigError
from cmdlex.hint import CUSTOM_COMMANDS_KEY, SPECIAL_VARIABLES_KEY, MemoryStore

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "cmdlex.toml"


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_FILENAME

    if not path.is_file():
        logger.debug("no config file at %s", path)
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}", path) from exc


def store_from_config(config: Mapping[str, Any]) -> MemoryStore:
    """Build the hint store from the ``[hint]`` table of a config mapping.

    ``custom_commands`` is a list of names; ``special_variables`` is a list of
    names or one comma-separated string.
    """
    hint = config.get("hint", {})
    if not isinstance(hint, Mapping):
        raise ConfigError("[hint] must be a table")

    values: dict[str, str] = {}

    commands = hint.get("custom_commands")
    if commands is not None:
        if not isinstance(commands, list) or not all(isinstance(c, str) for c in commands):
            raise ConfigError("hint.custom_commands must be a list of strings")
        values[CUSTOM_COMMANDS_KEY] = json.dumps(commands)

    specials = hint.get("special_variables")
    if specials is not None:
        if isinstance(specials, str):
            values[SPECIAL_VARIABLES_KEY] = specials
        elif isinstance(specials, list) and all(isinstance(s, str) for s in specials):
            values[SPECIAL_VARIABLES_KEY] = ",".join(specials)
        else:
            raise ConfigError("hint.special_variables must be a string or a list of strings")

    return MemoryStore(values)
