"""YAML loader for analyst configuration files."""

from __future__ import annotations

from pathlib import Path

import msgspec
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigurationError
from .models import AnalystConfig

YAML_VERSION = (1, 2)


def load_analyst_config(path: Path | str) -> AnalystConfig:
    """Parse ``analyst.yaml`` with a YAML 1.2 safe loader.

    Raises
    ------
    ConfigurationError
        If the file is unreadable, not valid YAML, empty, or does not match
        :class:`AnalystConfig`.

    """
    path_obj = Path(path)
    try:
        loaded = _yaml().load(path_obj.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as exc:
        msg = f"failed to read {path_obj}: {exc}"
        raise ConfigurationError([msg]) from exc

    return parse_analyst_config(loaded)


def parse_analyst_config(loaded: object) -> AnalystConfig:
    """Convert already-parsed YAML data into an :class:`AnalystConfig`."""
    if loaded is None:
        raise ConfigurationError(["configuration file is empty"])

    try:
        return msgspec.convert(loaded, type=AnalystConfig)
    except msgspec.ValidationError as exc:
        msg = f"schema validation failed: {exc}"
        raise ConfigurationError([msg]) from exc


def _yaml() -> YAML:
    yaml = YAML(typ="safe")
    yaml.version = YAML_VERSION
    yaml.allow_duplicate_keys = False
    return yaml
