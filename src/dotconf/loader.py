"""Entry points that decode JSON or YAML documents into a :class:`Config`."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from dotconf.config import Config
from dotconf.errors import ConfigNotFoundError, DecodeError, ReadError

__all__ = ["load", "parse_json", "parse_json_file", "parse_yaml", "parse_yaml_file"]

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def parse_json(text: str | bytes) -> Config:
    """Decode a JSON document whose root is an object.

    Raises:
        DecodeError: If the text is not valid JSON, uses ``NaN``/``Infinity``,
            or its root is not an object.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DecodeError(f"Invalid JSON: {e}", cause=e) from e
    if not isinstance(data, dict):
        raise DecodeError(f"JSON root must be an object, got {type(data).__name__}")
    return Config(data)


def parse_yaml(text: str | bytes) -> Config:
    """Decode a YAML document whose root is a mapping.

    Only JSON-shaped data is accepted; an empty document is an empty mapping.

    Raises:
        DecodeError: If the text is not valid YAML, its root is not a mapping,
            or it holds values JSON cannot express (dates, binary, sets, ...).
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DecodeError(f"Invalid YAML: {e}", cause=e) from e
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise DecodeError(f"YAML root must be a mapping, got {type(data).__name__}")
    return Config(data)


def _read_bytes(path: str | Path) -> bytes:
    file_path = Path(path)
    if not file_path.exists():
        raise ConfigNotFoundError(config_path=str(file_path))
    try:
        return file_path.read_bytes()
    except OSError as e:
        raise ReadError(str(file_path), message=f"Cannot read {file_path}: {e}", cause=e) from e


def parse_json_file(path: str | Path) -> Config:
    """Read and decode a JSON configuration file.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ReadError: If the file cannot be read.
        DecodeError: If the content is not a JSON object.
    """
    logger.debug("Loading JSON configuration from %s", path)
    return parse_json(_read_bytes(path))


def parse_yaml_file(path: str | Path) -> Config:
    """Read and decode a YAML configuration file.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ReadError: If the file cannot be read.
        DecodeError: If the content is not a JSON-shaped YAML mapping.
    """
    logger.debug("Loading YAML configuration from %s", path)
    return parse_yaml(_read_bytes(path))


def load(path: str | Path) -> Config:
    """Load a configuration file, choosing the decoder from the file suffix.

    ``.yaml`` and ``.yml`` files are read as YAML, anything else as JSON.
    """
    if Path(path).suffix.lower() in YAML_SUFFIXES:
        return parse_yaml_file(path)
    return parse_json_file(path)
