"""dotconf - typed dotted-path access to JSON configuration documents."""

from __future__ import annotations

# Config
from dotconf.config import Config
from dotconf.loader import load, parse_json, parse_json_file, parse_yaml, parse_yaml_file

# Paths
from dotconf.resolver import PathResolver, resolve, split_path
from dotconf.types import NodeKind, kind_of

# Errors
from dotconf.errors import (
    ConfigError,
    ConfigNotFoundError,
    DecodeError,
    ErrorCodes,
    IndexOutOfBoundsError,
    InvalidIndexError,
    NotIndexableError,
    PathError,
    PathNotFoundError,
    ReadError,
    TypeMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "Config",
    "load",
    "parse_json",
    "parse_json_file",
    "parse_yaml",
    "parse_yaml_file",
    # Paths
    "PathResolver",
    "resolve",
    "split_path",
    "NodeKind",
    "kind_of",
    # Errors
    "ErrorCodes",
    "ConfigError",
    "PathError",
    "PathNotFoundError",
    "InvalidIndexError",
    "IndexOutOfBoundsError",
    "NotIndexableError",
    "TypeMismatchError",
    "DecodeError",
    "ReadError",
    "ConfigNotFoundError",
]
