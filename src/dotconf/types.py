"""Node kinds for configuration trees and tree normalization."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

from dotconf.errors import DecodeError

__all__ = ["ConfigTree", "NodeKind", "kind_of", "normalize_tree"]

ConfigTree = dict[str, Any]


class NodeKind(str, Enum):
    """The six kinds of value a configuration tree may hold."""

    STRING = "string"
    BOOL = "bool"
    NUMBER = "number"
    LIST = "list"
    MAP = "map"
    NULL = "null"


def kind_of(value: Any) -> NodeKind:
    """Classify a tree node.

    ``bool`` is checked before numbers because it subclasses ``int``.

    Raises:
        TypeError: If the value is not one of the supported kinds.
    """
    if value is None:
        return NodeKind.NULL
    if isinstance(value, bool):
        return NodeKind.BOOL
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, list):
        return NodeKind.LIST
    if isinstance(value, dict):
        return NodeKind.MAP
    raise TypeError(f"Unsupported configuration value of type {type(value).__name__}")


def normalize_tree(data: Mapping[str, Any]) -> ConfigTree:
    """Return a fresh JSON-shaped copy of ``data`` with every number as a float.

    Raises:
        DecodeError: If the root is not a mapping or any node is not
            JSON-shaped (non-string key, non-finite float, date, tuple, ...).
    """
    if not isinstance(data, Mapping):
        raise DecodeError(f"Configuration root must be a mapping, got {type(data).__name__}")
    return _normalize_node(data, [])


def _normalize_node(node: Any, location: list[str]) -> Any:
    if node is None or isinstance(node, (bool, str)):
        return node
    if isinstance(node, (int, float)):
        try:
            number = float(node)
        except OverflowError as e:
            raise DecodeError(f"Number too large at '{_dotted(location)}'", cause=e) from e
        if not math.isfinite(number):
            raise DecodeError(f"Non-finite number at '{_dotted(location)}'")
        return number
    if isinstance(node, list):
        return [_normalize_node(item, location + [str(i)]) for i, item in enumerate(node)]
    if isinstance(node, Mapping):
        result: ConfigTree = {}
        for key, value in node.items():
            if not isinstance(key, str):
                raise DecodeError(
                    f"Mapping key {key!r} at '{_dotted(location)}' is {type(key).__name__}, expected string"
                )
            result[key] = _normalize_node(value, location + [key])
        return result
    raise DecodeError(f"Unsupported value of type {type(node).__name__} at '{_dotted(location)}'")


def _dotted(location: list[str]) -> str:
    return ".".join(location)
