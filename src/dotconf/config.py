"""Typed dotted-path access to a configuration tree."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from dotconf.errors import ConfigError, PathError, TypeMismatchError
from dotconf.resolver import PathResolver
from dotconf.types import ConfigTree, NodeKind, kind_of, normalize_tree

__all__ = ["Config"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()


class Config:
    """Configuration accessor with dot-path key support.

    Paths such as ``"clothes.pants.size"`` or ``"hobbies.0"`` walk nested
    mappings and lists. Each ``get_*`` accessor raises a :class:`PathError`
    when the path cannot be resolved or the value has the wrong kind; the
    matching ``must_*`` accessor returns a default instead.

    Numbers are stored as floats, whatever the source. ``get_int`` truncates
    toward zero.

    Thread safety:
        Reads never mutate the tree and may run concurrently. ``extend``
        rewrites top-level keys in place without locking; build the merged
        configuration with :meth:`merged` before sharing it, or guard
        ``extend`` with your own lock.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        """Wrap a normalized copy of ``data``.

        Raises:
            DecodeError: If ``data`` is not a JSON-shaped mapping.
        """
        self._data: ConfigTree = normalize_tree(data if data is not None else {})
        self._resolver = PathResolver()

    def __repr__(self) -> str:
        return f"Config(keys={sorted(self._data)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self._data == other._data

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        try:
            self._resolver.resolve(self._data, path)
        except PathError:
            return False
        return True

    def get(self, path: str, default: Any = _MISSING) -> Any:
        """Get the raw value at a dotted path.

        Without ``default`` a resolution failure propagates; with it, the
        default is returned instead.
        """
        try:
            return self._resolver.resolve(self._data, path)
        except PathError:
            if default is _MISSING:
                raise
            return default

    # === Fallible accessors ===

    def get_string(self, path: str) -> str:
        return self._typed(path, NodeKind.STRING)

    def get_bool(self, path: str) -> bool:
        return self._typed(path, NodeKind.BOOL)

    def get_int(self, path: str) -> int:
        """Get a number, truncated toward zero."""
        return int(self._typed(path, NodeKind.NUMBER))

    def get_float(self, path: str) -> float:
        return float(self._typed(path, NodeKind.NUMBER))

    def get_map(self, path: str) -> dict[str, Any]:
        """Get the mapping stored at ``path``; its values keep their dynamic types."""
        return self._typed(path, NodeKind.MAP)

    def get_list(self, path: str) -> list[Any]:
        """Get the list stored at ``path``; its items keep their dynamic types."""
        return self._typed(path, NodeKind.LIST)

    def _typed(self, path: str, expected: NodeKind) -> Any:
        value = self.get(path)
        actual = kind_of(value)
        if actual is not expected:
            raise TypeMismatchError(path=path, expected=expected.value, actual=actual.value)
        return value

    # === Defaulting accessors ===
    #
    # The built-in fallbacks ("", False, -1, -1.0, {}, []) can equal real
    # values. Use the get_* form to tell "absent" from "present".

    def must_string(self, path: str, default: str | None = None) -> str:
        return self._must(self.get_string, path, default, "")

    def must_bool(self, path: str, default: bool | None = None) -> bool:
        return self._must(self.get_bool, path, default, False)

    def must_int(self, path: str, default: int | None = None) -> int:
        return self._must(self.get_int, path, default, -1)

    def must_float(self, path: str, default: float | None = None) -> float:
        return self._must(self.get_float, path, default, -1.0)

    def must_map(self, path: str, default: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._must(self.get_map, path, default, {})

    def must_list(self, path: str, default: list[Any] | None = None) -> list[Any]:
        return self._must(self.get_list, path, default, [])

    def _must(self, accessor: Callable[[str], T], path: str, default: T | None, fallback: T) -> T:
        try:
            return accessor(path)
        except ConfigError as e:
            logger.debug("Falling back to default for '%s': %s", path, e)
            return default if default is not None else fallback

    # === Merging ===

    def extend(self, other: Config | Mapping[str, Any] | None) -> Config:
        """Shallow-merge ``other`` into this configuration, in place.

        Every top-level key of ``other`` replaces the receiver's value
        wholesale; nested mappings are not combined. Donor values are deep
        copied. ``None`` is a no-op.

        Returns:
            This configuration.
        """
        if other is None:
            return self
        donor = other._data if isinstance(other, Config) else normalize_tree(other)
        for key, value in donor.items():
            self._data[key] = copy.deepcopy(value)
        logger.debug("Extended configuration with %d top-level keys", len(donor))
        return self

    def merged(self, other: Config | Mapping[str, Any] | None) -> Config:
        """Return a new configuration equal to this one extended with ``other``."""
        return self.copy().extend(other)

    def copy(self) -> Config:
        """Return an independent deep copy."""
        return Config(self._data)

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the root mapping."""
        return copy.deepcopy(self._data)
