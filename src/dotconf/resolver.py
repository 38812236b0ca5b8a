"""Dotted-path resolution over configuration trees."""

from __future__ import annotations

import re
from typing import Any

from dotconf.errors import (
    IndexOutOfBoundsError,
    InvalidIndexError,
    NotIndexableError,
    PathNotFoundError,
)
from dotconf.types import NodeKind, kind_of

__all__ = ["PATH_SEPARATOR", "PathResolver", "resolve", "split_path"]

PATH_SEPARATOR = "."

_INDEX_PATTERN = re.compile(r"[0-9]+")


def split_path(path: str) -> list[str]:
    """Return the segments of a dotted path, without the empty ones."""
    return [part for part in path.strip().split(PATH_SEPARATOR) if part.strip()]


class PathResolver:
    """Walks a dotted path through a tree of mappings, lists and scalars.

    Mapping segments are used as keys verbatim; list segments must be
    non-negative base-10 integers. Segments that are empty or whitespace
    only are skipped, so ``"a..b"`` and ``" a.b. "`` both reach ``a -> b``.
    Errors carry the path prefix up to and including the failing segment.
    """

    def resolve(self, root: Any, path: str) -> Any:
        """Return the node reached by following ``path`` from ``root``.

        The node is returned whatever its kind; an empty path returns ``root``.

        Raises:
            PathNotFoundError: A mapping has no such key.
            InvalidIndexError: A list segment is not a non-negative integer.
            IndexOutOfBoundsError: A list index is past the end of the list.
            NotIndexableError: The path continues below a scalar, a null or
                a node of an unsupported type.
        """
        parts = path.strip().split(PATH_SEPARATOR)
        current = root
        for pos, part in enumerate(parts):
            if not part.strip():
                continue
            prefix = PATH_SEPARATOR.join(parts[: pos + 1])
            current = self._step(current, part, prefix)
        return current

    def _step(self, node: Any, segment: str, prefix: str) -> Any:
        try:
            kind = kind_of(node)
        except TypeError:
            raise NotIndexableError(path=prefix, kind=type(node).__name__) from None
        if kind is NodeKind.LIST:
            if not _INDEX_PATTERN.fullmatch(segment):
                raise InvalidIndexError(path=prefix, segment=segment)
            index = int(segment)
            if index >= len(node):
                raise IndexOutOfBoundsError(path=prefix, index=index, length=len(node))
            return node[index]
        if kind is NodeKind.MAP:
            if segment not in node:
                raise PathNotFoundError(path=prefix)
            return node[segment]
        raise NotIndexableError(path=prefix, kind=kind.value)


_default_resolver = PathResolver()


def resolve(root: Any, path: str) -> Any:
    """Resolve ``path`` against ``root`` with a shared :class:`PathResolver`."""
    return _default_resolver.resolve(root, path)
