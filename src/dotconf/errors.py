"""Error hierarchy for dotconf."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
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
    "ErrorCodes",
]


class ConfigError(Exception):
    """Base error for all dotconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PathError(ConfigError):
    """Base for errors raised while reading a dotted path."""

    def __init__(
        self,
        code: str,
        message: str,
        path: str,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            details={"path": path, **(details or {})},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The dotted path prefix at which the failure happened."""
        return self.details["path"]


class PathNotFoundError(PathError):
    """Raised when a mapping has no key for the next path segment."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_NOT_FOUND",
            message=f"Unknown path at '{path}'",
            path=path,
            **kwargs,
        )


class InvalidIndexError(PathError):
    """Raised when a segment applied to a list is not a non-negative integer."""

    def __init__(self, path: str, segment: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_INDEX",
            message=f"Invalid list index '{segment}' at '{path}'",
            path=path,
            details={"segment": segment},
            **kwargs,
        )

    @property
    def segment(self) -> str:
        return self.details["segment"]


class IndexOutOfBoundsError(PathError):
    """Raised when a list index is not smaller than the list length."""

    def __init__(self, path: str, index: int, length: int, **kwargs: Any) -> None:
        super().__init__(
            code="INDEX_OUT_OF_BOUNDS",
            message=f"Index {index} out of bounds for list of length {length} at '{path}'",
            path=path,
            details={"index": index, "length": length},
            **kwargs,
        )

    @property
    def index(self) -> int:
        return self.details["index"]

    @property
    def length(self) -> int:
        return self.details["length"]


class NotIndexableError(PathError):
    """Raised when a path tries to descend into a scalar or null node."""

    def __init__(self, path: str, kind: str, **kwargs: Any) -> None:
        super().__init__(
            code="NOT_INDEXABLE",
            message=f"Cannot descend into {kind} value at '{path}'",
            path=path,
            details={"kind": kind},
            **kwargs,
        )

    @property
    def kind(self) -> str:
        """Kind of the node that could not be descended into."""
        return self.details["kind"]


class TypeMismatchError(PathError):
    """Raised when a resolved value is not of the requested kind."""

    def __init__(self, path: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="TYPE_MISMATCH",
            message=f"Expected {expected} at '{path}', got {actual}",
            path=path,
            details={"expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def expected(self) -> str:
        """The kind the accessor asked for."""
        return self.details["expected"]

    @property
    def actual(self) -> str:
        """The kind actually stored at the path."""
        return self.details["actual"]


class DecodeError(ConfigError):
    """Raised when input is not valid JSON-shaped data with a mapping root."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="DECODE_FAILURE", message=message, **kwargs)


class ReadError(ConfigError):
    """Raised when a configuration file cannot be read."""

    def __init__(
        self,
        config_path: str,
        message: str | None = None,
        code: str = "READ_FAILURE",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code=code,
            message=message or f"Cannot read configuration file: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        return self.details["config_path"]


class ConfigNotFoundError(ReadError):
    """Raised when a configuration file does not exist."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            config_path,
            message=f"Configuration file not found: {config_path}",
            code="CONFIG_NOT_FOUND",
            **kwargs,
        )


class ErrorCodes:
    """All dotconf error codes as constants.

    Example:
        if error.code == ErrorCodes.PATH_NOT_FOUND:
            use_fallback()
    """

    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    INVALID_INDEX = "INVALID_INDEX"
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"
    NOT_INDEXABLE = "NOT_INDEXABLE"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    DECODE_FAILURE = "DECODE_FAILURE"
    READ_FAILURE = "READ_FAILURE"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
