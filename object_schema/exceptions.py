"""Custom exception classes for object-schema.

Every failure raised by the schema engine derives from ``ObjectSchemaError``
so callers can catch the whole family, while the concrete types tell a bad
schema definition apart from a bad record.
"""

from typing import Any, Dict, Optional, Sequence


class ObjectSchemaError(Exception):
    """Base exception for all object-schema errors."""

    error_code: str = "ERR000"  # Override in subclasses

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
        key: Optional[str] = None,
    ):
        """
        Initialize object-schema exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context
            error_code: Optional error code override
            key: Record/schema key the error relates to
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.key = key
        if error_code:
            self.error_code = error_code

    def __str__(self) -> str:
        """Return string representation with error code and details."""
        parts = [f"[{self.error_code}] {self.message}"]
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"({detail_str})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "key": self.key,
            "details": self.details,
        }


class SchemaDefinitionError(ObjectSchemaError):
    """Raised when strategy definitions are malformed at construction time.

    Examples:
        - Missing, ``None`` or empty definitions mapping
        - Merge that is neither a two-argument callable nor a known preset
        - Missing or unusable validate callable
    """

    error_code = "DEF001"

    def __init__(self, message: str, key: Optional[str] = None, original_error: Optional[Exception] = None):
        details = {}
        if key is not None:
            details["key"] = key
        if original_error is not None:
            details["error_type"] = type(original_error).__name__
        super().__init__(message, details, key=key)
        self.original_error = original_error


class UnknownKeyError(ObjectSchemaError):
    """Raised when a record contains a key with no registered strategy."""

    error_code = "KEY001"

    def __init__(self, key: str):
        super().__init__(f'Unexpected key "{key}" found.', {"key": key}, key=key)


class MissingDependencyError(ObjectSchemaError):
    """Raised when a present key's co-required keys are not all present."""

    error_code = "KEY002"

    def __init__(self, key: str, requires: Sequence[str]):
        self.requires = tuple(requires)
        joined = '", "'.join(self.requires)
        super().__init__(
            f'Key "{key}" requires keys "{joined}".',
            {"key": key, "requires": list(self.requires)},
            key=key,
        )


class MissingRequiredKeyError(ObjectSchemaError):
    """Raised when a schema-required key is absent from a record."""

    error_code = "KEY003"

    def __init__(self, key: str):
        super().__init__(f'Missing required key "{key}".', {"key": key}, key=key)


class _KeyCallbackError(ObjectSchemaError):
    """Wraps an exception raised by a user-supplied strategy callable."""

    def __init__(self, key: str, original_error: Exception):
        self.original_error = original_error
        super().__init__(
            f'Key "{key}": {original_error}',
            {"key": key, "error_type": type(original_error).__name__},
            key=key,
        )


class KeyValidationError(_KeyCallbackError):
    """Raised when a strategy's validate callable rejects a value."""

    error_code = "VAL001"


class KeyMergeError(_KeyCallbackError):
    """Raised when a strategy's merge callable fails."""

    error_code = "MRG001"


class ArityError(ObjectSchemaError, TypeError):
    """Raised when merge() is called with fewer than two records."""

    error_code = "ARG001"

    def __init__(self, message: str = "merge() requires at least two arguments.", count: Optional[int] = None):
        details = {"count": count} if count is not None else None
        super().__init__(message, details)


class RecordTypeError(ObjectSchemaError, TypeError):
    """Raised when a record argument is not a key/value mapping."""

    error_code = "ARG002"

    def __init__(self, message: str = "All arguments must be objects.", received_type: Optional[str] = None):
        details = {"received_type": received_type} if received_type else None
        super().__init__(message, details)
