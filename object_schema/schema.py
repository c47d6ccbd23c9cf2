"""Object schema engine: per-key validation and ordered multi-record merge.

Usage:
```python
from object_schema import ObjectSchema

schema = ObjectSchema({
    "downloads": {
        "required": True,
        "merge": lambda a, b: a + b,
        "validate": "number",
    },
})

schema.validate({"downloads": 25})
schema.merge({"downloads": 25}, {"downloads": 125})  # {"downloads": 150}
```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from .deprecation import HAS_STRATEGY_FOR, emit_deprecation
from .exceptions import (
    ArityError,
    KeyMergeError,
    KeyValidationError,
    MissingDependencyError,
    MissingRequiredKeyError,
    ObjectSchemaError,
    RecordTypeError,
    UnknownKeyError,
)
from .registry import StrategyRegistry
from .sentinels import ABSENT

logger = logging.getLogger(__name__)


class ObjectSchema:
    """Validates and merges records according to per-key strategies.

    The strategy registry is built once in the constructor and only read
    afterwards, so one instance can be shared freely.
    """

    def __init__(self, definitions: Optional[Mapping[str, Any]]):
        """Build the schema.

        Args:
            definitions: Mapping of key name to strategy definition

        Raises:
            SchemaDefinitionError: If definitions are missing or malformed
        """
        self._registry = StrategyRegistry(definitions)
        logger.debug(
            "ObjectSchema initialized with %d strategies (%d required)",
            len(self._registry),
            len(self._registry.required_keys),
        )

    @property
    def keys(self) -> Tuple[str, ...]:
        """Schema keys in declaration order."""
        return tuple(self._registry)

    @property
    def required_keys(self) -> Tuple[str, ...]:
        return self._registry.required_keys

    def has_key(self, key: str) -> bool:
        """Determine if a strategy has been registered for ``key``."""
        return self._registry.has_key(key)

    def has_strategy_for(self, key: str) -> bool:
        """Deprecated alias of ``has_key()``."""
        emit_deprecation(HAS_STRATEGY_FOR)
        return self.has_key(key)

    def validate(self, record: Mapping[str, Any]) -> None:
        """Validate a record's keys based on each key's strategy.

        Checks run per record key in the record's own order (unknown key,
        then co-required keys, then the key's validator), and only after
        every present key passes are the schema's required keys checked.

        Raises:
            RecordTypeError: If ``record`` is not a mapping
            UnknownKeyError: If the record has a key without a strategy
            MissingDependencyError: If a key's ``requires`` are not all present
            KeyValidationError: If a key's validator raises
            MissingRequiredKeyError: If a required key is absent
        """
        if not isinstance(record, Mapping):
            raise RecordTypeError("validate() requires an object.", received_type=type(record).__name__)

        for key in record:
            strategy = self._registry.get(key)
            if strategy is None:
                raise UnknownKeyError(key)

            if strategy.requires is not None:
                if not all(other in record for other in strategy.requires):
                    raise MissingDependencyError(key, strategy.requires)

            try:
                strategy.validate(record[key])
            except Exception as exc:
                raise KeyValidationError(key, exc) from exc

        for key in self._registry.required_keys:
            if key not in record:
                raise MissingRequiredKeyError(key)

    def is_valid(self, record: Mapping[str, Any]) -> bool:
        """Return ``validate(record)`` as a boolean instead of raising."""
        try:
            self.validate(record)
        except ObjectSchemaError as exc:
            logger.debug("Record failed validation: %s", exc)
            return False
        return True

    def merge(self, *records: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge records into a new record using each key's merge strategy.

        The first record seeds the result and the remaining records are
        folded into it left to right: every schema key present in the
        accumulated result or in the next record is merged with
        ``merge(result_value, record_value)``, where a missing side is
        passed as ``ABSENT``. A merge result of ``ABSENT`` removes the key.

        Returns:
            A new dict whose keys follow the schema's declaration order

        Raises:
            ArityError: If fewer than two records are given
            RecordTypeError: If any argument is not a mapping
            KeyMergeError: If a key's merge function raises
            ObjectSchemaError: Any ``validate()`` failure of an input record
        """
        if len(records) < 2:
            raise ArityError(count=len(records))

        for record in records:
            if not isinstance(record, Mapping):
                raise RecordTypeError(received_type=type(record).__name__)

        for record in records:
            self.validate(record)

        first = records[0]
        result: Dict[str, Any] = {key: first[key] for key in self._registry if key in first}
        for record in records[1:]:
            result = self._fold(result, record)

        logger.debug("Merged %d records into %d keys", len(records), len(result))
        return result

    def _fold(self, current: Dict[str, Any], record: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge one record into the accumulated result, returning a new dict."""
        merged: Dict[str, Any] = {}
        for key, strategy in self._registry.items():
            if key not in current and key not in record:
                continue

            try:
                value = strategy.merge(current.get(key, ABSENT), record.get(key, ABSENT))
            except Exception as exc:
                raise KeyMergeError(key, exc) from exc

            if value is not ABSENT:
                merged[key] = value

        return merged
