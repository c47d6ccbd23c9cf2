"""Registry of per-key strategies for a schema."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator, Optional, Tuple

from .definitions import Strategy, parse_definition
from .exceptions import SchemaDefinitionError

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """Immutable key -> ``Strategy`` table built from definitions.

    Keys keep the order in which they were declared; required keys are
    tracked separately so record validation only walks those.
    """

    def __init__(self, definitions: Optional[Mapping[str, Any]]):
        if definitions is None:
            raise SchemaDefinitionError("Schema definitions missing.")
        if not isinstance(definitions, Mapping):
            raise SchemaDefinitionError(
                f"Schema definitions must be a mapping, got {type(definitions).__name__}."
            )

        by_key = {}
        required = []
        for key, definition in definitions.items():
            strategy = parse_definition(key, definition)
            by_key[key] = strategy
            if strategy.required:
                required.append(key)

        self._by_key = MappingProxyType(by_key)
        self._required_keys: Tuple[str, ...] = tuple(required)

        logger.debug(
            "StrategyRegistry built with %d strategies (%d required)",
            len(self._by_key),
            len(self._required_keys),
        )

    @property
    def by_key(self) -> Mapping[str, Strategy]:
        return self._by_key

    @property
    def required_keys(self) -> Tuple[str, ...]:
        return self._required_keys

    def has_key(self, key: str) -> bool:
        return key in self._by_key

    def get(self, key: str) -> Optional[Strategy]:
        return self._by_key.get(key)

    def items(self):
        return self._by_key.items()

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_key)

    def __len__(self) -> int:
        return len(self._by_key)

    def __repr__(self) -> str:
        return f"StrategyRegistry(keys={list(self._by_key)!r}, required={list(self._required_keys)!r})"
