"""Deprecation warning utilities.

Provides a warning category and a helper to standardize messaging for legacy
aliases kept on the public API.
"""
from __future__ import annotations
import warnings
from dataclasses import dataclass
from typing import Optional


class ObjectSchemaDeprecationWarning(DeprecationWarning):
    """Base category for deprecation notices."""


warnings.simplefilter("default", ObjectSchemaDeprecationWarning)


@dataclass(frozen=True)
class DeprecationSpec:
    code: str
    message: str
    since: str
    remove_in: Optional[str] = None

    def format(self) -> str:
        suffix = f" (scheduled removal: {self.remove_in})" if self.remove_in else ""
        return f"[{self.code}] {self.message} (since {self.since}){suffix}"


def emit_deprecation(spec: DeprecationSpec, stacklevel: int = 3) -> None:
    warnings.warn(spec.format(), ObjectSchemaDeprecationWarning, stacklevel=stacklevel)


HAS_STRATEGY_FOR = DeprecationSpec(
    code="DEP001",
    message="ObjectSchema.has_strategy_for() is deprecated; use has_key() instead",
    since="1.0.0",
    remove_in="2.0.0",
)
