"""Strategy definitions and their resolved, immutable form.

A definition is what callers write::

    {"required": True, "requires": ["date"], "merge": "replace", "validate": "string"}

``parse_definition`` checks its shape with pydantic, resolves preset names to
callables and returns a frozen ``Strategy``.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from .exceptions import SchemaDefinitionError
from .presets import MergeFn, ValidateFn, get_merge_preset, get_validation_preset

logger = logging.getLogger(__name__)


class StrategyDefinition(BaseModel):
    """Typed form of a single key's strategy definition.

    ``validate`` is exposed as ``validator`` on the model because
    ``BaseModel`` already owns that attribute name; both spellings are
    accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    required: StrictBool = False
    requires: Optional[List[StrictStr]] = None
    merge: Any = None
    validator: Any = Field(default=None, alias="validate")


@dataclass(frozen=True)
class Strategy:
    """Resolved strategy bound to one key."""

    key: str
    merge: MergeFn
    validate: ValidateFn
    required: bool = False
    requires: Optional[Tuple[str, ...]] = None


def _accepts_positional(func: Callable[..., Any], count: int) -> bool:
    """Return True if ``func`` can be called with ``count`` positional args."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins expose no signature; trust the caller.
        return True
    try:
        signature.bind(*([None] * count))
    except TypeError:
        return False
    return True


def _resolve_merge(key: str, spec: Any) -> Tuple[MergeFn, Optional[ValidateFn]]:
    if isinstance(spec, str):
        preset = get_merge_preset(spec)
        if preset is None:
            raise SchemaDefinitionError(f'Definition for key "{key}" missing valid merge strategy.', key=key)
        return preset.merge, preset.validate

    if not callable(spec):
        raise SchemaDefinitionError(f'Definition for key "{key}" must have a merge property.', key=key)

    if not _accepts_positional(spec, 2):
        raise SchemaDefinitionError(f'Definition for key "{key}" merge must accept two arguments.', key=key)

    return spec, None


def _resolve_validate(key: str, spec: Any, fallback: Optional[ValidateFn]) -> ValidateFn:
    if spec is None:
        if fallback is None:
            raise SchemaDefinitionError(f'Definition for key "{key}" must have a validate() method.', key=key)
        return fallback

    if isinstance(spec, str):
        validate = get_validation_preset(spec)
        if validate is None:
            raise SchemaDefinitionError(f'Definition for key "{key}" has unknown validate strategy "{spec}".', key=key)
        return validate

    if not callable(spec):
        raise SchemaDefinitionError(f'Definition for key "{key}" must have a validate() method.', key=key)

    if not _accepts_positional(spec, 1):
        raise SchemaDefinitionError(f'Definition for key "{key}" validate() must accept one argument.', key=key)

    return spec


def parse_definition(key: str, definition: Union[Mapping, StrategyDefinition]) -> Strategy:
    """Validate a raw definition and resolve it into a ``Strategy``.

    Raises:
        SchemaDefinitionError: If the key or definition is unusable
    """
    if not isinstance(key, str):
        raise SchemaDefinitionError(f"Definition keys must be strings, got {type(key).__name__}.")

    if isinstance(definition, StrategyDefinition):
        model = definition
    elif isinstance(definition, Mapping):
        try:
            model = StrategyDefinition.model_validate(dict(definition))
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ()))
            raise SchemaDefinitionError(
                f'Definition for key "{key}" is invalid: {field}: {first.get("msg")}',
                key=key,
                original_error=exc,
            ) from exc
    else:
        raise SchemaDefinitionError(f'Definition for key "{key}" must be a mapping.', key=key)

    merge, preset_validate = _resolve_merge(key, model.merge)
    validate = _resolve_validate(key, model.validator, preset_validate)

    requires = tuple(model.requires) if model.requires is not None else None

    logger.debug(
        "Resolved strategy for key %r (required=%s, requires=%s)",
        key,
        model.required,
        list(requires) if requires else [],
    )
    return Strategy(key=key, merge=merge, validate=validate, required=model.required, requires=requires)
