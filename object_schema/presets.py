"""Named merge and validation presets.

Strategy definitions may reference a preset by name instead of supplying a
callable, e.g. ``{"merge": "assign"}`` or ``{"validate": "string!"}``. Names
are resolved once, when the schema is built.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict

from .exceptions import SchemaDefinitionError
from .sentinels import ABSENT

MergeFn = Callable[[Any, Any], Any]
ValidateFn = Callable[[Any], None]


@dataclass(frozen=True)
class MergePreset:
    """A registered merge function plus the validator used when none is given."""

    name: str
    merge: MergeFn
    validate: ValidateFn


MERGE_REGISTRY: Dict[str, MergePreset] = {}
VALIDATION_REGISTRY: Dict[str, ValidateFn] = {}


def _accept_any(value: Any) -> None:
    return None


def register_merge_strategy(
    name: str, validator: ValidateFn | str = _accept_any
) -> Callable[[MergeFn], MergeFn]:
    """Register a merge function under ``name``.

    ``validator`` is either a callable or the name of an already registered
    validation preset; it is used for keys that name this preset without
    providing their own ``validate``.
    """

    def decorator(func: MergeFn) -> MergeFn:
        if isinstance(validator, str):
            if validator not in VALIDATION_REGISTRY:
                raise SchemaDefinitionError(
                    f'Merge preset "{name}" references unknown validate strategy "{validator}".'
                )
            validate = VALIDATION_REGISTRY[validator]
        else:
            validate = validator
        MERGE_REGISTRY[name] = MergePreset(name=name, merge=func, validate=validate)
        return func

    return decorator


def register_validation_strategy(name: str) -> Callable[[ValidateFn], ValidateFn]:
    def decorator(func: ValidateFn) -> ValidateFn:
        VALIDATION_REGISTRY[name] = func
        return func

    return decorator


def get_merge_preset(name: str) -> MergePreset | None:
    return MERGE_REGISTRY.get(name)


def get_validation_preset(name: str) -> ValidateFn | None:
    return VALIDATION_REGISTRY.get(name)


# ---------------------------------------------------------------------------
# Validation presets
# ---------------------------------------------------------------------------


@register_validation_strategy("array")
def validate_array(value: Any) -> None:
    if not isinstance(value, (list, tuple)):
        raise TypeError("Expected an array.")


@register_validation_strategy("boolean")
def validate_boolean(value: Any) -> None:
    if not isinstance(value, bool):
        raise TypeError("Expected a Boolean.")


@register_validation_strategy("number")
def validate_number(value: Any) -> None:
    # bool is an int subclass but not a number here
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError("Expected a number.")


@register_validation_strategy("object")
def validate_object(value: Any) -> None:
    if not isinstance(value, Mapping):
        raise TypeError("Expected an object.")


@register_validation_strategy("object?")
def validate_optional_object(value: Any) -> None:
    if value is not None and not isinstance(value, Mapping):
        raise TypeError("Expected an object or null.")


@register_validation_strategy("string")
def validate_string(value: Any) -> None:
    if not isinstance(value, str):
        raise TypeError("Expected a string.")


@register_validation_strategy("string!")
def validate_non_empty_string(value: Any) -> None:
    if not isinstance(value, str):
        raise TypeError("Expected a non-empty string.")
    if not value:
        raise ValueError("Expected a non-empty string.")


# ---------------------------------------------------------------------------
# Merge presets
# ---------------------------------------------------------------------------


@register_merge_strategy("overwrite")
def overwrite(value1: Any, value2: Any) -> Any:
    """Take the second value; an absent second value keeps the first."""
    if value2 is ABSENT:
        return value1
    return value2


@register_merge_strategy("replace")
def replace(value1: Any, value2: Any) -> Any:
    """Take the second value unless it is absent."""
    if value2 is not ABSENT:
        return value2
    return value1


@register_merge_strategy("assign", validator="object")
def assign(value1: Any, value2: Any) -> Dict[str, Any]:
    """Shallow-combine two mappings into a new dict, second wins."""
    result: Dict[str, Any] = {}
    if value1 is not ABSENT:
        result.update(value1)
    if value2 is not ABSENT:
        result.update(value2)
    return result


class MergeStrategy:
    """Namespace access to the built-in merge presets."""

    overwrite = staticmethod(overwrite)
    replace = staticmethod(replace)
    assign = staticmethod(assign)


class ValidationStrategy:
    """Namespace access to the built-in validation presets by name."""

    array = staticmethod(validate_array)
    boolean = staticmethod(validate_boolean)
    number = staticmethod(validate_number)
    object = staticmethod(validate_object)
    optional_object = staticmethod(validate_optional_object)
    string = staticmethod(validate_string)
    non_empty_string = staticmethod(validate_non_empty_string)

    @staticmethod
    def get(name: str) -> ValidateFn:
        return VALIDATION_REGISTRY[name]
