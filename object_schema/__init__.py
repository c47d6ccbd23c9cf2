"""object-schema: per-key validation and merging of records.

Public API:
    ObjectSchema        - validate() / merge() / has_key()
    StrategyRegistry    - immutable key -> Strategy table
    ABSENT              - "no value" sentinel used by merge functions
    MergeStrategy       - built-in merge presets (overwrite, replace, assign)
    ValidationStrategy  - built-in validation presets
"""

__version__ = "1.0.0"

from .definitions import Strategy, StrategyDefinition, parse_definition
from .deprecation import ObjectSchemaDeprecationWarning
from .exceptions import (
    ArityError,
    KeyMergeError,
    KeyValidationError,
    MissingDependencyError,
    MissingRequiredKeyError,
    ObjectSchemaError,
    RecordTypeError,
    SchemaDefinitionError,
    UnknownKeyError,
)
from .logging_config import get_logger, log_exception, setup_logging
from .presets import (
    MergeStrategy,
    ValidationStrategy,
    register_merge_strategy,
    register_validation_strategy,
)
from .registry import StrategyRegistry
from .schema import ObjectSchema
from .sentinels import ABSENT
from .settings import SchemaSettings, get_settings

__all__ = [
    "__version__",
    "ABSENT",
    "ArityError",
    "KeyMergeError",
    "KeyValidationError",
    "MergeStrategy",
    "MissingDependencyError",
    "MissingRequiredKeyError",
    "ObjectSchema",
    "ObjectSchemaDeprecationWarning",
    "ObjectSchemaError",
    "RecordTypeError",
    "SchemaDefinitionError",
    "SchemaSettings",
    "Strategy",
    "StrategyDefinition",
    "StrategyRegistry",
    "UnknownKeyError",
    "ValidationStrategy",
    "get_logger",
    "get_settings",
    "log_exception",
    "parse_definition",
    "register_merge_strategy",
    "register_validation_strategy",
    "setup_logging",
]
