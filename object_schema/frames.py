"""pandas helpers for validating and merging tabular records.

Each DataFrame row is treated as one record. Missing cells (NaN/None/NaT)
are dropped by default so they behave like absent keys instead of failing
the key's validator.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import pandas as pd

from .exceptions import ObjectSchemaError
from .schema import ObjectSchema

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def frame_to_records(df: pd.DataFrame, drop_missing: bool = True) -> List[Dict[str, Any]]:
    """Convert DataFrame rows to records.

    Args:
        df: DataFrame whose columns are schema keys
        drop_missing: Leave NA cells out of the record

    Returns:
        One dict per row, in row order
    """
    records = df.to_dict("records")
    if not drop_missing:
        return records
    return [{key: value for key, value in record.items() if not _is_missing(value)} for record in records]


def validate_frame(schema: ObjectSchema, df: pd.DataFrame, drop_missing: bool = True) -> None:
    """Validate every row of ``df`` against ``schema``.

    The first failing row is logged with its index and the error re-raised.
    """
    for index, record in zip(df.index, frame_to_records(df, drop_missing=drop_missing)):
        try:
            schema.validate(record)
        except ObjectSchemaError as exc:
            logger.error("Row %s failed validation: %s", index, exc)
            raise


def merge_frame(schema: ObjectSchema, df: pd.DataFrame, drop_missing: bool = True) -> Dict[str, Any]:
    """Merge all rows of ``df`` top to bottom into one record."""
    records = frame_to_records(df, drop_missing=drop_missing)
    logger.debug("Merging %d DataFrame rows", len(records))
    return schema.merge(*records)
