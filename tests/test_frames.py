"""Tests for the pandas DataFrame helpers."""

import math

import pandas as pd
import pytest

from object_schema import ABSENT, ArityError, KeyValidationError, ObjectSchema, UnknownKeyError
from object_schema.frames import frame_to_records, merge_frame, validate_frame


@pytest.fixture
def stats_schema():
    return ObjectSchema(
        {
            "package": {"required": True, "merge": "overwrite", "validate": "string"},
            "downloads": {"merge": lambda a, b: b if a is ABSENT else a + b, "validate": "number"},
        }
    )


def test_frame_to_records_drops_missing_cells():
    df = pd.DataFrame({"package": ["a", "b"], "downloads": [1.0, float("nan")]})

    records = frame_to_records(df)

    assert records == [{"package": "a", "downloads": 1.0}, {"package": "b"}]


def test_frame_to_records_keeps_missing_cells():
    df = pd.DataFrame({"package": ["a"], "downloads": [float("nan")]})

    records = frame_to_records(df, drop_missing=False)

    assert math.isnan(records[0]["downloads"])


def test_frame_to_records_keeps_list_cells():
    df = pd.DataFrame({"files": [["a.py", "b.py"]]})

    assert frame_to_records(df) == [{"files": ["a.py", "b.py"]}]


def test_validate_frame(stats_schema):
    df = pd.DataFrame({"package": ["a", "b"], "downloads": [10, 20]})

    validate_frame(stats_schema, df)


def test_validate_frame_reports_failing_row(stats_schema, caplog):
    df = pd.DataFrame({"package": ["a", "b"], "downloads": ["10", "20"]}, index=["first", "second"])

    with pytest.raises(KeyValidationError, match='Key "downloads"'):
        validate_frame(stats_schema, df)

    assert "Row first failed validation" in caplog.text


def test_validate_frame_unknown_column(stats_schema):
    df = pd.DataFrame({"package": ["a"], "stars": [3]})

    with pytest.raises(UnknownKeyError, match="stars"):
        validate_frame(stats_schema, df)


def test_merge_frame(stats_schema):
    df = pd.DataFrame({"package": ["a", "a", "a"], "downloads": [25, 125, 50]})

    assert merge_frame(stats_schema, df) == {"package": "a", "downloads": 200}


def test_merge_frame_needs_two_rows(stats_schema):
    df = pd.DataFrame({"package": ["a"], "downloads": [1]})

    with pytest.raises(ArityError):
        merge_frame(stats_schema, df)
