"""Pytest configuration and fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from object_schema import ABSENT, ObjectSchema  # noqa: E402


def _accept(value):
    return None


def _require_number(value):
    if not isinstance(value, (int, float)):
        raise TypeError("Expected a number.")


@pytest.fixture
def downloads_schema():
    """Schema with a single required, summing key."""
    return ObjectSchema(
        {
            "downloads": {
                "required": True,
                "merge": lambda a, b: a + b,
                "validate": _require_number,
            }
        }
    )


@pytest.fixture
def date_time_schema():
    """Schema where ``time`` requires ``date`` and ``date`` is always dropped on merge."""
    return ObjectSchema(
        {
            "date": {"merge": lambda a, b: ABSENT, "validate": _accept},
            "time": {"requires": ["date"], "merge": lambda a, b: b, "validate": _accept},
        }
    )


@pytest.fixture
def reset_root_logging():
    """Restore root logger handlers after a test reconfigures logging."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            handler.close()
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
