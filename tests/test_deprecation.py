import pytest

from object_schema import ObjectSchema, ObjectSchemaDeprecationWarning
from object_schema.deprecation import DeprecationSpec, emit_deprecation


def test_spec_format():
    spec = DeprecationSpec(code="DEP999", message="Old thing", since="1.0.0", remove_in="2.0.0")
    assert spec.format() == "[DEP999] Old thing (since 1.0.0) (scheduled removal: 2.0.0)"


def test_spec_format_without_removal():
    spec = DeprecationSpec(code="DEP999", message="Old thing", since="1.0.0")
    assert spec.format() == "[DEP999] Old thing (since 1.0.0)"


def test_emit_deprecation():
    with pytest.warns(ObjectSchemaDeprecationWarning, match="DEP999"):
        emit_deprecation(DeprecationSpec(code="DEP999", message="Old thing", since="1.0.0"))


def test_has_strategy_for_is_deprecated_alias():
    schema = ObjectSchema({"foo": {"merge": "overwrite"}})

    with pytest.warns(ObjectSchemaDeprecationWarning, match=r"\[DEP001\].*has_key"):
        assert schema.has_strategy_for("foo") is True

    with pytest.warns(ObjectSchemaDeprecationWarning):
        assert schema.has_strategy_for("bar") is False
