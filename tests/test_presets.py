"""Tests for the named merge and validation presets."""

import pytest

from object_schema import ABSENT, MergeStrategy, ObjectSchema, SchemaDefinitionError, ValidationStrategy
from object_schema.presets import (
    MERGE_REGISTRY,
    VALIDATION_REGISTRY,
    get_merge_preset,
    register_merge_strategy,
    register_validation_strategy,
)


class TestMergePresets:
    def test_overwrite(self):
        assert MergeStrategy.overwrite(1, 2) == 2

    def test_overwrite_with_absent(self):
        assert MergeStrategy.overwrite(1, ABSENT) == 1
        assert MergeStrategy.overwrite(ABSENT, 2) == 2

    def test_replace(self):
        assert MergeStrategy.replace(1, 2) == 2
        assert MergeStrategy.replace(1, ABSENT) == 1

    def test_assign(self):
        object1 = {"foo": 1, "bar": 3}
        object2 = {"foo": 2}

        result = MergeStrategy.assign(object1, object2)

        assert result == {"foo": 2, "bar": 3}
        assert object1 == {"foo": 1, "bar": 3}

    def test_assign_with_absent_side(self):
        assert MergeStrategy.assign(ABSENT, {"foo": 1}) == {"foo": 1}
        assert MergeStrategy.assign({"foo": 1}, ABSENT) == {"foo": 1}

    def test_builtin_presets_registered(self):
        assert {"overwrite", "replace", "assign"} <= set(MERGE_REGISTRY)
        assert get_merge_preset("assign").validate is ValidationStrategy.object
        assert get_merge_preset("missing") is None


class TestValidationPresets:
    @pytest.mark.parametrize(
        "name, good, bad",
        [
            ("array", [1, 2], {"a": 1}),
            ("array", (1,), "abc"),
            ("boolean", False, 0),
            ("number", 1.5, "1.5"),
            ("number", 3, True),
            ("object", {"a": 1}, [("a", 1)]),
            ("object?", None, "none"),
            ("string", "", 1),
            ("string!", "x", ""),
            ("string!", "x", None),
        ],
    )
    def test_preset(self, name, good, bad):
        validate = ValidationStrategy.get(name)

        validate(good)
        with pytest.raises((TypeError, ValueError), match="Expected"):
            validate(bad)

    def test_known_names(self):
        assert set(VALIDATION_REGISTRY) >= {"array", "boolean", "number", "object", "object?", "string", "string!"}

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            ValidationStrategy.get("uuid")


class TestCustomPresets:
    @pytest.fixture
    def cleanup_registries(self):
        merge_before = dict(MERGE_REGISTRY)
        validation_before = dict(VALIDATION_REGISTRY)
        yield
        MERGE_REGISTRY.clear()
        MERGE_REGISTRY.update(merge_before)
        VALIDATION_REGISTRY.clear()
        VALIDATION_REGISTRY.update(validation_before)

    def test_register_and_use_custom_presets(self, cleanup_registries):
        @register_validation_strategy("list-of-strings")
        def validate_strings(value):
            if not all(isinstance(item, str) for item in value):
                raise TypeError("Expected strings.")

        @register_merge_strategy("concat", validator="list-of-strings")
        def concat(a, b):
            return (a or []) + (b or [])

        schema = ObjectSchema({"files": {"merge": "concat"}})

        assert schema.merge({"files": ["a.js"]}, {"files": ["b.js"]}) == {"files": ["a.js", "b.js"]}
        assert schema.is_valid({"files": [1]}) is False

    def test_unknown_preset_validator_name(self, cleanup_registries):
        with pytest.raises(SchemaDefinitionError, match='Merge preset "concat" references unknown validate strategy "nope"'):

            @register_merge_strategy("concat", validator="nope")
            def concat(a, b):
                return a + b

        assert "concat" not in MERGE_REGISTRY
