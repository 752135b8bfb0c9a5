"""Tests for validation utilities."""

from paste_json.inference import Deduplicator, Namer, SchemaBuilder
from paste_json.models import ClassRef
from paste_json.types import ErrorType
from paste_json.utils.validation import ValidationUtils


def named_forest(document):
    forest = SchemaBuilder().build(document)
    return Namer().assign_names(Deduplicator().deduplicate(forest))


class TestValidationUtils:
    """Tests for ValidationUtils class."""

    def test_validate_json_string(self):
        """Test validation of raw input."""
        assert ValidationUtils.validate_json_string('{"a": 1}').is_valid
        assert not ValidationUtils.validate_json_string("").is_valid

        result = ValidationUtils.validate_json_string(None)
        assert not result.is_valid
        assert result.errors[0].type == ErrorType.INPUT

    def test_validate_json_string_bom_warning(self):
        """Test that a byte order mark produces a warning."""
        result = ValidationUtils.validate_json_string('\ufeff{}')

        assert result.is_valid
        assert len(result.warnings) == 1

    def test_validate_named_forest(self, weather_json):
        """Test that a pipeline forest is valid."""
        result = ValidationUtils.validate_forest(named_forest(weather_json))

        assert result.is_valid
        assert result.errors == []

    def test_duplicate_names(self):
        """Test detection of duplicate class names."""
        forest = named_forest({"a": {"x": 1}, "b": {"y": 1}})
        forest.get(forest.root.fields["b"].class_id).declared_name = "A"

        result = ValidationUtils.validate_forest(forest)

        assert not result.is_valid
        assert "Duplicate class name 'A'" in result.errors[0].message

    def test_unnamed_node(self):
        """Test detection of nodes without a name."""
        forest = SchemaBuilder().build({"a": 1})

        result = ValidationUtils.validate_forest(forest)

        assert not result.is_valid

    def test_dangling_reference(self):
        """Test detection of references to missing nodes."""
        forest = named_forest({"a": 1})
        forest.root.set_field("a", ClassRef(99))

        result = ValidationUtils.validate_forest(forest)

        assert not result.is_valid
        assert "missing class node 99" in result.errors[0].message

    def test_empty_class_warning(self):
        """Test that classes without fields are reported as warnings."""
        result = ValidationUtils.validate_forest(named_forest({"empty": {}}))

        assert result.is_valid
        assert result.warnings == ["Class 'Empty' has no fields"]
