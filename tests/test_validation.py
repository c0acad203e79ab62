"""Tests for validation utilities."""

from json_properties.utils.validation import ValidationUtils
from json_properties.types import ErrorType


class TestValidateJsonString:
    """Tests for JSON string validation."""

    def test_valid_json(self):
        """Test validation of valid JSON."""
        result = ValidationUtils.validate_json_string('{"a": [1, 2]}')

        assert result.is_valid
        assert result.errors == []

    def test_scalar_json_is_valid(self):
        """Test that scalar documents parse."""
        assert ValidationUtils.validate_json_string("null").is_valid

    def test_empty_json(self):
        """Test validation of empty input."""
        result = ValidationUtils.validate_json_string("")

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert result.errors[0].message == "JSON string is empty"

    def test_invalid_syntax(self):
        """Test validation of malformed JSON."""
        result = ValidationUtils.validate_json_string('{"a": 1,}')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert result.errors[0].location.startswith("line 1, column")

    def test_non_standard_constant(self):
        """Test that NaN is reported as a syntax error."""
        result = ValidationUtils.validate_json_string('{"a": NaN}')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "NaN" in result.errors[0].message


class TestUnsafeTokens:
    """Tests for unsafe token detection."""

    def test_safe_tokens(self):
        """Test ordinary identifiers and values."""
        assert ValidationUtils.is_safe_token("collisionObject")
        assert ValidationUtils.is_safe_token("res/box.gpb")
        assert ValidationUtils.is_safe_token("two words")

    def test_unsafe_tokens(self):
        """Test text containing format syntax."""
        for text in ("a{", "}", "x=y", "line\nbreak", "cr\r"):
            assert not ValidationUtils.is_safe_token(text)

    def test_find_unsafe_tokens_clean_document(self, sample_scene_json):
        """Test a document without syntax characters."""
        assert ValidationUtils.find_unsafe_tokens(sample_scene_json) == []

    def test_find_unsafe_keys_and_values(self):
        """Test paths of offending keys and string values."""
        data = {
            "ok": "fine",
            "a=b": 1,
            "nested": {"value": "{broken}"},
            "list": ["x", "multi\nline"]
        }

        unsafe = ValidationUtils.find_unsafe_tokens(data)

        assert sorted(unsafe) == ["$.a=b", "$.list[1]", "$.nested.value"]

    def test_non_string_scalars_are_safe(self):
        """Test that numbers, booleans and null are never flagged."""
        assert ValidationUtils.find_unsafe_tokens([1, 2.5, True, None]) == []
