"""Tests for error handler."""

import pytest
from json_properties.error_handler import ErrorHandler
from json_properties.types import ProcessingError, ErrorType


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid_json(self):
        """Test validation of valid JSON input."""
        result = self.error_handler.validate_input('{"scene": {"path": "x"}}')

        assert result.is_valid
        assert len(result.errors) == 0

    def test_validate_input_invalid_json(self):
        """Test validation of invalid JSON input."""
        result = self.error_handler.validate_input('{"scene": ')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX

    @pytest.mark.parametrize("error_type, keyword", [
        (ErrorType.DEPTH, "nesting"),
        (ErrorType.FILESYSTEM, "writable"),
        (ErrorType.PATH, "paths"),
        (ErrorType.SYNTAX, "syntax"),
    ])
    def test_handle_processing_error(self, error_type, keyword):
        """Test suggested actions per error type."""
        error = ProcessingError("Something failed", error_type)

        response = self.error_handler.handle_processing_error(error)

        assert response.error_type == error_type
        assert response.message == "Something failed"
        assert keyword in response.suggested_action.lower()

    def test_validate_input_path_existing_file(self, temp_dir):
        """Test validation of a readable input file."""
        path = temp_dir / "input.json"
        path.write_text("{}")

        assert self.error_handler.validate_input_path(path).is_valid

    def test_validate_input_path_missing(self, temp_dir):
        """Test validation of a missing input file."""
        result = self.error_handler.validate_input_path(temp_dir / "missing.json")

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.PATH
        assert "Failed to open input file" in result.errors[0].message

    def test_validate_input_path_directory(self, temp_dir):
        """Test validation of a directory given as input."""
        result = self.error_handler.validate_input_path(temp_dir)

        assert not result.is_valid
        assert "is not a file" in result.errors[0].message

    def test_validate_input_path_empty(self):
        """Test validation of an empty input path."""
        result = self.error_handler.validate_input_path("")

        assert not result.is_valid
        assert "cannot be empty" in result.errors[0].message

    def test_validate_output_path_new_file(self, temp_dir):
        """Test validation of a new output file."""
        result = self.error_handler.validate_output_path(temp_dir / "out.scene")

        assert result.is_valid
        assert result.warnings == []

    def test_validate_output_path_existing_file(self, temp_dir):
        """Test that overwriting is allowed with a warning."""
        path = temp_dir / "out.scene"
        path.write_text("old")

        result = self.error_handler.validate_output_path(path)

        assert result.is_valid
        assert "overwritten" in result.warnings[0]

    def test_validate_output_path_directory(self, temp_dir):
        """Test validation of a directory given as output."""
        result = self.error_handler.validate_output_path(temp_dir)

        assert not result.is_valid
        assert "is a directory" in result.errors[0].message

    def test_validate_output_path_missing_parent(self, temp_dir):
        """Test validation of an output file in a missing directory."""
        result = self.error_handler.validate_output_path(temp_dir / "missing" / "out.scene")

        assert not result.is_valid
        assert "does not exist" in result.errors[0].message
