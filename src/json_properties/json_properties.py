"""Main JSON to property file converter."""

import logging
from pathlib import Path
from typing import Any, Optional, Union
from .types import (
    ArrayNaming,
    ConversionResult,
    ErrorType,
    ProcessingError
)
from .parser import JSONParser
from .converter import PropertyConverter, DEFAULT_INDENT_WIDTH, DEFAULT_MAX_DEPTH
from .node_classifier import NodeClassifier
from .io import FileReader, FileWriter
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler
from .utils.validation import ValidationUtils


class JSONPropertyConverter:
    """
    Converts JSON documents into Gameplay3D style property files.

    Wires the parser, the tree converter and file I/O together. The input
    is fully read and parsed before the output file is opened, so malformed
    JSON never leaves an output file behind.
    """

    def __init__(self, indent_width: int = DEFAULT_INDENT_WIDTH,
                 array_naming: ArrayNaming = ArrayNaming.SYNTHESIZE,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 enable_profiling: bool = True,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            indent_width: Spaces per nesting level (4)
            array_naming: How blocks for array elements are named
            max_depth: Maximum block nesting depth
            enable_profiling: Record timing and memory metrics per file
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.converter = PropertyConverter(
            indent_width=indent_width,
            array_naming=array_naming,
            max_depth=max_depth,
            classifier=NodeClassifier(self.logger),
            logger=self.logger
        )
        self.file_reader = FileReader(logger=self.logger)
        self.file_writer = FileWriter(logger=self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def convert_string(self, json_string: str) -> str:
        """
        Convert a JSON string to property text.

        Args:
            json_string: JSON document

        Returns:
            Property text, one ``\\n`` terminated line per entry

        Raises:
            ValueError: If the JSON is invalid
            ProcessingError: If nesting exceeds the depth limit
        """
        data = self.parser.parse(json_string)
        self._check_document(data)
        return self.converter.to_string(data)

    def convert_file(self, input_path: Union[str, Path],
                     output_path: Union[str, Path]) -> ConversionResult:
        """
        Convert a JSON file into a property file.

        Args:
            input_path: JSON file to read
            output_path: Property file to write

        Returns:
            ConversionResult with operation details
        """
        output = str(output_path)
        self.logger.info(f"Converting {input_path} to {output}")

        try:
            input_validation = self.error_handler.validate_input_path(input_path)
            if not input_validation.is_valid:
                return self._failed(output, [e.message for e in input_validation.errors])

            json_string = self.file_reader.read_text(input_path)

            if self.profiler:
                self.profiler.start_profiling("convert_file", len(json_string.encode("utf-8")))

            try:
                data = self.parser.parse(json_string)
            except ValueError as e:
                return self._failed(output, [str(e)])

            stats = self._check_document(data)

            output_validation = self.error_handler.validate_output_path(output_path)
            if not output_validation.is_valid:
                return self._failed(output, [e.message for e in output_validation.errors])
            for warning in output_validation.warnings:
                self.logger.info(warning)

            if self.profiler:
                self.profiler.sample_performance()

            with self.file_writer.open_sink(output_path) as sink:
                line_count = self.converter.convert(data, sink)

            if self.profiler:
                self.profiler.stop_profiling(output_lines=line_count)

            block_count, value_count = self._count_entries(data, stats)
            self.logger.info(f"Wrote {line_count} lines ({block_count} blocks, "
                             f"{value_count} values) to {output}")

            return ConversionResult(
                success=True,
                output_path=output,
                line_count=line_count,
                block_count=block_count,
                value_count=value_count
            )

        except ProcessingError as e:
            response = self.error_handler.handle_processing_error(e)
            self.logger.debug(f"Suggested action: {response.suggested_action}")
            return self._failed(output, [response.message], log=False)

    def _check_document(self, data: Any) -> dict:
        """Reject over-deep documents and warn about unescapable content."""
        stats = self.parser.get_structure_statistics(data)
        self.logger.debug(f"Structure statistics: {stats}")

        # The outermost container is the unbracketed root
        block_levels = stats["max_depth"] - 1
        if block_levels > self.converter.max_depth:
            raise ProcessingError(
                f"Document nesting depth {stats['max_depth']} exceeds the limit of "
                f"{self.converter.max_depth} block levels",
                ErrorType.DEPTH,
                context={"max_depth": stats["max_depth"]}
            )

        unsafe = ValidationUtils.find_unsafe_tokens(data)
        if unsafe:
            preview = ", ".join(unsafe[:5])
            self.logger.warning(f"{len(unsafe)} keys or values contain '{{', '}}', '=' or "
                                f"line breaks and are written unescaped: {preview}")

        return stats

    def _count_entries(self, data: Any, stats: dict) -> tuple:
        if not NodeClassifier.is_namespace_type(data):
            return 0, 0
        return stats["object_count"] + stats["array_count"] - 1, stats["scalar_count"]

    def _failed(self, output: str, errors: list, log: bool = True) -> ConversionResult:
        if log:
            for error in errors:
                self.logger.error(error)
        if self.profiler and self.profiler.current_operation:
            self.profiler.stop_profiling()
        return ConversionResult(success=False, output_path=output, errors=errors)
