"""Recursive JSON tree to property text converter."""

import logging
from typing import Any, Generator, Iterator, Optional, TextIO
from .types import ArrayNaming, ConverterInterface, ErrorType, ProcessingError
from .models import Block, BlockState
from .node_classifier import NodeClassifier


# Each step yields output lines and returns the updated state of its block
Emission = Generator[str, None, BlockState]

DEFAULT_INDENT_WIDTH = 4
DEFAULT_MAX_DEPTH = 256


class PropertyConverter(ConverterInterface):
    """
    Converts a parsed JSON tree into nested property blocks.

    Objects and arrays become named ``{ ... }`` blocks, scalars become
    ``key = value`` lines. Output is produced incrementally in a single
    depth-first pass; the only state kept per block is a ``BlockState``
    that every step returns to its caller.
    """

    def __init__(self, indent_width: int = DEFAULT_INDENT_WIDTH,
                 array_naming: ArrayNaming = ArrayNaming.SYNTHESIZE,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 classifier: Optional[NodeClassifier] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            indent_width: Spaces per nesting level
            array_naming: How blocks for array elements are named
            max_depth: Maximum block nesting depth before failing
            classifier: Optional NodeClassifier instance
            logger: Optional logger instance
        """
        if indent_width < 0:
            raise ValueError("indent_width must be non-negative")
        if max_depth < 1:
            raise ValueError("max_depth must be positive")

        self.indent_width = indent_width
        self.array_naming = array_naming
        self.max_depth = max_depth
        self.logger = logger or logging.getLogger(__name__)
        self.classifier = classifier or NodeClassifier(self.logger)

    def iter_lines(self, data: Any) -> Iterator[str]:
        """
        Yield the property lines for a parsed JSON tree.

        Args:
            data: Root of the parsed JSON tree

        Yields:
            Output lines without trailing newlines

        Raises:
            ProcessingError: If nesting exceeds the depth limit
        """
        if not self.classifier.is_namespace_type(data):
            self.logger.warning("Scalar root document has no key; nothing to emit")
            return

        self.logger.debug(f"Converting root {self.classifier.describe(data)}")
        try:
            yield from self._walk(data, Block.root(), BlockState())
        except RecursionError as e:
            raise ProcessingError(
                f"Nesting too deep to convert: {e}",
                ErrorType.DEPTH,
                context={"max_depth": self.max_depth}
            ) from e

    def convert(self, data: Any, sink: TextIO) -> int:
        """
        Write the property text for a parsed JSON tree to a sink.

        The sink is neither opened nor closed here.

        Args:
            data: Root of the parsed JSON tree
            sink: Writable text stream

        Returns:
            Number of lines written
        """
        line_count = 0
        for line in self.iter_lines(data):
            sink.write(line)
            sink.write("\n")
            line_count += 1

        self.logger.debug(f"Wrote {line_count} property lines")
        return line_count

    def to_string(self, data: Any) -> str:
        """Convert a parsed JSON tree to property text."""
        return "".join(f"{line}\n" for line in self.iter_lines(data))

    def _walk(self, node: Any, block: Block, state: BlockState) -> Emission:
        """Emit the members of an object or the elements of an array."""
        if isinstance(node, list):
            scalar_index = 0
            for element in node:
                if self.classifier.is_namespace_type(element):
                    name = self._element_name(element, block, state)
                    state = yield from self._emit_block(element, name, block, state)
                else:
                    state = yield from self._emit_value(str(scalar_index), element, block, state)
                    scalar_index += 1
        else:
            for key, value in node.items():
                if self.classifier.is_namespace_type(value):
                    state = yield from self._emit_block(value, key, block, state)
                else:
                    state = yield from self._emit_value(key, value, block, state)

        return state

    def _element_name(self, element: Any, parent: Block, parent_state: BlockState) -> str:
        """Name the block opened for a namespace-type array element."""
        if self.array_naming == ArrayNaming.FIRST_KEY:
            key = self.classifier.first_key(element)
            if key is not None:
                return key

        return parent.synthesize_child_name(parent_state)

    def _emit_block(self, node: Any, name: str, parent: Block,
                    parent_state: BlockState) -> Emission:
        """Open a child block, emit its contents and close it."""
        block = parent.child(name)
        if block.depth >= self.max_depth:
            raise ProcessingError(
                f"Block '{name}' exceeds maximum nesting depth of {self.max_depth}",
                ErrorType.DEPTH,
                context={"block": name, "depth": block.depth}
            )

        if parent_state.needs_separator_before_block:
            yield ""

        indent = block.indentation(self.indent_width)
        yield f"{indent}{name}"
        yield f"{indent}{{"
        yield from self._walk(node, block, BlockState())
        yield f"{indent}}}"

        return parent_state.after_block()

    def _emit_value(self, key: str, node: Any, block: Block, state: BlockState) -> Emission:
        """Emit a single ``key = value`` line."""
        text = self.classifier.render_scalar(node)

        if state.needs_separator_before_value:
            yield ""

        yield f"{block.content_indentation(self.indent_width)}{key} = {text}"

        return state.after_value()
