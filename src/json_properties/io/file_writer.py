"""File writer for property converter output."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union
from ..types import ProcessingError, ErrorType


class FileWriter:
    """
    File writer providing scoped output sinks.

    The sink is always closed, and therefore flushed, when the scope exits,
    including when conversion fails partway. A partially written file is
    left in place in that case.
    """

    def __init__(self, encoding: str = "utf-8", logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            encoding: Text encoding of output files
            logger: Optional logger instance
        """
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    @contextmanager
    def open_sink(self, path: Union[str, Path]) -> Iterator[TextIO]:
        """
        Open an output file for writing.

        Args:
            path: Output file path

        Yields:
            Writable text stream with ``\\n`` line endings

        Raises:
            ProcessingError: If the file cannot be opened, written or closed
        """
        output_path = Path(path)
        try:
            sink = output_path.open("w", encoding=self.encoding, newline="\n")
        except OSError as e:
            raise ProcessingError(
                f"Failed to open output file: {e}",
                ErrorType.FILESYSTEM,
                context={"path": str(output_path)}
            ) from e

        self.logger.debug(f"Opened output file {output_path}")
        try:
            yield sink
        except OSError as e:
            raise ProcessingError(
                f"Failed to write output file: {e}",
                ErrorType.FILESYSTEM,
                context={"path": str(output_path)}
            ) from e
        finally:
            self._close(sink, output_path)

    def _close(self, sink: TextIO, output_path: Path) -> None:
        try:
            sink.close()
        except OSError as e:
            raise ProcessingError(
                f"Failed to close output file: {e}",
                ErrorType.FILESYSTEM,
                context={"path": str(output_path)}
            ) from e
