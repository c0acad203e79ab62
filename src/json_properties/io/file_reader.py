"""File reader for JSON converter input."""

import logging
from pathlib import Path
from typing import Optional, Union
from ..types import ProcessingError, ErrorType


class FileReader:
    """Reads JSON documents from disk."""

    def __init__(self, encoding: str = "utf-8", logger: Optional[logging.Logger] = None):
        """
        Initialize the file reader.

        Args:
            encoding: Text encoding of input files
            logger: Optional logger instance
        """
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    def read_text(self, path: Union[str, Path]) -> str:
        """
        Read a whole input file as text.

        Args:
            path: Input file path

        Returns:
            File contents

        Raises:
            ProcessingError: If the file cannot be opened or decoded
        """
        try:
            text = Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ProcessingError(
                f"Failed to open input file: {e}",
                ErrorType.FILESYSTEM,
                context={"path": str(path)}
            ) from e

        self.logger.debug(f"Read {len(text)} characters from {path}")
        return text
