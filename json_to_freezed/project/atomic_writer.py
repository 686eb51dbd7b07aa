"""
Atomic file writer for generated Dart files.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..pipeline.config import OutputMode
from ..pipeline.errors import GenerationError

logger = logging.getLogger(__name__)

_CLASS_DECLARATION = re.compile(r"^\s*(abstract\s+)?class\s+\w+", re.MULTILINE)
_STRING_LITERAL = re.compile(r"'(?:\\.|[^'\\\n])*'|\"(?:\\.|[^\"\\\n])*\"")


class OutputExistsError(GenerationError, FileExistsError):
    """Raised when the output file exists and the output mode forbids replacing it."""

    pass


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(
        self,
        mode: OutputMode = OutputMode.ERROR_IF_EXISTS,
        validate_dart: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            mode: How to handle an existing target file
            validate_dart: Optional validation function for Dart code
        """
        self.mode = mode
        self._validate_dart = validate_dart or self._default_validate_dart

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputExistsError: If the file exists and the mode is ERROR_IF_EXISTS
            GenerationError: If validation fails
            OSError: If file operations fail
        """
        if self.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise OutputExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_dart(content)

            temp_path.replace(path)

        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

        logger.info("Wrote %s", path)

    def _default_validate_dart(self, content: str) -> None:
        """Default Dart validation.

        Args:
            content: Dart code to validate

        Raises:
            GenerationError: If validation fails
        """
        # Basic structural checks (no full parsing without a Dart analyzer)
        if not _CLASS_DECLARATION.search(content):
            raise GenerationError("Generated Dart code has no class declarations")

        # JSON keys and @Default(...) literals may contain any bracket
        code = _STRING_LITERAL.sub("''", content)
        for open_char, close_char in (("{", "}"), ("(", ")")):
            opened = code.count(open_char)
            closed = code.count(close_char)
            if opened != closed:
                raise GenerationError(f"Generated Dart code has unbalanced '{open_char}{close_char}': {opened} open, {closed} close")
