"""Error kinds and the exception raised across the package."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorType(Enum):
    """Kind of failure an Error reports."""

    RUNTIME = "RuntimeError"
    IO = "IOError"
    PARSER = "ParserError"
    HIGHLIGHT = "HighlightError"
    FORMAT = "FormatError"
    SYNTAX = "SyntaxError"

    def __str__(self) -> str:
        return self.value


class Error(Exception):
    """An error with a message and a kind.

    When no kind is given, an OSError message makes it an IO error and
    anything else a runtime error.
    """

    def __init__(self, message: Any, error_type: ErrorType | None = None) -> None:
        if error_type is None:
            error_type = ErrorType.IO if isinstance(message, OSError) else ErrorType.RUNTIME
        self.message = str(message)
        self.error_type = error_type
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.error_type}: {self.message}"