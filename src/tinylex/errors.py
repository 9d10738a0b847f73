"""
tinylex Error Hierarchy
=======================

This module defines the exception hierarchy for the scanner. All
exceptions inherit from TinylexError, allowing callers to catch every
scanner-related error with a single except clause if desired.

Exception Hierarchy
-------------------
TinylexError (base)
└── ScannerError - fatal fault, the scanner cannot continue
    ├── ReadError - the character source failed (not end of input)
    └── PushbackError - pushback requested with nothing to push back

Unrecognized characters are NOT exceptions. They are reported in-band as
ILLEGAL tokens and scanning continues normally afterwards.

Error messages follow this format:
    name:line:column: error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional

from tinylex.position import Position


# =============================================================================
# Base Exception Class
# =============================================================================

class TinylexError(Exception):
    """
    Base exception for all tinylex errors.

        try:
            tokens = tokenize(source)
        except TinylexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Scanner Exceptions
# =============================================================================

class ScannerError(TinylexError):
    """
    A fault that stops the scanner.

    Attributes:
        message: The error description
        position: Cursor position when the fault happened (optional)
        name: Label of the source being scanned (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        name: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.position = position
        self.name = name
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            stdin:3:7: error: read failed: [Errno 5] Input/output error
        """
        parts = []

        if self.position is not None:
            label = self.name or "<input>"
            parts.append(f"{label}:{self.position}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class ReadError(ScannerError):
    """
    The underlying character source failed for a reason other than
    reaching its end.

    Examples:
        - Device or transport fault (OSError)
        - Bytes that cannot be decoded in the host encoding
        - Reading from a stream that was already closed

    The original exception is always available as __cause__.
    """
    pass


class PushbackError(ScannerError):
    """
    Pushback was requested with no character available to push back.

    Only one level of pushback exists. Pushing back twice in a row, before
    anything was read, or after end of input is a programming error.
    """
    pass
