"""
Pushback Character Reader
=========================

The scanner reads its input one code point at a time through a
PushbackReader. The reader holds at most one pushed-back character, which
is all the lookahead the scanner ever needs.

Accepted Sources
----------------
- str: scanned directly
- bytes / bytearray: decoded with the host's default text encoding
- binary streams (io.RawIOBase, io.BufferedIOBase, e.g. sys.stdin.buffer):
  wrapped in io.TextIOWrapper with the host's default text encoding
- text streams (anything whose read() returns str, e.g. sys.stdin)

Decoded input keeps its line endings untranslated, so "\\r" and "\\r\\n"
reach the scanner exactly as they appear. Bytes that cannot be decoded
become U+FFFD, which the scanner reports as an ILLEGAL token.

End of input is reported as None, never as an exception. Once the end has
been seen the underlying stream is not read again. Any other failure of the
stream is raised as ReadError.
"""

import io
import logging
from typing import IO, Optional, Union

from tinylex.errors import PushbackError, ReadError

logger = logging.getLogger(__name__)

Source = Union[str, bytes, bytearray, IO[str], IO[bytes]]


def _decode(stream: IO[bytes]) -> IO[str]:
    return io.TextIOWrapper(stream, errors="replace", newline="")


def _open_source(source: Source) -> IO[str]:
    """Wrap any accepted source in a text stream."""
    if isinstance(source, str):
        return io.StringIO(source)
    if isinstance(source, (bytes, bytearray)):
        return _decode(io.BytesIO(bytes(source)))
    if isinstance(source, (io.RawIOBase, io.BufferedIOBase)):
        return _decode(source)
    if hasattr(source, "read"):
        return source
    raise TypeError(
        f"cannot read characters from {type(source).__name__!r}; "
        "expected str, bytes or a readable stream"
    )


class PushbackReader:
    """
    One-character-at-a-time reader with a single pushback slot.

    Usage:
        reader = PushbackReader("ab")
        reader.read_next()   # 'a'
        reader.push_back()
        reader.read_next()   # 'a' again
        reader.read_next()   # 'b'
        reader.read_next()   # None (end of input)
    """

    def __init__(self, source: Source):
        self._stream = _open_source(source)
        self._last: Optional[str] = None    # char available for push_back
        self._pending: Optional[str] = None  # char pushed back, read next
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """True once end of input has been observed."""
        return self._exhausted

    def read_next(self) -> Optional[str]:
        """
        Return the next character, or None at end of input.

        Raises:
            ReadError: If the underlying stream fails
        """
        if self._pending is not None:
            char = self._pending
            self._pending = None
            self._last = char
            return char

        if self._exhausted:
            self._last = None
            return None

        try:
            char = self._stream.read(1)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            self._last = None
            raise ReadError(f"read failed: {e}") from e

        if not char:
            logger.debug("End of input reached")
            self._exhausted = True
            self._last = None
            return None

        self._last = char
        return char

    def push_back(self) -> None:
        """
        Un-read the most recently read character.

        Raises:
            PushbackError: If there is no character to push back
        """
        if self._last is None:
            raise PushbackError(
                "nothing to push back",
                hint="push_back() is only valid once after a successful read",
            )
        self._pending = self._last
        self._last = None

    def close(self) -> None:
        """Close the underlying stream."""
        self._stream.close()
