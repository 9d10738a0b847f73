"""
Scanner
=======

This module implements the scanning state machine. A Scanner pulls
characters from a PushbackReader and returns one classified token per
call to next_token().

Character Classes
-----------------
Checked in this order for each character read:

1. Newline "\\n": advances the line, produces no token
2. Symbols ; + - * / =: single-character tokens
3. Whitespace (str.isspace, minus the \\x1c-\\x1f separators): skipped
4. Decimal digits (str.isdecimal): start an INTEGER
5. Letters (str.isalpha): start an IDENTIFIER
6. Anything else: ILLEGAL token carrying that character

Identifiers are letters only: no digits and no underscores. "ab12" scans
as IDENTIFIER 'ab' followed by INTEGER '12'.

Multi-character tokens are scanned by pushing the first character back
and handing over to a continuation scanner, which reads until the first
character outside its class and pushes that one back for the next call.

Error Handling
--------------
ILLEGAL tokens are ordinary data: the next call resumes with the
following character. A failing source raises ReadError and leaves the
scanner unusable; every later call raises ScannerError.

Example Usage
-------------
>>> from tinylex.scanner import Scanner
>>> scanner = Scanner("a#b")
>>> [repr(t) for t in scanner.tokenize()]
["Token(IDENTIFIER, 'a', 1:1)", "Token(ILLEGAL, '#', 1:2)", "Token(IDENTIFIER, 'b', 1:3)", 'Token(EOF, 1:3)']
"""

import logging
from typing import Callable, Iterator, Optional

from tinylex.errors import ScannerError
from tinylex.position import Position, PositionTracker
from tinylex.reader import PushbackReader, Source
from tinylex.tokens import SYMBOLS, Token, TokenKind

logger = logging.getLogger(__name__)

# str.isspace accepts the file, group, record and unit separators; they are
# not whitespace here and scan as ILLEGAL
NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


class Scanner:
    """
    Converts a character source into a stream of tokens.

    The scanner exclusively owns the source it is given. It is built once
    per input, called until it returns EOF, and then discarded or closed.
    It is not thread-safe.

    Usage:
        with Scanner(open("prog.txt")) as scanner:
            for token in scanner.tokenize():
                print(token.position, token.kind, token.text)

    Attributes:
        name: Label for the source, used in error messages and logs only
    """

    def __init__(self, source: Source, name: str = "<input>"):
        self.name = name
        self._reader = PushbackReader(source)
        self._pos = PositionTracker()
        self._failure: Optional[ScannerError] = None

    def __enter__(self) -> "Scanner":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    @property
    def position(self) -> Position:
        """Position of the last consumed character."""
        return self._pos.snapshot()

    def close(self) -> None:
        """Release the underlying source."""
        self._reader.close()

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until end of input.

        Yields:
            Token objects in input order, ending with a single EOF token

        Raises:
            ReadError: If the source fails mid-scan
        """
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return

    # =========================================================================
    # Dispatch Loop
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once EOF has been returned, every later call returns EOF again
        without reading from the source.

        Raises:
            ReadError: If the underlying source fails
            ScannerError: If the scanner already hit a fatal error
        """
        if self._failure is not None:
            raise ScannerError(
                f"scanner is unusable after an earlier failure: "
                f"{self._failure.message}",
                self._failure.position,
                self.name,
            )

        try:
            return self._scan()
        except ScannerError as e:
            # Reader errors carry no location; attach ours before reporting
            failure = e
            if e.position is None:
                failure = type(e)(e.message, self._pos.snapshot(), self.name, e.hint)
            self._failure = failure
            logger.error(f"Scanning {self.name} failed: {failure.message}")
            if failure is e:
                raise
            raise failure from e.__cause__

    def _scan(self) -> Token:
        while True:
            char = self._read()
            if char is None:
                return Token(self._pos.snapshot(), TokenKind.EOF, "")

            if char == "\n":
                self._pos.newline()
                continue

            kind = SYMBOLS.get(char)
            if kind is not None:
                return Token(self._pos.snapshot(), kind, char)

            if char.isspace() and char not in NOT_WHITESPACE:
                continue

            if char.isdecimal():
                start = self._pos.snapshot()
                self._backup()
                return Token(start, TokenKind.INTEGER, self._scan_int())

            if char.isalpha():
                start = self._pos.snapshot()
                self._backup()
                return Token(start, TokenKind.IDENTIFIER, self._scan_ident())

            logger.debug(f"{self.name}:{self._pos.snapshot()}: illegal character {char!r}")
            return Token(self._pos.snapshot(), TokenKind.ILLEGAL, char)

    # =========================================================================
    # Continuation Scanners
    # =========================================================================

    def _scan_int(self) -> str:
        """Scan the rest of an integer literal."""
        return self._scan_while(str.isdecimal)

    def _scan_ident(self) -> str:
        """Scan the rest of an identifier."""
        return self._scan_while(str.isalpha)

    def _scan_while(self, accepts: Callable[[str], bool]) -> str:
        chars = []
        while True:
            char = self._read()
            if char is None:
                # the literal ends at the input boundary
                break
            if not accepts(char):
                self._backup()
                break
            chars.append(char)
        return "".join(chars)

    # =========================================================================
    # Character Access
    # =========================================================================

    def _read(self) -> Optional[str]:
        char = self._reader.read_next()
        if char is not None:
            self._pos.advance()
        return char

    def _backup(self) -> None:
        self._reader.push_back()
        self._pos.retreat()


def tokenize(source: Source, name: str = "<input>") -> list[Token]:
    """
    Scan a whole source and return its tokens, EOF included.

    Args:
        source: Text, bytes or a readable stream
        name: Label for error messages

    Returns:
        List of tokens in input order

    Raises:
        ReadError: If the source fails mid-scan
    """
    with Scanner(source, name) as scanner:
        return list(scanner.tokenize())
