"""
tinylex - A Minimal Lexical Scanner
===================================

This package converts a stream of characters into classified tokens
(identifiers, integer literals, operators and statement terminators),
each tagged with the line and column where it starts.

Main Components
---------------
- **scanner**: the Scanner state machine and tokenize()
- **reader**: character source with one-character pushback
- **tokens**: TokenKind, Token and the display-name table
- **position**: line/column tracking

Quick Start
-----------
Scan a string:
    >>> from tinylex import tokenize
    >>> [t.text for t in tokenize("foo = 1 + 23;")]
    ['foo', '=', '1', '+', '23', ';', '']

Pull tokens one at a time:
    >>> from tinylex import Scanner, TokenKind
    >>> scanner = Scanner("a#b")
    >>> token = scanner.next_token()
    >>> while token.kind is not TokenKind.EOF:
    ...     print(token.position, token.kind, token.text)
    ...     token = scanner.next_token()
    1:1 IDENT a
    1:2 ILLEGAL #
    1:3 IDENT b

Or use the command-line tool:
    $ tlex program.txt
    $ echo "x = 1;" | tlex --format json
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from tinylex.errors import (
    TinylexError,
    ScannerError,
    ReadError,
    PushbackError,
)
from tinylex.position import Position, PositionTracker
from tinylex.reader import PushbackReader
from tinylex.scanner import Scanner, tokenize
from tinylex.tokens import (
    SYMBOLS,
    TOKEN_NAMES,
    Token,
    TokenKind,
    token_name,
)

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "Scanner",
    "tokenize",
    "PushbackReader",
    # Tokens and positions
    "Token",
    "TokenKind",
    "TOKEN_NAMES",
    "SYMBOLS",
    "token_name",
    "Position",
    "PositionTracker",
    # Exception hierarchy
    "TinylexError",
    "ScannerError",
    "ReadError",
    "PushbackError",
]
