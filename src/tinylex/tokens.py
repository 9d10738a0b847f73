"""
Token Definitions
=================

The scanner produces a small, closed set of token kinds:

| Kind        | Display | Lexeme                    |
|-------------|---------|---------------------------|
| EOF         | EOF     | (empty)                   |
| ILLEGAL     | ILLEGAL | the unrecognized character|
| IDENTIFIER  | IDENT   | run of letters            |
| INTEGER     | INT     | run of decimal digits     |
| SEMICOLON   | ;       | ;                         |
| PLUS        | +       | +                         |
| MINUS       | -       | -                         |
| STAR        | *       | *                         |
| SLASH       | /       | /                         |
| ASSIGN      | =       | =                         |

Example
-------
>>> from tinylex import tokenize
>>> for token in tokenize("x = 42;"):
...     print(repr(token))
Token(IDENTIFIER, 'x', 1:1)
Token(ASSIGN, '=', 1:3)
Token(INTEGER, '42', 1:5)
Token(SEMICOLON, ';', 1:7)
Token(EOF, 1:7)
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Final, Mapping

from tinylex.position import Position


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Classification of a scanned lexeme. Fixed set, no extension point."""

    EOF = auto()            # End of input
    ILLEGAL = auto()        # Unrecognized character (recoverable)
    IDENTIFIER = auto()     # Letters only
    INTEGER = auto()        # Decimal digits only

    SEMICOLON = auto()      # ;

    # === Infix Operators ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # /

    ASSIGN = auto()         # =

    def __str__(self) -> str:
        return TOKEN_NAMES[self]


# =============================================================================
# Lookup Tables
# =============================================================================

# Display string for each kind, used by the token dump output
TOKEN_NAMES: Final[Mapping[TokenKind, str]] = MappingProxyType({
    TokenKind.EOF: "EOF",
    TokenKind.ILLEGAL: "ILLEGAL",
    TokenKind.IDENTIFIER: "IDENT",
    TokenKind.INTEGER: "INT",
    TokenKind.SEMICOLON: ";",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
    TokenKind.ASSIGN: "=",
})

# Single-character symbols recognized directly by the dispatch loop
SYMBOLS: Final[Mapping[str, TokenKind]] = MappingProxyType({
    ";": TokenKind.SEMICOLON,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.ASSIGN,
})


def token_name(kind: TokenKind) -> str:
    """Return the display string for a token kind."""
    return TOKEN_NAMES[kind]


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single scanned token.

    Attributes:
        position: Position of the token's first character
        kind: The TokenKind classification
        text: The exact lexeme (empty for EOF)
    """
    position: Position
    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.kind is TokenKind.EOF:
            return f"Token({self.kind.name}, {self.position})"
        return f"Token({self.kind.name}, {self.text!r}, {self.position})"

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF

    @property
    def is_illegal(self) -> bool:
        return self.kind is TokenKind.ILLEGAL

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable view of the token."""
        return {
            "line": self.position.line,
            "column": self.position.column,
            "kind": self.kind.name,
            "name": token_name(self.kind),
            "text": self.text,
        }
