# =============================================================================
# test_tokens.py - Token Definition Tests
# =============================================================================
# Tests for TokenKind, the display-name table and the Token value object.
# =============================================================================

import dataclasses

import pytest
from tinylex.position import Position
from tinylex.tokens import SYMBOLS, TOKEN_NAMES, Token, TokenKind, token_name


class TestTokenNames:
    """Test the display-name table."""

    def test_every_kind_has_a_name(self):
        """The table covers the whole enumeration."""
        assert set(TOKEN_NAMES) == set(TokenKind)

    @pytest.mark.parametrize("kind,name", [
        (TokenKind.EOF, "EOF"),
        (TokenKind.ILLEGAL, "ILLEGAL"),
        (TokenKind.IDENTIFIER, "IDENT"),
        (TokenKind.INTEGER, "INT"),
        (TokenKind.SEMICOLON, ";"),
        (TokenKind.PLUS, "+"),
        (TokenKind.MINUS, "-"),
        (TokenKind.STAR, "*"),
        (TokenKind.SLASH, "/"),
        (TokenKind.ASSIGN, "="),
    ])
    def test_display_names(self, kind, name):
        assert token_name(kind) == name
        assert str(kind) == name

    def test_table_is_read_only(self):
        """The name table cannot be modified."""
        with pytest.raises(TypeError):
            TOKEN_NAMES[TokenKind.EOF] = "END"

    def test_symbols_match_names(self):
        """Each symbol maps to the kind whose display name is that symbol."""
        for char, kind in SYMBOLS.items():
            assert token_name(kind) == char


class TestToken:
    """Test the Token value object."""

    def test_fields(self):
        token = Token(Position(2, 4), TokenKind.IDENTIFIER, "abc")
        assert token.line == 2
        assert token.column == 4
        assert token.text == "abc"
        assert not token.is_eof
        assert not token.is_illegal

    def test_immutable(self):
        """Tokens cannot be modified after creation."""
        token = Token(Position(1, 1), TokenKind.PLUS, "+")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "-"

    def test_repr(self):
        token = Token(Position(1, 5), TokenKind.INTEGER, "42")
        assert repr(token) == "Token(INTEGER, '42', 1:5)"

    def test_repr_eof(self):
        token = Token(Position(1, 9), TokenKind.EOF, "")
        assert repr(token) == "Token(EOF, 1:9)"
        assert token.is_eof

    def test_as_dict(self):
        token = Token(Position(3, 1), TokenKind.ILLEGAL, "#")
        assert token.as_dict() == {
            "line": 3,
            "column": 1,
            "kind": "ILLEGAL",
            "name": "ILLEGAL",
            "text": "#",
        }
