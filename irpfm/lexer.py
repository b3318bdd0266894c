"""Tokenizer for file-manager directive files."""

import io
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, TextIO

from .errors import IrpError

TEXT_LENGTH = 60


class TokenKind(IntEnum):
    ENFI = 0
    IDENT = 1
    COLON = 2
    COMMA = 3
    SEMICOLON = 4
    USE = 5
    LINK = 6
    REPLACE = 7
    LOG = 8
    PERIOD = 9
    START_USE = 10
    GET_USE = 11
    END_USE = 12
    START_LINK = 13
    GET_LINK = 14
    END_LINK = 15
    START_LOG = 16
    GET_LOG = 17
    END_LOG = 18
    LINE_USE = 19
    LINE_LINK = 20
    LINE_LOG = 21
    NUM_LITERAL = 22
    STRAND_LITERAL = 23
    HEX_LITERAL = 24
    LBRACKET = 25
    RBRACKET = 26
    ASSIGNER = 27


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[int] = None
    text: Optional[str] = None


_KEYWORDS = {"link": TokenKind.LINK, "use": TokenKind.USE}

_PUNCTUATION = {
    "{": TokenKind.LBRACKET,
    "}": TokenKind.RBRACKET,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    "=": TokenKind.ASSIGNER,
}


def keyword(word: str) -> Optional[TokenKind]:
    """Return the keyword kind for *word*, or None if it is not a keyword."""
    return _KEYWORDS.get(word)


def _is_digit(c: str) -> bool:
    return c != "" and c in "0123456789"


def _is_alpha(c: str) -> bool:
    return c != "" and c.isascii() and c.isalpha()


class Lexer:
    """Reads tokens one at a time from a text stream."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._putback = ""
        self._rejected: Optional[Token] = None
        self.line = 0

    def _next_char(self) -> str:
        if self._putback:
            c, self._putback = self._putback, ""
            return c
        c = self._stream.read(1)
        if c == "\n":
            self.line += 1
        return c

    def _return_char(self, c: str) -> None:
        self._putback = c

    def _skip(self) -> str:
        c = self._next_char()
        while True:
            while c and c.isspace():
                c = self._next_char()
            if c != "/":
                return c
            c = self._next_char()
            if c == "/":
                while c not in ("\n", ""):
                    c = self._next_char()
            elif c == "*":
                self._skip_block_comment()
                c = self._next_char()
            else:
                self._return_char(c)
                return "/"

    def _skip_block_comment(self) -> None:
        c = self._next_char()
        while True:
            while c != "*":
                if c == "":
                    raise IrpError("Comment not closed before EOF")
                c = self._next_char()
            c = self._next_char()
            if c == "/":
                return

    def _scan_int(self, c: str) -> int:
        value = 0
        while _is_digit(c):
            value = value * 10 + int(c)
            c = self._next_char()
        self._return_char(c)
        return value

    def _scan_ident(self, c: str) -> str:
        chars = []
        if c == ".":
            chars.append(c)
            c = self._next_char()
        while _is_alpha(c) or _is_digit(c) or c in ("_", "."):
            if len(chars) == TEXT_LENGTH - 1:
                raise IrpError("Identifier too long")
            chars.append(c)
            c = self._next_char()
        self._return_char(c)
        return "".join(chars)

    def next_token(self) -> Token:
        """Return the next token; an ENFI token marks the end of input."""
        if self._rejected is not None:
            token, self._rejected = self._rejected, None
            return token
        c = self._skip()
        if c == "":
            return Token(TokenKind.ENFI)
        if c in _PUNCTUATION:
            return Token(_PUNCTUATION[c])
        if _is_digit(c):
            return Token(TokenKind.NUM_LITERAL, value=self._scan_int(c))
        if _is_alpha(c) or c in ("_", "."):
            text = self._scan_ident(c)
            return Token(keyword(text) or TokenKind.IDENT, text=text)
        raise IrpError("Unrecognized character", c)

    def reject(self, token: Token) -> None:
        """Push *token* back so the next call returns it again."""
        if self._rejected is not None:
            raise IrpError("Lexer error: cannot reject token twice")
        self._rejected = token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.kind == TokenKind.ENFI:
                return
            yield token


def tokenize(text: str) -> list:
    """Return every token in *text*, not including the end marker."""
    return list(Lexer(io.StringIO(text)))