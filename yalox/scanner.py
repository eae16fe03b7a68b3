"""Turns Lox source text into a list of tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

LiteralValue = Union[bool, None, str, int, float]


class TokenType(Enum):
    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()
    BREAK = auto()

    EOF = auto()


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "while": TokenType.WHILE,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "break": TokenType.BREAK,
}

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

_WITH_EQUAL = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

_NUL = "\0"


def _is_digit(ch: str) -> bool:
    return ch in "0123456789" and ch != ""


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


@dataclass(frozen=True)
class Token:
    """A lexeme with its kind, optional literal value and source line."""

    type: TokenType
    lexeme: str
    literal: LiteralValue = None
    line: int = 1


class Scanner:
    """Scans a source string into tokens, ending with an EOF token."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source and return its tokens."""
        self.tokens = []
        self._start = 0
        self._current = 0
        self._line = 1
        while not self._at_end():
            self._start = self._current
            self._scan_token()
        self._add(TokenType.EOF)
        return list(self.tokens)

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _lexeme(self) -> str:
        return self.source[self._start:self._current]

    def _add(self, type_: TokenType, literal: LiteralValue = None) -> None:
        self.tokens.append(Token(type_, self._lexeme(), literal, self._line))

    def _advance(self) -> str:
        ch = self.source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        return _NUL if self._at_end() else self.source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self.source):
            return _NUL
        return self.source[self._current + 1]

    def _scan_token(self) -> None:
        ch = self._advance()
        if ch in _SINGLE:
            self._add(_SINGLE[ch])
        elif ch in _WITH_EQUAL:
            on_match, otherwise = _WITH_EQUAL[ch]
            self._add(on_match if self._match("=") else otherwise)
        elif ch == "/":
            if self._match("/"):
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            else:
                self._add(TokenType.SLASH)
        elif ch in (" ", "\r", "\t"):
            pass
        elif ch == "\n":
            self._line += 1
        elif ch == '"':
            self._string()
        elif _is_digit(ch):
            self._number()
        elif _is_alpha(ch) or ch == "_":
            self._identifier()
        else:
            print(f"Unexpected token: {ch}")

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()
        if self._at_end():
            return
        value = self.source[self._start + 1:self._current]
        self._advance()
        self._add(TokenType.STRING, value)

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()
        is_float = False
        if self._peek() == "." and _is_digit(self._peek_next()):
            is_float = True
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
        text = self._lexeme()
        self._add(TokenType.NUMBER, float(text) if is_float else int(text))

    def _identifier(self) -> None:
        while self._peek().isalnum():
            self._advance()
        self._add(KEYWORDS.get(self._lexeme(), TokenType.IDENTIFIER))


def scan_tokens(source: str) -> list[Token]:
    """Scan source text into tokens."""
    return Scanner(source).scan_tokens()