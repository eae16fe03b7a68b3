"""Error type shared by the scanner, parser and interpreter."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yalox.scanner import Token


class LoxError(Exception):
    """An error located at a source line, with a short description of where."""

    def __init__(self, line: int, where: str, msg: str) -> None:
        self.line = line
        self.where = where
        self.msg = msg
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"[line {self.line}] Error {self.where}: {self.msg}"

    def __repr__(self) -> str:
        return f"LoxError(line={self.line!r}, where={self.where!r}, msg={self.msg!r})"

    @classmethod
    def at_token(cls, token: Token, msg: str) -> LoxError:
        """Build an error pointing at the given token."""
        return cls(token.line, token.lexeme, str(msg))

    def report(self) -> None:
        """Write the error message to standard error."""
        print(str(self), file=sys.stderr)