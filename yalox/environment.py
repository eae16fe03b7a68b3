"""Variable storage organised as a stack of lexical scopes."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from yalox.errors import LoxError
from yalox.scanner import Token

UNDEFINED_VARIABLE = "Undefined variable"


class Environment:
    """A stack of scopes; the first scope is the global one and is never removed."""

    def __init__(self) -> None:
        self._scopes: list[dict[str, Any]] = [{}]

    def __repr__(self) -> str:
        return f"Environment({self._scopes!r})"

    @property
    def depth(self) -> int:
        """Number of scopes currently on the stack."""
        return len(self._scopes)

    def push_scope(self) -> None:
        """Open a new innermost scope."""
        self._scopes.append({})

    def pop_scope(self) -> None:
        """Close the innermost scope."""
        if len(self._scopes) == 1:
            raise RuntimeError("cannot pop the global scope")
        self._scopes.pop()

    @contextmanager
    def scope(self) -> Iterator[Environment]:
        """Run the body inside a fresh scope that is closed afterwards."""
        self.push_scope()
        try:
            yield self
        finally:
            self.pop_scope()

    def define(self, name: str, value: Any) -> None:
        """Bind a name in the innermost scope, replacing any earlier binding there."""
        self._scopes[-1][name] = value

    def assign(self, name: Token, value: Any) -> None:
        """Rebind the innermost existing variable with this name."""
        for scope in reversed(self._scopes):
            if name.lexeme in scope:
                scope[name.lexeme] = value
                return
        raise LoxError.at_token(name, UNDEFINED_VARIABLE)

    def get(self, name: Token) -> Any:
        """Look a variable up from the innermost scope outwards."""
        for scope in reversed(self._scopes):
            if name.lexeme in scope:
                return scope[name.lexeme]
        raise LoxError(name.line, name.lexeme, UNDEFINED_VARIABLE)