"""Values that can be called from Lox code."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from yalox.environment import Environment
from yalox.parser import FunctionStmt

if TYPE_CHECKING:
    from yalox.interpreter import Interpreter


class LoxCallable(ABC):
    """Anything a call expression can invoke."""

    @abstractmethod
    def arity(self) -> int:
        """Number of arguments the callable expects."""

    @abstractmethod
    def call(self, interpreter: Interpreter, args: list[Any]) -> Any:
        """Invoke the callable with already evaluated arguments."""


class LoxFunction(LoxCallable):
    """A function declared in Lox source."""

    def __init__(self, declaration: FunctionStmt, closure: Environment) -> None:
        self.declaration = declaration
        self.closure = closure

    def __repr__(self) -> str:
        return f"<fn {self.declaration.name.lexeme}>"

    def arity(self) -> int:
        return len(self.declaration.params)

    def call(self, interpreter: Interpreter, args: list[Any]) -> Any:
        with self.closure.scope():
            for param, arg in zip(self.declaration.params, args):
                self.closure.define(param.lexeme, arg)
            for stmt in self.declaration.body:
                interpreter.execute(stmt)
        return None


class Clock(LoxCallable):
    """Native function returning seconds since the Unix epoch."""

    def __repr__(self) -> str:
        return "<native fn clock>"

    def arity(self) -> int:
        return 0

    def call(self, interpreter: Interpreter, args: list[Any]) -> float:
        return time.time()