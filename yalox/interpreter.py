"""Tree-walking evaluator for parsed Lox statements."""

from __future__ import annotations

import copy
import math
import operator
import sys
from contextlib import suppress
from decimal import Decimal
from typing import Any, Callable, Optional, TextIO

from yalox.callables import Clock, LoxCallable, LoxFunction
from yalox.environment import Environment
from yalox.errors import LoxError
from yalox.parser import (
    AssignExpr,
    BinaryExpr,
    BlockStmt,
    BreakStmt,
    CallExpr,
    Expr,
    ExpressionStmt,
    FunctionStmt,
    GroupingExpr,
    IfStmt,
    LiteralExpr,
    LogicalExpr,
    PrintStmt,
    Stmt,
    UnaryExpr,
    VariableExpr,
    VarStmt,
    WhileStmt,
)
from yalox.scanner import Token, TokenType


class BreakSignal(Exception):
    """Raised by a break statement; depth counts how many loops it leaves."""

    def __init__(self, depth: int = 1) -> None:
        super().__init__(depth)
        self.depth = depth


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value: Any) -> bool:
    """Truthiness of a runtime value."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value == ""
    return True


def is_equal(left: Any, right: Any) -> bool:
    """Equality of runtime values; values of different kinds are never equal."""
    if left is None and right is None:
        return True
    if isinstance(left, bool) and isinstance(right, bool):
        return left == right
    if _is_number(left) and _is_number(right):
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return False


def _format_number(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def stringify(value: Any) -> str:
    """Text shown when a runtime value is printed."""
    if value is None:
        return "<NIL>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return _format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, LoxFunction):
        return "Function"
    if isinstance(value, LoxCallable):
        return "Native function"
    return str(value)


def _divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


_NUMERIC_OPS: dict[TokenType, Callable[[float, float], Any]] = {
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
    TokenType.SLASH: _divide,
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
}


class Interpreter:
    """Executes a list of statements, writing printed values to ``out``."""

    def __init__(self, statements: list[Stmt], out: Optional[TextIO] = None) -> None:
        self.statements = list(statements)
        self.out = out if out is not None else sys.stdout
        self.globals = Environment()
        self.env = copy.deepcopy(self.globals)
        self.globals.define("clock", Clock())

    def interpret(self) -> None:
        """Run every statement in order; a LoxError stops the run and propagates."""
        for stmt in self.statements:
            try:
                self.execute(stmt)
            except BreakSignal:
                pass

    def execute(self, stmt: Stmt) -> None:
        """Execute one statement."""
        match stmt:
            case BreakStmt(value):
                depth = 1 if value is None else self._break_depth(value)
                raise BreakSignal(depth)
            case VarStmt(name, initializer):
                value = None if initializer is None else self.evaluate(initializer)
                self.env.define(name.lexeme, value)
            case BlockStmt(statements):
                with self.env.scope():
                    for inner in statements:
                        self.execute(inner)
            case PrintStmt(expression):
                try:
                    value = self.evaluate(expression)
                except LoxError as err:
                    print(str(err), file=self.out)
                else:
                    print(stringify(value), file=self.out)
            case ExpressionStmt(expression):
                with suppress(LoxError):
                    self.evaluate(expression)
            case IfStmt(condition, then_branch, else_branch):
                if is_truthy(self.evaluate(condition)):
                    self.execute(then_branch)
                elif else_branch is not None:
                    self.execute(else_branch)
            case WhileStmt(condition, body):
                while is_truthy(self.evaluate(condition)):
                    try:
                        self.execute(body)
                    except BreakSignal as signal:
                        if signal.depth <= 1:
                            break
                        raise BreakSignal(signal.depth - 1) from None
            case FunctionStmt(name):
                self.env.define(name.lexeme, LoxFunction(stmt, self.env))
            case _:
                raise TypeError(f"unknown statement: {stmt!r}")

    def _break_depth(self, expr: Expr) -> int:
        value = self.evaluate(expr)
        if not _is_number(value):
            raise LoxError(0, "break", "Break depth must be a number.")
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return sys.maxsize if value > 0 else 0
        return max(int(value), 0)

    def evaluate(self, expr: Expr) -> Any:
        """Evaluate an expression to a runtime value."""
        match expr:
            case LiteralExpr(value):
                return float(value) if _is_number(value) else value
            case GroupingExpr(inner):
                return self.evaluate(inner)
            case UnaryExpr(op, right):
                return self._unary(op, self.evaluate(right))
            case BinaryExpr(left, op, right):
                left_value = self.evaluate(left)
                right_value = self.evaluate(right)
                return self._binary(op, left_value, right_value)
            case VariableExpr(name):
                return self.env.get(name)
            case AssignExpr(name, value):
                result = self.evaluate(value)
                self.env.assign(name, result)
                return result
            case LogicalExpr(left, op, right):
                left_value = self.evaluate(left)
                if op.type is TokenType.OR:
                    if is_truthy(left_value):
                        return left_value
                elif not is_truthy(left_value):
                    return left_value
                return self.evaluate(right)
            case CallExpr(callee, paren, args):
                return self._call(callee, paren, args)
            case _:
                raise TypeError(f"unknown expression: {expr!r}")

    def _unary(self, op: Token, right: Any) -> Any:
        if op.type is TokenType.MINUS:
            if _is_number(right):
                return -right
            raise LoxError.at_token(op, "Operand of '-' must be a number")
        if op.type is TokenType.BANG:
            if isinstance(right, bool):
                return right
            if right is None:
                return True
            raise LoxError.at_token(op, "Operand of '!' must be a logical expression")
        raise LoxError.at_token(op, "Invalid unary operator")

    def _binary(self, op: Token, left: Any, right: Any) -> Any:
        kind = op.type
        if kind is TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if kind is TokenType.BANG_EQUAL:
            return not is_equal(left, right)
        if kind is TokenType.PLUS:
            if _is_number(left) and _is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left
            raise LoxError.at_token(op, "Operand must be number or str")
        numeric = _NUMERIC_OPS.get(kind)
        if numeric is None:
            raise LoxError.at_token(op, "Invalid binary operator")
        if not (_is_number(left) and _is_number(right)):
            raise LoxError.at_token(op, "Operand must be number")
        return numeric(left, right)

    def _call(self, callee: Expr, paren: Token, args: list[Expr]) -> Any:
        function = self.evaluate(callee)
        values = [self.evaluate(arg) for arg in args]
        if not isinstance(function, LoxCallable):
            raise LoxError.at_token(paren, "Can only call functions and classes.")
        if len(values) != function.arity():
            raise LoxError.at_token(
                paren, f"Expected {function.arity()} args but got {len(values)}."
            )
        return function.call(self, values)