"""Recursive-descent parser building statement and expression trees from tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from yalox.errors import LoxError
from yalox.scanner import LiteralValue, Token, TokenType

MAX_ARGS = 255


# Expressions


@dataclass(frozen=True)
class LiteralExpr:
    value: LiteralValue


@dataclass(frozen=True)
class UnaryExpr:
    operator: Token
    right: Expr


@dataclass(frozen=True)
class BinaryExpr:
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class GroupingExpr:
    expression: Expr


@dataclass(frozen=True)
class VariableExpr:
    name: Token


@dataclass(frozen=True)
class AssignExpr:
    name: Token
    value: Expr


@dataclass(frozen=True)
class LogicalExpr:
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class CallExpr:
    callee: Expr
    paren: Token
    args: list[Expr] = field(default_factory=list)


Expr = Union[
    LiteralExpr,
    UnaryExpr,
    BinaryExpr,
    GroupingExpr,
    VariableExpr,
    AssignExpr,
    LogicalExpr,
    CallExpr,
]


# Statements


@dataclass(frozen=True)
class ExpressionStmt:
    expression: Expr


@dataclass(frozen=True)
class PrintStmt:
    expression: Expr


@dataclass(frozen=True)
class VarStmt:
    name: Token
    initializer: Optional[Expr] = None


@dataclass(frozen=True)
class BlockStmt:
    statements: list[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class IfStmt:
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt] = None


@dataclass(frozen=True)
class WhileStmt:
    condition: Expr
    body: Stmt


@dataclass(frozen=True)
class FunctionStmt:
    name: Token
    params: list[Token] = field(default_factory=list)
    body: list[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class BreakStmt:
    value: Optional[Expr] = None


Stmt = Union[
    ExpressionStmt,
    PrintStmt,
    VarStmt,
    BlockStmt,
    IfStmt,
    WhileStmt,
    FunctionStmt,
    BreakStmt,
]


class Parser:
    """Parses a token list (ending with EOF) into a list of statements."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = list(tokens)
        self._current = 0

    def parse(self) -> list[Stmt]:
        """Parse every declaration up to EOF; raises LoxError on malformed input."""
        self._current = 0
        statements: list[Stmt] = []
        while not self._at_end():
            statements.append(self._declaration())
        return statements

    # Token helpers

    def _peek(self) -> Token:
        return self.tokens[self._current]

    def _previous(self) -> Token:
        return self.tokens[self._current - 1]

    def _at_end(self) -> bool:
        return self._peek().type is TokenType.EOF

    def _advance(self) -> Token:
        if not self._at_end():
            self._current += 1
        return self._previous()

    def _check(self, type_: TokenType) -> bool:
        return not self._at_end() and self._peek().type is type_

    def _match(self, *types: TokenType) -> bool:
        if any(self._check(t) for t in types):
            self._advance()
            return True
        return False

    def _consume(self, type_: TokenType, msg: str) -> Token:
        if self._check(type_):
            return self._advance()
        raise LoxError(1, "Consume:UnknownError", msg)

    def _skip(self, type_: TokenType) -> None:
        """Consume the expected token if present; tolerate its absence."""
        self._match(type_)

    # Expressions

    def _expression(self) -> Expr:
        return self._assignment()

    def _assignment(self) -> Expr:
        expr = self._or()
        if self._match(TokenType.EQUAL):
            equals = self._previous()
            value = self._assignment()
            if isinstance(expr, VariableExpr):
                return AssignExpr(expr.name, value)
            raise LoxError(equals.line, equals.lexeme, "Invalid assignment target.")
        return expr

    def _or(self) -> Expr:
        expr = self._and()
        while self._match(TokenType.OR):
            operator = self._previous()
            expr = LogicalExpr(expr, operator, self._and())
        return expr

    def _and(self) -> Expr:
        expr = self._equality()
        while self._match(TokenType.AND):
            operator = self._previous()
            expr = LogicalExpr(expr, operator, self._equality())
        return expr

    def _binary(self, operand, *types: TokenType) -> Expr:
        expr = operand()
        while self._match(*types):
            operator = self._previous()
            expr = BinaryExpr(expr, operator, operand())
        return expr

    def _equality(self) -> Expr:
        return self._binary(self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def _comparison(self) -> Expr:
        return self._binary(
            self._term,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        )

    def _term(self) -> Expr:
        return self._binary(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Expr:
        return self._binary(self._unary, TokenType.SLASH, TokenType.STAR)

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            return UnaryExpr(operator, self._unary())
        return self._call()

    def _call(self) -> Expr:
        expr = self._primary()
        while self._match(TokenType.LEFT_PAREN):
            expr = self._finish_call(expr)
        return expr

    def _finish_call(self, callee: Expr) -> Expr:
        args: list[Expr] = []
        if not self._check(TokenType.RIGHT_PAREN):
            while True:
                if len(args) >= MAX_ARGS:
                    raise LoxError.at_token(self._peek(), "Can't have more than 255 args.")
                args.append(self._expression())
                if not self._match(TokenType.COMMA):
                    break
        paren = self._consume(TokenType.RIGHT_PAREN, "Expect ')' after arguments.")
        return CallExpr(callee, paren, args)

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return LiteralExpr(False)
        if self._match(TokenType.TRUE):
            return LiteralExpr(True)
        if self._match(TokenType.NIL):
            return LiteralExpr(None)
        if self._match(TokenType.NUMBER, TokenType.STRING):
            token = self._previous()
            if token.literal is None:
                raise LoxError(token.line, "ParseError", "No literal value")
            return LiteralExpr(token.literal)
        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._skip(TokenType.RIGHT_PAREN)
            return GroupingExpr(expr)
        if self._match(TokenType.IDENTIFIER):
            return VariableExpr(self._previous())
        token = self._peek()
        raise LoxError(
            token.line,
            f"Unexpected token `{token.lexeme}` at: {self._current}",
            "ExpectedExpression",
        )

    # Statements and declarations

    def _declaration(self) -> Stmt:
        if self._match(TokenType.FUN):
            return self._function_declaration()
        if self._match(TokenType.VAR):
            return self._var_declaration()
        return self._statement()

    def _function_declaration(self) -> Stmt:
        name = self._consume(TokenType.IDENTIFIER, "Expect function name.")
        self._skip(TokenType.LEFT_PAREN)
        params: list[Token] = []
        if not self._check(TokenType.RIGHT_PAREN):
            while True:
                if len(params) >= MAX_ARGS:
                    raise LoxError.at_token(self._peek(), "Can't have more than 255 args.")
                params.append(self._consume(TokenType.IDENTIFIER, "Expect parameter name."))
                if not self._match(TokenType.COMMA):
                    break
        self._skip(TokenType.RIGHT_PAREN)
        self._skip(TokenType.LEFT_BRACE)
        return FunctionStmt(name, params, self._block())

    def _var_declaration(self) -> Stmt:
        name = self._consume(TokenType.IDENTIFIER, "Expect variable name")
        initializer = self._expression() if self._match(TokenType.EQUAL) else None
        self._skip(TokenType.SEMICOLON)
        return VarStmt(name, initializer)

    def _statement(self) -> Stmt:
        if self._match(TokenType.IF):
            return self._if_statement()
        if self._match(TokenType.PRINT):
            return self._print_statement()
        if self._match(TokenType.BREAK):
            return self._break_statement()
        if self._match(TokenType.WHILE):
            return self._while_statement()
        if self._match(TokenType.FOR):
            return self._for_statement()
        if self._match(TokenType.LEFT_BRACE):
            return BlockStmt(self._block())
        return self._expression_statement()

    def _break_statement(self) -> Stmt:
        value = self._expression() if self._check(TokenType.NUMBER) else None
        self._skip(TokenType.SEMICOLON)
        return BreakStmt(value)

    def _while_statement(self) -> Stmt:
        self._skip(TokenType.LEFT_PAREN)
        condition = self._expression()
        self._skip(TokenType.RIGHT_PAREN)
        return WhileStmt(condition, self._statement())

    def _for_statement(self) -> Stmt:
        self._skip(TokenType.LEFT_PAREN)
        initializer: Optional[Stmt]
        if self._match(TokenType.SEMICOLON):
            initializer = None
        elif self._match(TokenType.VAR):
            initializer = self._var_declaration()
        else:
            initializer = self._expression_statement()

        condition = (
            LiteralExpr(True) if self._check(TokenType.SEMICOLON) else self._expression()
        )
        self._skip(TokenType.SEMICOLON)

        increment = None if self._check(TokenType.RIGHT_PAREN) else self._expression()
        self._skip(TokenType.RIGHT_PAREN)

        body = self._statement()
        if increment is not None:
            if isinstance(body, BlockStmt):
                body = BlockStmt([*body.statements, ExpressionStmt(increment)])
            else:
                body = BlockStmt([body, ExpressionStmt(increment)])

        body = WhileStmt(condition, body)
        if initializer is not None:
            body = BlockStmt([initializer, body])
        return body

    def _if_statement(self) -> Stmt:
        self._skip(TokenType.LEFT_PAREN)
        condition = self._expression()
        self._skip(TokenType.RIGHT_PAREN)
        then_branch = self._statement()
        else_branch = self._statement() if self._match(TokenType.ELSE) else None
        return IfStmt(condition, then_branch, else_branch)

    def _block(self) -> list[Stmt]:
        statements: list[Stmt] = []
        while not self._check(TokenType.RIGHT_BRACE) and not self._at_end():
            statements.append(self._declaration())
        self._skip(TokenType.RIGHT_BRACE)
        return statements

    def _expression_statement(self) -> Stmt:
        expr = self._expression()
        self._skip(TokenType.SEMICOLON)
        return ExpressionStmt(expr)

    def _print_statement(self) -> Stmt:
        value = self._expression()
        self._skip(TokenType.SEMICOLON)
        return PrintStmt(value)


def parse(tokens: list[Token]) -> list[Stmt]:
    """Parse tokens into a list of statements."""
    return Parser(tokens).parse()