import io
import time

import pytest

from yalox.callables import Clock, LoxCallable, LoxFunction
from yalox.environment import Environment
from yalox.errors import LoxError
from yalox.interpreter import Interpreter
from yalox.parser import FunctionStmt, parse
from yalox.scanner import Token, TokenType, scan_tokens


def declaration(source):
    (stmt,) = parse(scan_tokens(source))
    assert isinstance(stmt, FunctionStmt)
    return stmt


def make_interpreter():
    out = io.StringIO()
    return Interpreter([], out), out


def test_clock_takes_no_arguments():
    assert Clock().arity() == 0


def test_clock_returns_current_epoch_seconds():
    interp, _ = make_interpreter()
    before = time.time()
    value = Clock().call(interp, [])
    after = time.time()
    assert before <= value <= after


def test_lox_callable_cannot_be_instantiated():
    with pytest.raises(TypeError):
        LoxCallable()


def test_function_arity_matches_parameter_count():
    decl = declaration("fun f(a, b, c) { }")
    assert LoxFunction(decl, Environment()).arity() == len(decl.params)


def test_function_without_parameters_has_zero_arity():
    decl = declaration("fun f() { }")
    assert LoxFunction(decl, Environment()).arity() == 0


def test_function_call_binds_arguments_and_runs_body():
    interp, out = make_interpreter()
    fn = LoxFunction(declaration('fun f(a) { print a; }'), interp.env)
    result = fn.call(interp, ["hello"])
    assert result is None
    assert out.getvalue() == "hello\n"


def test_function_parameters_do_not_leak_after_call():
    interp, _ = make_interpreter()
    fn = LoxFunction(declaration("fun f(a) { }"), interp.env)
    fn.call(interp, [1.0])
    with pytest.raises(LoxError):
        interp.env.get(Token(TokenType.IDENTIFIER, "a", None, 1))


def test_function_body_can_assign_outer_variables():
    interp, _ = make_interpreter()
    interp.env.define("count", 0.0)
    fn = LoxFunction(declaration("fun f(n) { count = n; }"), interp.env)
    fn.call(interp, [5.0])
    assert interp.env.get(Token(TokenType.IDENTIFIER, "count", None, 1)) == 5.0