import pytest

from yalox.errors import LoxError
from yalox.scanner import Token, TokenType


def test_message_format():
    err = LoxError(3, "foo", "bar")
    assert str(err) == "[line 3] Error foo: bar"


def test_fields_kept():
    err = LoxError(7, "where", "Undefined variable")
    assert (err.line, err.where, err.msg) == (7, "where", "Undefined variable")


def test_at_token_uses_token_position():
    tok = Token(TokenType.IDENTIFIER, "count", None, 12)
    err = LoxError.at_token(tok, "Undefined variable")
    assert err.line == tok.line
    assert err.where == tok.lexeme
    assert err.msg == "Undefined variable"


def test_at_token_error_is_raisable():
    tok = Token(TokenType.MINUS, "-", None, 1)
    err = LoxError.at_token(tok, "Operand of '-' must be a number")
    assert err.line == 1
    assert err.where == "-"
    assert str(err) == "[line 1] Error -: Operand of '-' must be a number"
    with pytest.raises(LoxError, match="Operand of '-' must be a number") as info:
        raise err
    assert info.value is err


def test_report_writes_to_stderr(capsys):
    err = LoxError(2, "x", "Invalid assignment target.")
    err.report()
    captured = capsys.readouterr()
    assert captured.err.strip() == str(err)
    assert captured.out == ""