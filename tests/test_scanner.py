import pytest

from yalox.scanner import KEYWORDS, Scanner, Token, TokenType, scan_tokens


def types(source):
    return [t.type for t in scan_tokens(source)]


def test_empty_source_gives_only_eof():
    tokens = scan_tokens("")
    assert [t.type for t in tokens] == [TokenType.EOF]
    assert tokens[0].lexeme == ""


def test_single_character_tokens():
    source = "(){},.-+;*"
    tokens = scan_tokens(source)
    assert [t.type for t in tokens] == [
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.MINUS,
        TokenType.PLUS,
        TokenType.SEMICOLON,
        TokenType.STAR,
        TokenType.EOF,
    ]
    assert "".join(t.lexeme for t in tokens[:-1]) == source


def test_one_or_two_character_operators():
    tokens = scan_tokens("! != = == < <= > >=")
    assert [t.type for t in tokens] == [
        TokenType.BANG,
        TokenType.BANG_EQUAL,
        TokenType.EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.EOF,
    ]
    assert [t.lexeme for t in tokens[:-1]] == "! != = == < <= > >=".split()


def test_slash_and_comment():
    assert types("a / b") == [
        TokenType.IDENTIFIER,
        TokenType.SLASH,
        TokenType.IDENTIFIER,
        TokenType.EOF,
    ]
    tokens = scan_tokens("// a comment ( ) \n+")
    assert [t.type for t in tokens] == [TokenType.PLUS, TokenType.EOF]
    assert tokens[0].line == 2


def test_string_literal():
    tokens = scan_tokens('"hi there"')
    assert tokens[0] == Token(TokenType.STRING, '"hi there"', "hi there", 1)


def test_multiline_string_counts_lines():
    source = '"a\nb\nc" x'
    tokens = scan_tokens(source)
    assert tokens[0].literal == "a\nb\nc"
    assert tokens[1].line == source.count("\n") + 1


def test_unterminated_string_is_dropped():
    assert types('"never closed') == [TokenType.EOF]


@pytest.mark.parametrize("source", ["0", "42", "123456789"])
def test_integer_literal(source):
    lexed = scan_tokens(source)[0]
    assert lexed.type is TokenType.NUMBER
    assert lexed.literal == int(source)
    assert isinstance(lexed.literal, int)


@pytest.mark.parametrize("source", ["3.25", "0.5", "10.0"])
def test_float_literal(source):
    lexed = scan_tokens(source)[0]
    assert lexed.type is TokenType.NUMBER
    assert lexed.literal == float(source)
    assert isinstance(lexed.literal, float)


def test_trailing_dot_is_separate_token():
    tokens = scan_tokens("1.")
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.DOT, TokenType.EOF]
    assert isinstance(tokens[0].literal, int)


@pytest.mark.parametrize("word", sorted(KEYWORDS))
def test_keywords(word):
    lexed = scan_tokens(word)[0]
    assert lexed.type is KEYWORDS[word]
    assert lexed.lexeme == word


def test_identifier_prefixed_by_keyword():
    source = "orchid"
    lexed = scan_tokens(source)[0]
    assert lexed.type is TokenType.IDENTIFIER
    assert lexed.lexeme == source


def test_identifier_stops_at_underscore():
    tokens = scan_tokens("foo_bar")
    assert [t.lexeme for t in tokens[:-1]] == ["foo", "_bar"]
    assert all(t.type is TokenType.IDENTIFIER for t in tokens[:-1])


def test_unexpected_character_is_reported_and_skipped(capsys):
    tokens = scan_tokens("1 @ 2")
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF]
    assert "Unexpected token: @" in capsys.readouterr().out


def test_lines_advance_on_newlines():
    source = "var a;\nvar b;\n\nprint a;"
    tokens = scan_tokens(source)
    assert tokens[0].line == 1
    assert tokens[-1].line == source.count("\n") + 1
    lines = [t.line for t in tokens]
    assert lines == sorted(lines)


def test_eof_is_always_last_and_unique():
    tokens = scan_tokens("var x = (1 + 2) * 3;")
    assert tokens[-1].type is TokenType.EOF
    assert sum(t.type is TokenType.EOF for t in tokens) == 1


def test_scanner_class_matches_function_and_is_repeatable():
    source = 'if (x >= 1) { print "ok"; }'
    scanner = Scanner(source)
    first = scanner.scan_tokens()
    second = scanner.scan_tokens()
    assert first == second == scan_tokens(source)
    assert scanner.tokens == first