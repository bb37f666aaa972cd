import pytest

from toylang.keywords import TokenType
from toylang.lexer import Lexer, Token, format_token


def types_of(source, comments=True):
    lexer = Lexer(source)
    lexer.set_comments(comments)
    return [t.type for t in lexer.tokens()]


def test_simple_declaration():
    tokens = list(Lexer("var x = 42;").tokens())
    assert [t.type for t in tokens] == [
        TokenType.VAR,
        TokenType.IDENTIFIER,
        TokenType.ASSIGN,
        TokenType.LITERAL_INTEGER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]
    assert [t.lexeme for t in tokens[:-1]] == ["var", "x", "=", "42", ";"]


def test_eof_repeats():
    lexer = Lexer("")
    assert lexer.scan().type == TokenType.EOF
    assert lexer.scan().type == TokenType.EOF


def test_numbers():
    tokens = list(Lexer("3.14 1_000 7.").tokens())
    assert (tokens[0].type, tokens[0].lexeme) == (TokenType.LITERAL_FLOAT, "3.14")
    assert (tokens[1].type, tokens[1].lexeme) == (TokenType.LITERAL_INTEGER, "1_000")
    assert tokens[2].type == TokenType.LITERAL_INTEGER
    assert tokens[3].type == TokenType.DOT


def test_string_lexeme_excludes_quotes():
    tokens = list(Lexer('print "hello world";').tokens())
    assert tokens[1].type == TokenType.LITERAL_STRING
    assert tokens[1].lexeme == "hello world"
    assert tokens[1].length == len("hello world")


def test_string_keeps_escapes_raw():
    tokens = list(Lexer(r'"a\"b";').tokens())
    assert tokens[0].lexeme == r"a\"b"


def test_unterminated_string():
    token = Lexer('"abc').scan()
    assert token.type == TokenType.ERROR
    assert token.lexeme == "Unterminated string"


def test_keywords_need_exact_match():
    assert types_of("in int integer") == [
        TokenType.IN,
        TokenType.INTEGER,
        TokenType.IDENTIFIER,
        TokenType.EOF,
    ]


def test_operators():
    assert types_of("+ += ++ - -= -- * *= / /= % %= ! != = == < <= > >= && || | ? : , ...") == [
        TokenType.PLUS,
        TokenType.PLUS_ASSIGN,
        TokenType.PLUS_PLUS,
        TokenType.MINUS,
        TokenType.MINUS_ASSIGN,
        TokenType.MINUS_MINUS,
        TokenType.MULTIPLY,
        TokenType.MULTIPLY_ASSIGN,
        TokenType.DIVIDE,
        TokenType.DIVIDE_ASSIGN,
        TokenType.MODULO,
        TokenType.MODULO_ASSIGN,
        TokenType.NOT,
        TokenType.NOT_EQUAL,
        TokenType.ASSIGN,
        TokenType.EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.AND_AND,
        TokenType.OR_OR,
        TokenType.PIPE,
        TokenType.QUESTION,
        TokenType.COLON,
        TokenType.COMMA,
        TokenType.REST,
        TokenType.EOF,
    ]


def test_brackets():
    assert types_of("([{}])") == [
        TokenType.PAREN_LEFT,
        TokenType.BRACKET_LEFT,
        TokenType.BRACE_LEFT,
        TokenType.BRACE_RIGHT,
        TokenType.BRACKET_RIGHT,
        TokenType.PAREN_RIGHT,
        TokenType.EOF,
    ]


def test_single_ampersand_is_error():
    token = Lexer("&x").scan()
    assert token.type == TokenType.ERROR
    assert token.lexeme == "Unexpected '&'"


def test_unexpected_character():
    token = Lexer("@").scan()
    assert token.type == TokenType.ERROR
    assert token.lexeme == "Unexpected token: @"


def test_comments_skipped():
    source = "// line comment\nvar /* block */ x;"
    assert types_of(source) == [
        TokenType.VAR,
        TokenType.IDENTIFIER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


def test_comments_disabled():
    assert types_of("// x", comments=False) == [
        TokenType.DIVIDE,
        TokenType.DIVIDE,
        TokenType.IDENTIFIER,
        TokenType.EOF,
    ]


def test_line_numbers():
    tokens = list(Lexer("a\nb\n\nc").tokens())
    assert [t.line for t in tokens[:3]] == [1, 2, 4]


def test_format_value_token():
    token = Token(TokenType.IDENTIFIER, "foo", 3)
    assert format_token(token) == f"\t{int(TokenType.IDENTIFIER)}\t3\tfoo\t"


def test_format_keyword_token():
    token = Lexer("while").scan()
    assert format_token(token) == f"\t{int(TokenType.WHILE)}\t1\twhile"


def test_format_symbol_token():
    token = Lexer(" ; ").scan()
    assert format_token(token) == f"\t{int(TokenType.SEMICOLON)}\t1\t;"


def test_format_error_token():
    token = Lexer("@").scan()
    assert format_token(token) == "Error\t1\tUnexpected token: @"


@pytest.mark.parametrize("source", ["var a = 1;", "print a + b * 2;", "fn f() {}"])
def test_lexemes_come_from_source(source):
    for token in Lexer(source).tokens():
        if token.type not in (TokenType.EOF, TokenType.ERROR):
            assert token.lexeme in source
            assert token.lexeme != ""