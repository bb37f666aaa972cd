"""Token types and the keyword table shared by the lexer and its users."""

from __future__ import annotations

from enum import IntEnum, auto


class TokenType(IntEnum):
    """Every kind of token the lexer can produce."""

    # types
    NULL = 0
    BOOLEAN = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    ARRAY = auto()
    DICTIONARY = auto()
    FUNCTION = auto()
    OPAQUE = auto()
    ANY = auto()

    # keywords and reserved words
    AS = auto()
    ASSERT = auto()
    BREAK = auto()
    CLASS = auto()
    CONST = auto()
    CONTINUE = auto()
    DO = auto()
    ELSE = auto()
    EXPORT = auto()
    FOR = auto()
    FOREACH = auto()
    IF = auto()
    IMPORT = auto()
    IN = auto()
    OF = auto()
    PRINT = auto()
    RETURN = auto()
    TYPE = auto()
    ASTYPE = auto()
    TYPEOF = auto()
    VAR = auto()
    WHILE = auto()

    # literal values
    IDENTIFIER = auto()
    LITERAL_TRUE = auto()
    LITERAL_FALSE = auto()
    LITERAL_INTEGER = auto()
    LITERAL_FLOAT = auto()
    LITERAL_STRING = auto()

    # math operators
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    MODULO = auto()
    PLUS_ASSIGN = auto()
    MINUS_ASSIGN = auto()
    MULTIPLY_ASSIGN = auto()
    DIVIDE_ASSIGN = auto()
    MODULO_ASSIGN = auto()
    PLUS_PLUS = auto()
    MINUS_MINUS = auto()
    ASSIGN = auto()

    # logical operators
    PAREN_LEFT = auto()
    PAREN_RIGHT = auto()
    BRACKET_LEFT = auto()
    BRACKET_RIGHT = auto()
    BRACE_LEFT = auto()
    BRACE_RIGHT = auto()
    NOT = auto()
    NOT_EQUAL = auto()
    EQUAL = auto()
    LESS = auto()
    GREATER = auto()
    LESS_EQUAL = auto()
    GREATER_EQUAL = auto()
    AND_AND = auto()
    OR_OR = auto()

    # other operators
    QUESTION = auto()
    COLON = auto()
    SEMICOLON = auto()
    COMMA = auto()
    DOT = auto()
    PIPE = auto()
    REST = auto()

    # meta tokens
    PASS = auto()
    ERROR = auto()
    EOF = auto()


# Ordered table of reserved words; order matters for prefix lookups.
KEYWORDS: tuple[tuple[TokenType, str], ...] = (
    # type keywords
    (TokenType.NULL, "null"),
    (TokenType.BOOLEAN, "bool"),
    (TokenType.INTEGER, "int"),
    (TokenType.FLOAT, "float"),
    (TokenType.STRING, "string"),
    (TokenType.FUNCTION, "fn"),
    (TokenType.OPAQUE, "opaque"),
    (TokenType.ANY, "any"),
    # other keywords
    (TokenType.AS, "as"),
    (TokenType.ASSERT, "assert"),
    (TokenType.BREAK, "break"),
    (TokenType.CLASS, "class"),
    (TokenType.CONST, "const"),
    (TokenType.CONTINUE, "continue"),
    (TokenType.DO, "do"),
    (TokenType.ELSE, "else"),
    (TokenType.EXPORT, "export"),
    (TokenType.FOR, "for"),
    (TokenType.FOREACH, "foreach"),
    (TokenType.IF, "if"),
    (TokenType.IMPORT, "import"),
    (TokenType.IN, "in"),
    (TokenType.OF, "of"),
    (TokenType.PRINT, "print"),
    (TokenType.RETURN, "return"),
    (TokenType.TYPE, "type"),
    (TokenType.ASTYPE, "astype"),
    (TokenType.TYPEOF, "typeof"),
    (TokenType.VAR, "var"),
    (TokenType.WHILE, "while"),
    # literal values
    (TokenType.LITERAL_TRUE, "true"),
    (TokenType.LITERAL_FALSE, "false"),
)


def find_keyword_by_type(token_type: TokenType) -> str | None:
    """Return the reserved word for a token type, "EOF" for EOF, else None."""
    if token_type == TokenType.EOF:
        return "EOF"
    for kind, word in KEYWORDS:
        if kind == token_type:
            return word
    return None


def find_type_by_keyword(keyword: str) -> TokenType:
    """Return the type of the first reserved word that starts with ``keyword``.

    Lookup is by prefix, so a word such as "in" resolves to the earlier
    entry "int". Returns ``TokenType.EOF`` when nothing matches.
    """
    for kind, word in KEYWORDS:
        if word.startswith(keyword):
            return kind
    return TokenType.EOF