"""Tokenizer that turns source text into a stream of tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from toylang.keywords import KEYWORDS, TokenType, find_keyword_by_type

_ESCAPABLE = frozenset("nt\\\"")
_VALUE_TOKENS = frozenset(
    {
        TokenType.IDENTIFIER,
        TokenType.LITERAL_INTEGER,
        TokenType.LITERAL_FLOAT,
        TokenType.LITERAL_STRING,
    }
)
_SINGLE = {
    "(": TokenType.PAREN_LEFT,
    ")": TokenType.PAREN_RIGHT,
    "{": TokenType.BRACE_LEFT,
    "}": TokenType.BRACE_RIGHT,
    "[": TokenType.BRACKET_LEFT,
    "]": TokenType.BRACKET_RIGHT,
    "?": TokenType.QUESTION,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
}
_WITH_ASSIGN = {
    "*": (TokenType.MULTIPLY_ASSIGN, TokenType.MULTIPLY),
    "/": (TokenType.DIVIDE_ASSIGN, TokenType.DIVIDE),
    "%": (TokenType.MODULO_ASSIGN, TokenType.MODULO),
    "!": (TokenType.NOT_EQUAL, TokenType.NOT),
    "=": (TokenType.EQUAL, TokenType.ASSIGN),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


@dataclass(frozen=True)
class Token:
    """A single token; for error tokens the lexeme holds the message."""

    type: TokenType
    lexeme: str
    line: int

    @property
    def length(self) -> int:
        return len(self.lexeme)


class Lexer:
    """Scans a piece of source code one token at a time."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._start = 0
        self._current = 0
        self.line = 1
        self.comments_enabled = True

    # character helpers
    def _at_end(self) -> bool:
        return self._current >= len(self.source) or self.source[self._current] == "\0"

    def _peek(self) -> str:
        return "\0" if self._at_end() else self.source[self._current]

    def _peek_next(self) -> str:
        if self._at_end() or self._current + 1 >= len(self.source):
            return "\0"
        return self.source[self._current + 1]

    def _advance(self) -> str:
        if self._at_end():
            return "\0"
        c = self.source[self._current]
        if c == "\n":
            self.line += 1
        self._current += 1
        return c

    def _match(self, c: str) -> bool:
        if self._peek() == c:
            self._advance()
            return True
        return False

    def _is_digit(self) -> bool:
        return "0" <= self._peek() <= "9"

    def _is_alpha(self) -> bool:
        c = self._peek()
        return "A" <= c <= "Z" or "a" <= c <= "z" or c == "_"

    def _eat_whitespace(self) -> None:
        while True:
            c = self._peek()
            if c in " \r\n\t" and c != "\0":
                self._advance()
            elif c == "/" and self.comments_enabled and self._peek_next() == "/":
                while not self._at_end() and self._advance() != "\n":
                    pass
            elif c == "/" and self.comments_enabled and self._peek_next() == "*":
                self._advance()
                self._advance()
                while not self._at_end() and not (
                    self._peek() == "*" and self._peek_next() == "/"
                ):
                    self._advance()
                self._advance()
                self._advance()
            else:
                return

    # token builders
    def _make(self, token_type: TokenType) -> Token:
        return Token(token_type, self.source[self._start : self._current], self.line)

    def _error(self, message: str) -> Token:
        return Token(TokenType.ERROR, message, self.line)

    def _number(self) -> Token:
        token_type = TokenType.LITERAL_INTEGER
        while self._is_digit() or self._peek() == "_":
            self._advance()
        if self._peek() == "." and "0" <= self._peek_next() <= "9":
            token_type = TokenType.LITERAL_FLOAT
            self._advance()
            while self._is_digit() or self._peek() == "_":
                self._advance()
        return self._make(token_type)

    def _string(self, terminator: str) -> Token:
        while not self._at_end():
            if self._peek() == terminator:
                self._advance()
                break
            if self._peek() == "\\" and self._peek_next() in _ESCAPABLE:
                self._advance()
                self._advance()
                continue
            self._advance()

        if self._at_end():
            return self._error("Unterminated string")

        lexeme = self.source[self._start + 1 : self._current - 1]
        return Token(TokenType.LITERAL_STRING, lexeme, self.line)

    def _word(self) -> Token:
        self._advance()
        while self._is_digit() or self._is_alpha():
            self._advance()
        text = self.source[self._start : self._current]
        for kind, word in KEYWORDS:
            if word == text:
                return self._make(kind)
        return self._make(TokenType.IDENTIFIER)

    # public interface
    def scan(self) -> Token:
        """Return the next token; returns EOF tokens once the source is spent."""
        self._eat_whitespace()
        self._start = self._current

        if self._at_end():
            return self._make(TokenType.EOF)
        if self._is_digit():
            return self._number()
        if self._is_alpha():
            return self._word()

        c = self._advance()

        if c in _SINGLE:
            return self._make(_SINGLE[c])
        if c in _WITH_ASSIGN:
            with_assign, plain = _WITH_ASSIGN[c]
            return self._make(with_assign if self._match("=") else plain)
        if c == "+":
            if self._match("="):
                return self._make(TokenType.PLUS_ASSIGN)
            return self._make(TokenType.PLUS_PLUS if self._match("+") else TokenType.PLUS)
        if c == "-":
            if self._match("="):
                return self._make(TokenType.MINUS_ASSIGN)
            return self._make(
                TokenType.MINUS_MINUS if self._match("-") else TokenType.MINUS
            )
        if c == "&":
            if self._advance() != "&":
                return self._error("Unexpected '&'")
            return self._make(TokenType.AND_AND)
        if c == "|":
            return self._make(TokenType.OR_OR if self._match("|") else TokenType.PIPE)
        if c == ".":
            if self._peek() == "." and self._peek_next() == ".":
                self._advance()
                self._advance()
                return self._make(TokenType.REST)
            return self._make(TokenType.DOT)
        if c == '"':
            return self._string(c)
        return self._error(f"Unexpected token: {c}")

    def set_comments(self, enabled: bool) -> None:
        """Enable or disable comment skipping."""
        self.comments_enabled = enabled

    def tokens(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token."""
        while True:
            token = self.scan()
            yield token
            if token.type == TokenType.EOF:
                return


def format_token(token: Token) -> str:
    """Return a one-line debugging description of a token (no newline)."""
    if token.type == TokenType.ERROR:
        return f"Error\t{token.line}\t{token.lexeme}"

    head = f"\t{int(token.type)}\t{token.line}\t"
    if token.type in _VALUE_TOKENS:
        return f"{head}{token.lexeme}\t"

    keyword = find_keyword_by_type(token.type)
    if keyword is not None:
        return head + keyword
    return head + token.lexeme.strip()