"""Lexer and literal value model for the Toy scripting language."""

__version__ = "0.1.0"
__all__ = [
    "keywords",
    "lexer",
    "literal",
    "operations",
    "literal_array",
    "literal_dictionary",
    "printer",
]