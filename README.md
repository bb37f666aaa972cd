# toylang

Building blocks for the Toy scripting language: a lexer that turns Toy
source text into tokens, and the literal value model the language works
with (literals, arrays, dictionaries, copying, equality, hashing and
printing).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Tokenizing source

```python
from toylang.lexer import Lexer, format_token

lexer = Lexer('var x: int = 42; print "hello";')
for token in lexer.tokens():
    print(format_token(token))
```

- `Lexer.scan()` returns one `Token` (`type`, `lexeme`, `line`) at a time.
  Once the input is spent it keeps returning `EOF` tokens.
- `Lexer.tokens()` yields tokens up to and including the first `EOF` token.
- Comments (`//` to the end of the line, and `/* ... */`) are skipped
  unless turned off with `Lexer.set_comments(False)`.
- Problems such as an unterminated string or a stray character are not
  raised. They come back as tokens of type `TokenType.ERROR`, and the
  message is in `lexeme`.
- `format_token(token)` returns a one-line description for debugging.

`toylang.keywords` holds the `TokenType` enumeration and the table of
reserved words:

- `find_keyword_by_type(TokenType.VAR)` returns `"var"`.
- `find_type_by_keyword(word)` returns the type of the first reserved word
  that starts with `word`, or `TokenType.EOF` if none does. Because the
  lookup is by prefix, `"in"` resolves to `TokenType.INTEGER` (`"int"`).

## Literals

```python
from toylang.literal import to_integer, to_string, to_float, to_type, LiteralType
from toylang.literal_array import LiteralArray
from toylang.literal_dictionary import LiteralDictionary
from toylang.operations import literals_are_equal, copy_literal, hash_literal
from toylang.printer import format_literal, print_literal

array = LiteralArray()
array.push(to_integer(1))
array.push(to_string("two"))

table = LiteralDictionary()
table.set(to_string("key"), to_float(3.5))

print(literals_are_equal(to_integer(2), to_float(2.0)))  # True
print(format_literal(to_type(LiteralType.INTEGER, True)))  # <int const>
print_literal(to_string("hi"), print)  # hi
```

`toylang.literal` defines `Literal`, `LiteralType` and constructors such as
`to_null`, `to_boolean`, `to_integer` (wrapped to 32-bit signed range),
`to_float` (stored at single precision), `to_string`, `to_identifier`,
`to_type`, `to_opaque`, `to_array` and `to_dictionary`.
`Literal.push_subtype` adds inner types to a type literal, and
`Literal.is_truthy` treats everything except `false` as true. Null counts
as false and also writes a warning to stderr.

`LiteralArray` and `LiteralDictionary` store private copies of what they are
given.

- `LiteralArray.get` returns a null literal for a missing or non-integer
  index.
- `LiteralArray.set` raises `TypeError` or `IndexError` when the index is
  not an integer or is out of range.
- `LiteralDictionary` raises `TypeError` for null, function and opaque keys.

`toylang.operations` provides `copy_literal`, `literals_are_equal` (integers
and floats compare by value; functions and opaques are never equal) and
`hash_literal` (which returns -1 for kinds that cannot be hashed).

`format_literal` renders a literal the way the language prints it:

- strings inside arrays and dictionaries are quoted;
- empty dictionaries print as `[:]`;
- types print as `<int const>` and the like.

`print_literal` passes that text to any callable, and to `sys.stdout.write`
by default, so no newline is added.

## What this package does not do

It has no parser, compiler or bytecode interpreter, and no command-line
program or interactive prompt. It cannot run Toy scripts. It only
tokenizes source text and models the values that scripts work with.