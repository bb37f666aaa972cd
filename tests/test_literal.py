import pytest

from toylang.literal import (
    LiteralType,
    hash_string,
    hash_uint,
    to_array,
    to_boolean,
    to_dictionary,
    to_float,
    to_function_hook,
    to_function_native,
    to_identifier,
    to_index_blank,
    to_integer,
    to_null,
    to_opaque,
    to_string,
    to_type,
)


def test_hash_string_empty_is_offset():
    assert hash_string("") == 2166136261


def test_hash_string_deterministic_and_32_bit():
    for text in ["a", "foo", "longer_identifier", "é"]:
        h = hash_string(text)
        assert h == hash_string(text)
        assert 0 <= h <= 0xFFFFFFFF


def test_hash_uint_zero_and_range():
    assert hash_uint(0) == 0
    for value in [1, 42, 0xFFFFFFFF, 123456789]:
        assert 0 <= hash_uint(value) <= 0xFFFFFFFF


def test_hash_uint_masks_input():
    assert hash_uint(5 + (1 << 32)) == hash_uint(5)
    assert hash_uint(-1) == hash_uint(0xFFFFFFFF)


def test_identifier_carries_precomputed_hash():
    lit = to_identifier("foobar")
    assert lit.type == LiteralType.IDENTIFIER
    assert lit.value == "foobar"
    assert lit.identifier_hash == hash_string("foobar")


def test_identifier_rejects_non_string():
    with pytest.raises(TypeError):
        to_identifier(5)


def test_string_literal():
    lit = to_string("hello")
    assert lit.type == LiteralType.STRING
    assert lit.value == "hello"
    with pytest.raises(TypeError):
        to_string(3)


def test_integer_wraps_to_int32():
    assert to_integer(42).value == 42
    assert to_integer(2**31).value == -(2**31)
    assert to_integer(-5).type == LiteralType.INTEGER


def test_float_is_single_precision():
    assert to_float(1.5).value == 1.5
    lit = to_float(0.1)
    assert lit.type == LiteralType.FLOAT
    assert lit.value != 0.1
    assert abs(lit.value - 0.1) < 1e-7


def test_boolean_and_null():
    assert to_boolean(True).value is True
    assert to_boolean(0).value is False
    assert to_null().type == LiteralType.NULL
    assert to_index_blank().type == LiteralType.INDEX_BLANK


def test_truthiness():
    assert to_boolean(True).is_truthy() is True
    assert to_boolean(False).is_truthy() is False
    assert to_integer(0).is_truthy() is True
    assert to_string("").is_truthy() is True


def test_null_is_not_truthy_and_reports(capsys):
    assert to_null().is_truthy() is False
    assert "Null is neither true nor false" in capsys.readouterr().err


def test_type_literal_and_subtypes():
    array_type = to_type(LiteralType.ARRAY, True)
    assert array_type.type_of == LiteralType.ARRAY
    assert array_type.constant is True
    assert array_type.subtypes == []
    inner = to_type(LiteralType.INTEGER, False)
    assert array_type.push_subtype(inner) == 0
    assert array_type.push_subtype(to_type(LiteralType.STRING, False)) == 1
    assert array_type.subtypes[0] is inner
    assert len(array_type.subtypes) == 2


def test_push_subtype_requires_type_literal():
    with pytest.raises(TypeError):
        to_integer(1).push_subtype(to_type(LiteralType.INTEGER, False))


def test_type_of_requires_type_literal():
    with pytest.raises(TypeError):
        to_integer(1).type_of


def test_subtype_limit():
    lit = to_type(LiteralType.ARRAY, False)
    for _ in range(255):
        lit.push_subtype(to_type(LiteralType.ANY, False))
    with pytest.raises(OverflowError):
        lit.push_subtype(to_type(LiteralType.ANY, False))


def test_wrappers_keep_payload():
    payload = object()
    opaque = to_opaque(payload, 7)
    assert opaque.type == LiteralType.OPAQUE
    assert opaque.value is payload
    assert opaque.tag == 7

    def native(interpreter, arguments):
        return 0

    assert to_function_native(native).value is native
    assert to_function_native(native).type == LiteralType.FUNCTION_NATIVE
    assert to_function_hook(native).type == LiteralType.FUNCTION_HOOK

    container = [1, 2]
    assert to_array(container).value is container
    assert to_dictionary(container).type == LiteralType.DICTIONARY