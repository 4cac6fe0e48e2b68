import pytest

from qrcodeid.core.errors import InvalidCharacterError
from qrcodeid.utils.encoding import (
    ALPHABET,
    decode_base62,
    encode_base62,
    is_base62,
    pad_code,
)


def test_alphabet_order():
    assert len(ALPHABET) == 62
    assert ALPHABET[0] == "0"
    assert ALPHABET[10] == "a"
    assert ALPHABET[36] == "A"
    assert ALPHABET[61] == "Z"


def test_encode_empty_and_zero():
    assert encode_base62(b"") == ""
    assert encode_base62(b"\x00") == "0"
    assert encode_base62(bytes(16)) == "0"


@pytest.mark.parametrize("data, expected", [
    (b"\x01", "1"),
    (b"\x3d", "Z"),
    (b"\x3e", "10"),
    (b"\x01\x00", "48"),  # 256 = 4 * 62 + 8
    (b"\x00\x00\x3e", "10"),  # leading zero bytes are not kept
])
def test_encode_known_values(data, expected):
    assert encode_base62(data) == expected


def test_decode_known_values():
    assert decode_base62("10", 2) == b"\x00\x3e"
    assert decode_base62("48", 2) == b"\x01\x00"
    assert decode_base62("Z", 1) == b"\x3d"


def test_decode_empty_is_zero_filled():
    assert decode_base62("", 16) == bytes(16)
    assert decode_base62("", 0) == b""


@pytest.mark.parametrize("code", ["", "0", "1", "Z", "48", "0000048", "zzzz"])
@pytest.mark.parametrize("length", [1, 8, 16])
def test_decode_always_returns_target_length(code, length):
    assert len(decode_base62(code, length)) == length


def test_decode_zero_extends_on_the_left():
    assert decode_base62("48", 4) == b"\x00\x00\x01\x00"
    assert decode_base62("00048", 2) == b"\x01\x00"


def test_decode_overflow_keeps_low_order_bytes():
    # "100" is 62**2 = 3844 = 0x0f04
    assert decode_base62("100", 2) == b"\x0f\x04"
    assert decode_base62("100", 1) == b"\x04"


def test_decode_overflow_past_128_bits():
    value = 62 ** 22 - 1
    assert decode_base62("Z" * 22, 16) == (value % (1 << 128)).to_bytes(16, "big")


def test_decode_rejects_invalid_character():
    with pytest.raises(InvalidCharacterError) as exc_info:
        decode_base62("ab-c", 4)
    assert exc_info.value.char == "-"
    assert exc_info.value.position == 2


def test_decode_fails_on_first_invalid_character():
    with pytest.raises(InvalidCharacterError) as exc_info:
        decode_base62("a!b?", 4)
    assert exc_info.value.char == "!"


def test_invalid_character_is_a_value_error():
    with pytest.raises(ValueError):
        decode_base62("é", 1)


def test_encode_decode_preserves_bytes():
    data = bytes(range(1, 17))
    assert decode_base62(encode_base62(data), 16) == data


def test_pad_code():
    assert pad_code("48", 5) == "00048"
    assert pad_code("", 3) == "000"
    assert pad_code("abcdef", 3) == "abcdef"


def test_is_base62():
    assert is_base62("abcXYZ019")
    assert not is_base62("")
    assert not is_base62("abc-def")
    assert not is_base62("abc def")
