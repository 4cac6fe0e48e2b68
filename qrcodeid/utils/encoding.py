from qrcodeid.core.errors import InvalidCharacterError

# Base62 alphabet: digits, lowercase, uppercase. Order is part of the wire format.
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE = len(ALPHABET)
ZERO_SYMBOL = ALPHABET[0]

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def is_base62(code: str) -> bool:
    """True for a non-empty string made only of alphabet symbols."""
    return bool(code) and all(ch in _INDEX for ch in code)


def pad_code(encoded: str, length: int) -> str:
    """Left-pad an encoded value with the zero symbol up to ``length``."""
    return encoded.rjust(length, ZERO_SYMBOL)


def encode_base62(data: bytes) -> str:
    """Encode bytes, read as one big-endian unsigned integer, to an unpadded Base62 string."""
    if not data:
        return ""
    num = int.from_bytes(data, "big")
    if num == 0:
        return ZERO_SYMBOL
    out = []
    while num:
        num, rem = divmod(num, BASE)
        out.append(ALPHABET[rem])
    return ''.join(reversed(out))


def decode_base62(code: str, target_length: int) -> bytes:
    """Decode a Base62 string into exactly ``target_length`` big-endian bytes.

    Values wider than ``target_length`` bytes keep only their low-order bytes.
    """
    num = 0
    for pos, ch in enumerate(code):
        val = _INDEX.get(ch)
        if val is None:
            raise InvalidCharacterError(ch, pos)
        num = num * BASE + val
    num &= (1 << (8 * target_length)) - 1
    return num.to_bytes(target_length, "big")
