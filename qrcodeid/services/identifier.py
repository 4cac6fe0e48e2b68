import inspect
import logging
import re
import uuid as uuid_lib
from functools import reduce
from typing import Awaitable, Callable, Optional, Union

from qrcodeid.core.errors import (
    ChecksumMismatchError,
    InvalidIdentifierFormatError,
    InvalidLengthError,
    InvalidLookupResultError,
    LookupMissError,
)
from qrcodeid.utils.encoding import decode_base62, encode_base62, pad_code

logger = logging.getLogger(__name__)

SHORT_CODE_LENGTH = 22
DISPLAY_CODE_LENGTH = 11
SECURE_CODE_LENGTH = 12

UUID_BYTES = 16
DISPLAY_PAYLOAD_BYTES = 8
SECURE_PAYLOAD_BYTES = 7

_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

DatabaseLookupFunction = Callable[[str], Union[Optional[str], Awaitable[Optional[str]]]]


def validate_uuid(value) -> bool:
    return isinstance(value, str) and _UUID_RE.fullmatch(value) is not None


def ensure_uuid(value) -> str:
    if not validate_uuid(value):
        raise InvalidIdentifierFormatError(value)
    return value


def uuid_to_bytes(value: str) -> bytes:
    return uuid_lib.UUID(ensure_uuid(value)).bytes


def bytes_to_uuid(data: bytes) -> str:
    return str(uuid_lib.UUID(bytes=data))


def xor_checksum(data: bytes) -> int:
    return reduce(lambda acc, b: acc ^ b, data, 0)


def _check_length(code: str, expected: int, kind: str):
    if len(code) != expected:
        raise InvalidLengthError(kind, expected, len(code))


# Reversible 22-char code

def uuid_to_short_code(value: str) -> str:
    """Encode a UUID to its fully reversible 22-character short code."""
    return pad_code(encode_base62(uuid_to_bytes(value)), SHORT_CODE_LENGTH)


def short_code_to_uuid(short_code: str) -> str:
    """Decode a 22-character short code back to canonical UUID text."""
    _check_length(short_code, SHORT_CODE_LENGTH, "short code")
    return bytes_to_uuid(decode_base62(short_code, UUID_BYTES))


# Lossy codes

def uuid_to_display_code(value: str) -> str:
    """Encode the leading 8 bytes of a UUID as an 11-character display code.

    Display codes cannot be decoded; resolve them through a lookup store
    populated when the code is handed out.
    """
    data = uuid_to_bytes(value)[:DISPLAY_PAYLOAD_BYTES]
    return pad_code(encode_base62(data), DISPLAY_CODE_LENGTH)


def uuid_to_secure_code(value: str) -> str:
    """Encode a UUID as a 12-character code carrying an XOR checksum.

    The payload is the first 7 bytes; the 8th byte is the XOR of all 16
    identifier bytes, so the checksum also covers the bytes the payload drops.
    """
    data = uuid_to_bytes(value)
    combined = data[:SECURE_PAYLOAD_BYTES] + bytes([xor_checksum(data)])
    return pad_code(encode_base62(combined), SECURE_CODE_LENGTH)


def secure_code_checksum(secure_code: str) -> int:
    return decode_base62(secure_code, SECURE_PAYLOAD_BYTES + 1)[-1]


def verify_secure_code(secure_code: str, claimed_uuid: str) -> str:
    """Raise unless ``secure_code`` carries the checksum of ``claimed_uuid``."""
    _check_length(secure_code, SECURE_CODE_LENGTH, "secure code")
    checksum = secure_code_checksum(secure_code)
    if checksum != xor_checksum(uuid_to_bytes(claimed_uuid)):
        raise ChecksumMismatchError(secure_code)
    return claimed_uuid


# Lookup helpers

async def _call_lookup(db_lookup: DatabaseLookupFunction, code: str) -> Optional[str]:
    result = db_lookup(code)
    if inspect.isawaitable(result):
        result = await result
    return result


async def lookup_uuid_by_display_code(display_code: str, db_lookup: DatabaseLookupFunction) -> str:
    _check_length(display_code, DISPLAY_CODE_LENGTH, "display code")

    result = await _call_lookup(db_lookup, display_code)
    if not result:
        logger.info("Display code lookup miss: %s", display_code)
        raise LookupMissError("display code", display_code)
    if not validate_uuid(result):
        logger.warning("Lookup for display code %s returned malformed UUID %r", display_code, result)
        raise InvalidLookupResultError(display_code, result)
    return result


async def lookup_uuid_by_secure_code(secure_code: str, db_lookup: DatabaseLookupFunction) -> str:
    _check_length(secure_code, SECURE_CODE_LENGTH, "secure code")
    # raises InvalidCharacterError before the store is queried
    secure_code_checksum(secure_code)

    result = await _call_lookup(db_lookup, secure_code)
    if not result:
        logger.info("Secure code lookup miss: %s", secure_code)
        raise LookupMissError("secure code", secure_code)
    if not validate_uuid(result):
        logger.warning("Lookup for secure code %s returned malformed UUID %r", secure_code, result)
        raise InvalidLookupResultError(secure_code, result)

    try:
        return verify_secure_code(secure_code, result)
    except ChecksumMismatchError:
        logger.warning("Secure code %s does not match stored UUID %s", secure_code, result)
        raise
