"""Non-raising validation of candidate codes.

Each check is recorded independently in ``details`` and the first failing
check decides ``status``. Decoding is only attempted once length and
character set have both passed, so no exception is used to signal an
invalid code.
"""
from qrcodeid.schemas.validation import ValidationDetails, ValidationResult, ValidationStatus
from qrcodeid.services.identifier import (
    SECURE_CODE_LENGTH,
    SHORT_CODE_LENGTH,
    UUID_BYTES,
    bytes_to_uuid,
    secure_code_checksum,
    uuid_to_bytes,
    uuid_to_short_code,
    validate_uuid,
    xor_checksum,
)
from qrcodeid.utils.encoding import decode_base62, encode_base62, is_base62, pad_code
from qrcodeid.utils.payload import split_payload


def _invalid(status: ValidationStatus, error: str, details: ValidationDetails) -> ValidationResult:
    return ValidationResult(is_valid=False, status=status, error=error, details=details)


def validate_short_code(short_code: str) -> ValidationResult:
    details = ValidationDetails(
        length=len(short_code) == SHORT_CODE_LENGTH,
        format=is_base62(short_code),
    )

    if not details.length:
        return _invalid(
            ValidationStatus.INVALID_LENGTH,
            f"Invalid length. Expected {SHORT_CODE_LENGTH} characters.",
            details,
        )
    if not details.format:
        return _invalid(
            ValidationStatus.INVALID_FORMAT,
            "Invalid format. Only alphanumeric characters allowed.",
            details,
        )

    data = decode_base62(short_code, UUID_BYTES)
    identifier = bytes_to_uuid(data)
    # Values past 2**128 are truncated on decode and re-encode differently
    overflow = pad_code(encode_base62(data), SHORT_CODE_LENGTH) != short_code

    if not overflow and not validate_uuid(identifier):
        return _invalid(
            ValidationStatus.INVALID_IDENTIFIER,
            "Code does not decode to a valid UUID.",
            details,
        )
    if overflow or uuid_to_short_code(identifier) != short_code:
        return _invalid(
            ValidationStatus.ROUND_TRIP_MISMATCH,
            "Code validation failed during round-trip conversion.",
            details,
        )

    return ValidationResult(is_valid=True, status=ValidationStatus.VALID, details=details)


def validate_secure_code(secure_code: str, claimed_uuid: str) -> ValidationResult:
    details = ValidationDetails(
        length=len(secure_code) == SECURE_CODE_LENGTH,
        format=is_base62(secure_code),
        checksum=False,
    )

    if not details.length:
        return _invalid(
            ValidationStatus.INVALID_LENGTH,
            f"Invalid secure code length. Expected {SECURE_CODE_LENGTH} characters.",
            details,
        )
    if not details.format:
        return _invalid(
            ValidationStatus.INVALID_FORMAT,
            "Invalid secure code format. Only alphanumeric characters allowed.",
            details,
        )
    if not validate_uuid(claimed_uuid):
        return _invalid(ValidationStatus.INVALID_IDENTIFIER, "Invalid UUID format", details)

    details.checksum = secure_code_checksum(secure_code) == xor_checksum(uuid_to_bytes(claimed_uuid))
    if not details.checksum:
        return _invalid(ValidationStatus.CHECKSUM_MISMATCH, "Checksum validation failed.", details)

    return ValidationResult(is_valid=True, status=ValidationStatus.VALID, details=details)


def validate_qr_data(payload: str) -> ValidationResult:
    """Validate a scanned payload (bare code or URL ending in one)."""
    if not payload:
        return ValidationResult(
            is_valid=False,
            status=ValidationStatus.EMPTY_PAYLOAD,
            error="QR data cannot be empty",
        )
    short_code, _, _ = split_payload(payload)
    return validate_short_code(short_code)
