import logging

from qrcodeid.core.errors import InvalidPayloadError
from qrcodeid.schemas.codes import ParsedQRData
from qrcodeid.services.identifier import short_code_to_uuid
from qrcodeid.services.validator import validate_short_code
from qrcodeid.utils.payload import split_payload

logger = logging.getLogger(__name__)


def parse_qr_data(qr_data: str) -> ParsedQRData:
    """Extract the short code from scanned QR data and decode its UUID."""
    if not qr_data:
        raise InvalidPayloadError("QR data cannot be empty")

    short_code, is_url, base_url = split_payload(qr_data)

    validation = validate_short_code(short_code)
    if not validation.is_valid:
        logger.debug("Rejected QR payload %r: %s", qr_data[:80], validation.status.value)
        raise InvalidPayloadError(f"Invalid QR code format: {validation.error}", validation)

    return ParsedQRData(
        short_code=short_code,
        uuid=short_code_to_uuid(short_code),
        is_url=is_url,
        base_url=base_url,
    )
