from enum import Enum
from pydantic import BaseModel
from typing import Optional


class ValidationStatus(str, Enum):
    VALID = "valid"
    EMPTY_PAYLOAD = "empty_payload"
    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    ROUND_TRIP_MISMATCH = "round_trip_mismatch"
    INVALID_IDENTIFIER = "invalid_identifier"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class ValidationDetails(BaseModel):
    length: bool
    format: bool
    checksum: Optional[bool] = None


class ValidationResult(BaseModel):
    is_valid: bool
    status: ValidationStatus
    error: Optional[str] = None
    details: Optional[ValidationDetails] = None
