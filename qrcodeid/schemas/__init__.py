# re-export common schemas for simpler imports
from .codes import (
    BatchCodeVariantsResult,
    CodeVariants,
    DecodedCode,
    ParsedQRData,
)
from .qr import BatchQRResult, GeneratedQRIdentifier, QRCodeOptions, QRServiceOptions
from .validation import ValidationDetails, ValidationResult, ValidationStatus

__all__ = [
    "BatchCodeVariantsResult",
    "CodeVariants",
    "DecodedCode",
    "ParsedQRData",
    "BatchQRResult",
    "GeneratedQRIdentifier",
    "QRCodeOptions",
    "QRServiceOptions",
    "ValidationDetails",
    "ValidationResult",
    "ValidationStatus",
]
