from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Literal, Optional

from qrcodeid.core.config import settings

ErrorCorrectionLevel = Literal["L", "M", "Q", "H"]
QRFormat = Literal["png", "svg"]
QRService = Literal["qr-server", "google", "qr-code-generator"]


class QRColor(BaseModel):
    dark: str = "#000000"   # modules
    light: str = "#FFFFFF"  # background


class QRCodeOptions(BaseModel):
    """Rendering options.

    ``size`` is the output width in pixels, ``margin`` the quiet zone in
    modules. Error correction tiers recover roughly 7/15/25/30 percent of
    damaged modules for L/M/Q/H.
    """
    size: int = Field(default_factory=lambda: settings.QR_SIZE, gt=0, le=4096)
    base_url: str = ""
    margin: int = Field(default_factory=lambda: settings.QR_MARGIN, ge=0)
    error_correction_level: ErrorCorrectionLevel = Field(default_factory=lambda: settings.QR_ERROR_CORRECTION)
    format: QRFormat = Field(default_factory=lambda: settings.QR_FORMAT)
    color: QRColor = Field(default_factory=QRColor)


class QRServiceOptions(BaseModel):
    size: int = Field(default_factory=lambda: settings.QR_SIZE, gt=0, le=4096)
    base_url: str = ""
    service: QRService = Field(default_factory=lambda: settings.QR_SERVICE)


# Request DTOs
class CreateQRIdentifierRequest(BaseModel):
    base_url: Optional[str] = None
    options: QRCodeOptions = Field(default_factory=QRCodeOptions)


class BatchQRRequest(BaseModel):
    uuids: List[str] = Field(..., min_length=1)
    options: QRCodeOptions = Field(default_factory=QRCodeOptions)


# Response DTOs
class GeneratedQRIdentifier(BaseModel):
    uuid: str
    short_code: str
    qr_code_data_url: str
    qr_code_url: str
    scan_url: str
    created_at: datetime


class BatchQRResult(BaseModel):
    uuid: str
    short_code: str = ""
    qr_code: str = ""
    success: bool
    error: Optional[str] = None


class QRCodeURLResponse(BaseModel):
    uuid: str
    qr_code_url: str
