from fastapi import HTTPException, status

from qrcodeid.core.config import settings
from qrcodeid.core.errors import (
    CodecError,
    InvalidLookupResultError,
    LookupMissError,
    QRGenerationError,
)


def to_http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, LookupMissError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, InvalidLookupResultError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    if isinstance(exc, CodecError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, QRGenerationError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


def check_batch_size(items: list):
    if len(items) > settings.BATCH_MAX_ITEMS:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Batch too large. Limit is {settings.BATCH_MAX_ITEMS} items.",
        )
