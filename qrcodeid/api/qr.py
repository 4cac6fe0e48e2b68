from fastapi import APIRouter, Query, status
from typing import List, Optional
import logging

from qrcodeid.api.errors import check_batch_size, to_http_error
from qrcodeid.core.config import settings
from qrcodeid.core.errors import CodecError, QRGenerationError
from qrcodeid.schemas.codes import ParsedQRData
from qrcodeid.schemas.qr import (
    BatchQRRequest,
    BatchQRResult,
    CreateQRIdentifierRequest,
    GeneratedQRIdentifier,
    QRCodeURLResponse,
    QRService,
    QRServiceOptions,
)
from qrcodeid.services.parser import parse_qr_data
from qrcodeid.services.qr import generate_qr_code_url
from qrcodeid.services.workflow import batch_generate_qr_codes, create_qr_identifier

logger = logging.getLogger(__name__)

router = APIRouter(tags=["qr"])
scan_router = APIRouter(tags=["scan"])

@router.post("/qr", response_model=GeneratedQRIdentifier, status_code=status.HTTP_201_CREATED)
def create_qr_identifier_endpoint(request: CreateQRIdentifierRequest):
    base_url = request.base_url if request.base_url is not None else (request.options.base_url or settings.BASE_URL)
    return create_qr_identifier(base_url=base_url, qr_options=request.options)

@router.post("/qr/batch", response_model=List[BatchQRResult])
async def batch_qr_endpoint(request: BatchQRRequest):
    check_batch_size(request.uuids)
    return await batch_generate_qr_codes(request.uuids, request.options)

@router.get("/qr/{uuid}/url", response_model=QRCodeURLResponse)
def qr_code_url_endpoint(
    uuid: str,
    size: Optional[int] = Query(None, gt=0, le=4096),
    base_url: str = Query(""),
    service: Optional[QRService] = Query(None),
):
    options = QRServiceOptions(base_url=base_url or settings.BASE_URL)
    if size is not None:
        options.size = size
    if service is not None:
        options.service = service
    try:
        qr_code_url = generate_qr_code_url(uuid, options)
    except (CodecError, QRGenerationError) as e:
        raise to_http_error(e)
    return QRCodeURLResponse(uuid=uuid, qr_code_url=qr_code_url)

@scan_router.get("/scan/{short_code}", response_model=ParsedQRData)
def scan_endpoint(short_code: str):
    """Resolve a scanned link back to its UUID."""
    try:
        parsed = parse_qr_data(short_code)
    except CodecError as e:
        logger.warning(f"Scan rejected: {short_code}: {e}")
        raise to_http_error(e)
    return parsed
