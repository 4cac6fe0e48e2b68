from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import logging

from qrcodeid.api.errors import check_batch_size, to_http_error
from qrcodeid.core.errors import CodecError
from qrcodeid.db.Connection import database
from qrcodeid.schemas.codes import (
    BatchCodeVariantsRequest,
    BatchCodeVariantsResult,
    CodeVariants,
    CodeVariantsRequest,
    DecodedCode,
    ParsedQRData,
    ParseRequest,
    ValidateSecureCodeRequest,
    ValidateShortCodeRequest,
)
from qrcodeid.schemas.validation import ValidationResult
from qrcodeid.services.identifier import short_code_to_uuid
from qrcodeid.services.parser import parse_qr_data
from qrcodeid.services.registry import CodeRegistry
from qrcodeid.services.validator import validate_secure_code, validate_short_code
from qrcodeid.services.workflow import batch_generate_code_variants, generate_code_variants

logger = logging.getLogger(__name__)

router = APIRouter(tags=["codes"])

@router.post("/codes", response_model=CodeVariants, status_code=status.HTTP_201_CREATED)
def create_code_variants_endpoint(request: CodeVariantsRequest, db: Session = Depends(database.get_db)):
    try:
        variants = generate_code_variants(request.uuid)
    except CodecError as e:
        logger.warning(f"Rejected code request for {request.uuid!r}: {e}")
        raise to_http_error(e)

    if request.store:
        try:
            variants = CodeRegistry.register(db, request.uuid)
        except ValueError as e:
            logger.error(f"Failed to register {request.uuid}: {e}")
            raise HTTPException(status_code=409, detail=str(e))

    logger.info(f"API success: {variants.uuid} -> {variants.short_code}")
    return variants

@router.post("/codes/batch", response_model=List[BatchCodeVariantsResult])
def batch_code_variants_endpoint(request: BatchCodeVariantsRequest):
    check_batch_size(request.uuids)
    return batch_generate_code_variants(request.uuids)

@router.get("/codes/{short_code}", response_model=DecodedCode)
def decode_short_code_endpoint(short_code: str):
    validation = validate_short_code(short_code)
    if not validation.is_valid:
        raise HTTPException(status_code=400, detail=validation.error)
    return DecodedCode(code=short_code, uuid=short_code_to_uuid(short_code))

@router.post("/validate/short", response_model=ValidationResult)
def validate_short_code_endpoint(request: ValidateShortCodeRequest):
    return validate_short_code(request.code)

@router.post("/validate/secure", response_model=ValidationResult)
def validate_secure_code_endpoint(request: ValidateSecureCodeRequest):
    return validate_secure_code(request.code, request.uuid)

@router.post("/parse", response_model=ParsedQRData)
def parse_endpoint(request: ParseRequest):
    try:
        return parse_qr_data(request.payload)
    except CodecError as e:
        raise to_http_error(e)

@router.get("/lookup/display/{code}", response_model=DecodedCode)
async def lookup_display_code_endpoint(code: str, db: Session = Depends(database.get_db)):
    try:
        uuid = await CodeRegistry.resolve_display_code(db, code)
    except CodecError as e:
        raise to_http_error(e)
    return DecodedCode(code=code, uuid=uuid)

@router.get("/lookup/secure/{code}", response_model=DecodedCode)
async def lookup_secure_code_endpoint(code: str, db: Session = Depends(database.get_db)):
    try:
        uuid = await CodeRegistry.resolve_secure_code(db, code)
    except CodecError as e:
        raise to_http_error(e)
    return DecodedCode(code=code, uuid=uuid)
