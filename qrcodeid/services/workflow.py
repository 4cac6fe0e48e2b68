import asyncio
import logging
import uuid as uuid_lib
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from starlette.concurrency import run_in_threadpool

from qrcodeid.core.errors import CodecError, QRGenerationError
from qrcodeid.schemas.codes import BatchCodeVariantsResult, CodeVariants
from qrcodeid.schemas.qr import BatchQRResult, GeneratedQRIdentifier, QRCodeOptions, QRServiceOptions
from qrcodeid.services.identifier import (
    ensure_uuid,
    uuid_to_display_code,
    uuid_to_secure_code,
    uuid_to_short_code,
)
from qrcodeid.services.qr import build_scan_payload, generate_qr_code, generate_qr_code_url

logger = logging.getLogger(__name__)


def generate_code_variants(uuid: str) -> CodeVariants:
    ensure_uuid(uuid)
    return CodeVariants(
        uuid=uuid,
        short_code=uuid_to_short_code(uuid),
        display_code=uuid_to_display_code(uuid),
        secure_code=uuid_to_secure_code(uuid),
    )


def batch_generate_code_variants(uuids: Iterable[str]) -> List[BatchCodeVariantsResult]:
    results = []
    for uuid in uuids:
        try:
            variants = generate_code_variants(uuid)
        except CodecError as e:
            results.append(BatchCodeVariantsResult(uuid=str(uuid), success=False, error=str(e)))
            continue
        results.append(BatchCodeVariantsResult(**variants.model_dump(), success=True))
    return results


def create_qr_identifier(base_url: Optional[str] = None, qr_options: Optional[QRCodeOptions] = None) -> GeneratedQRIdentifier:
    """Mint a new UUID and everything needed to print it as a QR code.

    A failing renderer leaves ``qr_code_data_url`` empty; the code, scan URL
    and hosted image URL are still returned.
    """
    qr_options = qr_options or QRCodeOptions()
    base_url = base_url if base_url is not None else qr_options.base_url

    uuid = str(uuid_lib.uuid4())
    short_code = uuid_to_short_code(uuid)
    scan_url = build_scan_payload(short_code, base_url)

    try:
        qr_code_data_url = generate_qr_code(uuid, qr_options.model_copy(update={"base_url": base_url}))
    except QRGenerationError:
        logger.warning("Embedded QR unavailable for %s, returning hosted URL only", uuid)
        qr_code_data_url = ""

    qr_code_url = generate_qr_code_url(uuid, QRServiceOptions(base_url=base_url, size=qr_options.size))

    logger.info("Created QR identifier %s -> %s", uuid, short_code)
    return GeneratedQRIdentifier(
        uuid=uuid,
        short_code=short_code,
        qr_code_data_url=qr_code_data_url,
        qr_code_url=qr_code_url,
        scan_url=scan_url,
        created_at=datetime.now(timezone.utc),
    )


def _qr_record(uuid: str, options: QRCodeOptions) -> BatchQRResult:
    try:
        short_code = uuid_to_short_code(uuid)
        qr_code = generate_qr_code(uuid, options)
    except (CodecError, QRGenerationError) as e:
        return BatchQRResult(uuid=str(uuid), success=False, error=str(e))
    return BatchQRResult(uuid=uuid, short_code=short_code, qr_code=qr_code, success=True)


async def batch_generate_qr_codes(uuids: Iterable[str], options: Optional[QRCodeOptions] = None) -> List[BatchQRResult]:
    """Render QR codes concurrently; results keep the order of ``uuids``."""
    options = options or QRCodeOptions()
    uuids = list(uuids)

    outcomes = await asyncio.gather(
        *(run_in_threadpool(_qr_record, uuid, options) for uuid in uuids),
        return_exceptions=True,
    )

    results = []
    for uuid, outcome in zip(uuids, outcomes):
        if isinstance(outcome, BaseException):
            logger.error("Batch QR task for %s crashed: %s", uuid, outcome)
            outcome = BatchQRResult(uuid=str(uuid), success=False, error="Task failed")
        results.append(outcome)
    return results
