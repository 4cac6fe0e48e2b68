import logging
from typing import Awaitable, Callable, Optional

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from qrcodeid.db import repository
from qrcodeid.schemas.codes import CodeVariants
from qrcodeid.services import RedisCodeCache
from qrcodeid.services.identifier import lookup_uuid_by_display_code, lookup_uuid_by_secure_code
from qrcodeid.services.workflow import generate_code_variants

logger = logging.getLogger(__name__)


class CodeRegistry:
    """Lookup store for the lossy codes: Redis in front of the database."""

    @staticmethod
    def register(db: Session, uuid: str) -> CodeVariants:
        variants = generate_code_variants(uuid)
        identifier = variants.uuid.lower()

        repository.create_mapping(db, variants.display_code, "display", identifier)
        repository.create_mapping(db, variants.secure_code, "secure", identifier)
        RedisCodeCache.put(variants.display_code, identifier)
        RedisCodeCache.put(variants.secure_code, identifier)

        logger.info("Registered %s as display=%s secure=%s", identifier, variants.display_code, variants.secure_code)
        return variants

    @staticmethod
    def _lookup(db: Session, code: str) -> Optional[str]:
        cached = RedisCodeCache.get(code)
        if cached:
            return cached

        mapping = repository.get_mapping_by_code(db, code)
        if mapping is None:
            return None
        repository.touch_mapping(db, code)
        RedisCodeCache.put(code, mapping.identifier)
        return mapping.identifier

    @staticmethod
    def make_lookup(db: Session) -> Callable[[str], Awaitable[Optional[str]]]:
        """Bind a lookup to ``db``. Redis and the session block, so they run off the event loop."""
        async def lookup(code: str) -> Optional[str]:
            return await run_in_threadpool(CodeRegistry._lookup, db, code)

        return lookup

    @staticmethod
    async def resolve_display_code(db: Session, display_code: str) -> str:
        return await lookup_uuid_by_display_code(display_code, CodeRegistry.make_lookup(db))

    @staticmethod
    async def resolve_secure_code(db: Session, secure_code: str) -> str:
        return await lookup_uuid_by_secure_code(secure_code, CodeRegistry.make_lookup(db))
