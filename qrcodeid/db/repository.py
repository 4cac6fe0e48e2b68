from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from datetime import datetime, timezone
import logging

from qrcodeid.db.Models.models import CodeMapping

logger = logging.getLogger(__name__)


def get_mapping_by_code(db: Session, code: str) -> Optional[CodeMapping]:
    return db.query(CodeMapping).filter(CodeMapping.code == code).first()

def get_mappings_by_identifier(db: Session, identifier: str) -> List[CodeMapping]:
    return db.query(CodeMapping).filter(CodeMapping.identifier == identifier.lower()).all()


def _commit_and_refresh(db: Session, mapping: CodeMapping) -> CodeMapping:
    try:
        db.add(mapping)
        db.commit()
        db.refresh(mapping)
        return mapping
    except IntegrityError as e:
        db.rollback()
        logger.warning(
            "IntegrityError creating CodeMapping code=%s identifier=%s: %s",
            mapping.code, mapping.identifier, str(e)
        )
        raise

def create_mapping(db: Session, code: str, kind: str, identifier: str) -> CodeMapping:
    """Bind ``code`` to ``identifier``. Re-registering the same pair is a no-op."""
    identifier = identifier.lower()
    existing = get_mapping_by_code(db, code)
    if existing:
        if existing.identifier != identifier:
            logger.warning("Code collision: %s already bound to %s", code, existing.identifier)
            raise ValueError(f"Code {code} is already bound to another identifier")
        return existing

    try:
        return _commit_and_refresh(db, CodeMapping(code=code, kind=kind, identifier=identifier))
    except IntegrityError:
        # lost a race with a concurrent insert of the same code
        existing = get_mapping_by_code(db, code)
        if existing and existing.identifier == identifier:
            return existing
        raise ValueError(f"Code {code} is already bound to another identifier")

def touch_mapping(db: Session, code: str) -> int:
    updated = db.query(CodeMapping).filter(CodeMapping.code == code).update({
        CodeMapping.lookup_count: CodeMapping.lookup_count + 1,
        CodeMapping.last_accessed_at: datetime.now(timezone.utc)
    })
    db.commit()
    return updated
