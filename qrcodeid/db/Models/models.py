from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone

Base = declarative_base()


def _utcnow():
    return datetime.now(timezone.utc)


class CodeMapping(Base):
    __tablename__ = "code_mappings"

    # Display (11 chars) or secure (12 chars) code. Lengths never overlap,
    # so one table serves both kinds.
    code = Column(String(12), primary_key=True, index=True)
    kind = Column(String(16), nullable=False)

    # Canonical lowercase UUID text
    identifier = Column(String(36), index=True, nullable=False)

    # Metadata
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    last_accessed_at = Column(DateTime(timezone=True), default=_utcnow)
    lookup_count = Column(Integer, default=0)
