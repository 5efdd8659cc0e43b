import uuid

from sqlalchemy import Column, Text, Integer, TIMESTAMP, Index
from sqlalchemy.dialects.postgresql import UUID

from .base import Base


class VerificationRecord(Base):
    """
    One-time code state for a phone number. At most one row per phone.

    version is bumped on every write; a concurrent writer holding a stale
    row fails with StaleDataError instead of overwriting.
    """
    __tablename__ = 'verification_records'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    phone = Column(Text, nullable=False, unique=True)
    code = Column(Text, nullable=False)

    # Consecutive failures since the code was issued
    attempts = Column(Integer, nullable=False, default=0)

    issued_at = Column(TIMESTAMP(timezone=True), nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False)

    # Brute force protection
    blocked_until = Column(TIMESTAMP(timezone=True))

    # Set once the code has been used
    verified_at = Column(TIMESTAMP(timezone=True))

    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        Index('idx_verification_records_phone', 'phone'),
        Index('idx_verification_records_blocked_until', 'blocked_until'),
    )
