import uuid

from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, Enum, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB

from .base import Base


class Participant(Base):
    """
    Marketplace participant profile.

    Owned by the account service; this service reads is_bank_connected and
    writes the resume-derived trust fields (skills, experience_years,
    credibility_score, resume_uploaded_at).
    """
    __tablename__ = 'participants'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    participant_id = Column(Text, nullable=False, unique=True)  # Public id used by callers
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    phone = Column(Text, nullable=False, unique=True)
    role = Column(
        Enum('freelancer', 'client', name='participant_role'),
        nullable=False
    )

    # External financial-trust flag (connected bank account)
    is_bank_connected = Column(Boolean, nullable=False, default=False)

    # Resume-derived trust signals, replaced wholesale on each upload
    skills = Column(JSONB, nullable=False, default=list)
    experience_years = Column(Integer, nullable=False, default=0)
    credibility_score = Column(Integer, nullable=False, default=0)
    resume_uploaded_at = Column(TIMESTAMP(timezone=True))

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    __table_args__ = (
        Index('idx_participants_participant_id', 'participant_id'),
        Index('idx_participants_phone', 'phone'),
    )
