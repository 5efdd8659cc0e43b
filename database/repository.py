from sqlalchemy.orm import Session

from database.repositories import ParticipantRepository, VerificationRepository


class TrustRepository:
    """Repositories sharing one Session, handed out by trust_uow()."""

    def __init__(self, db: Session):
        self.db = db
        self.verification = VerificationRepository(db)
        self.participants = ParticipantRepository(db)
