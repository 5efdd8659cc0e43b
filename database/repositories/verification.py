import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from database.models import VerificationRecord
from database.repositories.base import BaseRepository
from core.exceptions import ConcurrentUpdate
from core.verification.models import VerificationState

logger = logging.getLogger(__name__)


def _to_state(record: VerificationRecord) -> VerificationState:
    return VerificationState(
        phone=record.phone,
        code=record.code,
        attempts=record.attempts,
        issued_at=record.issued_at,
        updated_at=record.updated_at,
        blocked_until=record.blocked_until,
        verified_at=record.verified_at
    )


class VerificationRepository(BaseRepository):
    def get_by_phone(self, phone: str, for_update: bool = False) -> Optional[VerificationRecord]:
        stmt = select(VerificationRecord).where(VerificationRecord.phone == phone)
        if for_update:
            # Row lock held until the unit of work commits
            stmt = stmt.with_for_update()
        return self._one_or_none(stmt)

    def load(self, phone: str, for_update: bool = False) -> Optional[VerificationState]:
        record = self.get_by_phone(phone, for_update=for_update)
        return _to_state(record) if record else None

    def store(self, state: VerificationState) -> VerificationRecord:
        """Create or overwrite the record for state.phone."""
        existing = self.get_by_phone(state.phone)

        if existing is None:
            return self._insert(VerificationRecord(
                phone=state.phone,
                code=state.code,
                attempts=state.attempts,
                issued_at=state.issued_at,
                updated_at=state.updated_at,
                blocked_until=state.blocked_until,
                verified_at=state.verified_at
            ))

        existing.code = state.code
        existing.attempts = state.attempts
        existing.issued_at = state.issued_at
        existing.updated_at = state.updated_at
        existing.blocked_until = state.blocked_until
        existing.verified_at = state.verified_at

        self.db.flush()
        return existing

    def _insert(self, record: VerificationRecord) -> VerificationRecord:
        """Insert a first record for a phone inside a savepoint.

        With no row yet, FOR UPDATE had nothing to lock, so a concurrent
        first send can insert the same phone. The loser waits on the unique
        index and then fails; only its savepoint is rolled back.

        Raises:
            ConcurrentUpdate: Another transaction created the record first
        """
        try:
            with self.db.begin_nested():
                self.db.add(record)
                self.db.flush()
        except IntegrityError as e:
            logger.info(f"Verification record for phone ending {record.phone[-4:]} created concurrently")
            raise ConcurrentUpdate() from e
        return record
