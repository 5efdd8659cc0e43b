import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select

from database.models import Participant
from database.repositories.base import BaseRepository
from core.exceptions import ParticipantNotFound

logger = logging.getLogger(__name__)


class ParticipantRepository(BaseRepository):
    def get_by_participant_id(self, participant_id: str) -> Optional[Participant]:
        stmt = select(Participant).where(Participant.participant_id == participant_id)
        return self._one_or_none(stmt)

    def _require(self, participant_id: str) -> Participant:
        participant = self.get_by_participant_id(participant_id)
        if participant is None:
            raise ParticipantNotFound(participant_id)
        return participant

    def update_trust_profile(
        self,
        participant_id: str,
        skills: List[str],
        experience_years: int,
        credibility_score: int,
        resume_uploaded_at: datetime
    ) -> Participant:
        """Replace the resume-derived fields of a participant."""
        participant = self._require(participant_id)

        participant.skills = list(skills)
        participant.experience_years = experience_years
        participant.credibility_score = credibility_score
        participant.resume_uploaded_at = resume_uploaded_at

        self.db.flush()
        return participant

    def update_credibility_score(self, participant_id: str, credibility_score: int) -> Participant:
        participant = self._require(participant_id)
        participant.credibility_score = credibility_score
        self.db.flush()
        return participant
