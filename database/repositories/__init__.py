from database.repositories.base import BaseRepository
from database.repositories.participant import ParticipantRepository
from database.repositories.verification import VerificationRepository

__all__ = [
    'BaseRepository',
    'ParticipantRepository',
    'VerificationRepository',
]
