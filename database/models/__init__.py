from .base import Base
from .participant import Participant
from .verification import VerificationRecord

__all__ = [
    'Base',
    'Participant',
    'VerificationRecord',
]
