#!/usr/bin/env python3
"""
Verification Models - Data structures for the one-time code gate.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from core.exceptions import InvalidCode, Throttled, VerificationNotFound


@dataclass(frozen=True)
class VerificationState:
    """Snapshot of the verification record for one phone.

    Transitions never mutate a state; they return a new one.
    """
    phone: str
    code: str
    attempts: int
    issued_at: datetime
    updated_at: datetime
    blocked_until: Optional[datetime] = None
    verified_at: Optional[datetime] = None

    def is_blocked(self, now: datetime) -> bool:
        return self.blocked_until is not None and self.blocked_until > now


class VerificationOutcome(str, Enum):
    VERIFIED = "verified"
    INVALID_CODE = "invalid_code"
    THROTTLED = "throttled"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a verify call.

    The gate persists any state change before handing this back, so callers
    can commit first and raise afterwards with raise_for_outcome().
    """
    outcome: VerificationOutcome
    attempts_remaining: Optional[int] = None
    blocked_until: Optional[datetime] = None

    @property
    def verified(self) -> bool:
        return self.outcome == VerificationOutcome.VERIFIED

    def raise_for_outcome(self) -> None:
        if self.outcome == VerificationOutcome.NOT_FOUND:
            raise VerificationNotFound()
        if self.outcome == VerificationOutcome.THROTTLED:
            raise Throttled(self.blocked_until)
        if self.outcome == VerificationOutcome.INVALID_CODE:
            raise InvalidCode(self.attempts_remaining)


@dataclass(frozen=True)
class IssuedCode:
    """A freshly issued code and the state that was stored for it."""
    code: str
    state: VerificationState
