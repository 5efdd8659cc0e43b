#!/usr/bin/env python3
"""
Verification state transitions.

Pure functions over VerificationState: given the stored state, the event
and the current time, they return the state to persist and the outcome.
Nothing here touches storage or the clock.

    NoRecord -> Active(0) -> Active(k < max) -> Blocked(until)
    Active -> Verified on a correct code
    send resets to Active(0) once the cool-down and any block have passed
"""

import hmac
import math
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional, Tuple

from core.config_loader import VerificationConfig
from core.exceptions import RateLimited, Throttled
from core.verification.models import (
    VerificationOutcome,
    VerificationResult,
    VerificationState,
)


def check_can_issue(
    state: Optional[VerificationState],
    now: datetime,
    config: VerificationConfig
) -> None:
    """Raise if a new code may not be issued for this phone yet.

    Raises:
        Throttled: The phone is locked out.
        RateLimited: The previous code was sent inside the cool-down window.
    """
    if state is None:
        return

    if state.is_blocked(now):
        raise Throttled(state.blocked_until)

    elapsed = (now - state.updated_at).total_seconds()
    if elapsed < config.cooldown_seconds:
        remaining = max(1, math.ceil(config.cooldown_seconds - elapsed))
        raise RateLimited(retry_after_seconds=remaining)


def issue_code(
    state: Optional[VerificationState],
    phone: str,
    code: str,
    now: datetime,
    config: VerificationConfig
) -> VerificationState:
    """Return the state for a freshly issued code.

    Attempts reset to zero and any earlier verification is discarded.
    A past blocked_until is carried over untouched; it is inert once expired.
    """
    check_can_issue(state, now, config)

    if state is None:
        return VerificationState(
            phone=phone,
            code=code,
            attempts=0,
            issued_at=now,
            updated_at=now,
        )

    return replace(
        state,
        code=code,
        attempts=0,
        issued_at=now,
        updated_at=now,
        verified_at=None,
    )


def _is_expired(state: VerificationState, now: datetime, config: VerificationConfig) -> bool:
    if config.code_ttl_seconds is None:
        return False
    return now >= state.issued_at + timedelta(seconds=config.code_ttl_seconds)


def apply_attempt(
    state: Optional[VerificationState],
    candidate: str,
    now: datetime,
    config: VerificationConfig
) -> Tuple[Optional[VerificationState], VerificationResult]:
    """Check a candidate code against the stored state.

    Returns:
        (state_to_persist, result). state_to_persist is None when nothing
        changed and there is nothing to write.
    """
    if state is None or state.verified_at is not None:
        return None, VerificationResult(VerificationOutcome.NOT_FOUND)

    # A lockout outranks expiry so the caller learns when to retry
    if state.is_blocked(now):
        return None, VerificationResult(
            VerificationOutcome.THROTTLED,
            attempts_remaining=0,
            blocked_until=state.blocked_until
        )

    if _is_expired(state, now, config):
        return None, VerificationResult(VerificationOutcome.NOT_FOUND)

    candidate_bytes = str(candidate).strip().encode('utf-8')
    if not hmac.compare_digest(candidate_bytes, state.code.encode('utf-8')):
        attempts = state.attempts + 1

        if attempts >= config.max_attempts:
            blocked_until = now + timedelta(seconds=config.lockout_seconds)
            new_state = replace(state, attempts=attempts, blocked_until=blocked_until)
            return new_state, VerificationResult(
                VerificationOutcome.THROTTLED,
                attempts_remaining=0,
                blocked_until=blocked_until
            )

        new_state = replace(state, attempts=attempts)
        return new_state, VerificationResult(
            VerificationOutcome.INVALID_CODE,
            attempts_remaining=config.max_attempts - attempts
        )

    # A matched code is consumed so it cannot be replayed
    new_state = replace(state, verified_at=now)
    return new_state, VerificationResult(VerificationOutcome.VERIFIED)
