#!/usr/bin/env python3
"""
Verification Gate - issue and check one-time codes bound to a phone number.

The gate owns the throttling rules (send cool-down, failed-attempt lockout)
and delegates the decisions to the pure transitions in state.py. Storage is
reached through the repository passed to each call, so one gate can serve
any number of units of work.
"""

import logging
import secrets
from datetime import datetime, timezone
from typing import Callable, Optional

from core.config_loader import VerificationConfig
from core.exceptions import ConcurrentUpdate
from core.verification import state as transitions
from core.verification.locks import KeyedLock
from core.verification.models import IssuedCode, VerificationResult, VerificationOutcome
from notification.sms import SmsChannel, SmsChannelFactory

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_phone(phone: str) -> str:
    return (phone or "").strip()


class VerificationGate:
    """Issue, store and check one-time codes with abuse throttling."""

    def __init__(
        self,
        config: Optional[VerificationConfig] = None,
        channel: Optional[SmsChannel] = None,
        clock: Callable[[], datetime] = _utcnow,
        code_factory: Optional[Callable[[], str]] = None
    ):
        self.config = config or VerificationConfig()
        self.channel = channel or SmsChannelFactory.get_channel(self.config.sms_channel)
        self.clock = clock
        self.code_factory = code_factory or self._generate_code
        self._locks = KeyedLock()

    def _generate_code(self) -> str:
        span = self.config.code_max - self.config.code_min + 1
        return str(self.config.code_min + secrets.randbelow(span))

    def send(self, repo, phone: str) -> IssuedCode:
        """Issue a fresh code for a phone and dispatch it.

        Args:
            repo: Repository exposing a `verification` store
            phone: Phone number the code is bound to

        Returns:
            IssuedCode with the code and the stored state

        Raises:
            Throttled: The phone is locked out after too many failures
            RateLimited: A code was sent inside the cool-down window
        """
        phone = normalize_phone(phone)

        with self._locks.hold(phone):
            try:
                issued = self._issue(repo, phone)
            except ConcurrentUpdate:
                # Another process created the record first; its row is now
                # visible, so the rules are applied again against it
                logger.info(f"Concurrent first send for phone ending {phone[-4:]}, re-checking")
                issued = self._issue(repo, phone)

        self.channel.send(phone, f"Your verification code is {issued.code}")
        logger.info(f"Issued verification code for phone ending {phone[-4:]}")

        return issued

    def _issue(self, repo, phone: str) -> IssuedCode:
        now = self.clock()
        current = repo.verification.load(phone, for_update=True)

        # No code is drawn for a rejected send
        transitions.check_can_issue(current, now, self.config)
        code = self.code_factory()

        new_state = transitions.issue_code(current, phone, code, now, self.config)
        repo.verification.store(new_state)
        return IssuedCode(code=code, state=new_state)

    def verify(self, repo, phone: str, candidate: str) -> VerificationResult:
        """Check a candidate code for a phone.

        Failed attempts are persisted before returning; nothing is raised for
        domain failures. Use VerificationResult.raise_for_outcome() once the
        unit of work has committed.
        """
        phone = normalize_phone(phone)

        with self._locks.hold(phone):
            now = self.clock()
            current = repo.verification.load(phone, for_update=True)

            new_state, result = transitions.apply_attempt(current, candidate, now, self.config)
            if new_state is not None:
                repo.verification.store(new_state)

        if result.outcome == VerificationOutcome.THROTTLED:
            logger.warning(
                f"Verification locked for phone ending {phone[-4:]} "
                f"until {result.blocked_until.isoformat()}"
            )
        elif result.outcome == VerificationOutcome.INVALID_CODE:
            logger.info(
                f"Invalid code for phone ending {phone[-4:]}, "
                f"{result.attempts_remaining} attempt(s) remaining"
            )
        else:
            logger.debug(f"Verification outcome for phone ending {phone[-4:]}: {result.outcome.value}")

        return result
