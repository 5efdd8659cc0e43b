#!/usr/bin/env python3
"""
Unit tests for VerificationGate send/verify flows.
"""

import threading
import unittest

from core.config_loader import VerificationConfig
from core.exceptions import ConcurrentUpdate, InvalidCode, RateLimited, Throttled, VerificationNotFound
from core.verification import VerificationGate, VerificationOutcome, VerificationState
from core.verification.locks import KeyedLock
from notification.sms import MockSmsChannel
from tests.mocks.trust_mocks import FakeClock, FakeTrustRepository, InMemoryVerificationStore, SequenceCodes


PHONE = "+15550001111"


class RacingVerificationStore(InMemoryVerificationStore):
    """The first insert loses to a record written by another transaction."""

    def __init__(self, competitor_code: str, clock: FakeClock):
        super().__init__()
        self.competitor_code = competitor_code
        self.clock = clock
        self.raced = False

    def store(self, state: VerificationState) -> VerificationState:
        if not self.raced and state.phone not in self.records:
            self.raced = True
            now = self.clock()
            self.records[state.phone] = VerificationState(
                phone=state.phone, code=self.competitor_code, attempts=0,
                issued_at=now, updated_at=now
            )
            raise ConcurrentUpdate()
        return super().store(state)


class TestVerificationGate(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.channel = MockSmsChannel()
        self.codes = SequenceCodes("111111", "222222", "333333")
        self.repo = FakeTrustRepository()
        self.gate = VerificationGate(
            config=VerificationConfig(),
            channel=self.channel,
            clock=self.clock,
            code_factory=self.codes
        )

    def test_send_stores_and_delivers_code(self):
        issued = self.gate.send(self.repo, PHONE)

        self.assertEqual(issued.code, "111111")
        self.assertEqual(self.repo.verification.records[PHONE].code, "111111")
        self.assertIn("111111", self.channel.last_message(PHONE).body)

    def test_default_code_is_six_digits(self):
        gate = VerificationGate(channel=self.channel, clock=self.clock)

        for _ in range(50):
            code = gate._generate_code()
            self.assertEqual(len(code), 6)
            self.assertTrue(100000 <= int(code) <= 999999)

    def test_second_send_within_a_minute_is_rate_limited(self):
        self.gate.send(self.repo, PHONE)
        self.clock.advance(seconds=59)

        with self.assertRaises(RateLimited):
            self.gate.send(self.repo, PHONE)

        # The original code is still the live one
        self.assertEqual(self.repo.verification.records[PHONE].code, "111111")

    def test_send_after_cooldown_issues_new_code(self):
        self.gate.send(self.repo, PHONE)
        self.clock.advance(seconds=60)

        issued = self.gate.send(self.repo, PHONE)

        self.assertEqual(issued.code, "222222")

    def test_verify_without_send_is_not_found(self):
        result = self.gate.verify(self.repo, PHONE, "111111")

        self.assertEqual(result.outcome, VerificationOutcome.NOT_FOUND)
        with self.assertRaises(VerificationNotFound):
            result.raise_for_outcome()

    def test_verify_correct_code(self):
        self.gate.send(self.repo, PHONE)

        result = self.gate.verify(self.repo, PHONE, "111111")

        self.assertTrue(result.verified)
        result.raise_for_outcome()

    def test_verified_code_cannot_be_replayed(self):
        self.gate.send(self.repo, PHONE)
        self.gate.verify(self.repo, PHONE, "111111")

        replay = self.gate.verify(self.repo, PHONE, "111111")

        self.assertEqual(replay.outcome, VerificationOutcome.NOT_FOUND)

    def test_correct_code_after_four_failures_succeeds(self):
        self.gate.send(self.repo, PHONE)
        for _ in range(4):
            result = self.gate.verify(self.repo, PHONE, "000000")
            self.assertEqual(result.outcome, VerificationOutcome.INVALID_CODE)

        result = self.gate.verify(self.repo, PHONE, "111111")

        self.assertTrue(result.verified)

    def test_invalid_code_reports_attempts_remaining(self):
        self.gate.send(self.repo, PHONE)

        result = self.gate.verify(self.repo, PHONE, "000000")

        with self.assertRaises(InvalidCode) as ctx:
            result.raise_for_outcome()
        self.assertEqual(ctx.exception.attempts_remaining, 4)

    def test_five_failures_lock_out_even_correct_code(self):
        self.gate.send(self.repo, PHONE)
        for _ in range(4):
            self.gate.verify(self.repo, PHONE, "000000")

        fifth = self.gate.verify(self.repo, PHONE, "000000")
        self.assertEqual(fifth.outcome, VerificationOutcome.THROTTLED)
        self.assertEqual((fifth.blocked_until - self.clock.now).total_seconds(), 15 * 60)

        sixth = self.gate.verify(self.repo, PHONE, "111111")
        self.assertEqual(sixth.outcome, VerificationOutcome.THROTTLED)
        with self.assertRaises(Throttled):
            sixth.raise_for_outcome()

    def test_lockout_blocks_send_until_expiry(self):
        self.gate.send(self.repo, PHONE)
        for _ in range(5):
            self.gate.verify(self.repo, PHONE, "000000")

        self.clock.advance(minutes=14)
        with self.assertRaises(Throttled):
            self.gate.send(self.repo, PHONE)

        self.clock.advance(minutes=1, seconds=1)
        issued = self.gate.send(self.repo, PHONE)

        self.assertEqual(issued.code, "222222")
        self.assertEqual(self.repo.verification.records[PHONE].attempts, 0)
        self.assertTrue(self.gate.verify(self.repo, PHONE, "222222").verified)

    def test_rejected_send_draws_no_code(self):
        self.gate.send(self.repo, PHONE)

        with self.assertRaises(RateLimited):
            self.gate.send(self.repo, PHONE)

        self.assertEqual(self.codes.issued, ["111111"])
        self.assertEqual(len(self.channel.outbox), 1)

    def test_send_while_locked_out_draws_no_code(self):
        self.gate.send(self.repo, PHONE)
        for _ in range(5):
            self.gate.verify(self.repo, PHONE, "000000")
        self.clock.advance(minutes=5)

        with self.assertRaises(Throttled):
            self.gate.send(self.repo, PHONE)

        self.assertEqual(self.codes.issued, ["111111"])

    def test_lost_first_send_race_is_rate_limited(self):
        """A record created by another process between load and insert."""
        store = RacingVerificationStore(competitor_code="999999", clock=self.clock)
        self.repo.verification = store

        with self.assertRaises(RateLimited):
            self.gate.send(self.repo, PHONE)

        self.assertEqual(store.records[PHONE].code, "999999")
        self.assertEqual(self.channel.outbox, [])

    def test_phone_is_trimmed(self):
        self.gate.send(self.repo, f"  {PHONE} ")

        self.assertIn(PHONE, self.repo.verification.records)
        self.assertTrue(self.gate.verify(self.repo, PHONE, "111111").verified)

    def test_concurrent_sends_issue_one_code(self):
        """Only one of many simultaneous sends for a phone gets through."""
        gate = VerificationGate(channel=self.channel, clock=self.clock)
        errors = []
        issued = []

        def worker():
            try:
                issued.append(gate.send(self.repo, PHONE))
            except RateLimited as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(issued), 1)
        self.assertEqual(len(errors), 7)


class TestKeyedLock(unittest.TestCase):

    def test_locks_are_released_after_use(self):
        locks = KeyedLock()

        with locks.hold("a"):
            self.assertEqual(len(locks), 1)

        self.assertEqual(len(locks), 0)


if __name__ == '__main__':
    unittest.main()
