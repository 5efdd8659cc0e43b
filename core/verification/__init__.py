#!/usr/bin/env python3
"""
Verification Module - one-time codes bound to phone numbers.

Public API:
- VerificationGate: send/verify with cool-down and lockout
- VerificationState: immutable snapshot of a phone's record
- VerificationResult / VerificationOutcome: structured verify result
- IssuedCode: code + stored state returned by send

- models.py: Data structures
- state.py: Pure state transitions
- locks.py: Per-key serialisation
- gate.py: VerificationGate orchestrator
"""

from core.verification.models import (
    IssuedCode,
    VerificationOutcome,
    VerificationResult,
    VerificationState,
)
from core.verification.gate import VerificationGate

__all__ = [
    'VerificationGate',
    'VerificationState',
    'VerificationResult',
    'VerificationOutcome',
    'IssuedCode',
]
