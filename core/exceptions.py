#!/usr/bin/env python3
"""
Domain exceptions for the verification gate and the document trust pipeline.

Every error carries the structured details a caller needs to build a
response (retry times, attempts left, offending media type) and the HTTP
status the web layer maps it to.
"""

from datetime import datetime
from typing import Any, Dict, Optional


class TrustSignalError(Exception):
    """Base exception for trust signal errors."""
    status_code = 500

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": str(self),
            "type": self.__class__.__name__,
        }


class Throttled(TrustSignalError):
    """Raised while a phone is locked out after too many failed attempts."""
    status_code = 429

    def __init__(self, retry_after: datetime):
        self.retry_after = retry_after
        super().__init__(
            f"Too many failed attempts. Try again after {retry_after.isoformat()}"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["retry_after"] = self.retry_after.isoformat()
        return data


class RateLimited(TrustSignalError):
    """Raised when a new code is requested inside the send cool-down."""
    status_code = 429

    def __init__(self, retry_after_seconds: int):
        self.retry_after_seconds = retry_after_seconds
        super().__init__(
            f"Please wait {retry_after_seconds} seconds before requesting another code"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["retry_after_seconds"] = self.retry_after_seconds
        return data


class InvalidCode(TrustSignalError):
    status_code = 400

    def __init__(self, attempts_remaining: int):
        self.attempts_remaining = attempts_remaining
        super().__init__(f"Invalid code. {attempts_remaining} attempt(s) remaining")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["attempts_remaining"] = self.attempts_remaining
        return data


class VerificationNotFound(TrustSignalError):
    """Raised when there is no active verification session for a phone."""
    status_code = 404

    def __init__(self, message: str = "Code not found or expired"):
        super().__init__(message)


class UnsupportedMediaType(TrustSignalError):
    status_code = 415

    def __init__(self, media_type: Optional[str]):
        self.media_type = media_type
        super().__init__(f"Unsupported media type: {media_type or 'unknown'}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["media_type"] = self.media_type
        return data


class ExtractionFailed(TrustSignalError):
    """Raised when a document cannot be read as its declared type."""
    status_code = 422

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Could not extract text from document: {reason}")


class ParticipantNotFound(TrustSignalError):
    status_code = 404

    def __init__(self, participant_id: str):
        self.participant_id = participant_id
        super().__init__(f"Participant not found: {participant_id}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["participant_id"] = self.participant_id
        return data


class ConcurrentUpdate(TrustSignalError):
    """Raised when another transaction wrote the same record first."""
    status_code = 409

    def __init__(self, message: str = "Concurrent update, please retry"):
        super().__init__(message)
