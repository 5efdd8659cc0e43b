#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field


class SendCodeRequest(BaseModel):
    """Request a one-time code for a phone."""
    phone: str = Field(..., min_length=1, max_length=32, description="Phone number to verify")


class VerifyCodeRequest(BaseModel):
    """Check a one-time code."""
    phone: str = Field(..., min_length=1, max_length=32, description="Phone number the code was sent to")
    code: str = Field(..., min_length=1, max_length=16, description="Code received by SMS")
