#!/usr/bin/env python3
"""
Verification endpoints - send and check one-time codes.
"""

import logging
from fastapi import APIRouter, Depends

from core.config_loader import AppConfig
from core.verification import VerificationGate
from ..dependencies import get_config, get_uow, get_verification_gate
from ..models.requests import SendCodeRequest, VerifyCodeRequest
from ..models.responses import SendCodeResponse, VerifyCodeResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/verification", tags=["verification"])


@router.post("/send", response_model=SendCodeResponse)
def send_code(
    body: SendCodeRequest,
    gate: VerificationGate = Depends(get_verification_gate),
    uow=Depends(get_uow),
    config: AppConfig = Depends(get_config)
):
    """
    Issue a one-time code for a phone number.

    Fails with 429 while the phone is locked out, or when a code was sent
    less than a minute ago.
    """
    with uow() as repo:
        issued = gate.send(repo, body.phone)

    return SendCodeResponse(
        success=True,
        message="Code sent successfully",
        code=issued.code if config.verification.expose_code else None
    )


@router.post("/verify", response_model=VerifyCodeResponse)
def verify_code(
    body: VerifyCodeRequest,
    gate: VerificationGate = Depends(get_verification_gate),
    uow=Depends(get_uow)
):
    """
    Check a one-time code.

    Failed attempts are committed before the error response is produced,
    so the attempt counter survives the failure.
    """
    with uow() as repo:
        result = gate.verify(repo, body.phone, body.code)

    result.raise_for_outcome()

    return VerifyCodeResponse(success=True, message="Code verified successfully")
