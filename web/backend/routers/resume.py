#!/usr/bin/env python3
"""
Resume endpoints - upload a resume and refresh credibility scores.
"""

import logging
from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from core.config_loader import AppConfig
from etl.orchestrator import ResumeTrustService
from ..dependencies import get_config, get_resume_service, get_uow
from ..models.responses import CredibilityResponse, ResumeUploadResponse, ScoreComponentsResponse

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(tags=["resume"])


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": str(exc)}
    )


@router.post("/api/resume/upload", response_model=ResumeUploadResponse)
@limiter.limit("5/minute")
async def upload_resume_endpoint(
    request: Request,
    file: UploadFile = File(...),
    participant_id: str = Form(...),
    service: ResumeTrustService = Depends(get_resume_service),
    uow=Depends(get_uow),
    config: AppConfig = Depends(get_config)
):
    """
    Upload a resume and update the participant's trust profile.
    Supports: PDF and DOCX.

    The file is processed in memory - never written to disk.
    """
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="Empty file")

    max_bytes = config.resume.max_upload_bytes
    if len(content) > max_bytes:
        raise HTTPException(status_code=400, detail=f"File size exceeds {max_bytes // (1024 * 1024)}MB limit")

    with uow() as repo:
        result = service.process_upload(repo, participant_id, content, file.content_type)

    return ResumeUploadResponse(
        success=True,
        participant_id=participant_id,
        skills=result.unique_skills,
        experience_years=result.experience_years,
        score=result.score,
        components=ScoreComponentsResponse(**result.components.to_dict()),
        education=result.profile.education,
        experience_mentions=result.profile.experience_mentions,
        role_matches=result.profile.role_matches,
        message="Resume processed and profile updated successfully"
    )


@router.post(
    "/api/participants/{participant_id}/credibility/refresh",
    response_model=CredibilityResponse
)
def refresh_credibility(
    participant_id: str,
    service: ResumeTrustService = Depends(get_resume_service),
    uow=Depends(get_uow)
):
    """
    Recompute a participant's score from their stored profile, following
    the configured recompute policy.
    """
    with uow() as repo:
        score = service.refresh_score(repo, participant_id)

    return CredibilityResponse(participant_id=participant_id, score=score)
