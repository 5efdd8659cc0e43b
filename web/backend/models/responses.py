#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict


class SendCodeResponse(BaseModel):
    """Response for a code send request."""
    success: bool
    message: str
    # Only populated when verification.expose_code is enabled
    code: Optional[str] = None


class VerifyCodeResponse(BaseModel):
    success: bool
    message: str


class ScoreComponentsResponse(BaseModel):
    base: int = Field(ge=0)
    financial_trust: int = Field(ge=0)
    skill_depth: int = Field(ge=0)
    experience: int = Field(ge=0)
    total: int = Field(ge=0)


class ResumeUploadResponse(BaseModel):
    """Result of processing an uploaded resume."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "participant_id": "FL-1001",
                "skills": ["docker", "python", "sql"],
                "experience_years": 6,
                "score": 50,
                "components": {
                    "base": 20,
                    "financial_trust": 0,
                    "skill_depth": 0,
                    "experience": 30,
                    "total": 50
                },
                "education": ["bachelor", "university"],
                "role_matches": {"Software Engineer": 20},
                "message": "Resume processed and profile updated successfully"
            }
        }
    )

    success: bool
    participant_id: str
    skills: List[str]
    experience_years: int = Field(ge=0)
    score: int = Field(ge=0)
    components: ScoreComponentsResponse
    education: List[str] = Field(default_factory=list)
    experience_mentions: List[str] = Field(default_factory=list)
    role_matches: Dict[str, int] = Field(default_factory=dict)
    message: str


class CredibilityResponse(BaseModel):
    participant_id: str
    score: int = Field(ge=0)
