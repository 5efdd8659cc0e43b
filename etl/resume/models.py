#!/usr/bin/env python3
"""
Resume Analysis Models - results of analysing an uploaded document.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from core.credibility.models import ScoreComponents


@dataclass
class ExtractedProfile:
    """Everything read from one document, before scoring.

    Attributes:
        skills_by_category: category -> matched skills (non-empty categories only)
        unique_skills: deduplicated, sorted union of all matched skills
        experience_years: best single estimate of total experience
        education: education markers found in the text
        experience_mentions: raw experience phrases, for display
        role_matches: role name -> 0-100 fit
    """
    skills_by_category: Dict[str, List[str]]
    unique_skills: List[str]
    experience_years: int
    education: List[str] = field(default_factory=list)
    experience_mentions: List[str] = field(default_factory=list)
    role_matches: Dict[str, int] = field(default_factory=dict)


@dataclass
class TrustPipelineResult:
    """Outcome of a successful upload: what was stored on the participant."""
    participant_id: str
    profile: ExtractedProfile
    components: ScoreComponents
    processed_at: Optional[datetime] = None

    @property
    def score(self) -> int:
        return self.components.total

    @property
    def unique_skills(self) -> List[str]:
        return self.profile.unique_skills

    @property
    def experience_years(self) -> int:
        return self.profile.experience_years
