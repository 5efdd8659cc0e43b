#!/usr/bin/env python3
"""
Resume Analysis Module - turn an uploaded resume into trust signals.

Handles:
- Text extraction from PDF and DOCX uploads
- Skill matching against the skill taxonomy
- Years-of-experience estimation
- Education markers and role-fit suggestions
"""
from etl.resume.extractor import DocumentTextExtractor
from etl.resume.models import ExtractedProfile, TrustPipelineResult
from etl.resume.skill_matcher import SkillTaxonomyMatcher, unique_skills
from etl.resume.taxonomy import SkillTaxonomy
from etl.resume.years_extractor import ExperienceEstimator

__all__ = [
    'DocumentTextExtractor',
    'ExtractedProfile',
    'TrustPipelineResult',
    'SkillTaxonomyMatcher',
    'SkillTaxonomy',
    'ExperienceEstimator',
    'unique_skills',
]
