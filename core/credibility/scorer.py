#!/usr/bin/env python3
"""
Credibility Scorer - fold financial linkage, skill breadth and experience
into a bounded 0-100 score.

Components:
- base: always awarded for an active account
- financial_trust: awarded when a financial account is connected
- skill_depth: step award once the skill count reaches the threshold
- experience: linear per year, capped
"""

import logging
from typing import Optional

from core.config_loader import ScoringConfig
from core.credibility.models import ScoreComponents
from core.exceptions import ParticipantNotFound

logger = logging.getLogger(__name__)


class CredibilityScorer:

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def score(
        self,
        financially_trusted: bool,
        skill_count: int,
        experience_years: int
    ) -> ScoreComponents:
        """Compute the score and its breakdown. Pure."""
        cfg = self.config
        skill_count = max(0, int(skill_count))
        experience_years = max(0, int(experience_years))

        base = cfg.base_points
        financial_trust = cfg.financial_trust_points if financially_trusted else 0
        skill_depth = cfg.skill_depth_points if skill_count >= cfg.skill_depth_threshold else 0
        experience = min(experience_years * cfg.points_per_year, cfg.max_experience_points)

        total = min(base + financial_trust + skill_depth + experience, cfg.max_score)

        return ScoreComponents(
            base=base,
            financial_trust=financial_trust,
            skill_depth=skill_depth,
            experience=experience,
            total=total
        )

    def score_participant(
        self,
        repo,
        participant_id: str,
        skill_count: int,
        experience_years: int
    ) -> ScoreComponents:
        """Score a stored participant, reading their financial-trust flag.

        Raises:
            ParticipantNotFound: No participant with this id. Scoring is
                aborted rather than treating the participant as untrusted.
        """
        participant = repo.participants.get_by_participant_id(participant_id)
        if participant is None:
            raise ParticipantNotFound(participant_id)

        components = self.score(
            financially_trusted=bool(participant.is_bank_connected),
            skill_count=skill_count,
            experience_years=experience_years
        )

        logger.debug(
            f"Scored participant {participant_id}: {components.total} "
            f"(base={components.base}, financial={components.financial_trust}, "
            f"skills={components.skill_depth}, experience={components.experience})"
        )
        return components
