from datetime import datetime, timezone
from typing import Callable, Optional
import logging

from core.config_loader import AppConfig
from core.credibility import CredibilityScorer
from core.exceptions import ExtractionFailed, ParticipantNotFound, UnsupportedMediaType
from etl.resume.education import extract_education
from etl.resume.extractor import DocumentTextExtractor
from etl.resume.models import ExtractedProfile, TrustPipelineResult
from etl.resume.role_matcher import suggest_role_match
from etl.resume.skill_matcher import SkillTaxonomyMatcher, unique_skills
from etl.resume.taxonomy import SkillTaxonomy
from etl.resume.years_extractor import ExperienceEstimator

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResumeTrustService:
    """Run an uploaded resume through extraction, matching and scoring.

    Per-upload methods take the repository from a trust_uow() context
    manager. The service does not manage transactions itself.

    Usage:
        with trust_uow() as repo:
            service = ResumeTrustService.from_config(config)
            result = service.process_upload(repo, participant_id, content, media_type)
        # commit happens automatically
    """

    def __init__(
        self,
        extractor: Optional[DocumentTextExtractor] = None,
        matcher: Optional[SkillTaxonomyMatcher] = None,
        estimator: Optional[ExperienceEstimator] = None,
        scorer: Optional[CredibilityScorer] = None,
        recompute_policy: str = "always",
        clock: Callable[[], datetime] = _utcnow
    ):
        self.extractor = extractor or DocumentTextExtractor()
        self.matcher = matcher or SkillTaxonomyMatcher()
        self.estimator = estimator or ExperienceEstimator()
        self.scorer = scorer or CredibilityScorer()
        self.recompute_policy = recompute_policy
        self.clock = clock

    @classmethod
    def from_config(cls, config: AppConfig) -> "ResumeTrustService":
        taxonomy = None
        if config.resume.taxonomy_file:
            taxonomy = SkillTaxonomy.from_yaml(config.resume.taxonomy_file)

        return cls(
            matcher=SkillTaxonomyMatcher(taxonomy),
            estimator=ExperienceEstimator(max_plausible_years=config.resume.max_plausible_years),
            scorer=CredibilityScorer(config.scoring),
            recompute_policy=config.scoring.recompute_policy
        )

    def analyze_text(self, text: str) -> ExtractedProfile:
        """Derive skills, experience and the supplementary signals from text."""
        skills_by_category = self.matcher.match(text)
        skills = unique_skills(skills_by_category)

        return ExtractedProfile(
            skills_by_category=skills_by_category,
            unique_skills=skills,
            experience_years=self.estimator.estimate(text),
            education=extract_education(text),
            experience_mentions=self.estimator.find_mentions(text),
            role_matches=suggest_role_match(skills)
        )

    def analyze(self, content: bytes, media_type: Optional[str]) -> ExtractedProfile:
        """Extract text from a document and analyse it.

        Raises:
            UnsupportedMediaType: The media type is not PDF or DOCX
            ExtractionFailed: The document is malformed or has no text
        """
        if not self.extractor.is_supported(media_type):
            raise UnsupportedMediaType(media_type)

        text = self.extractor.extract(content, media_type)
        if not text.strip():
            raise ExtractionFailed("no extractable text")

        return self.analyze_text(text)

    def process_upload(
        self,
        repo,
        participant_id: str,
        content: bytes,
        media_type: Optional[str]
    ) -> TrustPipelineResult:
        """Analyse an upload, score it and store the result on the participant.

        The participant's skills, experience and score are replaced, not merged.

        Args:
            repo: Repository exposing `participants` (provided by UoW)
            participant_id: Participant who uploaded the document
            content: Document bytes
            media_type: Declared media type

        Raises:
            UnsupportedMediaType, ExtractionFailed, ParticipantNotFound
        """
        profile = self.analyze(content, media_type)

        components = self.scorer.score_participant(
            repo,
            participant_id,
            skill_count=len(profile.unique_skills),
            experience_years=profile.experience_years
        )

        processed_at = self.clock()
        repo.participants.update_trust_profile(
            participant_id,
            skills=profile.unique_skills,
            experience_years=profile.experience_years,
            credibility_score=components.total,
            resume_uploaded_at=processed_at
        )

        logger.info(
            f"Processed resume for participant {participant_id}: "
            f"{len(profile.unique_skills)} skills, {profile.experience_years} years, score {components.total}"
        )

        return TrustPipelineResult(
            participant_id=participant_id,
            profile=profile,
            components=components,
            processed_at=processed_at
        )

    def refresh_score(self, repo, participant_id: str) -> int:
        """Rescore a participant from the skills and experience already stored.

        With recompute_policy "if_unscored", a participant who already has a
        non-zero score keeps it.

        Raises:
            ParticipantNotFound: No participant with this id
        """
        participant = repo.participants.get_by_participant_id(participant_id)
        if participant is None:
            raise ParticipantNotFound(participant_id)

        stored_score = participant.credibility_score or 0
        if self.recompute_policy == "if_unscored" and stored_score > 0:
            logger.debug(f"Participant {participant_id} already scored ({stored_score}), skipping")
            return stored_score

        components = self.scorer.score(
            financially_trusted=bool(participant.is_bank_connected),
            skill_count=len(participant.skills or []),
            experience_years=participant.experience_years or 0
        )

        if components.total != stored_score:
            repo.participants.update_credibility_score(participant_id, components.total)
            logger.info(f"Credibility score for {participant_id} changed {stored_score} -> {components.total}")

        return components.total
