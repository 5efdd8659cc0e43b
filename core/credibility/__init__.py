from core.credibility.models import ScoreComponents
from core.credibility.scorer import CredibilityScorer

__all__ = ['CredibilityScorer', 'ScoreComponents']
