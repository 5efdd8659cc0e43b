#!/usr/bin/env python3
"""
Credibility Models - Data structures for score results.
"""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class ScoreComponents:
    """Breakdown of a credibility score. total is the capped sum."""
    base: int = 0
    financial_trust: int = 0
    skill_depth: int = 0
    experience: int = 0
    total: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)
