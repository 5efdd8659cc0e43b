#!/usr/bin/env python3
"""
Experience Estimator - Estimate total years of experience from resume text.

Two candidate sources:
1. Explicit claims: "5 years", "8+ years"
2. Date ranges: "2018 - 2022", "2018 - Present"

The longest single claim or span wins. Spans are not summed, since
concurrent roles would be counted twice.
"""
from datetime import datetime, timezone
from typing import Callable, List, Optional
import re
import logging

logger = logging.getLogger(__name__)


PRESENT_MARKERS = ('present', 'current', 'now')

MONTHS = (
    'january|february|march|april|may|june|july|august|september|october|november|december'
)


def _current_year() -> int:
    return datetime.now(timezone.utc).year


class ExperienceEstimator:
    """Heuristic years-of-experience estimate from free text."""

    YEARS_CLAIM_PATTERN = re.compile(
        r'\b(\d{1,4})\s*\+?\s*years?\b',
        re.IGNORECASE
    )

    DATE_RANGE_PATTERN = re.compile(
        r'\b(\d{4})\s*(?:-|–|—|to)\s*(present|current|now|\d{4})\b',
        re.IGNORECASE
    )

    MONTH_YEAR_PATTERN = re.compile(
        rf'\b(?:{MONTHS})\s+\d{{4}}\b',
        re.IGNORECASE
    )

    def __init__(
        self,
        max_plausible_years: int = 40,
        current_year: Callable[[], int] = _current_year
    ):
        self.max_plausible_years = max_plausible_years
        self.current_year = current_year

    def _claimed_years(self, text: str) -> List[int]:
        values = []
        for match in self.YEARS_CLAIM_PATTERN.finditer(text):
            years = int(match.group(1))
            if years < self.max_plausible_years:
                values.append(years)
        return values

    def _range_spans(self, text: str, current_year: int) -> List[int]:
        values = []
        for match in self.DATE_RANGE_PATTERN.finditer(text):
            start = int(match.group(1))
            end_part = match.group(2).lower()
            end = current_year if end_part in PRESENT_MARKERS else int(end_part)

            span = end - start
            if 0 <= span < self.max_plausible_years:
                values.append(span)
        return values

    def estimate(self, text: str, current_year: Optional[int] = None) -> int:
        """
        Estimate total years of experience.

        Args:
            text: Resume text
            current_year: Year used for "present" markers; defaults to the clock

        Returns:
            Largest plausible claim or span, 0 when none found
        """
        if not text:
            return 0

        if current_year is None:
            current_year = self.current_year()

        candidates = self._claimed_years(text) + self._range_spans(text, current_year)

        if not candidates:
            return 0

        years = max(candidates)
        logger.debug(f"Estimated {years} years of experience from {len(candidates)} candidates")
        return years

    def find_mentions(self, text: str) -> List[str]:
        """Raw experience phrases (claims, ranges, "Month YYYY" dates) in text order."""
        if not text:
            return []

        spans = []
        for pattern in (self.YEARS_CLAIM_PATTERN, self.DATE_RANGE_PATTERN, self.MONTH_YEAR_PATTERN):
            for match in pattern.finditer(text):
                spans.append((match.start(), match.group(0)))

        return [phrase for _, phrase in sorted(spans)]
