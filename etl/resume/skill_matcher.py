#!/usr/bin/env python3
"""
Skill Taxonomy Matcher - find taxonomy skills mentioned in resume text.

Each token is matched with one of two strategies:
- whole word: the token starts and ends with a word character, so a regex
  word boundary can bracket it ("go" does not match inside "google")
- containment: the token starts or ends with a symbol ("c++", "c#", ".net"),
  where a word boundary cannot sit next to the symbol, so plain substring
  containment is used
"""
import logging
import re
from typing import Callable, Dict, Iterable, List, Optional

from etl.resume.taxonomy import SkillTaxonomy

logger = logging.getLogger(__name__)

TokenMatcher = Callable[[str], bool]


def is_word_bounded(token: str) -> bool:
    """True if a regex word boundary can bracket the token on both ends."""
    return bool(token) and bool(re.match(r'\w', token[0])) and bool(re.match(r'\w', token[-1]))


def _whole_word_matcher(token: str) -> TokenMatcher:
    pattern = re.compile(r'\b' + re.escape(token) + r'\b')
    return lambda text: pattern.search(text) is not None


def _containment_matcher(token: str) -> TokenMatcher:
    return lambda text: token in text


def build_token_matcher(token: str) -> TokenMatcher:
    if is_word_bounded(token):
        return _whole_word_matcher(token)
    return _containment_matcher(token)


class SkillTaxonomyMatcher:
    """Match resume text against a skill taxonomy."""

    def __init__(self, taxonomy: Optional[SkillTaxonomy] = None):
        self.taxonomy = taxonomy or SkillTaxonomy.default()
        # Compiled once per token; the taxonomy never changes
        self._matchers: Dict[str, List[tuple]] = {
            category: [(token, build_token_matcher(token)) for token in tokens]
            for category, tokens in self.taxonomy.items()
        }

    def match(self, text: str) -> Dict[str, List[str]]:
        """
        Find skills mentioned in text, grouped by category.

        Returns:
            category -> matched tokens in taxonomy order. Categories with no
            match are left out.
        """
        if not text:
            return {}

        text_lower = text.lower()
        skills: Dict[str, List[str]] = {}

        for category, matchers in self._matchers.items():
            found = []
            for token, matches in matchers:
                if token not in found and matches(text_lower):
                    found.append(token)
            if found:
                skills[category] = found

        logger.debug(f"Matched {sum(len(v) for v in skills.values())} skills in {len(skills)} categories")
        return skills


def unique_skills(skills_by_category: Dict[str, Iterable[str]]) -> List[str]:
    """Deduplicated union of matched skills across categories, sorted."""
    return sorted({skill for skills in skills_by_category.values() for skill in skills})
