#!/usr/bin/env python3
"""
Skill Taxonomy - categorised dictionary of recognised skill tokens.

The taxonomy is immutable once built. The matcher receives it at
construction, so tests can hand it a smaller one.
"""
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

import yaml

logger = logging.getLogger(__name__)


DEFAULT_SKILL_CATEGORIES: Dict[str, List[str]] = {
    "Programming Languages": [
        "python", "java", "javascript", "c++", "c#", "ruby", "php", "swift",
        "kotlin", "r", "matlab", "typescript", "go", "rust",
    ],
    "Web Development": [
        "html", "css", "react", "angular", "vue", "node.js", "django", "flask",
        "asp.net", "next.js", "express", "tailwind",
    ],
    "Database": [
        "sql", "mysql", "postgresql", "mongodb", "oracle", "redis",
        "elasticsearch", "firebase", "dynamodb",
    ],
    "Cloud": [
        "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "jenkins", "circleci",
    ],
    "Machine Learning": [
        "tensorflow", "pytorch", "scikit-learn", "keras", "opencv", "nlp",
        "computer vision", "pandas", "numpy",
    ],
    "Tools": [
        "git", "github", "gitlab", "jira", "confluence", "slack", "postman",
        "swagger", "figma", "vscode",
    ],
    "Soft Skills": [
        "leadership", "communication", "teamwork", "problem solving", "analytical",
        "project management", "agile", "scrum",
    ],
}


@dataclass(frozen=True)
class SkillTaxonomy:
    """Read-only mapping of category -> ordered tuple of lowercase tokens."""
    categories: Mapping[str, Tuple[str, ...]]

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[str]]) -> "SkillTaxonomy":
        """Build a taxonomy, lowercasing tokens and dropping duplicates in order."""
        categories = {}
        for category, tokens in data.items():
            seen = []
            for token in tokens:
                token = str(token).strip().lower()
                if token and token not in seen:
                    seen.append(token)
            categories[str(category)] = tuple(seen)
        return cls(categories=MappingProxyType(categories))

    @classmethod
    def from_yaml(cls, path: str) -> "SkillTaxonomy":
        """Load a taxonomy from a YAML mapping of category -> list of skills.

        Raises:
            ValueError: If the file is not a mapping of lists
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict) or not all(isinstance(v, list) for v in data.values()):
            raise ValueError(f"Skill taxonomy in {path} must map category names to lists of skills")

        taxonomy = cls.from_dict(data)
        logger.info(f"Loaded skill taxonomy from {path} ({len(taxonomy)} categories)")
        return taxonomy

    @classmethod
    def default(cls) -> "SkillTaxonomy":
        return cls.from_dict(DEFAULT_SKILL_CATEGORIES)

    def items(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        return iter(self.categories.items())

    def __len__(self) -> int:
        return len(self.categories)
