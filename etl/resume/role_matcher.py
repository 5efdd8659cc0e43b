#!/usr/bin/env python3
"""
Role Matcher - suggest how well a skill set fits common job roles.

Score per role = required coverage * 0.7 + nice-to-have coverage * 0.3,
scaled to 0-100 and rounded half up.
"""
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class RoleProfile:
    required_skills: Tuple[str, ...]
    good_to_have: Tuple[str, ...]


JOB_ROLES: Dict[str, RoleProfile] = {
    "Software Engineer": RoleProfile(
        required_skills=("python", "java", "javascript", "sql", "git", "algorithms", "data structures"),
        good_to_have=("docker", "kubernetes", "aws", "ci/cd", "agile", "react", "node.js"),
    ),
    "Data Scientist": RoleProfile(
        required_skills=("python", "r", "sql", "machine learning", "statistics", "data analysis"),
        good_to_have=("tensorflow", "pytorch", "big data", "spark", "tableau", "pandas"),
    ),
    "Web Developer": RoleProfile(
        required_skills=("html", "css", "javascript", "react", "node.js", "responsive design"),
        good_to_have=("typescript", "vue", "angular", "webpack", "sass", "next.js"),
    ),
    "DevOps Engineer": RoleProfile(
        required_skills=("linux", "aws", "docker", "kubernetes", "jenkins", "terraform"),
        good_to_have=("python", "ansible", "prometheus", "elk stack", "nginx", "bash"),
    ),
}

REQUIRED_WEIGHT = 0.7
GOOD_TO_HAVE_WEIGHT = 0.3


def _coverage(wanted: Tuple[str, ...], have: set) -> float:
    if not wanted:
        return 0.0
    return sum(1 for skill in wanted if skill in have) / len(wanted)


def suggest_role_match(
    skills: Iterable[str],
    roles: Optional[Dict[str, RoleProfile]] = None
) -> Dict[str, int]:
    """Score each role 0-100 against a set of skills."""
    roles = roles if roles is not None else JOB_ROLES
    have = {skill.lower() for skill in skills}

    return {
        role: int(math.floor(
            (_coverage(profile.required_skills, have) * REQUIRED_WEIGHT
             + _coverage(profile.good_to_have, have) * GOOD_TO_HAVE_WEIGHT) * 100 + 0.5
        ))
        for role, profile in roles.items()
    }
