"""Education markers found in resume text."""
import re
from typing import List

EDUCATION_PATTERNS = [
    re.compile(r'\b(?:bachelor|master|phd|b\.?tech|m\.?tech|b\.?e|m\.?e|b\.?sc|m\.?sc)\b', re.IGNORECASE),
    re.compile(r'\buniversity\b', re.IGNORECASE),
    re.compile(r'\bcollege\b', re.IGNORECASE),
    re.compile(r'\bdegree\b', re.IGNORECASE),
]


def extract_education(text: str) -> List[str]:
    """Unique lowercased education markers, in order of first appearance."""
    if not text:
        return []

    found = []
    for pattern in EDUCATION_PATTERNS:
        for match in pattern.finditer(text):
            found.append((match.start(), match.group(0).lower()))

    markers: List[str] = []
    for _, marker in sorted(found):
        if marker not in markers:
            markers.append(marker)
    return markers
