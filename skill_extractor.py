"""Skill Extractor: finds catalogue skills mentioned in free text.

Pure Python, no NLP models. Each catalogue entry is matched as a whole
phrase, case-insensitively, and reported once in catalogue order.
"""

from __future__ import annotations

import re

from lexicon import SOFT_SKILLS, TECHNICAL_SKILLS
from rewriter import phrase_regex

SKILL_CATALOGUE: tuple[str, ...] = TECHNICAL_SKILLS + SOFT_SKILLS

_SKILL_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (skill, re.compile(phrase_regex(skill), re.IGNORECASE))
    for skill in SKILL_CATALOGUE
)


def extract_skills(text: str) -> list[str]:
    """Return the catalogue skills present in *text*.

    Args:
        text: Any free text, typically several profile fields joined together.

    Returns:
        Canonically-cased skill names, technical skills before soft skills,
        each appearing at most once.
    """
    if not text:
        return []
    return [skill for skill, pattern in _SKILL_PATTERNS if pattern.search(text)]


def merge_unique(*groups: list[str] | tuple[str, ...]) -> list[str]:
    """Concatenate *groups*, dropping exact duplicates (first occurrence wins)."""
    return list(dict.fromkeys(item for group in groups for item in group))
