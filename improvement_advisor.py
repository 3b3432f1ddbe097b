"""Improvement Advisor: turns the scorer's signals into actionable suggestions."""

from __future__ import annotations

from lexicon import (
    AFFIRMATIVE_MESSAGE,
    CERTIFICATION_TERMS,
    CERTIFICATIONS_MESSAGE,
    EXPAND_HEADLINE_MESSAGE,
    HEADLINE_SEPARATOR_MESSAGE,
    MORE_SKILLS_MESSAGE,
    QUANTIFY_MESSAGE,
)
from models import ProfileInput
from profile_strength import HEADLINE_MIN_CHARS, has_quantifier, split_skills, term_pattern

STRONG_PROFILE_THRESHOLD = 90
MIN_RECOMMENDED_SKILLS = 10

_CERTIFICATION = term_pattern(CERTIFICATION_TERMS)


def advise(profile: ProfileInput, strength: int) -> list[str]:
    """Return suggestions for *profile*, most visible issues first.

    Profiles scoring at or above the threshold get the single affirmative
    message. So does a weaker profile that trips none of the checks, so the
    list is never empty.
    """
    if strength >= STRONG_PROFILE_THRESHOLD:
        return [AFFIRMATIVE_MESSAGE]

    improvements = []
    if len(profile.headline) < HEADLINE_MIN_CHARS:
        improvements.append(EXPAND_HEADLINE_MESSAGE)
    if "|" not in profile.headline:
        improvements.append(HEADLINE_SEPARATOR_MESSAGE)
    if not (has_quantifier(profile.summary) or has_quantifier(profile.experience)):
        improvements.append(QUANTIFY_MESSAGE)
    if not (_CERTIFICATION.search(profile.summary) or _CERTIFICATION.search(profile.skills)):
        improvements.append(CERTIFICATIONS_MESSAGE)
    if len(split_skills(profile.skills)) < MIN_RECOMMENDED_SKILLS:
        improvements.append(MORE_SKILLS_MESSAGE)

    return improvements or [AFFIRMATIVE_MESSAGE]
