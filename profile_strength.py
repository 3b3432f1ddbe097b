"""Profile Strength Scorer: pure Python heuristics, no LLM calls.

Scores a profile out of 100 across four equally weighted sections:
- Headline: length, separator, seniority and credibility terms
- Summary: length, achievement verbs, quantified results, leadership verbs
- Experience: length, substance terms, quantified results, collaboration terms
- Skills: number of listed skills, credential and leadership terms
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass

from lexicon import (
    ACHIEVEMENT_VERBS,
    COLLABORATION_TERMS,
    CREDIBILITY_TERMS,
    EXPERIENCE_SUBSTANCE_TERMS,
    LEADERSHIP_VERBS,
    SENIORITY_TERMS,
    SKILL_CREDENTIAL_TERMS,
    SKILL_LEADERSHIP_TERMS,
)
from models import ProfileInput

MAX_SCORE = 100

HEADLINE_MIN_CHARS = 50
SUMMARY_MIN_CHARS = 200
EXPERIENCE_MIN_CHARS = 300

LENGTH_POINTS = 10
SIGNAL_POINTS = 5
POINTS_PER_SKILL = 2
SKILL_COUNT_CAP = 15

# A whole number followed by %, or a dollar amount with optional comma grouping
QUANTIFIER_PATTERN = re.compile(r"(?<![\w.])\d+%|(?<!\w)\$\d[\d,]*")
SKILL_DELIMITER = re.compile(r"[,;]\s*")


def term_pattern(terms: tuple[str, ...]) -> re.Pattern:
    """Compile a case-insensitive, word-bounded alternation of *terms*."""
    return re.compile(r"\b(?:" + "|".join(map(re.escape, terms)) + r")\b", re.IGNORECASE)


_SENIORITY = term_pattern(SENIORITY_TERMS)
_CREDIBILITY = term_pattern(CREDIBILITY_TERMS)
_ACHIEVEMENT = term_pattern(ACHIEVEMENT_VERBS)
_LEADERSHIP = term_pattern(LEADERSHIP_VERBS)
_SUBSTANCE = term_pattern(EXPERIENCE_SUBSTANCE_TERMS)
_COLLABORATION = term_pattern(COLLABORATION_TERMS)
_SKILL_CREDENTIAL = term_pattern(SKILL_CREDENTIAL_TERMS)
_SKILL_LEADERSHIP = term_pattern(SKILL_LEADERSHIP_TERMS)


@dataclass(frozen=True)
class StrengthBreakdown:
    headline: int
    summary: int
    experience: int
    skills: int

    @property
    def total(self) -> int:
        return min(self.headline + self.summary + self.experience + self.skills, MAX_SCORE)

    def to_dict(self) -> dict:
        """Serialize to a plain dict (for JSON responses)."""
        return {**asdict(self), "total": self.total}


def has_quantifier(text: str) -> bool:
    """True if *text* contains a percentage or a dollar amount."""
    return bool(QUANTIFIER_PATTERN.search(text))


def split_skills(skills: str) -> list[str]:
    """Split the serialized skills field into its tokens.

    Tokens are not trimmed or filtered, so a trailing delimiter still counts
    as an (empty) token.
    """
    return SKILL_DELIMITER.split(skills)


def _headline_score(headline: str) -> int:
    points = 0
    if len(headline) >= HEADLINE_MIN_CHARS:
        points += LENGTH_POINTS
    if "|" in headline:
        points += SIGNAL_POINTS
    if _SENIORITY.search(headline):
        points += SIGNAL_POINTS
    if _CREDIBILITY.search(headline):
        points += SIGNAL_POINTS
    return points


def _summary_score(summary: str) -> int:
    points = 0
    if len(summary) >= SUMMARY_MIN_CHARS:
        points += LENGTH_POINTS
    if _ACHIEVEMENT.search(summary):
        points += SIGNAL_POINTS
    if has_quantifier(summary):
        points += SIGNAL_POINTS
    if _LEADERSHIP.search(summary):
        points += SIGNAL_POINTS
    return points


def _experience_score(experience: str) -> int:
    points = 0
    if len(experience) >= EXPERIENCE_MIN_CHARS:
        points += LENGTH_POINTS
    if _SUBSTANCE.search(experience):
        points += SIGNAL_POINTS
    if has_quantifier(experience):
        points += SIGNAL_POINTS
    if _COLLABORATION.search(experience):
        points += SIGNAL_POINTS
    return points


def _skills_score(skills: str) -> int:
    tokens = split_skills(skills)
    points = min(len(tokens) * POINTS_PER_SKILL, SKILL_COUNT_CAP)
    if any(_SKILL_CREDENTIAL.search(t) for t in tokens):
        points += SIGNAL_POINTS
    if any(_SKILL_LEADERSHIP.search(t) for t in tokens):
        points += SIGNAL_POINTS
    return points


def score_breakdown(profile: ProfileInput) -> StrengthBreakdown:
    """Score each profile section independently (each out of 25)."""
    return StrengthBreakdown(
        headline=_headline_score(profile.headline),
        summary=_summary_score(profile.summary),
        experience=_experience_score(profile.experience),
        skills=_skills_score(profile.skills),
    )


def score_profile(profile: ProfileInput) -> int:
    """Overall profile strength, 0-100."""
    return score_breakdown(profile).total
