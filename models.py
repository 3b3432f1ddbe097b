"""
Pydantic models for the profile analysis input and result.

``ProfileInput`` is what the form (or API client, or CLI) submits;
``AnalysisResult`` is what the presentation layer renders. Both are
request-scoped value objects.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PROFILE_FIELDS: tuple[str, ...] = ("headline", "summary", "experience", "skills")


class ProfileValidationError(ValueError):
    """Raised when one or more required profile fields are empty or missing."""

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__(
            f"Required profile field(s) are empty: {', '.join(self.fields)}"
        )


# ─── Input ──────────────────────────────────────────────────────────────────────


class ProfileInput(BaseModel):
    """The four free-text profile fields as submitted."""

    model_config = ConfigDict(frozen=True)

    headline: str = ""
    summary: str = ""
    experience: str = ""
    skills: str = Field(
        default="",
        description="Comma- or semicolon-delimited skill list",
    )

    def missing_fields(self) -> list[str]:
        """Names of fields that are empty or whitespace-only, in form order."""
        return [name for name in PROFILE_FIELDS if not getattr(self, name).strip()]

    def validate_required(self) -> None:
        """Verify every field has content.

        Raises:
            ProfileValidationError: If any field is empty.
        """
        missing = self.missing_fields()
        if missing:
            raise ProfileValidationError(missing)


# ─── Output ─────────────────────────────────────────────────────────────────────


class AnalysisResult(BaseModel):
    """Rewritten fields, score, recommendations and suggestions for one profile.

    Serializes with camelCase keys (``model_dump(by_alias=True)``) for the
    browser front end.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    optimized_headline: str
    optimized_summary: str
    optimized_experience: str
    recommended_skills: list[str]
    profile_strength: int = Field(ge=0, le=100)
    trending_keywords: list[str]
    improvements: list[str] = Field(min_length=1)
