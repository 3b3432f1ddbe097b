"""Flattened text forms of an analysis result.

``format_export_text`` is what a document renderer paginates into the
downloadable report; ``format_clipboard_text`` is the single string copied
to the clipboard. Rendering and clipboard access live outside this module.
"""

from __future__ import annotations

from models import AnalysisResult, ProfileInput

REPORT_TITLE = "LinkedIn Profile Optimization Results"


def format_export_text(profile: ProfileInput, result: AnalysisResult) -> str:
    """Build the plain-text report: score, headline before/after, skills, suggestions."""
    lines = [
        REPORT_TITLE,
        "",
        f"Profile Strength: {result.profile_strength}/100",
        "",
        "Original Profile:",
        "Headline:",
        profile.headline,
        "",
        "Optimized Profile:",
        "Headline:",
        result.optimized_headline,
        "",
        "Recommended Skills:",
        ", ".join(result.recommended_skills),
        "",
        "Trending Keywords:",
        ", ".join(result.trending_keywords),
        "",
        "Suggested Improvements:",
    ]
    lines.extend(f"• {imp}" for imp in result.improvements)
    return "\n".join(lines) + "\n"


def format_clipboard_text(result: AnalysisResult) -> str:
    """Build the copy-to-clipboard text with every optimized field."""
    sections = [
        ("Professional Headline", result.optimized_headline),
        ("Summary", result.optimized_summary),
        ("Experience", result.optimized_experience),
        ("Recommended Skills", ", ".join(result.recommended_skills)),
        ("Trending Keywords", ", ".join(result.trending_keywords)),
        ("Suggested Improvements", "\n".join(f"- {imp}" for imp in result.improvements)),
    ]
    return "\n\n".join(f"{title}:\n{body}" for title, body in sections) + "\n"
