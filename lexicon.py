"""Static word lists used by the rewriter, skill extractor and advisor.

Pure data. Every table here is immutable so the analysis functions stay
free of shared mutable state.
"""

from __future__ import annotations

from types import MappingProxyType

# Weak phrase (lowercase) -> canonical strong replacement
WEAK_TO_STRONG = MappingProxyType({
    "managed": "led",
    "responsible for": "spearheaded",
    "helped": "collaborated",
    "did": "executed",
    "made": "developed",
    "worked on": "delivered",
    "good": "exceptional",
    "great": "outstanding",
    "handled": "orchestrated",
    "tried": "implemented",
    "attempted": "pioneered",
})

TECHNICAL_SKILLS: tuple[str, ...] = (
    "JavaScript", "React", "Node.js", "Python", "AWS", "Azure", "GCP",
    "Machine Learning", "Data Analysis", "SQL", "NoSQL", "Docker", "Kubernetes",
    "CI/CD", "Git", "REST API", "GraphQL", "TypeScript", "Java", "C#",
)

SOFT_SKILLS: tuple[str, ...] = (
    "Leadership", "Communication", "Problem Solving", "Project Management",
    "Team Building", "Strategic Planning", "Agile", "Scrum", "Innovation",
    "Stakeholder Management", "Cross-functional Collaboration",
)

# Always appended to the recommendations, after whatever was extracted
FALLBACK_SKILLS: tuple[str, ...] = (
    "Strategic Planning",
    "Team Leadership",
    "Digital Transformation",
    "Agile Methodologies",
    "Stakeholder Management",
)

TRENDING_KEYWORDS: tuple[str, ...] = (
    "Digital Transformation",
    "AI/ML",
    "Cloud Architecture",
    "Agile Leadership",
    "Innovation Strategy",
    "Data-Driven Decision Making",
)

# ─── Scoring term groups ────────────────────────────────────────────────────────

SENIORITY_TERMS = ("lead", "senior", "manager", "architect", "expert")
CREDIBILITY_TERMS = ("certified", "award", "recognized")
ACHIEVEMENT_VERBS = ("achieved", "delivered", "improved", "increased", "reduced")
LEADERSHIP_VERBS = ("led", "managed", "developed", "created")
EXPERIENCE_SUBSTANCE_TERMS = ("responsibility", "achievement", "project")
COLLABORATION_TERMS = ("team", "client", "stakeholder")
SKILL_CREDENTIAL_TERMS = ("certified", "expert", "advanced")
SKILL_LEADERSHIP_TERMS = ("lead", "architect", "manager")
CERTIFICATION_TERMS = ("certified", "certification")

# ─── Advisor messages ───────────────────────────────────────────────────────────

AFFIRMATIVE_MESSAGE = (
    "Your profile is well-optimized! Consider keeping it updated "
    "with new achievements and skills."
)
EXPAND_HEADLINE_MESSAGE = "Expand your headline with key achievements and specializations"
HEADLINE_SEPARATOR_MESSAGE = (
    "Use vertical bars (|) to separate key roles or expertise areas in headline"
)
QUANTIFY_MESSAGE = "Add quantifiable achievements (e.g., percentages, monetary values)"
CERTIFICATIONS_MESSAGE = "Include relevant certifications or professional qualifications"
MORE_SKILLS_MESSAGE = (
    "List more relevant technical and soft skills (aim for 10-15 key skills)"
)
