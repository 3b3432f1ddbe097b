import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from models import ProfileInput
from profile_strength import has_quantifier, score_breakdown, score_profile, split_skills
from tests.profiles import STRONG_PROFILE, WEAK_PROFILE


def _profile(**fields) -> ProfileInput:
    base = {"headline": "x", "summary": "x", "experience": "x", "skills": "x"}
    base.update(fields)
    return ProfileInput(**base)


class QuantifierTests(unittest.TestCase):
    def test_percentages_and_dollar_amounts(self):
        self.assertTrue(has_quantifier("improving results by 20%"))
        self.assertTrue(has_quantifier("20% growth"))
        self.assertTrue(has_quantifier("saved $1,200,000 a year"))
        self.assertTrue(has_quantifier("budget of $500"))

    def test_plain_numbers_are_not_quantifiers(self):
        self.assertFalse(has_quantifier("for 3 years with 12 people"))
        self.assertFalse(has_quantifier("costs in $ were unclear"))


class SplitSkillsTests(unittest.TestCase):
    def test_comma_and_semicolon_delimiters(self):
        self.assertEqual(split_skills("Java, Python;SQL;  Go"), ["Java", "Python", "SQL", "Go"])

    def test_trailing_delimiter_counts_as_token(self):
        self.assertEqual(len(split_skills("Java, Python,")), 3)


class StrengthScorerTests(unittest.TestCase):
    def test_headline_length_boundary(self):
        self.assertEqual(score_breakdown(_profile(headline="a" * 49)).headline, 0)
        self.assertEqual(score_breakdown(_profile(headline="a" * 50)).headline, 10)

    def test_summary_length_boundary(self):
        self.assertEqual(score_breakdown(_profile(summary="a" * 199)).summary, 0)
        self.assertEqual(score_breakdown(_profile(summary="a" * 200)).summary, 10)

    def test_experience_length_boundary(self):
        self.assertEqual(score_breakdown(_profile(experience="a" * 299)).experience, 0)
        self.assertEqual(score_breakdown(_profile(experience="a" * 300)).experience, 10)

    def test_headline_signals(self):
        self.assertEqual(score_breakdown(_profile(headline="Tech | Data")).headline, 5)
        self.assertEqual(score_breakdown(_profile(headline="Senior engineer")).headline, 5)
        self.assertEqual(score_breakdown(_profile(headline="AWS certified")).headline, 5)
        # "leader" is not the whole word "lead"
        self.assertEqual(score_breakdown(_profile(headline="Thought leader")).headline, 0)

    def test_summary_signals(self):
        breakdown = score_breakdown(_profile(summary="Increased revenue by 15% and led sales"))
        self.assertEqual(breakdown.summary, 15)

    def test_experience_signals(self):
        breakdown = score_breakdown(_profile(experience="Client project worth $40,000"))
        self.assertEqual(breakdown.experience, 15)

    def test_skills_points_per_token_capped(self):
        self.assertEqual(score_breakdown(_profile(skills="A, B, C")).skills, 6)
        many = ", ".join(f"Skill{i}" for i in range(20))
        self.assertEqual(score_breakdown(_profile(skills=many)).skills, 15)

    def test_skills_credential_and_leadership_terms(self):
        breakdown = score_breakdown(_profile(skills="Advanced SQL, Team Lead"))
        self.assertEqual(breakdown.skills, 4 + 5 + 5)

    def test_weak_profile_breakdown(self):
        breakdown = score_breakdown(WEAK_PROFILE)
        self.assertEqual(
            (breakdown.headline, breakdown.summary, breakdown.experience, breakdown.skills),
            (0, 10, 5, 4),
        )
        self.assertEqual(score_profile(WEAK_PROFILE), 19)

    def test_strong_profile_scores_full_marks(self):
        breakdown = score_breakdown(STRONG_PROFILE)
        self.assertEqual(breakdown.to_dict(), {
            "headline": 25, "summary": 25, "experience": 25, "skills": 25, "total": 100,
        })

    def test_deterministic(self):
        self.assertEqual(score_profile(STRONG_PROFILE), score_profile(STRONG_PROFILE))
        self.assertEqual(score_profile(WEAK_PROFILE), score_profile(WEAK_PROFILE))


if __name__ == "__main__":
    unittest.main()
