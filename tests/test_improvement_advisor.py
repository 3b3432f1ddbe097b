import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from improvement_advisor import advise
from lexicon import (
    AFFIRMATIVE_MESSAGE,
    CERTIFICATIONS_MESSAGE,
    EXPAND_HEADLINE_MESSAGE,
    HEADLINE_SEPARATOR_MESSAGE,
    MORE_SKILLS_MESSAGE,
    QUANTIFY_MESSAGE,
)
from models import ProfileInput
from profile_strength import score_profile
from tests.profiles import STRONG_PROFILE, WEAK_PROFILE


class ImprovementAdvisorTests(unittest.TestCase):
    def test_strong_score_gets_single_affirmative_message(self):
        self.assertEqual(advise(WEAK_PROFILE, 90), [AFFIRMATIVE_MESSAGE])

    def test_weak_profile_messages_in_fixed_order(self):
        self.assertEqual(
            advise(WEAK_PROFILE, score_profile(WEAK_PROFILE)),
            [
                EXPAND_HEADLINE_MESSAGE,
                HEADLINE_SEPARATOR_MESSAGE,
                CERTIFICATIONS_MESSAGE,
                MORE_SKILLS_MESSAGE,
            ],
        )

    def test_every_condition_triggered(self):
        profile = ProfileInput(
            headline="Engineer",
            summary="Writes code",
            experience="Wrote code for 3 years",
            skills="Java",
        )
        self.assertEqual(
            advise(profile, score_profile(profile)),
            [
                EXPAND_HEADLINE_MESSAGE,
                HEADLINE_SEPARATOR_MESSAGE,
                QUANTIFY_MESSAGE,
                CERTIFICATIONS_MESSAGE,
                MORE_SKILLS_MESSAGE,
            ],
        )

    def test_certification_in_summary_suppresses_message(self):
        profile = WEAK_PROFILE.model_copy(
            update={"summary": "Holds a PMP certification and shipped 30% faster"}
        )
        self.assertNotIn(CERTIFICATIONS_MESSAGE, advise(profile, score_profile(profile)))

    def test_low_score_with_no_triggered_checks_falls_back_to_affirmative(self):
        self.assertEqual(advise(STRONG_PROFILE, 40), [AFFIRMATIVE_MESSAGE])


if __name__ == "__main__":
    unittest.main()
