"""
Analysis Orchestrator: composes rewriter, skill extractor, scorer and advisor.

``analyze_profile`` is the synchronous, side-effect-free core.
``AnalysisJob`` wraps it for the web UI, which models a backend round-trip
with a fixed processing delay that can be cancelled while it is pending.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
import uuid

from improvement_advisor import advise
from lexicon import FALLBACK_SKILLS, TRENDING_KEYWORDS
from models import AnalysisResult, ProfileInput
from profile_strength import score_breakdown
from rewriter import rewrite
from skill_extractor import extract_skills, merge_unique

logger = logging.getLogger(__name__)


def analyze_profile(profile: ProfileInput) -> AnalysisResult:
    """Run the full analysis on one profile.

    Args:
        profile: The submitted profile fields.

    Returns:
        The rewritten fields, strength score, skills, keywords and suggestions.

    Raises:
        ProfileValidationError: If any profile field is empty.
    """
    profile.validate_required()

    breakdown = score_breakdown(profile)
    strength = breakdown.total
    logger.debug(
        f"[Analyzer] Sub-scores: headline={breakdown.headline}, "
        f"summary={breakdown.summary}, experience={breakdown.experience}, "
        f"skills={breakdown.skills}"
    )

    extracted = extract_skills(
        " ".join((profile.experience, profile.summary, profile.skills))
    )
    improvements = advise(profile, strength)

    logger.info(
        f"[Analyzer] Profile strength {strength}/100, "
        f"{len(extracted)} skills extracted, {len(improvements)} suggestions"
    )
    return AnalysisResult(
        optimized_headline=rewrite(profile.headline),
        optimized_summary=rewrite(profile.summary),
        optimized_experience=rewrite(profile.experience),
        recommended_skills=merge_unique(extracted, FALLBACK_SKILLS),
        profile_strength=strength,
        trending_keywords=list(TRENDING_KEYWORDS),
        improvements=improvements,
    )


class AnalysisJob:
    """One delayed analysis running on a background thread.

    States move from ``running`` to exactly one of ``complete``,
    ``cancelled`` or ``error``. Progress events are pushed onto ``events``
    for streaming to the browser.
    """

    def __init__(self, profile: ProfileInput, delay_seconds: float = 0.0):
        self.id = uuid.uuid4().hex[:16]
        self.profile = profile
        self.delay_seconds = delay_seconds
        self.status = "running"
        self.result: AnalysisResult | None = None
        self.error: str | None = None
        self.created_at = time.time()
        self.events: queue.Queue = queue.Queue()
        self._cancel_event = threading.Event()
        self._handoff_lock = threading.Lock()
        self._analysis_started = False
        self._done = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def done(self) -> bool:
        return self._done.is_set()

    @property
    def analysis_started(self) -> bool:
        """True once the delay is over and the analysis itself is running."""
        return self._analysis_started

    def start(self) -> AnalysisJob:
        self._thread = threading.Thread(target=self.run, daemon=True)
        self._thread.start()
        return self

    def run(self) -> None:
        """Wait out the processing delay, then analyze (unless cancelled)."""
        self.events.put({"status": "analyzing", "detail": "Analyzing your profile..."})
        try:
            # wait() returns True only when cancel() fired before the timeout
            self._cancel_event.wait(self.delay_seconds)
            with self._handoff_lock:
                # cancel() may have fired between the timeout and here
                if self._cancel_event.is_set():
                    self.status = "cancelled"
                else:
                    self._analysis_started = True
            if self.status == "cancelled":
                logger.info(f"[Job {self.id}] Cancelled before analysis ran")
                self.events.put({"status": "cancelled"})
                return

            start = time.time()
            self.result = analyze_profile(self.profile)
            self.status = "complete"
            logger.info(
                f"[Job {self.id}] Completed in {time.time() - start:.3f}s "
                f"(strength {self.result.profile_strength}/100)"
            )
            self.events.put({"status": "complete"})
        except Exception as e:
            logger.exception(f"[Job {self.id}] Analysis failed")
            self.error = str(e)
            self.status = "error"
            self.events.put({"status": "error", "detail": self.error})
        finally:
            self._done.set()

    def cancel(self) -> bool:
        """Cancel the job while it is still in its delay.

        Returns False once the analysis has started or the job has finished;
        a True return guarantees the job ends ``cancelled``.
        """
        with self._handoff_lock:
            if self._analysis_started or self.done:
                return False
            self._cancel_event.set()
            return True

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the job finishes; True if it did within *timeout*."""
        return self._done.wait(timeout)
