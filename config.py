"""Application configuration management for ProfileLift."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Simulated backend round-trip before results are shown
DEFAULT_ANALYSIS_DELAY = 2.0
DEFAULT_MAX_FIELD_CHARS = 20000
DEFAULT_JOB_TTL = 7200  # 2 hours


@dataclass(frozen=True)
class AppConfig:
    """Immutable application configuration."""

    analysis_delay_seconds: float = DEFAULT_ANALYSIS_DELAY
    max_field_chars: int = DEFAULT_MAX_FIELD_CHARS
    job_ttl_seconds: int = DEFAULT_JOB_TTL
    rate_limit_per_hour: int = 0  # 0 disables the limit
    output_dir: str | None = None
    verbose: bool = False

    @classmethod
    def from_env(cls) -> AppConfig:
        """Build a config from ``PROFILELIFT_*`` environment variables."""
        config = cls(
            analysis_delay_seconds=float(
                os.environ.get("PROFILELIFT_DELAY", DEFAULT_ANALYSIS_DELAY)
            ),
            max_field_chars=int(
                os.environ.get("PROFILELIFT_MAX_FIELD_CHARS", DEFAULT_MAX_FIELD_CHARS)
            ),
            job_ttl_seconds=int(os.environ.get("PROFILELIFT_JOB_TTL", DEFAULT_JOB_TTL)),
            rate_limit_per_hour=int(os.environ.get("PROFILELIFT_RATE_LIMIT", 0)),
            output_dir=os.environ.get("PROFILELIFT_OUTPUT_DIR") or None,
            verbose=os.environ.get("PROFILELIFT_VERBOSE", "").lower() in ("1", "true", "yes"),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check the numeric settings are usable.

        Raises:
            ValueError: If the delay is negative or a limit is not positive.
        """
        if self.analysis_delay_seconds < 0:
            raise ValueError("Analysis delay cannot be negative.")
        if self.max_field_chars <= 0:
            raise ValueError("Maximum field length must be positive.")
        if self.job_ttl_seconds <= 0:
            raise ValueError("Job TTL must be positive.")
        if self.rate_limit_per_hour < 0:
            raise ValueError("Rate limit cannot be negative.")
