"""Shared utilities for ProfileLift: logging setup and file I/O."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from models import ProfileInput

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, stream: TextIO | None = None) -> None:
    """Attach the ProfileLift console handler to the root logger.

    Analysis messages are INFO; per-field sub-scores are DEBUG and only
    show with *verbose*. The CLI passes ``sys.stderr`` so that stdout
    carries nothing but the result.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Only the first call installs a handler
    if not root_logger.handlers:
        console = logging.StreamHandler(stream or sys.stdout)
        console.setLevel(logging.DEBUG if verbose else logging.INFO)
        console_fmt = logging.Formatter(
            "%(asctime)s | %(levelname)-7s | %(message)s", datefmt="%H:%M:%S"
        )
        console.setFormatter(console_fmt)
        root_logger.addHandler(console)


def load_file(path: str | Path) -> str:
    """Return the UTF-8 contents of a profile file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")
    return p.read_text(encoding="utf-8")


def load_profile(path: str | Path) -> ProfileInput:
    """Load a profile from a JSON file with headline/summary/experience/skills keys.

    A ``skills`` value given as a JSON list is joined with ", ".

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a JSON object.
    """
    data = json.loads(load_file(path))
    if not isinstance(data, dict):
        raise ValueError(f"Profile file must contain a JSON object: {path}")
    if isinstance(data.get("skills"), list):
        data["skills"] = ", ".join(str(s) for s in data["skills"])
    logger.debug(f"Loaded profile fields {sorted(data)} from {path}")
    return ProfileInput.model_validate(data)


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Write an analysis result as indented UTF-8 JSON and return the path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False, default=str) + "\n"
    p.write_text(content, encoding="utf-8")
    logger.debug(f"Saved JSON ({len(content)} chars) to {p}")
    return p


def save_text(text: str, path: str | Path) -> Path:
    """Write plain text to a file, normalising the trailing newline."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    content = text.strip() + "\n"
    p.write_text(content, encoding="utf-8")
    logger.debug(f"Saved text ({len(content)} chars) to {p}")
    return p


def create_output_dir(path: str | Path) -> Path:
    """Make sure the CLI's --output-dir exists and return it as a Path."""
    out = Path(path)
    out.mkdir(parents=True, exist_ok=True)
    return out
