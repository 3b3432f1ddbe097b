#!/usr/bin/env python3
"""
ProfileLift command line interface.

Analyses a professional profile, prints the result and optionally writes
the JSON result and the text report to an output directory.

Usage:
    python cli.py --profile profile.json
    python cli.py --headline "Senior Engineer | AWS Certified" --summary "..." \\
        --experience "..." --skills "Python, AWS, Docker" --format text
    python cli.py --profile profile.json --output-dir output/run1/
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time

from pydantic import ValidationError

from analyzer import analyze_profile
from config import AppConfig
from models import PROFILE_FIELDS, ProfileInput, ProfileValidationError
from report import format_clipboard_text, format_export_text
from utils import create_output_dir, load_profile, save_json, save_text, setup_logging

logger = logging.getLogger("profilelift.cli")

EXIT_INVALID_INPUT = 2


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="ProfileLift: strengthen and score a professional profile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python cli.py --profile profile.json\n"
            "  python cli.py --profile profile.json --format text\n"
            "  python cli.py --headline 'Engineer' --summary '...' "
            "--experience '...' --skills 'Java, Python'\n"
        ),
    )
    parser.add_argument(
        "--profile",
        default=None,
        help="Path to a JSON file with headline, summary, experience and skills",
    )
    parser.add_argument("--headline", default=None, help="Professional headline")
    parser.add_argument("--summary", default=None, help="About/summary text")
    parser.add_argument("--experience", default=None, help="Work experience text")
    parser.add_argument("--skills", default=None, help="Comma-separated skills")
    parser.add_argument(
        "--format",
        choices=["json", "text", "clipboard"],
        default="json",
        help="Output format printed to stdout (default: json)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Also write analysis_result.json and profile_report.txt here",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def build_profile(args: argparse.Namespace) -> ProfileInput:
    """Assemble the profile from --profile, with individual flags taking precedence."""
    profile = load_profile(args.profile) if args.profile else ProfileInput()
    overrides = {
        name: getattr(args, name)
        for name in PROFILE_FIELDS
        if getattr(args, name) is not None
    }
    return profile.model_copy(update=overrides) if overrides else profile


def run(args: argparse.Namespace) -> int:
    """Analyse the profile described by *args* and emit the result."""
    config = AppConfig(output_dir=args.output_dir, verbose=args.verbose)
    # Logs go to stderr so stdout carries only the result
    setup_logging(verbose=config.verbose, stream=sys.stderr)

    try:
        profile = build_profile(args)
        result = analyze_profile(profile)
    except ProfileValidationError as e:
        logger.error(str(e))
        return EXIT_INVALID_INPUT
    except ValidationError as e:
        logger.error(f"Invalid profile: {e}")
        return EXIT_INVALID_INPUT
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load profile: {e}")
        return EXIT_INVALID_INPUT

    if args.format == "text":
        sys.stdout.write(format_export_text(profile, result))
    elif args.format == "clipboard":
        sys.stdout.write(format_clipboard_text(result))
    else:
        sys.stdout.write(json.dumps(result.model_dump(by_alias=True), indent=2) + "\n")

    if config.output_dir:
        start = time.time()
        output_dir = create_output_dir(config.output_dir)
        save_json(result.model_dump(by_alias=True), output_dir / "analysis_result.json")
        save_text(format_export_text(profile, result), output_dir / "profile_report.txt")
        logger.info(f"Artifacts written to {output_dir} in {time.time() - start:.2f}s")

    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
