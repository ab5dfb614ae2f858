"""CLI entry point - run matching for one student."""

import argparse
import json
import logging
import sys

from opportunity_matcher.config import load_config, validate_config
from opportunity_matcher.envelope import handle_match_request
from opportunity_matcher.pipeline import build_pipeline
from opportunity_matcher.utils.logging_config import setup_logging

logger = logging.getLogger("opportunity_matcher")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Opportunity Matcher - rank open opportunities for a student profile",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "--student-id", required=True,
        help="Profile id of the student to match",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Score and rank opportunities but don't write matches",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the response body as JSON",
    )
    return parser.parse_args(argv)


def print_result(status_code: int, body: dict):
    """Print a human-readable summary of a match response."""
    if status_code != 200:
        print(f"\nMatching failed ({status_code}): {body.get('error')}")
        if body.get("message"):
            print(f"  {body['message']}")
        if "completionPercentage" in body:
            print(f"  Profile completion: {body['completionPercentage']}%")
        missing = [name for name, is_missing in body.get("requiredFields", {}).items() if is_missing]
        if missing:
            print(f"  Still missing: {', '.join(missing)}")
        print()
        return

    print("\n=== Opportunity Matches ===")
    print(f"Profile completion: {body['completionPercentage']}%")
    print(f"Opportunities matched: {body['totalMatches']}")
    for i, match in enumerate(body["topMatches"], 1):
        print(f"  #{i} [{match['match_score']}] {match['opportunity_id']} - {match['reasoning']}")
    print()


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    # Load config
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Setup logging
    setup_logging(config.log_dir, config.log_level)

    # Validate config and print warnings
    warnings = validate_config(config)
    for w in warnings:
        logger.warning("Config: %s", w)

    try:
        pipeline = build_pipeline(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    status_code, body = handle_match_request(
        pipeline, {"studentId": args.student_id}, persist=not args.dry_run
    )

    if args.json:
        print(json.dumps(body, indent=2))
    else:
        print_result(status_code, body)

    if status_code != 200:
        sys.exit(1)


if __name__ == "__main__":
    main()
