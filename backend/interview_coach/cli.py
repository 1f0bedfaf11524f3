"""
Command-line front end.

Reads one practice attempt as a JSON object of form fields (camelCase keys,
values as submitted) and prints the feedback report as JSON:

    interview-coach analyze attempt.json
    cat attempt.json | interview-coach analyze - --policy lenient
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from interview_coach.core.config import settings
from interview_coach.core.errors import CoachError, InvalidInputError
from interview_coach.services.coach_service import coach_service
from interview_coach.services.form_parser import POLICIES, parse_form

logger = logging.getLogger(__name__)


def _read_fields(source: str) -> dict:
    try:
        if source == "-":
            raw = sys.stdin.read()
        else:
            with open(source, "r", encoding="utf-8") as f:
                raw = f.read()
    except UnicodeDecodeError as e:
        raise InvalidInputError("form", source, "not valid UTF-8") from e
    try:
        fields = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidInputError("form", source, f"not valid JSON: {e.msg}") from e
    if not isinstance(fields, dict):
        raise InvalidInputError("form", source, "expected a JSON object of form fields")
    return fields


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interview-coach",
        description="Score an interview practice attempt and print structured feedback.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Analyze one attempt from a JSON form file")
    analyze.add_argument("source", help="Path to a JSON file of form fields, or '-' for stdin")
    analyze.add_argument(
        "--policy",
        choices=POLICIES,
        default=None,
        help=f"Numeric input policy (default: {settings.NUMERIC_INPUT_POLICY})",
    )
    analyze.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        fields = _read_fields(args.source)
        request = parse_form(fields, policy=args.policy)
        report = coach_service.analyze(request)
    except OSError as e:
        logger.error(f"Cannot read {args.source}: {e}")
        return 2
    except CoachError as e:
        logger.error(str(e))
        return 2

    print(json.dumps(report.to_dict(), indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
