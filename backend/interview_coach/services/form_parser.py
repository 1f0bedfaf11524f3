"""
Raw form → AnalysisRequest.

The practice form submits every field as text. Numeric fields are converted
here, under one of two policies (see ``settings.NUMERIC_INPUT_POLICY``):

  strict   unparseable text raises InvalidInputError naming the field
  lenient  unparseable text becomes NaN; every threshold rule then falls
           through to its "else" branch
"""

import logging
import math
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from interview_coach.core.config import settings
from interview_coach.core.errors import InvalidInputError
from interview_coach.models.schemas import AnalysisRequest

logger = logging.getLogger(__name__)

STRICT = "strict"
LENIENT = "lenient"
POLICIES = (STRICT, LENIENT)

# wpm keeps its fraction: the pace rules truncate it, the slow-down tip does not
FLOAT_FIELDS = ("pauseSeconds", "wpm", "confidenceScore", "eyeContact")
INT_FIELDS = ("fillerCount", "smileFreq")
TEXT_FIELDS = (
    "question",
    "answer",
    "gestures",
    "emotionDistribution",
    "jobRole",
    "companyType",
)
CHOICE_FIELDS = ("interviewType", "difficulty")


def parse_float(text: str) -> float:
    value = float(text.strip())
    if not math.isfinite(value):
        raise ValueError("not a finite number")
    return value


def parse_int(text: str) -> int:
    """Whole-number parse; decimal text truncates toward zero ("12.7" → 12)."""
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return int(parse_float(text))


def _convert(
    field: str,
    raw: Any,
    parser: Callable[[str], float],
    policy: str,
) -> float:
    text = "" if raw is None else str(raw)
    try:
        return parser(text)
    except (ValueError, OverflowError):
        if policy == LENIENT:
            logger.warning(f"FormParser: '{field}' is not numeric ({text!r}), treating as NaN")
            return math.nan
        raise InvalidInputError(field, text, "expected a number")


def parse_form(fields: Mapping[str, Any], policy: Optional[str] = None) -> AnalysisRequest:
    """Build an AnalysisRequest from camelCase form fields.

    Missing keys are read as empty strings. Raises InvalidInputError when a
    field cannot be converted (numeric fields only under the strict policy).
    """
    policy = (policy or settings.NUMERIC_INPUT_POLICY).strip().lower()
    if policy not in POLICIES:
        raise InvalidInputError("policy", policy, f"expected one of {', '.join(POLICIES)}")

    values: Dict[str, Any] = {}
    for name in TEXT_FIELDS:
        raw = fields.get(name)
        values[name] = "" if raw is None else str(raw)
    for name in FLOAT_FIELDS:
        values[name] = _convert(name, fields.get(name), parse_float, policy)
    for name in INT_FIELDS:
        values[name] = _convert(name, fields.get(name), parse_int, policy)
    for name in CHOICE_FIELDS:
        raw = fields.get(name)
        if raw not in (None, ""):
            values[name] = raw

    return build_request(values)


def build_request(values: Mapping[str, Any]) -> AnalysisRequest:
    """Validate ``values`` into an AnalysisRequest, reporting the first bad field."""
    try:
        return AnalysisRequest.model_validate(dict(values))
    except ValidationError as e:
        error = e.errors()[0]
        loc = error.get("loc") or ("request",)
        field = str(loc[0])
        raise InvalidInputError(field, error.get("input"), error.get("msg")) from e
