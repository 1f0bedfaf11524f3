"""
Interview Coach Schemas
────────────────────────────────────────
  • AnalysisRequest      — one practice attempt (text + delivery metrics)
  • ContentScores        — per-dimension answer scores
  • SpeechAnalysis       — vocal confidence level + insights
  • NonVerbalAnalysis    — body-language impression + insights
  • FeedbackReport       — the synthesized report handed back to the caller

Attributes are snake_case in Python and camelCase on the wire
(``report.to_dict()`` → ``{"contentScores": ..., "improvedAnswer": ...}``).
"""

import math
from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ── Enums ─────────────────────────────────────────────

class InterviewType(str, Enum):
    HR = "HR"
    TECHNICAL = "Technical"
    BEHAVIORAL = "Behavioral"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class SpeechLevel(str, Enum):
    """Categorical speech-delivery verdict."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Impression(str, Enum):
    """Categorical non-verbal verdict."""
    STRONG = "Strong"
    MODERATE = "Moderate"
    NEEDS_IMPROVEMENT = "Needs improvement"


class ScoreBand(str, Enum):
    STRONG = "strong"
    FAIR = "fair"
    WEAK = "weak"


# Whole-number metrics. NaN is admitted so the lenient numeric policy can
# hand an unparsed field to the analyzers, where every comparison is false.
CountMetric = Union[int, float]

CONTENT_DIMENSIONS = ("relevance", "clarity", "depth", "professional", "conciseness")


class _Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ── Request ───────────────────────────────────────────

class AnalysisRequest(_Schema):
    question: str = ""
    answer: str = ""

    # Speech metrics
    pause_seconds: float
    wpm: float  # reported rate; the pace rules read it truncated
    filler_count: CountMetric
    confidence_score: float

    # Non-verbal metrics
    eye_contact: float
    smile_freq: CountMetric
    gestures: str = ""
    emotion_distribution: str = ""

    # Interview context (not scored)
    job_role: str = ""
    company_type: str = ""
    interview_type: InterviewType = InterviewType.HR
    difficulty: Difficulty = Difficulty.MEDIUM

    @field_validator("filler_count", "smile_freq")
    @classmethod
    def _whole_number(cls, value: Union[int, float]) -> Union[int, float]:
        if isinstance(value, float):
            if math.isnan(value):
                return value
            if not value.is_integer():
                raise ValueError("must be a whole number")
            return int(value)
        return value


# ── Analyzer outputs ──────────────────────────────────

class ContentScores(_Schema):
    relevance: int
    clarity: Union[int, float]  # 6 + sentences/2 is not always integral
    depth: int
    professional: int
    conciseness: int

    def dimension_scores(self) -> Dict[str, float]:
        """Scores keyed by dimension name, in fixed dimension order."""
        return {name: getattr(self, name) for name in CONTENT_DIMENSIONS}


class SpeechAnalysis(_Schema):
    level: SpeechLevel
    insights: List[str] = Field(default_factory=list)


class NonVerbalAnalysis(_Schema):
    impression: Impression
    insights: List[str] = Field(default_factory=list)


# ── Report ────────────────────────────────────────────

class FeedbackReport(_Schema):
    summary: str
    content_scores: ContentScores
    speech_analysis: SpeechAnalysis
    non_verbal_analysis: NonVerbalAnalysis
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    improved_answer: str
    score_bands: Dict[str, ScoreBand] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible mapping with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
