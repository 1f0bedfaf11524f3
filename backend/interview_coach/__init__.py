"""Rule-based feedback for interview practice attempts."""

from interview_coach.core.errors import CoachError, InvalidInputError
from interview_coach.models.schemas import (
    AnalysisRequest,
    ContentScores,
    FeedbackReport,
    Impression,
    NonVerbalAnalysis,
    SpeechAnalysis,
    SpeechLevel,
)
from interview_coach.services.coach_service import analyze
from interview_coach.services.form_parser import parse_form

__all__ = [
    "AnalysisRequest",
    "CoachError",
    "ContentScores",
    "FeedbackReport",
    "Impression",
    "InvalidInputError",
    "NonVerbalAnalysis",
    "SpeechAnalysis",
    "SpeechLevel",
    "analyze",
    "parse_form",
]
