"""
Interview Coach — single-attempt analysis pipeline
────────────────────────────────────────
  AnalysisRequest ──▶ ContentScorer ─────┐
                  ──▶ SpeechAnalyzer ────┼──▶ FeedbackSynthesizer ──▶ FeedbackReport
                  ──▶ NonVerbalAnalyzer ─┘

The three analyzers are independent and stateless; the synthesizer is the
only stage that sees all of their outputs. No I/O, no shared state: calling
``analyze`` twice with the same request returns equal reports.

Usage:
    from interview_coach.services.coach_service import coach_service
    report = coach_service.analyze(request)
"""

import logging

from interview_coach.models.schemas import AnalysisRequest, FeedbackReport
from interview_coach.services.content_scorer import ContentScorer, content_scorer
from interview_coach.services.feedback_synthesizer import FeedbackSynthesizer, feedback_synthesizer
from interview_coach.services.non_verbal_analyzer import NonVerbalAnalyzer, non_verbal_analyzer
from interview_coach.services.speech_analyzer import SpeechAnalyzer, speech_analyzer

logger = logging.getLogger(__name__)


class CoachService:
    """Runs the scoring and feedback pipeline for one practice attempt."""

    def __init__(
        self,
        scorer: ContentScorer = content_scorer,
        speech: SpeechAnalyzer = speech_analyzer,
        non_verbal: NonVerbalAnalyzer = non_verbal_analyzer,
        synthesizer: FeedbackSynthesizer = feedback_synthesizer,
    ):
        self.content_scorer = scorer
        self.speech_analyzer = speech
        self.non_verbal_analyzer = non_verbal
        self.feedback_synthesizer = synthesizer

    def analyze(self, request: AnalysisRequest) -> FeedbackReport:
        content = self.content_scorer.score(request.answer, request.question)
        speech = self.speech_analyzer.analyze(
            request.pause_seconds,
            request.wpm,
            request.filler_count,
            request.confidence_score,
        )
        non_verbal = self.non_verbal_analyzer.analyze(
            request.eye_contact,
            request.smile_freq,
            request.gestures,
            request.emotion_distribution,
        )
        report = self.feedback_synthesizer.synthesize(content, speech, non_verbal, request)
        tier = self.feedback_synthesizer.summary_tier(content, speech)

        logger.info(
            f"CoachService: speech={speech.level.value} "
            f"non_verbal={non_verbal.impression.value} "
            f"summary={tier.value} "
            f"strengths={len(report.strengths)} improvements={len(report.improvements)}"
        )
        return report


# Singleton
coach_service = CoachService()


def analyze(request: AnalysisRequest) -> FeedbackReport:
    """Analyze one practice attempt with the shared service."""
    return coach_service.analyze(request)
