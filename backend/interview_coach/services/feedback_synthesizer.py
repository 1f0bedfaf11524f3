"""
Feedback Synthesis
────────────────────────────────────────
Merges the three independent analyses with the raw request into a single
FeedbackReport:

  ContentScores ─────┐
  SpeechAnalysis ────┼──▶ strengths / improvements / tips / summary ──▶ FeedbackReport
  NonVerbalAnalysis ─┤
  AnalysisRequest ───┘    (+ STAR improved-answer template, score bands)

Summary tier:
  avg content ≥ 8 and speech High     → excellent
  avg content ≥ 6 and speech not Low  → good
  otherwise                           → growth
"""

import logging
from enum import Enum
from typing import List

import numpy as np

from interview_coach.models.schemas import (
    AnalysisRequest,
    ContentScores,
    FeedbackReport,
    NonVerbalAnalysis,
    ScoreBand,
    SpeechAnalysis,
    SpeechLevel,
)

logger = logging.getLogger(__name__)

EXCELLENT_SUMMARY = (
    "Excellent performance! You demonstrated strong content knowledge, confident delivery, "
    "and professional presence. With minor refinements, you're well-positioned for success."
)
GOOD_SUMMARY = (
    "Good performance overall. Your answer showed solid understanding with room for enhancement "
    "in delivery and structure. Focus on the improvement areas to elevate your interview presence."
)
GROWTH_SUMMARY = (
    "Your interview shows potential with several areas for growth. Focus on structured preparation, "
    "practice your delivery, and work on building confidence through mock interviews."
)

STAR_TIP = "Use the STAR method (Situation, Task, Action, Result) to structure behavioral answers"
PAUSE_TIP = "Practice pausing silently instead of using filler words - silence is more professional"
SLOW_DOWN_TIP = "Take deep breaths and consciously slow down your speaking pace"
EYE_CONTACT_TIP = "Practice the 50/70 rule: maintain eye contact 50% while speaking, 70% while listening"
RECORD_TIP = "Record yourself practicing and review for areas of improvement"

IMPROVED_ANSWER_TEMPLATE = (
    'When answering "{question}", consider this structure:\n\n'
    "\"That's a great question. In my previous role at [Company], I encountered a similar "
    "situation where [Situation]. I was responsible for [Task]. I approached this by "
    "[Action - specific steps you took]. As a result, [Result - quantifiable outcome]. "
    "This experience taught me [Key learning], which I believe would be valuable in this "
    'role because [Connection to job]."\n\n'
    "Key improvements:\n"
    "• Opens with confidence\n"
    "• Follows STAR structure\n"
    "• Includes specific examples\n"
    "• Quantifies results\n"
    "• Connects to the role"
)


class SummaryTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    GROWTH = "growth"


SUMMARIES = {
    SummaryTier.EXCELLENT: EXCELLENT_SUMMARY,
    SummaryTier.GOOD: GOOD_SUMMARY,
    SummaryTier.GROWTH: GROWTH_SUMMARY,
}


def average_content(content: ContentScores) -> float:
    return float(np.mean(list(content.dimension_scores().values())))


def score_band(score: float) -> ScoreBand:
    if score >= 8:
        return ScoreBand.STRONG
    if score >= 6:
        return ScoreBand.FAIR
    return ScoreBand.WEAK


class FeedbackSynthesizer:
    """Turns analyzer outputs into strengths, improvements, tips and a summary."""

    def synthesize(
        self,
        content: ContentScores,
        speech: SpeechAnalysis,
        non_verbal: NonVerbalAnalysis,
        request: AnalysisRequest,
    ) -> FeedbackReport:
        scores = content.dimension_scores()
        avg_content = average_content(content)

        tier = self.tier(avg_content, speech.level)
        logger.debug(
            f"FeedbackSynthesizer: avg_content={avg_content:.2f} "
            f"level={speech.level.value} tier={tier.value}"
        )

        return FeedbackReport(
            summary=SUMMARIES[tier],
            content_scores=content,
            speech_analysis=speech,
            non_verbal_analysis=non_verbal,
            strengths=self._strengths(content, speech, request),
            improvements=self._improvements(content, request),
            tips=self._tips(request),
            improved_answer=self.improved_answer(request.question, request.answer),
            score_bands={name: score_band(value) for name, value in scores.items()},
        )

    # ── Summary ───────────────────────────────────────

    def tier(self, avg_content: float, speech_level: SpeechLevel) -> SummaryTier:
        if avg_content >= 8 and speech_level == SpeechLevel.HIGH:
            return SummaryTier.EXCELLENT
        if avg_content >= 6 and speech_level != SpeechLevel.LOW:
            return SummaryTier.GOOD
        return SummaryTier.GROWTH

    def summary_tier(self, content: ContentScores, speech: SpeechAnalysis) -> SummaryTier:
        return self.tier(average_content(content), speech.level)

    def summarize(self, avg_content: float, speech_level: SpeechLevel) -> str:
        return SUMMARIES[self.tier(avg_content, speech_level)]

    # ── Strengths / improvements ──────────────────────

    def _strengths(
        self,
        content: ContentScores,
        speech: SpeechAnalysis,
        request: AnalysisRequest,
    ) -> List[str]:
        strengths = []
        if content.relevance >= 8:
            strengths.append("Strong answer relevance to the question")
        if content.depth >= 8:
            strengths.append("Good use of examples and detailed explanations")
        if speech.level == SpeechLevel.HIGH:
            strengths.append("Confident vocal delivery")
        if request.eye_contact > 0.7:
            strengths.append("Excellent eye contact and engagement")
        if request.filler_count < 3:
            strengths.append("Minimal use of filler words")
        return strengths

    def _improvements(self, content: ContentScores, request: AnalysisRequest) -> List[str]:
        improvements = []
        if content.relevance < 6:
            improvements.append("Answer could be more directly relevant to the question")
        if content.depth < 6:
            improvements.append("Include more specific examples and details")
        if request.filler_count > 10:
            improvements.append("Reduce filler words (um, uh, like)")
        if request.pause_seconds > 2:
            improvements.append("Work on reducing long pauses")
        if request.eye_contact < 0.4:
            improvements.append("Maintain better eye contact with the interviewer")
        return improvements

    # ── Tips ──────────────────────────────────────────

    def _tips(self, request: AnalysisRequest) -> List[str]:
        tips = [STAR_TIP]
        if request.filler_count > 5:
            tips.append(PAUSE_TIP)
        if request.wpm > 160:  # untruncated: 160.5 counts as fast here
            tips.append(SLOW_DOWN_TIP)
        if request.eye_contact < 0.5:
            tips.append(EYE_CONTACT_TIP)
        tips.append(RECORD_TIP)
        return tips

    # ── Improved answer ───────────────────────────────

    def improved_answer(self, question: str, original_answer: str = "") -> str:
        # Only the question is interpolated; the original answer is not rewritten.
        return IMPROVED_ANSWER_TEMPLATE.format(question=question)


# Singleton
feedback_synthesizer = FeedbackSynthesizer()
