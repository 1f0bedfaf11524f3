"""
Speech Delivery Analysis
────────────────────────────────────────
Classifies vocal delivery metrics into a confidence level and insights.

Rule groups, evaluated in order (later verdicts overwrite earlier ones):
  pauses      ──▶ long pause → Low          │ short pause (fluency note)
  pace        ──▶ slow  │ fast  │ balanced  (exactly one fires)
  fillers     ──▶ heavy fillers → Low       │ minimal fillers
  confidence  ──▶ low voice confidence → Low │ strong confidence → High

The pace rules read words-per-minute truncated toward zero (160.9 → 160);
the reported rate itself is left untouched for the tips.

Because the confidence group runs last, a strong vocal-confidence reading
lifts the level to High even after long pauses or heavy filler usage.
"""

import logging
import math
from typing import NamedTuple

from interview_coach.models.schemas import SpeechAnalysis, SpeechLevel
from interview_coach.services.rules import Rule, RuleGroup, evaluate_rules

logger = logging.getLogger(__name__)

LONG_PAUSE_SECONDS = 2
SHORT_PAUSE_SECONDS = 0.5
SLOW_WPM = 120
FAST_WPM = 160
HIGH_FILLER_COUNT = 10
LOW_FILLER_COUNT = 3
LOW_CONFIDENCE = 0.5
HIGH_CONFIDENCE = 0.75


class SpeechMetrics(NamedTuple):
    pause_seconds: float
    wpm: float
    filler_count: float
    confidence_score: float


SPEECH_RULES = (
    RuleGroup("pauses", (
        Rule(
            "long_pause",
            lambda m: m.pause_seconds > LONG_PAUSE_SECONDS,
            "Long pauses suggest uncertainty or difficulty organizing thoughts",
            SpeechLevel.LOW,
        ),
        Rule(
            "good_fluency",
            lambda m: m.pause_seconds < SHORT_PAUSE_SECONDS,
            "Very short pauses indicate good fluency and preparation",
        ),
    )),
    RuleGroup("pace", (
        Rule(
            "slow_pace",
            lambda m: m.wpm < SLOW_WPM,
            "Slow speaking pace may indicate nervousness or over-thinking",
        ),
        Rule(
            "fast_pace",
            lambda m: m.wpm > FAST_WPM,
            "Fast speaking pace suggests nervousness or rushing",
        ),
        # Catch-all: also fires when wpm is NaN
        Rule(
            "balanced_pace",
            lambda m: True,
            "Speaking pace is well-balanced and professional",
        ),
    )),
    RuleGroup("fillers", (
        Rule(
            "high_fillers",
            lambda m: m.filler_count > HIGH_FILLER_COUNT,
            "High filler word usage reduces professional impression",
            SpeechLevel.LOW,
        ),
        Rule(
            "minimal_fillers",
            lambda m: m.filler_count < LOW_FILLER_COUNT,
            "Minimal filler words demonstrate strong communication skills",
        ),
    )),
    RuleGroup("confidence", (
        Rule(
            "low_confidence",
            lambda m: m.confidence_score < LOW_CONFIDENCE,
            "Voice analysis indicates low confidence levels",
            SpeechLevel.LOW,
        ),
        Rule(
            "strong_confidence",
            lambda m: m.confidence_score > HIGH_CONFIDENCE,
            "Strong vocal confidence detected",
            SpeechLevel.HIGH,
        ),
    )),
)


def whole_wpm(wpm: float) -> float:
    """Words-per-minute truncated toward zero; NaN and infinities pass through."""
    if math.isfinite(wpm):
        return math.trunc(wpm)
    return wpm


class SpeechAnalyzer:
    def analyze(
        self,
        pause_seconds: float,
        wpm: float,
        filler_count: float,
        confidence_score: float,
    ) -> SpeechAnalysis:
        metrics = SpeechMetrics(pause_seconds, whole_wpm(wpm), filler_count, confidence_score)
        level, insights = evaluate_rules(SPEECH_RULES, metrics, SpeechLevel.MEDIUM)
        logger.debug(f"SpeechAnalyzer: level={level.value} insights={len(insights)}")
        return SpeechAnalysis(level=level, insights=insights)


# Singleton
speech_analyzer = SpeechAnalyzer()
