"""
Non-Verbal Communication Analysis
────────────────────────────────────────
Classifies eye contact, smiling and a free-text gesture description into an
impression (Strong / Moderate / Needs improvement) and insights.

Rule groups, evaluated in order (later verdicts overwrite earlier ones):
  eye_contact ──▶ > 0.7 → Strong          │ < 0.4 → Needs improvement
  smiling     ──▶ > 3 smiles              │ no smiles
  gestures    ──▶ nervous → Needs improvement │ minimal / controlled

A nervous-gesture description therefore outranks excellent eye contact.
The emotion-distribution description is accepted but not scored.
"""

import logging
from typing import NamedTuple

from interview_coach.models.schemas import Impression, NonVerbalAnalysis
from interview_coach.services.rules import Rule, RuleGroup, contains_any, evaluate_rules

logger = logging.getLogger(__name__)

STRONG_EYE_CONTACT = 0.7
WEAK_EYE_CONTACT = 0.4
FREQUENT_SMILES = 3

NERVOUS_GESTURE_MARKERS = ("excessive", "fidgeting")
CALM_GESTURE_MARKERS = ("minimal", "none")


class NonVerbalMetrics(NamedTuple):
    eye_contact: float
    smile_freq: float
    gestures: str


NON_VERBAL_RULES = (
    RuleGroup("eye_contact", (
        Rule(
            "excellent_eye_contact",
            lambda m: m.eye_contact > STRONG_EYE_CONTACT,
            "Excellent eye contact shows engagement and confidence",
            Impression.STRONG,
        ),
        Rule(
            "limited_eye_contact",
            lambda m: m.eye_contact < WEAK_EYE_CONTACT,
            "Limited eye contact may suggest nervousness or discomfort",
            Impression.NEEDS_IMPROVEMENT,
        ),
    )),
    RuleGroup("smiling", (
        Rule(
            "appropriate_smiling",
            lambda m: m.smile_freq > FREQUENT_SMILES,
            "Appropriate smiling creates a friendly, approachable impression",
        ),
        Rule(
            "no_smiling",
            lambda m: m.smile_freq == 0,
            "No smiling detected - consider showing more warmth",
        ),
    )),
    RuleGroup("gestures", (
        Rule(
            "nervous_gestures",
            lambda m: contains_any(m.gestures, NERVOUS_GESTURE_MARKERS),
            "Nervous gestures detected - focus on calming techniques",
            Impression.NEEDS_IMPROVEMENT,
        ),
        Rule(
            "controlled_body_language",
            lambda m: contains_any(m.gestures, CALM_GESTURE_MARKERS),
            "Natural, controlled body language observed",
        ),
    )),
)


class NonVerbalAnalyzer:
    def analyze(
        self,
        eye_contact: float,
        smile_freq: float,
        gestures: str,
        emotion_distribution: str = "",
    ) -> NonVerbalAnalysis:
        metrics = NonVerbalMetrics(eye_contact, smile_freq, gestures or "")
        impression, insights = evaluate_rules(NON_VERBAL_RULES, metrics, Impression.MODERATE)
        logger.debug(f"NonVerbalAnalyzer: impression={impression.value} insights={len(insights)}")
        return NonVerbalAnalysis(impression=impression, insights=insights)


# Singleton
non_verbal_analyzer = NonVerbalAnalyzer()
