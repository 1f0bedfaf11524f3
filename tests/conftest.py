"""
Shared fixtures: a strong practice attempt and a blank one.
"""

from __future__ import annotations

import pytest

from interview_coach.models.schemas import AnalysisRequest

# 60 words, 5 sentences, mentions an example, no filler substrings.
STRONG_ANSWER = (
    "In my last role our small team missed a release deadline. "
    "For example, a vendor delivered a broken build two days before launch. "
    "I organized a short triage meeting and split the fixes across three engineers. "
    "We shipped on time with every critical test passing. "
    "That experience taught me to plan buffers and to communicate early with partners and clients."
)

QUESTION = "Tell me about a time you handled a tight deadline."


@pytest.fixture
def strong_request() -> AnalysisRequest:
    return AnalysisRequest(
        question=QUESTION,
        answer=STRONG_ANSWER,
        pause_seconds=0.3,
        wpm=140,
        filler_count=2,
        confidence_score=0.8,
        eye_contact=0.8,
        smile_freq=4,
        gestures="minimal",
        emotion_distribution="mostly calm, some happy",
    )


@pytest.fixture
def blank_request() -> AnalysisRequest:
    return AnalysisRequest(
        question="",
        answer="",
        pause_seconds=0,
        wpm=0,
        filler_count=0,
        confidence_score=0,
        eye_contact=0,
        smile_freq=0,
    )


@pytest.fixture
def strong_form() -> dict:
    """Same attempt as ``strong_request``, as the practice form submits it."""
    return {
        "jobRole": "Software Engineer",
        "companyType": "Tech Startup",
        "interviewType": "Behavioral",
        "difficulty": "hard",
        "question": QUESTION,
        "answer": STRONG_ANSWER,
        "pauseSeconds": "0.3",
        "wpm": "140",
        "fillerCount": "2",
        "confidenceScore": "0.8",
        "eyeContact": "0.8",
        "smileFreq": "4",
        "gestures": "minimal",
        "emotionDistribution": "mostly calm, some happy",
    }
