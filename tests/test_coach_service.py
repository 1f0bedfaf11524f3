"""End-to-end tests for the analysis pipeline (coach_service.analyze)."""

from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor

from interview_coach import analyze
from interview_coach.models.schemas import Impression, SpeechLevel
from interview_coach.services.coach_service import CoachService, coach_service
from interview_coach.services.feedback_synthesizer import (
    EXCELLENT_SUMMARY,
    EYE_CONTACT_TIP,
    GROWTH_SUMMARY,
    RECORD_TIP,
    SLOW_DOWN_TIP,
    STAR_TIP,
)
from interview_coach.services.form_parser import parse_form

REPORT_KEYS = {
    "summary",
    "contentScores",
    "speechAnalysis",
    "nonVerbalAnalysis",
    "strengths",
    "improvements",
    "tips",
    "improvedAnswer",
    "scoreBands",
}


def test_strong_attempt(strong_request):
    report = analyze(strong_request)

    assert report.content_scores.relevance == 8
    assert report.content_scores.depth == 8
    assert report.content_scores.professional == 8
    assert report.speech_analysis.level == SpeechLevel.HIGH
    assert report.non_verbal_analysis.impression == Impression.STRONG
    assert report.summary == EXCELLENT_SUMMARY
    assert len(report.strengths) >= 4
    assert report.improvements == []
    assert report.tips == [STAR_TIP, RECORD_TIP]
    assert strong_request.question in report.improved_answer


def test_blank_attempt_with_zero_metrics(blank_request):
    report = analyze(blank_request)

    assert report.content_scores.relevance == 4
    assert report.content_scores.conciseness == 5
    assert report.speech_analysis.level == SpeechLevel.LOW
    assert report.non_verbal_analysis.impression == Impression.NEEDS_IMPROVEMENT
    assert report.summary == GROWTH_SUMMARY
    assert report.strengths == ["Minimal use of filler words"]
    assert report.improvements == [
        "Answer could be more directly relevant to the question",
        "Maintain better eye contact with the interviewer",
    ]
    assert report.tips == [STAR_TIP, EYE_CONTACT_TIP, RECORD_TIP]


def test_blank_attempt_with_unparsed_metrics_lenient():
    request = parse_form({"answer": ""}, policy="lenient")
    report = analyze(request)

    assert report.content_scores.relevance == 4
    assert report.content_scores.conciseness == 5
    # NaN fails every threshold: nothing lowers or raises the level
    assert report.speech_analysis.level == SpeechLevel.MEDIUM
    assert report.speech_analysis.insights == ["Speaking pace is well-balanced and professional"]
    assert report.non_verbal_analysis.impression == Impression.MODERATE
    assert report.non_verbal_analysis.insights == []
    assert report.strengths == []
    assert report.improvements == ["Answer could be more directly relevant to the question"]
    assert report.tips == [STAR_TIP, RECORD_TIP]
    assert report.summary == GROWTH_SUMMARY


def test_fractional_wpm_is_balanced_but_still_gets_slow_down_tip(strong_form):
    strong_form["wpm"] = "160.5"
    report = analyze(parse_form(strong_form, policy="strict"))
    assert "Speaking pace is well-balanced and professional" in report.speech_analysis.insights
    assert "Fast speaking pace suggests nervousness or rushing" not in report.speech_analysis.insights
    assert report.tips == [STAR_TIP, SLOW_DOWN_TIP, RECORD_TIP]


def test_confidence_overrides_long_pause(strong_request):
    request = strong_request.model_copy(update={"pause_seconds": 3, "confidence_score": 0.9})
    report = analyze(request)
    assert report.speech_analysis.level == SpeechLevel.HIGH
    assert "Work on reducing long pauses" in report.improvements


def test_fidgeting_overrides_eye_contact(strong_request):
    request = strong_request.model_copy(update={"eye_contact": 0.9, "gestures": "excessive fidgeting"})
    report = analyze(request)
    assert report.non_verbal_analysis.impression == Impression.NEEDS_IMPROVEMENT
    # eye contact still counts as a strength
    assert "Excellent eye contact and engagement" in report.strengths


def test_analyze_is_idempotent(strong_request):
    first = analyze(strong_request)
    second = analyze(strong_request)
    assert first == second
    assert json.dumps(first.to_dict(), sort_keys=True) == json.dumps(second.to_dict(), sort_keys=True)


def test_concurrent_calls_do_not_interact(strong_request, blank_request):
    expected = {id(strong_request): analyze(strong_request), id(blank_request): analyze(blank_request)}
    requests = [strong_request, blank_request] * 20
    with ThreadPoolExecutor(max_workers=8) as pool:
        reports = list(pool.map(analyze, requests))
    for request, report in zip(requests, reports):
        assert report == expected[id(request)]


def test_report_serializes_with_camel_case_keys(strong_request):
    data = analyze(strong_request).to_dict()
    assert set(data) == REPORT_KEYS
    assert data["speechAnalysis"]["level"] == "High"
    assert data["nonVerbalAnalysis"]["impression"] == "Strong"
    assert data["contentScores"] == {
        "relevance": 8,
        "clarity": 8.5,
        "depth": 8,
        "professional": 8,
        "conciseness": 8,
    }
    assert data["scoreBands"]["clarity"] == "strong"
    json.dumps(data)


def test_service_logs_one_summary_line(strong_request, caplog):
    with caplog.at_level(logging.INFO, logger="interview_coach.services.coach_service"):
        CoachService().analyze(strong_request)
    messages = [r.getMessage() for r in caplog.records if r.name == "interview_coach.services.coach_service"]
    assert len(messages) == 1
    assert "speech=High" in messages[0]
    assert "summary=excellent" in messages[0]


def test_module_analyze_uses_shared_service(strong_request):
    assert coach_service.analyze(strong_request) == analyze(strong_request)


def test_logged_summary_tier_follows_the_report(blank_request, caplog):
    with caplog.at_level(logging.INFO, logger="interview_coach.services.coach_service"):
        report = CoachService().analyze(blank_request)
    assert report.summary == GROWTH_SUMMARY
    assert "summary=growth" in caplog.text
