"""
Answer content scoring — lexical heuristics only.

Five dimensions, each computed independently from the answer text:
relevance (length), clarity (sentence count), depth (example phrases),
professional (filler phrases), conciseness (word count).
"""

import re

from interview_coach.models.schemas import ContentScores
from interview_coach.services.rules import contains_any

# Case-insensitive substring markers
EXAMPLE_PHRASES = ("example", "instance", "experience", "situation", "time when")
FILLER_PHRASES = ("um", "uh", "like", "you know", "kind of", "sort of")

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def count_words(answer: str) -> int:
    return len(answer.split())


def count_sentences(answer: str) -> int:
    return sum(1 for part in _SENTENCE_SPLIT.split(answer) if part.strip())


class ContentScorer:
    """Scores an answer on five 1–10 dimensions."""

    def score(self, answer: str, question: str = "") -> ContentScores:
        # ``question`` is part of the interface but no rule reads it yet.
        word_count = count_words(answer)
        sentences = count_sentences(answer)

        # Character length gates relevance, not word count
        if len(answer) > 50:
            relevance = min(10, 5 + word_count // 20)
        else:
            relevance = 4

        clarity = min(10, 6 + sentences / 2) if sentences > 2 else 5
        if clarity == int(clarity):
            clarity = int(clarity)
        depth = 8 if contains_any(answer, EXAMPLE_PHRASES) else 6
        professional = 6 if contains_any(answer, FILLER_PHRASES) else 8

        if word_count > 300:
            conciseness = 6
        elif word_count < 50:
            conciseness = 5
        else:
            conciseness = 8

        return ContentScores(
            relevance=relevance,
            clarity=clarity,
            depth=depth,
            professional=professional,
            conciseness=conciseness,
        )


# Singleton
content_scorer = ContentScorer()
