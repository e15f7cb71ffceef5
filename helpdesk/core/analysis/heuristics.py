"""
Keyword heuristics for content analysis.

Deterministic, non-AI extractors run alongside each model call:
sentiment from fixed word lists, keywords from repeated words, and
suggestions from bulleted lines of the model's reply.

Dependencies: re (stdlib)
System role: Heuristic post-processing for the analysis pipeline
"""

import re
from collections import Counter

from helpdesk.models.analysis import Sentiment

POSITIVE_WORDS = ("thank", "great", "good", "excellent", "appreciate", "helpful")
NEGATIVE_WORDS = ("bad", "issue", "problem", "error", "fail", "wrong", "bug")

MAX_KEYWORDS = 5
MIN_KEYWORD_LENGTH = 4

_WORD_RE = re.compile(r"\b\w+\b")
_BULLET_RE = re.compile(r"^[-•]\s*")


def classify_sentiment(text: str) -> Sentiment:
    """
    Classify text by counting which sentiment words it contains.

    Matching is case-insensitive substring containment, so "failed"
    counts for "fail". Each listed word counts at most once.
    """
    lowered = text.lower()
    positive = sum(1 for word in POSITIVE_WORDS if word in lowered)
    negative = sum(1 for word in NEGATIVE_WORDS if word in lowered)

    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """
    Return lower-cased words longer than three characters seen more than once.

    Keywords keep the order of their first occurrence in the text.
    """
    words = [
        word for word in _WORD_RE.findall(text.lower())
        if len(word) >= MIN_KEYWORD_LENGTH
    ]
    # Counter preserves first-insertion order
    counts = Counter(words)
    return [word for word, count in counts.items() if count > 1][:limit]


def extract_suggestions(model_text: str) -> list[str]:
    """
    Collect lines starting with "-" or "•", without the bullet marker.

    Lines break on newlines only; carriage returns and Unicode line
    separators inside a bullet stay part of its text.
    """
    suggestions = []
    for line in model_text.split("\n"):
        stripped = line.strip()
        if stripped.startswith(("-", "•")):
            suggestions.append(_BULLET_RE.sub("", stripped).strip())
    return suggestions
