"""Keyword feature scoring and label prediction."""

import re

from taskmind.config.constants import (
    FALLBACK_CATEGORY,
    FALLBACK_PRIORITY,
    PROBABILITY_DIGITS,
)
from taskmind.config.features import CATEGORY_FEATURES, PRIORITY_FEATURES, FeatureMap
from taskmind.services.classification.models import Prediction

_NON_WORD = re.compile(r"[^\w\s]")


def tokenize(text: str) -> list[str]:
    """Lowercase, drop punctuation and split on whitespace."""
    return _NON_WORD.sub("", text.lower()).split()


def score_text(text: str, feature_map: FeatureMap) -> dict[str, float]:
    """
    Score text against every label of a feature map.

    A keyword adds its weight once if present, however often it repeats.
    Single words are matched against tokens; phrases such as "this week"
    are matched as substrings of the lowercased text since tokenizing
    splits them apart.

    Returns:
        Raw score per label, in feature map order
    """
    lowered = text.lower()
    tokens = set(tokenize(text))

    scores: dict[str, float] = {}
    for label, keywords in feature_map.items():
        total = 0.0
        for keyword, weight in keywords.items():
            hit = keyword in lowered if " " in keyword else keyword in tokens
            if hit:
                total += weight
        scores[label] = total
    return scores


def normalize_scores(scores: dict[str, float]) -> dict[str, float]:
    """Scale scores to sum to 1. All-zero input stays all zero."""
    total = sum(scores.values()) or 1
    return {label: round(score / total, PROBABILITY_DIGITS) for label, score in scores.items()}


def predict_label(text: str, feature_map: FeatureMap, fallback: str) -> Prediction:
    """
    Pick the best label for text.

    The highest raw score wins, ties going to the label declared first.
    When nothing matched, the fallback label is returned with zero
    confidence; the probability map still covers only the feature map
    labels, all at zero.
    """
    raw_scores = score_text(text, feature_map)
    probabilities = normalize_scores(raw_scores)

    best = max(raw_scores, key=raw_scores.__getitem__)
    if raw_scores[best] <= 0:
        return Prediction(label=fallback, confidence=0.0, probabilities=probabilities)
    return Prediction(label=best, confidence=probabilities[best], probabilities=probabilities)


def predict_category(text: str) -> Prediction:
    return predict_label(text, CATEGORY_FEATURES, FALLBACK_CATEGORY)


def predict_priority(text: str) -> Prediction:
    return predict_label(text, PRIORITY_FEATURES, FALLBACK_PRIORITY)
