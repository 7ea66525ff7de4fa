"""Classification service module."""

from taskmind.services.classification.classifier import classify_task, suggest_actions
from taskmind.services.classification.entities import extract_entities
from taskmind.services.classification.models import (
    ClassificationResult,
    EntityBundle,
    Explainability,
    Prediction,
)
from taskmind.services.classification.scoring import (
    normalize_scores,
    predict_category,
    predict_label,
    predict_priority,
    score_text,
    tokenize,
)

__all__ = [
    "ClassificationResult",
    "EntityBundle",
    "Explainability",
    "Prediction",
    "classify_task",
    "extract_entities",
    "normalize_scores",
    "predict_category",
    "predict_label",
    "predict_priority",
    "score_text",
    "suggest_actions",
    "tokenize",
]
