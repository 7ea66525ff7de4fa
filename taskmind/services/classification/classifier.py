"""Task classifier combining category, priority, entities and actions."""

from taskmind.config.constants import FALLBACK_CATEGORY
from taskmind.config.features import SUGGESTED_ACTIONS
from taskmind.services.classification.entities import extract_entities
from taskmind.services.classification.models import ClassificationResult, Explainability
from taskmind.services.classification.scoring import predict_category, predict_priority


def suggest_actions(category: str) -> tuple[str, ...]:
    """Recommended next actions for a category."""
    return SUGGESTED_ACTIONS.get(category, SUGGESTED_ACTIONS[FALLBACK_CATEGORY])


def classify_task(description: str, *, explain: bool = True) -> ClassificationResult:
    """
    Classify a task description.

    Args:
        description: Task description (validated non-empty upstream)
        explain: Include confidences and per-label probabilities

    Returns:
        ClassificationResult with category, priority, entities and actions
    """
    category = predict_category(description)
    priority = predict_priority(description)

    if not explain:
        return ClassificationResult(
            category=category.label,
            priority=priority.label,
            extracted_entities=extract_entities(description),
            suggested_actions=suggest_actions(category.label),
        )

    return ClassificationResult(
        category=category.label,
        category_confidence=category.confidence,
        priority=priority.label,
        priority_confidence=priority.confidence,
        extracted_entities=extract_entities(description),
        suggested_actions=suggest_actions(category.label),
        explainability=Explainability(
            category_probabilities=category.probabilities,
            priority_probabilities=priority.probabilities,
        ),
    )
