"""Classification service models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Prediction:
    """Best label for one feature map plus its normalized distribution."""

    label: str
    confidence: float
    probabilities: dict[str, float]


@dataclass(frozen=True)
class EntityBundle:
    """People, date and topic mentions found in a task description."""

    people: tuple[str, ...] = ()
    date: str | None = None  # "today", "tomorrow" or None
    topics: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "people": list(self.people),
            "date": self.date,
            "topics": list(self.topics),
        }


@dataclass(frozen=True)
class Explainability:
    """Per-label probabilities behind the category and priority picks."""

    category_probabilities: dict[str, float]
    priority_probabilities: dict[str, float]


@dataclass(frozen=True)
class ClassificationResult:
    """
    Full classification record for a task description.

    ``entity_overrides`` holds entity fields contributed by ML enrichment.
    They are kept apart from the rule-based bundle and overlaid on it when
    rendered, so an overlay key replaces the rule-based field of the same name.
    """

    category: str
    priority: str
    extracted_entities: EntityBundle
    suggested_actions: tuple[str, ...]
    category_confidence: float | None = None
    priority_confidence: float | None = None
    intent: str | None = None
    explainability: Explainability | None = None
    entity_overrides: dict[str, Any] = field(default_factory=dict)

    def entities_dict(self) -> dict[str, Any]:
        """Rule-based entities with any ML overlay applied."""
        entities = self.extracted_entities.to_dict()
        entities.update(self.entity_overrides)
        return entities

    def to_dict(self) -> dict[str, Any]:
        """Render the record as the JSON object returned by the API."""
        data: dict[str, Any] = {"category": self.category}
        if self.category_confidence is not None:
            data["category_confidence"] = self.category_confidence
        data["priority"] = self.priority
        if self.priority_confidence is not None:
            data["priority_confidence"] = self.priority_confidence
        data["extracted_entities"] = self.entities_dict()
        data["suggested_actions"] = list(self.suggested_actions)
        if self.intent is not None:
            data["intent"] = self.intent
        if self.explainability is not None:
            data["explainability"] = {
                "category_probabilities": dict(self.explainability.category_probabilities),
                "priority_probabilities": dict(self.explainability.priority_probabilities),
            }
        return data
