"""Tests for the task classifier."""

import pytest

from taskmind.services.classification import classify_task, suggest_actions


def test_classify_scheduling():
    result = classify_task("Schedule a meeting with client")
    assert result.category == "scheduling"
    assert result.priority == "low"
    assert result.suggested_actions == (
        "Block calendar",
        "Send invite",
        "Prepare agenda",
        "Set reminder",
    )


def test_classify_category_and_priority_independent():
    result = classify_task("Urgent bug fix needed today")
    assert result.category == "technical"
    assert result.priority == "high"
    assert result.category_confidence == 1.0
    assert result.priority_confidence == 1.0


def test_classify_extracts_entities():
    result = classify_task("Meeting with team tomorrow about budget")
    entities = result.entities_dict()
    assert entities["people"] == ["team"]
    assert entities["date"] == "tomorrow"
    assert entities["topics"] == ["budget"]


def test_classify_no_signal_falls_back():
    result = classify_task("Water the plants")
    assert result.category == "general"
    assert result.priority == "low"
    assert result.category_confidence == 0.0
    assert result.suggested_actions == ("Review task", "Assign owner", "Set deadline")


def test_classify_is_idempotent():
    text = "Critical safety hazard inspection with Dana today"
    assert classify_task(text) == classify_task(text)
    assert classify_task(text).to_dict() == classify_task(text).to_dict()


def test_classify_explainability():
    result = classify_task("Pay the invoice soon")
    assert result.explainability is not None
    assert result.explainability.category_probabilities["finance"] == 1.0
    assert result.explainability.priority_probabilities == {"high": 0.0, "medium": 1.0}


def test_classify_without_explain_omits_confidences():
    data = classify_task("Pay the invoice soon", explain=False).to_dict()
    assert data == {
        "category": "finance",
        "priority": "medium",
        "extracted_entities": {"people": [], "date": None, "topics": ["invoice"]},
        "suggested_actions": ["Check budget", "Get approval", "Generate invoice", "Update records"],
    }


def test_classify_to_dict_shape():
    data = classify_task("Urgent bug fix needed today").to_dict()
    assert list(data) == [
        "category",
        "category_confidence",
        "priority",
        "priority_confidence",
        "extracted_entities",
        "suggested_actions",
        "explainability",
    ]
    assert "intent" not in data


@pytest.mark.parametrize(
    "category,first_action",
    [
        ("scheduling", "Block calendar"),
        ("finance", "Check budget"),
        ("technical", "Diagnose issue"),
        ("safety", "Conduct inspection"),
        ("general", "Review task"),
        ("unknown", "Review task"),
    ],
)
def test_suggest_actions(category, first_action):
    assert suggest_actions(category)[0] == first_action
