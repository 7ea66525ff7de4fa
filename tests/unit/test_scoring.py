"""Tests for keyword scoring, normalization and label prediction."""

from types import MappingProxyType

import pytest

from taskmind.config.features import CATEGORY_FEATURES, PRIORITY_FEATURES
from taskmind.services.classification import (
    normalize_scores,
    predict_category,
    predict_label,
    predict_priority,
    score_text,
    tokenize,
)


# ==========================================
#  TOKENIZER
# ==========================================


def test_tokenize_lowercases_and_strips_punctuation():
    assert tokenize("Fix the BUG, ASAP!") == ["fix", "the", "bug", "asap"]


def test_tokenize_empty_text():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_tokenize_keeps_underscores_and_digits():
    assert tokenize("ticket_42 is open") == ["ticket_42", "is", "open"]


# ==========================================
#  FEATURE SCORER
# ==========================================


def test_score_text_one_entry_per_label():
    scores = score_text("nothing relevant here", CATEGORY_FEATURES)
    assert list(scores) == list(CATEGORY_FEATURES)
    assert all(score == 0 for score in scores.values())


def test_score_text_sums_matched_weights():
    scores = score_text("Urgent bug fix", CATEGORY_FEATURES)
    assert scores["technical"] == pytest.approx(3.5)
    assert scores["scheduling"] == 0


def test_score_text_counts_keyword_once():
    """Repeating a keyword does not add its weight again."""
    once = score_text("invoice", CATEGORY_FEATURES)
    many = score_text("invoice invoice invoice", CATEGORY_FEATURES)
    assert once == many
    assert many["finance"] == 2


def test_score_text_requires_whole_token():
    """Single-word keywords match tokens, not substrings."""
    scores = score_text("recall the billing team", CATEGORY_FEATURES)
    assert scores["scheduling"] == 0
    assert scores["finance"] == 0


def test_score_text_matches_phrase_keyword():
    """Phrases such as 'this week' match on the raw lowercased text."""
    scores = score_text("Finish the slides This Week", PRIORITY_FEATURES)
    assert scores["medium"] == pytest.approx(1.5)


def test_score_text_phrase_across_punctuation_boundary():
    scores = score_text("sometime this week, please", PRIORITY_FEATURES)
    assert scores["medium"] == pytest.approx(1.5)


# ==========================================
#  NORMALIZER
# ==========================================


def test_normalize_scores_sums_to_one():
    probabilities = normalize_scores({"a": 2.0, "b": 1.5, "c": 0.5})
    assert sum(probabilities.values()) == pytest.approx(1.0, abs=0.011)
    assert probabilities == {"a": 0.5, "b": 0.38, "c": 0.12}


def test_normalize_scores_all_zero():
    assert normalize_scores({"a": 0, "b": 0}) == {"a": 0.0, "b": 0.0}


def test_normalize_scores_rounds_to_two_digits():
    probabilities = normalize_scores({"a": 1.0, "b": 2.0})
    assert probabilities == {"a": 0.33, "b": 0.67}


def test_normalize_scores_keeps_labels():
    scores = score_text("pay the invoice", CATEGORY_FEATURES)
    assert list(normalize_scores(scores)) == list(CATEGORY_FEATURES)


# ==========================================
#  PREDICTORS
# ==========================================


def test_predict_label_picks_highest_score():
    prediction = predict_category("Pay the invoice and the bill")
    assert prediction.label == "finance"
    assert prediction.confidence == 1.0


def test_predict_label_tie_goes_to_first_declared_label():
    features = MappingProxyType({"first": {"alpha": 1.0}, "second": {"beta": 1.0}})
    prediction = predict_label("beta alpha", features, "none")
    assert prediction.label == "first"
    assert prediction.confidence == 0.5


def test_predict_category_tie_between_real_labels():
    """'meeting' and 'budget' both weigh 2; scheduling is declared first."""
    prediction = predict_category("meeting about budget")
    assert prediction.label == "scheduling"
    assert prediction.probabilities == {
        "scheduling": 0.5,
        "finance": 0.5,
        "technical": 0.0,
        "safety": 0.0,
    }


def test_predict_label_fallback_when_nothing_matches():
    prediction = predict_category("water the plants")
    assert prediction.label == "general"
    assert prediction.confidence == 0.0
    assert "general" not in prediction.probabilities
    assert set(prediction.probabilities.values()) == {0.0}


def test_predict_priority_fallback_is_low():
    prediction = predict_priority("water the plants")
    assert prediction.label == "low"
    assert prediction.confidence == 0.0


def test_predict_priority_high_and_medium_mixed():
    prediction = predict_priority("important but also urgent")
    assert prediction.label == "high"
    assert prediction.probabilities["high"] == pytest.approx(0.68)
    assert prediction.probabilities["medium"] == pytest.approx(0.32)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("urgent", "high"),
        ("asap", "high"),
        ("emergency", "high"),
        ("soon", "medium"),
        ("this week", "medium"),
        ("important", "medium"),
    ],
)
def test_predict_priority_single_tier(text, expected):
    assert predict_priority(f"Please handle this {text}").label == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Book an appointment", "scheduling"),
        ("Approve the expense", "finance"),
        ("Repair the boiler", "technical"),
        ("Order new ppe", "safety"),
    ],
)
def test_predict_category_single_label(text, expected):
    assert predict_category(text).label == expected
