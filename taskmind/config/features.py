"""
Keyword feature tables for the rule-based task classifier.

Label declaration order matters: when two labels score the same, the one
declared first wins.
"""

from collections.abc import Mapping
from types import MappingProxyType

FeatureMap = Mapping[str, Mapping[str, float]]


def _freeze(table: dict[str, dict[str, float]]) -> FeatureMap:
    return MappingProxyType({label: MappingProxyType(dict(kw)) for label, kw in table.items()})


# =============================================================================
# Category features
# =============================================================================

CATEGORY_FEATURES: FeatureMap = _freeze(
    {
        "scheduling": {
            "meeting": 2,
            "schedule": 2,
            "call": 1.5,
            "appointment": 2,
            "deadline": 1.5,
        },
        "finance": {
            "payment": 2,
            "invoice": 2,
            "bill": 1.5,
            "budget": 2,
            "cost": 1.5,
            "expense": 1.5,
        },
        "technical": {
            "bug": 2,
            "fix": 1.5,
            "error": 2,
            "install": 1.5,
            "repair": 1.5,
            "maintain": 1,
        },
        "safety": {
            "safety": 2,
            "hazard": 2,
            "inspection": 1.5,
            "compliance": 1.5,
            "ppe": 1,
        },
    }
)

# =============================================================================
# Priority features ("low" is the fallback and has no keywords)
# =============================================================================

PRIORITY_FEATURES: FeatureMap = _freeze(
    {
        "high": {
            "urgent": 2.5,
            "asap": 2.5,
            "immediately": 2,
            "today": 2,
            "critical": 2.5,
            "emergency": 3,
        },
        "medium": {
            "soon": 1.5,
            "this week": 1.5,
            "important": 1.2,
        },
    }
)

# =============================================================================
# Entity extraction
# =============================================================================

KNOWN_TOPICS: tuple[str, ...] = ("budget", "invoice", "report", "deployment")

# Checked in order, first hit wins
DATE_KEYWORDS: tuple[str, ...] = ("today", "tomorrow")

# =============================================================================
# Suggested actions per category
# =============================================================================

SUGGESTED_ACTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "scheduling": ("Block calendar", "Send invite", "Prepare agenda", "Set reminder"),
        "finance": ("Check budget", "Get approval", "Generate invoice", "Update records"),
        "technical": ("Diagnose issue", "Check resources", "Assign technician", "Document fix"),
        "safety": ("Conduct inspection", "File report", "Notify supervisor", "Update checklist"),
        "general": ("Review task", "Assign owner", "Set deadline"),
    }
)
