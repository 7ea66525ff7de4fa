"""
Constants, enums, and static values.
"""

from enum import Enum

DEVICE_ID_HEADER = "X-Device-ID"

FALLBACK_CATEGORY = "general"
FALLBACK_PRIORITY = "low"

# Presentation precision for normalized probabilities
PROBABILITY_DIGITS = 2

DEFAULT_ACTOR = "system"


class TaskStatus(str, Enum):
    """Lifecycle status stored on a task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# Human-readable status spellings accepted on input
STATUS_ALIASES: dict[str, TaskStatus] = {
    "pending": TaskStatus.PENDING,
    "in progress": TaskStatus.IN_PROGRESS,
    "in_progress": TaskStatus.IN_PROGRESS,
    "completed": TaskStatus.COMPLETED,
}


class HistoryAction(str, Enum):
    """Mutation recorded in the task audit history."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
