"""Rule-based entity extraction."""

import re

from taskmind.config.features import DATE_KEYWORDS, KNOWN_TOPICS
from taskmind.services.classification.models import EntityBundle

# First "with <word>" only
_PERSON_PATTERN = re.compile(r"with\s+([a-zA-Z]+)", re.IGNORECASE)


def extract_entities(text: str) -> EntityBundle:
    """
    Extract date, person and topic mentions from text.

    Args:
        text: Raw task description

    Returns:
        EntityBundle, possibly empty
    """
    lowered = text.lower()

    date = next((keyword for keyword in DATE_KEYWORDS if keyword in lowered), None)

    match = _PERSON_PATTERN.search(text)
    people = (match.group(1).strip(),) if match else ()

    topics = tuple(topic for topic in KNOWN_TOPICS if topic in lowered)

    return EntityBundle(people=people, date=date, topics=topics)
