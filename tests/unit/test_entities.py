"""Tests for rule-based entity extraction."""

from taskmind.services.classification import EntityBundle, extract_entities


def test_extract_entities_meeting_example():
    entities = extract_entities("Meeting with team tomorrow about budget")
    assert entities == EntityBundle(people=("team",), date="tomorrow", topics=("budget",))


def test_extract_entities_empty_text():
    assert extract_entities("") == EntityBundle()


def test_extract_entities_today_wins_over_tomorrow():
    entities = extract_entities("Either tomorrow or today works")
    assert entities.date == "today"


def test_extract_entities_date_is_substring_match():
    assert extract_entities("Review today's numbers").date == "today"


def test_extract_entities_only_first_person():
    entities = extract_entities("Lunch with Alice, then coffee with Bob")
    assert entities.people == ("Alice",)


def test_extract_entities_person_case_insensitive_keyword():
    entities = extract_entities("Call WITH   Carol")
    assert entities.people == ("Carol",)


def test_extract_entities_no_person_without_word():
    assert extract_entities("Done with 42 items").people == ()


def test_extract_entities_topics_in_fixed_order():
    entities = extract_entities("Deployment report and the Budget, plus the invoice and budget again")
    assert entities.topics == ("budget", "invoice", "report", "deployment")


def test_entity_bundle_to_dict():
    bundle = EntityBundle(people=("team",), date=None, topics=("report",))
    assert bundle.to_dict() == {"people": ["team"], "date": None, "topics": ["report"]}
