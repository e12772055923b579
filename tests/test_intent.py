import pytest

from trip_agent.agents.intent import extract, extract_place_name


def test_bangalore_plan_trip():
    intent = extract("I'm going to Bangalore, let's plan my trip")
    assert intent.place_name == "Bangalore"
    assert intent.wants_places is True
    assert intent.wants_weather is False


def test_paris_temperature():
    intent = extract("I'm going to Paris, what is the temperature there?")
    assert intent.place_name == "Paris"
    assert intent.wants_weather is True
    assert intent.wants_places is False


def test_tokyo_weather_and_places():
    intent = extract("I'm going to Tokyo, what is the weather and what places can I visit?")
    assert intent.place_name == "Tokyo"
    assert intent.wants_weather is True
    assert intent.wants_places is True


def test_no_keywords_defaults_to_both():
    intent = extract("Lisbon")
    assert intent.place_name == "Lisbon"
    assert intent.wants_weather is True
    assert intent.wants_places is True


def test_keywords_are_case_insensitive():
    intent = extract("CLIMATE in Oslo")
    assert intent.wants_weather is True
    assert intent.wants_places is False


def test_multi_word_place_keeps_first_word():
    assert extract_place_name("I am going to New York") == "New"


def test_there_only_removed_as_a_word():
    assert extract_place_name("going to Netherlands") == "Netherlands"


@pytest.mark.parametrize("text", ["", "   ", "?,", "there?", None])
def test_empty_inputs_are_total(text):
    intent = extract(text)
    assert intent.place_name == ""
    assert intent.wants_weather and intent.wants_places


def test_deterministic():
    text = "Can I visit Rome? What is the weather?"
    assert extract(text) == extract(text)
