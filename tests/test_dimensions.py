"""
Tests for the Golden Circle dimension extractors
"""

import pytest

from analyzer.dimensions import (
    NOT_DEFINED_TEXT,
    WHO_MAX_LENGTH,
    Extraction,
    extract_all,
    extract_dimension,
    extract_how,
    extract_what,
    extract_who,
    extract_why,
)


def test_why_finds_mission_statement():
    why = extract_why("Our mission is to empower small businesses.")
    assert why.found
    assert "mission" in why.text
    assert why.text != NOT_DEFINED_TEXT["why"]


def test_why_primary_pattern_beats_fallback():
    text = "Acme company will develop apps for you. Later on: Our mission is to help founders succeed."
    why = extract_why(text)
    assert why.text.startswith("Our mission")
    assert "develop" not in why.text


def test_why_uses_fallback_when_no_primary_pattern_matches():
    why = extract_why("Acme company will develop apps for you.")
    assert why.found
    assert why.text.startswith("company will develop")


def test_why_ignores_matches_outside_the_length_window():
    # "We value" is too short for the window and nothing else matches
    assert not extract_why("We value").found


def test_how_prefers_named_methodology_sentences():
    text = "Our process is thorough and collaborative. We run the Attitude Cycle with every client."
    how = extract_how(text)
    assert how.text == "Attitude Cycle with every client."


def test_how_primary_pattern():
    how = extract_how("Our approach combines research with rapid prototyping")
    assert how.found
    assert how.text.startswith("approach combines research")


def test_what_named_offerings_override_services():
    text = (
        "We provide consulting. Revenue Acceleration programs for growing teams. "
        "Salesforce implementation for mid-market firms."
    )
    what = extract_what(text)
    assert what.text == "Salesforce implementation for mid-market firms."


def test_what_named_services_override_generic_match():
    text = "We provide consulting. Technology Enablement for modern teams."
    assert extract_what(text).text == "Technology Enablement for modern teams."


def test_who_includes_testimonial_sentence():
    text = "Clients love us. John Smith, CEO of TechCorp."
    who = extract_who(text)
    assert "John Smith, CEO of TechCorp" in who.text


def test_who_combines_testimonials_metrics_and_audience():
    text = "Jane Doe said it changed everything. We delivered 40% growth in a year. Built for businesses of every size"
    who = extract_who(text)
    assert who.text.startswith("Jane Doe said it changed everything.")
    assert "40% growth in a year." in who.text
    assert who.text.endswith("businesses of every size")


def test_who_is_truncated():
    text = " ".join(f"Person Number{i} praised the team at length." for i in range(3)) + " " + "customers " * 40
    who = extract_who(text * 3)
    assert len(who.text) <= WHO_MAX_LENGTH + 3
    if len(who.text) > WHO_MAX_LENGTH:
        assert who.text.endswith("...")


def test_who_caps_testimonials_at_three():
    text = " ".join(f"Alice Smith{'x' * i} loved it." for i in range(1, 6))
    who = extract_who(text)
    assert who.text.count("loved it.") == 3


@pytest.mark.parametrize("dimension", ["why", "how", "what", "who"])
def test_empty_text_is_not_found(dimension):
    extraction = extract_dimension("", dimension)
    assert not extraction.found
    assert extraction.text == ""
    assert extraction.display_text == NOT_DEFINED_TEXT[dimension]


def test_none_text_is_treated_as_empty():
    assert not extract_dimension(None, "why").found


def test_unknown_dimension_raises():
    with pytest.raises(ValueError):
        extract_dimension("text", "where")


def test_display_text_returns_extracted_text_when_found():
    extraction = Extraction("what", "Custom widgets")
    assert extraction.display_text == "Custom widgets"


def test_extract_all_returns_every_dimension():
    assert list(extract_all("anything")) == ["why", "how", "what", "who"]


def test_large_text_without_periods_completes():
    text = "John Smith " + "word " * 100_000
    assert isinstance(extract_who(text), Extraction)
