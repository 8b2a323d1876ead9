"""
Tests for the deterministic content analyzer (report assembly)
"""

import re
import time

import pytest

from analyzer.content_analyzer import ContentAnalyzer, analyze_content
from analyzer.dimensions import NOT_DEFINED_TEXT
from analyzer.insights import content_metrics
from analyzer.patterns import ConceptPattern

SAMPLE = """
Our mission is to empower small businesses with technology they love.
Our approach combines research with rapid prototyping and a proven process.
We provide custom software and consulting services for growing teams.
Jane Doe, Founder of Brightside, said the team transformed her business.
Clients saw 40% growth within a year. Built for businesses of every size.
Get started today or contact us by phone. Learn more about our efficient, streamlined delivery.
"""

VOLATILE_FIELDS = {"id", "created_at", "analyzed_at", "loading_time_ms"}


def test_empty_content_is_all_placeholders():
    result = analyze_content("", "https://x.test", "general")
    for dimension in ("why", "how", "what", "who"):
        extraction = getattr(result.golden_circle, dimension)
        assert not extraction.found
        assert extraction.text == NOT_DEFINED_TEXT[dimension]
    assert result.golden_circle.overall_score == 0
    assert result.elements_of_value.overall_score == 0
    assert result.clifton_strengths.overall_score == 0
    assert result.overall_score == 0
    assert result.metrics.word_count == 0


def test_empty_content_gets_maximal_recommendations():
    result = analyze_content("", "https://x.test", "general")
    titles = [r.title for r in result.recommendations.high_priority + result.recommendations.medium_priority]
    assert "Strengthen WHY Statement" in titles
    assert "Define HOW Methodology" in titles
    assert "Add Client Testimonials" in titles
    assert "Improve Contact Information" in titles


def test_repeated_trigger_reaches_concept_cap():
    result = analyze_content("streamline " * 5, "https://x.test", "general")
    assert result.elements_of_value.categories["functional"].concepts["savesTime"].score == 10
    assert result.elements_of_value.categories["functional"].concepts["reducesCost"].score == 0


def test_mission_sentence_populates_why():
    result = analyze_content("Our mission is to empower small businesses.", "https://x.test", "general")
    why = result.golden_circle.why
    assert why.found
    assert "mission" in why.text
    assert why.evidence.score > 0


def test_testimonial_name_populates_who():
    result = analyze_content("Clients love us. John Smith, CEO of TechCorp.", "https://x.test", "general")
    assert "John Smith, CEO of TechCorp" in result.golden_circle.who.text


def test_full_result_shape():
    result = analyze_content(SAMPLE, "https://example.com", "home")
    assert result.url == "https://example.com"
    assert result.page_type == "home"
    assert result.source == "content-analysis"
    assert re.fullmatch(r"content_\d+_[0-9a-f]{9}", result.id)
    assert result.created_at.endswith("Z")
    assert set(result.elements_of_value.categories) == {"functional", "emotional", "lifeChanging", "socialImpact"}
    assert set(result.clifton_strengths.categories) == {
        "executing", "influencing", "relationshipBuilding", "strategicThinking",
    }
    assert len(result.elements_of_value.top_concepts) <= 5
    assert len(result.clifton_strengths.top_concepts) <= 10
    assert result.golden_circle.why.found
    assert result.golden_circle.how.found
    assert result.golden_circle.what.found
    assert result.golden_circle.who.found
    assert 0 <= result.overall_score <= 100
    assert "Get started" in result.specific_insights.call_to_actions


def test_unknown_page_type_is_general():
    assert analyze_content(SAMPLE, "https://example.com", "landing").page_type == "general"


def test_analysis_is_idempotent():
    first = analyze_content(SAMPLE, "https://example.com", "services").model_dump(exclude=VOLATILE_FIELDS)
    second = analyze_content(SAMPLE, "https://example.com", "services").model_dump(exclude=VOLATILE_FIELDS)
    assert first == second


@pytest.mark.parametrize(
    "content",
    [
        "",
        " ",
        "\x00\xff�" * 100,
        "日本語のテキストだけ",
        "((([[[{{{***+++???$$$^^^|||\\\\",
        "a" * 200_000,
        "<a " * 100_000,
        "<img " * 100_000,
        "Our mission " * 20_000,
        None,
        12345,
    ],
)
def test_never_raises(content):
    result = analyze_content(content, "https://x.test", "general")
    assert 0 <= result.overall_score <= 100


def test_more_trigger_mentions_never_lower_scores():
    base = analyze_content("We are efficient.", "", "general")
    more = analyze_content("We are efficient. Efficient and efficient again.", "", "general")
    concept = lambda r: r.elements_of_value.categories["functional"].concepts["savesTime"].score
    assert concept(more) >= concept(base)
    assert more.elements_of_value.categories["functional"].score >= base.elements_of_value.categories["functional"].score


def test_custom_tables():
    analyzer = ContentAnalyzer(
        elements_of_value={"custom": (ConceptPattern("widgets", ("widget",)),)},
        strengths={"team": (ConceptPattern("gadgets", ("gadget",)),)},
    )
    result = analyzer.analyze_content("widget widget gadget", "https://x.test", "general")
    assert result.elements_of_value.categories["custom"].score == 40
    assert result.clifton_strengths.categories["team"].score == 20
    assert result.elements_of_value.insights == []


def test_summary_reflects_content():
    result = analyze_content(SAMPLE, "https://example.com", "home")
    assert "includes client testimonials" in result.summary
    assert "provides contact information" in result.summary
    assert "features clear call-to-action elements" in result.summary

    empty = analyze_content("", "https://example.com", "home")
    assert "lacks client testimonials" in empty.summary


@pytest.mark.parametrize("content", ["<a " * 100_000, "<a href " * 50_000, "<img src=x " * 50_000])
def test_unclosed_tags_are_counted_in_linear_time(content):
    started = time.perf_counter()
    metrics = content_metrics(content)
    assert time.perf_counter() - started < 1.0
    assert metrics.link_count == 0
    assert metrics.image_count == 0


def test_tag_counts_ignore_anchors_without_href():
    metrics = content_metrics('<a name="top">Top</a> <a href="/a">A</a> <abbr title="x">x</abbr> <img alt="y"/>')
    assert metrics.link_count == 1
    assert metrics.image_count == 1
