"""
Tests for the AI/fallback pipeline and concurrent page analysis
"""

import asyncio

import pytest

from analyzer.content_analyzer import analyze_content
from analyzer.pipeline import analyze_page, analyze_pages, analyze_with_fallback
from analyzer.providers import AIProviderError
from utils.scraper import ContentFetchError, PageContent

CONTENT = "Our mission is to empower small businesses. Get started today."


class FakeProvider:
    """Stands in for AnthropicAnalysisProvider"""

    def __init__(self, result=None, error=None, configured=True):
        self.result = result
        self.error = error
        self.is_configured = configured
        self.calls = 0

    def analyze(self, content, url, page_type="general"):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.result.model_copy(update={"source": "ai:fake"})


def _page(url, text=CONTENT):
    return PageContent(
        url=url,
        final_url=url,
        status_code=200,
        title="Example title",
        meta_description="Example description",
        text=text,
        word_count=len(text.split()),
        image_count=3,
        link_count=7,
    )


def _fetcher(failing=()):
    def fetch(url):
        if url in failing:
            raise ContentFetchError(url, "HTTP 404", status_code=404)
        return _page(url)

    return fetch


def test_fallback_when_ai_fails():
    provider = FakeProvider(error=AIProviderError("boom"))
    result = analyze_with_fallback(CONTENT, "https://example.com", "home", provider=provider)
    assert provider.calls == 1
    assert result.source == "content-analysis"
    assert result.page_type == "home"


def test_ai_result_is_used_when_available():
    provider = FakeProvider(result=analyze_content(CONTENT, "https://example.com", "home"))
    result = analyze_with_fallback(CONTENT, "https://example.com", "home", provider=provider)
    assert result.source == "ai:fake"


def test_unconfigured_provider_is_skipped():
    provider = FakeProvider(configured=False)
    result = analyze_with_fallback(CONTENT, "https://example.com", "general", provider=provider)
    assert provider.calls == 0
    assert result.source == "content-analysis"


def test_use_ai_false_skips_provider():
    provider = FakeProvider(error=AIProviderError("should not be called"))
    result = analyze_with_fallback(CONTENT, "https://example.com", "general", provider=provider, use_ai=False)
    assert provider.calls == 0
    assert result.source == "content-analysis"


def test_default_provider_disabled_by_settings():
    # AI analysis is disabled for the test session
    result = analyze_with_fallback(CONTENT, "https://example.com", "general")
    assert result.source == "content-analysis"


def test_unknown_page_type_is_normalized():
    result = analyze_with_fallback(CONTENT, "https://example.com", "Landing Page", use_ai=False)
    assert result.page_type == "general"


def test_analyze_page_attaches_page_details():
    result = analyze_page("https://example.com", "home", fetcher=_fetcher(), use_ai=False)
    assert result.page_title == "Example title"
    assert result.meta_description == "Example description"
    assert result.metrics.image_count == 3
    assert result.metrics.link_count == 7
    assert result.metrics.word_count == len(CONTENT.split())
    assert result.golden_circle.why.found


def test_analyze_page_propagates_fetch_errors():
    with pytest.raises(ContentFetchError) as exc_info:
        analyze_page("https://example.com/missing", fetcher=_fetcher({"https://example.com/missing"}), use_ai=False)
    assert exc_info.value.status_code == 404


def test_analyze_pages_isolates_failures():
    pages = [
        ("https://example.com/", "home"),
        ("https://example.com/missing", "services"),
        ("https://example.com/about", "About"),
    ]
    outcomes = asyncio.run(
        analyze_pages(pages, fetcher=_fetcher({"https://example.com/missing"}), use_ai=False)
    )

    assert [o.url for o in outcomes] == [url for url, _ in pages]
    assert [o.status for o in outcomes] == ["success", "failed", "success"]
    assert outcomes[0].result.page_type == "home"
    assert outcomes[1].error_type == "ContentFetchError"
    assert "HTTP 404" in outcomes[1].error
    assert outcomes[1].result is None
    assert outcomes[2].page_type == "about"


def test_analyze_pages_with_no_pages():
    assert asyncio.run(analyze_pages([], use_ai=False)) == []


def test_analyze_page_records_redirect_target():
    def redirected(url):
        return PageContent(url=url, final_url="https://www.example.com/home", status_code=200, text=CONTENT)

    result = analyze_page("https://example.com", "home", fetcher=redirected, use_ai=False)
    assert result.url == "https://example.com"
    assert result.final_url == "https://www.example.com/home"


def test_content_analysis_has_no_final_url():
    assert analyze_with_fallback(CONTENT, "https://example.com", use_ai=False).final_url is None
