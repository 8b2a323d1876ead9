"""
Analysis pipeline: AI first, deterministic fallback, page fetching and
concurrent fan-out over several pages.

The deterministic analyzer never fails, so analyze_with_fallback always
returns a result. Fetch failures are the only errors that escape a single
page analysis; analyze_pages turns those into failed outcomes instead of
aborting the group.
"""

import asyncio
import logging
from typing import Callable, Iterable, List, Optional, Tuple

from analyzer.content_analyzer import analyze_content
from analyzer.insights import normalize_page_type
from analyzer.providers import AIProviderError, AnthropicAnalysisProvider, get_default_provider
from analyzer.results import AnalysisResult, ContentMetrics, PageOutcome
from utils.scraper import PageContent, fetch_page_content

logger = logging.getLogger(__name__)


def _resolve_provider(provider, use_ai: bool) -> Optional[AnthropicAnalysisProvider]:
    if not use_ai:
        return None
    if provider is None:
        return get_default_provider()
    return provider


def analyze_with_fallback(
    content: str,
    url: str = "",
    page_type: str = "general",
    provider: Optional[AnthropicAnalysisProvider] = None,
    use_ai: bool = True,
) -> AnalysisResult:
    """
    Analyze content with the AI provider, falling back to the deterministic analyzer.

    Args:
        content: Page text
        url: Page URL
        page_type: Page type (unknown values are treated as "general")
        provider: AI provider; defaults to the one built from settings
        use_ai: Set False to skip the AI path entirely

    Returns:
        AnalysisResult (source is "ai:<model>" or "content-analysis")
    """
    page_type = normalize_page_type(page_type)
    provider = _resolve_provider(provider, use_ai)

    if provider is not None and provider.is_configured:
        try:
            return provider.analyze(content, url, page_type)
        except AIProviderError as e:
            logger.warning(f"⚠️  AI analysis failed for {url or '<content>'}, using content analysis: {str(e)}")

    return analyze_content(content, url, page_type)


def attach_page_details(result: AnalysisResult, page: PageContent) -> AnalysisResult:
    """Copy title, meta description, final URL and HTML-derived counts from the fetched page."""
    return result.model_copy(
        update={
            "page_title": page.title or None,
            "meta_description": page.meta_description or None,
            "final_url": page.final_url or None,
            "metrics": ContentMetrics(
                word_count=page.word_count,
                image_count=page.image_count,
                link_count=page.link_count,
            ),
        }
    )


def analyze_page(
    url: str,
    page_type: str = "general",
    provider: Optional[AnthropicAnalysisProvider] = None,
    fetcher: Optional[Callable[[str], PageContent]] = None,
    use_ai: bool = True,
) -> AnalysisResult:
    """
    Fetch a page and analyze its text.

    Raises:
        ContentFetchError: When the page cannot be fetched
    """
    fetch = fetcher or fetch_page_content
    logger.info(f"🔄 Analyzing page {url} ({page_type})")

    page = fetch(url)
    result = analyze_with_fallback(page.text, url, page_type, provider=provider, use_ai=use_ai)
    return attach_page_details(result, page)


async def analyze_pages(
    pages: Iterable[Tuple[str, str]],
    provider: Optional[AnthropicAnalysisProvider] = None,
    fetcher: Optional[Callable[[str], PageContent]] = None,
    use_ai: bool = True,
) -> List[PageOutcome]:
    """
    Analyze several pages concurrently.

    Args:
        pages: (url, page_type) pairs
        provider: Shared AI provider (see analyze_with_fallback)
        fetcher: Page fetcher, defaults to utils.scraper.fetch_page_content
        use_ai: Set False to skip the AI path

    Returns:
        One PageOutcome per input page, in input order. A failed page never
        aborts the others.
    """
    pages = [(url, normalize_page_type(page_type)) for url, page_type in pages]
    if provider is None and use_ai:
        provider = get_default_provider()

    results = await asyncio.gather(
        *(
            asyncio.to_thread(analyze_page, url, page_type, provider, fetcher, use_ai)
            for url, page_type in pages
        ),
        return_exceptions=True,
    )

    outcomes: List[PageOutcome] = []
    for (url, page_type), result in zip(pages, results):
        if isinstance(result, Exception):
            logger.error(f"❌ Page analysis failed for {url}: {str(result)}")
            outcomes.append(
                PageOutcome(
                    url=url,
                    page_type=page_type,
                    status="failed",
                    error=str(result),
                    error_type=type(result).__name__,
                )
            )
        elif isinstance(result, BaseException):
            raise result
        else:
            outcomes.append(PageOutcome(url=url, page_type=page_type, status="success", result=result))

    succeeded = sum(1 for outcome in outcomes if outcome.status == "success")
    logger.info(f"✅ Batch analysis complete: {succeeded}/{len(outcomes)} pages succeeded")
    return outcomes
