"""
Page fetching and text extraction for the Content Analyzer.

A plain HTTP fetch with requests + BeautifulSoup. JavaScript-rendered pages
are out of scope; whatever text the server returns is what gets analyzed.
"""

import logging
import re
import time
from dataclasses import dataclass
from typing import Optional

import requests
from bs4 import BeautifulSoup

from config import settings

logger = logging.getLogger(__name__)

NOISE_TAGS = ["script", "style", "noscript", "svg", "canvas", "template", "iframe"]


class ContentFetchError(Exception):
    """Raised when a page cannot be fetched or returns a non-success status"""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to fetch {url}: {message}")
        self.url = url
        self.status_code = status_code


@dataclass
class PageContent:
    url: str
    final_url: str
    status_code: int
    title: str = ""
    meta_description: str = ""
    text: str = ""
    word_count: int = 0
    image_count: int = 0
    link_count: int = 0


def _headers() -> dict:
    return {
        "User-Agent": settings.FETCH_USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.8",
    }


def extract_main_text(soup: BeautifulSoup) -> str:
    region = soup.find("main") or soup.find("article") or soup.body or soup
    clone = BeautifulSoup(str(region), "html.parser")
    for node in clone(NOISE_TAGS):
        node.decompose()
    text = clone.get_text(" ", strip=True)
    return re.sub(r"\s+", " ", text).strip()


def parse_html(url: str, html: str, status_code: int = 200, final_url: Optional[str] = None) -> PageContent:
    soup = BeautifulSoup(html or "", "html.parser")

    title = soup.title.get_text(" ", strip=True) if soup.title else ""
    meta = soup.find("meta", attrs={"name": re.compile(r"^description$", re.IGNORECASE)})
    meta_description = (meta.get("content") or "").strip() if meta else ""
    text = extract_main_text(soup)

    return PageContent(
        url=url,
        final_url=final_url or url,
        status_code=status_code,
        title=title,
        meta_description=meta_description,
        text=text,
        word_count=len(text.split()),
        image_count=len(soup.find_all("img")),
        link_count=len(soup.find_all("a", href=True)),
    )


def fetch_page_content(url: str, timeout: Optional[int] = None, session=None) -> PageContent:
    """
    Fetch a page and extract its readable text.

    Args:
        url: Page URL
        timeout: Request timeout in seconds (defaults to FETCH_TIMEOUT)
        session: Optional requests.Session to reuse connections

    Returns:
        PageContent with text, title, meta description and counts

    Raises:
        ContentFetchError: On network errors or non-2xx responses
    """
    http = session or requests
    started = time.perf_counter()

    try:
        response = http.get(
            url,
            headers=_headers(),
            timeout=timeout or settings.FETCH_TIMEOUT,
            allow_redirects=True,
        )
    except requests.exceptions.RequestException as e:
        logger.warning(f"❌ Page fetch failed for {url}: {str(e)}")
        raise ContentFetchError(url, str(e)) from e

    if not 200 <= response.status_code < 300:
        logger.warning(f"❌ Page fetch for {url} returned HTTP {response.status_code}")
        raise ContentFetchError(url, f"HTTP {response.status_code}", status_code=response.status_code)

    page = parse_html(url, response.text, response.status_code, final_url=response.url or url)
    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(f"✅ Fetched {url}: {page.word_count} words in {elapsed_ms}ms")
    return page
