# Utils package - Claude client, JSON repair and page fetching

from .anthropic_client import call_anthropic_api_with_retry
from .parsing.json import repair_and_parse_json
from .scraper import ContentFetchError, fetch_page_content

__all__ = [
    "call_anthropic_api_with_retry",
    "repair_and_parse_json",
    "ContentFetchError",
    "fetch_page_content",
]
