import asyncio
import hashlib
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from analyzer.content_analyzer import analyze_content
from analyzer.patterns import concept_count
from analyzer.pipeline import analyze_page, analyze_pages, analyze_with_fallback
from analyzer.results import AnalysisResult
from config import settings
from models import (
    BatchAnalysisRequest,
    BatchAnalysisResponse,
    CacheClearResponse,
    ContentAnalysisRequest,
    PageAnalysisRequest,
)
from redis_client import RedisClient, get_redis_client
from utils.scraper import ContentFetchError

logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


def get_cache() -> Optional[RedisClient]:
    """Redis client for result caching, or None when caching is off or Redis is down."""
    if not settings.CACHE_ENABLED:
        return None
    try:
        return get_redis_client()
    except RuntimeError as e:
        logger.warning(f"⚠️  Redis unavailable, continuing without cache: {str(e)}")
        return None


def content_digest(content: str) -> str:
    return hashlib.sha256(content.encode("utf-8")).hexdigest()[:16]


@router.get("/")
async def root():
    return {
        "service": "Content Analyzer",
        "status": "running",
        "endpoints": {
            "analyze_content": "/analyze/content (POST)",
            "analyze": "/analyze (POST)",
            "analyze_page": "/analyze/page (POST)",
            "analyze_batch": "/analyze/batch (POST)",
        },
    }


@router.get("/health")
async def health_check():
    return {"status": "healthy"}


@router.get("/status/detailed")
async def detailed_status_check():
    """
    Status check with Redis and Anthropic configuration health.

    Returns comprehensive system health information for monitoring.
    """
    status_info = {
        "api": "healthy",
        "redis": "disabled",
        "anthropic_api": "configured" if settings.ANTHROPIC_API_KEY else "missing",
        "ai_analysis": "enabled" if settings.AI_ANALYSIS_ENABLED else "disabled",
        "concepts": concept_count(),
    }

    # Check Redis connection
    if settings.CACHE_ENABLED:
        try:
            redis_client = get_redis_client()
            if redis_client.ping():
                status_info["redis"] = "connected"
                status_info["redis_stats"] = redis_client.get_stats()
            else:
                status_info["redis"] = "disconnected"
        except RuntimeError as e:
            status_info["redis"] = f"error: {str(e)}"

    # Content analysis always works; AI and cache problems only degrade the service
    degraded = [status_info["redis"]]
    if settings.AI_ANALYSIS_ENABLED:
        degraded.append(status_info["anthropic_api"])

    if any("error" in c or "missing" in c or "disconnected" in c for c in degraded):
        status_info["overall_status"] = "degraded"
    else:
        status_info["overall_status"] = "healthy"

    return status_info


@router.post("/analyze/content", response_model=AnalysisResult)
async def analyze_content_only(request: ContentAnalysisRequest):
    """
    Deterministic framework analysis of the submitted text.

    No AI provider and no cache are involved; the same content always yields
    the same scores.
    """
    try:
        return await asyncio.to_thread(analyze_content, request.content, request.url, request.page_type)
    except Exception as e:
        logger.exception(f"❌ Content analysis failed for {request.url or '<content>'}")
        raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(request: ContentAnalysisRequest):
    """
    Analyze submitted text with AI, falling back to content analysis.

    Results of AI-enabled requests are cached by URL, page type and a digest
    of the content.
    """
    cache = get_cache() if request.use_ai else None
    digest = content_digest(request.content)

    if cache is not None:
        cached = cache.get_cached_analysis(request.url, request.page_type, digest)
        if cached:
            logger.info(f"✅ Cache hit for {request.url or '<content>'} ({request.page_type})")
            return cached

    try:
        result = await asyncio.to_thread(
            analyze_with_fallback,
            request.content,
            request.url,
            request.page_type,
            use_ai=request.use_ai,
        )
    except Exception as e:
        logger.exception(f"❌ Analysis failed for {request.url or '<content>'}")
        raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")

    if cache is not None:
        cache.cache_analysis(request.url, request.page_type, result.model_dump(), digest=digest)
    return result


@router.post("/analyze/page", response_model=AnalysisResult)
async def analyze_page_endpoint(request: PageAnalysisRequest):
    """
    Fetch a page and analyze it. Results are cached by URL and page type.
    """
    url = str(request.url)
    cache = get_cache() if request.use_ai else None

    if cache is not None:
        cached = cache.get_cached_analysis(url, request.page_type)
        if cached:
            logger.info(f"✅ Cache hit for {url} ({request.page_type})")
            return cached

    try:
        result = await asyncio.to_thread(analyze_page, url, request.page_type, use_ai=request.use_ai)
    except ContentFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.exception(f"❌ Page analysis failed for {url}")
        raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")

    if cache is not None:
        cache.cache_analysis(url, request.page_type, result.model_dump())
    return result


@router.post("/analyze/batch", response_model=BatchAnalysisResponse)
async def analyze_batch(request: BatchAnalysisRequest):
    """
    Analyze several pages concurrently.

    A page that fails to fetch is reported as a failed outcome; it never
    fails the whole request.
    """
    outcomes = await analyze_pages(
        [(str(page.url), page.page_type) for page in request.pages],
        use_ai=request.use_ai,
    )
    succeeded = sum(1 for outcome in outcomes if outcome.status == "success")
    return BatchAnalysisResponse(
        total=len(outcomes),
        succeeded=succeeded,
        failed=len(outcomes) - succeeded,
        results=outcomes,
    )


@router.delete("/cache/analysis/{url:path}", response_model=CacheClearResponse)
async def clear_analysis_cache(url: str):
    """
    Clear cached analysis results for a specific URL.

    Removes page and content analyses for every page type. Useful for
    forcing a fresh analysis of a previously analyzed page.

    Args:
        url: The page URL (should be URL-encoded if it contains special characters)
    """
    cache = get_cache()
    if cache is None:
        return CacheClearResponse(
            cleared=False,
            url=url,
            message="Cache unavailable",
        )

    deleted = await asyncio.to_thread(cache.clear_analysis_cache, url)
    return CacheClearResponse(
        cleared=deleted > 0,
        url=url,
        keys_deleted=deleted,
        message="Analysis cache removed" if deleted else "Cache entry not found",
    )
