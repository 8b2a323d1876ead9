"""
AI provider adapter for framework analysis.

The provider asks Claude for Golden Circle statements and category scores
and lays them over the deterministic analyzer's result, so AI and fallback
analyses share one result shape. Any failure surfaces as AIProviderError;
callers decide whether to fall back.
"""

import logging
from decimal import InvalidOperation
from typing import Callable, Dict, Optional

import anthropic
from pydantic import BaseModel

from analyzer.aggregation import MAX_SCORE, framework_score, golden_circle_score, overall_score, round_half_up
from analyzer.content_analyzer import ContentAnalyzer
from analyzer.dimensions import Extraction
from analyzer.insights import (
    build_summary,
    dimension_insight,
    elements_of_value_insights,
    elements_of_value_summary,
    golden_circle_insights,
    golden_circle_summary,
    normalize_page_type,
    strengths_insights,
    strengths_summary,
)
from analyzer.prompts import get_analysis_prompt
from analyzer.results import AnalysisResult, CategoryScore, FrameworkResult, GoldenCircleResult
from config import settings
from utils.anthropic_client import call_anthropic_api_with_retry, extract_text
from utils.parsing.json import repair_and_parse_json

logger = logging.getLogger(__name__)


class AIProviderError(Exception):
    """Raised when AI analysis cannot produce a usable result"""

    pass


class GoldenCirclePayload(BaseModel):
    why: Optional[str] = ""
    how: Optional[str] = ""
    what: Optional[str] = ""
    who: Optional[str] = ""
    score: Optional[float] = None


class AIAnalysisPayload(BaseModel):
    golden_circle: GoldenCirclePayload = GoldenCirclePayload()
    elements_of_value: Dict[str, Optional[float]] = {}
    clifton_strengths: Dict[str, Optional[float]] = {}
    summary: Optional[str] = ""


def clamp_score(value) -> Optional[int]:
    if value is None:
        return None
    try:
        return max(0, min(MAX_SCORE, round_half_up(float(value))))
    except (TypeError, ValueError, InvalidOperation):
        return None


class AnthropicAnalysisProvider:
    """Claude-backed framework analysis."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_content_chars: Optional[int] = None,
        call: Callable = call_anthropic_api_with_retry,
        analyzer: Optional[ContentAnalyzer] = None,
    ):
        self.api_key = settings.ANTHROPIC_API_KEY if api_key is None else api_key
        self.model = model or settings.ANTHROPIC_MODEL
        self.max_content_chars = max_content_chars or settings.MAX_CONTENT_CHARS
        self.call = call
        self.analyzer = analyzer or ContentAnalyzer()

    @property
    def name(self) -> str:
        return f"ai:{self.model}"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def analyze(self, content: str, url: str, page_type: str = "general") -> AnalysisResult:
        if not self.is_configured:
            raise AIProviderError("ANTHROPIC_API_KEY is not configured")
        content = content or ""
        if not content.strip():
            raise AIProviderError("No content to analyze")
        if len(content) > self.max_content_chars:
            raise AIProviderError(
                f"Content too large for AI analysis ({len(content)} > {self.max_content_chars} chars)"
            )

        page_type = normalize_page_type(page_type)
        prompt = get_analysis_prompt(content, url, page_type)

        try:
            message = self.call(prompt, model=self.model, api_key=self.api_key)
        except anthropic.APIError as e:
            raise AIProviderError(f"Anthropic API failure: {str(e)}") from e

        try:
            payload = AIAnalysisPayload.model_validate(repair_and_parse_json(extract_text(message)))
        except ValueError as e:
            raise AIProviderError(f"Unparsable AI response: {str(e)}") from e

        baseline = self.analyzer.analyze_content(content, url, page_type)
        result = self.merge(baseline, payload, content)
        logger.info(f"✅ AI analysis completed for {url} ({self.model}): overall {result.overall_score}/100")
        return result

    def merge(self, baseline: AnalysisResult, payload: AIAnalysisPayload, content: str = "") -> AnalysisResult:
        golden_circle = self._merge_golden_circle(baseline.golden_circle, payload.golden_circle)
        elements_of_value = self._merge_framework(
            baseline.elements_of_value,
            payload.elements_of_value,
            elements_of_value_insights,
            elements_of_value_summary,
        )
        clifton_strengths = self._merge_framework(
            baseline.clifton_strengths,
            payload.clifton_strengths,
            strengths_insights,
            strengths_summary,
        )
        summary = (payload.summary or "").strip() or build_summary(
            content,
            baseline.metrics.word_count,
            golden_circle.overall_score,
            elements_of_value,
            clifton_strengths,
        )

        return baseline.model_copy(
            update={
                "source": self.name,
                "golden_circle": golden_circle,
                "elements_of_value": elements_of_value,
                "clifton_strengths": clifton_strengths,
                "overall_score": overall_score(
                    golden_circle.overall_score,
                    elements_of_value.overall_score,
                    clifton_strengths.overall_score,
                ),
                "summary": summary,
            }
        )

    @staticmethod
    def _merge_golden_circle(baseline: GoldenCircleResult, payload: GoldenCirclePayload) -> GoldenCircleResult:
        dimensions = {}
        extractions = {}
        for dimension in ("why", "how", "what", "who"):
            current = getattr(baseline, dimension)
            text = (getattr(payload, dimension) or "").strip()
            if not text:
                dimensions[dimension] = current
                extractions[dimension] = Extraction(dimension, current.text if current.found else "")
                continue
            extractions[dimension] = Extraction(dimension, text)
            dimensions[dimension] = current.model_copy(
                update={
                    "found": True,
                    "text": text,
                    "insights": [dimension_insight(extractions[dimension])],
                }
            )

        # Score, insights and summary always describe the merged dimensions
        score = clamp_score(payload.score)
        return baseline.model_copy(
            update={
                **dimensions,
                "overall_score": golden_circle_score(extractions.values()) if score is None else score,
                "insights": golden_circle_insights(extractions),
                "summary": golden_circle_summary(extractions),
            }
        )

    @staticmethod
    def _merge_framework(
        baseline: FrameworkResult,
        scores: Dict[str, Optional[float]],
        describe_categories: Callable,
        describe_overall: Callable[[int], str],
    ) -> FrameworkResult:
        categories: Dict[str, CategoryScore] = {}
        for name, category in baseline.categories.items():
            score = clamp_score(scores.get(name))
            categories[name] = category if score is None else category.model_copy(update={"score": score})
        overall = framework_score(categories)
        return baseline.model_copy(
            update={
                "categories": categories,
                "overall_score": overall,
                "insights": describe_categories(categories),
                "summary": describe_overall(overall),
            }
        )


def get_default_provider() -> Optional[AnthropicAnalysisProvider]:
    """Provider built from settings, or None when AI analysis is disabled."""
    if not settings.AI_ANALYSIS_ENABLED:
        return None
    return AnthropicAnalysisProvider()
