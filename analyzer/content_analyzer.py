"""
Content Analyzer - deterministic website content scoring

Scores page text against three marketing frameworks without calling any
AI provider:
- Golden Circle (WHY / HOW / WHAT / WHO extraction)
- Elements of Value (functional, emotional, life-changing, social impact)
- CliftonStrengths (executing, influencing, relationship building, strategic thinking)

It also produces rule-based recommendations and page-level insights. The
analyzer is pure: no I/O and no shared mutable state, so one instance can
serve concurrent requests. It is the fallback path whenever AI analysis is
disabled or fails, and it must never raise for string input.
"""

import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Dict, Mapping, Optional, Sequence

from analyzer import aggregation, insights
from analyzer.dimensions import Extraction, extract_all
from analyzer.evidence import evidence_for, scan_concepts
from analyzer.patterns import ConceptPattern, ELEMENTS_OF_VALUE, GOLDEN_CIRCLE_KEYWORDS, STRENGTHS
from analyzer.recommendations import generate_recommendations
from analyzer.results import (
    AnalysisResult,
    CategoryScore,
    DimensionExtraction,
    FrameworkResult,
    GoldenCircleResult,
)

logger = logging.getLogger(__name__)

TOP_ELEMENTS_LIMIT = 5
TOP_THEMES_LIMIT = 10


def generate_analysis_id() -> str:
    return f"content_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ContentAnalyzer:
    """
    Deterministic content analyzer.

    Usage:
        result = ContentAnalyzer().analyze_content(text, "https://example.com", "home")
    """

    def __init__(
        self,
        elements_of_value: Optional[Mapping[str, Sequence[ConceptPattern]]] = None,
        strengths: Optional[Mapping[str, Sequence[ConceptPattern]]] = None,
    ):
        self.elements_of_value = elements_of_value or ELEMENTS_OF_VALUE
        self.strengths = strengths or STRENGTHS

    def analyze_content(self, content: str, url: str = "", page_type: str = "general") -> AnalysisResult:
        """
        Analyze page content and assemble the full result.

        Args:
            content: Page text (HTML tags are tolerated and counted as images/links)
            url: Page URL, used for attribution only
            page_type: One of the known page types; anything else is treated as "general"

        Returns:
            AnalysisResult with framework scores, recommendations and insights
        """
        started = time.perf_counter()
        content = content if isinstance(content, str) else ("" if content is None else str(content))
        page_type = insights.normalize_page_type(page_type)

        metrics = insights.content_metrics(content)
        golden_circle = self.analyze_golden_circle(content)
        elements_of_value = self.analyze_elements_of_value(content)
        clifton_strengths = self.analyze_clifton_strengths(content)
        recommendations = generate_recommendations(content, page_type)

        overall = aggregation.overall_score(
            golden_circle.overall_score,
            elements_of_value.overall_score,
            clifton_strengths.overall_score,
        )
        summary = insights.build_summary(
            content, metrics.word_count, golden_circle.overall_score, elements_of_value, clifton_strengths
        )

        now = utc_now_iso()
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.debug(
            "Content analysis for %s (%s): %d words, overall %d/100 in %dms",
            url, page_type, metrics.word_count, overall, elapsed_ms,
        )

        return AnalysisResult(
            id=generate_analysis_id(),
            url=url or "",
            page_type=page_type,
            created_at=now,
            analyzed_at=now,
            golden_circle=golden_circle,
            elements_of_value=elements_of_value,
            clifton_strengths=clifton_strengths,
            recommendations=recommendations,
            overall_score=overall,
            summary=summary,
            metrics=metrics,
            specific_insights=insights.page_specific_insights(content, page_type),
            loading_time_ms=elapsed_ms,
        )

    def analyze_golden_circle(self, content: str) -> GoldenCircleResult:
        extractions = extract_all(content)
        dimensions = {
            name: self._dimension_result(content, extraction)
            for name, extraction in extractions.items()
        }
        return GoldenCircleResult(
            **dimensions,
            overall_score=aggregation.golden_circle_score(extractions.values()),
            insights=insights.golden_circle_insights(extractions),
            summary=insights.golden_circle_summary(extractions),
        )

    @staticmethod
    def _dimension_result(content: str, extraction: Extraction) -> DimensionExtraction:
        return DimensionExtraction(
            dimension=extraction.dimension,
            found=extraction.found,
            text=extraction.display_text,
            evidence=evidence_for(content, GOLDEN_CIRCLE_KEYWORDS[extraction.dimension]),
            insights=[insights.dimension_insight(extraction)],
        )

    def analyze_elements_of_value(self, content: str) -> FrameworkResult:
        categories = self._score_categories(content, self.elements_of_value)
        overall = aggregation.framework_score(categories)
        return FrameworkResult(
            categories=categories,
            overall_score=overall,
            top_concepts=aggregation.top_concepts(categories, TOP_ELEMENTS_LIMIT),
            insights=insights.elements_of_value_insights(categories),
            summary=insights.elements_of_value_summary(overall),
        )

    def analyze_clifton_strengths(self, content: str) -> FrameworkResult:
        categories = self._score_categories(content, self.strengths)
        overall = aggregation.framework_score(categories)
        return FrameworkResult(
            categories=categories,
            overall_score=overall,
            top_concepts=aggregation.top_concepts(categories, TOP_THEMES_LIMIT),
            insights=insights.strengths_insights(categories),
            summary=insights.strengths_summary(overall),
        )

    @staticmethod
    def _score_categories(
        content: str, table: Mapping[str, Sequence[ConceptPattern]]
    ) -> Dict[str, CategoryScore]:
        return {
            name: aggregation.build_category(name, scan_concepts(content, patterns))
            for name, patterns in table.items()
        }


_default_analyzer = ContentAnalyzer()


def analyze_content(content: str, url: str = "", page_type: str = "general") -> AnalysisResult:
    """Analyze content with the shared default analyzer."""
    return _default_analyzer.analyze_content(content, url, page_type)
