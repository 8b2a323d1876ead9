from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


PageType = Literal["home", "testimonials", "services", "about", "contact", "case-studies", "general"]
Priority = Literal["high", "medium", "low"]
Effort = Literal["Low", "Medium", "High"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# Scores
class EvidenceScore(_Frozen):
    concept: str
    score: int = Field(ge=0, le=10)
    evidence: str
    matched_triggers: List[str] = []


class CategoryScore(_Frozen):
    name: str
    score: int = Field(ge=0, le=100)
    concepts: Dict[str, EvidenceScore]


# Golden Circle
class DimensionExtraction(_Frozen):
    dimension: Literal["why", "how", "what", "who"]
    found: bool
    text: str
    evidence: EvidenceScore
    insights: List[str]


class GoldenCircleResult(_Frozen):
    why: DimensionExtraction
    how: DimensionExtraction
    what: DimensionExtraction
    who: DimensionExtraction
    overall_score: int = Field(ge=0, le=100)
    insights: List[str]
    summary: str


# Elements of Value / CliftonStrengths
class FrameworkResult(_Frozen):
    categories: Dict[str, CategoryScore]
    overall_score: int = Field(ge=0, le=100)
    top_concepts: List[str]
    insights: List[str]
    summary: str


# Recommendations
class Recommendation(_Frozen):
    category: str
    title: str
    description: str
    action_items: List[str]
    expected_impact: str
    effort: Effort
    timeline: str
    priority: Priority


class RecommendationSet(_Frozen):
    high_priority: List[Recommendation]
    medium_priority: List[Recommendation]
    low_priority: List[Recommendation]
    summary: str
    next_steps: List[str]


# Page level
class ContentMetrics(_Frozen):
    word_count: int = 0
    image_count: int = 0
    link_count: int = 0


class PageInsights(_Frozen):
    page_specific_analysis: str
    conversion_elements: List[str]
    trust_signals: List[str]
    call_to_actions: List[str]
    social_proof: List[str]
    technical_issues: List[str]


class AnalysisResult(_Frozen):
    id: str
    url: str
    page_type: PageType
    source: str = "content-analysis"
    created_at: str
    analyzed_at: str
    golden_circle: GoldenCircleResult
    elements_of_value: FrameworkResult
    clifton_strengths: FrameworkResult
    recommendations: RecommendationSet
    overall_score: int = Field(ge=0, le=100)
    summary: str
    metrics: ContentMetrics
    specific_insights: PageInsights
    page_title: Optional[str] = None
    meta_description: Optional[str] = None
    final_url: Optional[str] = None
    loading_time_ms: int = 0


# Batch outcomes
class PageOutcome(BaseModel):
    url: str
    page_type: PageType
    status: Literal["success", "failed"]
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
