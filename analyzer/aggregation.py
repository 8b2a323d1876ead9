"""
Score aggregation.

All framework, category and overall scores are reported on a 0-100 scale.
Individual concept scores stay on their native 0-10 scale and are converted
with SCORE_SCALE at the category boundary, never anywhere else.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Mapping, Sequence

from analyzer.dimensions import Extraction
from analyzer.evidence import MAX_CONCEPT_SCORE, rank_scores
from analyzer.results import CategoryScore, EvidenceScore

MAX_SCORE = 100
SCORE_SCALE = MAX_SCORE // MAX_CONCEPT_SCORE

# Golden Circle: each dimension with a substantive extraction is worth 25 points.
GOLDEN_CIRCLE_POINTS = 25
SUBSTANTIVE_LENGTH = 50


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def to_public_scale(concept_score: float) -> int:
    return min(round_half_up(concept_score * SCORE_SCALE), MAX_SCORE)


def aggregate_category(concepts: Mapping[str, EvidenceScore]) -> int:
    """Mean concept score of a category, converted to 0-100."""
    return to_public_scale(mean([c.score for c in concepts.values()]))


def build_category(name: str, concepts: Dict[str, EvidenceScore]) -> CategoryScore:
    return CategoryScore(name=name, score=aggregate_category(concepts), concepts=concepts)


def framework_score(categories: Mapping[str, CategoryScore]) -> int:
    return round_half_up(mean([c.score for c in categories.values()]))


def is_substantive(extraction: Extraction) -> bool:
    return extraction.found and len(extraction.text) > SUBSTANTIVE_LENGTH


def golden_circle_score(extractions: Iterable[Extraction]) -> int:
    score = sum(GOLDEN_CIRCLE_POINTS for e in extractions if is_substantive(e))
    return min(score, MAX_SCORE)


def overall_score(golden_circle: int, elements_of_value: int, strengths: int) -> int:
    return round_half_up(mean([golden_circle, elements_of_value, strengths]))


def top_concepts(categories: Mapping[str, CategoryScore], limit: int) -> List[str]:
    scores = [score for category in categories.values() for score in category.concepts.values()]
    return [f"{name}: {score}/{MAX_CONCEPT_SCORE}" for name, score in rank_scores(scores)[:limit]]
