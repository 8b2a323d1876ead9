"""
Evidence scanner.

Counts keyword evidence for a concept in a block of text and turns the
count into a bounded 0-10 score.

Matching is case-insensitive and anchored at the start of a word, so the
trigger "achieve" also counts "achieved" and "achieves" but "roi" does not
fire inside "heroic". Scores are not normalised by text length: a long page
and a short page with the same number of mentions get the same score, and
scores are therefore not comparable across pages of very different size.
"""

import re
from functools import lru_cache
from typing import Dict, Iterable, List, Sequence, Tuple

from analyzer.patterns import ConceptPattern
from analyzer.results import EvidenceScore

POINTS_PER_MATCH = 2
MAX_CONCEPT_SCORE = 10


@lru_cache(maxsize=512)
def compile_trigger(trigger: str) -> "re.Pattern[str]":
    return re.compile(r"\b" + re.escape(trigger), re.IGNORECASE)


def count_matches(text: str, triggers: Iterable[str]) -> Dict[str, int]:
    """Non-overlapping match count per trigger, keeping only triggers that matched."""
    counts: Dict[str, int] = {}
    if not text:
        return counts
    for trigger in triggers:
        if not trigger:
            continue
        found = len(compile_trigger(trigger).findall(text))
        if found:
            counts[trigger] = counts.get(trigger, 0) + found
    return counts


def score_from_count(total_matches: int) -> int:
    return min(total_matches * POINTS_PER_MATCH, MAX_CONCEPT_SCORE)


def score_concept(text: str, triggers: Sequence[str]) -> int:
    """Score a concept from 0 to 10 based on how often its triggers appear."""
    return score_from_count(sum(count_matches(text, triggers).values()))


def evidence_for(text: str, pattern: ConceptPattern) -> EvidenceScore:
    counts = count_matches(text, pattern.triggers)
    total = sum(counts.values())
    if total:
        noun = "mention" if total == 1 else "mentions"
        evidence = f"{total} {noun} of {pattern.display_name} language ({', '.join(counts)})"
    else:
        evidence = f"No {pattern.display_name} language found"
    return EvidenceScore(
        concept=pattern.name,
        score=score_from_count(total),
        evidence=evidence,
        matched_triggers=list(counts),
    )


def scan_concepts(text: str, patterns: Sequence[ConceptPattern]) -> Dict[str, EvidenceScore]:
    return {pattern.name: evidence_for(text, pattern) for pattern in patterns}


def rank_scores(scores: Iterable[EvidenceScore]) -> List[Tuple[str, int]]:
    """Concepts ordered by score, highest first. Ties keep table order."""
    return sorted(((s.concept, s.score) for s in scores), key=lambda item: item[1], reverse=True)
