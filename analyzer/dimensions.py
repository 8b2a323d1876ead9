"""
Golden Circle dimension extractors (WHY / HOW / WHAT / WHO).

Each extractor tries an ordered list of patterns and keeps the first match
whose cleaned length falls inside the dimension's window. Extraction results
are tagged with ``found`` so callers never have to inspect the placeholder
sentence to know whether anything was extracted; the sentence is only used
for display via ``Extraction.display_text``.
"""

import re
from dataclasses import dataclass
from itertools import islice
from typing import Callable, Dict, Optional, Sequence, Tuple

from analyzer.patterns import NAMED_METHODOLOGIES, NAMED_OFFERINGS, NAMED_SERVICES

WHO_MAX_LENGTH = 300
# Sentence-style patterns give up after this many characters without a period.
MAX_SENTENCE_TAIL = 300

NOT_DEFINED_TEXT: Dict[str, str] = {
    "why": "Purpose and mission not clearly defined in content",
    "how": "Methodology and approach not clearly defined in content",
    "what": "Products and services not clearly defined in content",
    "who": "Target audience and client testimonials not clearly defined in content",
}


@dataclass(frozen=True)
class Extraction:
    dimension: str
    text: str = ""

    @property
    def found(self) -> bool:
        return bool(self.text)

    @property
    def display_text(self) -> str:
        return self.text if self.found else NOT_DEFINED_TEXT[self.dimension]


def _i(pattern: str) -> "re.Pattern[str]":
    return re.compile(pattern, re.IGNORECASE)


def _named_sentences(names: Sequence[str]) -> "re.Pattern[str]":
    alternation = "|".join(re.escape(name) for name in names)
    return _i(rf"({alternation})[^.]{{0,{MAX_SENTENCE_TAIL}}}?\.")


WHY_PATTERNS: Tuple["re.Pattern[str]", ...] = (
    _i(r"(?:we|our|the|this).{0,50}(?:mission|purpose|believe|vision|values|why).{0,100}"),
    _i(r"(?:innovative|revolutionary|transform|empower|inspire).{0,100}"),
    _i(r"(?:making|creating|building|delivering).{0,50}(?:better|easier|simpler|more).{0,50}"),
    _i(r"(?:specialize|focus|dedicated).{0,50}(?:to|on).{0,100}"),
)
WHY_FALLBACK = _i(r"(?:apple|company|we|our).{0,100}(?:design|create|develop|build|innovate).{0,50}")

HOW_PATTERNS: Tuple["re.Pattern[str]", ...] = (
    _i(r"(?:methodology|approach|process|framework|system|method).{0,100}"),
    _i(r"(?:design|create|develop|build|innovate).{0,50}(?:through|using|with).{0,50}"),
    _i(r"(?:four-phase|step-by-step|systematic).{0,100}"),
    _i(r"(?:proven|tested|established).{0,50}(?:method|approach|process).{0,50}"),
)
HOW_NAMED = _named_sentences(NAMED_METHODOLOGIES)

WHAT_PATTERNS: Tuple["re.Pattern[str]", ...] = (
    _i(r"(?:products|services|solutions|offer|provide|deliver).{0,100}"),
    _i(r"(?:iPhone|iPad|Mac|Watch|AirPods|Apple TV).{0,50}"),
    _i(r"(?:software|hardware|devices|accessories).{0,50}"),
    _i(r"(?:custom|specialized|professional).{0,50}(?:solutions|services|products).{0,50}"),
)
WHAT_NAMED_SERVICES = _named_sentences(NAMED_SERVICES)
WHAT_NAMED_OFFERINGS = _named_sentences(NAMED_OFFERINGS)

# Names are matched case-sensitively: two capitalised words followed by the
# rest of the sentence.
WHO_TESTIMONIAL = re.compile(rf"([A-Z][a-z]+ [A-Z][a-z]+)[^.]{{0,{MAX_SENTENCE_TAIL}}}?\.")
WHO_METRIC = _i(rf"(\d+% growth|\d+% ROI|\d+% increase)[^.]{{0,{MAX_SENTENCE_TAIL}}}?\.")
WHO_AUDIENCE = _i(r"(businesses|companies|organizations|customers|users).{0,50}")


def clean_snippet(snippet: str) -> str:
    return re.sub(r"\s+", " ", snippet).strip()


def first_in_window(
    text: str, patterns: Sequence["re.Pattern[str]"], min_len: int, max_len: int
) -> Optional[str]:
    """Return the first pattern's first match whose cleaned length is strictly inside the window."""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            cleaned = clean_snippet(match.group(0))
            if min_len < len(cleaned) < max_len:
                return cleaned
    return None


def _joined_sentences(text: str, pattern: "re.Pattern[str]") -> str:
    return " ".join(m.group(0) for m in pattern.finditer(text))


def extract_why(text: str) -> Extraction:
    why = first_in_window(text, WHY_PATTERNS, 20, 200)
    if why is None:
        match = WHY_FALLBACK.search(text)
        if match:
            why = clean_snippet(match.group(0))
    return Extraction("why", why or "")


def extract_how(text: str) -> Extraction:
    how = first_in_window(text, HOW_PATTERNS, 15, 150) or ""
    named = _joined_sentences(text, HOW_NAMED)
    if named:
        how = named
    return Extraction("how", how)


def extract_what(text: str) -> Extraction:
    what = first_in_window(text, WHAT_PATTERNS, 10, 200) or ""
    # Offerings take precedence over services when both are present.
    for pattern in (WHAT_NAMED_SERVICES, WHAT_NAMED_OFFERINGS):
        named = _joined_sentences(text, pattern)
        if named:
            what = named
    return Extraction("what", what)


def extract_who(text: str) -> Extraction:
    who = ""

    testimonials = [m.group(0) for m in islice(WHO_TESTIMONIAL.finditer(text), 3)]
    if testimonials:
        who = " ".join(testimonials)

    metrics = [m.group(0) for m in islice(WHO_METRIC.finditer(text), 2)]
    if metrics:
        who += " " + " ".join(metrics)

    audience = WHO_AUDIENCE.search(text)
    if audience:
        who += " " + audience.group(0).strip()

    who = who.strip()
    if len(who) > WHO_MAX_LENGTH:
        who = who[:WHO_MAX_LENGTH] + "..."
    return Extraction("who", who)


EXTRACTORS: Dict[str, Callable[[str], Extraction]] = {
    "why": extract_why,
    "how": extract_how,
    "what": extract_what,
    "who": extract_who,
}


def extract_dimension(text: str, dimension: str) -> Extraction:
    try:
        extractor = EXTRACTORS[dimension]
    except KeyError:
        raise ValueError(f"Unknown Golden Circle dimension: {dimension!r}") from None
    return extractor(text or "")


def extract_all(text: str) -> Dict[str, Extraction]:
    return {dimension: extract_dimension(text, dimension) for dimension in EXTRACTORS}
