"""
Page-level signals and narrative text for the content analyzer.

Covers raw content metrics, page-type specific insights (conversion
elements, trust signals, CTAs, social proof, technical issues), the
per-dimension Golden Circle insights and the overall summary paragraph.
"""

import re
from typing import Dict, List, Mapping, Tuple

from analyzer.aggregation import is_substantive
from analyzer.dimensions import Extraction
from analyzer.results import ContentMetrics, FrameworkResult, PageInsights

PAGE_TYPES: Tuple[str, ...] = ("home", "testimonials", "services", "about", "contact", "case-studies", "general")
DEFAULT_PAGE_TYPE = "general"
MIN_SEO_LENGTH = 300
EXECUTION_FOCUS_THRESHOLD = 70

IMG_TAG = re.compile(r"<img\b[^<>]*>", re.IGNORECASE)
# Tag scans stop at the next "<" or ">" so unclosed fragments stay linear
ANCHOR_TAG = re.compile(r"<a\s[^<>]*>", re.IGNORECASE)

CTA_PATTERNS = tuple(
    re.compile(phrase, re.IGNORECASE)
    for phrase in (r"get started", r"contact us", r"learn more", r"schedule", r"download", r"sign up")
)

# (keyword, label) pairs checked against the lowercased content.
CONVERSION_SIGNALS = (
    ("get started", "Get Started button"),
    ("contact", "Contact form"),
    ("schedule", "Schedule consultation"),
    ("learn more", "Learn More links"),
    ("download", "Download resources"),
)
TRUST_SIGNALS = (
    ("certification", "Professional certifications"),
    ("experience", "Years of experience"),
    ("client", "Client testimonials"),
    ("award", "Awards and recognition"),
    ("guarantee", "Money-back guarantee"),
)
SOCIAL_PROOF_SIGNALS = (
    ("testimonial", "Client testimonials"),
    ("case study", "Case studies"),
    ("client logo", "Client logos"),
    ("success story", "Success stories"),
    ("growth", "Growth metrics"),
)

DIMENSION_INSIGHTS: Dict[str, Tuple[str, str]] = {
    # dimension: (found, missing)
    "why": ("Clear purpose statement identified", "Purpose and mission need clarification"),
    "how": ("Clear approach identified", "Methodology needs better definition"),
    "what": ("Clear offerings identified", "Product/service descriptions need improvement"),
    "who": ("Clear target audience identified", "Client testimonials and target audience need better definition"),
}

SUBSTANTIVE_INSIGHTS: Dict[str, str] = {
    "why": "Strong WHY statement with clear purpose",
    "how": "Well-defined methodology and approach",
    "what": "Clear product and service offerings",
    "who": "Good client testimonials and target audience definition",
}

GOLDEN_CIRCLE_WORDING: Dict[str, Tuple[str, str]] = {
    # dimension: (found, missing)
    "why": ("strong", "weak"),
    "how": ("clear", "unclear"),
    "what": ("specific", "vague"),
    "who": ("defined", "undefined"),
}


def normalize_page_type(page_type) -> str:
    value = str(page_type or "").strip().lower().replace("_", "-")
    return value if value in PAGE_TYPES else DEFAULT_PAGE_TYPE


def content_metrics(content: str) -> ContentMetrics:
    return ContentMetrics(
        word_count=len(content.split()),
        image_count=len(IMG_TAG.findall(content)),
        link_count=sum(1 for tag in ANCHOR_TAG.findall(content) if "href" in tag.lower()),
    )


def _present(content_lower: str, signals) -> List[str]:
    return [label for keyword, label in signals if keyword in content_lower]


def call_to_actions(content: str) -> List[str]:
    ctas: List[str] = []
    for pattern in CTA_PATTERNS:
        for match in pattern.findall(content):
            label = match[:1].upper() + match[1:]
            if label not in ctas:
                ctas.append(label)
    return ctas


def technical_issues(content: str) -> List[str]:
    content_lower = content.lower()
    issues = []
    if "meta description" not in content_lower:
        issues.append("Missing meta description")
    if "alt=" not in content_lower:
        issues.append("Images missing alt text")
    if len(content) < MIN_SEO_LENGTH:
        issues.append("Content too short for SEO")
    if "heading" not in content_lower:
        issues.append("Missing proper heading structure")
    return issues


def page_specific_insights(content: str, page_type: str) -> PageInsights:
    content_lower = content.lower()
    return PageInsights(
        page_specific_analysis=(
            f"Comprehensive analysis of {page_type} page focusing on conversion optimization and user experience"
        ),
        conversion_elements=_present(content_lower, CONVERSION_SIGNALS),
        trust_signals=_present(content_lower, TRUST_SIGNALS),
        call_to_actions=call_to_actions(content),
        social_proof=_present(content_lower, SOCIAL_PROOF_SIGNALS),
        technical_issues=technical_issues(content),
    )


def dimension_insight(extraction: Extraction) -> str:
    found, missing = DIMENSION_INSIGHTS[extraction.dimension]
    return found if extraction.found else missing


def golden_circle_insights(extractions: Mapping[str, Extraction]) -> List[str]:
    return [SUBSTANTIVE_INSIGHTS[d] for d, e in extractions.items() if is_substantive(e)]


def golden_circle_summary(extractions: Mapping[str, Extraction]) -> str:
    words = {
        d: GOLDEN_CIRCLE_WORDING[d][0 if extractions[d].found else 1]
        for d in GOLDEN_CIRCLE_WORDING
    }
    return (
        f"Golden Circle analysis shows {words['why']} WHY, {words['how']} HOW, "
        f"{words['what']} WHAT, and {words['who']} WHO elements."
    )


def _concept_score(categories, category: str, concept: str) -> int:
    if category not in categories or concept not in categories[category].concepts:
        return 0
    return categories[category].concepts[concept].score


def _category_score(categories, category: str) -> int:
    return categories[category].score if category in categories else 0


def elements_of_value_insights(categories) -> List[str]:
    wording = (
        ("functional", "savesTime", "Strong time-saving value proposition"),
        ("emotional", "reducesAnxiety", "Good anxiety reduction messaging"),
        ("lifeChanging", "selfActualization", "Strong transformation messaging"),
    )
    return [text for category, concept, text in wording if _concept_score(categories, category, concept) > 7]


def strengths_insights(categories) -> List[str]:
    wording = {
        "strategicThinking": "Appeals to strategic thinkers",
        "executing": "Resonates with execution-focused individuals",
        "influencing": "Strong influence and leadership appeal",
        "relationshipBuilding": "Good relationship-building messaging",
    }
    return [
        text for domain, text in wording.items()
        if _category_score(categories, domain) > EXECUTION_FOCUS_THRESHOLD
    ]


def elements_of_value_summary(overall: int) -> str:
    return (
        f"Elements of Value analysis shows {overall}/100 overall alignment with functional, "
        "emotional, life-changing, and social impact elements."
    )


def strengths_summary(overall: int) -> str:
    return (
        f"CliftonStrengths analysis shows {overall}/100 overall appeal across executing, "
        "influencing, relationship building, and strategic thinking themes."
    )


def build_summary(
    content: str,
    word_count: int,
    golden_circle_score: int,
    elements_of_value: FrameworkResult,
    strengths: FrameworkResult,
) -> str:
    content_lower = content.lower()
    has_testimonials = "testimonial" in content_lower or "client" in content_lower
    has_contact = "contact" in content_lower or "phone" in content_lower
    has_cta = "call to action" in content_lower or "get started" in content_lower
    executing = _category_score(strengths.categories, "executing")
    positioning = "execution-focused" if executing > EXECUTION_FOCUS_THRESHOLD else "strategic"

    return (
        f"This {word_count}-word content analysis reveals a {golden_circle_score}/100 Golden Circle score "
        f"with {elements_of_value.overall_score}/100 Elements of Value alignment. "
        f"The content {'includes' if has_testimonials else 'lacks'} client testimonials, "
        f"{'provides' if has_contact else 'is missing'} contact information, and "
        f"{'features' if has_cta else 'needs'} clear call-to-action elements. "
        f"The messaging appeals to {strengths.overall_score}/100 CliftonStrengths themes, "
        f"suggesting {positioning} positioning."
    )
