"""
Rule-based recommendation generator.

Each rule fires when none of its keywords appear in the lowercased page
text. Rules are independent: every firing rule contributes exactly one
recommendation, in table order, to the bucket named by its priority.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from analyzer.results import Recommendation, RecommendationSet

FALLBACK_NEXT_STEPS = [
    "Review messaging quarterly",
    "Refresh testimonials and case studies",
    "Monitor conversion metrics",
]


@dataclass(frozen=True)
class RecommendationRule:
    keywords: Tuple[str, ...]
    recommendation: Recommendation
    page_type: Optional[str] = None

    def fires(self, text_lower: str, page_type: str) -> bool:
        if self.page_type is not None and self.page_type != page_type:
            return False
        return not any(keyword in text_lower for keyword in self.keywords)


def _rule(keywords, priority, category, title, description, action_items, expected_impact, effort, timeline, page_type=None):
    return RecommendationRule(
        keywords=tuple(keywords),
        page_type=page_type,
        recommendation=Recommendation(
            category=category,
            title=title,
            description=description,
            action_items=list(action_items),
            expected_impact=expected_impact,
            effort=effort,
            timeline=timeline,
            priority=priority,
        ),
    )


RULES: Tuple[RecommendationRule, ...] = (
    _rule(
        ("mission", "purpose"), "high", "Golden Circle",
        "Strengthen WHY Statement",
        "Define a clear, compelling mission statement that explains why the company exists",
        ["Write a clear mission statement", "Add purpose-driven language to hero section"],
        "Improved brand clarity and emotional connection", "Medium", "1-2 weeks",
    ),
    _rule(
        ("methodology", "process"), "high", "Golden Circle",
        "Define HOW Methodology",
        "Create a clear methodology or process that differentiates your approach",
        ["Document your unique process", "Add methodology section to website"],
        "Better differentiation and credibility", "Medium", "1-2 weeks",
    ),
    _rule(
        ("testimonial", "client"), "medium", "Golden Circle",
        "Add Client Testimonials",
        "Include specific client testimonials and success stories to build trust",
        ["Collect client testimonials", "Add testimonials section"],
        "Increased trust and credibility", "Low", "Immediate",
    ),
    _rule(
        ("contact", "phone"), "medium", "Content",
        "Improve Contact Information",
        "Make contact information easily accessible for potential clients",
        ["Add contact section", "Include phone and email"],
        "Better lead generation", "Low", "Immediate",
    ),
    _rule(
        ("call to action", "get started"), "medium", "Content",
        "Add Call-to-Action Buttons",
        "Include clear call-to-action buttons to guide visitors to next steps",
        ["Add CTA buttons", "Create conversion paths"],
        "Improved conversion rates", "Low", "1-2 weeks",
    ),
    # Page-specific rules. An empty keyword tuple always fires for its page type.
    _rule(
        (), "low", "Content",
        "Optimize Hero Section",
        "Ensure hero section clearly communicates value proposition",
        ["Review hero messaging", "Add value proposition"],
        "Better first impression", "Low", "1-2 weeks",
        page_type="home",
    ),
    _rule(
        (), "low", "Content",
        "Enhance Testimonials",
        "Include specific metrics and results in testimonials",
        ["Add success metrics", "Include client photos and logos"],
        "More credible testimonials", "Low", "1-2 weeks",
        page_type="testimonials",
    ),
    _rule(
        ("pricing", "package", "plan"), "low", "Content",
        "Clarify Service Packages",
        "Describe what each service includes and how engagements are priced",
        ["List deliverables per service", "Add pricing or engagement model"],
        "Fewer unqualified enquiries", "Medium", "2-4 weeks",
        page_type="services",
    ),
    _rule(
        ("team", "founder"), "low", "Content",
        "Share Team Story",
        "Introduce the people behind the company and the story of how it started",
        ["Add founder story", "Add team bios and photos"],
        "Stronger personal connection", "Low", "1-2 weeks",
        page_type="about",
    ),
    _rule(
        ("contact form", "book a", "schedule"), "low", "Content",
        "Reduce Contact Friction",
        "Offer a short enquiry form or booking link alongside direct contact details",
        ["Add a short contact form", "Add a booking link"],
        "More enquiries from ready buyers", "Low", "Immediate",
        page_type="contact",
    ),
    _rule(
        ("%", "percent"), "low", "Content",
        "Quantify Case Study Results",
        "Back every case study with measurable before-and-after results",
        ["Add headline metrics to each case study", "Show timelines and outcomes"],
        "More persuasive proof of results", "Medium", "2-4 weeks",
        page_type="case-studies",
    ),
)

SUMMARY_BY_TITLE: Dict[str, str] = {
    "Strengthen WHY Statement": "strengthening the WHY statement",
    "Define HOW Methodology": "defining your methodology",
    "Add Client Testimonials": "adding client testimonials",
    "Improve Contact Information": "making contact details easy to find",
    "Add Call-to-Action Buttons": "adding clear calls to action",
}


def generate_recommendations(text: str, page_type: str = "general") -> RecommendationSet:
    text_lower = (text or "").lower()
    buckets: Dict[str, List[Recommendation]] = {"high": [], "medium": [], "low": []}

    fired = [rule.recommendation for rule in RULES if rule.fires(text_lower, page_type)]
    for recommendation in fired:
        buckets[recommendation.priority].append(recommendation)

    return RecommendationSet(
        high_priority=buckets["high"],
        medium_priority=buckets["medium"],
        low_priority=buckets["low"],
        summary=_summary(fired),
        next_steps=_next_steps(fired),
    )


def _summary(fired: List[Recommendation]) -> str:
    focus = [SUMMARY_BY_TITLE[r.title] for r in fired if r.title in SUMMARY_BY_TITLE][:2]
    if not focus:
        if fired:
            return f"Core messaging is in place. Focus on {fired[0].title.lower()} for further gains."
        return "Core messaging elements are in place. Keep content fresh and measure conversions."
    return f"Focus on {' and '.join(focus)} for maximum impact."


def _next_steps(fired: List[Recommendation]) -> List[str]:
    steps = [r.action_items[0] for r in fired if r.action_items][:3]
    return steps or list(FALLBACK_NEXT_STEPS)
