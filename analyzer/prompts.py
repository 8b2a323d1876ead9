"""
Content Analysis Prompt for Claude API

Builds the framework-scoring prompt for the AI analysis path. The JSON
contract below mirrors the deterministic analyzer's categories so the two
paths return the same result shape.
"""

from analyzer.patterns import ELEMENTS_OF_VALUE, STRENGTHS

PAGE_TYPE_FOCUS = {
    "home": "hero section clarity, value proposition, primary call-to-action and above-the-fold trust signals",
    "testimonials": "testimonial specificity, client diversity, quantified results and credibility",
    "services": "service clarity, differentiation, pricing transparency and process explanation",
    "about": "company story, mission, team credibility and values",
    "contact": "ease of getting in touch, form friction and response expectations",
    "case-studies": "problem-solution narrative, measurable outcomes and process transparency",
    "general": "content relevance, conversion elements, trust signals and call-to-action effectiveness",
}


def get_analysis_prompt(content: str, url: str, page_type: str = "general") -> str:
    """
    Generate the framework analysis prompt for one page.

    Args:
        content: Page text (already truncated by the caller)
        url: Page URL
        page_type: Normalized page type

    Returns:
        Complete prompt string for Claude
    """
    focus = PAGE_TYPE_FOCUS.get(page_type, PAGE_TYPE_FOCUS["general"])
    value_categories = ", ".join(f'"{name}": 0-100' for name in ELEMENTS_OF_VALUE)
    strength_domains = ", ".join(f'"{name}": 0-100' for name in STRENGTHS)

    return f"""You are an expert marketing analyst. Analyze the {page_type} page below using three frameworks:
Simon Sinek's Golden Circle, Bain's Elements of Value and Gallup's CliftonStrengths.
Focus on {focus}.

Quote exact phrases from the content for WHY, HOW, WHAT and WHO. Use an empty string when the
content does not clearly state a dimension. Score every category from 0 to 100 based only on
evidence in the content.

URL: {url}
Page Type: {page_type}

CONTENT TO ANALYZE:
{content}

Return ONLY a JSON object in this exact format:
{{
  "golden_circle": {{"why": "", "how": "", "what": "", "who": "", "score": 0-100}},
  "elements_of_value": {{{value_categories}}},
  "clifton_strengths": {{{strength_domains}}},
  "summary": "Two or three sentences grounded in the actual content"
}}"""
