# Analyzer package - framework scoring engine and AI/fallback pipeline
from .content_analyzer import ContentAnalyzer, analyze_content
from .pipeline import analyze_page, analyze_pages, analyze_with_fallback
from .providers import AIProviderError, AnthropicAnalysisProvider

__all__ = [
    "ContentAnalyzer",
    "analyze_content",
    "analyze_with_fallback",
    "analyze_page",
    "analyze_pages",
    "AIProviderError",
    "AnthropicAnalysisProvider",
]
