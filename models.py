from typing import List, Optional
from pydantic import BaseModel, Field, HttpUrl, field_validator

from analyzer.insights import normalize_page_type
from analyzer.results import PageOutcome
from config import settings


# Requests
class ContentAnalysisRequest(BaseModel):
    content: str = Field(default="", description="Page text to analyze")
    url: str = ""
    page_type: str = "general"
    use_ai: bool = True

    @field_validator("page_type", mode="before")
    @classmethod
    def _normalize_page_type(cls, value):
        return normalize_page_type(value)


class PageAnalysisRequest(BaseModel):
    url: HttpUrl
    page_type: str = "general"
    use_ai: bool = True

    @field_validator("page_type", mode="before")
    @classmethod
    def _normalize_page_type(cls, value):
        return normalize_page_type(value)


class BatchAnalysisRequest(BaseModel):
    pages: List[PageAnalysisRequest]
    use_ai: bool = True

    @field_validator("pages")
    @classmethod
    def _check_batch_size(cls, pages):
        if not pages:
            raise ValueError("At least one page is required")
        if len(pages) > settings.BATCH_MAX_PAGES:
            raise ValueError(f"At most {settings.BATCH_MAX_PAGES} pages per batch")
        return pages


# Responses
class BatchAnalysisResponse(BaseModel):
    total: int
    succeeded: int
    failed: int
    results: List[PageOutcome]


class CacheClearResponse(BaseModel):
    cleared: bool
    url: str
    keys_deleted: int = 0
    message: str
    error: Optional[str] = None
