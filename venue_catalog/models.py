from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Venue(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    genre: str = ""
    link: str = ""
    location: str = ""
    station: str = ""
    station2: str = ""
    image: str = ""
    latitude: str = ""
    longitude: str = ""
    priority: int = Field(default=0, ge=0)


class ReportSummary(BaseModel):
    rows: Optional[int] = Field(default=None, examples=[None])
    venues: int = 0
    rejected: int = 0
    warnings: int = 0


class ReportItem(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class IngestReport(BaseModel):
    summary: ReportSummary
    normalizations: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[ReportItem] = Field(default_factory=list)


class IngestResponse(BaseModel):
    venues: int
    report: IngestReport


class CatalogStatus(BaseModel):
    venues: int
    loaded: bool
    last_error: Optional[str] = None


class SearchResponse(BaseModel):
    items: List[Venue]
    total: int
    total_pages: int
    page: int
    pages: List[int]


class SuggestionResponse(BaseModel):
    query: str
    suggestions: List[str]


class HealthResponse(BaseModel):
    ok: bool = True
