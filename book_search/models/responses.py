"""
Response models for the book search API
"""
from pydantic import BaseModel, Field
from typing import Optional, List

from book_search.models.books import SearchResultItem
from book_search.models.query import QueryClassification


class BookSearchResponse(BaseModel):
    """Response from search endpoint"""

    query: str = Field(..., description="Original query text")
    optimized_query: str = Field(..., description="Query sent to Google Books")

    # Results
    total_items: int = Field(0, description="Provider's total match count")
    ranked: bool = Field(
        ...,
        description="Whether items are in popularity order (false means provider order)"
    )
    items: List[SearchResultItem] = Field(default_factory=list)

    # Metadata
    latency_ms: Optional[int] = Field(None, description="Processing time in milliseconds")

    class Config:
        json_schema_extra = {
            "example": {
                "query": "Dune by Frank Herbert",
                "optimized_query": "intitle:Dune inauthor:Frank Herbert",
                "total_items": 412,
                "ranked": True,
                "items": [],
                "latency_ms": 182
            }
        }


class QueryAnalysisResponse(BaseModel):
    """How a raw query is classified and rewritten"""

    query: str
    classification: QueryClassification
    optimized_query: str


class ErrorResponse(BaseModel):
    """Error body returned to the search box"""

    error: str = Field(..., description="Short error label")
    message: str = Field(..., description="User-facing explanation")
