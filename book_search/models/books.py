"""
Book models for Google Books volumes
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List


class ImageLinks(BaseModel):
    """Cover image URLs"""

    thumbnail: Optional[str] = None
    small_thumbnail: Optional[str] = None


class SearchResultItem(BaseModel):
    """
    A single provider result

    Rating fields carry whatever the provider sent; range checks belong to the
    popularity scorer, which reports bad values instead of correcting them.
    """

    id: str = Field(..., description="Provider volume ID")
    title: str = Field("", description="Volume title")
    authors: Optional[List[str]] = None

    # Rating signals
    average_rating: Optional[float] = Field(None, description="Average rating, 0-5")
    ratings_count: Optional[int] = Field(None, description="Number of ratings")

    # Display metadata
    description: Optional[str] = None
    image_links: Optional[ImageLinks] = None
    published_date: Optional[str] = None
    page_count: Optional[int] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": "B1hSG45JCX4C",
                "title": "Dune",
                "authors": ["Frank Herbert"],
                "average_rating": 4.5,
                "ratings_count": 1520,
                "image_links": {
                    "thumbnail": "http://books.google.com/books/content?id=B1hSG45JCX4C"
                },
                "published_date": "2005-08-02",
                "page_count": 896
            }
        }

    @classmethod
    def from_volume(cls, volume: Dict[str, Any]) -> "SearchResultItem":
        """
        Build an item from a raw Google Books volume

        Args:
            volume: Volume object (id + volumeInfo)

        Returns:
            SearchResultItem
        """
        info = volume.get("volumeInfo") or {}
        image_links = info.get("imageLinks")

        return cls(
            id=volume.get("id", ""),
            title=info.get("title") or "",
            authors=info.get("authors"),
            average_rating=info.get("averageRating"),
            ratings_count=info.get("ratingsCount"),
            description=info.get("description"),
            image_links=ImageLinks(
                thumbnail=image_links.get("thumbnail"),
                small_thumbnail=image_links.get("smallThumbnail")
            ) if image_links else None,
            published_date=info.get("publishedDate"),
            page_count=info.get("pageCount")
        )


class GoogleBooksResponse(BaseModel):
    """Parsed volumes search response"""

    total_items: int = Field(0, description="Provider's total match count")
    items: List[SearchResultItem] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "GoogleBooksResponse":
        """Parse the volumes JSON body; a missing items key means no results"""
        return cls(
            total_items=payload.get("totalItems", 0),
            items=[SearchResultItem.from_volume(v) for v in payload.get("items") or []]
        )
