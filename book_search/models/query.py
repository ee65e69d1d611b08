"""
Query classification models
One model per classification outcome; QueryClassification is the closed union of them
"""
from pydantic import BaseModel, Field, model_validator
from typing import Annotated, Literal, Optional, Union
from enum import Enum


class QueryKind(str, Enum):
    """Classification outcomes for a raw search string"""
    PASSTHROUGH = "passthrough"
    ISBN_LOOKUP = "isbn_lookup"
    SCOPED_SEARCH = "scoped_search"
    TITLE_HINT = "title_hint"


class Passthrough(BaseModel):
    """Text forwarded to the provider unmodified"""

    kind: Literal[QueryKind.PASSTHROUGH] = QueryKind.PASSTHROUGH
    text: str = Field(..., description="Trimmed query text")

    class Config:
        frozen = True


class IsbnLookup(BaseModel):
    """Exact ISBN match"""

    kind: Literal[QueryKind.ISBN_LOOKUP] = QueryKind.ISBN_LOOKUP
    isbn: str = Field(
        ...,
        pattern=r"^(?:[0-9]{10}|[0-9]{13})$",
        description="ISBN-10 or ISBN-13, digits only"
    )

    class Config:
        frozen = True


class ScopedSearch(BaseModel):
    """Title and/or author matched against their own fields"""

    kind: Literal[QueryKind.SCOPED_SEARCH] = QueryKind.SCOPED_SEARCH
    title: Optional[str] = Field(None, description="Title clause")
    author: Optional[str] = Field(None, description="Author clause")

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_has_field(self) -> "ScopedSearch":
        if not self.title and not self.author:
            raise ValueError("ScopedSearch needs a title or an author")
        return self


class TitleHint(BaseModel):
    """Free text scoped to the title field"""

    kind: Literal[QueryKind.TITLE_HINT] = QueryKind.TITLE_HINT
    text: str = Field(..., min_length=1, description="Trimmed query text")

    class Config:
        frozen = True


QueryClassification = Annotated[
    Union[Passthrough, IsbnLookup, ScopedSearch, TitleHint],
    Field(discriminator="kind")
]
