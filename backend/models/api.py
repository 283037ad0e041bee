"""Request and response models for the corpus explorer API."""
from typing import List, Optional

from pydantic import BaseModel, Field


class LoadCollectionRequest(BaseModel):
    """Request to load a collection file or URL."""
    path: str
    name: Optional[str] = None


class SelectRequest(BaseModel):
    selected: bool = True


class CollectionSummary(BaseModel):
    """Aggregate counts of a collection."""
    name: str
    documents: int
    pages: int
    regions: int
    regions_per_page: float
    text_pages: int
    text: str = ""


class DocumentInfo(BaseModel):
    name: str
    pages: int
    color: Optional[str] = None  # CSS rgba() string
    selected: bool = False


class SimilarDocument(BaseModel):
    name: str
    score: float


class SimilarityResponse(BaseModel):
    """Documents ranked by dictionary distance to a query document."""
    document: str
    results: List[SimilarDocument] = Field(default_factory=list)
