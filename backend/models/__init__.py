"""Data models for the Page Corpus Explorer."""
from .base import Color, CollectionInfo, Labelled
from .region import Region, RegionType, ImageData
from .page import PageData
from .document import Document, ScoredDocument, NOT_COMPARABLE
from .collection import Collection
from .api import (
    LoadCollectionRequest,
    SelectRequest,
    CollectionSummary,
    DocumentInfo,
    SimilarDocument,
    SimilarityResponse,
)

__all__ = [
    "Color",
    "CollectionInfo",
    "Labelled",
    "Region",
    "RegionType",
    "ImageData",
    "PageData",
    "Document",
    "ScoredDocument",
    "NOT_COMPARABLE",
    "Collection",
    "LoadCollectionRequest",
    "SelectRequest",
    "CollectionSummary",
    "DocumentInfo",
    "SimilarDocument",
    "SimilarityResponse",
]
