"""Main entry point for the Page Corpus Explorer API."""
import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL, PORT
from logger import setup_logging
from models.api import (
    CollectionSummary,
    DocumentInfo,
    LoadCollectionRequest,
    SelectRequest,
    SimilarDocument,
    SimilarityResponse,
)
from models.base import Labelled
from models.collection import Collection
from services.collection_loader import CollectionLoader
from services.loader import LoadError, RecordFormatError
from services.similarity_engine import SimilarityEngine

# Initialize logging
setup_logging(LOG_LEVEL, LOG_FORMAT)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Page Corpus Explorer",
    description="Statistics and document similarity over page corpora",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services (will be done on startup)
collection_loader: CollectionLoader = None
similarity_engine: SimilarityEngine = None

# Loaded collections by name
collections: Dict[str, Collection] = {}


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global collection_loader, similarity_engine

    logger.info("Initializing Page Corpus Explorer services...")

    try:
        collection_loader = CollectionLoader()
        logger.info("Initialized CollectionLoader")

        similarity_engine = SimilarityEngine()
        logger.info("Initialized SimilarityEngine")

        logger.info("All services initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise


def _summary(collection: Collection) -> CollectionSummary:
    return CollectionSummary(text=collection.to_string(), **collection.to_summary())


def _css_color(item: Labelled) -> Optional[str]:
    return item.color.to_css() if item.color else None


def _get_collection(name: str) -> Collection:
    collection = collections.get(name)
    if collection is None:
        raise HTTPException(status_code=404, detail=f"Collection not found: {name}")
    return collection


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Page Corpus Explorer API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "page-corpus-explorer",
        "version": "1.0.0",
        "collections": len(collections)
    }


@app.post("/collections", response_model=CollectionSummary)
async def load_collection(request: LoadCollectionRequest) -> CollectionSummary:
    """
    Load a collection file or URL and register it under its name.

    Raises:
        HTTPException: 404 if the resource cannot be loaded, 422 if it is not valid JSON
    """
    if not request.path or not request.path.strip():
        raise HTTPException(status_code=400, detail="Path field is required and cannot be empty")

    try:
        collection = collection_loader.load_collection(request.path, name=request.name)
    except LoadError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RecordFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error loading {request.path}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    if collection.name in collections:
        logger.info(f"Replacing collection {collection.name}")
    collections[collection.name] = collection

    return _summary(collection)


@app.get("/collections", response_model=List[CollectionSummary])
async def list_collections() -> List[CollectionSummary]:
    return [_summary(c) for c in collections.values()]


@app.get("/collections/{name}", response_model=CollectionSummary)
async def get_collection(name: str) -> CollectionSummary:
    return _summary(_get_collection(name))


@app.get("/collections/{name}/documents", response_model=List[DocumentInfo])
async def list_documents(name: str) -> List[DocumentInfo]:
    """Documents of a collection with page count, display color and selection state."""
    collection = _get_collection(name)

    return [
        DocumentInfo(
            name=document.name,
            pages=document.num_pages(),
            color=_css_color(document),
            selected=document.selected
        )
        for document in collection.documents()
    ]


@app.post("/collections/{name}/select", response_model=CollectionSummary)
async def select_documents(name: str, request: SelectRequest) -> CollectionSummary:
    """Select or deselect all documents of a collection."""
    collection = _get_collection(name)
    collection.select_all(request.selected)

    logger.info(f"Set selected={request.selected} on {collection.num_documents()} documents of {name}")
    return _summary(collection)


@app.get("/collections/{name}/similar", response_model=SimilarityResponse)
async def similar_documents(name: str, document: str, top_k: Optional[int] = None) -> SimilarityResponse:
    """
    Rank the documents of a collection by dictionary distance to one of them.

    Args:
        name: Collection name
        document: Name of the query document
        top_k: Maximum number of results (engine default if omitted)

    Raises:
        HTTPException: 404 for unknown collections or documents, 400 for invalid top_k
    """
    collection = _get_collection(name)

    query = collection.document(document)
    if query is None:
        raise HTTPException(status_code=404, detail=f"Document not found: {document}")

    try:
        ranked = similarity_engine.rank(query, collection.documents(), top_k=top_k)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SimilarityResponse(
        document=query.name,
        results=[SimilarDocument(name=s.document.name, score=s.score) for s in ranked]
    )


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Page Corpus Explorer API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
