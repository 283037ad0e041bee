"""
Corpus inspection script for the Page Corpus Explorer.

This script:
1. Loads a collection file, URL or a directory of collection files
2. Logs page, region and text statistics per collection
3. Logs the most similar document pairs of every collection
4. Optionally writes the statistics to a JSON report

Usage:
    python inspect_corpus.py [PATH] [--top-k N] [--report report.json]
"""
import argparse
import os
import sys
import logging
from pathlib import Path
from typing import List, Optional

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from services.collection_loader import CollectionLoader
from services.similarity_engine import SimilarityEngine
from services.loader import write_json
from models.collection import Collection
from config import CORPUS_PATH, LOG_FORMAT, LOG_LEVEL, SIMILARITY_TOP_K
from logger import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect a page corpus")
    parser.add_argument("path", nargs="?", default=CORPUS_PATH,
                        help="Collection JSON file, URL or directory of collection files")
    parser.add_argument("--top-k", type=int, default=SIMILARITY_TOP_K,
                        help="Number of similar document pairs to report per collection")
    parser.add_argument("--report", default=None,
                        help="Optional path of a JSON report to write")
    return parser.parse_args(argv)


def load_corpus(loader: CollectionLoader, path: str) -> List[Collection]:
    """Load a directory of collections or a single collection file/URL."""
    if os.path.isdir(path):
        return loader.load_directory(path)
    return [loader.load_collection(path)]


def inspect_collection(collection: Collection, engine: SimilarityEngine, top_k: int) -> dict:
    """
    Log statistics and similar pairs of a collection.

    Args:
        collection: Collection to inspect
        engine: Similarity engine used for ranking
        top_k: Number of pairs to report

    Returns:
        Report entry with the collection summary and its similar pairs
    """
    logger.info("-" * 60)
    logger.info(f"Collection: {collection.name}")
    for line in collection.to_string().splitlines():
        logger.info(f"  {line}")

    pairs = engine.most_similar_pairs(collection, top_k=top_k)
    if not pairs:
        logger.info("  No comparable documents")

    for source, scored in pairs:
        logger.info(f"  {source.name} -> {scored.document.name}: {scored.score:.3f}")

    entry = collection.to_summary()
    entry["similar_pairs"] = [
        {"source": source.name, "target": scored.document.name, "score": scored.score}
        for source, scored in pairs
    ]
    return entry


def main(argv: Optional[List[str]] = None) -> None:
    """Main inspection process."""
    args = parse_args(argv)
    setup_logging(LOG_LEVEL, LOG_FORMAT)

    try:
        logger.info("=" * 60)
        logger.info(f"Inspecting corpus: {args.path}")
        logger.info("=" * 60)

        loader = CollectionLoader()
        engine = SimilarityEngine(top_k=args.top_k)

        collections = load_corpus(loader, args.path)
        if not collections:
            logger.error(f"No collections found in {args.path}")
            sys.exit(1)

        report = {
            "path": args.path,
            "collections": [inspect_collection(c, engine, args.top_k) for c in collections],
        }

        if args.report:
            written = write_json(args.report, report)
            logger.info(f"✓ Report written to {args.report} ({written} bytes)")

        logger.info("=" * 60)
        logger.info(f"INSPECTION COMPLETE: {len(collections)} collections")
        logger.info("=" * 60)

    except KeyboardInterrupt:
        logger.warning("\nInspection interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"\nInspection failed: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
