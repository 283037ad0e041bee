"""Similarity engine ranking documents by dictionary distance."""
import logging
from typing import List, Optional, Sequence, Tuple

from models.collection import Collection
from models.document import Document, ScoredDocument
from config import SIMILARITY_MIN_SCORE, SIMILARITY_TOP_K

logger = logging.getLogger(__name__)


class SimilarityEngine:
    """Rank documents by term-frequency similarity to a query document."""

    def __init__(self, top_k: int = SIMILARITY_TOP_K, min_score: float = SIMILARITY_MIN_SCORE):
        """
        Initialize the similarity engine.

        Args:
            top_k: Default maximum number of results
            min_score: Default minimum score for a result to be kept
        """
        self.top_k = top_k
        self.min_score = min_score
        logger.info(f"Initialized SimilarityEngine (top_k={top_k}, min_score={min_score})")

    def rank(
        self,
        query: Document,
        candidates: Sequence[Document],
        top_k: Optional[int] = None,
        min_score: Optional[float] = None
    ) -> List[ScoredDocument]:
        """
        Rank candidates by their dictionary distance from query.

        The score is query.dictionary_distance(candidate). The query itself
        and candidates that are not comparable (empty dictionaries) are
        skipped. Results are sorted by descending score, ties keep the
        candidate order.

        Args:
            query: Document to compare from
            candidates: Documents to compare against
            top_k: Maximum number of results (engine default if None)
            min_score: Minimum score to keep (engine default if None)

        Returns:
            List of scored documents, empty if nothing is comparable

        Raises:
            ValueError: If top_k is not positive
        """
        top_k = self.top_k if top_k is None else top_k
        min_score = self.min_score if min_score is None else min_score

        if top_k <= 0:
            raise ValueError("top_k must be positive")

        scored = []
        for candidate in candidates:
            if candidate is query:
                continue

            score = query.dictionary_distance(candidate)
            if score < 0:
                logger.debug(f"{query.name} and {candidate.name} are not comparable")
                continue

            if score >= min_score:
                scored.append(ScoredDocument(document=candidate, score=score))

        scored.sort(key=lambda s: s.score, reverse=True)

        logger.debug(f"Ranked {len(scored)} documents for {query.name}")
        return scored[:top_k]

    def distance_matrix(self, documents: Sequence[Document]) -> List[List[float]]:
        """
        Pairwise dictionary distances.

        The matrix is not symmetric: m[i][j] = documents[i].dictionary_distance(documents[j]).
        Incomparable pairs hold -1.
        """
        return [[a.dictionary_distance(b) for b in documents] for a in documents]

    def most_similar_pairs(
        self,
        collection: Collection,
        top_k: Optional[int] = None
    ) -> List[Tuple[Document, ScoredDocument]]:
        """
        Most similar ordered document pairs of a collection.

        Args:
            collection: Collection to analyse
            top_k: Maximum number of pairs (engine default if None)

        Returns:
            (source, scored target) pairs sorted by descending score
        """
        top_k = self.top_k if top_k is None else top_k
        documents = collection.documents()

        pairs = []
        for document in documents:
            for scored in self.rank(document, documents, top_k=len(documents)):
                pairs.append((document, scored))

        pairs.sort(key=lambda p: p[1].score, reverse=True)

        if pairs:
            logger.info(
                f"Found {len(pairs)} comparable pairs in {collection.name} "
                f"(top score: {pairs[0][1].score:.3f})"
            )
        return pairs[:top_k]
