"""Document data models."""
import math
import re
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from models.base import CollectionInfo, ColorPicker, LabelledMixin
from models.page import PageData
from models.record import Record, get_records, get_str

WHITESPACE = re.compile(r"\s+")

# Returned by Document.dictionary_distance when either dictionary is empty
NOT_COMPARABLE = -1.0


class Document(LabelledMixin):
    """
    An ordered, immutable sequence of pages.

    The term dictionary over all page text is built on first access and
    cached. Pages cannot change after construction, so the cache never
    needs invalidation.
    """

    def __init__(self, name: str = "", pages: Iterable[PageData] = ()):
        self._info = CollectionInfo(name=name)
        self._pages: Tuple[PageData, ...] = tuple(pages)
        self._dictionary: Optional[Mapping[str, int]] = None
        self._dictionary_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Document(name={self.name!r}, pages={self.num_pages()})"

    def is_empty(self) -> bool:
        return not self._pages

    def num_pages(self) -> int:
        return len(self._pages)

    def pages(self) -> Tuple[PageData, ...]:
        return self._pages

    def dictionary(self) -> Mapping[str, int]:
        """
        Word occurrence counts over the text of all pages.

        Page texts are joined with spaces and split on whitespace runs.
        Counting is case-sensitive, without stemming or normalization.

        Returns:
            Read-only mapping of word to count (empty if no page has text)
        """
        if self._dictionary is None:
            with self._dictionary_lock:
                if self._dictionary is None:
                    self._dictionary = MappingProxyType(self._create_dictionary())
        return self._dictionary

    def _create_dictionary(self) -> Dict[str, int]:
        text = "".join(page.text + " " for page in self._pages)

        counts: Dict[str, int] = {}
        for word in WHITESPACE.split(text):
            if word:
                counts[word] = counts.get(word, 0) + 1
        return counts

    def dictionary_distance(self, other: "Document") -> float:
        """
        Term-frequency similarity between this document and other.

        Only words of this document's dictionary are visited, so the score is
        asymmetric. The denominator is the sum of both norms, not their product.

        Args:
            other: Document to compare against

        Returns:
            sum(a*b) / (sqrt(sum(a*a)) + sqrt(sum(b*b))), or NOT_COMPARABLE (-1)
            if either dictionary is empty
        """
        words = self.dictionary()
        other_words = other.dictionary()

        if not words or not other_words:
            return NOT_COMPARABLE

        sum_ab = 0.0
        sum_a_sq = 0.0
        sum_b_sq = 0.0

        for word, count in words.items():
            a = float(count)
            b = float(other_words.get(word, 0))

            sum_ab += a * b
            sum_a_sq += a * a
            sum_b_sq += b * b

        if sum_a_sq == 0 and sum_b_sq == 0:
            return NOT_COMPARABLE

        return sum_ab / (math.sqrt(sum_a_sq) + math.sqrt(sum_b_sq))

    @classmethod
    def from_record(cls, record: Record, pick_color: Optional[ColorPicker] = None) -> "Document":
        """
        Create a Document from a {name, pages} record.

        The display color is picked by page count, so documents of equal
        length share a color.

        Args:
            record: Document record
            pick_color: Optional palette lookup assigning the display color

        Returns:
            Parsed Document
        """
        document = cls(
            name=get_str(record, "name"),
            pages=(PageData.from_record(p) for p in get_records(record, "pages"))
        )

        if pick_color is not None:
            document.color = pick_color(document.num_pages())

        return document


@dataclass
class ScoredDocument:
    """Document with similarity score from ranking."""
    document: Document
    score: float  # dictionary distance, >= 0
