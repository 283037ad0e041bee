"""Collection data model."""
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.base import CollectionInfo, ColorPicker, LabelledMixin
from models.document import Document
from models.page import PageData
from models.record import Record, get_records


class Collection(LabelledMixin):
    """Top-level corpus: an ordered sequence of documents."""

    def __init__(self, name: str = "", documents: Iterable[Document] = ()):
        self._info = CollectionInfo(name=name)
        self._documents: Tuple[Document, ...] = tuple(documents)

    def __repr__(self) -> str:
        return f"Collection(name={self.name!r}, documents={self.num_documents()})"

    def __str__(self) -> str:
        return self.to_string()

    def is_empty(self) -> bool:
        return not self._documents

    def num_documents(self) -> int:
        return len(self._documents)

    def num_pages(self) -> int:
        return sum(d.num_pages() for d in self._documents)

    def documents(self) -> Tuple[Document, ...]:
        return self._documents

    def pages(self) -> List[PageData]:
        """All pages, in document order then page order."""
        return [p for d in self._documents for p in d.pages()]

    def num_regions(self) -> int:
        return sum(p.num_regions() for p in self.pages())

    def num_text_pages(self) -> int:
        """Number of pages with non-empty text."""
        return sum(1 for p in self.pages() if p.text)

    def regions_per_page(self) -> float:
        num_pages = self.num_pages()
        if num_pages == 0:
            return 0.0
        return self.num_regions() / num_pages

    def select_all(self, selected: bool) -> None:
        """Set the selection flag of every document (pages are not affected)."""
        for document in self._documents:
            document.selected = selected

    def selected_documents(self) -> List[Document]:
        return [d for d in self._documents if d.selected]

    def document(self, name: str) -> Optional[Document]:
        """First document with the given name, or None."""
        for document in self._documents:
            if document.name == name:
                return document
        return None

    def to_string(self) -> str:
        num_regions = self.num_regions()
        num_documents = self.num_documents()

        lines = [
            f"{self.num_pages()} pages found in {num_documents} documents",
            f"{num_documents} documents",
            f"{num_regions} regions ({self.regions_per_page():g} per page)",
            f"{self.num_text_pages()} pages with text",
        ]
        return "\n".join(lines)

    def to_summary(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "documents": self.num_documents(),
            "pages": self.num_pages(),
            "regions": self.num_regions(),
            "regions_per_page": self.regions_per_page(),
            "text_pages": self.num_text_pages(),
        }

    @classmethod
    def from_record(
        cls,
        record: Record,
        name: str = "",
        pick_color: Optional[ColorPicker] = None
    ) -> "Collection":
        """
        Create a Collection from a {documents} record.

        Args:
            record: Collection record
            name: Collection name (not part of the record)
            pick_color: Optional palette lookup passed on to every document

        Returns:
            Parsed Collection
        """
        return cls(
            name=name,
            documents=(Document.from_record(d, pick_color) for d in get_records(record, "documents"))
        )
