"""Page data model."""
from dataclasses import dataclass, field
from typing import Callable, Iterable, Tuple

import numpy as np

from models.record import Record, get_records, get_str
from models.region import ImageData, Region


def stat_moment(values: Iterable[float], moment: float = 0.5) -> float:
    """
    Statistical moment (quantile) of values.

    With moment=0.5 this is the median: the middle value for odd counts and
    the mean of the two middle values for even counts.

    Args:
        values: Values to evaluate
        moment: Quantile in [0, 1]

    Returns:
        The moment, or 0.0 if values is empty
    """
    data = np.asarray(list(values), dtype=float)
    if data.size == 0:
        return 0.0
    return float(np.quantile(data, moment))


@dataclass(frozen=True)
class PageData:
    """Represents a single page: its image, layout regions and extracted text."""
    source_xml_path: str = ""
    text: str = ""
    collection_name: str = ""
    document_name: str = ""
    image: ImageData = field(default_factory=ImageData)
    regions: Tuple[Region, ...] = ()

    @property
    def name(self) -> str:
        """Page name, i.e. the file name of its image."""
        return self.image.file_name

    def num_regions(self) -> int:
        return len(self.regions)

    def average_region(self, prop: Callable[[Region], float]) -> float:
        """
        Median of a region property over all regions of this page.

        Args:
            prop: Function mapping a Region to a number, e.g. Region.area

        Returns:
            The median value, 0.0 for pages without regions
        """
        return stat_moment((prop(r) for r in self.regions), 0.5)

    @classmethod
    def from_record(cls, record: Record) -> "PageData":
        """Create PageData from a page record; image fields are read from the same record."""
        return cls(
            source_xml_path=get_str(record, "xmlName"),
            text=get_str(record, "content"),
            collection_name=get_str(record, "collection"),
            document_name=get_str(record, "document"),
            image=ImageData.from_record(record),
            regions=tuple(Region.from_record(r) for r in get_records(record, "regions"))
        )
