"""Layout region and page image data models."""
from dataclasses import dataclass
from enum import IntEnum

from models.record import Record, get_int, get_str


class RegionType(IntEnum):
    """Layout element tags as written by the page segmentation."""
    UNKNOWN = 0
    TEXT_REGION = 1
    TEXT_LINE = 2
    WORD = 3
    SEPARATOR = 4
    IMAGE = 5
    GRAPHIC = 6
    NOISE = 7
    BORDER = 8
    TABLE_REGION = 9
    TABLE_CELL = 10
    CHART = 11

    @classmethod
    def from_value(cls, value: int) -> "RegionType":
        """Map a raw tag to a RegionType, unknown tags become UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Region:
    """A single typed layout element and its pixel extent."""
    type: RegionType = RegionType.UNKNOWN
    width: int = 0
    height: int = 0

    def area(self) -> float:
        return float(self.width * self.height)

    @classmethod
    def from_record(cls, record: Record) -> "Region":
        """Create a Region from a {type, width, height} record."""
        return cls(
            type=RegionType.from_value(get_int(record, "type")),
            width=get_int(record, "width", minimum=0),
            height=get_int(record, "height", minimum=0)
        )


@dataclass(frozen=True)
class ImageData:
    """Source image of a page."""
    file_name: str = ""
    width: int = 0
    height: int = 0

    @classmethod
    def from_record(cls, record: Record) -> "ImageData":
        """Create ImageData from the image fields that live on a page record."""
        return cls(
            file_name=get_str(record, "imgName"),
            width=get_int(record, "width", minimum=0),
            height=get_int(record, "height", minimum=0)
        )
