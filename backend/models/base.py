"""Shared name/color/selection state of documents and collections."""
from dataclasses import dataclass
from typing import Callable, Optional, Protocol


@dataclass(frozen=True)
class Color:
    """RGBA display color, channels in 0..255."""
    red: int
    green: int
    blue: int
    alpha: int = 255

    def to_css(self) -> str:
        """Format as a stylesheet color, e.g. rgba(255,0,0,100%)."""
        percent = self.alpha / 255.0 * 100.0
        return f"rgba({self.red},{self.green},{self.blue},{percent:g}%)"


# Maps an index to a palette color
ColorPicker = Callable[[int], Color]


@dataclass
class CollectionInfo:
    """Name, display color and selection flag."""
    name: str = ""
    color: Optional[Color] = None
    selected: bool = False


class Labelled(Protocol):
    """Anything with a name, a display color and a selection flag."""

    @property
    def name(self) -> str: ...

    color: Optional[Color]
    selected: bool


class LabelledMixin:
    """Exposes an embedded CollectionInfo as name/color/selected attributes."""

    _info: CollectionInfo

    @property
    def name(self) -> str:
        return self._info.name

    @property
    def color(self) -> Optional[Color]:
        return self._info.color

    @color.setter
    def color(self, color: Optional[Color]) -> None:
        self._info.color = color

    @property
    def selected(self) -> bool:
        return self._info.selected

    @selected.setter
    def selected(self, selected: bool) -> None:
        self._info.selected = selected
