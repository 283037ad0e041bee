"""Deterministic display color palette for documents."""
import colorsys
import logging
import random
from typing import List, Optional, Sequence, Tuple

from models.base import Color

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

DEFAULT_COLORS: Tuple[RGB, ...] = (
    (115, 0, 93),
    (230, 23, 190),
    (102, 80, 10),
    (230, 178, 11),
    (15, 153, 138),
    (102, 180, 10),
    (15, 253, 138),
)


def _alpha(alpha: float) -> int:
    return max(0, min(255, round(alpha * 255)))


def _scale_value(rgb: RGB, factor: float) -> RGB:
    """
    Scale the HSV value of a color.

    Values pushed above the maximum are clipped and the overflow is taken
    from the saturation instead, which keeps bright colors getting lighter.
    """
    h, s, v = colorsys.rgb_to_hsv(*(c / 255.0 for c in rgb))
    v *= factor
    if v > 1.0:
        s = max(0.0, s - (v - 1.0))
        v = 1.0
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return round(r * 255), round(g * 255), round(b * 255)


class ColorPalette:
    """Maps indices to a fixed set of colors, with darker and lighter variants."""

    LIGHTER = 1.5
    DARKER = 0.5

    def __init__(self, colors: Sequence[RGB] = DEFAULT_COLORS, seed: Optional[int] = None):
        """
        Initialize ColorPalette.

        Args:
            colors: Base RGB colors
            seed: Optional seed for random_color
        """
        if not colors:
            raise ValueError("Palette needs at least one color")

        self._colors: Tuple[RGB, ...] = tuple(colors)
        self._random = random.Random(seed)

    def colors(self) -> List[Color]:
        return [Color(*rgb) for rgb in self._colors]

    def color(self, index: int, alpha: float = 1.0) -> Color:
        """
        Return the palette color for index.

        Indices wrap around the palette. Beyond one round the color gets
        darker, beyond two rounds lighter.

        Args:
            index: Palette index (>= 0)
            alpha: Opacity in [0, 1]

        Returns:
            The color

        Raises:
            ValueError: If index is negative
        """
        if index < 0:
            raise ValueError(f"Color index must be >= 0, got {index}")

        size = len(self._colors)
        rgb = self._colors[index % size]

        if index > 2 * size:
            rgb = _scale_value(rgb, self.LIGHTER)
        elif index > size:
            rgb = _scale_value(rgb, self.DARKER)

        return Color(*rgb, alpha=_alpha(alpha))

    def random_color(self, alpha: float = 1.0) -> Color:
        index = self._random.randint(0, len(self._colors) * 3)
        logger.debug(f"Picked random palette index {index}")
        return self.color(index, alpha)

    @staticmethod
    def light_gray(alpha: float = 1.0) -> Color:
        return Color(200, 200, 200, _alpha(alpha))

    @staticmethod
    def dark_gray(alpha: float = 1.0) -> Color:
        return Color(66, 66, 66, _alpha(alpha))

    @staticmethod
    def red(alpha: float = 1.0) -> Color:
        return Color(200, 50, 50, _alpha(alpha))

    @staticmethod
    def green(alpha: float = 1.0) -> Color:
        return Color(120, 192, 167, _alpha(alpha))

    @staticmethod
    def blue(alpha: float = 1.0) -> Color:
        return Color(0, 102, 153, _alpha(alpha))

    @staticmethod
    def pink(alpha: float = 1.0) -> Color:
        return Color(255, 0, 127, _alpha(alpha))

    @staticmethod
    def white(alpha: float = 1.0) -> Color:
        return Color(255, 255, 255, _alpha(alpha))

    @staticmethod
    def black(alpha: float = 1.0) -> Color:
        return Color(0, 0, 0, _alpha(alpha))
