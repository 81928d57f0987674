"""
Color Resolution Module

Handles:
- Parsing CSS-style color strings (hex, rgb(), hsl(), named colors)
- Resolving a box's tagged color against the asset theme colors
- Gamma correction of linear bake results for display
- Hex / 0-255 conversions used by the exporters
- sRGB to Linear conversion of vertex colors for glTF

All working colors are float RGB in [0, 1]. Lighting may push them above 1;
they are only clamped at the gamma step and on output.

Malformed color strings always raise ColorParseError; the only fallback
is the default gray of a custom color that carries no value.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple, Union
import numpy as np
from numba import njit, prange
from PIL import ImageColor

from .errors import ColorParseError
from .model import ColorType, VoxelBox


RGB = Tuple[float, float, float]

# Rec. 709 luma weights
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


@lru_cache(maxsize=1024)
def _getrgb(text: str) -> Tuple[int, int, int]:
    rgb = ImageColor.getrgb(text)
    return (rgb[0], rgb[1], rgb[2])


def parse_color(text: str) -> RGB:
    """
    Parse a color string into float RGB.

    Args:
        text: Any syntax PIL.ImageColor accepts ("#4a4a5a", "#fff",
              "rgb(0, 255, 255)", "hsl(180, 100%, 50%)", "cyan", ...)

    Returns:
        (r, g, b) floats in [0, 1]
    """
    if not isinstance(text, str):
        raise ColorParseError(text)
    try:
        r, g, b = _getrgb(text.strip())
    except ValueError:
        raise ColorParseError(text)
    return (r / 255.0, g / 255.0, b / 255.0)


@dataclass(frozen=True)
class ThemeColors:
    """The three asset-level colors that tagged boxes resolve against."""

    primary: str = "#4a4a5a"
    secondary: str = "#3a3a4a"
    glow: str = "#00ffff"

    def slot(self, color_type: ColorType) -> str:
        if color_type is ColorType.PRIMARY:
            return self.primary
        if color_type is ColorType.SECONDARY:
            return self.secondary
        if color_type is ColorType.GLOW:
            return self.glow
        raise ValueError(f"{color_type} is not a theme slot")

    def validate(self):
        """Parse every slot so a bad theme fails before any box is touched."""
        for field_name in ("primary", "secondary", "glow"):
            value = getattr(self, field_name)
            try:
                parse_color(value)
            except ColorParseError:
                raise ColorParseError(value, field=f"{field_name}Color")


def resolve_base_color(box: VoxelBox, theme: ThemeColors) -> RGB:
    """
    Resolve a box's color reference, before the color multiplier.

    Args:
        box: Box to resolve
        theme: Asset theme colors

    Returns:
        Float RGB in [0, 1]
    """
    color = box.color
    if color.kind is ColorType.CUSTOM:
        source, field_name = color.value, "customColor"
    else:
        source, field_name = theme.slot(color.kind), f"{color.kind.value}Color"

    try:
        return parse_color(source)
    except ColorParseError:
        raise ColorParseError(source, box_id=box.id, field=field_name)


def resolve_box_color(box: VoxelBox, theme: ThemeColors) -> RGB:
    """
    Resolve a box's base color including its color multiplier.

    The result is not clamped; multipliers above 1 may push channels past 1.
    """
    r, g, b = resolve_base_color(box, theme)
    m = box.color_multiplier
    return (r * m, g * m, b * m)


def to_rgb255(color: Union[RGB, np.ndarray]) -> Tuple[int, int, int]:
    """
    Convert float RGB to 0-255 integers.

    Channels are clamped to [0, 1] and rounded half-up.
    """
    clamped = np.clip(np.asarray(color, dtype=np.float64)[:3], 0.0, 1.0)
    r, g, b = np.floor(clamped * 255.0 + 0.5).astype(np.int64)
    return (int(r), int(g), int(b))


def to_hex(color: Union[RGB, np.ndarray]) -> str:
    """Convert float RGB to a lowercase "#rrggbb" string."""
    r, g, b = to_rgb255(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb255_to_hex(rgb: Tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def gamma_correct(colors: np.ndarray, gamma: float = 2.2) -> np.ndarray:
    """
    Linear to display gamma approximation.

    Args:
        colors: float RGB array, any shape ending in 3
        gamma: Gamma value (default 2.2); gamma=1 only clamps

    Returns:
        float RGB array in [0, 1]
    """
    if not gamma > 0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    clamped = np.clip(np.asarray(colors, dtype=np.float64), 0.0, 1.0)
    return np.clip(np.power(clamped, 1.0 / gamma), 0.0, 1.0)


def luminance(color: Union[RGB, np.ndarray]) -> float:
    """Relative luminance of a float RGB color."""
    return float(np.dot(np.asarray(color, dtype=np.float64)[:3], LUMA_WEIGHTS))


@njit(cache=True)
def _srgb_to_linear_component(c: float) -> float:
    """
    Convert a single sRGB component to Linear.

    Args:
        c: sRGB value normalized to [0, 1]

    Returns:
        Linear value
    """
    if c <= 0.04045:
        return c / 12.92
    else:
        return ((c + 0.055) / 1.055) ** 2.4


@njit(cache=True, parallel=True)
def srgb_to_linear(colors: np.ndarray) -> np.ndarray:
    """
    Convert sRGB colors to Linear color space.

    glTF vertex colors are linear; baked colors are display (sRGB) bytes.

    Args:
        colors: Array of shape (N, 3) or (N, 4) with uint8 sRGB values

    Returns:
        Array of same shape with float32 Linear values [0, 1]
    """
    n = colors.shape[0]
    channels = colors.shape[1]
    result = np.empty((n, channels), dtype=np.float32)

    for i in prange(n):
        for c in range(min(channels, 3)):  # Only convert RGB, not alpha
            normalized = colors[i, c] / 255.0
            result[i, c] = _srgb_to_linear_component(normalized)

        if channels == 4:
            result[i, 3] = colors[i, 3] / 255.0

    return result
