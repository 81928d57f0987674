"""
Unit tests for color resolution.
"""

import sys
from pathlib import Path
import unittest

import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.color import (
    ThemeColors,
    gamma_correct,
    luminance,
    parse_color,
    resolve_box_color,
    srgb_to_linear,
    to_hex,
    to_rgb255,
)
from voxel_forge.errors import ColorParseError
from voxel_forge.model import BoxColor, VoxelBox


THEME = ThemeColors("#4a4a5a", "#3a3a4a", "#00ffff")


def box_with(color, multiplier=1.0, box_id="b"):
    return VoxelBox(
        id=box_id, name="b", position=(0, 0, 0), scale=(1, 1, 1),
        color=color, color_multiplier=multiplier
    )


class TestParseColor(unittest.TestCase):
    """Tests for color string parsing."""

    def test_hex(self):
        assert parse_color("#ff0000") == (1.0, 0.0, 0.0)
        assert parse_color("#0ff") == (0.0, 1.0, 1.0)

    def test_css_functions(self):
        assert parse_color("rgb(0, 255, 255)") == (0.0, 1.0, 1.0)
        r, g, b = parse_color("hsl(0, 100%, 50%)")
        assert (r, g, b) == (1.0, 0.0, 0.0)

    def test_named(self):
        assert parse_color("white") == (1.0, 1.0, 1.0)

    def test_malformed(self):
        with self.assertRaises(ColorParseError):
            parse_color("#zzzzzz")
        with self.assertRaises(ColorParseError):
            parse_color("not a color")
        with self.assertRaises(ColorParseError):
            parse_color(None)


class TestResolveBoxColor(unittest.TestCase):
    """Tests for theme/custom resolution."""

    def test_theme_slots(self):
        assert to_hex(resolve_box_color(box_with(BoxColor.primary()), THEME)) == "#4a4a5a"
        assert to_hex(resolve_box_color(box_with(BoxColor.secondary()), THEME)) == "#3a3a4a"
        assert to_hex(resolve_box_color(box_with(BoxColor.glow()), THEME)) == "#00ffff"

    def test_custom(self):
        assert to_hex(resolve_box_color(box_with(BoxColor.custom("#123456")), THEME)) == "#123456"

    def test_multiplier_is_not_clamped(self):
        r, g, b = resolve_box_color(box_with(BoxColor.glow(), 2.5), THEME)
        assert r == 0.0
        assert g == 2.5 and b == 2.5

    def test_error_names_box_and_field(self):
        with self.assertRaises(ColorParseError) as ctx:
            resolve_box_color(box_with(BoxColor.custom("bogus"), box_id="eye_1"), THEME)
        assert ctx.exception.box_id == "eye_1"
        assert ctx.exception.field == "customColor"

        bad_theme = ThemeColors("#4a4a5a", "nope", "#00ffff")
        with self.assertRaises(ColorParseError) as ctx:
            resolve_box_color(box_with(BoxColor.secondary()), bad_theme)
        assert ctx.exception.field == "secondaryColor"

    def test_theme_validate(self):
        THEME.validate()
        with self.assertRaises(ColorParseError) as ctx:
            ThemeColors("#fff", "#000", "###").validate()
        assert ctx.exception.field == "glowColor"


class TestConversions(unittest.TestCase):
    """Tests for output conversions and gamma."""

    def test_to_rgb255_rounds(self):
        assert to_rgb255((0.5, 0.0, 1.0)) == (128, 0, 255)
        assert to_rgb255((1.7, -0.2, 0.25)) == (255, 0, 64)

    def test_gamma_clamps_first(self):
        out = gamma_correct(np.array([[2.0, -1.0, 0.25]]), 2.0)
        assert np.allclose(out, [[1.0, 0.0, 0.5]])

    def test_gamma_one_is_clamp(self):
        colors = np.array([0.1, 0.5, 0.9])
        assert np.allclose(gamma_correct(colors, 1.0), colors)

    def test_gamma_must_be_positive(self):
        with self.assertRaises(ValueError):
            gamma_correct(np.zeros(3), 0.0)

    def test_luminance(self):
        assert abs(luminance((1, 1, 1)) - 1.0) < 1e-9
        assert luminance((0, 1, 0)) > luminance((1, 0, 0)) > luminance((0, 0, 1))

    def test_srgb_to_linear(self):
        colors = np.array([[0, 0, 0, 255], [255, 255, 255, 128]], dtype=np.uint8)
        linear = srgb_to_linear(colors)
        assert linear.shape == (2, 4)
        assert np.allclose(linear[0, :3], 0.0)
        assert np.allclose(linear[1, :3], 1.0)
        assert abs(linear[1, 3] - 128 / 255) < 1e-6

    def test_srgb_mid_gray_darkens(self):
        linear = srgb_to_linear(np.array([[128, 128, 128]], dtype=np.uint8))
        assert 0.2 < linear[0, 0] < 0.25


if __name__ == "__main__":
    unittest.main()
