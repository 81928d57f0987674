"""
Unit tests for the archetype generators and their registry.
"""

import sys
from pathlib import Path
import unittest

import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.anatomy import Side, parse_group_name
from voxel_forge.color import ThemeColors, parse_color
from voxel_forge.errors import UnknownArchetypeError
from voxel_forge.generators import (
    CHARACTER_MODELS,
    DEFAULT_THEME,
    ENEMY_MODELS,
    MIN_EXTENT,
    MIN_SCALE,
    NATURE_MODELS,
    PROP_MODELS,
    TEMPLATES,
    ModelBuilder,
    create_model,
    format_name,
    get_archetype,
    get_theme_colors,
    list_templates,
    sanitize_scale,
)
from voxel_forge.generators.nature import MAX_RUIN_EXTENT
from voxel_forge.model import ColorType


def signature(model):
    """Geometry and color roles of a model, ignoring ids."""
    return [
        (b.position, b.scale, b.color, b.color_multiplier, b.emissive, b.emissive_intensity, b.group)
        for b in model.boxes
    ]


class TestModelBuilder(unittest.TestCase):
    """Tests for the shared generator scaffolding."""

    def test_ids_are_call_scoped(self):
        first = ModelBuilder("crate")
        first.add("a", (0, 0, 0), (1, 1, 1))
        first.add("b", (0, 1, 0), (1, 1, 1))
        second = ModelBuilder("crate")
        second.add("a", (0, 0, 0), (1, 1, 1))
        assert [b.id for b in first.boxes] == ["crate_0", "crate_1"]
        assert [b.id for b in second.boxes] == ["crate_0"]

    def test_scale_applies_to_position_and_size(self):
        b = ModelBuilder("x", 2.0)
        box = b.add("a", (1, 2, 3), (0.5, 0.5, 0.5))
        assert box.position == (2.0, 4.0, 6.0)
        assert box.scale == (1.0, 1.0, 1.0)

    def test_zero_extent_clamped(self):
        box = ModelBuilder("x").add("a", (0, 0, 0), (0, 1, -1))
        assert box.scale == (MIN_EXTENT, 1.0, MIN_EXTENT)

    def test_colors(self):
        b = ModelBuilder("x")
        assert b.add("p", (0, 0, 0), (1, 1, 1)).color.kind is ColorType.PRIMARY
        glow = b.add("g", (0, 0, 0), (1, 1, 1), "glow", 2.5, emissive=1.5)
        assert glow.color.kind is ColorType.GLOW
        assert glow.emissive and glow.emissive_intensity == 1.5
        custom = b.add("c", (0, 0, 0), (1, 1, 1), "rgb(10, 20, 30)")
        assert custom.color.kind is ColorType.CUSTOM
        assert custom.color.value == "rgb(10, 20, 30)"

    def test_mirrored(self):
        b = ModelBuilder("x")
        left, right = b.mirrored("Arm", (0.3, 1, 0), (0.1, 0.5, 0.1), group="arm_{side}")
        assert left.position[0] == -0.3 and right.position[0] == 0.3
        assert (left.group, right.group) == ("arm_left", "arm_right")
        assert left.name == "Left Arm"

    def test_ring(self):
        boxes = ModelBuilder("x").ring("R", 4, 1.0, 2.0, (0.1, 0.1, 0.1))
        assert len(boxes) == 4
        for box in boxes:
            x, y, z = box.position
            assert abs(np.hypot(x, z) - 1.0) < 1e-9
            assert y == 2.0

    def test_build_appends_undeclared_groups(self):
        b = ModelBuilder("x")
        b.add("a", (0, 0, 0), (1, 1, 1), group="head")
        b.add("b", (0, 0, 0), (1, 1, 1), group="horns")
        model = b.build(["body", "head"])
        assert model.groups == ["body", "head", "horns"]


class TestSanitizeScale(unittest.TestCase):
    """Tests for scale clamping."""

    def test_valid(self):
        assert sanitize_scale(1.5) == 1.5
        assert sanitize_scale(None, 2.0) == 2.0

    def test_clamped(self):
        for bad in (0, -3, float("nan"), float("inf"), "big"):
            with self.assertLogs("voxel_forge.generators.builder", level="WARNING"):
                assert sanitize_scale(bad) == MIN_SCALE


class TestRegistry(unittest.TestCase):
    """Tests for the archetype registry."""

    def test_counts(self):
        nature = sum(len(models) for models in NATURE_MODELS.values())
        assert len(TEMPLATES) == len(ENEMY_MODELS) + nature + len(CHARACTER_MODELS) + len(PROP_MODELS)
        assert len(ENEMY_MODELS) == 34
        assert nature == 30
        assert len(PROP_MODELS) == 13

    def test_names(self):
        assert get_archetype("enemies/direWolf").name == "Enemy: Dire Wolf"
        assert get_archetype("nature/trees/oak").name == "Trees: Oak"
        assert get_archetype("props/holoAd").name == "Prop: Holo Ad"
        assert get_archetype("characters/player").name == "Character: Player"
        assert format_name("cyberTree") == "Cyber Tree"

    def test_list_templates(self):
        triples = list_templates()
        assert ("enemies", "drone", "Enemy: Drone") in triples
        assert ("nature/ruins", "arch", "Ruins: Arch") in triples
        assert len(triples) == len(TEMPLATES)

    def test_unknown_key(self):
        with self.assertRaises(UnknownArchetypeError):
            create_model("enemies/dragonKing")
        with self.assertRaises(KeyError):
            get_archetype("nope")

    def test_unknown_kwarg(self):
        with self.assertRaises(TypeError):
            create_model("enemies/drone", width=3)

    def test_randomized_flags(self):
        assert get_archetype("nature/volcanic/ashMound").randomized
        assert get_archetype("props/trash").randomized
        assert get_archetype("enemies/virusSwarm").randomized
        assert not get_archetype("enemies/drone").randomized
        assert not get_archetype("nature/ruins/arch").randomized

    def test_theme_colors(self):
        assert get_theme_colors("enemies/unknownThing") == DEFAULT_THEME
        assert DEFAULT_THEME == ThemeColors("#4a4a5a", "#3a3a4a", "#00ffff")
        for archetype in TEMPLATES.values():
            archetype.colors.validate()

    def test_theme_color_aliases(self):
        assert get_theme_colors("direWolf") == get_theme_colors("enemies/direWolf")
        assert get_theme_colors("dire-wolf") == get_theme_colors("direWolf")


class TestAllArchetypes(unittest.TestCase):
    """Invariants every registered generator must hold."""

    def test_group_coverage_and_ids(self):
        for key in TEMPLATES:
            model = create_model(key, rng=np.random.default_rng(1))
            assert len(model.boxes) > 0, key
            assert model.missing_groups() == [], key
            assert len({b.id for b in model.boxes}) == len(model.boxes), key
            assert all(min(b.scale) > 0 for b in model.boxes), key

    def test_custom_colors_parse(self):
        for key in TEMPLATES:
            model = create_model(key, rng=np.random.default_rng(2))
            for box in model.boxes:
                if box.color.is_custom:
                    parse_color(box.color.value)

    def test_deterministic(self):
        for key, archetype in TEMPLATES.items():
            if archetype.randomized:
                continue
            first, second = create_model(key), create_model(key)
            assert signature(first) == signature(second), key
            assert [b.id for b in first.boxes] == [b.id for b in second.boxes], key

    def test_seeded_randomized_reproducible(self):
        for key, archetype in TEMPLATES.items():
            if not archetype.randomized:
                continue
            first = create_model(key, rng=np.random.default_rng(42))
            second = create_model(key, rng=np.random.default_rng(42))
            assert signature(first) == signature(second), key

    def test_scale(self):
        for key in ("enemies/drone", "props/crate", "characters/npc"):
            small = create_model(key, scale=1.0)
            big = create_model(key, scale=2.0)
            assert np.allclose(big.positions(), small.positions() * 2), key
            assert np.allclose(big.scales(), np.maximum(small.scales() * 2, MIN_EXTENT)), key

    def test_degenerate_scale(self):
        for key in TEMPLATES:
            model = create_model(key, scale=0, rng=np.random.default_rng(0))
            assert all(np.isfinite(b.position).all() for b in model.boxes), key
            assert all(min(b.scale) > 0 for b in model.boxes), key

    def test_paired_limbs_follow_side_convention(self):
        """Left groups sit at -X, right groups at +X."""
        for key in ("enemies/defaultHumanoid", "enemies/direWolf", "enemies/mech", "characters/player"):
            model = create_model(key)
            for box in model.boxes:
                side = parse_group_name(box.group).side
                if side is Side.LEFT:
                    assert box.position[0] < 0, (key, box.name)
                elif side is Side.RIGHT:
                    assert box.position[0] > 0, (key, box.name)


class TestRuins(unittest.TestCase):
    """Tests for the parameterized ruin pieces."""

    def test_dimensions(self):
        narrow = create_model("nature/ruins/arch", width=6, height=8)
        wide = create_model("nature/ruins/arch", width=12, height=8)
        lo_n, hi_n = narrow.bounds()
        lo_w, hi_w = wide.bounds()
        assert (hi_w - lo_w)[0] > (hi_n - lo_n)[0]

    def test_degenerate_dimensions(self):
        keys = [key for key in TEMPLATES if key.startswith("nature/ruins/")]
        assert len(keys) == 7
        for key in keys:
            for dim in ("width", "height", "depth"):
                for bad in (0, -1, float("nan"), float("inf")):
                    with self.assertLogs("voxel_forge.generators.builder", level="WARNING"):
                        model = create_model(key, rng=np.random.default_rng(0), **{dim: bad})
                    assert len(model.boxes) > 0, (key, dim, bad)
                    assert np.isfinite(model.positions()).all(), (key, dim, bad)
                    assert (model.scales() > 0).all(), (key, dim, bad)

    def test_oversized_dimensions_clamped(self):
        with self.assertLogs("voxel_forge.generators.nature", level="WARNING"):
            model = create_model("nature/ruins/pillar", height=1e12, rng=np.random.default_rng(0))
        assert model.bounds()[1][1] <= MAX_RUIN_EXTENT + 1

    def test_wall_height(self):
        low = create_model("nature/ruins/wall", height=4, rng=np.random.default_rng(0))
        high = create_model("nature/ruins/wall", height=12, rng=np.random.default_rng(0))
        assert high.bounds()[1][1] > low.bounds()[1][1]


if __name__ == "__main__":
    unittest.main()
