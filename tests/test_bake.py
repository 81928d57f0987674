"""
Unit tests for the light baking engine.
"""

import re
import sys
from pathlib import Path
import unittest

import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.bake import (
    BakeOptions,
    bake_breakdown,
    bake_voxel_model,
    occluder_counts,
)
from voxel_forge.color import ThemeColors, luminance, resolve_box_color, to_hex
from voxel_forge.errors import BakeOptionsError, ColorParseError
from voxel_forge.generators import create_model
from voxel_forge.lighting import EDITOR_RIG, face_dot_factor, normalize
from voxel_forge.model import BoxColor, VoxelBox, VoxelModel


PRIMARY, SECONDARY, GLOW = "#4a4a5a", "#3a3a4a", "#00ffff"
THEME = ThemeColors(PRIMARY, SECONDARY, GLOW)
HEX = re.compile(r"^#[0-9a-f]{6}$", re.IGNORECASE)


def make_box(box_id, position, color=None, **kwargs):
    return VoxelBox(
        id=box_id, name=box_id, position=position, scale=(0.1, 0.1, 0.1),
        color=color or BoxColor.primary(), **kwargs
    )


class TestLightingRig(unittest.TestCase):
    """Tests for the fixed editor rig."""

    def test_rig_constants(self):
        assert EDITOR_RIG.name == "editor-default"
        assert EDITOR_RIG.ambient_intensity == 0.4
        main, fill = EDITOR_RIG.directional
        assert main.intensity == 0.8 and fill.intensity == 0.3
        assert np.allclose(main.direction, np.array([5, 10, 5]) / np.sqrt(150))
        point, = EDITOR_RIG.points
        assert point.position == (0.0, 3.0, 0.0)
        assert point.distance == 10.0 and point.decay == 2.0

    def test_face_dot_factor(self):
        # Axis-aligned light hits exactly one face
        assert abs(face_dot_factor((0, 1, 0)) - 1 / 6) < 1e-12
        # normalize(5, 10, 5): (0.408 + 0.816 + 0.408) / 6
        assert abs(face_dot_factor(normalize((5, 10, 5))) - (20 / np.sqrt(150)) / 6) < 1e-12


class TestBakeOptions(unittest.TestCase):
    """Tests for option parsing and validation."""

    def test_defaults(self):
        options = BakeOptions()
        assert options.include_ao and options.bake_emissive
        assert options.ao_strength == 0.5 and options.gamma == 2.2
        assert options.ao_radius == 0.3 and options.ao_penalty == 0.2

    def test_from_dict_camel_case(self):
        options = BakeOptions.from_dict({"includeAO": False, "aoStrength": 0.8, "outputFormat": "rgb"})
        assert not options.include_ao
        assert options.ao_strength == 0.8
        assert options.output_format == "rgb"

    def test_from_dict_unknown_key(self):
        with self.assertRaises(BakeOptionsError):
            BakeOptions.from_dict({"shadowQuality": 3})

    def test_invalid_gamma(self):
        for gamma in (0, -1, float("inf")):
            with self.assertRaises(BakeOptionsError):
                BakeOptions(gamma=gamma).validate()

    def test_invalid_values(self):
        with self.assertRaises(BakeOptionsError):
            BakeOptions(ao_strength=-0.1).validate()
        with self.assertRaises(BakeOptionsError):
            BakeOptions(output_format="cmyk").validate()

    def test_wrongly_typed_values(self):
        for data in (
            {"aoStrength": "0.5"},
            {"gamma": None},
            {"aoRadius": True},
            {"includeAO": "false"},
            {"bakeEmissive": 1},
            {"spatialIndexThreshold": 10.5},
        ):
            with self.assertRaises(BakeOptionsError, msg=str(data)):
                BakeOptions.from_dict(data).validate()

    def test_bake_rejects_string_flag(self):
        model = VoxelModel(boxes=[make_box("a", (0, 0, 0))], groups=["body"])
        with self.assertRaises(BakeOptionsError):
            bake_voxel_model(model, PRIMARY, SECONDARY, GLOW, {"includeAO": "false"})

    def test_bake_rejects_bad_gamma(self):
        model = VoxelModel(boxes=[make_box("a", (0, 0, 0))], groups=["body"])
        with self.assertRaises(BakeOptionsError):
            bake_voxel_model(model, PRIMARY, SECONDARY, GLOW, {"gamma": 0})

    def test_to_dict(self):
        data = BakeOptions().to_dict()
        assert data["includeAO"] is True
        assert data["gamma"] == 2.2
        assert "spatialIndexThreshold" not in data


class TestOcclusion(unittest.TestCase):
    """Tests for the neighbors-above heuristic."""

    def test_counts(self):
        positions = np.array([
            [0.0, 0.0, 0.0],
            [0.0, 0.2, 0.0],   # above 0, within radius
            [0.0, -0.2, 0.0],  # below 0
            [0.0, 0.4, 0.0],   # too far from 0, above 1
        ])
        counts = occluder_counts(positions, BakeOptions())
        assert counts.tolist() == [1, 1, 1, 0]

    def test_same_height_does_not_occlude(self):
        positions = np.array([[0.0, 0.0, 0.0], [0.1, 0.0, 0.0]])
        assert occluder_counts(positions, BakeOptions()).tolist() == [0, 0]

    def test_kdtree_matches_brute_force(self):
        rng = np.random.default_rng(3)
        positions = rng.uniform(-1, 1, size=(300, 3))
        brute = occluder_counts(positions, BakeOptions())
        indexed = occluder_counts(positions, BakeOptions(spatial_index_threshold=10))
        assert np.array_equal(brute, indexed)

    def test_single_box_unoccluded(self):
        box = make_box("a", (0, 0, 0))
        model = VoxelModel(boxes=[box], groups=["body"])
        terms = bake_breakdown(box, model, THEME)
        assert terms.occluders == 0
        assert terms.occlusion == 1.0

    def test_zero_strength_disables_darkening(self):
        below = make_box("below", (0, 0, 0))
        above = make_box("above", (0, 0.2, 0))
        model = VoxelModel(boxes=[below, above], groups=["body"])

        plain = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW, {"includeAO": False})
        zero = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW, {"aoStrength": 0})
        darkened = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW)

        assert zero.boxes[0].baked_color == plain.boxes[0].baked_color
        assert luminance(darkened.boxes[0].baked_color_rgb) < luminance(plain.boxes[0].baked_color_rgb)
        # The upper box has nothing above it
        assert darkened.boxes[1].baked_color == plain.boxes[1].baked_color


class TestBakeTerms(unittest.TestCase):
    """Tests for the per-term lighting math."""

    def test_out_of_range_point_light(self):
        far = make_box("far", (0, 3, 20))
        model = VoxelModel(boxes=[far], groups=["body"])
        terms = bake_breakdown(far, model, THEME)

        assert np.all(terms.point[0] == 0.0)
        base = np.asarray(resolve_box_color(far, THEME))
        assert np.allclose(terms.ambient, base * 0.4)
        assert np.allclose(terms.main, base * 0.8 * face_dot_factor(normalize((5, 10, 5))))
        assert np.allclose(terms.fill, base * 0.3 * face_dot_factor(normalize((-5, 5, -5))))

    def test_point_light_in_range_is_cyan(self):
        near = make_box("near", (0, 0, 0), BoxColor.custom("#ffffff"))
        model = VoxelModel(boxes=[near], groups=["body"])
        terms = bake_breakdown(near, model, THEME)
        point = terms.point[0]
        assert point[0] == 0.0
        assert point[1] > 0 and point[2] > 0

    def test_gamma_one_identity(self):
        box = make_box("a", (0, 1, 0), BoxColor.custom("#6080a0"))
        model = VoxelModel(boxes=[box], groups=["body"])
        terms = bake_breakdown(box, model, THEME, {"gamma": 1.0})
        assert np.allclose(terms.final, np.clip(terms.linear, 0, 1))

    def test_breakdown_matches_bake(self):
        model = create_model("enemies/direWolf")
        baked = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW)
        for index in (0, len(model.boxes) // 2, len(model.boxes) - 1):
            terms = bake_breakdown(model.boxes[index], model, THEME)
            assert to_hex(terms.final) == baked.boxes[index].baked_color


class TestBakeVoxelModel(unittest.TestCase):
    """Tests for whole-model baking."""

    def test_drone_bake(self):
        model = create_model("enemies/drone")
        baked = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW)

        assert len(baked.boxes) == len(model.boxes)
        assert baked.groups == model.groups
        for box in baked.boxes:
            assert HEX.match(box.baked_color)
            assert all(isinstance(c, int) and 0 <= c <= 255 for c in box.baked_color_rgb)

    def test_drone_emissive_is_brighter(self):
        model = create_model("enemies/drone")
        with_glow = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW)
        without = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW, {"bakeEmissive": False})

        glowing = [i for i, box in enumerate(model.boxes) if box.glows]
        assert glowing
        for i in glowing:
            assert luminance(with_glow.boxes[i].baked_color_rgb) >= luminance(without.boxes[i].baked_color_rgb)
            lit = bake_breakdown(model.boxes[i], model, THEME)
            unlit = bake_breakdown(model.boxes[i], model, THEME, {"bakeEmissive": False})
            assert luminance(lit.linear) > luminance(unlit.linear)

    def test_baked_color_is_self_contained(self):
        model = create_model("props/holoAd")
        baked = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW)
        other_theme = ThemeColors("#000000", "#000000", "#000000")
        for box in baked.boxes:
            assert box.color.is_custom
            assert box.color_multiplier == 1.0
            assert to_hex(resolve_box_color(box, other_theme)) == box.baked_color

    def test_original_color(self):
        box = make_box("a", (0, 0, 0), BoxColor.secondary())
        baked = bake_voxel_model(VoxelModel(boxes=[box], groups=["body"]), PRIMARY, SECONDARY, GLOW)
        assert baked.boxes[0].original_color == SECONDARY

    def test_original_color_clamps_multiplier(self):
        box = make_box("a", (0, 0, 0), BoxColor.glow(), color_multiplier=3.0)
        baked = bake_voxel_model(VoxelModel(boxes=[box], groups=["body"]), PRIMARY, SECONDARY, GLOW)
        assert baked.boxes[0].original_color == "#00ffff"

    def test_fields_preserved(self):
        model = create_model("enemies/golem")
        baked = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW)
        for src, out in zip(model.boxes, baked.boxes):
            assert (out.id, out.name, out.position, out.scale, out.group) == \
                (src.id, src.name, src.position, src.scale, src.group)
            assert (out.emissive, out.emissive_intensity) == (src.emissive, src.emissive_intensity)

    def test_input_not_modified(self):
        model = create_model("enemies/beast")
        before = model.to_dict()
        bake_voxel_model(model, PRIMARY, SECONDARY, GLOW)
        assert model.to_dict() == before

    def test_empty_model(self):
        baked = bake_voxel_model(VoxelModel(boxes=[], groups=[]), "#fff", "#000", "#0ff")
        assert baked.boxes == []
        assert baked.groups == []
        assert baked.baking_info.lighting_setup == "editor-default"

    def test_baking_info(self):
        baked = bake_voxel_model(
            VoxelModel(boxes=[make_box("a", (0, 0, 0))], groups=["body"]),
            PRIMARY, SECONDARY, GLOW, {"aoStrength": 0.7}, timestamp=1700000000000
        )
        info = baked.baking_info.to_dict()
        assert info["timestamp"] == 1700000000000
        assert info["lightingSetup"] == "editor-default"
        assert info["options"]["aoStrength"] == 0.7

    def test_malformed_custom_color_fails_fast(self):
        model = VoxelModel(boxes=[
            make_box("ok", (0, 0, 0)),
            make_box("bad", (1, 0, 0), BoxColor.custom("#12345g")),
        ], groups=["body"])
        with self.assertRaises(ColorParseError) as ctx:
            bake_voxel_model(model, PRIMARY, SECONDARY, GLOW)
        assert ctx.exception.box_id == "bad"

    def test_output_formats(self):
        box = make_box("a", (0, 0, 0), BoxColor.custom("#ffffff"))
        model = VoxelModel(boxes=[box], groups=["body"])
        baked = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW, {"outputFormat": "normalized"})
        voxel = baked.boxes[0]
        r, g, b = voxel.formatted_color()
        assert (r, g, b) == tuple(c / 255.0 for c in voxel.baked_color_rgb)
        assert voxel.formatted_color("hex") == voxel.baked_color
        assert voxel.formatted_color("rgb") == voxel.baked_color_rgb

    def test_randomized_model_bakes(self):
        model = create_model("nature/volcanic/lavaRock", rng=np.random.default_rng(5))
        baked = bake_voxel_model(model, PRIMARY, SECONDARY, GLOW)
        assert all(HEX.match(b.baked_color) for b in baked.boxes)


if __name__ == "__main__":
    unittest.main()
