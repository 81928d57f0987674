"""
Unit tests for the box and model data structures.
"""

import sys
from pathlib import Path
import unittest

import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.errors import InvalidModelError
from voxel_forge.model import (
    DEFAULT_CUSTOM_COLOR,
    BoxColor,
    ColorType,
    VoxelBox,
    VoxelModel,
    generate_box_id,
)


def make_box(box_id="b0", position=(0, 0, 0), scale=(1, 1, 1), **kwargs):
    return VoxelBox(id=box_id, name=box_id, position=position, scale=scale, **kwargs)


class TestBoxColor(unittest.TestCase):
    """Tests for the tagged color reference."""

    def test_theme_slots_carry_no_value(self):
        assert BoxColor.primary().kind is ColorType.PRIMARY
        assert BoxColor.glow().value is None
        with self.assertRaises(InvalidModelError):
            BoxColor(ColorType.SECONDARY, "#ffffff")

    def test_custom_defaults_to_gray(self):
        assert BoxColor.custom().value == DEFAULT_CUSTOM_COLOR
        assert BoxColor.custom("#123456").value == "#123456"

    def test_from_wire(self):
        assert BoxColor.from_wire("secondary") == BoxColor.secondary()
        assert BoxColor.from_wire("custom", "hsl(10, 50%, 50%)").value == "hsl(10, 50%, 50%)"
        assert BoxColor.from_wire("custom", None).value == DEFAULT_CUSTOM_COLOR

    def test_from_wire_drops_legacy_custom_value(self):
        """A customColor next to a theme colorType has no effect."""
        assert BoxColor.from_wire("primary", "#ff0000") == BoxColor.primary()

    def test_unknown_color_type(self):
        with self.assertRaises(InvalidModelError):
            BoxColor.from_wire("rainbow")


class TestVoxelBox(unittest.TestCase):
    """Tests for VoxelBox validation and wire form."""

    def test_defaults(self):
        box = make_box()
        assert box.color == BoxColor.primary()
        assert box.color_multiplier == 1.0
        assert not box.emissive
        assert box.group == "body"

    def test_non_positive_scale_rejected(self):
        with self.assertRaises(InvalidModelError):
            make_box(scale=(1, 0, 1))
        with self.assertRaises(InvalidModelError):
            make_box(scale=(1, -1, 1))

    def test_non_finite_position_rejected(self):
        with self.assertRaises(InvalidModelError):
            make_box(position=(0, float("nan"), 0))

    def test_bad_multiplier_rejected(self):
        with self.assertRaises(InvalidModelError):
            make_box(color_multiplier=0)

    def test_non_numeric_color_fields_rejected(self):
        for bad in ("abc", None, "1.5", True):
            with self.assertRaises(InvalidModelError):
                make_box(color_multiplier=bad)
            with self.assertRaises(InvalidModelError):
                make_box(emissive_intensity=bad)

    def test_emissive_must_be_boolean(self):
        for bad in ("false", "true", 1, None):
            with self.assertRaises(InvalidModelError):
                make_box(emissive=bad)
        assert make_box(emissive=np.bool_(True)).emissive is True

    def test_glows_needs_flag_and_intensity(self):
        assert make_box(emissive=True, emissive_intensity=2).glows
        assert not make_box(emissive=True, emissive_intensity=0).glows
        assert not make_box(emissive=False, emissive_intensity=2).glows

    def test_wire_roundtrip(self):
        box = make_box(
            "x1", (0.5, 1.25, -0.3), (0.1, 0.2, 0.3),
            color=BoxColor.custom("#ff8800"), color_multiplier=1.5,
            emissive=True, emissive_intensity=2.0, group="arm_left"
        )
        data = box.to_dict()
        assert data["colorType"] == "custom"
        assert data["customColor"] == "#ff8800"
        assert data["position"] == [0.5, 1.25, -0.3]
        assert VoxelBox.from_dict(data) == box

    def test_to_dict_without_id(self):
        assert "id" not in make_box().to_dict(include_id=False)

    def test_from_dict_missing_field(self):
        with self.assertRaises(InvalidModelError):
            VoxelBox.from_dict({"id": "a", "position": [0, 0, 0]})


class TestVoxelModel(unittest.TestCase):
    """Tests for VoxelModel invariants and helpers."""

    def test_duplicate_ids_rejected(self):
        with self.assertRaises(InvalidModelError):
            VoxelModel(boxes=[make_box("a"), make_box("a")], groups=["body"])

    def test_duplicate_groups_rejected(self):
        with self.assertRaises(InvalidModelError):
            VoxelModel(boxes=[], groups=["body", "body"])

    def test_empty_model(self):
        model = VoxelModel()
        assert model.is_empty
        assert model.positions().shape == (0, 3)
        lo, hi = model.bounds()
        assert np.all(lo == 0) and np.all(hi == 0)

    def test_group_helpers(self):
        model = VoxelModel(
            boxes=[make_box("a", group="head"), make_box("b", group="tail"), make_box("c", group="head")],
            groups=["head"],
        )
        assert model.group_names() == ["head", "tail"]
        assert model.missing_groups() == ["tail"]
        assert [b.id for b in model.boxes_in_group("head")] == ["a", "c"]
        assert model.get_box("b").group == "tail"
        assert model.get_box("zzz") is None

    def test_bounds_include_extents(self):
        model = VoxelModel(boxes=[
            make_box("a", (0, 0, 0), (2, 2, 2)),
            make_box("b", (3, 1, 0), (1, 4, 1)),
        ])
        lo, hi = model.bounds()
        assert np.allclose(lo, [-1, -1, -1])
        assert np.allclose(hi, [3.5, 3, 1])

    def test_regenerated_ids(self):
        model = VoxelModel(boxes=[make_box("a"), make_box("b", position=(1, 0, 0))], groups=["body"])
        fresh = model.with_regenerated_ids("npc")
        assert [b.id for b in fresh.boxes] != ["a", "b"]
        assert all(b.id.startswith("npc_") for b in fresh.boxes)
        assert [b.position for b in fresh.boxes] == [b.position for b in model.boxes]
        # Original untouched
        assert [b.id for b in model.boxes] == ["a", "b"]

    def test_dict_roundtrip(self):
        model = VoxelModel(boxes=[make_box("a", group="head")], groups=["head"])
        assert VoxelModel.from_dict(model.to_dict()) == model

    def test_generate_box_id_unique(self):
        ids = {generate_box_id() for _ in range(200)}
        assert len(ids) == 200


if __name__ == "__main__":
    unittest.main()
