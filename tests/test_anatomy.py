"""
Unit tests for the group-name anatomy classifier.
"""

import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.anatomy import (
    BodyPart,
    LimbPosition,
    ModelType,
    Side,
    detect_model_type,
    group_name,
    group_pivots,
    group_sides,
    parse_group_name,
)
from voxel_forge.generators import create_model
from voxel_forge.model import VoxelBox, VoxelModel


def box(box_id, group, position, scale=(0.2, 0.2, 0.2)):
    return VoxelBox(id=box_id, name=box_id, position=position, scale=scale, group=group)


class TestParseGroupName(unittest.TestCase):
    """Tests for name classification."""

    def test_quadruped_leg(self):
        parsed = parse_group_name("leg_front_left")
        assert parsed.part is BodyPart.LEG
        assert parsed.side is Side.LEFT
        assert parsed.position is LimbPosition.FRONT
        assert parsed.hierarchy_level == 1
        assert not parsed.is_extremity

    def test_side_markers(self):
        assert parse_group_name("arm_right").side is Side.RIGHT
        assert parse_group_name("L_Hand").side is Side.LEFT
        assert parse_group_name("hand_r").side is Side.RIGHT
        assert parse_group_name("finger_l_2").side is Side.LEFT
        assert parse_group_name("head").side is Side.CENTER

    def test_precedence(self):
        # "body" wins over everything listed after it
        assert parse_group_name("body_glow").part is BodyPart.BODY
        # "leg" is checked before "foot"
        assert parse_group_name("leg_foot").part is BodyPart.LEG

    def test_extremities(self):
        paw = parse_group_name("paw_back_right")
        assert paw.part is BodyPart.FOOT
        assert paw.is_extremity
        assert paw.position is LimbPosition.BACK
        assert paw.hierarchy_level == 2
        assert parse_group_name("toe_left").hierarchy_level == 3

    def test_upper(self):
        assert parse_group_name("upper_arm_left").is_upper
        assert parse_group_name("thigh_right").is_upper
        assert not parse_group_name("arm_left").is_upper

    def test_other_parts(self):
        assert parse_group_name("wing_left").part is BodyPart.WING
        assert parse_group_name("tail").part is BodyPart.TAIL
        assert parse_group_name("rotors").part is BodyPart.ROTOR
        assert parse_group_name("sensors").part is BodyPart.SENSOR
        assert parse_group_name("weapons").part is BodyPart.WEAPON
        assert parse_group_name("trails").part is BodyPart.EFFECT
        assert parse_group_name("debris").part is BodyPart.GENERIC


class TestGroupName(unittest.TestCase):
    """Tests for building names in the wire convention."""

    def test_build(self):
        assert group_name(BodyPart.LEG, Side.LEFT, LimbPosition.FRONT) == "leg_front_left"
        assert group_name(BodyPart.ARM, 1) == "arm_right"
        assert group_name(BodyPart.ARM, -1) == "arm_left"
        assert group_name(BodyPart.LEG, Side.LEFT, index=2) == "leg_left_2"
        assert group_name("tentacle", Side.RIGHT, index=0) == "tentacle_right_0"
        assert group_name(BodyPart.HEAD) == "head"
        assert group_name(BodyPart.BODY, 0) == "body"

    def test_roundtrip_through_parser(self):
        for part in (BodyPart.LEG, BodyPart.ARM, BodyPart.WING):
            for side in (Side.LEFT, Side.RIGHT):
                parsed = parse_group_name(group_name(part, side))
                assert parsed.part is part
                assert parsed.side is side


class TestPivots(unittest.TestCase):
    """Tests for pivot and side inference."""

    def setUp(self):
        self.model = VoxelModel(boxes=[
            box("b0", "body", (0, 1, 0), (0.6, 0.6, 1.0)),
            box("h0", "head", (0, 1.6, 0.5), (0.4, 0.4, 0.4)),
            box("l0", "leg_left", (-0.2, 0.5, 0), (0.2, 0.6, 0.2)),
            box("l1", "leg_left", (-0.2, 0.1, 0), (0.2, 0.2, 0.2)),
            box("t0", "tail", (0, 1.1, -0.8), (0.1, 0.1, 0.6)),
            box("w0", "wing_right", (0.8, 1.3, 0), (1.0, 0.1, 0.5)),
            box("x0", "spikes", (0.5, 1.4, 0)),
        ], groups=["body", "head", "leg_left", "tail", "wing_right", "spikes"])

    def test_leg_pivots_at_top(self):
        x, y, z = group_pivots(self.model)["leg_left"]
        assert abs(x - -0.2) < 1e-9
        assert abs(y - 0.8) < 1e-9
        assert abs(z) < 1e-9

    def test_head_pivots_at_bottom(self):
        _, y, _ = group_pivots(self.model)["head"]
        assert abs(y - 1.4) < 1e-9

    def test_tail_pivots_at_max_z(self):
        _, _, z = group_pivots(self.model)["tail"]
        assert abs(z - -0.5) < 1e-9

    def test_wing_pivots_at_inner_edge(self):
        x, _, _ = group_pivots(self.model)["wing_right"]
        assert abs(x - 0.3) < 1e-9

    def test_other_pivot_is_center(self):
        x, y, z = group_pivots(self.model)["body"]
        assert abs(x) < 1e-9 and abs(y - 1.0) < 1e-9 and abs(z) < 1e-9

    def test_sides(self):
        sides = group_sides(self.model)
        assert sides["leg_left"] is Side.LEFT
        assert sides["wing_right"] is Side.RIGHT
        assert sides["body"] is Side.CENTER
        # No marker in the name: centre X 0.5 > 0.1
        assert sides["spikes"] is Side.RIGHT


class TestDetectModelType(unittest.TestCase):
    """Tests for archetype family detection on generated models."""

    def test_generated_models(self):
        expected = {
            "enemies/drone": ModelType.DRONE,
            "enemies/spirit": ModelType.SPIRIT,
            "enemies/beast": ModelType.BEAST,
            "enemies/direWolf": ModelType.BEAST,
            "enemies/golem": ModelType.GOLEM,
            "enemies/mech": ModelType.MECH,
            "enemies/defaultHumanoid": ModelType.HUMANOID,
            "props/holoAd": ModelType.PROP,
            "props/streetlight": ModelType.PROP,
            "characters/player": ModelType.HUMANOID,
        }
        for key, model_type in expected.items():
            assert detect_model_type(create_model(key)) is model_type, key

    def test_empty_model_is_generic(self):
        assert detect_model_type(VoxelModel()) is ModelType.GENERIC


if __name__ == "__main__":
    unittest.main()
