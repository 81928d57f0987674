"""
Group Name Anatomy

Group names are a wire contract with the game's animation system, which
infers skeletal roles and pivots from them ("leg_front_left", "arm_right",
"tail", "rotors"). This module is the single classifier for that contract:
generators use `group_name` to build names, animation consumers use
`parse_group_name`, `group_pivots` and `group_sides` to read them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Pattern, Tuple, Union
import re

import numpy as np

from .model import VoxelModel


class BodyPart(Enum):
    BODY = "body"
    LEG = "leg"
    FOOT = "foot"
    TOE = "toe"
    ARM = "arm"
    HAND = "hand"
    FINGER = "finger"
    HEAD = "head"
    NECK = "neck"
    WING = "wing"
    TAIL = "tail"
    SHOULDER = "shoulder"
    EFFECT = "effect"
    WEAPON = "weapon"
    ROTOR = "rotor"
    SENSOR = "sensor"
    GENERIC = "generic"


class Side(Enum):
    LEFT = "left"       # -X
    RIGHT = "right"     # +X
    CENTER = "center"


class LimbPosition(Enum):
    FRONT = "front"
    BACK = "back"
    CENTER = "center"


class ModelType(Enum):
    DRONE = "drone"
    SPIRIT = "spirit"
    BEAST = "beast"
    PROP = "prop"
    GOLEM = "golem"
    MECH = "mech"
    HUMANOID = "humanoid"
    GENERIC = "generic"


# First match wins; (part, hierarchy level)
_PART_PATTERNS: List[Tuple[Pattern, BodyPart, int]] = [
    (re.compile(r"body|torso|core|chest|trunk|pelvis|hip"), BodyPart.BODY, 0),
    (re.compile(r"leg|thigh|calf|shin|knee"), BodyPart.LEG, 1),
    (re.compile(r"foot|feet|paw|hoof"), BodyPart.FOOT, 2),
    (re.compile(r"toe|talon"), BodyPart.TOE, 3),
    (re.compile(r"arm|bicep|forearm|elbow"), BodyPart.ARM, 1),
    (re.compile(r"hand|claw|fist"), BodyPart.HAND, 2),
    (re.compile(r"finger|digit"), BodyPart.FINGER, 3),
    (re.compile(r"head|face|jaw|snout|muzzle"), BodyPart.HEAD, 1),
    (re.compile(r"neck"), BodyPart.NECK, 1),
    (re.compile(r"wing"), BodyPart.WING, 1),
    (re.compile(r"tail"), BodyPart.TAIL, 1),
    (re.compile(r"shoulder"), BodyPart.SHOULDER, 1),
    (re.compile(r"effect|trail|particle|aura|glow|light"), BodyPart.EFFECT, 2),
    (re.compile(r"weapon|gun|cannon|blade|sword"), BodyPart.WEAPON, 2),
    (re.compile(r"rotor|propeller"), BodyPart.ROTOR, 1),
    (re.compile(r"sensor|eye|visor"), BodyPart.SENSOR, 2),
]

_EXTREMITY = re.compile(r"hand|foot|paw|claw|hoof|finger|toe|talon")
_UPPER = re.compile(r"upper|shoulder|thigh|bicep")

# Groups whose pivot sits at the top of their bounds (hip, shoulder, ankle, wrist)
_TOP_PIVOT = {BodyPart.LEG, BodyPart.FOOT, BodyPart.ARM, BodyPart.HAND}
# Groups whose pivot sits at the bottom of their bounds
_BOTTOM_PIVOT = {BodyPart.HEAD, BodyPart.NECK}

# Centre X beyond which an unnamed group counts as sided
SIDE_THRESHOLD = 0.1


@dataclass(frozen=True)
class ParsedGroup:
    """
    Anatomical reading of a group name.

    Attributes:
        name: The group name as given
        part: Classified body part
        side: Side marker found in the name
        position: Front/back marker (quadrupeds)
        is_extremity: Hand, foot, paw, claw, hoof, finger, toe or talon
        is_upper: Upper segment (upper arm, thigh, shoulder, bicep)
        hierarchy_level: 0 body, 1 limb, 2 extremity, 3 digit
    """

    name: str
    part: BodyPart
    side: Side
    position: LimbPosition
    is_extremity: bool
    is_upper: bool
    hierarchy_level: int


def _name_side(lower: str) -> Side:
    if "left" in lower or lower.startswith("l_") or lower.endswith("_l") or "_l_" in lower:
        return Side.LEFT
    if "right" in lower or lower.startswith("r_") or lower.endswith("_r") or "_r_" in lower:
        return Side.RIGHT
    return Side.CENTER


def _name_position(lower: str) -> LimbPosition:
    if "front" in lower or "fore" in lower:
        return LimbPosition.FRONT
    if "back" in lower or "hind" in lower or "rear" in lower:
        return LimbPosition.BACK
    return LimbPosition.CENTER


def parse_group_name(name: str) -> ParsedGroup:
    """
    Classify a group name.

    Args:
        name: Group name, e.g. "leg_front_left" or "R_Hand"

    Returns:
        ParsedGroup
    """
    lower = name.lower()

    part, level = BodyPart.GENERIC, 1
    for pattern, candidate, candidate_level in _PART_PATTERNS:
        if pattern.search(lower):
            part, level = candidate, candidate_level
            break

    return ParsedGroup(
        name=name,
        part=part,
        side=_name_side(lower),
        position=_name_position(lower),
        is_extremity=bool(_EXTREMITY.search(lower)),
        is_upper=bool(_UPPER.search(lower)),
        hierarchy_level=level,
    )


def group_name(
    part: Union[BodyPart, str],
    side: Union[Side, int, None] = None,
    position: Optional[LimbPosition] = None,
    index: Optional[int] = None
) -> str:
    """
    Build a group name in the wire convention.

    Args:
        part: Body part (or a plain base name such as "tentacle")
        side: Side, or the generators' -1 / 1 multiplier (-1 is left)
        position: Front/back for quadruped limbs
        index: Segment index for multi-part limbs

    Returns:
        e.g. "leg_front_left", "arm_right", "tentacle_left_2"
    """
    base = part.value if isinstance(part, BodyPart) else str(part)
    pieces = [base]

    if position is not None and position is not LimbPosition.CENTER:
        pieces.append(position.value)

    if isinstance(side, (int, float)) and not isinstance(side, bool):
        side = Side.LEFT if side < 0 else Side.RIGHT if side > 0 else Side.CENTER
    if side is not None and side is not Side.CENTER:
        pieces.append(side.value)

    if index is not None:
        pieces.append(str(index))

    return "_".join(pieces)


def _group_bounds(model: VoxelModel) -> Dict[str, Tuple[np.ndarray, np.ndarray]]:
    positions = model.positions()
    half = model.scales() / 2.0
    names = np.array([box.group for box in model.boxes], dtype=object)

    bounds = {}
    for group in model.group_names():
        mask = names == group
        bounds[group] = (
            (positions[mask] - half[mask]).min(axis=0),
            (positions[mask] + half[mask]).max(axis=0),
        )
    return bounds


def _side_from(parsed: ParsedGroup, center_x: float) -> Side:
    if parsed.side is not Side.CENTER:
        return parsed.side
    if center_x < -SIDE_THRESHOLD:
        return Side.LEFT
    if center_x > SIDE_THRESHOLD:
        return Side.RIGHT
    return Side.CENTER


def group_sides(model: VoxelModel) -> Dict[str, Side]:
    """
    Side of each group used by the model's boxes.

    The name decides first; otherwise the centre X of the group bounds
    (negative X is left).
    """
    sides = {}
    for group, (lo, hi) in _group_bounds(model).items():
        sides[group] = _side_from(parse_group_name(group), float((lo[0] + hi[0]) / 2))
    return sides


def group_pivots(model: VoxelModel) -> Dict[str, Tuple[float, float, float]]:
    """
    Rotation pivot of each group, where the part attaches to the body.

    - Legs, feet, arms, hands: top centre
    - Head, neck: bottom centre
    - Tail: centre at max Z
    - Wings: body-side X edge (max X for left wings, min X for right)
    - Everything else: centre

    Args:
        model: Model whose boxes define the group bounds

    Returns:
        Mapping group name -> (x, y, z)
    """
    pivots = {}
    for group, (lo, hi) in _group_bounds(model).items():
        parsed = parse_group_name(group)
        cx, cy, cz = ((lo + hi) / 2).tolist()

        if parsed.part in _TOP_PIVOT:
            pivot = (cx, float(hi[1]), cz)
        elif parsed.part in _BOTTOM_PIVOT:
            pivot = (cx, float(lo[1]), cz)
        elif parsed.part is BodyPart.TAIL:
            pivot = (cx, cy, float(hi[2]))
        elif parsed.part is BodyPart.WING:
            side = _side_from(parsed, cx)
            if side is Side.LEFT:
                pivot = (float(hi[0]), cy, cz)
            elif side is Side.RIGHT:
                pivot = (float(lo[0]), cy, cz)
            else:
                pivot = (cx, cy, cz)
        else:
            pivot = (cx, cy, cz)

        pivots[group] = pivot
    return pivots


def detect_model_type(model: VoxelModel) -> ModelType:
    """
    Guess the animation family of a model from its groups.

    Checked in order: drone (rotors/sensors), spirit (core/orbs/trails),
    beast (tail), prop (hologram/projector/screen/pole), golem
    (shards/shoulders), mech (weapons), humanoid (arms/legs).
    """
    names = set(model.group_names())
    parts = {parse_group_name(g).part for g in names}

    if names & {"rotors", "sensors"}:
        return ModelType.DRONE
    if names & {"core", "orbs", "trails"}:
        return ModelType.SPIRIT
    if BodyPart.TAIL in parts:
        return ModelType.BEAST
    if names & {"hologram", "projector", "screen", "pole"}:
        return ModelType.PROP
    if names & {"shards", "shoulders"}:
        return ModelType.GOLEM
    if "weapons" in names:
        return ModelType.MECH
    if parts & {BodyPart.ARM, BodyPart.LEG}:
        return ModelType.HUMANOID
    return ModelType.GENERIC
