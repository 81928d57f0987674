"""
Elemental Enemy Generators

Volcanic (lava imp, magma hound, ash wraith, volcanic golem, fire drake) and
frozen (frost wisp, ice wolf, frozen revenant, ice elemental, blizzard titan)
biome enemies.

The ash wraith's embers and the fire drake's breath flicker: they draw from
`rng` and differ between unseeded calls.
"""

from typing import Optional
import math

import numpy as np

from ..model import VoxelModel
from .builder import SIDES, ModelBuilder, resolve_rng, side_label, side_tag


# Hexagonal head ring shared by the golem-type elementals
_HEX = [i * math.pi / 3 for i in range(6)]


def _quad_legs(front_z: float, back_z: float, x: float):
    """(label, group, x, z) for the four legs of a quadruped, front first."""
    for end, z in (("front", front_z), ("back", back_z)):
        for side in SIDES:
            yield f"{end.title()} {side_label(side)}", f"leg_{end}_{side_tag(side)}", side * x, z


# ============================================================================
# Volcanic
# ============================================================================

def create_lava_imp_model(scale: float = 1.0) -> VoxelModel:
    """Small horned fire demon with a molten core and a fire-wisp tail."""
    b = ModelBuilder("lava_imp", scale)

    for hx in (-1, 0, 1):
        for hz in (-1, 0, 1):
            b.add(f"Head {hx}_{hz}", (hx * 0.06, 1.2, hz * 0.05), (0.08, 0.1, 0.07), group="head")
    for side in SIDES:
        for i in range(3):
            b.add(f"{side_label(side)} Horn {i}", (side * (0.08 + i * 0.02), 1.3 + i * 0.06, -0.02),
                  (0.03, 0.06, 0.03), "#331100", group="head")
    b.mirrored("Eye", (0.05, 1.22, 0.08), (0.04, 0.04, 0.03), "glow", 3, emissive=3, group="head")

    for ty in range(4):
        core = ty in (1, 2)
        b.add(f"Torso {ty}", (0, 1.0 - ty * 0.1, 0), (0.12, 0.1, 0.1), "glow" if core else "primary",
              2 if core else 1, emissive=2 if core else 0, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(3):
            b.add(f"{label} Arm {i}", (side * (0.15 + i * 0.04), 0.95 - i * 0.08, 0.02), (0.04, 0.08, 0.04),
                  multiplier=0.9, group=group)
        for claw in range(3):
            b.add(f"{label} Claw {claw}", (side * 0.25, 0.7 - claw * 0.03, 0.05 + claw * 0.02), (0.02, 0.02, 0.05),
                  "glow", 2, emissive=2, group=group)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(3):
            b.add(f"{label} Leg {i}", (side * 0.08, 0.55 - i * 0.1, 0), (0.05, 0.1, 0.05), multiplier=0.85, group=group)
        b.add(f"{label} Foot", (side * 0.08, 0.22, 0.02), (0.05, 0.04, 0.08), multiplier=0.7, group=group)

    for i in range(4):
        strength = 2.5 - i * 0.3
        b.add(f"Tail {i}", (0, 0.7 + i * 0.05, -0.12 - i * 0.04), (0.04 - i * 0.005, 0.06, 0.04 - i * 0.005),
              "glow", strength, emissive=strength, group="tail")

    return b.build(["head", "torso", "arm_left", "arm_right", "leg_left", "leg_right", "tail"])


def create_magma_hound_model(scale: float = 1.0) -> VoxelModel:
    """Molten pack hunter: cracked glowing body, lava fangs, dripping paws."""
    b = ModelBuilder("magma_hound", scale)

    for hx in (-1, 0, 1):
        for hz in range(3):
            b.add(f"Head {hx}_{hz}", (hx * 0.1, 1.3, 0.25 + hz * 0.1), (0.12, 0.14, 0.12), group="head")
    for sz in range(3):
        b.add(f"Snout {sz}", (0, 1.22 - sz * 0.03, 0.55 + sz * 0.1), (0.1 - sz * 0.015, 0.1, 0.1),
              "primary" if sz < 2 else "secondary", group="head")
    b.mirrored("Eye", (0.12, 1.38, 0.45), (0.06, 0.05, 0.04), "glow", 3, emissive=3, group="head")
    b.mirrored("Fang", (0.05, 1.1, 0.75), (0.03, 0.1, 0.03), "glow", 2.5, emissive=2.5, group="head")

    for i in range(2):
        crack = i == 1
        b.add(f"Neck {i}", (0, 1.2 - i * 0.1, 0.1 - i * 0.06), (0.18, 0.12, 0.16),
              "glow" if crack else "primary", 1.5 if crack else 1, emissive=1.5 if crack else 0)
    for seg in range(6):
        width = 0.3 - abs(seg - 2.5) * 0.03
        for layer in range(2):
            crack = (seg + layer) % 3 == 0
            b.add(f"Body {seg}_{layer}", (0, 1.05 - layer * 0.18, -seg * 0.18), (width, 0.2, 0.2),
                  "glow" if crack else "primary", 1.8 if crack else 1, emissive=1.8 if crack else 0)
    for i in range(5):
        b.add(f"Spine {i}", (0, 1.25, -i * 0.18), (0.05, 0.1, 0.08), "glow", 2, emissive=2)

    for label, group, lx, lz in _quad_legs(0.05, -0.85, 0.2):
        for i in range(3):
            crack = i == 1
            b.add(f"{label} Leg {i}", (lx, 0.85 - i * 0.15, lz), (0.12, 0.15, 0.12),
                  "glow" if crack else "primary", 1.5 if crack else 1, emissive=1.5 if crack else 0, group=group)
        b.add(f"{label} Paw", (lx, 0.35, lz + 0.03), (0.1, 0.08, 0.14), "secondary", 0.8, group=group)
        b.add(f"{label} Lava Drip", (lx, 0.28, lz), (0.04, 0.06, 0.04), "glow", 2.5, emissive=2.5, group="effects")

    for i in range(5):
        flame = i >= 2
        b.add(f"Tail {i}", (0, 1.1 + i * 0.05, -1.05 - i * 0.1), (0.08 - i * 0.01, 0.08, 0.12),
              "glow" if flame else "primary", 2 + i * 0.2 if flame else 1,
              emissive=2 + i * 0.2 if flame else 0, group="tail")

    return b.build(["head", "body", "leg_front_left", "leg_front_right", "leg_back_left",
                    "leg_back_right", "tail", "effects"])


def create_ash_wraith_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Hooded spirit of the burned, trailing embers of varying brightness."""
    rng = resolve_rng(rng)
    b = ModelBuilder("ash_wraith", scale)

    for layer in range(4):
        size = 0.3 - layer * 0.05
        for hx in (-1, 0, 1):
            b.add(f"Hood {layer}_{hx}", (hx * size * 0.4, 2.3 - layer * 0.1, -layer * 0.04),
                  (size * 0.45, 0.14, size * 0.4), multiplier=0.4 + layer * 0.1, group="hood")
    b.mirrored("Eye", (0.08, 2.18, 0.12), (0.05, 0.04, 0.03), "glow", 3, emissive=3, group="face")

    for ty in range(10):
        width = 0.22 + ty * 0.035
        for rx in (-1, 0, 1):
            b.add(f"Robe {ty}_{rx}", (rx * width * 0.28, 1.75 - ty * 0.14, 0), (width * 0.35, 0.14, width * 0.3),
                  multiplier=0.9 - ty * 0.05, group="robes")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(5):
            b.add(f"{label} Arm {i}", (side * (0.3 + i * 0.05), 1.8 - i * 0.1, 0.05), (0.04, 0.1, 0.04),
                  "#555555", 0.8, group=group)
        for claw in range(3):
            b.add(f"{label} Claw {claw}", (side * 0.55, 1.25 - claw * 0.04, 0.1 + claw * 0.03), (0.02, 0.02, 0.08),
                  "glow", 2.5, emissive=2.5, group=group)

    flicker = 2 + rng.random((8, 2))
    for ember in range(8):
        angle = (ember / 8) * math.pi * 2
        b.add(f"Ember {ember}", (math.cos(angle) * 0.5, 1.5 + math.sin(ember * 1.5) * 0.4, math.sin(angle) * 0.4),
              (0.03, 0.04, 0.03), "glow", float(flicker[ember, 0]), emissive=float(flicker[ember, 1]),
              group="effects")

    return b.build(["hood", "face", "robes", "arm_left", "arm_right", "effects"])


def create_volcanic_golem_model(scale: float = 1.0) -> VoxelModel:
    """Living rock giant with lava veins and a molten chest core."""
    b = ModelBuilder("volcanic_golem", scale)

    for ring in range(2):
        for angle in _HEX:
            b.add(f"Head {ring}_{angle:.1f}", (math.cos(angle) * 0.2, 3.2 + ring * 0.18, math.sin(angle) * 0.2),
                  (0.15, 0.28, 0.15), group="head")
    b.add("Head Core", (0, 3.3, 0), (0.15, 0.22, 0.15), "glow", 2.5, emissive=2.5, group="head")
    b.mirrored("Eye", (0.1, 3.25, 0.2), (0.08, 0.1, 0.05), "glow", 3, emissive=3, group="head")

    for ty in range(7):
        width = 0.5 - abs(ty - 3) * 0.04
        vein = ty % 3 == 1
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}_{tx}", (tx * width * 0.35, 2.6 - ty * 0.22, 0), (width * 0.38, 0.22, width * 0.32),
                  "glow" if vein else "primary", 2 if vein else 1, emissive=2 if vein else 0, group="torso")
    b.add("Chest Core", (0, 2.4, 0.28), (0.2, 0.25, 0.08), "glow", 3, emissive=3, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(5):
            width = 0.2 - i * 0.015
            seam = i % 2 == 1
            b.add(f"{label} Arm {i}", (side * 0.58, 2.4 - i * 0.22, 0), (width, 0.22, width),
                  "glow" if seam else "primary", 1.8 if seam else 1, emissive=1.8 if seam else 0, group=group)
        b.add(f"{label} Fist", (side * 0.58, 1.25, 0), (0.25, 0.25, 0.25), multiplier=0.9, group=group)
        b.add(f"{label} Fist Glow", (side * 0.58, 1.25, 0.14), (0.1, 0.1, 0.05), "glow", 2.5, emissive=2.5, group=group)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(4):
            seam = i == 2
            b.add(f"{label} Leg {i}", (side * 0.26, 1.2 - i * 0.22, 0), (0.22, 0.22, 0.22),
                  "glow" if seam else "primary", 1.8 if seam else 1, emissive=1.8 if seam else 0, group=group)
        b.add(f"{label} Foot", (side * 0.26, 0.3, 0.1), (0.28, 0.15, 0.38), multiplier=0.7, group=group)

    for drip in range(6):
        angle = (drip / 6) * math.pi * 2
        b.add(f"Lava Drip {drip}", (math.cos(angle) * 0.4, 0.15, math.sin(angle) * 0.35), (0.04, 0.08, 0.04),
              "glow", 2.8, emissive=2.8, group="effects")

    return b.build(["head", "torso", "arm_left", "arm_right", "leg_left", "leg_right", "effects"])


def create_fire_drake_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Winged fire dragon boss; the breath particles jitter sideways per call."""
    rng = resolve_rng(rng)
    b = ModelBuilder("fire_drake", scale)

    for hx in (-1, 0, 1):
        for hz in range(4):
            width = 0.18 - hz * 0.03
            b.add(f"Head {hx}_{hz}", (hx * width, 4.0, 0.3 + hz * 0.15), (width, 0.2, 0.16), group="head")
    for side in SIDES:
        for i in range(4):
            tip = i >= 2
            b.add(f"{side_label(side)} Horn {i}", (side * (0.15 + i * 0.03), 4.2 + i * 0.08, 0.1 - i * 0.05),
                  (0.04, 0.1, 0.04), "glow" if tip else "secondary", 2 if tip else 0.8,
                  emissive=2 if tip else 0, group="head")
    b.mirrored("Eye", (0.12, 4.05, 0.55), (0.08, 0.08, 0.05), "glow", 3.5, emissive=3.5, group="head")
    b.add("Maw Glow", (0, 3.85, 0.85), (0.12, 0.1, 0.1), "glow", 3, emissive=3, group="head")

    for i in range(5):
        b.add(f"Neck {i}", (0, 3.7 - i * 0.15, 0.1 - i * 0.08), (0.22, 0.18, 0.2),
              "primary" if i % 2 == 0 else "secondary", group="neck")

    for seg in range(8):
        width = 0.6 - abs(seg - 3.5) * 0.05
        for layer in range(2):
            hot = (seg + layer) % 4 == 0
            color = "glow" if hot else ("primary" if seg % 2 == 0 else "secondary")
            b.add(f"Body {seg}_{layer}", (0, 2.8 - layer * 0.3, -0.4 - seg * 0.25), (width, 0.32, 0.28),
                  color, 1.5 if hot else 1, emissive=1.5 if hot else 0)
    for i in range(10):
        hot = i % 2 == 0
        b.add(f"Spine {i}", (0, 3.15, -0.2 - i * 0.22), (0.06, 0.15 - i * 0.01, 0.1),
              "glow" if hot else "secondary", 2 if hot else 0.9, emissive=2 if hot else 0)

    for side in SIDES:
        label, group = side_label(side), f"wing_{side_tag(side)}"
        for i in range(4):
            b.add(f"{label} Wing Arm {i}", (side * (0.4 + i * 0.25), 3.0 + i * 0.15, -0.6), (0.08, 0.1, 0.2),
                  "secondary", 0.9, group=group)
        for seg in range(4):
            for vert in range(3):
                strength = 0.8 + vert * 0.2
                b.add(f"{label} Wing Membrane {seg}_{vert}", (side * (0.5 + seg * 0.2), 2.7 - vert * 0.3, -0.5 - seg * 0.15),
                      (0.15, 0.25, 0.02), "glow", strength, emissive=strength, group=group)

    for label, group, lx, lz in _quad_legs(-0.3, -1.8, 0.35):
        for i in range(3):
            hot = i == 1
            b.add(f"{label} Leg {i}", (lx, 2.3 - i * 0.25, lz), (0.18, 0.25, 0.18),
                  "glow" if hot else "primary", 1.5 if hot else 1, emissive=1.5 if hot else 0, group=group)
        b.add(f"{label} Foot", (lx, 1.5, lz + 0.08), (0.2, 0.15, 0.28), "secondary", 0.7, group=group)

    for i in range(8):
        hot = i % 3 == 0
        b.add(f"Tail {i}", (0, 2.4 + i * 0.04, -2.4 - i * 0.2), (0.15 - i * 0.015, 0.12, 0.2),
              "glow" if hot else "primary", 2 if hot else 1, emissive=2 if hot else 0, group="tail")

    jitter = (rng.random(5) - 0.5) * 0.2
    for fire in range(5):
        strength = 3 - fire * 0.3
        b.add(f"Fire Breath {fire}", (float(jitter[fire]), 3.75 - fire * 0.04, 1.0 + fire * 0.08),
              (0.06 + fire * 0.02, 0.06, 0.06), "glow", strength, emissive=strength, group="effects")

    return b.build(["head", "neck", "body", "wing_left", "wing_right", "leg_front_left", "leg_front_right",
                    "leg_back_left", "leg_back_right", "tail", "effects"])


# ============================================================================
# Frozen
# ============================================================================

def create_frost_wisp_model(scale: float = 1.0) -> VoxelModel:
    """Floating winter spirit: icy core, ringed body, trailing ice crystals."""
    b = ModelBuilder("frost_wisp", scale)

    b.add("Core", (0, 1.5, 0), (0.15, 0.2, 0.15), "glow", 3, emissive=3, group="core")
    b.ring("Inner Ring", 6, 0.15, 1.5, (0.08, 0.12, 0.08), multiplier=1.2, emissive=1.2, group="core")

    for ring in range(5):
        lit = ring % 2 == 0
        b.ring(f"Body Ring {ring}", 6 + ring, 0.2 + math.sin(ring * 0.8) * 0.08, 1.2 + ring * 0.18,
               (0.06, 0.1, 0.06), "glow" if lit else "primary", 2 if lit else 1,
               emissive=2 if lit else 0, phase=ring * 0.3)

    b.mirrored("Eye", (0.08, 1.65, 0.12), (0.05, 0.05, 0.03), "glow", 4, emissive=4, group="face")

    for trail in range(5):
        angle = (trail / 5) * math.pi * 2
        for seg in range(4):
            reach = 0.1 + seg * 0.03
            strength = 1.5 - seg * 0.2
            b.add(f"Trail {trail}_{seg}", (math.cos(angle) * reach, 1.0 - seg * 0.12, math.sin(angle) * reach),
                  (0.04, 0.1, 0.04), multiplier=strength, emissive=strength, group="trails")

    for flake in range(6):
        angle = (flake / 6) * math.pi * 2
        b.add(f"Snowflake {flake}", (math.cos(angle) * 0.4, 1.5 + math.sin(flake * 2) * 0.2, math.sin(angle) * 0.35),
              (0.03, 0.03, 0.01), "glow", 2, emissive=2, group="effects")

    return b.build(["core", "body", "face", "trails", "effects"])


def create_ice_wolf_model(scale: float = 1.0) -> VoxelModel:
    """Wolf of the frozen wastes with an ice-crystal mane and spine."""
    b = ModelBuilder("ice_wolf", scale)

    for hx in (-1, 0, 1):
        for hz in range(3):
            b.add(f"Head {hx}_{hz}", (hx * 0.1, 1.35, 0.28 + hz * 0.1), (0.12, 0.14, 0.12), group="head")
    for sz in range(3):
        b.add(f"Snout {sz}", (0, 1.28 - sz * 0.02, 0.58 + sz * 0.1), (0.1 - sz * 0.015, 0.1, 0.1),
              "primary" if sz < 2 else "secondary", group="head")
    for crystal in range(5):
        angle = (crystal / 5 - 0.5) * math.pi * 0.6
        b.add(f"Mane Crystal {crystal}", (math.sin(angle) * 0.15, 1.55 + crystal * 0.05, 0.2 - math.cos(angle) * 0.1),
              (0.04, 0.12, 0.04), "glow", 2, emissive=2, group="head")
    b.mirrored("Eye", (0.12, 1.4, 0.48), (0.06, 0.05, 0.04), "glow", 3, emissive=3, group="head")
    b.mirrored("Fang", (0.05, 1.15, 0.78), (0.02, 0.08, 0.02), "glow", 1.5, emissive=1.5, group="head")

    for i in range(2):
        b.add(f"Neck {i}", (0, 1.22 - i * 0.1, 0.12 - i * 0.06), (0.18, 0.12, 0.16),
              "primary" if i == 0 else "secondary")
    for seg in range(6):
        width = 0.32 - abs(seg - 2.5) * 0.03
        for layer in range(2):
            b.add(f"Body {seg}_{layer}", (0, 1.1 - layer * 0.18, -seg * 0.18), (width, 0.2, 0.2),
                  "primary" if seg % 2 == 0 else "secondary")
    for i in range(5):
        b.add(f"Spine Crystal {i}", (0, 1.3, 0.05 - i * 0.18), (0.04, 0.1 - i * 0.01, 0.06), "glow", 1.8, emissive=1.8)

    for label, group, lx, lz in _quad_legs(0.05, -0.88, 0.2):
        for i in range(3):
            b.add(f"{label} Leg {i}", (lx, 0.88 - i * 0.15, lz), (0.11, 0.15, 0.11), group=group)
        b.add(f"{label} Paw", (lx, 0.38, lz + 0.03), (0.1, 0.08, 0.14), "secondary", 0.9, group=group)
        b.add(f"{label} Frost", (lx, 0.32, lz), (0.06, 0.03, 0.06), "glow", 1.5, emissive=1.5, group="effects")

    for i in range(5):
        icy = i >= 3
        b.add(f"Tail {i}", (0, 1.15 + i * 0.04, -1.08 - i * 0.1), (0.08 - i * 0.01, 0.08, 0.12),
              "glow" if icy else "primary", 1.5 if icy else 1, emissive=1.5 if icy else 0, group="tail")

    return b.build(["head", "body", "leg_front_left", "leg_front_right", "leg_back_left",
                    "leg_back_right", "tail", "effects"])


def create_frozen_revenant_model(scale: float = 1.0) -> VoxelModel:
    """Armoured undead warrior encased in ice, with a glowing visor slit."""
    b = ModelBuilder("frozen_revenant", scale)

    for hx in (-1, 0, 1):
        for hz in (-1, 0, 1):
            b.add(f"Helmet {hx}_{hz}", (hx * 0.1, 2.05, hz * 0.08), (0.12, 0.14, 0.1), group="head")
    for crystal in range(3):
        angle = (crystal / 3 - 0.5) * math.pi * 0.5
        b.add(f"Helm Crystal {crystal}", (math.sin(angle) * 0.18, 2.25 + crystal * 0.04, math.cos(angle) * 0.08),
              (0.04, 0.12, 0.04), "glow", 1.8, emissive=1.8, group="head")
    for vx in range(-2, 3):
        b.add(f"Visor {vx}", (vx * 0.05, 2.05, 0.15), (0.06, 0.04, 0.02), "glow", 2.5, emissive=2.5, group="head")

    b.add("Neck", (0, 1.88, 0), (0.1, 0.08, 0.08), "secondary", 0.7, group="torso")
    for ty in range(5):
        even = ty % 2 == 0
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}_{tx}", (tx * 0.1, 1.72 - ty * 0.14, 0), (0.12, 0.14, 0.14),
                  "primary" if even else "secondary", 1 if even else 0.85, group="torso")
    for crack in range(3):
        b.add(f"Frost Crack {crack}", ((crack - 1) * 0.08, 1.6 - crack * 0.08, 0.1), (0.02, 0.1, 0.02),
              "glow", 2, emissive=2, group="torso")

    for side in SIDES:
        label = side_label(side)
        for sy in range(2):
            b.add(f"{label} Shoulder {sy}", (side * 0.35, 1.78 - sy * 0.08, 0), (0.12, 0.1, 0.12), group="shoulders")
        b.add(f"{label} Shoulder Spike", (side * 0.38, 1.88, 0), (0.05, 0.12, 0.05), "glow", 1.5,
              emissive=1.5, group="shoulders")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(5):
            icy = i % 2 != 0
            b.add(f"{label} Arm {i}", (side * 0.35, 1.6 - i * 0.12, 0), (0.08, 0.12, 0.08),
                  "glow" if icy else "primary", 0.8 if icy else 0.9, emissive=0.8 if icy else 0, group=group)
        b.add(f"{label} Gauntlet", (side * 0.35, 0.98, 0.03), (0.1, 0.1, 0.12), group=group)

    for bx in range(-2, 3):
        b.add(f"Belt {bx}", (bx * 0.07, 1.0, 0), (0.08, 0.06, 0.1), "secondary", 0.6, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(5):
            icy = i == 2
            b.add(f"{label} Leg {i}", (side * 0.12, 0.88 - i * 0.14, 0), (0.1, 0.14, 0.1),
                  "glow" if icy else "primary", 1.2 if icy else 0.95, emissive=1.2 if icy else 0, group=group)
        b.add(f"{label} Boot", (side * 0.12, 0.15, 0.04), (0.1, 0.1, 0.15), "secondary", 0.7, group=group)

    for mist in range(5):
        angle = (mist / 5) * math.pi * 2
        b.add(f"Frost Mist {mist}", (math.cos(angle) * 0.25, 0.08, math.sin(angle) * 0.2), (0.08, 0.04, 0.08),
              "glow", 1.2, emissive=1.2, group="effects")

    return b.build(["head", "torso", "shoulders", "arm_left", "arm_right", "leg_left", "leg_right", "effects"])


def create_ice_elemental_model(scale: float = 1.0) -> VoxelModel:
    """Crystallised frost giant with shoulder spikes and orbiting ice shards."""
    b = ModelBuilder("ice_elemental", scale)

    for ring in range(2):
        for angle in _HEX:
            b.add(f"Head Crystal {ring}_{angle:.1f}", (math.cos(angle) * 0.18, 2.8 + ring * 0.18, math.sin(angle) * 0.18),
                  (0.12, 0.25, 0.12), multiplier=1.1, group="head")
    b.add("Head Core", (0, 2.9, 0), (0.14, 0.2, 0.14), "glow", 3, emissive=3, group="head")
    b.mirrored("Eye", (0.1, 2.85, 0.18), (0.08, 0.1, 0.05), "glow", 4, emissive=4, group="head")

    for i in range(2):
        b.add(f"Neck {i}", (0, 2.55 - i * 0.1, 0), (0.16 + i * 0.02, 0.1, 0.14 + i * 0.02), group="torso")
    for ty in range(6):
        width = 0.45 - abs(ty - 2.5) * 0.04
        icy = ty % 2 != 0
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}_{tx}", (tx * width * 0.32, 2.25 - ty * 0.2, 0), (width * 0.35, 0.2, width * 0.3),
                  "glow" if icy else "primary", 0.8 if icy else 1, emissive=0.8 if icy else 0, group="torso")
    b.add("Chest Core", (0, 2.0, 0.22), (0.16, 0.2, 0.06), "glow", 2.5, emissive=2.5, group="torso")

    for side in SIDES:
        label = side_label(side)
        b.add(f"{label} Shoulder Base", (side * 0.45, 2.3, 0), (0.2, 0.18, 0.18), group="shoulders")
        for spike in range(3):
            tip = spike >= 2
            b.add(f"{label} Shoulder Spike {spike}", (side * (0.5 + spike * 0.04), 2.4 + spike * 0.12, -0.05 + spike * 0.03),
                  (0.08, 0.18 + spike * 0.04, 0.08), "glow" if tip else "primary", 2 if tip else 1.1,
                  emissive=2 if tip else 0, group="shoulders")

    for shard in range(6):
        angle = (shard / 6) * math.pi * 2
        b.add(f"Floating Shard {shard}", (math.cos(angle) * 0.7, 1.8 + math.sin(shard * 1.5) * 0.25, math.sin(angle) * 0.6),
              (0.06, 0.12, 0.06), "glow", 1.8, emissive=1.8, group="effects")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(4):
            width = 0.18 - i * 0.02
            icy = i % 2 != 0
            b.add(f"{label} Arm {i}", (side * 0.5, 2.0 - i * 0.2, 0), (width, 0.2, width),
                  "glow" if icy else "primary", 1.2 if icy else 1, emissive=1.2 if icy else 0, group=group)
        b.add(f"{label} Fist", (side * 0.5, 1.15, 0), (0.22, 0.22, 0.22), group=group)
        b.add(f"{label} Fist Glow", (side * 0.5, 1.15, 0.12), (0.08, 0.08, 0.04), "glow", 2.5, emissive=2.5, group=group)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(4):
            icy = i == 2
            b.add(f"{label} Leg {i}", (side * 0.22, 1.0 - i * 0.2, 0), (0.18, 0.2, 0.18),
                  "glow" if icy else "primary", 1.3 if icy else 1, emissive=1.3 if icy else 0, group=group)
        b.add(f"{label} Foot", (side * 0.22, 0.18, 0.08), (0.24, 0.14, 0.32), multiplier=0.8, group=group)

    for aura in range(8):
        angle = (aura / 8) * math.pi * 2
        b.add(f"Frost Aura {aura}", (math.cos(angle) * 0.4, 0.1, math.sin(angle) * 0.35), (0.06, 0.08, 0.06),
              "glow", 1.5, emissive=1.5, group="effects")

    return b.build(["head", "torso", "shoulders", "arm_left", "arm_right", "leg_left", "leg_right", "effects"])


def create_blizzard_titan_model(scale: float = 1.0) -> VoxelModel:
    """Towering frost guardian boss crowned with ice spires."""
    b = ModelBuilder("blizzard_titan", scale)

    for hx in (-1, 0, 1):
        for hz in (-1, 0, 1):
            b.add(f"Head {hx}_{hz}", (hx * 0.18, 4.6, hz * 0.15), (0.2, 0.25, 0.18), group="head")
    for spire in range(5):
        angle = (spire / 5 - 0.5) * math.pi * 0.7
        strength = 2 + spire * 0.2
        b.add(f"Crown Spire {spire}", (math.sin(angle) * 0.25, 4.9 + spire * 0.06, math.cos(angle) * 0.1 - 0.1),
              (0.06, 0.2 + spire * 0.03, 0.06), "glow", strength, emissive=strength, group="head")
    b.mirrored("Eye", (0.15, 4.55, 0.25), (0.1, 0.12, 0.06), "glow", 4, emissive=4, group="head")

    for i in range(2):
        b.add(f"Neck {i}", (0, 4.35 - i * 0.12, 0), (0.22, 0.12, 0.18), multiplier=0.9, group="torso")
    for ty in range(8):
        width = 0.65 - abs(ty - 3.5) * 0.05
        icy = ty % 3 == 1
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}_{tx}", (tx * width * 0.35, 4.0 - ty * 0.22, 0), (width * 0.38, 0.22, width * 0.32),
                  "glow" if icy else "primary", 1.3 if icy else 1, emissive=1.3 if icy else 0, group="torso")
    b.add("Blizzard Core", (0, 3.5, 0.35), (0.25, 0.3, 0.1), "glow", 3.5, emissive=3.5, group="torso")

    for side in SIDES:
        label = side_label(side)
        b.add(f"{label} Shoulder Base", (side * 0.7, 4.1, 0), (0.3, 0.25, 0.28), group="shoulders")
        for spike in range(4):
            angle = (spike / 4) * math.pi + math.pi / 4
            tip = spike >= 2
            b.add(f"{label} Shoulder Spike {spike}",
                  (side * (0.75 + math.cos(angle) * 0.1), 4.25 + spike * 0.12, math.sin(angle) * 0.1),
                  (0.08, 0.2 + spike * 0.04, 0.08), "glow" if tip else "primary", 2 if tip else 1.1,
                  emissive=2 if tip else 0, group="shoulders")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(5):
            width = 0.22 - i * 0.02
            icy = i % 2 != 0
            b.add(f"{label} Arm {i}", (side * 0.68, 3.7 - i * 0.22, 0), (width, 0.22, width),
                  "glow" if icy else "primary", 1.2 if icy else 1, emissive=1.2 if icy else 0, group=group)
        b.add(f"{label} Fist", (side * 0.68, 2.55, 0), (0.3, 0.3, 0.3), multiplier=0.95, group=group)
        b.add(f"{label} Fist Glow", (side * 0.68, 2.55, 0.18), (0.12, 0.12, 0.06), "glow", 2.5, emissive=2.5, group=group)

    for wx in range(-2, 3):
        b.add(f"Waist {wx}", (wx * 0.15, 2.1, 0), (0.18, 0.15, 0.22), multiplier=0.85, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(5):
            icy = i == 2
            b.add(f"{label} Leg {i}", (side * 0.32, 1.8 - i * 0.28, 0), (0.28, 0.28, 0.28),
                  "glow" if icy else "primary", 1.4 if icy else 1, emissive=1.4 if icy else 0, group=group)
        b.add(f"{label} Foot", (side * 0.32, 0.35, 0.15), (0.35, 0.2, 0.5), multiplier=0.7, group=group)

    for snow in range(12):
        angle = (snow / 12) * math.pi * 2
        b.add(f"Snow Particle {snow}", (math.cos(angle) * 0.9, 1.5 + math.sin(snow * 1.3) * 1.5, math.sin(angle) * 0.8),
              (0.04, 0.04, 0.02), "glow", 1.8, emissive=1.8, group="effects")
    for frost in range(8):
        angle = (frost / 8) * math.pi * 2
        b.add(f"Ground Frost {frost}", (math.cos(angle) * 0.6, 0.1, math.sin(angle) * 0.5), (0.1, 0.06, 0.1),
              "glow", 1.5, emissive=1.5, group="effects")

    return b.build(["head", "torso", "shoulders", "arm_left", "arm_right", "leg_left", "leg_right", "effects"])
