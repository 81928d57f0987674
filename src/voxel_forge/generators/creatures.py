"""
Creature Generators

Fantasy and supernatural enemies: quadrupeds (beast, dire wolf), floating
spirits (spirit, forest sprite, wraiths) and stone/crystal giants (golems,
ancient guardian), plus the mushroom tender.

Quadruped legs are grouped per leg ("leg_front_left", "leg_back_right") and
tails get their own "tail" group so the animation system can pivot them.
"""

import math

from ..model import VoxelModel
from .builder import SIDES, ModelBuilder, side_label, side_tag

# Quadruped leg layout: (side, front/back tag, z offset)
_QUAD_LEGS = [
    (-1, "front", 0.0),
    (1, "front", 0.0),
    (-1, "back", -1.1),
    (1, "back", -1.1),
]

BONE = "#ccccaa"
RUNE = "#88ffff"


def create_beast_model(scale: float = 1.0) -> VoxelModel:
    """Large wolf-like quadruped with fangs, a spine ridge and a bushy tail."""
    b = ModelBuilder("beast", scale)

    for hx in (-1, 0, 1):
        for hz in range(3):
            b.add(f"Head {hx},{hz}", (hx * 0.12, 1.5, 0.3 + hz * 0.12), (0.14, 0.16, 0.14), group="head")
    for sz in range(4):
        b.add(f"Snout {sz}", (0, 1.4 - sz * 0.03, 0.6 + sz * 0.12), (0.14 - sz * 0.02, 0.12, 0.12),
              multiplier=1 if sz < 2 else 0.6, group="head")
    b.add("Nose", (0, 1.35, 1.05), (0.08, 0.06, 0.06), multiplier=0.3, group="head")
    b.mirrored("Fang", (0.06, 1.28, 0.85), (0.03, 0.1, 0.03), "#ffffcc", group="head")

    for side in SIDES:
        for i in range(3):
            b.add(f"{side_label(side)} Ear {i}", (side * 0.18, 1.7 + i * 0.08, 0.25),
                  (0.06 - i * 0.015, 0.1, 0.08 - i * 0.02), "primary" if i < 2 else "secondary", group="head")

    b.mirrored("Eye", (0.14, 1.55, 0.5), (0.07, 0.06, 0.04), multiplier=4, emissive=1, group="head")
    b.mirrored("Eye Socket", (0.15, 1.55, 0.48), (0.04, 0.03, 0.02), multiplier=0.6, group="head")

    for i in range(3):
        b.add(f"Neck {i}", (0, 1.35 - i * 0.1, 0.1 - i * 0.08), (0.22, 0.14, 0.2))

    # Horizontal body, thickest at the middle segment
    for seg in range(7):
        width = 0.35 - abs(seg - 3) * 0.04
        height = 0.28 - abs(seg - 3) * 0.02
        for layer in range(2):
            b.add(f"Body Seg {seg} Layer {layer}", (0, 1.2 - layer * 0.2, -seg * 0.2), (width, height, 0.22),
                  "primary" if seg % 2 == 0 else "secondary")
    for i in range(6):
        b.add(f"Spine {i}", (0, 1.4, -0.1 - i * 0.2), (0.06, 0.12 - i * 0.01, 0.1), "secondary")

    for side, end, lz in _QUAD_LEGS:
        label = f"{end.title()} {side_label(side)}"
        group = f"leg_{end}_{side_tag(side)}"
        lx = side * 0.22
        for i in range(3):
            b.add(f"{label} Upper {i}", (lx, 0.95 - i * 0.18, lz), (0.14, 0.18, 0.14), group=group)
        b.add(f"{label} Joint", (lx, 0.45, lz + (0.05 if end == "front" else -0.05)), (0.1, 0.1, 0.1),
              multiplier=0.6, group=group)
        for i in range(3):
            b.add(f"{label} Lower {i}", (lx, 0.35 - i * 0.12, lz), (0.1, 0.12, 0.1), group=group)
        b.add(f"{label} Paw", (lx, 0.05, lz + 0.05), (0.12, 0.1, 0.16), multiplier=0.6, group=group)

    for i in range(6):
        b.add(f"Tail {i}", (0, 1.25 + i * 0.06, -1.3 - i * 0.12), (0.1 - i * 0.01, 0.1, 0.15),
              "primary" if i % 2 == 0 else "secondary", group="tail")

    return b.build(["head", "body", "leg_front_left", "leg_front_right",
                    "leg_back_left", "leg_back_right", "tail"])


def create_spirit_model(scale: float = 1.0) -> VoxelModel:
    """Floating ethereal spirit: white core, ringed wispy body, halo and orbiting orbs."""
    b = ModelBuilder("spirit", scale)

    b.add("Core", (0, 1.8, 0), (0.2, 0.25, 0.2), "#ffffff", emissive=1, group="core")
    b.ring("Inner Ring", 8, 0.2, 1.8, (0.1, 0.15, 0.1), "glow", 3, emissive=0.8, group="core")

    for ring in range(7):
        glowing = ring % 2 == 0
        b.ring(f"Body Ring {ring}", 8 + ring, 0.25 + math.sin(ring * 0.7) * 0.12, 1.2 + ring * 0.22,
               (0.1, 0.15, 0.1), "glow" if glowing else "primary", 3 if glowing else 1,
               emissive=0.6 if glowing else 0, phase=ring * 0.4)

    b.mirrored("Eye Socket", (0.12, 2.0, 0.18), (0.1, 0.12, 0.06), multiplier=0.3, group="head")
    b.mirrored("Eye", (0.12, 2.0, 0.22), (0.08, 0.08, 0.04), "#ffffff", emissive=1, group="head")
    b.ring("Halo", 10, 0.3, 2.4, (0.06, 0.08, 0.06), "glow", 2.4, emissive=0.8, group="head")

    for orb in range(3):
        angle = (orb / 3) * math.pi * 2
        b.add(f"Orb {orb}", (math.cos(angle) * 0.5, 1.6 + orb * 0.15, math.sin(angle) * 0.5),
              (0.1, 0.1, 0.1), "glow", 3, emissive=1, group="orbs")

    for trail in range(6):
        angle = (trail / 6) * math.pi * 2
        for seg in range(6):
            reach = 0.15 + seg * 0.04
            fade = 1 - seg * 0.15
            b.add(f"Trail {trail} Seg {seg}", (math.cos(angle) * reach, 1.0 - seg * 0.18, math.sin(angle) * reach),
                  (0.06, 0.14, 0.06), "glow", 3 * fade, emissive=0.6 * fade, group="trails")

    for side in SIDES:
        for i in range(4):
            b.add(f"{side_label(side)} Arm {i}", (side * (0.3 + i * 0.08), 1.7 - i * 0.1, 0.1),
                  (0.08, 0.12, 0.08), multiplier=1 - i * 0.2, group=f"arm_{side_tag(side)}")

    return b.build(["core", "head", "body", "orbs", "trails", "arm_left", "arm_right"])


def create_golem_model(scale: float = 1.0) -> VoxelModel:
    """Hulking crystal/rock golem with runes, shoulder spikes and floating shards."""
    b = ModelBuilder("golem", scale)

    for ring in range(2):
        b.ring(f"Head Crystal {ring}", 6, 0.22, 3.0 + ring * 0.2, (0.16, 0.3, 0.16), group="head")
    b.add("Head Core", (0, 3.1, 0), (0.18, 0.25, 0.18), "glow", 2.5, emissive=0.8, group="head")
    b.mirrored("Eye", (0.12, 3.05, 0.22), (0.1, 0.12, 0.06), RUNE, 2, emissive=0.8, group="head")

    for i in range(3):
        b.add(f"Neck {i}", (0, 2.75 - i * 0.1, 0), (0.2 + i * 0.03, 0.12, 0.18 + i * 0.03), "secondary")
    for ty in range(7):
        width = 0.55 - abs(ty - 3) * 0.05
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}-{tx}", (tx * width * 0.35, 2.4 - ty * 0.22, 0), (width * 0.4, 0.22, width * 0.35),
                  "secondary" if ty % 2 == 0 else "primary")
    b.add("Chest Rune", (0, 2.2, 0.3), (0.2, 0.25, 0.05), RUNE, 2, emissive=0.8)

    for side in SIDES:
        label = side_label(side)
        b.add(f"{label} Shoulder", (side * 0.55, 2.5, 0), (0.25, 0.2, 0.25), "secondary", group="shoulders")
        for spike in range(4):
            angle = (spike / 4) * math.pi + math.pi / 4
            glowing = spike % 2 == 0
            b.add(f"{label} Spike {spike}",
                  (side * (0.6 + math.cos(angle) * 0.1), 2.6 + spike * 0.12, math.sin(angle) * 0.1),
                  (0.1, 0.2 + spike * 0.04, 0.1), "glow" if glowing else "primary",
                  2.5 if glowing else 1, emissive=0.8 if glowing else 0, group="shoulders")

    for shard in range(5):
        angle = (shard / 5) * math.pi * 2
        b.add(f"Floating Shard {shard}",
              (math.cos(angle) * 0.8, 2.0 + math.sin(shard * 1.5) * 0.3, math.sin(angle) * 0.8),
              (0.08, 0.15, 0.08), "glow", 1.75, emissive=0.6, group="shards")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(4):
            width = 0.22 - i * 0.02
            b.add(f"{label} Upper Arm {i}", (side * 0.6, 2.2 - i * 0.22, 0), (width, 0.22, width),
                  "secondary" if i % 2 == 0 else "primary", group=group)
        b.add(f"{label} Forearm Rune", (side * 0.62, 1.5, 0.15), (0.05, 0.2, 0.03), RUNE, 2, emissive=0.8, group=group)
        for i in range(3):
            b.add(f"{label} Lower Arm {i}", (side * 0.6, 1.3 - i * 0.2, 0), (0.2, 0.2, 0.2), "secondary", group=group)
        b.add(f"{label} Fist", (side * 0.6, 0.7, 0), (0.28, 0.28, 0.28), group=group)
        b.add(f"{label} Fist Glow", (side * 0.6, 0.7, 0.15), (0.1, 0.1, 0.05), "glow", 2.5, emissive=0.8, group=group)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(4):
            b.add(f"{label} Thigh {i}", (side * 0.28, 1.1 - i * 0.22, 0), (0.25, 0.22, 0.25), "secondary", group=group)
        b.add(f"{label} Knee Rune", (side * 0.28, 0.25, 0.18), (0.08, 0.08, 0.03), RUNE, 2, emissive=0.8, group=group)
        for i in range(2):
            b.add(f"{label} Lower Leg {i}", (side * 0.28, 0.15 - i * 0.2, 0), (0.22, 0.2, 0.22), group=group)
        b.add(f"{label} Foot", (side * 0.28, 0.08, 0.1), (0.3, 0.16, 0.4), "secondary", 0.7, group=group)

    return b.build(["head", "body", "shoulders", "shards", "arm_left", "arm_right", "leg_left", "leg_right"])


def create_wraith_model(scale: float = 1.0) -> VoxelModel:
    """Hooded wraith in tattered robes with skeletal arms and scythe claws."""
    b = ModelBuilder("wraith", scale)

    for layer in range(4):
        size = 0.35 - layer * 0.06
        depth = 0.3 - layer * 0.05
        for hx in (-1, 0, 1):
            b.add(f"Hood Layer {layer}-{hx}", (hx * size * 0.4, 2.4 - layer * 0.1, -layer * 0.04),
                  (size * 0.5, 0.15, depth), multiplier=0.3 + layer * 0.15, group="hood")
    b.add("Hood Peak", (0, 2.6, -0.1), (0.15, 0.2, 0.2), multiplier=0.4, group="hood")
    b.add("Hood Darkness", (0, 2.25, 0.1), (0.2, 0.2, 0.1), multiplier=0.2, group="hood")

    b.mirrored("Eye", (0.1, 2.28, 0.15), (0.06, 0.04, 0.04), "glow", 2.5, emissive=2.5, group="face")
    b.mirrored("Eye Trail", (0.14, 2.28, 0.12), (0.04, 0.02, 0.02), "glow", 1.25, emissive=1.25, group="face")
    b.add("Skeletal Jaw", (0, 2.1, 0.12), (0.12, 0.08, 0.08), BONE, 0.4, group="face")

    for i in range(2):
        b.add(f"Neck {i}", (0, 2.0 - i * 0.08, 0), (0.08, 0.08, 0.08), BONE, 0.3)

    # Robes widen and fade towards the hem
    for ty in range(12):
        width = 0.25 + ty * 0.04
        for rx in (-1, 0, 1):
            b.add(f"Robe {ty}-{rx}", (rx * width * 0.3, 1.85 - ty * 0.14, 0), (width * 0.4, 0.14, width * 0.35),
                  multiplier=1 - ty * 0.06, group="robes")
    for edge in range(6):
        angle = (edge / 6) * math.pi * 2
        for i in range(3):
            b.add(f"Robe Edge {edge}-{i}",
                  (math.cos(angle) * (0.4 + i * 0.08), 0.4 - i * 0.15, math.sin(angle) * (0.35 + i * 0.06)),
                  (0.08, 0.15, 0.08), multiplier=0.3 - i * 0.08, group="robes")

    for side in SIDES:
        label, tag = side_label(side), side_tag(side)
        for i in range(3):
            b.add(f"{label} Upper Arm {i}", (side * (0.35 + i * 0.06), 1.9 - i * 0.12, 0.08),
                  (0.06, 0.12, 0.06), BONE, 0.6, group=f"arm_{tag}")
        for i in range(3):
            b.add(f"{label} Forearm {i}", (side * (0.5 + i * 0.05), 1.55 - i * 0.1, 0.15),
                  (0.05, 0.1, 0.05), BONE, 0.5, group=f"arm_{tag}")
        # Bone segments ending in a glowing tip
        for claw in range(4):
            for seg in range(3):
                tip = seg == 2
                b.add(f"{label} Claw {claw}-{seg}",
                      (side * (0.62 + seg * 0.02), 1.2 - claw * 0.06 - seg * 0.08, 0.2 + seg * 0.06),
                      (0.02, 0.03, 0.1 - seg * 0.02), "glow" if tip else BONE,
                      2.5 if tip else 1, emissive=2.5 if tip else 0, group=f"claw_{tag}")

    for wisp in range(4):
        angle = (wisp / 4) * math.pi * 2
        b.add(f"Soul Wisp {wisp}", (math.cos(angle) * 0.6, 1.5 + math.sin(wisp * 2) * 0.2, math.sin(angle) * 0.5),
              (0.06, 0.08, 0.06), "glow", 1.25, emissive=1.25, group="effects")

    return b.build(["hood", "face", "body", "robes", "arm_left", "arm_right",
                    "claw_left", "claw_right", "effects"])


def create_forest_sprite_model(scale: float = 1.0) -> VoxelModel:
    """Small woodland spirit with a leaf crown, trailing wisps and pollen."""
    b = ModelBuilder("forest_sprite", scale)

    b.add("Head Core", (0, 1.6, 0), (0.15, 0.18, 0.15), "glow", 2.5, emissive=2.5, group="head")
    for leaf in range(6):
        angle = (leaf / 6) * math.pi * 2
        b.add(f"Crown Leaf {leaf}", (math.cos(angle) * 0.12, 1.75 + math.sin(leaf * 2) * 0.04, math.sin(angle) * 0.1),
              (0.06, 0.1, 0.02), "secondary", 1.2, emissive=0.8, group="head")
    b.mirrored("Eye", (0.06, 1.58, 0.12), (0.04, 0.05, 0.03), "glow", 3, emissive=3, group="head")

    for ring in range(4):
        glowing = ring % 2 != 0
        b.ring(f"Body Ring {ring}", 6, 0.12 + ring * 0.02, 1.4 - ring * 0.12, (0.05, 0.1, 0.05),
               "glow" if glowing else "primary", 2 if glowing else 1,
               emissive=2 if glowing else 0, phase=ring * 0.4)

    for side in SIDES:
        for i in range(4):
            glowing = i < 2
            b.add(f"{side_label(side)} Arm {i}", (side * (0.18 + i * 0.04), 1.35 - i * 0.08, 0),
                  (0.05, 0.08, 0.04), "glow" if glowing else "primary", 1.8 if glowing else 0.8,
                  emissive=1.8 if glowing else 0, group=f"arm_{side_tag(side)}")

    for trail in range(5):
        angle = (trail / 5) * math.pi * 2
        for seg in range(3):
            strength = 1.5 - seg * 0.3
            b.add(f"Trail {trail}_{seg}", (math.cos(angle) * 0.08, 0.9 - seg * 0.15, math.sin(angle) * 0.08),
                  (0.04, 0.1, 0.04), "glow", strength, emissive=strength, group="trails")

    for p in range(6):
        angle = (p / 6) * math.pi * 2
        b.add(f"Pollen {p}", (math.cos(angle) * 0.3, 1.4 + math.sin(p * 2) * 0.15, math.sin(angle) * 0.25),
              (0.02, 0.02, 0.02), "secondary", 2, emissive=2, group="effects")

    return b.build(["head", "body", "arm_left", "arm_right", "trails", "effects"])


def create_dire_wolf_model(scale: float = 1.0) -> VoxelModel:
    """Alpha wolf: larger head, maned neck, four legs and a bushy tail."""
    b = ModelBuilder("dire_wolf", scale)

    for hx in (-1, 0, 1):
        for hz in range(3):
            b.add(f"Head {hx}_{hz}", (hx * 0.12, 1.7, 0.32 + hz * 0.12), (0.14, 0.16, 0.14), group="head")
    for sz in range(3):
        b.add(f"Snout {sz}", (0, 1.62 - sz * 0.02, 0.68 + sz * 0.12), (0.12 - sz * 0.02, 0.12, 0.12),
              "primary" if sz < 2 else "secondary", group="head")
    b.mirrored("Ear", (0.14, 1.92, 0.4), (0.06, 0.12, 0.05), multiplier=1.1, group="head")
    b.mirrored("Eye", (0.13, 1.72, 0.58), (0.06, 0.05, 0.04), "glow", 2.5, emissive=2.5, group="head")
    b.mirrored("Fang", (0.06, 1.48, 0.92), (0.025, 0.1, 0.025), "secondary", 0.9, group="head")

    for i in range(3):
        b.add(f"Neck {i}", (0, 1.58 - i * 0.12, 0.18 - i * 0.08), (0.22, 0.14, 0.2),
              "secondary" if i == 0 else "primary")
    for seg in range(7):
        width = 0.38 - abs(seg - 3) * 0.03
        even = seg % 2 == 0
        for layer in range(2):
            b.add(f"Body {seg}_{layer}", (0, 1.35 - layer * 0.2, -seg * 0.2), (width, 0.22, 0.22),
                  "primary" if even else "secondary", 1 if even else 0.95)

    for side, end, lz in _QUAD_LEGS:
        label = f"{end.title()} {side_label(side)}"
        group = f"leg_{end}_{side_tag(side)}"
        lz = 0.08 if end == "front" else lz
        for i in range(4):
            b.add(f"{label} Leg {i}", (side * 0.22, 1.1 - i * 0.18, lz), (0.14, 0.18, 0.14), group=group)
        b.add(f"{label} Paw", (side * 0.22, 0.35, lz + 0.04), (0.12, 0.1, 0.16), "secondary", 0.85, group=group)

    for i in range(5):
        b.add(f"Tail {i}", (0, 1.38 + i * 0.05, -1.4 - i * 0.12), (0.1 - i * 0.01, 0.1, 0.14),
              "primary" if i < 3 else "secondary", group="tail")

    return b.build(["head", "body", "leg_front_left", "leg_front_right",
                    "leg_back_left", "leg_back_right", "tail"])


def create_crystal_golem_model(scale: float = 1.0) -> VoxelModel:
    """Living gemstone guardian with a faceted torso and a glowing core."""
    b = ModelBuilder("crystal_golem", scale)

    for face in range(5):
        angle = (face / 5) * math.pi * 2
        glowing = face % 2 != 0
        b.add(f"Head Face {face}", (math.cos(angle) * 0.12, 2.8, math.sin(angle) * 0.1), (0.14, 0.2, 0.12),
              "glow" if glowing else "primary", 2 if glowing else 1, emissive=2 if glowing else 0, group="head")
    b.mirrored("Eye", (0.1, 2.78, 0.15), (0.06, 0.08, 0.04), "glow", 3, emissive=3, group="head")

    b.add("Neck", (0, 2.55, 0), (0.16, 0.15, 0.14), multiplier=1.1, group="torso")
    for ty in range(6):
        width = 0.5 - abs(ty - 2.5) * 0.05
        for facet in range(6):
            angle = (facet / 6) * math.pi * 2 + ty * 0.2
            glowing = (ty + facet) % 3 == 0
            b.add(f"Torso {ty}_{facet}",
                  (math.cos(angle) * width * 0.4, 2.3 - ty * 0.2, math.sin(angle) * width * 0.35),
                  (0.12, 0.2, 0.12), "glow" if glowing else "primary", 1.5 if glowing else 1,
                  emissive=1.5 if glowing else 0, group="torso")
    b.add("Core", (0, 2.0, 0), (0.2, 0.25, 0.2), "glow", 2.5, emissive=2.5, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        b.add(f"{label} Shoulder", (side * 0.45, 2.3, 0), (0.2, 0.18, 0.18), group=group)
        for spike in range(2):
            b.add(f"{label} Shoulder Spike {spike}", (side * (0.5 + spike * 0.05), 2.42 + spike * 0.1, 0),
                  (0.06, 0.14, 0.06), "glow", 2, emissive=2, group=group)
        for i in range(4):
            glowing = i == 2
            b.add(f"{label} Arm {i}", (side * 0.5, 2.05 - i * 0.2, 0), (0.14, 0.2, 0.14),
                  "glow" if glowing else "primary", 1.5 if glowing else 1,
                  emissive=1.5 if glowing else 0, group=group)
        b.add(f"{label} Fist", (side * 0.5, 1.2, 0), (0.2, 0.2, 0.2), multiplier=1.1, group=group)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(4):
            glowing = i == 1
            b.add(f"{label} Leg {i}", (side * 0.18, 1.0 - i * 0.2, 0), (0.18, 0.2, 0.18),
                  "glow" if glowing else "primary", 1.3 if glowing else 1,
                  emissive=1.3 if glowing else 0, group=group)
        b.add(f"{label} Foot", (side * 0.18, 0.15, 0.08), (0.22, 0.14, 0.28), multiplier=0.9, group=group)

    for shard in range(6):
        angle = (shard / 6) * math.pi * 2
        b.add(f"Shard {shard}", (math.cos(angle) * 0.6, 2.0 + math.sin(shard * 1.5) * 0.3, math.sin(angle) * 0.5),
              (0.05, 0.1, 0.05), "glow", 2, emissive=2, group="shards")

    return b.build(["head", "torso", "arm_left", "arm_right", "leg_left", "leg_right", "shards"])


def create_mushroom_tender_model(scale: float = 1.0) -> VoxelModel:
    """Fungal guardian: spotted cap, stem body, tendril arms and root legs."""
    b = ModelBuilder("mushroom_tender", scale)

    for ring in range(4):
        b.ring(f"Cap {ring}", 8, 0.25 - ring * 0.03, 2.0 - ring * 0.08, (0.12, 0.1, 0.12),
               "primary" if ring < 2 else "secondary", group="head")
    for spot in range(5):
        angle = (spot / 5) * math.pi * 2
        b.add(f"Spot {spot}", (math.cos(angle) * 0.18, 2.08, math.sin(angle) * 0.15), (0.06, 0.04, 0.06),
              "glow", 2, emissive=2, group="head")
    b.mirrored("Eye", (0.08, 1.72, 0.15), (0.06, 0.08, 0.04), "glow", 2.5, emissive=2.5, group="head")

    for stem in range(5):
        width = 0.22 - abs(stem - 2) * 0.02
        even = stem % 2 == 0
        b.add(f"Stem {stem}", (0, 1.55 - stem * 0.18, 0), (width, 0.18, width * 0.9),
              "secondary" if even else "primary", 0.9 if even else 1)

    for side in SIDES:
        for i in range(4):
            glowing = i >= 2
            b.add(f"{side_label(side)} Arm {i}", (side * (0.2 + i * 0.06), 1.4 - i * 0.1, 0), (0.08, 0.12, 0.08),
                  "glow" if glowing else "primary", 1.5 if glowing else 1,
                  emissive=1.5 if glowing else 0, group=f"arm_{side_tag(side)}")

    # Three roots per side fanning out from under the stem
    for side in SIDES:
        for root in range(3):
            angle = (root / 3) * math.pi * 0.3 + (0 if side > 0 else math.pi)
            for seg in range(3):
                b.add(f"{side_label(side)} Root {root}_{seg}",
                      (side * 0.12 + math.cos(angle) * seg * 0.05, 0.7 - seg * 0.18, math.sin(angle) * seg * 0.05),
                      (0.1, 0.18, 0.1), "secondary", 0.85, group=f"leg_{side_tag(side)}")

    for spore in range(8):
        angle = (spore / 8) * math.pi * 2
        b.add(f"Spore {spore}", (math.cos(angle) * 0.35, 1.8 + math.sin(spore * 1.5) * 0.2, math.sin(angle) * 0.3),
              (0.03, 0.03, 0.03), "glow", 1.8, emissive=1.8, group="effects")

    return b.build(["head", "body", "arm_left", "arm_right", "leg_left", "leg_right", "effects"])


def create_ruin_wraith_model(scale: float = 1.0) -> VoxelModel:
    """Ancient ghost whose body fades into glowing wisps below the waist."""
    b = ModelBuilder("ruin_wraith", scale)

    # Open-faced hood: the front row keeps only the centre cell
    for hx in (-1, 0, 1):
        for hz in (-1, 0, 1):
            if hz > 0 or hx == 0:
                b.add(f"Hood {hx}_{hz}", (hx * 0.1, 2.2, hz * 0.08), (0.12, 0.16, 0.1), multiplier=0.8, group="head")
    b.mirrored("Eye", (0.06, 2.15, 0.12), (0.05, 0.06, 0.03), "glow", 3, emissive=3, group="head")

    for ty in range(8):
        width = 0.25 - ty * 0.015
        alpha = 1 - ty * 0.08
        glowing = ty > 4
        for tx in (-1, 0, 1):
            b.add(f"Body {ty}_{tx}", (tx * width * 0.35, 2.0 - ty * 0.15, 0), (width * 0.35, 0.15, width * 0.28),
                  "glow" if glowing else "primary", alpha * 0.8 if glowing else alpha,
                  emissive=alpha * 0.8 if glowing else 0)

    for side in SIDES:
        label, tag = side_label(side), side_tag(side)
        for i in range(5):
            glowing = i > 2
            b.add(f"{label} Arm {i}", (side * (0.25 + i * 0.05), 1.85 - i * 0.12, 0.04 * i), (0.06, 0.12, 0.05),
                  "glow" if glowing else "primary", 1.5 if glowing else 0.9,
                  emissive=1.5 if glowing else 0, group=f"arm_{tag}")
        for claw in range(3):
            b.add(f"{label} Claw {claw}", (side * (0.45 + claw * 0.02), 1.2 - claw * 0.08, 0.08 + claw * 0.04),
                  (0.02, 0.1, 0.02), "glow", 2, emissive=2, group=f"arm_{tag}")

    for wisp in range(5):
        angle = (wisp / 5 - 0.5) * math.pi * 0.5
        for seg in range(4):
            strength = 1.2 - seg * 0.2
            b.add(f"Wisp {wisp}_{seg}",
                  (math.sin(angle) * (0.1 + seg * 0.03), 0.75 - seg * 0.15, math.cos(angle) * 0.05),
                  (0.04, 0.1, 0.04), "glow", strength, emissive=strength, group="trails")

    for soul in range(4):
        angle = (soul / 4) * math.pi * 2
        b.add(f"Soul {soul}", (math.cos(angle) * 0.4, 1.8 + math.sin(soul * 2) * 0.15, math.sin(angle) * 0.35),
              (0.05, 0.08, 0.05), "glow", 2.5, emissive=2.5, group="effects")

    return b.build(["head", "body", "arm_left", "arm_right", "trails", "effects"])


def create_ancient_guardian_model(scale: float = 1.0) -> VoxelModel:
    """Titanic rune-carved stone protector."""
    b = ModelBuilder("ancient_guardian", scale)

    for hx in (-1, 0, 1):
        for hy in range(2):
            for hz in (-1, 0, 1):
                b.add(f"Head {hx}_{hy}_{hz}", (hx * 0.2, 4.6 + hy * 0.22, hz * 0.16), (0.22, 0.24, 0.18), group="head")
    for rune in range(3):
        b.add(f"Head Rune {rune}", ((rune - 1) * 0.12, 4.9, 0.22), (0.08, 0.08, 0.02), "glow", 2, emissive=2, group="head")
    b.mirrored("Eye", (0.2, 4.65, 0.28), (0.1, 0.12, 0.06), "glow", 3, emissive=3, group="head")

    for i in range(2):
        b.add(f"Neck {i}", (0, 4.35 - i * 0.15, 0), (0.28, 0.15, 0.24), multiplier=0.9, group="torso")
    for ty in range(8):
        width = 0.7 - abs(ty - 3.5) * 0.05
        banded = ty % 3 == 0
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}_{tx}", (tx * width * 0.35, 4.0 - ty * 0.22, 0), (width * 0.38, 0.22, width * 0.32),
                  "secondary" if banded else "primary", 0.85 if banded else 1, group="torso")
    b.add("Rune Core", (0, 3.5, 0.4), (0.22, 0.28, 0.08), "glow", 2.5, emissive=2.5, group="torso")
    for line in range(4):
        angle = (line / 4) * math.pi - math.pi / 2
        b.add(f"Rune Line {line}", (math.cos(angle) * 0.3, 3.5 + math.sin(angle) * 0.3, 0.35), (0.04, 0.15, 0.03),
              "glow", 1.8, emissive=1.8, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        b.add(f"{label} Shoulder", (side * 0.75, 4.1, 0), (0.35, 0.3, 0.3), group=group)
        b.add(f"{label} Shoulder Rune", (side * 0.75, 4.2, 0.2), (0.1, 0.1, 0.04), "glow", 2, emissive=2, group=group)
        for i in range(5):
            b.add(f"{label} Arm {i}", (side * 0.72, 3.7 - i * 0.25, 0), (0.25, 0.25, 0.25),
                  "secondary" if i == 2 else "primary", 0.9 if i == 2 else 1, group=group)
        b.add(f"{label} Fist", (side * 0.72, 2.4, 0), (0.35, 0.35, 0.35), multiplier=0.95, group=group)
        b.add(f"{label} Fist Rune", (side * 0.72, 2.4, 0.2), (0.1, 0.1, 0.06), "glow", 2, emissive=2, group=group)

    for wx in range(-2, 3):
        b.add(f"Waist {wx}", (wx * 0.18, 2.0, 0), (0.2, 0.18, 0.25), "secondary", 0.8, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(5):
            b.add(f"{label} Leg {i}", (side * 0.35, 1.7 - i * 0.28, 0), (0.32, 0.28, 0.32),
                  "secondary" if i == 2 else "primary", 0.85 if i == 2 else 1, group=group)
        b.add(f"{label} Foot", (side * 0.35, 0.28, 0.15), (0.4, 0.22, 0.55), multiplier=0.7, group=group)
        b.add(f"{label} Foot Rune", (side * 0.35, 0.35, 0.42), (0.1, 0.08, 0.04), "glow", 1.5, emissive=1.5, group=group)

    for stone in range(4):
        angle = (stone / 4) * math.pi * 2
        b.add(f"Rune Stone {stone}", (math.cos(angle) * 0.9, 3.0 + math.sin(stone * 1.3) * 0.4, math.sin(angle) * 0.8),
              (0.08, 0.12, 0.08), "glow", 2.2, emissive=2.2, group="effects")

    return b.build(["head", "torso", "arm_left", "arm_right", "leg_left", "leg_right", "effects"])
