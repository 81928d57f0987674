"""
Digital Enemy Generators

Cyberpunk street and corporate enemies: a hovering combat drone, the
humanoid gang/security archetypes and the bipedal mech boss.

Humanoids are built top-down (head, torso, shoulders, arms, belt, legs) with
side-tagged limb groups ("arm_left", "leg_right") so the animation system can
pair limbs and find their pivots.
"""

import math

from ..model import VoxelModel
from .builder import SIDES, ModelBuilder, side_label, side_tag


def create_drone_model(scale: float = 1.0) -> VoxelModel:
    """Hovering military drone with four rotors, a sensor eye and weapon pods."""
    b = ModelBuilder("drone", scale)

    # Spherical body, widest at the middle ring
    for ring in range(5):
        ring_size = 0.35 - abs(ring - 2) * 0.08
        b.ring(f"Body Ring {ring}", 8, ring_size, 1.4 + (ring - 2) * 0.12, (0.1, 0.12, 0.1))

    b.ring("Dome", 6, 0.15, 1.7, (0.08, 0.08, 0.08), multiplier=0.8)
    b.add("Dome Top", (0, 1.78, 0), (0.1, 0.08, 0.1))
    b.add("Antenna Stem", (0, 1.9, 0), (0.02, 0.12, 0.02), multiplier=0.6)
    b.add("Antenna Light", (0, 2.0, 0), (0.04, 0.04, 0.04), "#ff0000", 2, emissive=1)

    b.add("Main Eye", (0, 1.4, 0.32), (0.18, 0.18, 0.06), "glow", 2.5, emissive=1, group="sensors")
    for i in range(8):
        theta = (i / 8) * math.pi * 2
        b.add(f"Eye Ring {i}", (math.cos(theta) * 0.12, 1.4 + math.sin(theta) * 0.12, 0.3),
              (0.04, 0.04, 0.03), multiplier=0.5, group="sensors")
    b.mirrored("Sensor", (0.25, 1.5, 0.2), (0.06, 0.06, 0.04), "#ff0000", 1.4,
               emissive=0.8, group="sensors")

    for arm in range(4):
        angle = (arm / 4) * math.pi * 2 + math.pi / 4
        ca, sa = math.cos(angle), math.sin(angle)
        for seg in range(5):
            reach = 0.2 + seg * 0.12
            b.add(f"Rotor Arm {arm} Seg {seg}", (ca * reach, 1.65, sa * reach),
                  (0.06, 0.04, 0.06), multiplier=0.7, group="rotors")
        b.add(f"Rotor Housing {arm}", (ca * 0.7, 1.68, sa * 0.7), (0.12, 0.06, 0.12), group="rotors")
        for blade in range(3):
            blade_angle = angle + (blade / 3) * math.pi * 2
            b.add(f"Rotor {arm} Blade {blade}",
                  (ca * 0.7 + math.cos(blade_angle) * 0.15, 1.72, sa * 0.7 + math.sin(blade_angle) * 0.15),
                  (0.15, 0.02, 0.04), "glow", 0.75, group="rotors")
        b.add(f"Rotor {arm} Glow", (ca * 0.7, 1.74, sa * 0.7), (0.18, 0.02, 0.18),
              "glow", 1.25, emissive=0.5, group="rotors")

    b.mirrored("Weapon Pod", (0.15, 1.1, 0.05), (0.1, 0.2, 0.1), multiplier=0.6, group="weapons")
    b.mirrored("Weapon Barrel", (0.15, 0.95, 0.12), (0.04, 0.1, 0.04), multiplier=0.4, group="weapons")

    b.add("Thruster Glow", (0, 1.0, 0), (0.2, 0.06, 0.2), "glow", 2, emissive=0.8)

    return b.build(["body", "sensors", "rotors", "weapons"])


def create_default_humanoid_model(scale: float = 1.0) -> VoxelModel:
    """Fallback generic humanoid."""
    b = ModelBuilder("humanoid", scale)

    for hx in (-1, 0, 1):
        for hy in range(2):
            b.add(f"Head {hx},{hy}", (hx * 0.08, 2.0 + hy * 0.1, 0), (0.1, 0.12, 0.12), group="head")
    for i in range(4):
        b.add(f"Visor {i}", (-0.06 + i * 0.04, 2.05, 0.12), (0.05, 0.04, 0.03),
              "glow", 2.5, emissive=0.8, group="head")

    b.add("Neck", (0, 1.88, 0), (0.1, 0.08, 0.1), multiplier=0.8)
    for ty in range(5):
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}-{tx}", (tx * 0.1, 1.7 - ty * 0.14, 0), (0.12, 0.14, 0.14),
                  "secondary" if ty < 3 else "primary")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        b.add(f"{label} Shoulder", (side * 0.3, 1.7, 0), (0.1, 0.08, 0.1), "secondary", group=group)
        for i in range(6):
            b.add(f"{label} Arm {i}", (side * 0.35, 1.55 - i * 0.12, 0), (0.08, 0.12, 0.08),
                  "secondary" if i < 3 else "primary", group=group)
        b.add(f"{label} Hand", (side * 0.35, 0.8, 0.02), (0.07, 0.1, 0.1), group=group)

    for bx in range(-2, 3):
        b.add(f"Belt {bx + 2}", (bx * 0.07, 1.0, 0), (0.08, 0.06, 0.1), multiplier=0.5)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(6):
            b.add(f"{label} Leg {i}", (side * 0.12, 0.85 - i * 0.14, 0), (0.1, 0.14, 0.1),
                  "secondary", group=group)
        b.add(f"{label} Boot", (side * 0.12, 0.05, 0.03), (0.1, 0.1, 0.14), multiplier=0.5, group=group)

    return b.build(["head", "body", "arm_left", "arm_right", "leg_left", "leg_right"])


def create_street_punk_model(scale: float = 1.0) -> VoxelModel:
    """Mohawked punk with spiked shoulder pads and neon eye implants."""
    b = ModelBuilder("streetpunk", scale)

    # Alternating theme glow / hot magenta spikes
    for i in range(8):
        height = 0.12 - abs(i - 3.5) * 0.015
        color, mult = ("glow", 3.5) if i % 2 == 0 else ("#ff00ff", 2)
        b.add(f"Mohawk {i}", (0, 2.15 + i * 0.08, -0.03), (0.05, height, 0.15),
              color, mult, emissive=0.8, group="head")

    for hx in (-1, 0, 1):
        for hy in range(2):
            b.add(f"Head {hx},{hy}", (hx * 0.08, 1.95 + hy * 0.1, 0), (0.1, 0.1, 0.12), group="head")
    b.add("Cyber Jaw", (0, 1.88, 0.08), (0.14, 0.06, 0.06), "secondary", 0.7, group="head")
    b.mirrored("Eye", (0.08, 2.0, 0.12), (0.06, 0.04, 0.03), "glow", 3.5, emissive=1, group="head")
    b.mirrored("Eye Trail", (0.12, 2.0, 0.1), (0.04, 0.02, 0.02), "glow", 1.75, emissive=0.5, group="head")

    b.add("Neck", (0, 1.82, 0), (0.1, 0.08, 0.08))
    b.mirrored("Neck Cable", (0.08, 1.82, -0.02), (0.03, 0.06, 0.03), "glow", 1.4, emissive=0.4)

    # Open jacket: the middle column is left out below the collar
    for ty in range(5):
        for tx in (-1, 0, 1):
            if ty < 2 or tx != 0:
                b.add(f"Jacket {ty}-{tx}", (tx * 0.1, 1.65 - ty * 0.13, -0.02), (0.12, 0.13, 0.14), "secondary")
    b.mirrored("Collar", (0.12, 1.72, 0.06), (0.06, 0.1, 0.08), "secondary")
    for ty in range(3):
        b.add(f"Chest {ty}", (0, 1.55 - ty * 0.1, 0.04), (0.08, 0.1, 0.08), multiplier=0.8)

    for side in SIDES:
        label, group = side_label(side), f"shoulder_{side_tag(side)}"
        b.add(f"{label} Shoulder Pad", (side * 0.28, 1.65, 0), (0.12, 0.08, 0.12), "secondary", 0.8, group=group)
        for spike in range(4):
            angle = (spike / 4) * math.pi - math.pi / 2
            color, mult = ("glow", 3.5) if spike % 2 == 0 else ("#ff00ff", 2)
            b.add(f"{label} Spike {spike}",
                  (side * 0.3 + math.cos(angle) * 0.06 * side, 1.72 + spike * 0.04, math.sin(angle) * 0.04),
                  (0.03, 0.06 + spike * 0.01, 0.03), color, mult, emissive=0.8, group=group)

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(6):
            b.add(f"{label} Arm {i}", (side * 0.32, 1.5 - i * 0.11, 0), (0.07, 0.11, 0.07),
                  "primary" if i < 3 else "secondary", group=group)
        b.add(f"{label} Cyber Panel", (side * 0.34, 1.0, 0.05), (0.04, 0.15, 0.03),
              "glow", 2.1, emissive=0.6, group=group)

    for bx in range(-2, 3):
        b.add(f"Belt {bx + 2}", (bx * 0.06, 1.0, 0), (0.07, 0.06, 0.1), multiplier=0.5)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(7):
            width = 0.08 - i * 0.003
            b.add(f"{label} Leg {i}", (side * 0.1, 0.85 - i * 0.12, 0), (width, 0.12, width),
                  "secondary", 0.7, group=group)
        b.add(f"{label} Boot", (side * 0.1, 0.05, 0.03), (0.09, 0.1, 0.14), multiplier=0.4, group=group)

    return b.build(["head", "body", "shoulder_left", "shoulder_right",
                    "arm_left", "arm_right", "leg_left", "leg_right"])


def create_corp_security_model(scale: float = 1.0) -> VoxelModel:
    """Armored corporate guard with a boxy helmet and a glowing T-visor."""
    b = ModelBuilder("corpsec", scale)

    # 4 x 3 x 2 helmet block
    for hx in (-1.5, -0.5, 0.5, 1.5):
        for hz in (-1, 0, 1):
            for hy in range(2):
                b.add(f"Helmet {round(hx + 1.5)},{hz + 1},{hy}",
                      (hx * 0.1, 2.0 + hy * 0.12, hz * 0.1), (0.12, 0.12, 0.12), "secondary", group="head")
    for vx in range(-2, 3):
        b.add(f"Visor H {vx + 2}", (vx * 0.06, 2.08, 0.18), (0.07, 0.05, 0.03),
              "glow", 2.5, emissive=1, group="head")
    b.add("Visor V", (0, 2.0, 0.18), (0.07, 0.08, 0.03), "glow", 2.5, emissive=1, group="head")

    b.add("Neck", (0, 1.85, 0), (0.12, 0.1, 0.1))
    for ty in range(5):
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}-{tx}", (tx * 0.12, 1.65 - ty * 0.14, 0), (0.14, 0.14, 0.18),
                  "secondary", 1 if ty < 2 else 0.85)
    b.add("Chest Emblem", (0, 1.55, 0.12), (0.1, 0.1, 0.03), "glow", 2.5, emissive=0.8)

    for side in SIDES:
        label, group = side_label(side), f"shoulder_{side_tag(side)}"
        for sy in range(2):
            b.add(f"{label} Shoulder {sy}", (side * 0.38, 1.7 - sy * 0.08, 0), (0.15, 0.1, 0.14),
                  "secondary", group=group)
        b.add(f"{label} Shoulder Ridge", (side * 0.4, 1.78, 0), (0.08, 0.06, 0.16), "secondary", 1.2, group=group)

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(4):
            b.add(f"{label} Upper Arm {i}", (side * 0.4, 1.5 - i * 0.12, 0), (0.1, 0.12, 0.1),
                  "secondary" if i % 2 == 0 else "primary", group=group)
        b.add(f"{label} Elbow", (side * 0.4, 1.05, 0.03), (0.08, 0.08, 0.08), multiplier=0.7, group=group)
        for i in range(3):
            b.add(f"{label} Forearm {i}", (side * 0.4, 0.9 - i * 0.12, 0.03), (0.09, 0.12, 0.09),
                  "secondary", group=group)
        b.add(f"{label} Hand", (side * 0.4, 0.5, 0.05), (0.08, 0.1, 0.1), group=group)

    for bx in range(-2, 3):
        b.add(f"Belt {bx + 2}", (bx * 0.08, 0.95, 0), (0.1, 0.08, 0.12), multiplier=0.6)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(4):
            b.add(f"{label} Thigh {i}", (side * 0.15, 0.8 - i * 0.14, 0), (0.12, 0.14, 0.12),
                  "secondary", group=group)
        b.add(f"{label} Knee Pad", (side * 0.15, 0.28, 0.06), (0.1, 0.1, 0.08), "secondary", 1.1, group=group)
        for i in range(3):
            b.add(f"{label} Shin {i}", (side * 0.15, 0.15 - i * 0.12, 0), (0.1, 0.12, 0.1),
                  "secondary", group=group)
        b.add(f"{label} Boot", (side * 0.15, 0.05, 0.04), (0.11, 0.1, 0.16), multiplier=0.5, group=group)

    return b.build(["head", "body", "shoulder_left", "shoulder_right",
                    "arm_left", "arm_right", "leg_left", "leg_right"])


def create_netrunner_model(scale: float = 1.0) -> VoxelModel:
    """Slim hacker with a wraparound neural visor and floating data fragments."""
    b = ModelBuilder("netrunner", scale)

    for hx in (-1, 0, 1):
        for hz in (-1, 0, 1):
            b.add(f"Head {hx}_{hz}", (hx * 0.08, 1.9, hz * 0.06), (0.1, 0.12, 0.08), group="head")
    for i in range(-3, 4):
        b.add(f"Visor {i}", (i * 0.05, 1.92, 0.12), (0.06, 0.04, 0.02), "glow", 2.5, emissive=2.5, group="head")
    b.mirrored("Data Port", (0.18, 1.9, 0), (0.03, 0.06, 0.06), "glow", 1.5, emissive=1.5, group="head")

    # Torso narrows towards the waist
    for ty in range(5):
        width = 0.18 - ty * 0.015
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}_{tx}", (tx * 0.08, 1.65 - ty * 0.12, 0), (width, 0.12, 0.12),
                  "primary" if ty % 2 == 0 else "secondary", 1 if ty % 2 == 0 else 0.8, group="torso")
    for i in range(4):
        b.add(f"Circuit {i}", (0, 1.55 - i * 0.1, 0.08), (0.02, 0.08, 0.02), "glow", 2, emissive=2, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(5):
            b.add(f"{label} Arm {i}", (side * 0.28, 1.55 - i * 0.1, 0), (0.06, 0.1, 0.06),
                  "secondary" if i % 2 == 0 else "primary", 0.8, group=group)
        b.add(f"{label} Hand", (side * 0.28, 1.0, 0.02), (0.06, 0.08, 0.08), "secondary", 0.7, group=group)
        b.add(f"{label} Wrist Glow", (side * 0.3, 1.1, 0.04), (0.03, 0.06, 0.03),
              "glow", 2, emissive=2, group=group)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(5):
            b.add(f"{label} Leg {i}", (side * 0.1, 0.85 - i * 0.12, 0), (0.07, 0.12, 0.07),
                  multiplier=0.9, group=group)
        b.add(f"{label} Boot", (side * 0.1, 0.22, 0.03), (0.08, 0.08, 0.12), "secondary", 0.6, group=group)
        b.add(f"{label} Hover Glow", (side * 0.1, 0.12, 0), (0.06, 0.04, 0.06),
              "glow", 1.5, emissive=1.5, group=group)

    for frag in range(4):
        angle = (frag / 4) * math.pi * 2
        b.add(f"Data Fragment {frag}",
              (math.cos(angle) * 0.35, 2.0 + math.sin(frag * 2) * 0.1, math.sin(angle) * 0.35),
              (0.04, 0.06, 0.02), "glow", 2, emissive=2, group="effects")

    return b.build(["head", "torso", "arm_left", "arm_right", "leg_left", "leg_right", "effects"])


def create_enforcer_model(scale: float = 1.0) -> VoxelModel:
    """Heavy corporate muscle: a bulkier corp guard with a crested helmet."""
    b = ModelBuilder("enforcer", scale)

    for hx in range(-2, 3):
        for hz in (-1, 0, 1):
            for hy in range(3):
                b.add(f"Helmet {hx}_{hz}_{hy}", (hx * 0.1, 2.1 + hy * 0.12, hz * 0.1),
                      (0.12, 0.12, 0.12), "secondary", group="helmet")
    for vx in range(-3, 4):
        b.add(f"Visor {vx}", (vx * 0.06, 2.18, 0.2), (0.08, 0.06, 0.03),
              "#ff3333", 2.5, emissive=2.5, group="helmet")
    b.add("Helmet Crest", (0, 2.45, -0.05), (0.06, 0.15, 0.2), "secondary", 1.2, group="helmet")

    b.add("Neck", (0, 1.95, 0), (0.16, 0.12, 0.14), multiplier=0.8, group="torso")
    for ty in range(6):
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}_{tx}", (tx * 0.14, 1.75 - ty * 0.14, 0), (0.16, 0.14, 0.2),
                  "secondary" if ty < 3 else "primary", 1 if ty < 3 else 0.85, group="torso")
    b.mirrored("Chest Plate", (0.15, 1.65, 0.12), (0.12, 0.2, 0.04), "secondary", 1.1, group="torso")
    b.add("Chest Light", (0, 1.55, 0.15), (0.08, 0.08, 0.03), "#ff3333", 2, emissive=2, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"shoulder_{side_tag(side)}"
        for sy in range(3):
            b.add(f"{label} Shoulder {sy}", (side * 0.48, 1.8 - sy * 0.08, 0), (0.18, 0.1, 0.16),
                  "secondary", group=group)
        b.add(f"{label} Shoulder Spike", (side * 0.52, 1.88, 0), (0.08, 0.12, 0.16), "secondary", 1.2, group=group)

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(4):
            b.add(f"{label} Upper Arm {i}", (side * 0.48, 1.55 - i * 0.12, 0), (0.12, 0.12, 0.12),
                  "secondary" if i % 2 == 0 else "primary", 0.9, group=group)
        b.add(f"{label} Elbow", (side * 0.48, 1.1, 0.04), (0.1, 0.1, 0.1), "secondary", 0.8, group=group)
        for i in range(3):
            b.add(f"{label} Forearm {i}", (side * 0.48, 0.95 - i * 0.12, 0.03), (0.11, 0.12, 0.11),
                  "secondary", 0.9, group=group)
        b.add(f"{label} Gauntlet", (side * 0.48, 0.55, 0.05), (0.12, 0.12, 0.14), "secondary", group=group)

    for bx in range(-3, 4):
        b.add(f"Belt {bx}", (bx * 0.08, 0.98, 0), (0.1, 0.1, 0.14), multiplier=0.5, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(4):
            b.add(f"{label} Thigh {i}", (side * 0.18, 0.85 - i * 0.14, 0), (0.14, 0.14, 0.14),
                  "secondary", 0.95, group=group)
        b.add(f"{label} Knee Pad", (side * 0.18, 0.32, 0.08), (0.12, 0.12, 0.1), "secondary", 1.1, group=group)
        for i in range(3):
            b.add(f"{label} Shin {i}", (side * 0.18, 0.18 - i * 0.12, 0), (0.12, 0.12, 0.12),
                  "secondary", 0.9, group=group)
        b.add(f"{label} Boot", (side * 0.18, 0.06, 0.05), (0.14, 0.12, 0.2), multiplier=0.4, group=group)

    return b.build(["helmet", "torso", "shoulder_left", "shoulder_right",
                    "arm_left", "arm_right", "leg_left", "leg_right"])


def create_mech_model(scale: float = 1.0) -> VoxelModel:
    """Bipedal war machine boss with shoulder cannons and a chest reactor."""
    b = ModelBuilder("mech", scale)

    for hx in (-1, 0, 1):
        for hz in (-1, 0, 1):
            b.add(f"Head {hx},{hz}", (hx * 0.15, 4.4, hz * 0.12), (0.18, 0.2, 0.15), "secondary", group="head")
    b.add("Head Crest", (0, 4.65, -0.05), (0.1, 0.15, 0.25), "secondary", 0.8, group="head")
    for vx in range(-2, 3):
        b.add(f"Visor {vx + 2}", (vx * 0.08, 4.38, 0.22), (0.1, 0.06, 0.03),
              "#ff0000", 2.5, emissive=1, group="head")

    for i in range(2):
        b.mirrored(f"Neck {i}", (0.15, 4.15 - i * 0.1, 0), (0.08, 0.1, 0.08), multiplier=0.6)

    # Armor plates, widest at layer 3
    for ty in range(8):
        width = 0.7 - abs(ty - 3) * 0.06
        depth = 0.5 - abs(ty - 3) * 0.04
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}-{tx}", (tx * width * 0.4, 3.8 - ty * 0.22, 0), (width * 0.4, 0.22, depth),
                  "secondary", 1 if ty % 2 == 0 else 0.85)

    b.add("Chest Reactor", (0, 3.4, 0.35), (0.25, 0.25, 0.08), "#00aaff", 2, emissive=1)
    for i in range(6):
        theta = (i / 6) * math.pi * 2
        b.add(f"Reactor Ring {i}", (math.cos(theta) * 0.18, 3.4 + math.sin(theta) * 0.18, 0.32),
              (0.06, 0.06, 0.04), "secondary", 0.5)

    for side in SIDES:
        label = side_label(side)
        b.add(f"{label} Shoulder Mount", (side * 0.75, 4.0, 0), (0.35, 0.25, 0.35), "secondary", group="weapons")
        b.add(f"{label} Weapon Housing", (side * 0.8, 4.15, 0.1), (0.25, 0.2, 0.4), "secondary", 0.8, group="weapons")
        for barrel in range(3):
            b.add(f"{label} Barrel {barrel}", (side * 0.8, 4.2 - barrel * 0.08, 0.45), (0.06, 0.06, 0.25),
                  multiplier=0.4, group="weapons")
        b.add(f"{label} Ammo Feed", (side * 0.65, 3.8, -0.15), (0.15, 0.3, 0.15), multiplier=0.5, group="weapons")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        for i in range(5):
            width = 0.22 - i * 0.015
            b.add(f"{label} Upper Arm {i}", (side * 0.7, 3.5 - i * 0.2, 0), (width, 0.2, width),
                  "secondary" if i % 2 == 0 else "primary", group=group)
        b.add(f"{label} Elbow", (side * 0.7, 2.5, 0), (0.18, 0.18, 0.18), multiplier=0.6, group=group)
        for i in range(4):
            b.add(f"{label} Forearm {i}", (side * 0.7, 2.2 - i * 0.2, 0.05), (0.2, 0.2, 0.25),
                  "secondary", group=group)
        b.add(f"{label} Fist", (side * 0.7, 1.4, 0.1), (0.25, 0.25, 0.3), "secondary", group=group)
        b.add(f"{label} Arm Cannon", (side * 0.7, 1.35, 0.35), (0.1, 0.1, 0.2), multiplier=0.4, group=group)

    for wx in range(-2, 3):
        b.add(f"Waist {wx + 2}", (wx * 0.15, 1.9, 0), (0.18, 0.15, 0.25), "secondary", 0.9)

    # Digitigrade legs: thighs lean forward, shins lean back
    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(4):
            b.add(f"{label} Thigh {i}", (side * 0.35, 1.6 - i * 0.22, i * 0.03), (0.28, 0.22, 0.28),
                  "secondary", group=group)
        b.add(f"{label} Knee", (side * 0.35, 0.75, 0.15), (0.22, 0.2, 0.22), multiplier=0.6, group=group)
        for i in range(3):
            b.add(f"{label} Lower Leg {i}", (side * 0.35, 0.5 - i * 0.18, 0.1 - i * 0.02), (0.22, 0.18, 0.22),
                  "secondary", group=group)
        b.add(f"{label} Foot", (side * 0.35, 0.08, 0.15), (0.3, 0.16, 0.5), multiplier=0.5, group=group)
        for toe in range(2):
            b.add(f"{label} Toe {toe}", (side * 0.35 + (toe - 0.5) * 0.15, 0.05, 0.45), (0.08, 0.08, 0.12),
                  multiplier=0.4, group=group)

    for rx in (-1, 0, 1):
        b.add(f"Back Reactor {rx + 1}", (rx * 0.25, 3.2, -0.35), (0.2, 0.4, 0.15), multiplier=0.5, group="exhaust")
        b.add(f"Exhaust Glow {rx + 1}", (rx * 0.25, 2.9, -0.42), (0.15, 0.25, 0.05),
              "#00aaff", 2, emissive=1, group="exhaust")

    return b.build(["head", "body", "weapons", "arm_left", "arm_right",
                    "leg_left", "leg_right", "exhaust"])
