"""
Mixed (Tech + Magic) Enemy Generators

Archetypes where digital corruption meets the arcane: the split-bodied
hybrid, corrupted beast, glitch sprite, data phantom, techno elemental,
virus swarm and the system overlord boss.
"""

from typing import Optional
import math

import numpy as np

from ..model import BoxColor, VoxelModel
from .builder import SIDES, ModelBuilder, resolve_rng, side_label, side_tag

TECH_CYAN = "#00ffff"
MAGIC_PINK = "#ff88ff"
CORRUPT_RED = "#ff0066"
CORRUPT_MAGENTA = "#ff00ff"


def _glitch_noise(i: int) -> float:
    """Fixed pseudo-random value in [0, 1]; the glitch sprite looks the same on every call."""
    return math.sin(12345 * 9999 + i * 7777) * 0.5 + 0.5


def create_hybrid_model(scale: float = 1.0) -> VoxelModel:
    """Humanoid split down the middle: mechanical left half, arcane right half."""
    b = ModelBuilder("hybrid", scale)

    for hy in range(3):
        b.add(f"Tech Head {hy}", (-0.1, 2.15 - hy * 0.1, 0), (0.14, 0.12, 0.16), "secondary", group="head")
    b.add("Tech Helmet Detail", (-0.15, 2.2, -0.08), (0.06, 0.15, 0.06), "secondary", 0.7, group="head")
    for hy in range(3):
        b.add(f"Magic Head {hy}", (0.1, 2.15 - hy * 0.1, 0), (0.14, 0.12, 0.16), group="head")
    b.add("Magic Horn", (0.15, 2.35, -0.05), (0.04, 0.18, 0.04), MAGIC_PINK, 2.5, emissive=1, group="head")
    b.add("Tech Eye", (-0.1, 2.12, 0.14), (0.1, 0.04, 0.03), TECH_CYAN, 2.5, emissive=1, group="head")
    b.add("Scan Line", (-0.15, 2.12, 0.12), (0.04, 0.02, 0.02), TECH_CYAN, 1.25, emissive=0.5, group="head")
    b.add("Magic Eye", (0.1, 2.12, 0.14), (0.08, 0.08, 0.05), MAGIC_PINK, 2.5, emissive=1, group="head")
    for p in range(3):
        angle = (p / 3) * math.pi * 2
        b.add(f"Magic Particle {p}", (0.1 + math.cos(angle) * 0.08, 2.2 + math.sin(angle) * 0.06, 0.12),
              (0.03, 0.03, 0.02), MAGIC_PINK, 1.5, emissive=0.6, group="head")

    b.add("Neck", (0, 1.9, 0), (0.14, 0.1, 0.12), multiplier=0.7)
    for ty in range(6):
        even = ty % 2 == 0
        b.add(f"Torso Tech {ty}", (-0.12, 1.75 - ty * 0.14, 0), (0.15, 0.14, 0.14), "secondary", 1 if even else 0.8)
        b.add(f"Torso Magic {ty}", (0.12, 1.75 - ty * 0.14, 0), (0.15, 0.14, 0.14), multiplier=1 if even else 0.85)
    # Seam alternates between the two halves' glow colors
    for i in range(5):
        b.add(f"Center Glow {i}", (0, 1.7 - i * 0.15, 0.1), (0.04, 0.12, 0.03),
              TECH_CYAN if i % 2 == 0 else MAGIC_PINK, 2.5, emissive=1)

    for i in range(6):
        even = i % 2 == 0
        b.add(f"Tech Arm {i}", (-0.35, 1.65 - i * 0.12, 0), (0.1, 0.12, 0.1),
              "secondary" if even else "primary", 1 if even else 0.6, group="arm_left")
    for finger in range(3):
        b.add(f"Tech Claw {finger}", (-0.38, 0.9 - finger * 0.04, 0.05 + finger * 0.03), (0.04, 0.04, 0.1),
              TECH_CYAN, 2.5, emissive=1, group="arm_left")
    b.add("Arm Tech Panel", (-0.4, 1.3, 0.08), (0.04, 0.25, 0.04), TECH_CYAN, 1.75, emissive=0.7, group="arm_left")

    for i in range(6):
        width = 0.08 + i * 0.015
        fade = 1 - i * 0.08
        b.add(f"Magic Arm {i}", (0.35, 1.65 - i * 0.12, 0), (width, 0.12, width),
              MAGIC_PINK, 2.5 * fade, emissive=fade, group="arm_right")
    b.add("Magic Hand", (0.38, 0.9, 0), (0.15, 0.15, 0.15), MAGIC_PINK, 2.5, emissive=1, group="arm_right")
    for aura in range(4):
        angle = (aura / 4) * math.pi * 2
        b.add(f"Magic Aura {aura}", (0.38 + math.cos(angle) * 0.12, 0.9 + math.sin(angle) * 0.12, 0),
              (0.05, 0.05, 0.05), MAGIC_PINK, 1.25, emissive=0.5, group="arm_right")

    for bx in range(-2, 3):
        b.add(f"Belt {bx + 2}", (bx * 0.08, 0.95, 0), (0.1, 0.08, 0.12), "secondary" if bx < 0 else "primary", 0.6)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        half = "secondary" if side < 0 else "primary"
        for i in range(6):
            b.add(f"{label} Leg {i}", (side * 0.14, 0.8 - i * 0.14, 0), (0.1, 0.14, 0.1),
                  half, 1 if i % 2 == 0 else 0.8, group=group)
        b.add(f"{label} Leg Accent", (side * 0.18, 0.5, 0.06), (0.03, 0.3, 0.03),
              TECH_CYAN if side < 0 else MAGIC_PINK, 1.5, emissive=0.6, group=group)
        b.add(f"{label} Boot", (side * 0.14, 0.05, 0.04), (0.11, 0.1, 0.16), half, 0.5, group=group)

    return b.build(["head", "body", "arm_left", "arm_right", "leg_left", "leg_right"])


def create_corrupted_beast_model(scale: float = 1.0) -> VoxelModel:
    """Mutated quadruped with glitch spikes, corruption tendrils and extra eyes."""
    b = ModelBuilder("corrupted_beast", scale)

    def patch(flag: bool):
        return "primary" if flag else CORRUPT_RED

    for hx in (-1, 0, 1):
        for hz in range(3):
            b.add(f"Head {hx + 1}_{hz}", (hx * 0.12, 1.6, 0.35 + hz * 0.1), (0.14, 0.18, 0.12),
                  patch(hz % 2 == 0), group="head")
    for sz in range(3):
        b.add(f"Snout {sz}", (0, 1.5 - sz * 0.03, 0.65 + sz * 0.12), (0.12 - sz * 0.02, 0.1, 0.12),
              patch(sz % 2 == 0), group="head")
    for spike in range(6):
        angle = (spike / 6) * math.pi
        lit = spike % 2 == 0
        b.add(f"Head Spike {spike}", (math.cos(angle) * 0.2, 1.75 + spike * 0.08, 0.35),
              (0.05, 0.14 + spike * 0.02, 0.05), CORRUPT_MAGENTA if lit else CORRUPT_RED,
              2.5 if lit else 1, emissive=1 if lit else 0, group="head")
    b.mirrored("Main Eye", (0.15, 1.65, 0.55), (0.08, 0.05, 0.04), "glow", 2.5, emissive=1, group="head")
    b.mirrored("Glitch Eye", (0.12, 1.75, 0.5), (0.04, 0.03, 0.03), "glow", 1.75, emissive=0.7, group="head")

    for i in range(3):
        b.add(f"Neck {i}", (0, 1.4 - i * 0.12, 0.2 - i * 0.08), (0.22, 0.14, 0.18), patch(i % 2 == 0))
    for seg in range(8):
        width = 0.35 - abs(seg - 4) * 0.03
        for layer in range(2):
            b.add(f"Body Seg {seg} Layer {layer}", (0, 1.25 - layer * 0.2, -seg * 0.2), (width, 0.22, 0.22),
                  patch((seg + layer) % 3 != 0))
    for spine in range(5):
        b.add(f"Back Spine {spine}", (0, 1.5, -0.2 - spine * 0.25), (0.05, 0.15 - spine * 0.02, 0.08),
              "glow", 2.5, emissive=1)

    for side in SIDES:
        for end, lz in (("front", 0.0), ("back", -1.2)):
            label = f"{end.title()} {side_label(side)}"
            group = f"leg_{end}_{side_tag(side)}"
            lx = side * 0.22
            for i in range(5):
                b.add(f"{label} Leg {i}", (lx, 1.0 - i * 0.2, lz), (0.14, 0.2, 0.14), patch(i % 2 == 0), group=group)
            b.add(f"{label} Paw", (lx, 0.05, lz + 0.05), (0.16, 0.1, 0.2), multiplier=0.5, group=group)
            for claw in range(2):
                b.add(f"{label} Claw {claw}", (lx + (claw - 0.5) * 0.08, 0.05, lz + 0.18), (0.03, 0.04, 0.08),
                      "glow", 2.5, emissive=1, group=group)

    for tendril in range(5):
        angle = (tendril / 5) * math.pi * 2
        for seg in range(5):
            fade = 1 - seg * 0.15
            b.add(f"Tendril {tendril} Seg {seg}",
                  (math.cos(angle) * (0.4 + seg * 0.15), 1.3 - seg * 0.12, -0.5 + math.sin(angle) * 0.3),
                  (0.05, 0.12, 0.05), "glow", 2.5 * fade, emissive=fade, group="tendrils")

    for i in range(5):
        b.add(f"Tail {i}", (0, 1.3 + i * 0.05, -1.5 - i * 0.1), (0.08 - i * 0.01, 0.08, 0.12),
              patch(i % 2 == 0), group="tail")

    return b.build(["head", "body", "leg_front_left", "leg_front_right", "leg_back_left",
                    "leg_back_right", "tendrils", "tail"])


def create_glitch_sprite_model(scale: float = 1.0) -> VoxelModel:
    """Unstable digital sprite of scattered fragments, scan lines and error blocks."""
    b = ModelBuilder("glitch_sprite", scale)

    for ring in range(3):
        lit = ring == 1
        b.ring(f"Core Ring {ring}", 6, 0.15 + ring * 0.08, 1.8, (0.12, 0.15, 0.12),
               "glow" if lit else "primary", 3.5 if lit else 1, emissive=1 if lit else 0,
               group="core", phase=ring * 0.5)
    b.add("Core Center", (0, 1.8, 0), (0.2, 0.25, 0.2), "glow", 3.5, emissive=1, group="core")

    # (color, multiplier, emissive) cycled over the fragments
    styles = [("glow", 3.5, 1), (TECH_CYAN, 2.5, 1), (CORRUPT_MAGENTA, 2, 1), ("primary", 1, 0)]
    for i in range(25):
        size = 0.08 + _glitch_noise(i + 300) * 0.08
        color, mult, glow = styles[i % 4]
        b.add(f"Fragment {i}",
              ((_glitch_noise(i) - 0.5) * 0.7, 1.0 + _glitch_noise(i + 100) * 1.2, (_glitch_noise(i + 200) - 0.5) * 0.7),
              (size, size, size), color, mult, emissive=glow, group="fragments")

    for line in range(8):
        strong = line % 2 == 0
        b.add(f"Scan Line {line}", (0, 1.2 + line * 0.2, 0.25), (0.4 + _glitch_noise(line + 400) * 0.2, 0.03, 0.03),
              TECH_CYAN, 2.5 if strong else 1.25, emissive=1 if strong else 0.5, group="scanlines")
    for bar in range(4):
        noise = _glitch_noise(bar + 500)
        b.add(f"Glitch Bar {bar}", (-0.3 + bar * 0.2, 1.6, 0.2), (0.04, 0.6, 0.03),
              CORRUPT_MAGENTA, 0.6 + noise, emissive=0.3 + noise * 0.5, group="scanlines")

    for sq in range(6):
        red = sq % 2 == 0
        b.add(f"Error Square {sq}",
              ((_glitch_noise(sq + 600) - 0.5) * 0.6, 1.0 + _glitch_noise(sq + 700), (_glitch_noise(sq + 800) - 0.5) * 0.4),
              (0.15, 0.15, 0.04), "#ff0000" if red else BoxColor.custom(), 2 if red else 0.5,
              emissive=1 if red else 0, group="errors")

    for frag in range(8):
        angle = (frag / 8) * math.pi * 2
        radius = 0.5 + _glitch_noise(frag + 900) * 0.2
        b.add(f"Data Fragment {frag}", (math.cos(angle) * radius, 1.5 + math.sin(frag * 2) * 0.3, math.sin(angle) * radius),
              (0.06, 0.1, 0.06), "glow", 2.1, emissive=0.6, group="fragments")

    b.mirrored("Eye", (0.15, 2.0, 0.2), (0.1, 0.06, 0.05), TECH_CYAN, 2.5, emissive=1, group="face")
    b.mirrored("Eye Static", (0.18, 2.0, 0.18), (0.04, 0.03, 0.02), CORRUPT_MAGENTA, 2, emissive=1, group="face")

    return b.build(["core", "fragments", "scanlines", "errors", "face"])


def create_data_phantom_model(scale: float = 1.0) -> VoxelModel:
    """Ghost made of corrupted code: offset head layers, data streaks, fading trail."""
    b = ModelBuilder("data_phantom", scale)

    for layer in range(3):
        lit = layer == 1
        for hx in (-1, 0, 1):
            b.add(f"Head {layer}_{hx}", (hx * 0.08 + layer * 0.02, 2.2, layer * 0.04), (0.12, 0.16, 0.1),
                  "glow" if lit else "primary", 2 if lit else 0.7, emissive=2 if lit else 0, group="head")
    for side in SIDES:
        for glitch in range(2):
            b.add(f"{side_label(side)} Eye {glitch}", (side * 0.07 + glitch * 0.03, 2.18, 0.14 + glitch * 0.02),
                  (0.05, 0.06, 0.03), "glow", 3, emissive=3, group="head")
    for scan in range(4):
        b.add(f"Head Scanline {scan}", (0, 2.28 - scan * 0.04, 0.12), (0.2, 0.01, 0.02), "glow", 1.5,
              emissive=1.5, group="head")

    for ty in range(7):
        width = 0.28 - abs(ty - 3) * 0.02
        offset = math.sin(ty * 1.2) * 0.03
        lit = ty % 2 != 0
        for tx in (-1, 0, 1):
            b.add(f"Body {ty}_{tx}", (tx * width * 0.35 + offset, 2.0 - ty * 0.15, 0), (width * 0.35, 0.12, width * 0.28),
                  "glow" if lit else "primary", 1.2 if lit else 0.8, emissive=1.2 if lit else 0)
        if not lit:
            b.add(f"Data Streak {ty}", (offset * 3, 2.0 - ty * 0.15, 0.15), (0.25, 0.02, 0.02), "glow", 2, emissive=2)

    for side in SIDES:
        for i in range(5):
            lit = i % 2 == 0
            b.add(f"{side_label(side)} Arm {i}", (side * (0.25 + i * 0.03) + math.sin(i * 2) * 0.02, 1.9 - i * 0.12, 0),
                  (0.06, 0.1, 0.05), "glow" if lit else "primary", 1.5 if lit else 0.7,
                  emissive=1.5 if lit else 0, group=f"arm_{side_tag(side)}")

    for code in range(8):
        angle = (code / 8) * math.pi * 2
        b.add(f"Code Fragment {code}",
              (math.cos(angle) * 0.35 + math.sin(code * 3) * 0.05, 1.8 + math.sin(code * 1.5) * 0.25, math.sin(angle) * 0.3),
              (0.04, 0.06, 0.02), "glow", 2.5, emissive=2.5, group="effects")

    for trail in range(5):
        angle = (trail / 5 - 0.5) * math.pi * 0.4
        for seg in range(3):
            strength = 1.3 - seg * 0.3
            b.add(f"Trail {trail}_{seg}", (math.sin(angle) * 0.1, 0.9 - seg * 0.12, math.cos(angle) * 0.05),
                  (0.04, 0.08, 0.04), "glow", strength, emissive=strength, group="trails")

    return b.build(["head", "body", "arm_left", "arm_right", "trails", "effects"])


def create_techno_elemental_model(scale: float = 1.0) -> VoxelModel:
    """Geometric digital body wrapped around a magical chest core."""
    b = ModelBuilder("techno_elemental", scale)

    for face in range(6):
        angle = (face / 6) * math.pi * 2
        lit = face % 2 != 0
        b.add(f"Head Face {face}", (math.cos(angle) * 0.15, 2.9, math.sin(angle) * 0.12), (0.12, 0.18, 0.1),
              "glow" if lit else "primary", 1.8 if lit else 1, emissive=1.8 if lit else 0, group="head")
    b.add("Head Core", (0, 2.9, 0), (0.12, 0.15, 0.12), "glow", 3, emissive=3, group="head")
    b.mirrored("Eye", (0.1, 2.88, 0.15), (0.08, 0.1, 0.05), "glow", 4, emissive=4, group="head")

    for i in range(2):
        lit = i == 0
        b.add(f"Neck {i}", (0, 2.65 - i * 0.1, 0), (0.15 + i * 0.02, 0.1, 0.13 + i * 0.02),
              "glow" if lit else "primary", 1.5 if lit else 1, emissive=1.5 if lit else 0, group="torso")
    # Checkerboard of plain and energised cells
    for ty in range(6):
        width = 0.48 - abs(ty - 2.5) * 0.04
        for tx in (-1, 0, 1):
            lit = (ty + tx) % 2 != 0
            b.add(f"Torso {ty}_{tx}", (tx * width * 0.35, 2.4 - ty * 0.2, 0), (width * 0.38, 0.2, width * 0.32),
                  "glow" if lit else "primary", 1.3 if lit else 1, emissive=1.3 if lit else 0, group="torso")
    b.add("Magic Core", (0, 2.1, 0.22), (0.18, 0.22, 0.08), "secondary", 3, emissive=3, group="torso")
    for line in range(6):
        angle = (line / 6) * math.pi * 2
        b.add(f"Circuit Line {line}", (math.cos(angle) * 0.2, 2.1 + math.sin(angle) * 0.15, 0.18), (0.02, 0.08, 0.02),
              "glow", 2, emissive=2, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        b.add(f"{label} Shoulder", (side * 0.48, 2.35, 0), (0.2, 0.18, 0.18), group=group)
        b.add(f"{label} Shoulder Conduit", (side * 0.52, 2.45, 0), (0.06, 0.12, 0.06), "glow", 2.5,
              emissive=2.5, group=group)
        for i in range(4):
            lit = i % 2 != 0
            b.add(f"{label} Arm {i}", (side * 0.52, 2.1 - i * 0.2, 0), (0.15, 0.18, 0.15),
                  "glow" if lit else "primary", 1.2 if lit else 1, emissive=1.2 if lit else 0, group=group)
        b.add(f"{label} Fist", (side * 0.52, 1.25, 0), (0.2, 0.2, 0.2), multiplier=1.1, group=group)
        b.add(f"{label} Fist Energy", (side * 0.52, 1.25, 0.12), (0.1, 0.1, 0.05), "glow", 2.5, emissive=2.5, group=group)

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(4):
            lit = i == 1
            b.add(f"{label} Leg {i}", (side * 0.2, 1.15 - i * 0.22, 0), (0.18, 0.22, 0.18),
                  "glow" if lit else "primary", 1.4 if lit else 1, emissive=1.4 if lit else 0, group=group)
        b.add(f"{label} Foot", (side * 0.2, 0.2, 0.1), (0.22, 0.15, 0.3), multiplier=0.9, group=group)

    for p in range(8):
        angle = (p / 8) * math.pi * 2
        b.add(f"Particle {p}", (math.cos(angle) * 0.65, 2.0 + math.sin(p * 1.3) * 0.35, math.sin(angle) * 0.55),
              (0.05, 0.08, 0.05), "glow" if p % 2 == 0 else "secondary", 2, emissive=2, group="effects")

    return b.build(["head", "torso", "arm_left", "arm_right", "leg_left", "leg_right", "effects"])


def create_virus_swarm_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """
    Cloud of small virus cubes around a pulsing core.

    The swarm radius of each virus is drawn from `rng`, so unseeded calls
    produce a different swarm every time.
    """
    rng = resolve_rng(rng)
    b = ModelBuilder("virus_swarm", scale)

    b.add("Core", (0, 1.5, 0), (0.2, 0.25, 0.2), "glow", 3, emissive=3, group="core")
    for ring in range(3):
        lit = ring == 1
        b.ring(f"Core Ring {ring}", 6, 0.2 + ring * 0.08, 1.5, (0.06, 0.2 - ring * 0.03, 0.06),
               "glow" if lit else "primary", 2 if lit else 1.2, emissive=2 if lit else 0,
               group="core", phase=ring * 0.4)

    radii = 0.4 + rng.random(12) * 0.3
    for virus in range(12):
        theta = (virus / 12) * math.pi * 2
        lit = virus % 3 == 0
        b.add(f"Virus {virus}",
              (math.cos(theta) * radii[virus], 1.5 + (virus % 3 - 1) * 0.5 + math.sin(virus * 1.7) * 0.2,
               math.sin(theta) * radii[virus] * 0.8),
              (0.08, 0.08, 0.08), "glow" if lit else "primary", 2 if lit else 1,
              emissive=2 if lit else 0, group="swarm")

    for tendril in range(6):
        angle = (tendril / 6) * math.pi * 2
        for seg in range(4):
            strength = 1.5 - seg * 0.2
            b.add(f"Tendril {tendril}_{seg}",
                  (math.cos(angle) * (0.35 + seg * 0.12), 1.5 + math.sin(tendril + seg) * 0.15,
                   math.sin(angle) * (0.3 + seg * 0.1)),
                  (0.04, 0.12, 0.04), "glow", strength, emissive=strength, group="tendrils")

    for corrupt in range(8):
        angle = (corrupt / 8) * math.pi * 2 + 0.3
        b.add(f"Corruption {corrupt}", (math.cos(angle) * 0.55, 1.2 + corrupt * 0.08, math.sin(angle) * 0.45),
              (0.03, 0.05, 0.03), "secondary", 2, emissive=2, group="effects")
    for error in range(5):
        b.add(f"Error {error}", (math.sin(error * 2.5) * 0.4, 1.9 + error * 0.06, math.cos(error * 2.5) * 0.35),
              (0.06, 0.03, 0.02), "glow", 2.5, emissive=2.5, group="effects")

    return b.build(["core", "swarm", "tendrils", "effects"])


def create_system_overlord_model(scale: float = 1.0) -> VoxelModel:
    """
    Final boss, master of the digital and the arcane.

    The right half (+X) is themed with the glow color (digital), the left
    half with the secondary color (magic).
    """
    b = ModelBuilder("system_overlord", scale)

    for hx in (-1, 0, 1):
        for hy in range(2):
            for hz in (-1, 0, 1):
                b.add(f"Head {hx}_{hy}_{hz}", (hx * 0.18, 4.5 + hy * 0.2, hz * 0.14), (0.2, 0.22, 0.16), group="head")
    for crown in range(7):
        angle = (crown / 7 - 0.5) * math.pi * 0.8
        even = crown % 2 == 0
        b.add(f"Crown {crown}", (math.sin(angle) * 0.22, 4.95 + crown * 0.04, math.cos(angle) * 0.08 - 0.08),
              (0.06, 0.18 + crown * 0.02, 0.06), "glow" if even else "secondary", 2.5 if even else 2,
              emissive=2.5 if even else 2, group="head")
    for side in SIDES:
        b.add(f"{side_label(side)} Eye", (side * 0.18, 4.55, 0.22), (0.12, 0.14, 0.06),
              "glow" if side > 0 else "secondary", 4, emissive=4, group="head")
    for pattern in range(4):
        b.add(f"Face Pattern {pattern}", ((pattern - 1.5) * 0.1, 4.42, 0.25), (0.06, 0.08, 0.02),
              "glow" if pattern % 2 == 0 else "secondary", 1.8, emissive=1.8, group="head")

    for i in range(2):
        lit = i == 0
        b.add(f"Neck {i}", (0, 4.25 - i * 0.12, 0), (0.25, 0.12, 0.2), "glow" if lit else "primary",
              1.3 if lit else 1, emissive=1.3 if lit else 0, group="torso")
    # Banded torso: plain, glow, secondary
    bands = ["primary", "glow", "secondary"]
    for ty in range(8):
        width = 0.7 - abs(ty - 3.5) * 0.05
        lit = ty % 3 != 0
        for tx in (-1, 0, 1):
            b.add(f"Torso {ty}_{tx}", (tx * width * 0.35, 3.9 - ty * 0.22, 0), (width * 0.38, 0.22, width * 0.32),
                  bands[ty % 3], 1.2 if lit else 1, emissive=1.2 if lit else 0, group="torso")
    b.add("Digital Core", (-0.12, 3.4, 0.35), (0.15, 0.2, 0.08), "glow", 3, emissive=3, group="torso")
    b.add("Magic Core", (0.12, 3.4, 0.35), (0.15, 0.2, 0.08), "secondary", 3, emissive=3, group="torso")
    for stream in range(3):
        b.add(f"Core Stream {stream}", (0, 3.3 + stream * 0.1, 0.38), (0.2, 0.02, 0.02),
              "glow" if stream == 1 else "secondary", 2, emissive=2, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"arm_{side_tag(side)}"
        accent = "glow" if side > 0 else "secondary"
        b.add(f"{label} Shoulder", (side * 0.75, 4.0, 0), (0.32, 0.28, 0.28), group=group)
        for spike in range(3):
            strength = 2 + spike * 0.3
            b.add(f"{label} Shoulder Energy {spike}", (side * (0.8 + spike * 0.04), 4.15 + spike * 0.1, 0),
                  (0.08, 0.16 + spike * 0.03, 0.08), accent, strength, emissive=strength, group=group)
        for i in range(5):
            lit = i % 2 != 0
            b.add(f"{label} Arm {i}", (side * 0.72, 3.6 - i * 0.24, 0), (0.22, 0.24, 0.22),
                  accent if lit else "primary", 1.3 if lit else 1, emissive=1.3 if lit else 0, group=group)
        b.add(f"{label} Fist", (side * 0.72, 2.35, 0), (0.32, 0.32, 0.32), group=group)
        b.add(f"{label} Fist Power", (side * 0.72, 2.35, 0.18), (0.12, 0.12, 0.06), accent, 3, emissive=3, group=group)

    for wx in range(-2, 3):
        node = abs(wx) == 2
        b.add(f"Waist {wx}", (wx * 0.16, 2.0, 0), (0.18, 0.16, 0.22), "glow" if node else "primary",
              1.5 if node else 0.9, emissive=1.5 if node else 0, group="torso")

    for side in SIDES:
        label, group = side_label(side), f"leg_{side_tag(side)}"
        for i in range(5):
            lit = i == 2
            b.add(f"{label} Leg {i}", (side * 0.32, 1.7 - i * 0.28, 0), (0.28, 0.28, 0.28),
                  ("glow" if side > 0 else "secondary") if lit else "primary", 1.5 if lit else 1,
                  emissive=1.5 if lit else 0, group=group)
        b.add(f"{label} Foot", (side * 0.32, 0.28, 0.15), (0.35, 0.2, 0.5), multiplier=0.75, group=group)

    for orb in range(6):
        angle = (orb / 6) * math.pi * 2
        b.add(f"Control Orb {orb}", (math.cos(angle) * 0.95, 3.2 + math.sin(orb * 1.2) * 0.4, math.sin(angle) * 0.85),
              (0.1, 0.1, 0.1), "glow" if orb % 2 == 0 else "secondary", 2.5, emissive=2.5, group="effects")
    for aura in range(12):
        angle = (aura / 12) * math.pi * 2
        b.add(f"Aura Particle {aura}", (math.cos(angle) * 1.1, 2.0 + math.sin(aura * 1.5) * 1.5, math.sin(angle) * 1.0),
              (0.04, 0.06, 0.04), "glow" if aura % 2 == 0 else "secondary", 2, emissive=2, group="effects")

    return b.build(["head", "torso", "arm_left", "arm_right", "leg_left", "leg_right", "effects"])
