"""
Urban Prop Generators

Static street furniture for the city levels. Props are authored at game size
(the streetlight is 3.5 units tall); `scale` resizes them uniformly.

The terminal's text lines and the trash pile's debris are random per call
and take an `rng`.
"""

from typing import Optional
import math

import numpy as np

from ..model import VoxelModel
from .builder import SIDES, ModelBuilder, resolve_rng


def _lr(side: int) -> str:
    return "R" if side > 0 else "L"


def create_streetlight_model(scale: float = 1.0) -> VoxelModel:
    """Neon-lit lamp post with a glowing cone of light under the head."""
    b = ModelBuilder("streetlight", scale)

    b.add("Base", (0, 0.05, 0), (0.25, 0.1, 0.25), "secondary", 0.7, group="base")
    for seg in range(8):
        b.add(f"Pole {seg}", (0, 0.2 + seg * 0.4, 0), (0.08, 0.4, 0.08), multiplier=0.9, group="pole")
    for arm in range(3):
        b.add(f"Arm {arm}", (arm * 0.15, 3.4, 0), (0.15, 0.06, 0.06), multiplier=0.85, group="arm")

    b.add("Light Housing", (0.4, 3.35, 0), (0.12, 0.08, 0.15), multiplier=0.8, group="light")
    b.add("Light Bulb", (0.4, 3.28, 0), (0.1, 0.06, 0.12), "glow", 3, emissive=3, group="light")
    for cone in range(3):
        size = 0.12 + cone * 0.08
        strength = 1.5 - cone * 0.3
        b.add(f"Light Cone {cone}", (0.4, 3.15 - cone * 0.2, 0), (size, 0.15, size), "glow", strength,
              emissive=strength, group="light")

    return b.build(["base", "pole", "arm", "light"])


def create_terminal_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Street computer console; the screen's text lines have random lengths."""
    rng = resolve_rng(rng)
    b = ModelBuilder("terminal", scale)

    b.add("Base", (0, 0.08, 0), (0.35, 0.16, 0.3), multiplier=0.8, group="base")
    for seg in range(3):
        b.add(f"Tower {seg}", (0, 0.3 + seg * 0.25, 0), (0.3, 0.25, 0.25),
              "secondary" if seg == 1 else "primary", 0.9 if seg == 1 else 0.85, group="body")

    b.add("Screen Housing", (0, 1.1, 0.05), (0.35, 0.3, 0.08), multiplier=0.7, group="screen")
    b.add("Screen", (0, 1.1, 0.1), (0.3, 0.25, 0.02), "glow", 2, emissive=2, group="screen")
    for line in range(4):
        width = 0.2 + rng.random() * 0.08
        b.add(f"Text Line {line}", (-0.02, 1.18 - line * 0.05, 0.12), (width, 0.015, 0.01), "secondary", 3,
              emissive=3, group="screen")
    b.add("Status LED", (0.12, 0.95, 0.15), (0.03, 0.03, 0.02), "glow", 4, emissive=4, group="body")

    return b.build(["base", "body", "screen"])


def create_holo_ad_model(scale: float = 1.0) -> VoxelModel:
    """Floating holographic billboard over a projector."""
    b = ModelBuilder("holo_ad", scale)

    b.add("Projector Base", (0, 0.08, 0), (0.2, 0.16, 0.2), multiplier=0.8, group="projector")
    b.add("Projector Lens", (0, 0.2, 0), (0.1, 0.06, 0.1), "glow", 2, emissive=2, group="projector")

    for side in SIDES:
        for h in range(3):
            b.add(f"Frame {_lr(side)} {h}", (side * 0.35, 0.6 + h * 0.4, 0), (0.02, 0.4, 0.02), "glow", 1.5,
                  emissive=1.5, group="hologram")
    b.add("Frame Bottom", (0, 0.45, 0), (0.7, 0.02, 0.02), "glow", 1.5, emissive=1.5, group="hologram")
    b.add("Frame Top", (0, 1.75, 0), (0.7, 0.02, 0.02), "glow", 1.5, emissive=1.5, group="hologram")

    for panel in range(3):
        strength = 1.2 + panel * 0.2
        b.add(f"Content Panel {panel}", (0, 0.7 + panel * 0.35, 0), (0.6, 0.28, 0.02), "glow", strength,
              emissive=strength, group="content")
    for scan in range(6):
        b.add(f"Scanline {scan}", (0, 0.55 + scan * 0.22, 0.02), (0.55, 0.01, 0.01), "secondary", 2,
              emissive=2, group="content")

    for p in range(6):
        angle = (p / 6) * math.pi * 2
        b.add(f"Particle {p}", (math.cos(angle) * 0.4, 1.1 + math.sin(p * 2) * 0.2, math.sin(angle) * 0.15),
              (0.02, 0.02, 0.02), "glow", 2, emissive=2, group="effects")

    return b.build(["projector", "hologram", "content", "effects"])


def create_vehicle_model(scale: float = 1.0) -> VoxelModel:
    """Parked hover car, nose toward +X."""
    b = ModelBuilder("vehicle", scale)

    for bx in range(-2, 3):
        for bz in (-1, 0, 1):
            b.add(f"Body {bx}_{bz}", (bx * 0.25, 0.45, bz * 0.3), (0.25, 0.25, 0.3), group="body")
    for rx in (-1, 0, 1):
        b.add(f"Cabin {rx}", (rx * 0.25, 0.75, 0), (0.25, 0.25, 0.5), "secondary", 0.9, group="cabin")

    for side in SIDES:
        b.add(f"Window {_lr(side)}", (0, 0.78, side * 0.28), (0.6, 0.18, 0.02), "glow", 0.8, emissive=0.5,
              group="cabin")
    b.add("Windshield", (0.5, 0.72, 0), (0.06, 0.22, 0.45), "glow", 0.7, emissive=0.4, group="cabin")

    for side in SIDES:
        b.add(f"Headlight {_lr(side)}", (0.65, 0.42, side * 0.22), (0.05, 0.08, 0.1), "glow", 3, emissive=3,
              group="lights")
    for side in SIDES:
        b.add(f"Taillight {_lr(side)}", (-0.65, 0.42, side * 0.22), (0.05, 0.08, 0.1), "secondary", 2.5,
              emissive=2.5, group="lights")

    for fx in SIDES:
        for fz in SIDES:
            b.add(f"Hover Pad {fx}_{fz}", (fx * 0.4, 0.15, fz * 0.25), (0.15, 0.08, 0.15), "glow", 2, emissive=2,
                  group="hover")

    return b.build(["body", "cabin", "lights", "hover"])


def create_trash_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Debris pile with a few glowing tech scraps; the layout varies per call."""
    rng = resolve_rng(rng)
    b = ModelBuilder("trash", scale)

    for i in range(12):
        px = (rng.random() - 0.5) * 0.5
        pz = (rng.random() - 0.5) * 0.5
        size = 0.08 + rng.random() * 0.1
        b.add(f"Debris {i}", (px, 0.08 + i * 0.02, pz), (size, size * 0.6, size),
              "primary" if i % 2 == 0 else "secondary", 0.6 + rng.random() * 0.3, group="debris")
    for scrap in range(3):
        x = (rng.random() - 0.5) * 0.4
        z = (rng.random() - 0.5) * 0.4
        b.add(f"Tech Scrap {scrap}", (x, 0.15 + scrap * 0.05, z), (0.06, 0.04, 0.06), "glow", 1.5, emissive=1.5,
              group="debris")

    return b.build(["debris"])


def create_barrel_model(scale: float = 1.0) -> VoxelModel:
    """Octagonal industrial drum with a glowing hazard mark."""
    b = ModelBuilder("barrel", scale)

    for layer in range(4):
        middle = layer in (1, 2)
        b.ring(f"Body {layer}", 8, 0.18, 0.15 + layer * 0.2, (0.12, 0.2, 0.12),
               "primary" if middle else "secondary", 1 if middle else 0.85)
    b.add("Lid", (0, 0.95, 0), (0.35, 0.06, 0.35), "secondary", 0.8, group="lid")
    b.add("Warning Symbol", (0.22, 0.5, 0), (0.02, 0.15, 0.15), "glow", 2, emissive=2)

    return b.build(["body", "lid"])


def create_crate_model(scale: float = 1.0) -> VoxelModel:
    """3x2x3 checkered cargo crate, strapped, with a tech lock."""
    b = ModelBuilder("crate", scale)

    for cx in (-1, 0, 1):
        for cy in range(2):
            for cz in (-1, 0, 1):
                even = (cx + cy + cz) % 2 == 0
                b.add(f"Body {cx}_{cy}_{cz}", (cx * 0.22, 0.16 + cy * 0.28, cz * 0.22), (0.22, 0.28, 0.22),
                      "primary" if even else "secondary", 1 if even else 0.9)
    for side in SIDES:
        b.add(f"Strap V {_lr(side)}", (side * 0.35, 0.35, 0), (0.02, 0.6, 0.4), "secondary", 0.6, group="straps")
    b.add("Lock", (0.36, 0.35, 0), (0.04, 0.1, 0.1), "glow", 1.5, emissive=1.5)

    return b.build(["body", "straps"])


def create_bench_model(scale: float = 1.0) -> VoxelModel:
    b = ModelBuilder("bench", scale)

    for side in SIDES:
        for end in SIDES:
            b.add(f"Leg {_lr(side)}_{'F' if end > 0 else 'B'}", (side * 0.5, 0.15, end * 0.15), (0.06, 0.3, 0.06),
                  "secondary", 0.8, group="frame")
    for slat in range(4):
        b.add(f"Seat Slat {slat}", (0, 0.32, -0.12 + slat * 0.08), (1.1, 0.04, 0.07), group="seat")
    for slat in range(3):
        b.add(f"Back Slat {slat}", (0, 0.45 + slat * 0.1, -0.18), (1.1, 0.08, 0.04), multiplier=0.95, group="back")
    for side in SIDES:
        b.add(f"Armrest {_lr(side)}", (side * 0.52, 0.45, 0), (0.04, 0.06, 0.3), "secondary", 0.85, group="frame")

    return b.build(["frame", "seat", "back"])


def create_vending_model(scale: float = 1.0) -> VoxelModel:
    """Vending machine: lit display, alternating product rows, keypad."""
    b = ModelBuilder("vending", scale)

    for vx in (-1, 0, 1):
        for vy in range(5):
            b.add(f"Body {vx}_{vy}", (vx * 0.2, 0.2 + vy * 0.35, 0), (0.2, 0.35, 0.35),
                  "primary" if vx == 0 else "secondary", 1 if vx == 0 else 0.85)
    b.add("Display", (0, 1.2, 0.2), (0.5, 0.8, 0.02), "glow", 1.5, emissive=1.5, group="display")

    for row in range(3):
        for col in range(3):
            lit = (row + col) % 2 != 0
            b.add(f"Product {row}_{col}", ((col - 1) * 0.14, 0.9 + row * 0.25, 0.12), (0.1, 0.18, 0.1),
                  "glow" if lit else "secondary", 1.2 if lit else 1, emissive=1.2 if lit else 0, group="products")

    b.add("Keypad", (0.25, 0.7, 0.2), (0.12, 0.18, 0.04), "secondary", 0.7, group="controls")
    for btn in range(4):
        b.add(f"Button {btn}", (0.25, 0.62 + btn * 0.04, 0.23), (0.08, 0.025, 0.02), "glow", 2, emissive=2,
              group="controls")
    b.add("Slot", (0, 0.25, 0.2), (0.35, 0.15, 0.08), multiplier=0.5)

    return b.build(["body", "display", "products", "controls"])


def create_drone_pad_model(scale: float = 1.0) -> VoxelModel:
    """5x5 landing platform with corner lights and a central charge node."""
    b = ModelBuilder("drone_pad", scale)

    for px in range(-2, 3):
        for pz in range(-2, 3):
            edge = abs(px) == 2 or abs(pz) == 2
            b.add(f"Platform {px}_{pz}", (px * 0.18, 0.05, pz * 0.18), (0.18, 0.1, 0.18),
                  "secondary" if edge else "primary", 0.8 if edge else 1, group="platform")

    for cx in SIDES:
        for cz in SIDES:
            b.add(f"Corner Light {cx}_{cz}", (cx * 0.35, 0.12, cz * 0.35), (0.06, 0.04, 0.06), "glow", 2.5,
                  emissive=2.5, group="lights")

    b.add("Charge Node Base", (0, 0.12, 0), (0.15, 0.08, 0.15), "secondary", 0.9, group="charger")
    b.add("Charge Node Core", (0, 0.22, 0), (0.08, 0.12, 0.08), "glow", 2, emissive=2, group="charger")

    b.ring("Guide Line", 4, 0.25, 0.12, (0.25, 0.02, 0.03), "glow", 1.5, emissive=1.5, group="lights")

    return b.build(["platform", "lights", "charger"])


def create_power_node_model(scale: float = 1.0) -> VoxelModel:
    b = ModelBuilder("power_node", scale)

    b.add("Base", (0, 0.08, 0), (0.3, 0.16, 0.3), "secondary", 0.75, group="base")
    for seg in range(4):
        charged = seg == 2
        b.add(f"Pillar {seg}", (0, 0.25 + seg * 0.25, 0), (0.15, 0.25, 0.15), "glow" if charged else "primary",
              1.5 if charged else 1, emissive=1.5 if charged else 0, group="pillar")

    b.add("Energy Core", (0, 1.35, 0), (0.2, 0.2, 0.2), "glow", 3, emissive=3, group="core")
    b.ring("Energy Arc", 4, 0.25, 1.35, (0.03, 0.15, 0.03), "glow", 2.5, emissive=2.5, group="core")

    for side in SIDES:
        b.add(f"Warning {_lr(side)}", (side * 0.18, 0.2, 0.18), (0.04, 0.04, 0.04), "secondary", 3, emissive=3,
              group="base")

    return b.build(["base", "pillar", "core"])


def create_pipe_model(scale: float = 1.0) -> VoxelModel:
    """Horizontal pipe run on two brackets, with a pressure gauge."""
    b = ModelBuilder("pipe", scale)

    for seg in range(8):
        joint = seg in (0, 3, 7)
        girth = 0.18 if joint else 0.14
        b.add(f"Segment {seg}", (-0.7 + seg * 0.2, 0.5, 0), (0.2, girth, girth),
              "secondary" if joint else "primary", 0.85 if joint else 1, group="pipe")

    for x in (-0.5, 0.5):
        label = "R" if x > 0 else "L"
        b.add(f"Bracket {label}", (x, 0.35, 0), (0.06, 0.2, 0.08), "secondary", 0.7, group="supports")
        b.add(f"Bracket Base {label}", (x, 0.15, 0), (0.1, 0.1, 0.1), "secondary", 0.65, group="supports")

    b.add("Gauge", (0, 0.65, 0.1), (0.1, 0.1, 0.06), "secondary", 0.8, group="pipe")
    b.add("Gauge Display", (0, 0.65, 0.14), (0.06, 0.06, 0.02), "glow", 2, emissive=2, group="pipe")

    return b.build(["pipe", "supports"])


def create_vent_model(scale: float = 1.0) -> VoxelModel:
    b = ModelBuilder("vent", scale)

    frame = {
        "top": ((0, 0.55, 0), (0.75, 0.06, 0.08)),
        "bottom": ((0, 0.05, 0), (0.75, 0.06, 0.08)),
        "left": ((-0.35, 0.3, 0), (0.06, 0.5, 0.08)),
        "right": ((0.35, 0.3, 0), (0.06, 0.5, 0.08)),
    }
    for side, (position, size) in frame.items():
        b.add(f"Frame {side}", position, size, "secondary", 0.75, group="frame")
    for slat in range(6):
        b.add(f"Slat {slat}", (0, 0.12 + slat * 0.07, 0), (0.6, 0.04, 0.05), multiplier=0.85, group="slats")
    b.add("Air Flow", (0, 0.3, -0.04), (0.5, 0.35, 0.02), "glow", 0.8, emissive=0.8, group="interior")

    return b.build(["frame", "slats", "interior"])
