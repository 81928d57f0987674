"""
Character Generators

The friendly cast: a generic townsperson (NPC) and the player avatar. Both
are built from 0.08-ish unit voxels on rings, which reads as a rounder
silhouette than the slab-built enemies.
"""

from ..model import VoxelModel
from .builder import SIDES, ModelBuilder, side_label, side_tag


def create_npc_model(scale: float = 1.0) -> VoxelModel:
    """Townsperson with a three-segment glowing visor."""
    b = ModelBuilder("npc", scale)
    cube = (0.08, 0.08, 0.08)

    b.ring("Head", 6, 0.12, 1.7, cube, group="head")
    for i in range(3):
        b.add(f"Visor {i}", (-0.04 + i * 0.04, 1.72, 0.12), cube, "glow", 2.5, emissive=1, group="head")

    for y in range(5):
        b.ring(f"Torso {y}", 5, 0.18, 1.35 - y * 0.12, cube, "secondary" if y < 3 else "primary")

    for side in SIDES:
        label, tag = side_label(side), side_tag(side)
        for i in range(6):
            b.add(f"{label} Arm {i}", (side * 0.3, 1.25 - i * 0.1, 0), cube, "secondary" if i < 3 else "primary",
                  group=f"arm_{tag}")
    for side in SIDES:
        label, tag = side_label(side), side_tag(side)
        for i in range(6):
            b.add(f"{label} Leg {i}", (side * 0.1, 0.65 - i * 0.12, 0), cube, "secondary", group=f"leg_{tag}")

    return b.build(["head", "body", "arm_left", "arm_right", "leg_left", "leg_right"])


def create_player_model(scale: float = 1.0) -> VoxelModel:
    """
    Player avatar: helmeted head with a T-shaped visor, plated torso,
    shoulder pads, belt and boots.
    """
    b = ModelBuilder("player", scale)

    b.ring("Head", 8, 0.12, 1.7, (0.08, 0.1, 0.08), group="head")
    b.add("Helmet Top", (0, 1.8, 0), (0.14, 0.08, 0.14), "secondary", group="head")
    visor = (0.04, 0.04, 0.04)
    for i in range(5):
        b.add(f"Visor H {i}", (-0.08 + i * 0.04, 1.72, 0.14), visor, "glow", 2.5, emissive=1, group="head")
    for i in range(2):
        b.add(f"Visor V {i}", (0, 1.68 - i * 0.04, 0.14), visor, "glow", 2.5, emissive=1, group="head")

    b.add("Neck", (0, 1.55, 0), (0.08, 0.08, 0.08), multiplier=0.8)
    for y in range(4):
        b.ring(f"Upper Torso {y}", 6, 0.2 - y * 0.02, 1.45 - y * 0.1, (0.1, 0.1, 0.1), "secondary")
    for y in range(3):
        b.ring(f"Lower Torso {y}", 5, 0.15, 1.0 - y * 0.12, (0.08, 0.1, 0.08))

    for side in SIDES:
        label, tag = side_label(side), side_tag(side)
        b.add(f"{label} Shoulder", (side * 0.28, 1.42, 0), (0.12, 0.08, 0.12), "secondary", 1.1, group=f"arm_{tag}")
    for side in SIDES:
        label, tag = side_label(side), side_tag(side)
        for i in range(7):
            b.add(f"{label} Arm {i}", (side * 0.28, 1.32 - i * 0.1, 0), (0.08, 0.1, 0.08),
                  "secondary" if i < 4 else "primary", group=f"arm_{tag}")
        b.add(f"{label} Hand", (side * 0.28, 0.58, 0.04), (0.06, 0.08, 0.1), multiplier=0.9, group=f"arm_{tag}")

    b.ring("Belt", 8, 0.16, 0.7, (0.06, 0.08, 0.06), "secondary", 0.7)

    for side in SIDES:
        label, tag = side_label(side), side_tag(side)
        for i in range(7):
            b.add(f"{label} Leg {i}", (side * 0.1, 0.6 - i * 0.1, 0), (0.09, 0.1, 0.09),
                  "secondary" if i < 3 else "primary", group=f"leg_{tag}")
        b.add(f"{label} Boot", (side * 0.1, 0.05, 0.03), (0.1, 0.1, 0.15), "secondary", 0.6, group=f"leg_{tag}")

    return b.build(["head", "body", "arm_left", "arm_right", "leg_left", "leg_right"])
