"""
Nature Generators

Environment pieces: trees, crystals, mushrooms, volcanic and frozen terrain,
and ruins.

Unlike the creature generators these do not scale uniformly: `scale` feeds
the shape formulas (trunk height, cap radius, layer count) while slab
thicknesses stay fixed, so a larger oak gets more trunk segments rather than
thicker ones. Ruins are sized in world units by `width, height, depth`.

Most terrain pieces vary per call (weathering, shimmer, scattered rocks) and
take an `rng`; the rest are deterministic.
"""

from typing import Iterator, Optional
import logging
import math

import numpy as np

from ..model import VoxelModel
from .builder import ModelBuilder, resolve_rng, sanitize_scale

logger = logging.getLogger(__name__)


BARK = "#331e0d"
PINE_NEEDLES = "#0d331a"


def _frange(start: float, stop: float, step: float, inclusive: bool = False) -> Iterator[float]:
    """Accumulating float range; values drift exactly as a running sum does."""
    value = start
    while value < stop or (inclusive and value <= stop):
        yield value
        value += step


def _rgb(r: float, g: float, b: float) -> str:
    """CSS rgb() string from 0-1 channels (floored to bytes)."""
    return f"rgb({math.floor(r * 255)}, {math.floor(g * 255)}, {math.floor(b * 255)})"


def _hsl(hue: int, saturation: int, lightness: float) -> str:
    return f"hsl({hue}, {saturation}%, {math.floor(lightness)}%)"


def _grey(level: float) -> str:
    return _rgb(level, level, level)


# ============================================================================
# Trees
# ============================================================================

def _trunk(b: ModelBuilder, height: float, width, color: str = BARK) -> None:
    for y in _frange(0, height, 0.5):
        w = width(y) if callable(width) else width
        b.add(f"Trunk {math.floor(y * 2)}", (0, y, 0), (w, 0.5, w), color, group="trunk")


def create_oak_tree_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Broadleaf tree: bark trunk under four shrinking round canopy layers."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("oak")

    trunk_height = scale * 6
    _trunk(b, trunk_height, 0.3 * scale)

    step = scale * 0.8
    for layer in range(4):
        layer_y = trunk_height + layer * scale * 1.2
        radius = (4 - layer) * scale * 1.5
        for lx in _frange(-radius, radius, step, inclusive=True):
            for lz in _frange(-radius, radius, step, inclusive=True):
                if math.hypot(lx, lz) > radius:
                    continue
                b.add(f"Canopy {layer}_{math.floor(lx)}_{math.floor(lz)}", (lx, layer_y, lz),
                      (scale * 0.7, scale * 0.5, scale * 0.7), multiplier=0.7 + rng.random() * 0.3,
                      group="canopy")

    return b.build(["trunk", "canopy"])


def create_pine_tree_model(scale: float = 1.0) -> VoxelModel:
    """Conifer: rings of needles widening down the trunk."""
    scale = sanitize_scale(scale)
    b = ModelBuilder("pine")

    trunk_height = scale * 6
    _trunk(b, trunk_height, 0.3 * scale)

    for layer in range(5):
        layer_y = trunk_height - layer * scale * 0.8
        radius = layer * scale * 0.8 + scale * 0.5
        for angle in _frange(0, math.pi * 2, 0.5):
            b.add(f"Branch {layer}_{math.floor(angle * 10)}", (math.cos(angle) * radius, layer_y, math.sin(angle) * radius),
                  (scale * 0.5, scale * 0.3, scale * 0.5), PINE_NEEDLES, group="branches")

    return b.build(["trunk", "branches"])


def create_willow_tree_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Oak geometry; the willow look comes from its theme colors."""
    return create_oak_tree_model(scale, rng)


def create_cyber_tree_model(scale: float = 1.0) -> VoxelModel:
    """Synthetic tree with a banded glowing trunk and holographic leaf rings."""
    scale = sanitize_scale(scale)
    b = ModelBuilder("cyber_tree")

    trunk_height = scale * 6
    for y in _frange(0, trunk_height, 0.5):
        w = 0.3 * scale
        if y % 2 < 1:
            b.add(f"Trunk {math.floor(y * 2)}", (0, y, 0), (w, 0.5, w), "#0d1a14", group="trunk")
        else:
            b.add(f"Trunk {math.floor(y * 2)}", (0, y, 0), (w, 0.5, w), "glow", 2, emissive=1, group="trunk")

    for layer in range(3):
        layer_y = trunk_height + layer * scale * 1.5
        radius = (3 - layer) * scale
        for angle in _frange(0, math.pi * 2, 0.4):
            b.add(f"Hololeaf {layer}_{math.floor(angle * 10)}", (math.cos(angle) * radius, layer_y, math.sin(angle) * radius),
                  (scale * 0.4, scale * 0.2, scale * 0.4), "glow", 2, emissive=1, group="hololeaves")

    return b.build(["trunk", "hololeaves"])


def create_corrupted_tree_model(scale: float = 1.0) -> VoxelModel:
    """Twisted trunk with six spiralling branches of alternating corruption."""
    scale = sanitize_scale(scale)
    b = ModelBuilder("corrupted_tree")

    trunk_height = scale * 6
    _trunk(b, trunk_height, lambda y: (0.4 + math.sin(y * 0.5) * 0.2) * scale, "#26050d")

    for branch in range(6):
        angle = branch * math.pi / 3
        for seg in range(4):
            twist = angle + seg * 0.3
            reach = seg * scale * 0.8
            position = (math.cos(twist) * reach, trunk_height + seg * scale * 0.5, math.sin(twist) * reach)
            size = (scale * 0.3, scale * 0.4, scale * 0.3)
            if seg % 2 == 0:
                b.add(f"Branch {branch}_{seg}", position, size, "#660026", group="branches")
            else:
                b.add(f"Branch {branch}_{seg}", position, size, "glow", 2, emissive=1, group="branches")

    return b.build(["trunk", "branches"])


# ============================================================================
# Crystals
# ============================================================================

def create_crystal_cluster_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Five tapering crystals of random height around a center."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("crystal_cluster")

    for i in range(5):
        angle = (i / 5) * math.pi * 2
        dist = scale * 0.5
        height = scale * (1 + rng.random() * 2)
        for y in _frange(0, height, 0.3):
            taper = 1 - (y / height) * 0.8
            b.add(f"Crystal {i} Seg {math.floor(y * 3)}", (math.cos(angle) * dist, y, math.sin(angle) * dist),
                  (scale * 0.2 * taper, 0.3, scale * 0.2 * taper), "glow", 1 + y * 0.3, emissive=0.8,
                  group="crystals")

    return b.build(["crystals"])


def create_crystal_spire_model(scale: float = 1.0) -> VoxelModel:
    scale = sanitize_scale(scale)
    b = ModelBuilder("crystal_spire")

    height = scale * 4
    for y in _frange(0, height, 0.25):
        taper = 1 - (y / height) * 0.9
        b.add(f"Spire Seg {math.floor(y * 4)}", (0, y, 0), (scale * 0.4 * taper, 0.25, scale * 0.4 * taper),
              "glow", 1 + y * 0.2, emissive=0.9, group="spire")

    return b.build(["spire"])


def _bipyramid(b: ModelBuilder, scale: float, label: str, group: str, scan_color: Optional[str] = None) -> None:
    """Double-pointed gem, widest at mid height; optional alternating scan lines."""
    mid = scale
    for y in _frange(0, scale * 2, 0.2):
        dist = 1 - abs(y - mid) / mid
        size = (scale * 0.3 * dist, 0.2, scale * 0.3 * dist)
        name = f"{label} Seg {math.floor(y * 5)}"
        if scan_color is None:
            b.add(name, (0, y, 0), size, "glow", 1 + dist, emissive=1, group=group)
        elif y % 0.4 < 0.2:
            b.add(name, (0, y, 0), size, scan_color, 2, emissive=1, group=group)
        else:
            b.add(name, (0, y, 0), size, "glow", 1, emissive=1, group=group)


def create_floating_crystal_model(scale: float = 1.0) -> VoxelModel:
    scale = sanitize_scale(scale)
    b = ModelBuilder("floating_crystal")
    _bipyramid(b, scale, "Float", "gem")
    return b.build(["gem"])


def create_data_shard_model(scale: float = 1.0) -> VoxelModel:
    """Floating-crystal shape striped with yellow scan lines."""
    scale = sanitize_scale(scale)
    b = ModelBuilder("data_shard")
    _bipyramid(b, scale, "Shard", "shard", scan_color="#ffff00")
    return b.build(["shard"])


# ============================================================================
# Mushrooms
# ============================================================================

def _mushroom(b: ModelBuilder, scale: float, stem_color: str, cap) -> None:
    """Widening stem, four-layer disc cap, ring of glowing gills underneath."""
    stem_height = scale * 3
    for y in _frange(0, stem_height, 0.3):
        width = scale * 0.3 * (1 + (y / stem_height) * 0.3)
        b.add(f"Stem {math.floor(y * 3)}", (0, y, 0), (width, 0.3, width), stem_color, group="stem")

    for layer in range(4):
        layer_y = stem_height + layer * scale * 0.3
        radius = scale * (1.5 - layer * 0.2)
        for angle in _frange(0, math.pi * 2, 0.4):
            for r in _frange(0, radius, scale * 0.3):
                color, multiplier, emissive = cap()
                b.add(f"Cap {layer}_{math.floor(angle * 10)}_{math.floor(r * 3)}",
                      (math.cos(angle) * r, layer_y, math.sin(angle) * r),
                      (scale * 0.35, scale * 0.2, scale * 0.35), color, multiplier, emissive=emissive, group="cap")

    radius = scale * 1.2
    for angle in _frange(0, math.pi * 2, 0.3):
        b.add(f"Underglow {math.floor(angle * 10)}", (math.cos(angle) * radius, stem_height - 0.2, math.sin(angle) * radius),
              (scale * 0.2, 0.1, scale * 0.2), "glow", 3, emissive=1, group="underglow")


def create_giant_mushroom_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Pale-stemmed mushroom whose cap is speckled with glowing spots."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("mushroom")

    def spotted():
        if rng.random() > 0.7:
            return "glow", 2, 1
        return "primary", 1, 0

    _mushroom(b, scale, "#e6d9bf", spotted)
    return b.build(["stem", "cap", "underglow"])


def create_corrupted_mushroom_model(scale: float = 1.0) -> VoxelModel:
    scale = sanitize_scale(scale)
    b = ModelBuilder("corrupted_mushroom")
    _mushroom(b, scale, "#3d2626", lambda: ("#ff0088", 1, 0))
    return b.build(["stem", "cap", "underglow"])


# ============================================================================
# Volcanic terrain
# ============================================================================

def create_lava_pillar_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Wobbling rock column with lava seams in its lower third."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("lava_pillar")

    height = scale * 8 + 5
    for y in _frange(0, height, 0.4):
        taper = 1 - (y / height) * 0.6
        wobble = math.sin(y * 0.5) * 0.3
        position = (wobble + math.sin(y * 0.15) * scale * 0.2, y, math.cos(y * 0.15) * scale * 0.2)
        size = (scale * 0.6 * taper, 0.4, scale * 0.6 * taper)
        # Short-circuit: the roll only happens in the lower third
        if y < height * 0.3 and rng.random() > 0.7:
            b.add(f"Pillar Seg {math.floor(y * 2.5)}", position, size, "glow", 2, emissive=1, group="pillar")
        else:
            b.add(f"Pillar Seg {math.floor(y * 2.5)}", position, size, "#331100", 0.6 + y * 0.02, group="pillar")

    return b.build(["pillar"])


def create_obsidian_spire_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("obsidian_spire")

    height = scale * 12
    for y in _frange(0, height, 0.3):
        taper = 1 - (y / height) * 0.95
        shine = 0.1 + rng.random() * 0.15
        b.add(f"Obsidian Seg {math.floor(y * 3)}", (0, y, 0), (scale * 0.3 * taper, 0.3, scale * 0.3 * taper),
              _rgb(shine, shine * 0.5, shine + 0.05), group="obsidian")

    return b.build(["obsidian"])


def create_volcanic_vent_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Bulging chimney, molten at the top, with drifting smoke puffs."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("volcanic_vent")

    height = scale * 5
    for y in _frange(0, height, 0.35):
        bulge = 1 + math.sin(y * 0.8) * 0.2
        size = (scale * 0.8 * bulge, 0.35, scale * 0.8 * bulge)
        if y > height * 0.7:
            b.add(f"Vent Seg {math.floor(y * 3)}", (0, y, 0), size, "glow", 2, emissive=1, group="vent")
        else:
            b.add(f"Vent Seg {math.floor(y * 3)}", (0, y, 0), size, "#442200", group="vent")

    for i in range(5):
        x = (rng.random() - 0.5) * scale
        z = (rng.random() - 0.5) * scale
        sx = 0.3 + rng.random() * 0.3
        sz = 0.3 + rng.random() * 0.3
        b.add(f"Smoke {i}", (x, height + i * 0.8, z), (sx, 0.3, sz), "#33261a", group="smoke")

    return b.build(["vent", "smoke"])


def create_magma_pool_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Disc of glowing lava tiles in uneven heat, ringed by rocks."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("magma_pool")

    radius = scale
    for x in _frange(-radius, radius, 0.8, inclusive=True):
        for z in _frange(-radius, radius, 0.8, inclusive=True):
            if x * x + z * z < radius * radius * 0.8:
                heat = 0.8 + rng.random() * 0.4
                b.add(f"Lava {math.floor(x + radius)}_{math.floor(z + radius)}", (x, 0.1, z), (0.8, 0.2, 0.8),
                      _hsl(20, 100, heat * 50), 2, emissive=1, group="lava")

    for angle in _frange(0, math.pi * 2, 0.3):
        dist = radius + 0.5 + rng.random() * 0.5
        rim_height = 0.3 + rng.random() * 0.8
        sx = 0.6 + rng.random() * 0.4
        sz = 0.6 + rng.random() * 0.4
        b.add(f"Rim {math.floor(angle * 10)}", (math.cos(angle) * dist, rim_height / 2, math.sin(angle) * dist),
              (sx, rim_height, sz), "#261408", group="rim")

    return b.build(["lava", "rim"])


def create_ash_mound_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Heap of grey ash; radii and shades vary per call."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("ash_mound")

    layers = math.floor(scale * 3)
    for layer in range(layers):
        radius = scale * (1 - layer / layers)
        y = layer * 0.4
        for angle in _frange(0, math.pi * 2, 0.5):
            dist = radius * (0.7 + rng.random() * 0.3)
            gray = 0.1 + rng.random() * 0.1
            b.add(f"Ash {layer}_{math.floor(angle * 10)}", (math.cos(angle) * dist, y, math.sin(angle) * dist),
                  (0.5, 0.4, 0.5), _grey(gray), group="ash")

    return b.build(["ash"])


def create_lava_rock_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Three to six scattered dark rock chunks, occasionally molten."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("lava_rock")

    parts = 3 + math.floor(rng.random() * 4)
    for i in range(parts):
        ox = (rng.random() - 0.5) * scale * 0.8
        oy = rng.random() * scale * 0.5
        oz = (rng.random() - 0.5) * scale * 0.8
        size = scale * (0.3 + rng.random() * 0.4)
        molten = rng.random() > 0.85
        dark = 0.08 + rng.random() * 0.1
        if molten:
            b.add(f"Rock Part {i}", (ox, oy, oz), (size, size * 0.7, size), "glow", 2, emissive=1, group="rock")
        else:
            b.add(f"Rock Part {i}", (ox, oy, oz), (size, size * 0.7, size), _rgb(dark * 1.5, dark, dark * 0.5),
                  group="rock")

    return b.build(["rock"])


# ============================================================================
# Frozen terrain
# ============================================================================

def create_ice_spire_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Faceted ice needle brightening toward the tip, with random shimmer."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("ice_spire")

    height = scale * 10 + 4
    for y in _frange(0, height, 0.35):
        taper = 1 - (y / height) * 0.9
        position = (math.sin(y * 2) * 0.1, y, math.cos(y * 2) * 0.1)
        size = (scale * 0.35 * taper, 0.35, scale * 0.35 * taper)
        if rng.random() > 0.8:
            b.add(f"Ice Seg {math.floor(y * 3)}", position, size, "glow", 2, emissive=0.8, group="spire")
        else:
            brightness = 0.5 + (y / height) * 0.5
            b.add(f"Ice Seg {math.floor(y * 3)}", position, size, _hsl(200, 60, brightness * 70), group="spire")

    return b.build(["spire"])


def create_glacier_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Low ice sheet, thickest at the center, lighter toward the surface."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("glacier")

    length, width, height = scale * 1.5, scale, scale * 0.6
    for x in _frange(-length / 2, length / 2, 0.8):
        for z in _frange(-width / 2, width / 2, 0.8):
            falloff = math.hypot(x, z) / max(length, width)
            local_height = height * (1 - falloff * 0.8) * (0.7 + rng.random() * 0.6)
            for y in _frange(0, local_height, 0.6):
                depth = 0.4 + (y / local_height) * 0.4
                b.add(f"Glacier {math.floor(x + length)}_{math.floor(z + width)}_{math.floor(y)}", (x, y, z),
                      (0.8, 0.6, 0.8), _hsl(200, 40, (depth + 0.1) * 60), group="glacier")

    return b.build(["glacier"])


def create_snow_mound_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("snow_mound")

    layers = math.floor(scale * 2.5)
    for layer in range(layers):
        radius = scale * (1 - (layer / layers) * 0.7)
        y = layer * 0.35
        for angle in _frange(0, math.pi * 2, 0.4):
            dist = radius * (0.6 + rng.random() * 0.4)
            white = 0.85 + rng.random() * 0.15
            b.add(f"Snow {layer}_{math.floor(angle * 10)}", (math.cos(angle) * dist, y, math.sin(angle) * dist),
                  (0.5, 0.35, 0.5), _grey(white), group="snow")
    b.add("Snow Top", (0, layers * 0.35, 0), (scale * 0.4, 0.3, scale * 0.4), "#f2f2ff", group="snow")

    return b.build(["snow"])


def create_frozen_pillar_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("frozen_pillar")

    height = scale * 7
    for y in _frange(0, height, 0.4):
        bulge = 1 + math.sin(y * 0.3) * 0.15
        ice_blue = 0.4 + (y / height) * 0.3 + rng.random() * 0.1
        b.add(f"Pillar Seg {math.floor(y * 2.5)}", (0, y, 0), (scale * 0.5 * bulge, 0.4, scale * 0.5 * bulge),
              _hsl(200, 50, ice_blue * 60), group="pillar")

    return b.build(["pillar"])


def create_ice_crystal_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Three to six leaning crystals; count, height and lean vary per call."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("ice_crystal")

    count = 3 + math.floor(rng.random() * 4)
    for i in range(count):
        angle = (i / count) * math.pi * 2 + rng.random() * 0.5
        dist = scale * 0.3
        crystal_height = scale * (1.5 + rng.random() * 2)
        tilt = rng.random() * 0.3
        for y in _frange(0, crystal_height, 0.25):
            taper = 1 - (y / crystal_height) * 0.85
            position = (math.cos(angle) * dist + math.sin(y * tilt) * 0.1, y,
                        math.sin(angle) * dist + math.cos(y * tilt) * 0.1)
            size = (scale * 0.15 * taper, 0.25, scale * 0.15 * taper)
            name = f"Crystal {i} Seg {math.floor(y * 4)}"
            if rng.random() > 0.85:
                b.add(name, position, size, "glow", 2, emissive=0.8, group="crystals")
            else:
                b.add(name, position, size, "#aaddff", 0.9, group="crystals")

    return b.build(["crystals"])


def create_snowdrift_model(scale: float = 1.0, rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Wind-blown drift rising toward +X and thinning toward its edges."""
    scale = sanitize_scale(scale)
    rng = resolve_rng(rng)
    b = ModelBuilder("snowdrift")

    length, width, height = scale * 2, scale * 0.8, scale * 0.4
    for x in _frange(-length / 2, length / 2, 0.5):
        for z in _frange(-width / 2, width / 2, 0.5):
            dist_z = abs(z) / (width / 2)
            dist_x = (x + length / 2) / length
            local_height = height * (1 - dist_z * 0.7) * (0.3 + dist_x * 0.7)
            if local_height > 0.1:
                white = 0.88 + rng.random() * 0.12
                b.add(f"Drift {math.floor(x + length)}_{math.floor(z + width)}", (x, local_height / 2, z),
                      (0.5, local_height, 0.5), _rgb(white, white, white + 0.02), group="drift")

    return b.build(["drift"])


# ============================================================================
# Ruins
# ============================================================================

# Ruin dimensions are world units; larger requests are clamped
MAX_RUIN_EXTENT = 200.0


def _ruin_dimensions(width, height, depth, defaults):
    """Sanitized (width, height, depth), each in [MIN_SCALE, MAX_RUIN_EXTENT]."""
    dims = []
    for name, value, default in zip(("width", "height", "depth"), (width, height, depth), defaults):
        value = sanitize_scale(value, default, name)
        if value > MAX_RUIN_EXTENT:
            logger.warning("Ruin %s %r clamped to %s", name, value, MAX_RUIN_EXTENT)
            value = MAX_RUIN_EXTENT
        dims.append(value)
    return tuple(dims)


def _weathered_column(b: ModelBuilder, rng: np.random.Generator, width: float, height: float, depth: float) -> None:
    for y in _frange(0, height, 0.5):
        damage = 0.7 if rng.random() > 0.8 else 1
        shade = 0.8 + rng.random() * 0.2
        b.add(f"Pillar Seg {math.floor(y * 2)}", (0, y, 0), (width * damage, 0.5, depth * damage),
              multiplier=shade, group="pillar")


def create_pillar_ruin_model(width: float = 3, height: float = 15, depth: float = 3, scale: float = 1.0,
                             rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Weathered stone column; some segments are chipped to 70% width."""
    width, height, depth = _ruin_dimensions(width, height, depth, (3, 15, 3))
    b = ModelBuilder("pillar_ruin", scale)
    _weathered_column(b, resolve_rng(rng), width, height, depth)
    return b.build(["pillar"])


def create_tech_pillar_model(width: float = 2.5, height: float = 14, depth: float = 2.5, scale: float = 1.0,
                             rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Weathered column with a strip of glowing runes on its +X face."""
    width, height, depth = _ruin_dimensions(width, height, depth, (2.5, 14, 2.5))
    b = ModelBuilder("tech_pillar", scale)
    _weathered_column(b, resolve_rng(rng), width, height, depth)
    for y in _frange(1, height - 1, 2):
        b.add(f"Rune {math.floor(y / 2)}", (width / 2 + 0.1, y, 0), (0.05, 0.3, 0.2), "glow", 2, emissive=1,
              group="runes")
    return b.build(["pillar", "runes"])


def create_arch_ruin_model(width: float = 8, height: float = 12, depth: float = 3, scale: float = 1.0) -> VoxelModel:
    width, height, depth = _ruin_dimensions(width, height, depth, (8, 12, 3))
    b = ModelBuilder("arch_ruin", scale)
    for label, x in (("Left", -width / 2 + 1), ("Right", width / 2 - 1)):
        for y in _frange(0, height, 0.5):
            b.add(f"{label} Column {math.floor(y * 2)}", (x, y, 0), (1.5, 0.5, depth), group="columns")
    for x in _frange(-width / 2, width / 2, 0.8):
        b.add(f"Lintel {math.floor(x + width / 2)}", (x, height, 0), (0.8, 1, depth), group="lintel")
    return b.build(["columns", "lintel"])


def create_wall_ruin_model(width: float = 12, height: float = 7, depth: float = 2, scale: float = 1.0,
                           rng: Optional[np.random.Generator] = None) -> VoxelModel:
    """Crumbling wall: one-unit columns, each broken off at 50-100% height."""
    width, height, depth = _ruin_dimensions(width, height, depth, (12, 7, 2))
    rng = resolve_rng(rng)
    b = ModelBuilder("wall_ruin", scale)
    x = 0
    while x < width:
        wall_height = height * (0.5 + rng.random() * 0.5)
        for y in _frange(0, wall_height, 0.8):
            b.add(f"Wall {x}_{math.floor(y)}", (-width / 2 + x, y, 0), (0.9, 0.8, depth),
                  multiplier=0.7 + rng.random() * 0.3, group="wall")
        x += 1
    return b.build(["wall"])


def _temple(b: ModelBuilder, width: float, height: float, depth: float) -> None:
    """Tiled foundation, three hollow step rings and a stacked central tower."""
    for x in _frange(-width / 2, width / 2, 2):
        for z in _frange(-depth / 2, depth / 2, 2):
            b.add(f"Floor {math.floor(x + width / 2)}_{math.floor(z + depth / 2)}", (x, 0, z), (2, 1, 2),
                  multiplier=0.8, group="foundation")

    for step in range(3):
        step_w = width - step * 4
        step_d = depth - step * 4
        for x in _frange(-step_w / 2, step_w / 2, 2):
            for z in _frange(-step_d / 2, step_d / 2, 2):
                # Only the outer ring of each step
                if abs(x) < step_w / 2 - 1 and abs(z) < step_d / 2 - 1:
                    continue
                b.add(f"Step {step}_{math.floor(x)}_{math.floor(z)}", (x, step + 1, z), (2, 1, 2), group="steps")

    for y in _frange(0, height * 0.6, 1):
        b.add(f"Tower {y:g}", (0, 4 + y, 0), (width * 0.3, 1, depth * 0.3), group="tower")


def create_temple_piece_model(width: float = 40, height: float = 25, depth: float = 35,
                              scale: float = 1.0) -> VoxelModel:
    width, height, depth = _ruin_dimensions(width, height, depth, (40, 25, 35))
    b = ModelBuilder("temple", scale)
    _temple(b, width, height, depth)
    return b.build(["foundation", "steps", "tower"])


def create_tech_temple_model(width: float = 35, height: float = 22, depth: float = 30,
                             scale: float = 1.0) -> VoxelModel:
    """Temple with glowing rune bands across the tower front."""
    width, height, depth = _ruin_dimensions(width, height, depth, (35, 22, 30))
    b = ModelBuilder("tech_temple", scale)
    _temple(b, width, height, depth)
    for y in _frange(1, height * 0.5, 2):
        b.add(f"Tech Rune {math.floor(y / 2)}", (0, 4 + y, depth * 0.15 + 0.1), (width * 0.25, 0.1, 0.05),
              "glow", 2, emissive=1, group="tech")
    return b.build(["foundation", "steps", "tower", "tech"])


def create_statue_ruin_model(width: float = 4, height: float = 10, depth: float = 4, scale: float = 1.0) -> VoxelModel:
    width, height, depth = _ruin_dimensions(width, height, depth, (4, 10, 4))
    b = ModelBuilder("statue", scale)
    b.add("Pedestal", (0, 0, 0), (width * 1.2, 1, depth * 1.2), group="base")
    for y in _frange(1, height * 0.7, 0.5):
        b.add(f"Body {math.floor(y * 2)}", (0, y, 0), (width * 0.6, 0.5, depth * 0.6), group="body")
    b.add("Head", (0, height * 0.8, 0), (width * 0.4, height * 0.2, depth * 0.4), group="body")
    for label, side in (("Left", -1), ("Right", 1)):
        b.add(f"{label} Eye", (side * width * 0.1, height * 0.85, depth * 0.2), (0.15, 0.15, 0.1), "glow", 2,
              emissive=1, group="eyes")
    return b.build(["base", "body", "eyes"])
