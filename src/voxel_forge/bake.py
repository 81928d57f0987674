"""
Light Baking Engine with Numba JIT Compilation

Converts a model's theme-referencing boxes into static pre-lit colors so the
game can render it with an unlit material.

Per voxel:
1. Resolve the base color (theme slot or custom color) times its multiplier
2. accumulated = base * ambient
3. + base * light * dot_factor for each directional light
4. + base * light * attenuation * dot_factor for each point light in range
5. * occlusion factor (boxes close by and strictly above)
6. + base * emissive_intensity * 0.5 for glowing boxes
7. Clamp, gamma correct, clamp

Per-voxel terms are independent, so the shading and occlusion kernels run
in parallel over voxels. The occlusion count is O(n^2); above
`spatial_index_threshold` boxes a cKDTree ball query replaces the brute
force kernel with the same strict `< radius` / `y > y0` tests.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple, Union
import logging
import math
import time

import numpy as np
from numba import njit, prange
from scipy.spatial import cKDTree

from .color import ThemeColors, gamma_correct, resolve_box_color, rgb255_to_hex
from .errors import BakeOptionsError
from .lighting import EDITOR_RIG, FACE_NORMALS, LightingRig, face_dot_factor
from .model import BoxColor, VoxelBox, VoxelModel

logger = logging.getLogger(__name__)


OUTPUT_FORMATS = ("hex", "rgb", "normalized")

# Glowing boxes add base * intensity * EMISSIVE_SCALE
EMISSIVE_SCALE = 0.5

# camelCase wire key -> BakeOptions attribute
_OPTION_KEYS = {
    "includeAO": "include_ao",
    "aoStrength": "ao_strength",
    "bakeEmissive": "bake_emissive",
    "gamma": "gamma",
    "outputFormat": "output_format",
    "aoRadius": "ao_radius",
    "aoPenalty": "ao_penalty",
    "spatialIndexThreshold": "spatial_index_threshold",
}


@dataclass
class BakeOptions:
    """
    Bake configuration.

    Attributes:
        include_ao: Apply the occlusion heuristic
        ao_strength: Occlusion strength; 0 disables darkening
        bake_emissive: Add the emissive term for glowing boxes
        gamma: Display gamma, must be positive
        output_format: "hex", "rgb" or "normalized" (see BakedVoxel.formatted_color)
        ao_radius: Neighbor search radius of the occlusion heuristic
        ao_penalty: Per-neighbor darkening, multiplied by ao_strength
        spatial_index_threshold: Box count above which occlusion uses a cKDTree
    """

    include_ao: bool = True
    ao_strength: float = 0.5
    bake_emissive: bool = True
    gamma: float = 2.2
    output_format: str = "hex"
    ao_radius: float = 0.3
    ao_penalty: float = 0.2
    spatial_index_threshold: int = 2048

    def validate(self) -> "BakeOptions":
        for key in ("includeAO", "bakeEmissive"):
            value = getattr(self, _OPTION_KEYS[key])
            if not isinstance(value, (bool, np.bool_)):
                raise BakeOptionsError(f"{key} must be true or false, got {value!r}")
        for key in ("aoStrength", "gamma", "aoRadius", "aoPenalty"):
            value = getattr(self, _OPTION_KEYS[key])
            if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
                raise BakeOptionsError(f"{key} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise BakeOptionsError(f"{key} must be finite, got {value!r}")
        threshold = self.spatial_index_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, np.integer)) or threshold < 0:
            raise BakeOptionsError(f"spatialIndexThreshold must be a non-negative integer, got {threshold!r}")

        if self.gamma <= 0:
            raise BakeOptionsError(f"gamma must be positive, got {self.gamma}")
        if self.ao_strength < 0:
            raise BakeOptionsError(f"aoStrength must be >= 0, got {self.ao_strength}")
        if self.ao_radius <= 0:
            raise BakeOptionsError(f"aoRadius must be positive, got {self.ao_radius}")
        if self.ao_penalty < 0:
            raise BakeOptionsError(f"aoPenalty must be >= 0, got {self.ao_penalty}")
        if self.output_format not in OUTPUT_FORMATS:
            raise BakeOptionsError(
                f"Unknown output format: {self.output_format!r} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """camelCase dictionary, as recorded in bakingInfo.options."""
        values = asdict(self)
        return {
            key: values[attr]
            for key, attr in _OPTION_KEYS.items()
            if attr != "spatial_index_threshold"
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "BakeOptions":
        """
        Build options from camelCase (or snake_case) keys.

        Missing keys keep their defaults; unknown keys raise BakeOptionsError.
        """
        kwargs = {}
        for key, value in (data or {}).items():
            attr = _OPTION_KEYS.get(key, key)
            if attr not in cls.__dataclass_fields__:
                raise BakeOptionsError(f"Unknown bake option: {key!r}")
            kwargs[attr] = value
        return cls(**kwargs)


@dataclass
class BakedVoxel(VoxelBox):
    """
    A box with its lighting baked in.

    `color` is always a custom color holding `baked_color`, and
    `color_multiplier` is 1, so re-resolving the box yields `baked_color`.
    """

    baked_color: str = "#000000"
    baked_color_rgb: Tuple[int, int, int] = (0, 0, 0)
    original_color: str = "#000000"
    output_format: str = "hex"

    def formatted_color(self, output_format: Optional[str] = None) -> Union[str, Tuple]:
        """
        Baked color in the requested format.

        Args:
            output_format: "hex" (string), "rgb" (0-255 ints) or
                           "normalized" (0-1 floats); defaults to the
                           format the bake was run with

        Returns:
            Formatted color
        """
        fmt = output_format or self.output_format
        if fmt == "hex":
            return self.baked_color
        if fmt == "rgb":
            return tuple(self.baked_color_rgb)
        if fmt == "normalized":
            return tuple(c / 255.0 for c in self.baked_color_rgb)
        raise BakeOptionsError(f"Unknown output format: {fmt!r}")

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        data = super().to_dict(include_id)
        data.update({
            "bakedColor": self.baked_color,
            "bakedColorRGB": list(self.baked_color_rgb),
            "originalColor": self.original_color,
        })
        return data


@dataclass(frozen=True)
class BakingInfo:
    """Provenance of a bake: when, which rig, which options."""

    timestamp: int
    lighting_setup: str
    options: BakeOptions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "lightingSetup": self.lighting_setup,
            "options": self.options.to_dict(),
        }


@dataclass
class BakedVoxelModel:
    """Result of one bake call; consumed read-only by the exporters."""

    boxes: List[BakedVoxel]
    groups: List[str]
    baking_info: BakingInfo

    def __len__(self) -> int:
        return len(self.boxes)

    def to_model(self) -> VoxelModel:
        """The baked boxes as a plain model (custom-colored, theme independent)."""
        return VoxelModel(
            boxes=[
                VoxelBox(
                    id=b.id, name=b.name, position=b.position, scale=b.scale,
                    color=b.color, color_multiplier=b.color_multiplier,
                    emissive=b.emissive, emissive_intensity=b.emissive_intensity,
                    group=b.group,
                )
                for b in self.boxes
            ],
            groups=list(self.groups),
        )


@njit(cache=True, parallel=True)
def _shade_kernel(
    positions: np.ndarray,
    base: np.ndarray,
    ambient: np.ndarray,
    dir_weights: np.ndarray,
    point_positions: np.ndarray,
    point_colors: np.ndarray,
    point_params: np.ndarray,
    face_normals: np.ndarray
) -> np.ndarray:
    """
    Ambient, directional and point light terms per voxel.

    Args:
        positions: (N, 3) voxel centers
        base: (N, 3) resolved base colors
        ambient: (3,) ambient color * intensity
        dir_weights: (K, 3) directional color * intensity * dot factor
        point_positions: (P, 3) point light positions
        point_colors: (P, 3) point light color * intensity
        point_params: (P, 2) [decay, distance]
        face_normals: (6, 3) box face normals

    Returns:
        (N, 3) accumulated linear color
    """
    n = positions.shape[0]
    result = np.empty((n, 3), dtype=np.float64)

    for i in prange(n):
        for c in range(3):
            result[i, c] = base[i, c] * ambient[c]

        for k in range(dir_weights.shape[0]):
            for c in range(3):
                result[i, c] += base[i, c] * dir_weights[k, c]

        for k in range(point_positions.shape[0]):
            dx = point_positions[k, 0] - positions[i, 0]
            dy = point_positions[k, 1] - positions[i, 1]
            dz = point_positions[k, 2] - positions[i, 2]
            dist = math.sqrt(dx * dx + dy * dy + dz * dz)
            decay = point_params[k, 0]
            limit = point_params[k, 1]
            if dist > limit or dist == 0.0:
                continue

            dx /= dist
            dy /= dist
            dz /= dist
            attenuation = max(1.0 - dist / limit, 0.0) ** decay

            dot_sum = 0.0
            for f in range(face_normals.shape[0]):
                d = (face_normals[f, 0] * dx +
                     face_normals[f, 1] * dy +
                     face_normals[f, 2] * dz)
                if d > 0.0:
                    dot_sum += d
            factor = attenuation * dot_sum / face_normals.shape[0]

            for c in range(3):
                result[i, c] += base[i, c] * point_colors[k, c] * factor

    return result


@njit(cache=True, parallel=True)
def _occluder_counts(positions: np.ndarray, radius: float) -> np.ndarray:
    """
    Count, for each voxel, the other voxels closer than `radius` and strictly above it.
    """
    n = positions.shape[0]
    counts = np.zeros(n, dtype=np.int64)

    for i in prange(n):
        count = 0
        for j in range(n):
            if j == i:
                continue
            dx = positions[j, 0] - positions[i, 0]
            dy = positions[j, 1] - positions[i, 1]
            dz = positions[j, 2] - positions[i, 2]
            if math.sqrt(dx * dx + dy * dy + dz * dz) < radius and dy > 0.0:
                count += 1
        counts[i] = count

    return counts


def _occluder_counts_indexed(positions: np.ndarray, radius: float) -> np.ndarray:
    """cKDTree version of `_occluder_counts` for large models."""
    tree = cKDTree(positions)
    candidates = tree.query_ball_point(positions, r=radius)
    counts = np.zeros(len(positions), dtype=np.int64)

    for i, neighbors in enumerate(candidates):
        if len(neighbors) <= 1:
            continue
        idx = np.asarray(neighbors, dtype=np.int64)
        idx = idx[idx != i]
        delta = positions[idx] - positions[i]
        close = np.sqrt((delta ** 2).sum(axis=1)) < radius
        counts[i] = int(np.count_nonzero(close & (delta[:, 1] > 0)))

    return counts


def occluder_counts(positions: np.ndarray, options: BakeOptions) -> np.ndarray:
    """
    Number of occluding neighbors per voxel.

    Args:
        positions: (N, 3) voxel centers
        options: Bake options (radius and index threshold)

    Returns:
        (N,) int64 counts
    """
    positions = np.ascontiguousarray(positions, dtype=np.float64)
    if len(positions) == 0:
        return np.zeros(0, dtype=np.int64)
    if len(positions) > options.spatial_index_threshold:
        return _occluder_counts_indexed(positions, options.ao_radius)
    return _occluder_counts(positions, options.ao_radius)


def occlusion_factors(counts: np.ndarray, options: BakeOptions) -> np.ndarray:
    """1 - count * ao_strength * ao_penalty, floored at 0."""
    return np.maximum(0.0, 1.0 - counts * options.ao_strength * options.ao_penalty)


def _resolve_options(options: Union[BakeOptions, Dict[str, Any], None]) -> BakeOptions:
    if options is None:
        return BakeOptions()
    if isinstance(options, dict):
        options = BakeOptions.from_dict(options)
    return options.validate()


def bake_voxel_model(
    model: VoxelModel,
    primary_color: str,
    secondary_color: str,
    glow_color: str,
    options: Union[BakeOptions, Dict[str, Any], None] = None,
    rig: LightingRig = EDITOR_RIG,
    timestamp: Optional[int] = None
) -> BakedVoxelModel:
    """
    Bake the lighting rig into static per-box colors.

    Args:
        model: Model to bake (not modified)
        primary_color: Primary theme color string
        secondary_color: Secondary theme color string
        glow_color: Glow theme color string
        options: BakeOptions or a camelCase options dict
        rig: Lighting rig to approximate
        timestamp: Epoch milliseconds recorded in bakingInfo (default: now)

    Returns:
        BakedVoxelModel with one BakedVoxel per input box
    """
    options = _resolve_options(options)
    theme = ThemeColors(primary_color, secondary_color, glow_color)
    info = BakingInfo(
        timestamp=int(time.time() * 1000) if timestamp is None else int(timestamp),
        lighting_setup=rig.name,
        options=options,
    )

    if model.is_empty:
        logger.debug("Empty model, nothing to bake")
        return BakedVoxelModel(boxes=[], groups=list(model.groups), baking_info=info)

    start = time.perf_counter()
    n = len(model.boxes)

    # Color resolution fails fast on the first bad color string
    base = np.array([resolve_box_color(box, theme) for box in model.boxes], dtype=np.float64)
    positions = np.ascontiguousarray(model.positions())

    ambient = np.asarray(rig.ambient_color, dtype=np.float64) * rig.ambient_intensity
    _, dir_weights = rig.directional_arrays()
    point_positions, point_colors, point_params = rig.point_arrays()

    linear = _shade_kernel(
        positions, base, ambient,
        np.ascontiguousarray(dir_weights, dtype=np.float64),
        np.ascontiguousarray(point_positions, dtype=np.float64),
        np.ascontiguousarray(point_colors, dtype=np.float64),
        np.ascontiguousarray(point_params, dtype=np.float64),
        FACE_NORMALS,
    )

    if options.include_ao:
        strategy = "kdtree" if n > options.spatial_index_threshold else "brute-force"
        logger.debug("Occlusion over %d boxes using %s search", n, strategy)
        linear *= occlusion_factors(occluder_counts(positions, options), options)[:, np.newaxis]

    if options.bake_emissive:
        glow = np.array([
            box.emissive_intensity if box.glows else 0.0 for box in model.boxes
        ])
        linear += base * (glow * EMISSIVE_SCALE)[:, np.newaxis]

    final = gamma_correct(linear, options.gamma)
    rgb = np.floor(final * 255.0 + 0.5).astype(np.int64)
    original_rgb = np.floor(np.clip(base, 0.0, 1.0) * 255.0 + 0.5).astype(np.int64)

    baked_boxes = []
    for box, color_rgb, orig_rgb in zip(model.boxes, rgb, original_rgb):
        baked_rgb = (int(color_rgb[0]), int(color_rgb[1]), int(color_rgb[2]))
        baked_hex = rgb255_to_hex(baked_rgb)
        baked_boxes.append(BakedVoxel(
            id=box.id,
            name=box.name,
            position=box.position,
            scale=box.scale,
            color=BoxColor.custom(baked_hex),
            color_multiplier=1.0,
            emissive=box.emissive,
            emissive_intensity=box.emissive_intensity,
            group=box.group,
            baked_color=baked_hex,
            baked_color_rgb=baked_rgb,
            original_color=rgb255_to_hex(tuple(int(c) for c in orig_rgb)),
            output_format=options.output_format,
        ))

    logger.debug("Baked %d boxes in %.1f ms", n, (time.perf_counter() - start) * 1000)

    return BakedVoxelModel(boxes=baked_boxes, groups=list(model.groups), baking_info=info)


@dataclass
class BakeBreakdown:
    """
    Per-term contributions of one box, all float RGB before gamma.

    `linear` is the accumulated color right before gamma correction and
    `final` the displayed result.
    """

    box_id: str
    base: np.ndarray
    ambient: np.ndarray
    directional: List[np.ndarray] = field(default_factory=list)
    point: List[np.ndarray] = field(default_factory=list)
    occluders: int = 0
    occlusion: float = 1.0
    emissive: np.ndarray = field(default_factory=lambda: np.zeros(3))
    linear: np.ndarray = field(default_factory=lambda: np.zeros(3))
    final: np.ndarray = field(default_factory=lambda: np.zeros(3))

    @property
    def main(self) -> np.ndarray:
        return self.directional[0] if self.directional else np.zeros(3)

    @property
    def fill(self) -> np.ndarray:
        return self.directional[1] if len(self.directional) > 1 else np.zeros(3)


def bake_breakdown(
    box: VoxelBox,
    model: VoxelModel,
    theme: ThemeColors,
    options: Union[BakeOptions, Dict[str, Any], None] = None,
    rig: LightingRig = EDITOR_RIG
) -> BakeBreakdown:
    """
    Evaluate the bake terms for a single box without the JIT kernels.

    Args:
        box: Box to explain
        model: Model supplying the occlusion neighbors
        theme: Theme colors
        options: Bake options
        rig: Lighting rig

    Returns:
        BakeBreakdown with every intermediate term
    """
    options = _resolve_options(options)
    base = np.asarray(resolve_box_color(box, theme), dtype=np.float64)
    position = np.asarray(box.position, dtype=np.float64)

    ambient = base * np.asarray(rig.ambient_color) * rig.ambient_intensity
    directional = [
        base * np.asarray(light.color) * light.intensity * face_dot_factor(light.direction)
        for light in rig.directional
    ]

    point = []
    for light in rig.points:
        offset = np.asarray(light.position, dtype=np.float64) - position
        dist = float(np.linalg.norm(offset))
        if dist > light.distance or dist == 0.0:
            point.append(np.zeros(3))
            continue
        attenuation = max(1.0 - dist / light.distance, 0.0) ** light.decay
        point.append(
            base * np.asarray(light.color) * light.intensity
            * attenuation * face_dot_factor(offset / dist)
        )

    linear = ambient + sum(directional, np.zeros(3)) + sum(point, np.zeros(3))

    occluders = 0
    occlusion = 1.0
    if options.include_ao:
        for other in model.boxes:
            if other.id == box.id:
                continue
            delta = np.asarray(other.position) - position
            if np.linalg.norm(delta) < options.ao_radius and delta[1] > 0:
                occluders += 1
        occlusion = max(0.0, 1.0 - occluders * options.ao_strength * options.ao_penalty)
        linear = linear * occlusion

    emissive = np.zeros(3)
    if options.bake_emissive and box.glows:
        emissive = base * box.emissive_intensity * EMISSIVE_SCALE
        linear = linear + emissive

    return BakeBreakdown(
        box_id=box.id,
        base=base,
        ambient=ambient,
        directional=directional,
        point=point,
        occluders=occluders,
        occlusion=occlusion,
        emissive=emissive,
        linear=linear,
        final=gamma_correct(linear, options.gamma),
    )
