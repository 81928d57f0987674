"""
Lighting Rig Definitions

The bake approximates a fixed real-time rig: one ambient term, two
directional lights and a cyan point light above the model origin.

Voxels are treated as isotropic scatterers: a light's contribution is the
mean of max(0, n . d) over the six axis-aligned face normals, because every
box renders in-engine as a single flat-colored instance.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple
import numpy as np


class FaceDirection(IntEnum):
    """Face normal directions of a box."""
    WEST = 0    # -X
    EAST = 1    # +X
    DOWN = 2    # -Y
    UP = 3      # +Y
    BACK = 4    # -Z
    FRONT = 5   # +Z


# Normal vectors for each face direction
FACE_NORMALS = np.array([
    [-1, 0, 0],  # WEST
    [1, 0, 0],   # EAST
    [0, -1, 0],  # DOWN
    [0, 1, 0],   # UP
    [0, 0, -1],  # BACK
    [0, 0, 1],   # FRONT
], dtype=np.float64)


def normalize(v) -> np.ndarray:
    v = np.asarray(v, dtype=np.float64)
    norm = np.linalg.norm(v)
    if norm == 0:
        return np.zeros(3)
    return v / norm


def face_dot_factor(direction) -> float:
    """
    Average lit fraction of a box for a light arriving from `direction`.

    Args:
        direction: Unit vector pointing towards the light

    Returns:
        mean(max(0, n . d)) over the six face normals
    """
    dots = FACE_NORMALS @ np.asarray(direction, dtype=np.float64)
    return float(np.maximum(dots, 0.0).mean())


@dataclass(frozen=True)
class DirectionalLight:
    """Light from an infinitely distant source. `direction` is normalized on creation."""

    direction: Tuple[float, float, float]
    intensity: float
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)

    def __post_init__(self):
        object.__setattr__(self, "direction", tuple(normalize(self.direction)))


@dataclass(frozen=True)
class PointLight:
    """
    Light with range-limited falloff.

    Attenuation: max(1 - distance / distance_limit, 0) ** decay, and zero
    past `distance_limit`.
    """

    position: Tuple[float, float, float]
    intensity: float
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    decay: float = 2.0
    distance: float = 10.0


@dataclass(frozen=True)
class LightingRig:
    """Ambient term plus a set of directional and point lights."""

    name: str
    ambient_intensity: float = 0.4
    ambient_color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    directional: Tuple[DirectionalLight, ...] = field(default_factory=tuple)
    points: Tuple[PointLight, ...] = field(default_factory=tuple)

    def directional_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Pack directional lights for the bake kernel.

        Returns:
            (directions (K, 3), weighted colors (K, 3)) where each color row
            is color * intensity * face_dot_factor(direction)
        """
        if not self.directional:
            return np.zeros((0, 3)), np.zeros((0, 3))
        directions = np.array([light.direction for light in self.directional])
        weights = np.array([
            np.asarray(light.color) * light.intensity * face_dot_factor(light.direction)
            for light in self.directional
        ])
        return directions, weights

    def point_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Pack point lights for the bake kernel.

        Returns:
            (positions (K, 3), colors * intensity (K, 3),
             params (K, 2) holding [decay, distance])
        """
        if not self.points:
            return np.zeros((0, 3)), np.zeros((0, 3)), np.zeros((0, 2))
        positions = np.array([light.position for light in self.points], dtype=np.float64)
        colors = np.array([
            np.asarray(light.color, dtype=np.float64) * light.intensity
            for light in self.points
        ])
        params = np.array([[light.decay, light.distance] for light in self.points])
        return positions, colors, params


# The rig the editor preview renders with; bakes reproduce it
EDITOR_RIG = LightingRig(
    name="editor-default",
    ambient_intensity=0.4,
    directional=(
        DirectionalLight(direction=(5.0, 10.0, 5.0), intensity=0.8),    # main
        DirectionalLight(direction=(-5.0, 5.0, -5.0), intensity=0.3),   # fill
    ),
    points=(
        PointLight(
            position=(0.0, 3.0, 0.0),
            intensity=0.3,
            color=(0.0, 1.0, 1.0),
            decay=2.0,
            distance=10.0,
        ),
    ),
)
