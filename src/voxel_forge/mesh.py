"""
Merged Baked Mesh

Turns a baked model into one vertex-colored triangle mesh: every box becomes
a cube of 6 quads (24 vertices, 36 indices) scaled and translated into
place, colored with its baked color. With the lighting already baked in, the
whole model renders as one draw call with an unlit material.

Faces are not shared or culled between boxes; boxes overlap freely and each
one keeps its own flat color.
"""

from typing import NamedTuple, Tuple
import numpy as np

from .bake import BakedVoxelModel


VERTICES_PER_BOX = 24
INDICES_PER_BOX = 36


class MeshData(NamedTuple):
    """Container for mesh geometry data."""
    vertices: np.ndarray     # (N, 3) float32 positions
    normals: np.ndarray      # (N, 3) float32 normals
    colors: np.ndarray       # (N, 4) uint8 RGBA colors (sRGB)
    indices: np.ndarray      # (M,) uint32 triangle indices

    @property
    def box_count(self) -> int:
        return len(self.vertices) // VERTICES_PER_BOX

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3


# Unit cube corners per face, counter-clockwise seen from outside
_FACE_CORNERS = np.array([
    # +X
    [[0.5, -0.5, -0.5], [0.5, 0.5, -0.5], [0.5, 0.5, 0.5], [0.5, -0.5, 0.5]],
    # -X
    [[-0.5, -0.5, -0.5], [-0.5, -0.5, 0.5], [-0.5, 0.5, 0.5], [-0.5, 0.5, -0.5]],
    # +Y
    [[-0.5, 0.5, -0.5], [-0.5, 0.5, 0.5], [0.5, 0.5, 0.5], [0.5, 0.5, -0.5]],
    # -Y
    [[-0.5, -0.5, -0.5], [0.5, -0.5, -0.5], [0.5, -0.5, 0.5], [-0.5, -0.5, 0.5]],
    # +Z
    [[-0.5, -0.5, 0.5], [0.5, -0.5, 0.5], [0.5, 0.5, 0.5], [-0.5, 0.5, 0.5]],
    # -Z
    [[-0.5, -0.5, -0.5], [-0.5, 0.5, -0.5], [0.5, 0.5, -0.5], [0.5, -0.5, -0.5]],
], dtype=np.float32).reshape(VERTICES_PER_BOX, 3)

_FACE_NORMALS = np.repeat(np.array([
    [1, 0, 0], [-1, 0, 0],
    [0, 1, 0], [0, -1, 0],
    [0, 0, 1], [0, 0, -1],
], dtype=np.float32), 4, axis=0)

# Two triangles per quad
_BOX_INDICES = (
    np.array([0, 1, 2, 0, 2, 3], dtype=np.uint32)[None, :]
    + (np.arange(6, dtype=np.uint32) * 4)[:, None]
).reshape(INDICES_PER_BOX)


def empty_mesh() -> MeshData:
    return MeshData(
        vertices=np.zeros((0, 3), dtype=np.float32),
        normals=np.zeros((0, 3), dtype=np.float32),
        colors=np.zeros((0, 4), dtype=np.uint8),
        indices=np.zeros(0, dtype=np.uint32),
    )


def build_box_mesh(
    positions: np.ndarray,
    extents: np.ndarray,
    colors: np.ndarray,
    scale: float = 1.0
) -> MeshData:
    """
    Build a merged mesh from box arrays.

    Args:
        positions: (N, 3) box centers
        extents: (N, 3) full box sizes
        colors: (N, 3) uint8 RGB per box
        scale: Uniform scale applied to sizes and positions

    Returns:
        MeshData with 24 vertices and 36 indices per box
    """
    n = len(positions)
    if n == 0:
        return empty_mesh()

    positions = np.asarray(positions, dtype=np.float32).reshape(n, 3) * scale
    extents = np.asarray(extents, dtype=np.float32).reshape(n, 3) * scale

    # (N, 24, 3): corner * extent + center
    vertices = _FACE_CORNERS[None, :, :] * extents[:, None, :] + positions[:, None, :]
    normals = np.broadcast_to(_FACE_NORMALS, (n, VERTICES_PER_BOX, 3))

    rgba = np.empty((n, 4), dtype=np.uint8)
    rgba[:, :3] = np.asarray(colors, dtype=np.uint8).reshape(n, 3)
    rgba[:, 3] = 255
    vertex_colors = np.repeat(rgba, VERTICES_PER_BOX, axis=0)

    offsets = (np.arange(n, dtype=np.uint32) * VERTICES_PER_BOX)[:, None]
    indices = (_BOX_INDICES[None, :] + offsets).reshape(-1)

    return MeshData(
        vertices=vertices.reshape(-1, 3).astype(np.float32),
        normals=normals.reshape(-1, 3).astype(np.float32),
        colors=vertex_colors,
        indices=indices.astype(np.uint32),
    )


def baked_arrays(baked: BakedVoxelModel) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """(positions, extents, uint8 RGB colors) of a baked model."""
    if len(baked) == 0:
        return (np.zeros((0, 3)), np.zeros((0, 3)), np.zeros((0, 3), dtype=np.uint8))
    positions = np.array([b.position for b in baked.boxes], dtype=np.float64)
    extents = np.array([b.scale for b in baked.boxes], dtype=np.float64)
    colors = np.array([b.baked_color_rgb for b in baked.boxes], dtype=np.uint8)
    return positions, extents, colors


def build_baked_mesh(baked: BakedVoxelModel, scale: float = 1.0) -> MeshData:
    """
    Merge all boxes of a baked model into one vertex-colored mesh.

    Args:
        baked: Baked model
        scale: Uniform scale multiplier for the whole model

    Returns:
        MeshData; empty for an empty model
    """
    positions, extents, colors = baked_arrays(baked)
    return build_box_mesh(positions, extents, colors, scale)


def build_vertex_color_mesh(voxels: np.ndarray, scale: float = 1.0) -> MeshData:
    """
    Merged mesh from compact vertex-color voxels.

    Args:
        voxels: (N, 10) rows [x, y, z, sx, sy, sz, r, g, b, emissive],
                colors normalized to [0, 1]
        scale: Uniform scale multiplier

    Returns:
        MeshData
    """
    voxels = np.asarray(voxels, dtype=np.float64).reshape(-1, 10)
    colors = np.floor(np.clip(voxels[:, 6:9], 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)
    return build_box_mesh(voxels[:, 0:3], voxels[:, 3:6], colors, scale)
