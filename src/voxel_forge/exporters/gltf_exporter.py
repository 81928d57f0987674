"""
glTF 2.0 Exporter (.glb binary format)

Writes the merged baked mesh for game engines (Godot, Unity, Unreal) and
three.js. Lighting is already baked into the vertex colors, so the material
is unlit:
- Vertex colors (no textures needed)
- Proper sRGB to Linear conversion
- KHR_materials_unlit material
- Efficient binary buffer packing

glTF Structure:
- JSON header describing scene graph
- Binary buffer containing geometry data
  - Indices (uint16/uint32)
  - Positions (float32 vec3)
  - Normals (float32 vec3)
  - Colors (uint8 vec4 normalized)

An empty model exports as a valid .glb with an empty scene.
"""

from pathlib import Path
from typing import Union, Dict, Any
import json
import logging
import struct
import numpy as np

from ..bake import BakedVoxelModel
from ..color import srgb_to_linear
from ..mesh import MeshData, build_baked_mesh

logger = logging.getLogger(__name__)


# glTF constants
GLTF_VERSION = "2.0"
GENERATOR = "voxel_forge"
UNLIT_EXTENSION = "KHR_materials_unlit"

# Component types
UNSIGNED_SHORT = 5123
UNSIGNED_INT = 5125
FLOAT = 5126
UNSIGNED_BYTE = 5121

# Buffer view targets
ARRAY_BUFFER = 34962
ELEMENT_ARRAY_BUFFER = 34963

# Primitive modes
TRIANGLES = 4

GLB_MAGIC = 0x46546C67
JSON_CHUNK = 0x4E4F534A
BIN_CHUNK = 0x004E4942


class GLTFExporter:
    """
    Export a merged baked mesh to glTF 2.0 binary format (.glb).

    Features:
    - Vertex colors with sRGB to Linear conversion
    - Flat shading normals
    - Unlit material, since lighting lives in the colors
    - Optimized binary packing
    """

    def __init__(
        self,
        convert_colors: bool = True,
        scale: float = 1.0
    ):
        """
        Initialize the exporter.

        Args:
            convert_colors: If True, convert sRGB to Linear for vertex colors
            scale: Scale factor for vertex positions
        """
        self.convert_colors = convert_colors
        self.scale = scale

    def export(
        self,
        mesh: MeshData,
        output_path: Union[str, Path],
        material_name: str = "BakedVoxelMaterial"
    ):
        """
        Export mesh to .glb file.

        Args:
            mesh: MeshData from build_baked_mesh
            output_path: Output file path
            material_name: Name for the material
        """
        output_path = Path(output_path)
        data = self.to_bytes(mesh, material_name)
        output_path.write_bytes(data)
        logger.debug("Wrote %s (%d bytes, %d triangles)", output_path, len(data), mesh.triangle_count)

    def export_baked(
        self,
        baked: BakedVoxelModel,
        output_path: Union[str, Path],
        entity_name: str = "Entity"
    ):
        """Merge a baked model and export it in one step."""
        self.export(build_baked_mesh(baked), output_path, f"{entity_name}Material")

    def to_bytes(
        self,
        mesh: MeshData,
        material_name: str = "BakedVoxelMaterial"
    ) -> bytes:
        """
        Encode a mesh as GLB bytes.

        Args:
            mesh: MeshData
            material_name: Name for the material

        Returns:
            Complete .glb file contents
        """
        if len(mesh.vertices) == 0:
            return self._pack_glb(self._build_empty_gltf(), b'')

        # Prepare vertex data
        vertices = mesh.vertices.astype(np.float32) * self.scale
        normals = mesh.normals.astype(np.float32)
        indices = mesh.indices

        # Convert colors from sRGB to Linear
        if self.convert_colors:
            colors_linear = srgb_to_linear(np.ascontiguousarray(mesh.colors))
            # Convert back to uint8 for compact storage
            colors_linear = (colors_linear * 255 + 0.5).astype(np.uint8)
        else:
            colors_linear = mesh.colors.astype(np.uint8)

        # Determine index type
        max_index = indices.max()
        if max_index < 65536:
            index_type = UNSIGNED_SHORT
            indices = indices.astype(np.uint16)
        else:
            index_type = UNSIGNED_INT
            indices = indices.astype(np.uint32)

        # Build binary buffer
        buffer_data = self._build_buffer(vertices, normals, colors_linear, indices)

        # Build glTF JSON
        gltf = self._build_gltf(vertices, indices, index_type, material_name)

        return self._pack_glb(gltf, buffer_data)

    def _build_buffer(
        self,
        vertices: np.ndarray,
        normals: np.ndarray,
        colors: np.ndarray,
        indices: np.ndarray
    ) -> bytes:
        """Build the binary buffer containing all geometry data."""
        parts = []

        # Indices
        indices_bytes = indices.tobytes()
        parts.append(indices_bytes)

        # Pad to 4-byte alignment
        padding = (4 - len(indices_bytes) % 4) % 4
        parts.append(b'\x00' * padding)

        parts.append(vertices.astype(np.float32).tobytes())
        parts.append(normals.astype(np.float32).tobytes())
        parts.append(colors.astype(np.uint8).tobytes())

        # Final padding to 4-byte alignment
        total = sum(len(p) for p in parts)
        final_padding = (4 - total % 4) % 4
        parts.append(b'\x00' * final_padding)

        return b''.join(parts)

    def _build_empty_gltf(self) -> Dict[str, Any]:
        return {
            "asset": {
                "version": GLTF_VERSION,
                "generator": GENERATOR
            },
            "scene": 0,
            "scenes": [
                {"nodes": []}
            ]
        }

    def _build_gltf(
        self,
        vertices: np.ndarray,
        indices: np.ndarray,
        index_type: int,
        material_name: str
    ) -> Dict[str, Any]:
        """Build the glTF JSON structure."""
        num_vertices = len(vertices)
        num_indices = len(indices)

        # Calculate buffer offsets
        index_bytes = indices.itemsize * num_indices
        index_padding = (4 - index_bytes % 4) % 4
        position_offset = index_bytes + index_padding
        position_bytes = num_vertices * 3 * 4  # float32 * 3
        normal_offset = position_offset + position_bytes
        normal_bytes = num_vertices * 3 * 4
        color_offset = normal_offset + normal_bytes
        color_bytes = num_vertices * 4  # uint8 * 4

        total_bytes = color_offset + color_bytes
        total_bytes += (4 - total_bytes % 4) % 4  # final padding

        pos_min = vertices.min(axis=0).tolist()
        pos_max = vertices.max(axis=0).tolist()

        return {
            "asset": {
                "version": GLTF_VERSION,
                "generator": GENERATOR
            },
            "extensionsUsed": [UNLIT_EXTENSION],
            "scene": 0,
            "scenes": [
                {"nodes": [0]}
            ],
            "nodes": [
                {
                    "mesh": 0,
                    "name": "BakedVoxelModel"
                }
            ],
            "meshes": [
                {
                    "primitives": [
                        {
                            "attributes": {
                                "POSITION": 1,
                                "NORMAL": 2,
                                "COLOR_0": 3
                            },
                            "indices": 0,
                            "material": 0,
                            "mode": TRIANGLES
                        }
                    ],
                    "name": "BakedVoxelMesh"
                }
            ],
            "materials": [
                {
                    "name": material_name,
                    "pbrMetallicRoughness": {
                        "baseColorFactor": [1.0, 1.0, 1.0, 1.0],
                        "metallicFactor": 0.0,
                        "roughnessFactor": 1.0
                    },
                    "doubleSided": False,
                    "extensions": {
                        UNLIT_EXTENSION: {}
                    }
                }
            ],
            "accessors": [
                # 0: Indices
                {
                    "bufferView": 0,
                    "componentType": index_type,
                    "count": num_indices,
                    "type": "SCALAR"
                },
                # 1: Positions
                {
                    "bufferView": 1,
                    "componentType": FLOAT,
                    "count": num_vertices,
                    "type": "VEC3",
                    "min": pos_min,
                    "max": pos_max
                },
                # 2: Normals
                {
                    "bufferView": 2,
                    "componentType": FLOAT,
                    "count": num_vertices,
                    "type": "VEC3"
                },
                # 3: Colors
                {
                    "bufferView": 3,
                    "componentType": UNSIGNED_BYTE,
                    "count": num_vertices,
                    "type": "VEC4",
                    "normalized": True
                }
            ],
            "bufferViews": [
                {
                    "buffer": 0,
                    "byteOffset": 0,
                    "byteLength": index_bytes,
                    "target": ELEMENT_ARRAY_BUFFER
                },
                {
                    "buffer": 0,
                    "byteOffset": position_offset,
                    "byteLength": position_bytes,
                    "target": ARRAY_BUFFER
                },
                {
                    "buffer": 0,
                    "byteOffset": normal_offset,
                    "byteLength": normal_bytes,
                    "target": ARRAY_BUFFER
                },
                {
                    "buffer": 0,
                    "byteOffset": color_offset,
                    "byteLength": color_bytes,
                    "target": ARRAY_BUFFER
                }
            ],
            "buffers": [
                {
                    "byteLength": total_bytes
                }
            ]
        }

    def _pack_glb(self, gltf: Dict[str, Any], buffer_data: bytes) -> bytes:
        """Assemble header, JSON chunk and (optional) binary chunk."""
        json_bytes = json.dumps(gltf, separators=(',', ':')).encode('utf-8')

        # Pad JSON to 4-byte alignment
        json_padding = (4 - len(json_bytes) % 4) % 4
        json_bytes += b' ' * json_padding

        total_length = 12 + 8 + len(json_bytes)
        if buffer_data:
            total_length += 8 + len(buffer_data)

        parts = [
            struct.pack('<III', GLB_MAGIC, 2, total_length),
            struct.pack('<II', len(json_bytes), JSON_CHUNK),
            json_bytes,
        ]
        if buffer_data:
            parts.append(struct.pack('<II', len(buffer_data), BIN_CHUNK))
            parts.append(buffer_data)

        return b''.join(parts)


def read_glb_json(data: bytes) -> Dict[str, Any]:
    """
    Decode the JSON chunk of a .glb file.

    Raises:
        ValueError: if the bytes are not a glTF 2.0 binary
    """
    magic, version, length = struct.unpack_from('<III', data, 0)
    if magic != GLB_MAGIC or version != 2:
        raise ValueError("Not a glTF 2.0 binary")
    if length != len(data):
        raise ValueError(f"GLB length mismatch: header {length}, actual {len(data)}")
    chunk_length, chunk_type = struct.unpack_from('<II', data, 12)
    if chunk_type != JSON_CHUNK:
        raise ValueError("First GLB chunk is not JSON")
    return json.loads(data[20:20 + chunk_length].decode('utf-8'))
