"""
Voxel Forge
===========

Procedural box-model generation and static light baking for game assets.

A model is a flat list of axis-aligned, variably scaled boxes, each tagged
with a theme color slot (or a literal color) and a group naming its
anatomical or structural part. Generators build models for every enemy,
nature, character and prop archetype of the game; the baker pre-computes
their editor lighting into static colors so the game can render them with
unlit materials.

Key Features:
- Deterministic archetype generators with an explicit registry
- Light baking with Numba JIT kernels (ambient, directional, point lights,
  occlusion heuristic, emissive boost, gamma)
- Group-name anatomy classifier for animation pivots
- Export to game code, baked JSON, vertex-color JSON, glTF 2.0 (.glb) and
  the editor's asset exchange JSON

Example Usage:
    from voxel_forge import create_model, bake_voxel_model, export_baked_model_json

    wolf = create_model("enemies/direWolf")
    baked = bake_voxel_model(wolf, "#5a4a3a", "#3a2a1a", "#ff6600")
    print(export_baked_model_json(baked))
"""

__version__ = "1.0.0"
__author__ = "Voxel Forge Team"

from .model import BoxColor, ColorType, VoxelBox, VoxelModel
from .color import ThemeColors, parse_color, resolve_box_color
from .lighting import EDITOR_RIG, DirectionalLight, LightingRig, PointLight
from .bake import BakeOptions, BakedVoxel, BakedVoxelModel, bake_breakdown, bake_voxel_model
from .anatomy import BodyPart, ModelType, detect_model_type, group_pivots, parse_group_name
from .generators import TEMPLATES, create_model, get_archetype, list_templates
from .mesh import MeshData, build_baked_mesh
from .exporters import (
    GLTFExporter,
    VoxelAsset,
    export_asset,
    export_assets,
    export_baked_model_json,
    export_vertex_color_format,
    generate_baked_game_code,
    generate_game_code,
    import_assets,
)
from .errors import (
    AssetImportError,
    BakeOptionsError,
    ColorParseError,
    InvalidModelError,
    UnknownArchetypeError,
    VoxelForgeError,
)

__all__ = [
    "BoxColor",
    "ColorType",
    "VoxelBox",
    "VoxelModel",
    "ThemeColors",
    "parse_color",
    "resolve_box_color",
    "EDITOR_RIG",
    "DirectionalLight",
    "LightingRig",
    "PointLight",
    "BakeOptions",
    "BakedVoxel",
    "BakedVoxelModel",
    "bake_breakdown",
    "bake_voxel_model",
    "BodyPart",
    "ModelType",
    "detect_model_type",
    "group_pivots",
    "parse_group_name",
    "TEMPLATES",
    "create_model",
    "get_archetype",
    "list_templates",
    "MeshData",
    "build_baked_mesh",
    "GLTFExporter",
    "VoxelAsset",
    "export_asset",
    "export_assets",
    "export_baked_model_json",
    "export_vertex_color_format",
    "generate_baked_game_code",
    "generate_game_code",
    "import_assets",
    "AssetImportError",
    "BakeOptionsError",
    "ColorParseError",
    "InvalidModelError",
    "UnknownArchetypeError",
    "VoxelForgeError",
]
