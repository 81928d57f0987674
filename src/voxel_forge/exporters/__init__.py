"""
Export modules for the game and the editor.

Supported formats:
- Game code (.ts) - Instanced dynamic-lighting snippet or baked mesh factory
- Baked model JSON - Per-box baked colors with bake provenance
- Vertex-color JSON - Compact tuples for GPU-efficient loading
- glTF 2.0 (.glb) - Merged baked mesh for game engines
- Asset JSON - The editor's import/export exchange format
"""

from .asset import (
    AssetType,
    VoxelAsset,
    asset_from_model,
    asset_type_for,
    export_asset,
    export_assets,
    import_assets,
)
from .baked_json import (
    export_baked_model_json,
    export_vertex_color_format,
    load_baked_model_json,
    load_vertex_color_format,
)
from .game_code import generate_baked_game_code, generate_game_code
from .gltf_exporter import GLTFExporter

__all__ = [
    "AssetType",
    "VoxelAsset",
    "asset_from_model",
    "asset_type_for",
    "export_asset",
    "export_assets",
    "import_assets",
    "export_baked_model_json",
    "export_vertex_color_format",
    "load_baked_model_json",
    "load_vertex_color_format",
    "generate_game_code",
    "generate_baked_game_code",
    "GLTFExporter",
]
