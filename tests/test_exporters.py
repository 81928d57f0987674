"""
Unit tests for the game code, baked JSON, asset and glTF exporters.
"""

import json
import sys
import tempfile
from pathlib import Path
import unittest

import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.bake import bake_voxel_model
from voxel_forge.color import ThemeColors
from voxel_forge.errors import AssetImportError, ColorParseError, InvalidModelError
from voxel_forge.exporters import (
    AssetType,
    GLTFExporter,
    asset_from_model,
    asset_type_for,
    export_asset,
    export_assets,
    export_baked_model_json,
    export_vertex_color_format,
    generate_baked_game_code,
    generate_game_code,
    import_assets,
    load_baked_model_json,
    load_vertex_color_format,
)
from voxel_forge.exporters.game_code import iso_timestamp, js_number
from voxel_forge.exporters.gltf_exporter import read_glb_json
from voxel_forge.generators import create_model
from voxel_forge.mesh import INDICES_PER_BOX, VERTICES_PER_BOX, build_baked_mesh, build_vertex_color_mesh
from voxel_forge.model import BoxColor, VoxelBox, VoxelModel


THEME = ("#4a4a5a", "#3a3a4a", "#00ffff")


def sample_model():
    return VoxelModel(boxes=[
        VoxelBox(id="h0", name="Skull", position=(0, 1.5, 0), scale=(0.2, 0.2, 0.2), group="head"),
        VoxelBox(id="h1", name="Eye", position=(0.05, 1.55, 0.1), scale=(0.05, 0.05, 0.05),
                 color=BoxColor.glow(), color_multiplier=2.5, emissive=True, emissive_intensity=2.0,
                 group="head"),
        VoxelBox(id="b0", name="Chest", position=(0, 1, 0), scale=(0.4, 0.5, 0.3),
                 color=BoxColor.custom("#ff0000"), color_multiplier=0.8, group="body"),
    ], groups=["head", "body"])


def sample_baked(model=None):
    return bake_voxel_model(model if model is not None else sample_model(), *THEME, timestamp=0)


class TestNumberFormatting(unittest.TestCase):
    """Tests for JavaScript-style number and date output."""

    def test_js_number(self):
        assert js_number(2.0) == "2"
        assert js_number(-0.0) == "0"
        assert js_number(0.25) == "0.25"
        assert js_number(-3.5) == "-3.5"
        assert js_number(123.456) == "123.456"

    def test_js_number_small_and_large(self):
        assert js_number(1e-05) == "0.00001"
        assert js_number(0.000123) == "0.000123"
        assert js_number(1e-06) == "0.000001"
        assert js_number(1e-07) == "1e-7"
        assert js_number(-2.5e-08) == "-2.5e-8"
        assert js_number(1e16) == "10000000000000000"
        assert js_number(1e20) == "100000000000000000000"
        assert js_number(1e21) == "1e+21"
        assert js_number(1.5e22) == "1.5e+22"

    def test_baked_code_tiny_extent(self):
        model = VoxelModel(boxes=[
            VoxelBox(id="t", name="Thread", position=(0, 0.00002, 0), scale=(0.00001, 1, 1)),
        ], groups=["body"])
        code = generate_baked_game_code(sample_baked(model))
        assert "new THREE.BoxGeometry(0.00001, 1, 1)" in code
        assert "mesh.position.set(0, 0.00002, 0)" in code
        assert "e-05" not in code

    def test_iso_timestamp(self):
        assert iso_timestamp(0) == "1970-01-01T00:00:00.000Z"
        assert iso_timestamp(1704110400123) == "2024-01-01T12:00:00.123Z"


class TestGameCode(unittest.TestCase):
    """Tests for the instanced dynamic-lighting snippet."""

    def test_header_and_footer(self):
        code = generate_game_code(sample_model(), *THEME)
        lines = code.split("\n")
        assert lines[0] == "// === VOXEL RENDERER CODE ==="
        assert 'const primaryCol = new THREE.Color("#4a4a5a")' in lines
        assert 'const glowCol = new THREE.Color("#00ffff")' in lines
        assert lines[-1] == "if (mesh.instanceColor) mesh.instanceColor.needsUpdate = true"

    def test_box_lines(self):
        lines = generate_game_code(sample_model(), *THEME).split("\n")
        start = lines.index("// Skull")
        assert lines[start - 1] == "// --- HEAD ---"
        assert lines[start + 1] == "tempMatrix.makeTranslation(x + 0.000, y + 1.500, z + 0.000)"
        assert lines[start + 2] == "tempMatrix.scale(new THREE.Vector3(0.200, 0.200, 0.200))"
        assert lines[start + 3] == "matrices.push(tempMatrix.clone())"
        assert lines[start + 4] == "colors.push(primaryCol.clone())"

    def test_color_expressions(self):
        code = generate_game_code(sample_model(), *THEME)
        assert "colors.push(glowCol.clone().multiplyScalar(2.5))" in code
        assert 'colors.push(new THREE.Color("#ff0000").multiplyScalar(0.8))' in code

    def test_group_order_follows_first_use(self):
        code = generate_game_code(sample_model(), *THEME)
        assert code.index("// --- HEAD ---") < code.index("// --- BODY ---")

    def test_empty_model(self):
        code = generate_game_code(VoxelModel(), *THEME)
        assert "tempMatrix.makeTranslation" not in code
        assert "matrices.forEach((mat, i) => {" in code

    def test_bad_theme(self):
        with self.assertRaises(ColorParseError) as ctx:
            generate_game_code(sample_model(), "#4a4a5a", "nope", "#00ffff")
        assert ctx.exception.field == "secondaryColor"

    def test_bad_custom_color(self):
        model = VoxelModel(boxes=[
            VoxelBox(id="x", name="x", position=(0, 0, 0), scale=(1, 1, 1), color=BoxColor.custom("bogus")),
        ], groups=["body"])
        with self.assertRaises(ColorParseError) as ctx:
            generate_game_code(model, *THEME)
        assert ctx.exception.box_id == "x"


class TestBakedGameCode(unittest.TestCase):
    """Tests for the baked per-box mesh factory."""

    def test_header(self):
        lines = generate_baked_game_code(sample_baked(), "Wolf").split("\n")
        assert lines[0] == "// Baked voxel model for Wolf"
        assert lines[1] == "// Generated: 1970-01-01T00:00:00.000Z"
        assert lines[2] == "// Lighting: editor-default"
        assert lines[4] == "function createWolfMesh(): THREE.Group {"
        assert lines[-2:] == ["  return group", "}"]

    def test_box_block(self):
        baked = sample_baked()
        code = generate_baked_game_code(baked)
        skull = baked.boxes[0]
        assert "    const geo = new THREE.BoxGeometry(0.2, 0.2, 0.2)" in code
        assert f'      color: "{skull.baked_color}",' in code
        assert "    mesh.position.set(0, 1.5, 0)" in code

    def test_emissive_comment_only_for_glowing_boxes(self):
        code = generate_baked_game_code(sample_baked())
        assert code.count("// Original had emissive, consider adding bloom/glow effect") == 1

    def test_empty(self):
        code = generate_baked_game_code(sample_baked(VoxelModel()))
        assert "BoxGeometry" not in code
        assert "function createEntityMesh(): THREE.Group {" in code


class TestBakedJson(unittest.TestCase):
    """Tests for the baked-voxel-model and vertex-color formats."""

    def test_key_order(self):
        data = json.loads(export_baked_model_json(sample_baked()))
        assert list(data) == ["version", "type", "boxes", "groups", "bakingInfo"]
        assert data["version"] == "1.0"
        assert data["type"] == "baked-voxel-model"
        assert data["bakingInfo"]["lightingSetup"] == "editor-default"
        assert "spatialIndexThreshold" not in data["bakingInfo"]["options"]

    def test_box_records(self):
        baked = sample_baked()
        record = json.loads(export_baked_model_json(baked))["boxes"][2]
        assert record["id"] == "b0"
        assert record["color"] == baked.boxes[2].baked_color
        assert record["colorRGB"] == list(baked.boxes[2].baked_color_rgb)
        assert record["originalColor"] == "#cc0000"

    def test_is_indented(self):
        assert "\n  " in export_baked_model_json(sample_baked())

    def test_reload(self):
        baked = sample_baked()
        loaded = load_baked_model_json(export_baked_model_json(baked))
        assert [b.id for b in loaded.boxes] == [b.id for b in baked.boxes]
        assert [b.baked_color for b in loaded.boxes] == [b.baked_color for b in baked.boxes]
        assert loaded.groups == baked.groups
        assert loaded.baking_info.lighting_setup == "editor-default"

    def test_load_rejects_wrong_type(self):
        with self.assertRaises(InvalidModelError):
            load_baked_model_json('{"type": "vertex-color-voxels"}')
        with self.assertRaises(InvalidModelError):
            load_baked_model_json("{not json")

    def test_vertex_format(self):
        baked = sample_baked()
        text = export_vertex_color_format(baked)
        assert "\n" not in text
        data = json.loads(text)
        assert data["type"] == "vertex-color-voxels"
        assert data["count"] == 3
        eye = data["voxels"][1]
        assert len(eye) == 10
        assert eye[:3] == [0.05, 1.55, 0.1]
        assert eye[9] == 2.0
        assert data["voxels"][0][9] == 0.0
        r, g, b = baked.boxes[1].baked_color_rgb
        assert np.allclose(eye[6:9], [r / 255, g / 255, b / 255])

    def test_vertex_reload(self):
        voxels = load_vertex_color_format(export_vertex_color_format(sample_baked()))
        assert voxels.shape == (3, 10)
        with self.assertRaises(InvalidModelError):
            load_vertex_color_format('{"voxels": [[1, 2, 3]]}')

    def test_empty_model(self):
        baked = sample_baked(VoxelModel())
        assert json.loads(export_baked_model_json(baked))["boxes"] == []
        data = json.loads(export_vertex_color_format(baked))
        assert data["count"] == 0 and data["voxels"] == []


class TestAssets(unittest.TestCase):
    """Tests for the editor's asset exchange format."""

    def make_asset(self):
        return asset_from_model("Sentinel", AssetType.HUMANOID, sample_model(), ThemeColors(*THEME))

    def test_export_omits_box_ids(self):
        data = json.loads(export_asset(self.make_asset()))
        assert data["type"] == "humanoid"
        assert data["primaryColor"] == "#4a4a5a"
        assert all("id" not in voxel for voxel in data["voxels"])
        assert data["id"].startswith("asset_")

    def test_roundtrip_regenerates_ids(self):
        asset = self.make_asset()
        (imported,) = import_assets(export_asset(asset))
        assert imported.name == "Sentinel"
        assert imported.type is AssetType.HUMANOID
        assert imported.model.groups == asset.model.groups
        for before, after in zip(asset.model.boxes, imported.model.boxes):
            assert after.position == before.position
            assert after.scale == before.scale
            assert after.color == before.color
            assert after.group == before.group
            assert after.id != before.id

    def test_array_import(self):
        text = export_assets([self.make_asset(), self.make_asset()])
        assert len(import_assets(text)) == 2

    def test_error_names_index_and_field(self):
        good = json.loads(export_asset(self.make_asset()))
        bad = json.loads(export_asset(self.make_asset()))
        bad["voxels"][1]["colorType"] = "custom"
        bad["voxels"][1]["customColor"] = "not-a-color"
        with self.assertRaises(AssetImportError) as ctx:
            import_assets(json.dumps([good, bad]))
        assert ctx.exception.index == 1
        assert ctx.exception.field == "voxels[1].customColor"

    def test_wrongly_typed_voxel_fields(self):
        for key, bad in (
            ("colorMultiplier", "abc"),
            ("colorMultiplier", None),
            ("emissiveIntensity", "2"),
            ("emissive", "false"),
        ):
            data = json.loads(export_asset(self.make_asset()))
            data["voxels"][2][key] = bad
            with self.assertRaises(AssetImportError, msg=key) as ctx:
                import_assets(json.dumps([data]))
            assert ctx.exception.index == 0
            assert ctx.exception.field == "voxels[2]"

    def test_missing_and_invalid_fields(self):
        data = json.loads(export_asset(self.make_asset()))
        del data["glowColor"]
        with self.assertRaises(AssetImportError) as ctx:
            import_assets(json.dumps(data))
        assert ctx.exception.field == "glowColor"

        data = json.loads(export_asset(self.make_asset()))
        data["type"] = "dragon"
        with self.assertRaises(AssetImportError) as ctx:
            import_assets(json.dumps(data))
        assert ctx.exception.field == "type"

        with self.assertRaises(AssetImportError):
            import_assets("{oops")

    def test_asset_type_for(self):
        assert asset_type_for("nature/trees/oak", VoxelModel()) is AssetType.TREE
        assert asset_type_for("characters/player", VoxelModel()) is AssetType.PLAYER
        assert asset_type_for("characters/npc", VoxelModel()) is AssetType.NPC
        assert asset_type_for("props/crate", VoxelModel()) is AssetType.PROP
        drone = create_model("enemies/drone")
        assert asset_type_for("enemies/drone", drone) is AssetType.DRONE
        assert asset_type_for("enemies/blob", VoxelModel()) is AssetType.HUMANOID


class TestMesh(unittest.TestCase):
    """Tests for the merged baked mesh."""

    def test_counts(self):
        mesh = build_baked_mesh(sample_baked())
        assert mesh.vertices.shape == (3 * VERTICES_PER_BOX, 3)
        assert mesh.indices.shape == (3 * INDICES_PER_BOX,)
        assert mesh.box_count == 3
        assert mesh.triangle_count == 36

    def test_box_extents(self):
        mesh = build_baked_mesh(sample_baked())
        skull = mesh.vertices[:VERTICES_PER_BOX]
        assert np.allclose(skull.min(axis=0), [-0.1, 1.4, -0.1], atol=1e-6)
        assert np.allclose(skull.max(axis=0), [0.1, 1.6, 0.1], atol=1e-6)

    def test_colors(self):
        baked = sample_baked()
        mesh = build_baked_mesh(baked)
        assert tuple(mesh.colors[0, :3]) == baked.boxes[0].baked_color_rgb
        assert mesh.colors[0, 3] == 255

    def test_vertex_color_mesh_matches(self):
        baked = sample_baked()
        voxels = load_vertex_color_format(export_vertex_color_format(baked))
        from_tuples = build_vertex_color_mesh(voxels)
        from_baked = build_baked_mesh(baked)
        assert np.allclose(from_tuples.vertices, from_baked.vertices)
        assert np.array_equal(from_tuples.colors, from_baked.colors)

    def test_empty(self):
        mesh = build_baked_mesh(sample_baked(VoxelModel()))
        assert len(mesh.vertices) == 0 and len(mesh.indices) == 0


class TestGLTFExporter(unittest.TestCase):
    """Tests for .glb output."""

    def test_unlit_material(self):
        gltf = read_glb_json(GLTFExporter().to_bytes(build_baked_mesh(sample_baked()), "WolfMaterial"))
        assert gltf["asset"]["version"] == "2.0"
        assert gltf["extensionsUsed"] == ["KHR_materials_unlit"]
        material = gltf["materials"][0]
        assert material["name"] == "WolfMaterial"
        assert "KHR_materials_unlit" in material["extensions"]
        assert gltf["accessors"][1]["count"] == 3 * VERTICES_PER_BOX
        assert gltf["accessors"][0]["count"] == 3 * INDICES_PER_BOX

    def test_length_is_aligned(self):
        data = GLTFExporter().to_bytes(build_baked_mesh(sample_baked()))
        assert len(data) % 4 == 0

    def test_empty_scene(self):
        data = GLTFExporter().to_bytes(build_baked_mesh(sample_baked(VoxelModel())))
        gltf = read_glb_json(data)
        assert gltf["scenes"] == [{"nodes": []}]
        assert "meshes" not in gltf

    def test_export_baked_writes_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "wolf.glb"
            GLTFExporter().export_baked(sample_baked(), path, "Wolf")
            gltf = read_glb_json(path.read_bytes())
            assert gltf["materials"][0]["name"] == "WolfMaterial"

    def test_rejects_non_glb(self):
        with self.assertRaises(ValueError):
            read_glb_json(b"\x00" * 20)


if __name__ == "__main__":
    unittest.main()
