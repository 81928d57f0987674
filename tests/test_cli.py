"""
Tests for the voxforge command-line interface.
"""

import io
import json
import sys
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.cli import _entity_name, main
from voxel_forge.exporters.gltf_exporter import read_glb_json


def run(*argv):
    """Run the CLI, returning (exit code, stdout, stderr)."""
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestEntityName(unittest.TestCase):

    def test_names(self):
        assert _entity_name("enemies/direWolf") == "DireWolf"
        assert _entity_name("Dire wolf") == "DireWolf"
        assert _entity_name("nature/trees/oak") == "Oak"
        assert _entity_name("!!!") == "Entity"


class TestCLI(unittest.TestCase):
    """End-to-end command tests."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_no_command(self):
        code, out, _ = run()
        assert code == 1
        assert "usage" in out.lower()

    def test_list(self):
        code, out, _ = run("list", "--category", "props")
        assert code == 0
        assert "props/crate" in out
        assert "enemies/" not in out

    def test_unknown_key(self):
        code, _, err = run("generate", "enemies/dragonKing")
        assert code == 1
        assert err.startswith("Error:")

    def test_generate_to_file(self):
        path = self.dir / "wolf.json"
        code, _, _ = run("generate", "enemies/direWolf", "--primary", "#112233", "-o", str(path))
        assert code == 0
        data = json.loads(path.read_text())
        assert data["name"] == "Enemy: Dire Wolf"
        assert data["type"] == "beast"
        assert data["primaryColor"] == "#112233"
        assert "tail" in data["groups"]

    def test_invalid_color_override(self):
        code, _, err = run("generate", "props/crate", "--glow", "nope")
        assert code == 1
        assert "Error:" in err

    def test_bake_json_stdout(self):
        code, out, _ = run("bake", "props/crate")
        assert code == 0
        assert json.loads(out)["type"] == "baked-voxel-model"

    def test_bake_code_entity_name(self):
        code, out, _ = run("bake", "enemies/direWolf", "--format", "code")
        assert code == 0
        assert "function createDireWolfMesh(): THREE.Group {" in out

    def test_bake_from_input(self):
        source = self.dir / "crate.json"
        assert run("generate", "props/crate", "-o", str(source))[0] == 0
        code, out, _ = run("bake", "--input", str(source), "--format", "vertex", "--no-ao")
        assert code == 0
        data = json.loads(out)
        assert data["type"] == "vertex-color-voxels"
        assert data["count"] == len(json.loads(source.read_text())["voxels"])

    def test_missing_input(self):
        code, _, err = run("bake", "--input", str(self.dir / "missing.json"))
        assert code == 1
        assert "not found" in err

    def test_glb_requires_output(self):
        code, _, err = run("bake", "props/crate", "--format", "glb")
        assert code == 1
        assert "-o" in err

    def test_glb(self):
        path = self.dir / "drone.glb"
        code, _, _ = run("bake", "enemies/drone", "--format", "glb", "-o", str(path))
        assert code == 0
        gltf = read_glb_json(path.read_bytes())
        assert gltf["materials"][0]["name"] == "DroneMaterial"

    def test_bad_gamma(self):
        code, _, err = run("bake", "props/crate", "--gamma", "0")
        assert code == 1
        assert "gamma" in err

    def test_explain(self):
        code, out, _ = run("bake", "props/crate", "--explain", "crate_0")
        assert code == 0
        assert out.startswith("Box: crate_0")
        assert "Final:" in out

    def test_code(self):
        code, out, _ = run("code", "props/streetlight")
        assert code == 0
        assert out.startswith("// === VOXEL RENDERER CODE ===")


if __name__ == "__main__":
    unittest.main()
