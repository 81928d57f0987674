"""
Command-Line Interface for Voxel Forge

Usage:
    voxforge list
    voxforge generate enemies/direWolf --scale 1.5 -o wolf.json
    voxforge bake enemies/direWolf --format code --entity-name DireWolf
    voxforge bake --input wolf.json --format glb -o wolf.glb
    voxforge code props/streetlight
"""

import argparse
import logging
import re
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from .bake import BakeOptions, bake_breakdown, bake_voxel_model
from .color import ThemeColors
from .exporters import (
    GLTFExporter,
    VoxelAsset,
    asset_from_model,
    asset_type_for,
    export_asset,
    export_baked_model_json,
    export_vertex_color_format,
    generate_baked_game_code,
    generate_game_code,
    import_assets,
)
from .errors import VoxelForgeError
from .generators import create_model, get_archetype, list_templates
from .mesh import build_baked_mesh

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="voxforge",
        description="Voxel Forge - Procedural box models and light baking for game assets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  voxforge list
      Show every archetype key

  voxforge generate nature/ruins/arch -o arch.json
      Generate an asset JSON for the editor

  voxforge bake enemies/fireDrake --seed 7 --format vertex -o drake.json
      Bake a reproducible fire drake to the compact vertex-color format

  voxforge bake --input arch.json --format glb -o arch.glb
      Bake an exported asset into a merged .glb mesh

Bake Formats:
  json    - Baked model JSON (default)
  vertex  - Compact vertex-color tuples
  code    - TypeScript mesh factory
  glb     - glTF 2.0 binary of the merged mesh (requires -o)
        """
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output with statistics and debug logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    subparsers = parser.add_subparsers(dest="command")

    # list
    list_parser = subparsers.add_parser("list", help="List archetype keys")
    list_parser.add_argument(
        "--category",
        help="Only list keys starting with this category (e.g. enemies, nature/trees)"
    )

    # generate
    gen_parser = subparsers.add_parser("generate", help="Generate an asset JSON")
    _add_source_arguments(gen_parser, allow_input=False)
    gen_parser.add_argument("-o", "--output", help="Output file (default: stdout)")

    # bake
    bake_parser = subparsers.add_parser("bake", help="Bake lighting into a model")
    _add_source_arguments(bake_parser, allow_input=True)
    bake_parser.add_argument(
        "-f", "--format",
        choices=["json", "vertex", "code", "glb"],
        default="json",
        help="Output format (default: json)"
    )
    bake_parser.add_argument(
        "--no-ao",
        action="store_true",
        help="Disable the ambient occlusion approximation"
    )
    bake_parser.add_argument(
        "--ao-strength",
        type=float,
        default=0.5,
        help="Ambient occlusion strength (default: 0.5)"
    )
    bake_parser.add_argument(
        "--no-emissive",
        action="store_true",
        help="Don't add the emissive term for glowing boxes"
    )
    bake_parser.add_argument(
        "--gamma",
        type=float,
        default=2.2,
        help="Display gamma (default: 2.2)"
    )
    bake_parser.add_argument(
        "--entity-name",
        help="Entity name for baked game code (default: derived from the source)"
    )
    bake_parser.add_argument(
        "--explain",
        metavar="BOX",
        help="Print the lighting terms of one box (id or name) instead of exporting"
    )
    bake_parser.add_argument("-o", "--output", help="Output file (default: stdout)")

    # code
    code_parser = subparsers.add_parser("code", help="Dynamic-lighting game code")
    _add_source_arguments(code_parser, allow_input=True)
    code_parser.add_argument("-o", "--output", help="Output file (default: stdout)")

    return parser


def _add_source_arguments(parser: argparse.ArgumentParser, allow_input: bool):
    parser.add_argument(
        "key",
        nargs="?",
        help="Archetype key, e.g. enemies/direWolf"
    )
    if allow_input:
        parser.add_argument(
            "-i", "--input",
            help="Asset JSON file to read instead of generating"
        )
        parser.add_argument(
            "--index",
            type=int,
            default=0,
            help="Asset index when the input holds an array (default: 0)"
        )
    parser.add_argument(
        "--scale",
        type=float,
        help="Model scale (default: archetype default)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for randomized archetypes"
    )
    parser.add_argument("--primary", help="Override the primary theme color")
    parser.add_argument("--secondary", help="Override the secondary theme color")
    parser.add_argument("--glow", help="Override the glow theme color")


def _entity_name(text: str) -> str:
    """PascalCase entity name: enemies/direWolf -> DireWolf, "Dire wolf" -> DireWolf."""
    last = text.rsplit("/", 1)[-1]
    words = re.sub(r"[^0-9A-Za-z]+", " ", last).split()
    name = "".join(w[0].upper() + w[1:] for w in words)
    return name if name.isidentifier() else "Entity"


def load_source(args) -> Tuple[VoxelAsset, str]:
    """
    Resolve the model a command works on.

    Returns:
        (asset, default entity name)
    """
    if getattr(args, "input", None):
        if args.key:
            raise VoxelForgeError("Give either an archetype key or --input, not both")
        path = Path(args.input)
        if not path.exists():
            raise VoxelForgeError(f"Input file not found: {path}")
        assets = import_assets(path.read_text(encoding="utf-8"))
        if not 0 <= args.index < len(assets):
            raise VoxelForgeError(f"Asset index {args.index} out of range ({len(assets)} assets)")
        asset = assets[args.index]
        entity = _entity_name(asset.name)
    else:
        if not args.key:
            raise VoxelForgeError("No archetype key specified")
        archetype = get_archetype(args.key)
        rng = np.random.default_rng(args.seed) if args.seed is not None else None
        model = create_model(args.key, scale=args.scale, rng=rng)
        asset = asset_from_model(
            archetype.name, asset_type_for(args.key, model), model, archetype.colors
        )
        entity = _entity_name(args.key)

    theme = ThemeColors(
        args.primary or asset.primary_color,
        args.secondary or asset.secondary_color,
        args.glow or asset.glow_color,
    )
    theme.validate()
    asset.primary_color, asset.secondary_color, asset.glow_color = (
        theme.primary, theme.secondary, theme.glow
    )
    return asset, entity


def write_output(text: str, output: Optional[str], verbose: bool):
    if output:
        Path(output).write_text(text, encoding="utf-8")
        if verbose:
            print(f"Exported: {output}")
    else:
        print(text)


def _print_model_stats(asset: VoxelAsset):
    lo, hi = asset.model.bounds()
    size = hi - lo
    print("\nModel Statistics:", file=sys.stderr)
    print(f"  Asset: {asset.name} ({asset.type.value})", file=sys.stderr)
    print(f"  Boxes: {len(asset.model)}", file=sys.stderr)
    print(f"  Groups: {', '.join(asset.model.groups)}", file=sys.stderr)
    print(f"  Size: {size[0]:.2f} x {size[1]:.2f} x {size[2]:.2f}", file=sys.stderr)


def process_list(args) -> int:
    """Print archetype keys and display names."""
    for category, type_name, name in list_templates():
        if args.category and not category.startswith(args.category):
            continue
        print(f"{category}/{type_name:<20} {name}")
    return 0


def process_generate(args) -> int:
    """Generate an asset JSON."""
    asset, _ = load_source(args)
    if args.verbose:
        _print_model_stats(asset)
    write_output(export_asset(asset), args.output, args.verbose)
    return 0


def _explain(asset: VoxelAsset, box_ref: str, options: BakeOptions) -> int:
    box = asset.model.get_box(box_ref)
    if box is None:
        matches = [b for b in asset.model.boxes if b.name == box_ref]
        if not matches:
            raise VoxelForgeError(f"No box with id or name {box_ref!r}")
        box = matches[0]

    terms = bake_breakdown(box, asset.model, asset.theme, options)

    def fmt(rgb) -> str:
        return "(" + ", ".join(f"{c:.4f}" for c in rgb) + ")"

    print(f"Box: {box.id} ({box.name}, group {box.group})")
    print(f"  Base:        {fmt(terms.base)}")
    print(f"  Ambient:     {fmt(terms.ambient)}")
    print(f"  Main light:  {fmt(terms.main)}")
    print(f"  Fill light:  {fmt(terms.fill)}")
    for i, point in enumerate(terms.point):
        print(f"  Point {i}:     {fmt(point)}")
    print(f"  Occluders:   {terms.occluders} (factor {terms.occlusion:.3f})")
    print(f"  Emissive:    {fmt(terms.emissive)}")
    print(f"  Linear:      {fmt(terms.linear)}")
    print(f"  Final:       {fmt(terms.final)}")
    return 0


def process_bake(args) -> int:
    """Bake a model and export it."""
    options = BakeOptions(
        include_ao=not args.no_ao,
        ao_strength=args.ao_strength,
        bake_emissive=not args.no_emissive,
        gamma=args.gamma,
    ).validate()

    if args.format == "glb" and not args.output and not args.explain:
        raise VoxelForgeError("--format glb requires -o/--output")

    asset, entity = load_source(args)
    if args.explain:
        return _explain(asset, args.explain, options)

    start_time = time.time()
    baked = bake_voxel_model(
        asset.model, asset.primary_color, asset.secondary_color, asset.glow_color, options
    )
    elapsed = time.time() - start_time

    if args.verbose:
        _print_model_stats(asset)
        print(f"  Bake time: {elapsed * 1000:.1f} ms", file=sys.stderr)

    if args.format == "glb":
        mesh = build_baked_mesh(baked)
        GLTFExporter().export(mesh, args.output, f"{args.entity_name or entity}Material")
        if args.verbose:
            print(f"  Vertices: {len(mesh.vertices)}", file=sys.stderr)
            print(f"  Triangles: {mesh.triangle_count}", file=sys.stderr)
            print(f"Exported: {args.output}")
        return 0

    if args.format == "vertex":
        text = export_vertex_color_format(baked)
    elif args.format == "code":
        text = generate_baked_game_code(baked, args.entity_name or entity)
    else:
        text = export_baked_model_json(baked)

    write_output(text, args.output, args.verbose)
    return 0


def process_code(args) -> int:
    """Dynamic-lighting game code."""
    asset, _ = load_source(args)
    if args.verbose:
        _print_model_stats(asset)
    text = generate_game_code(
        asset.model, asset.primary_color, asset.secondary_color, asset.glow_color
    )
    write_output(text, args.output, args.verbose)
    return 0


COMMANDS = {
    "list": process_list,
    "generate": process_generate,
    "bake": process_bake,
    "code": process_code,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return COMMANDS[args.command](args)
    except (VoxelForgeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
