"""
Game Code Exporters

Generate TypeScript snippets for the game's three.js renderer.

- generate_game_code: dynamic-lighting version. Boxes become instance
  matrices of one instanced mesh; colors reference the entity's theme colors
  (primaryCol / secondaryCol / glowCol) so the game can re-theme them.
- generate_baked_game_code: baked version. One BoxGeometry per box with a
  MeshBasicMaterial holding the baked color; no scene lighting required.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, TypeVar
import math

from ..bake import BakedVoxelModel
from ..color import ThemeColors, parse_color
from ..errors import ColorParseError
from ..model import ColorType, DEFAULT_CUSTOM_COLOR, VoxelBox, VoxelModel


DEFAULT_GROUP = "default"

_THEME_VARIABLES = {
    ColorType.PRIMARY: "primaryCol",
    ColorType.SECONDARY: "secondaryCol",
    ColorType.GLOW: "glowCol",
}

BoxT = TypeVar("BoxT", bound=VoxelBox)


def js_number(value: float) -> str:
    """
    Format a number the way JavaScript prints it.

    Shortest round-trip digits, laid out by Number.prototype.toString:
    "2" not "2.0", "0.00001" not "1e-05", exponents from 1e21 and below 1e-6.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest digits that round-trip
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # decimal point position

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{sign}{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"


def iso_timestamp(millis: int) -> str:
    """Epoch milliseconds to "2024-01-01T12:00:00.000Z"."""
    moment = datetime.fromtimestamp(millis / 1000.0, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def group_boxes(boxes: List[BoxT]) -> Dict[str, List[BoxT]]:
    """Boxes keyed by group in first-use order; blank groups go to "default"."""
    grouped: Dict[str, List[BoxT]] = {}
    for box in boxes:
        grouped.setdefault(box.group or DEFAULT_GROUP, []).append(box)
    return grouped


def color_expression(box: VoxelBox) -> str:
    """three.js color expression for a box's tagged color."""
    multiplier = box.color_multiplier
    suffix = f".multiplyScalar({js_number(multiplier)})" if multiplier != 1 else ""

    if box.color.kind is ColorType.CUSTOM:
        value = box.color.value or DEFAULT_CUSTOM_COLOR
        try:
            parse_color(value)
        except ColorParseError:
            raise ColorParseError(value, box_id=box.id, field="customColor")
        return f'new THREE.Color("{value}"){suffix}'

    return f"{_THEME_VARIABLES[box.color.kind]}.clone(){suffix}"


def generate_game_code(
    model: VoxelModel,
    primary_color: str,
    secondary_color: str,
    glow_color: str
) -> str:
    """
    Instanced-mesh renderer code for a model.

    Args:
        model: Model to export
        primary_color: Primary theme color
        secondary_color: Secondary theme color
        glow_color: Glow theme color

    Returns:
        TypeScript source; `x`, `y`, `z` and `mesh` are supplied by the
        surrounding renderer function
    """
    theme = ThemeColors(primary_color, secondary_color, glow_color)
    theme.validate()

    lines = [
        "// === VOXEL RENDERER CODE ===",
        "// Paste this into your entity renderer function",
        "",
        "const tempMatrix = new THREE.Matrix4()",
        "const matrices: THREE.Matrix4[] = []",
        "const colors: THREE.Color[] = []",
        "",
        f'const primaryCol = new THREE.Color("{theme.primary}")',
        f'const secondaryCol = new THREE.Color("{theme.secondary}")',
        f'const glowCol = new THREE.Color("{theme.glow}")',
        "",
    ]

    for group, boxes in group_boxes(model.boxes).items():
        lines.append(f"// --- {group.upper()} ---")
        for box in boxes:
            px, py, pz = box.position
            sx, sy, sz = box.scale
            lines.extend([
                f"// {box.name}",
                f"tempMatrix.makeTranslation(x + {px:.3f}, y + {py:.3f}, z + {pz:.3f})",
                f"tempMatrix.scale(new THREE.Vector3({sx:.3f}, {sy:.3f}, {sz:.3f}))",
                "matrices.push(tempMatrix.clone())",
                f"colors.push({color_expression(box)})",
                "",
            ])

    lines.extend([
        "// Apply to instanced mesh",
        "matrices.forEach((mat, i) => {",
        "  mesh.setMatrixAt(i, mat)",
        "  mesh.setColorAt(i, colors[i])",
        "})",
        "mesh.instanceMatrix.needsUpdate = true",
        "if (mesh.instanceColor) mesh.instanceColor.needsUpdate = true",
    ])

    return "\n".join(lines)


def generate_baked_game_code(baked: BakedVoxelModel, entity_name: str = "Entity") -> str:
    """
    Per-box mesh code with baked colors.

    Args:
        baked: Baked model
        entity_name: Used in the factory name, create{entity_name}Mesh

    Returns:
        TypeScript source defining `create{entity_name}Mesh(): THREE.Group`
    """
    info = baked.baking_info
    lines = [
        f"// Baked voxel model for {entity_name}",
        f"// Generated: {iso_timestamp(info.timestamp)}",
        f"// Lighting: {info.lighting_setup}",
        "",
        f"function create{entity_name}Mesh(): THREE.Group {{",
        "  const group = new THREE.Group()",
        "",
    ]

    for group, boxes in group_boxes(baked.boxes).items():
        lines.append(f"  // {group}")
        for box in boxes:
            sx, sy, sz = (js_number(v) for v in box.scale)
            px, py, pz = (js_number(v) for v in box.position)
            lines.extend([
                "  {",
                f"    const geo = new THREE.BoxGeometry({sx}, {sy}, {sz})",
                "    const mat = new THREE.MeshBasicMaterial({",
                f'      color: "{box.baked_color}",',
            ])
            if box.glows:
                lines.append("      // Original had emissive, consider adding bloom/glow effect")
            lines.extend([
                "    })",
                "    const mesh = new THREE.Mesh(geo, mat)",
                f"    mesh.position.set({px}, {py}, {pz})",
                "    group.add(mesh)",
                "  }",
            ])
        lines.append("")

    lines.extend([
        "  return group",
        "}",
    ])

    return "\n".join(lines)
