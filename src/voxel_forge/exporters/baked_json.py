"""
Baked Model JSON Formats

Two files the game loads at runtime:

- "baked-voxel-model": one record per box with its baked hex color, the
  0-255 triple and the unlit original color, plus groups and bake provenance.
  Pretty-printed (indent 2).
- "vertex-color-voxels": compact tuples
  [x, y, z, sx, sy, sz, r, g, b, emissive] with colors normalized to [0, 1]
  and emissive the intensity of glowing boxes (0 otherwise). Single line.

The readers are the Python side of the game's loader contract and are used
to turn either file back into geometry (see voxel_forge.mesh).
"""

from typing import Any, Dict, Union
import json

import numpy as np

from ..bake import BakeOptions, BakedVoxel, BakedVoxelModel, BakingInfo
from ..errors import InvalidModelError
from ..model import BoxColor


FORMAT_VERSION = "1.0"
BAKED_MODEL_TYPE = "baked-voxel-model"
VERTEX_COLOR_TYPE = "vertex-color-voxels"
VOXEL_TUPLE_SIZE = 10


def export_baked_model_json(baked: BakedVoxelModel) -> str:
    """
    Serialize a baked model to the "baked-voxel-model" JSON format.

    Args:
        baked: Baked model

    Returns:
        JSON text
    """
    data = {
        "version": FORMAT_VERSION,
        "type": BAKED_MODEL_TYPE,
        "boxes": [
            {
                "id": box.id,
                "name": box.name,
                "position": list(box.position),
                "scale": list(box.scale),
                "color": box.baked_color,
                "colorRGB": list(box.baked_color_rgb),
                "originalColor": box.original_color,
                "group": box.group,
                "emissive": box.emissive,
                "emissiveIntensity": box.emissive_intensity,
            }
            for box in baked.boxes
        ],
        "groups": list(baked.groups),
        "bakingInfo": baked.baking_info.to_dict(),
    }
    return json.dumps(data, indent=2)


def vertex_color_tuples(baked: BakedVoxelModel) -> np.ndarray:
    """(N, 10) float64 array of the packed vertex-color format."""
    rows = [
        [
            *box.position,
            *box.scale,
            box.baked_color_rgb[0] / 255,
            box.baked_color_rgb[1] / 255,
            box.baked_color_rgb[2] / 255,
            box.emissive_intensity if box.emissive else 0.0,
        ]
        for box in baked.boxes
    ]
    return np.array(rows, dtype=np.float64).reshape(-1, VOXEL_TUPLE_SIZE)


def export_vertex_color_format(baked: BakedVoxelModel) -> str:
    """
    Serialize a baked model to the compact "vertex-color-voxels" format.

    Returns:
        Single-line JSON text
    """
    data = {
        "version": FORMAT_VERSION,
        "type": VERTEX_COLOR_TYPE,
        "count": len(baked.boxes),
        "voxels": vertex_color_tuples(baked).tolist(),
    }
    return json.dumps(data, separators=(",", ":"))


def _parse(text: Union[str, Dict[str, Any]], expected_type: str) -> Dict[str, Any]:
    if isinstance(text, dict):
        data = text
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidModelError(f"Invalid JSON: {e}")
    if not isinstance(data, dict):
        raise InvalidModelError("Expected a JSON object")
    found = data.get("type", expected_type)
    if found != expected_type:
        raise InvalidModelError(f"Expected type {expected_type!r}, got {found!r}")
    return data


def load_baked_model_json(text: Union[str, Dict[str, Any]]) -> BakedVoxelModel:
    """
    Read a "baked-voxel-model" file back into a BakedVoxelModel.

    Args:
        text: JSON text or an already decoded dictionary

    Returns:
        BakedVoxelModel

    Raises:
        InvalidModelError: on malformed input
    """
    data = _parse(text, BAKED_MODEL_TYPE)

    info_data = data.get("bakingInfo") or {}
    options = BakeOptions.from_dict(info_data.get("options"))
    info = BakingInfo(
        timestamp=int(info_data.get("timestamp", 0)),
        lighting_setup=str(info_data.get("lightingSetup", "")),
        options=options,
    )

    boxes = []
    for index, record in enumerate(data.get("boxes", [])):
        try:
            rgb = tuple(int(c) for c in record["colorRGB"])
            baked_hex = record["color"]
            boxes.append(BakedVoxel(
                id=str(record["id"]),
                name=str(record.get("name", "")),
                position=record["position"],
                scale=record["scale"],
                color=BoxColor.custom(baked_hex),
                color_multiplier=1.0,
                emissive=record.get("emissive", False),
                emissive_intensity=record.get("emissiveIntensity", 0.0),
                group=str(record.get("group", "body")),
                baked_color=baked_hex,
                baked_color_rgb=rgb,
                original_color=record.get("originalColor", baked_hex),
                output_format=options.output_format,
            ))
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidModelError(f"Malformed baked box {index}: {e}")

    return BakedVoxelModel(boxes=boxes, groups=list(data.get("groups", [])), baking_info=info)


def load_vertex_color_format(text: Union[str, Dict[str, Any]]) -> np.ndarray:
    """
    Read a "vertex-color-voxels" file.

    Args:
        text: JSON text or an already decoded dictionary

    Returns:
        (N, 10) float64 array, one row per voxel

    Raises:
        InvalidModelError: on malformed tuples
    """
    data = _parse(text, VERTEX_COLOR_TYPE)
    voxels = data.get("voxels", [])

    for index, voxel in enumerate(voxels):
        if not isinstance(voxel, list) or len(voxel) != VOXEL_TUPLE_SIZE:
            raise InvalidModelError(f"Voxel {index} is not a {VOXEL_TUPLE_SIZE}-element tuple")

    try:
        return np.array(voxels, dtype=np.float64).reshape(-1, VOXEL_TUPLE_SIZE)
    except (TypeError, ValueError) as e:
        raise InvalidModelError(f"Non-numeric voxel data: {e}")
