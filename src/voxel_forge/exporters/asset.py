"""
Asset Exchange Format

The editor's import/export JSON: one asset object, or an array of them.

    {"id", "name", "type", "primaryColor", "secondaryColor", "glowColor",
     "voxels": [{"name", "position", "scale", "colorType", "customColor",
                 "colorMultiplier", "emissive", "emissiveIntensity", "group"}],
     "groups": [...]}

Box ids are not exported; importing assigns fresh ones. Everything else
round-trips exactly. Import is all-or-nothing: one malformed asset rejects
the whole document.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence, Union
import json
import logging
import uuid

from ..anatomy import detect_model_type
from ..color import ThemeColors, parse_color
from ..errors import AssetImportError, ColorParseError, InvalidModelError
from ..model import VoxelBox, VoxelModel, generate_box_id

logger = logging.getLogger(__name__)


class AssetType(Enum):
    """Asset kinds the editor knows about."""
    HUMANOID = "humanoid"
    BEAST = "beast"
    SPIRIT = "spirit"
    GOLEM = "golem"
    DRONE = "drone"
    MECH = "mech"
    TREE = "tree"
    CRYSTAL = "crystal"
    MUSHROOM = "mushroom"
    VOLCANIC = "volcanic"
    FROZEN = "frozen"
    RUIN = "ruin"
    NPC = "npc"
    PLAYER = "player"
    PROP = "prop"
    CUSTOM = "custom"


# Nature sub-category -> asset type
_NATURE_TYPES = {
    "trees": AssetType.TREE,
    "crystals": AssetType.CRYSTAL,
    "mushrooms": AssetType.MUSHROOM,
    "volcanic": AssetType.VOLCANIC,
    "frozen": AssetType.FROZEN,
    "ruins": AssetType.RUIN,
}

_COLOR_FIELDS = ("primaryColor", "secondaryColor", "glowColor")


def generate_asset_id() -> str:
    return f"asset_{uuid.uuid4().hex[:12]}"


@dataclass
class VoxelAsset:
    """A model plus the identity and theme colors it is edited with."""

    id: str
    name: str
    type: AssetType
    primary_color: str = "#4a4a5a"
    secondary_color: str = "#3a3a4a"
    glow_color: str = "#00ffff"
    model: VoxelModel = field(default_factory=VoxelModel)

    @property
    def theme(self) -> ThemeColors:
        return ThemeColors(self.primary_color, self.secondary_color, self.glow_color)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "glowColor": self.glow_color,
            "voxels": [box.to_dict(include_id=False) for box in self.model.boxes],
            "groups": list(self.model.groups),
        }


def asset_type_for(key: str, model: VoxelModel) -> AssetType:
    """
    Asset type for a generated archetype.

    Nature, character and prop keys map by category; enemies use the
    anatomy-based model type.
    """
    parts = key.split("/")
    if parts[0] == "nature" and len(parts) > 1:
        return _NATURE_TYPES.get(parts[1], AssetType.CUSTOM)
    if parts[0] == "characters":
        return AssetType.PLAYER if parts[-1] == "player" else AssetType.NPC
    if parts[0] == "props":
        return AssetType.PROP

    detected = detect_model_type(model).value
    try:
        return AssetType(detected)
    except ValueError:
        return AssetType.HUMANOID


def export_asset(asset: VoxelAsset) -> str:
    """Serialize one asset (indent 2)."""
    return json.dumps(asset.to_dict(), indent=2)


def export_assets(assets: Sequence[VoxelAsset]) -> str:
    """Serialize several assets as a JSON array (indent 2)."""
    return json.dumps([asset.to_dict() for asset in assets], indent=2)


def _require(item: Dict[str, Any], key: str, index: int) -> Any:
    if key not in item:
        raise AssetImportError("Missing required field", index=index, field=key)
    return item[key]


def _parse_asset(item: Any, index: int) -> VoxelAsset:
    if not isinstance(item, dict):
        raise AssetImportError("Asset must be a JSON object", index=index)

    name = _require(item, "name", index)
    if not isinstance(name, str):
        raise AssetImportError("Asset name must be a string", index=index, field="name")

    type_value = _require(item, "type", index)
    try:
        asset_type = AssetType(type_value)
    except ValueError:
        raise AssetImportError(f"Unknown asset type {type_value!r}", index=index, field="type")

    colors = {}
    for key in _COLOR_FIELDS:
        value = _require(item, key, index)
        try:
            parse_color(value)
        except ColorParseError:
            raise AssetImportError(f"Invalid color {value!r}", index=index, field=key)
        colors[key] = value

    voxels = _require(item, "voxels", index)
    if not isinstance(voxels, list):
        raise AssetImportError("voxels must be an array", index=index, field="voxels")

    groups = item.get("groups", [])
    if not isinstance(groups, list) or not all(isinstance(g, str) for g in groups):
        raise AssetImportError("groups must be an array of strings", index=index, field="groups")

    boxes: List[VoxelBox] = []
    for box_index, voxel in enumerate(voxels):
        where = f"voxels[{box_index}]"
        if not isinstance(voxel, dict):
            raise AssetImportError("Voxel must be a JSON object", index=index, field=where)
        try:
            box = VoxelBox.from_dict(voxel, box_id=generate_box_id())
            if box.color.is_custom:
                parse_color(box.color.value)
        except ColorParseError as e:
            raise AssetImportError(str(e), index=index, field=f"{where}.customColor")
        except (InvalidModelError, TypeError, ValueError) as e:
            raise AssetImportError(str(e), index=index, field=where)
        boxes.append(box)

    try:
        model = VoxelModel(boxes=boxes, groups=groups)
    except InvalidModelError as e:
        raise AssetImportError(str(e), index=index, field="groups")

    return VoxelAsset(
        id=item.get("id") or generate_asset_id(),
        name=name,
        type=asset_type,
        primary_color=colors["primaryColor"],
        secondary_color=colors["secondaryColor"],
        glow_color=colors["glowColor"],
        model=model,
    )


def import_assets(text: str) -> List[VoxelAsset]:
    """
    Parse exported asset JSON.

    Args:
        text: A single asset object or an array of them

    Returns:
        Imported assets, box ids regenerated

    Raises:
        AssetImportError: naming the offending asset index and field
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AssetImportError(f"Invalid JSON: {e}")

    items: List[Any] = data if isinstance(data, list) else [data]
    assets = [_parse_asset(item, index) for index, item in enumerate(items)]
    logger.debug("Imported %d assets", len(assets))
    return assets


def asset_from_model(
    name: str,
    asset_type: Union[AssetType, str],
    model: VoxelModel,
    theme: ThemeColors
) -> VoxelAsset:
    """New asset around a model, with a fresh asset id."""
    return VoxelAsset(
        id=generate_asset_id(),
        name=name,
        type=AssetType(asset_type),
        primary_color=theme.primary,
        secondary_color=theme.secondary,
        glow_color=theme.glow,
        model=model,
    )
