"""
Voxel Box and Model Data Structures

This module provides:
- BoxColor: Tagged color reference (primary / secondary / glow / custom)
- VoxelBox: One axis-aligned, variably scaled box of a model
- VoxelModel: A named collection of boxes plus its group list

Boxes are not unit voxels: each one carries its own center position and
full extents, and is rendered in-engine as a single flat-colored instance.

Wire format (shared with the editor and the game):
    {"id", "name", "position": [x, y, z], "scale": [sx, sy, sz],
     "colorType", "customColor", "colorMultiplier",
     "emissive", "emissiveIntensity", "group"}
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple
import math
import uuid

import numpy as np

from .errors import InvalidModelError


Vec3 = Tuple[float, float, float]

# Neutral gray used when a custom-colored box carries no color value
DEFAULT_CUSTOM_COLOR = "#888888"


class ColorType(Enum):
    """How a box's base color is looked up."""
    PRIMARY = "primary"       # Asset primary theme color
    SECONDARY = "secondary"   # Asset secondary/armor theme color
    GLOW = "glow"             # Asset glow/emissive theme color
    CUSTOM = "custom"         # Literal color string on the box


@dataclass(frozen=True)
class BoxColor:
    """
    Color reference of a box.

    Theme references carry no value; custom colors always carry one.
    Build instances through the classmethods rather than the constructor.
    """

    kind: ColorType
    value: Optional[str] = None

    def __post_init__(self):
        if self.kind is ColorType.CUSTOM:
            if not isinstance(self.value, str) or not self.value.strip():
                raise InvalidModelError("Custom box colors need a color string")
        elif self.value is not None:
            raise InvalidModelError(
                f"Theme color '{self.kind.value}' cannot carry a literal value"
            )

    @classmethod
    def primary(cls) -> "BoxColor":
        return cls(ColorType.PRIMARY)

    @classmethod
    def secondary(cls) -> "BoxColor":
        return cls(ColorType.SECONDARY)

    @classmethod
    def glow(cls) -> "BoxColor":
        return cls(ColorType.GLOW)

    @classmethod
    def custom(cls, value: Optional[str] = None) -> "BoxColor":
        return cls(ColorType.CUSTOM, value or DEFAULT_CUSTOM_COLOR)

    @classmethod
    def from_wire(
        cls,
        color_type: str,
        custom_color: Optional[str] = None
    ) -> "BoxColor":
        """
        Build from the `colorType` / `customColor` pair of the wire format.

        Legacy assets sometimes carry a `customColor` next to a theme
        `colorType`; it has no effect there and is dropped.
        """
        try:
            kind = ColorType(color_type)
        except ValueError:
            raise InvalidModelError(f"Unknown colorType: {color_type!r}")

        if kind is ColorType.CUSTOM:
            return cls.custom(custom_color)
        return cls(kind)

    @property
    def is_custom(self) -> bool:
        return self.kind is ColorType.CUSTOM


def _as_vec3(value: Iterable[float], label: str) -> Vec3:
    try:
        x, y, z = (float(v) for v in value)
    except (TypeError, ValueError):
        raise InvalidModelError(f"{label} must be three numbers, got {value!r}")
    if not all(math.isfinite(c) for c in (x, y, z)):
        raise InvalidModelError(f"{label} must be finite, got {(x, y, z)}")
    return (x, y, z)


def _as_number(value: Any, label: str, box_id: str) -> float:
    # bool is an int subclass; reject it along with strings and None
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise InvalidModelError(f"Box '{box_id}' {label} must be a number, got {value!r}")
    return float(value)


@dataclass
class VoxelBox:
    """
    One axis-aligned box instance.

    Attributes:
        id: Unique within the owning model
        name: Human-readable label (diagnostic/export only)
        position: Box center in model-local units
        scale: Full width/height/depth, all strictly positive
        color: Tagged color reference
        color_multiplier: Positive scalar applied to the resolved color
        emissive: Whether the box glows
        emissive_intensity: Glow strength, used when emissive is set
        group: Anatomical/structural part tag (e.g. "head", "leg_left")
    """

    id: str
    name: str
    position: Vec3
    scale: Vec3
    color: BoxColor = field(default_factory=BoxColor.primary)
    color_multiplier: float = 1.0
    emissive: bool = False
    emissive_intensity: float = 0.0
    group: str = "body"

    def __post_init__(self):
        self.position = _as_vec3(self.position, "position")
        self.scale = _as_vec3(self.scale, "scale")

        if min(self.scale) <= 0:
            raise InvalidModelError(
                f"Box '{self.id}' has a non-positive scale {self.scale}"
            )

        self.color_multiplier = _as_number(self.color_multiplier, "colorMultiplier", self.id)
        if not math.isfinite(self.color_multiplier) or self.color_multiplier <= 0:
            raise InvalidModelError(
                f"Box '{self.id}' colorMultiplier must be positive, "
                f"got {self.color_multiplier}"
            )

        if not isinstance(self.emissive, (bool, np.bool_)):
            raise InvalidModelError(
                f"Box '{self.id}' emissive must be true or false, got {self.emissive!r}"
            )
        self.emissive = bool(self.emissive)
        self.emissive_intensity = _as_number(self.emissive_intensity, "emissiveIntensity", self.id)
        if not math.isfinite(self.emissive_intensity) or self.emissive_intensity < 0:
            raise InvalidModelError(
                f"Box '{self.id}' emissiveIntensity must be >= 0, "
                f"got {self.emissive_intensity}"
            )

    @property
    def color_type(self) -> ColorType:
        return self.color.kind

    @property
    def custom_color(self) -> Optional[str]:
        return self.color.value

    @property
    def glows(self) -> bool:
        """True when the box contributes emissive light."""
        return self.emissive and self.emissive_intensity > 0

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        """Convert to the camelCase wire dictionary."""
        data: Dict[str, Any] = {}
        if include_id:
            data["id"] = self.id
        data.update({
            "name": self.name,
            "position": list(self.position),
            "scale": list(self.scale),
            "colorType": self.color.kind.value,
            "customColor": self.color.value,
            "colorMultiplier": self.color_multiplier,
            "emissive": self.emissive,
            "emissiveIntensity": self.emissive_intensity,
            "group": self.group,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], box_id: Optional[str] = None) -> "VoxelBox":
        """
        Build a box from its wire dictionary.

        Args:
            data: Wire dictionary
            box_id: Overrides the id found in `data` (or supplies a missing one)
        """
        try:
            return cls(
                id=box_id if box_id is not None else str(data["id"]),
                name=str(data.get("name", "")),
                position=data["position"],
                scale=data["scale"],
                color=BoxColor.from_wire(
                    data.get("colorType", "primary"), data.get("customColor")
                ),
                color_multiplier=data.get("colorMultiplier", 1.0),
                emissive=data.get("emissive", False),
                emissive_intensity=data.get("emissiveIntensity", 0.0),
                group=str(data.get("group", "body")),
            )
        except KeyError as e:
            raise InvalidModelError(f"Box is missing required field {e.args[0]!r}")


def generate_box_id(prefix: str = "voxel") -> str:
    """Fresh globally unique box id, used when instantiating or importing."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


@dataclass
class VoxelModel:
    """
    A collection of boxes and the ordered list of group names.

    Invariants checked on construction:
    - Box ids are unique
    - `groups` has no duplicates

    Every box group should also appear in `groups`; generators guarantee it,
    hand-edited models may not (see `missing_groups`).
    """

    boxes: List[VoxelBox] = field(default_factory=list)
    groups: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.boxes = list(self.boxes)
        self.groups = list(self.groups)

        seen = set()
        for box in self.boxes:
            if box.id in seen:
                raise InvalidModelError(f"Duplicate box id: {box.id!r}")
            seen.add(box.id)

        if len(set(self.groups)) != len(self.groups):
            raise InvalidModelError(f"Duplicate group names in {self.groups}")

    def __len__(self) -> int:
        return len(self.boxes)

    @property
    def is_empty(self) -> bool:
        return not self.boxes

    def group_names(self) -> List[str]:
        """Distinct groups used by boxes, in first-use order."""
        return list(dict.fromkeys(box.group for box in self.boxes))

    def missing_groups(self) -> List[str]:
        """Groups used by boxes but not declared in `groups`."""
        declared = set(self.groups)
        return [g for g in self.group_names() if g not in declared]

    def boxes_in_group(self, group: str) -> List[VoxelBox]:
        return [box for box in self.boxes if box.group == group]

    def get_box(self, box_id: str) -> Optional[VoxelBox]:
        for box in self.boxes:
            if box.id == box_id:
                return box
        return None

    def positions(self) -> np.ndarray:
        """Box centers as an (N, 3) float64 array."""
        if not self.boxes:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([box.position for box in self.boxes], dtype=np.float64)

    def scales(self) -> np.ndarray:
        """Box extents as an (N, 3) float64 array."""
        if not self.boxes:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([box.scale for box in self.boxes], dtype=np.float64)

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Axis-aligned bounds of all boxes (including their extents).

        Returns:
            (min_xyz, max_xyz); both zero for an empty model
        """
        if not self.boxes:
            return (np.zeros(3), np.zeros(3))
        positions = self.positions()
        half = self.scales() / 2.0
        return ((positions - half).min(axis=0), (positions + half).max(axis=0))

    def copy(self) -> "VoxelModel":
        return VoxelModel(
            boxes=[replace(box) for box in self.boxes],
            groups=list(self.groups)
        )

    def with_regenerated_ids(self, prefix: str = "voxel") -> "VoxelModel":
        """Copy of the model with fresh, globally unique box ids."""
        return VoxelModel(
            boxes=[replace(box, id=generate_box_id(prefix)) for box in self.boxes],
            groups=list(self.groups)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "boxes": [box.to_dict() for box in self.boxes],
            "groups": list(self.groups),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VoxelModel":
        return cls(
            boxes=[VoxelBox.from_dict(b) for b in data.get("boxes", [])],
            groups=list(data.get("groups", [])),
        )
