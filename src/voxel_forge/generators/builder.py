"""
Model Builder

Shared scaffolding for the archetype generators:
- A call-scoped id counter (one builder per generation call)
- Uniform scaling of positions and extents
- Ring / mirrored-pair helpers for the common placement patterns
- Group bookkeeping so every used group ends up in `VoxelModel.groups`
"""

from typing import Iterable, List, Optional, Sequence, Union
import logging
import math

import numpy as np

from ..model import BoxColor, VoxelBox, VoxelModel

logger = logging.getLogger(__name__)


# Smallest model scale a generator accepts
MIN_SCALE = 0.01
# Smallest box extent; tapers that reach zero width are clamped to this
MIN_EXTENT = 0.001

# Left (-X) then right (+X)
SIDES = (-1, 1)

ColorSpec = Union[BoxColor, str]

_THEME_SLOTS = {
    "primary": BoxColor.primary,
    "secondary": BoxColor.secondary,
    "glow": BoxColor.glow,
}


def sanitize_scale(value, default: float = 1.0, name: str = "scale") -> float:
    """
    Validate a generator scale or dimension argument.

    Args:
        value: Requested value (None means `default`)
        default: Archetype default
        name: Argument name used in the warning

    Returns:
        A finite value >= MIN_SCALE
    """
    if value is None:
        return default
    try:
        scale = float(value)
    except (TypeError, ValueError):
        logger.warning("Non-numeric %s %r, using %s", name, value, MIN_SCALE)
        return MIN_SCALE
    if not math.isfinite(scale) or scale < MIN_SCALE:
        logger.warning("%s %r out of range, clamped to %s", name.capitalize(), value, MIN_SCALE)
        return MIN_SCALE
    return scale


def resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    """Seeded generator for tests, a fresh unseeded one otherwise."""
    return rng if rng is not None else np.random.default_rng()


def side_label(side: int) -> str:
    return "Left" if side < 0 else "Right"


def side_tag(side: int) -> str:
    return "left" if side < 0 else "right"


def as_color(color: ColorSpec) -> BoxColor:
    """Theme slot names select theme colors; any other string is a custom color."""
    if isinstance(color, BoxColor):
        return color
    factory = _THEME_SLOTS.get(color)
    if factory is not None:
        return factory()
    return BoxColor.custom(color)


class ModelBuilder:
    """
    Accumulates boxes for one generation call.

    Usage:
        b = ModelBuilder("drone", scale)
        b.add("Main Eye", (0, 1.4, 0.32), (0.18, 0.18, 0.06), "glow", 2.5,
              emissive=1.0, group="sensors")
        return b.build(["body", "sensors"])
    """

    def __init__(self, prefix: str, scale: float = 1.0):
        """
        Args:
            prefix: Box id prefix, e.g. "drone" gives ids "drone_0", "drone_1", ...
            scale: Uniform model scale applied to positions and extents
        """
        self.prefix = prefix
        self.scale = sanitize_scale(scale)
        self.boxes: List[VoxelBox] = []
        self._counter = 0

    def next_id(self) -> str:
        box_id = f"{self.prefix}_{self._counter}"
        self._counter += 1
        return box_id

    def add(
        self,
        name: str,
        position: Sequence[float],
        size: Sequence[float],
        color: ColorSpec = "primary",
        multiplier: float = 1.0,
        emissive: float = 0.0,
        group: str = "body"
    ) -> VoxelBox:
        """
        Add one box.

        Args:
            name: Box label
            position: Center, before model scaling
            size: Extents, before model scaling; clamped to MIN_EXTENT
            color: Theme slot name, custom color string or BoxColor
            multiplier: Color multiplier
            emissive: Emissive intensity; > 0 marks the box emissive
            group: Group name

        Returns:
            The new box
        """
        s = self.scale
        box = VoxelBox(
            id=self.next_id(),
            name=name,
            position=(position[0] * s, position[1] * s, position[2] * s),
            scale=tuple(max(float(v) * s, MIN_EXTENT) for v in size),
            color=as_color(color),
            color_multiplier=multiplier,
            emissive=emissive > 0,
            emissive_intensity=emissive,
            group=group,
        )
        self.boxes.append(box)
        return box

    def mirrored(
        self,
        name: str,
        position: Sequence[float],
        size: Sequence[float],
        color: ColorSpec = "primary",
        multiplier: float = 1.0,
        emissive: float = 0.0,
        group: str = "body"
    ) -> List[VoxelBox]:
        """
        Add a left/right pair, mirroring X.

        `position[0]` is the right-hand (+X) offset. A "{side}" placeholder in
        `group` becomes "left" / "right", so "arm_{side}" yields "arm_left"
        and "arm_right".
        """
        boxes = []
        for side in SIDES:
            boxes.append(self.add(
                f"{side_label(side)} {name}",
                (position[0] * side, position[1], position[2]),
                size, color, multiplier, emissive,
                group.format(side=side_tag(side)),
            ))
        return boxes

    def ring(
        self,
        name: str,
        count: int,
        radius: float,
        y: float,
        size: Sequence[float],
        color: ColorSpec = "primary",
        multiplier: float = 1.0,
        emissive: float = 0.0,
        group: str = "body",
        center: Sequence[float] = (0.0, 0.0),
        phase: float = 0.0
    ) -> List[VoxelBox]:
        """
        Add `count` boxes evenly spaced on a horizontal circle.

        Box i sits at (cx + cos(t) * radius, y, cz + sin(t) * radius) with
        t = phase + 2 * pi * i / count.
        """
        boxes = []
        for i in range(count):
            theta = phase + (i / count) * math.pi * 2
            boxes.append(self.add(
                f"{name} {i}",
                (center[0] + math.cos(theta) * radius, y, center[1] + math.sin(theta) * radius),
                size, color, multiplier, emissive, group,
            ))
        return boxes

    def used_groups(self) -> List[str]:
        return list(dict.fromkeys(box.group for box in self.boxes))

    def build(self, groups: Optional[Iterable[str]] = None) -> VoxelModel:
        """
        Finish the model.

        Args:
            groups: Declared group order; groups used by boxes but not
                    declared are appended in first-use order

        Returns:
            VoxelModel
        """
        declared = list(dict.fromkeys(groups or []))
        for group in self.used_groups():
            if group not in declared:
                declared.append(group)
        return VoxelModel(boxes=self.boxes, groups=declared)
