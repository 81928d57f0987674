"""
Archetype Generators
====================

Procedural box-model generators for every asset archetype of the game, and
the registry the CLI and tools look them up in.

Registry keys are "category/type": "enemies/direWolf", "props/holoAd",
"characters/player" and, for nature pieces, "nature/trees/oak".

Example Usage:
    from voxel_forge.generators import create_model, list_templates

    for category, type_name, display in list_templates():
        print(display)

    wolf = create_model("enemies/direWolf", scale=1.5)
    arch = create_model("nature/ruins/arch", width=10, height=14)
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
import inspect
import logging
import re

import numpy as np

from ..color import ThemeColors
from ..errors import UnknownArchetypeError
from ..model import VoxelModel
from . import characters, creatures, elemental, enemies, mixed, nature, props
from .builder import MIN_EXTENT, MIN_SCALE, ModelBuilder, sanitize_scale
from .palettes import DEFAULT_THEME, ENEMY_COLORS, NATURE_COLORS, PROP_COLORS, get_theme_colors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Archetype:
    """
    One registered generator.

    Attributes:
        key: Registry key, "category/type"
        name: Display name, e.g. "Enemy: Dire Wolf"
        category: "enemies", "nature/trees", "characters" or "props"
        create: Generator function
        height: Approximate in-game height at scale 1 (None for nature)
        colors: Default theme colors
        randomized: Generator draws from an `rng` and varies per call
    """
    key: str
    name: str
    category: str
    create: Callable[..., VoxelModel]
    height: Optional[float]
    colors: ThemeColors
    randomized: bool = False

    @property
    def type_name(self) -> str:
        return self.key.rsplit("/", 1)[-1]

    @property
    def parameters(self) -> Tuple[str, ...]:
        """Keyword arguments the generator accepts."""
        return tuple(inspect.signature(self.create).parameters)


def format_name(text: str) -> str:
    """
    camelCase / kebab-case to display words.

    "direWolf" -> "Dire Wolf", "holo-ad" -> "Holo ad"
    """
    spaced = re.sub(r"([A-Z])", r" \1", text).replace("-", " ")
    if spaced:
        spaced = spaced[0].upper() + spaced[1:]
    return spaced.strip()


ENEMY_MODELS: Dict[str, Tuple[Callable[..., VoxelModel], float]] = {
    # Digital
    "drone": (enemies.create_drone_model, 1.5),
    "streetPunk": (enemies.create_street_punk_model, 2.1),
    "corpSecurity": (enemies.create_corp_security_model, 2.2),
    "netrunner": (enemies.create_netrunner_model, 2.1),
    "enforcer": (enemies.create_enforcer_model, 2.4),
    "mech": (enemies.create_mech_model, 4.0),
    # Fantasy
    "beast": (creatures.create_beast_model, 1.6),
    "spirit": (creatures.create_spirit_model, 2.3),
    "golem": (creatures.create_golem_model, 3.5),
    "wraith": (creatures.create_wraith_model, 2.6),
    "forestSprite": (creatures.create_forest_sprite_model, 1.8),
    "direWolf": (creatures.create_dire_wolf_model, 2.0),
    "crystalGolem": (creatures.create_crystal_golem_model, 3.0),
    "mushroomTender": (creatures.create_mushroom_tender_model, 2.2),
    "ruinWraith": (creatures.create_ruin_wraith_model, 2.4),
    "ancientGuardian": (creatures.create_ancient_guardian_model, 5.1),
    # Mixed
    "defaultHumanoid": (enemies.create_default_humanoid_model, 2.0),
    "hybrid": (mixed.create_hybrid_model, 2.6),
    "corruptedBeast": (mixed.create_corrupted_beast_model, 2.1),
    "glitchSprite": (mixed.create_glitch_sprite_model, 2.5),
    "dataPhantom": (mixed.create_data_phantom_model, 2.3),
    "technoElemental": (mixed.create_techno_elemental_model, 3.1),
    "virusSwarm": (mixed.create_virus_swarm_model, 2.0),
    "systemOverlord": (mixed.create_system_overlord_model, 5.3),
    # Volcanic
    "lavaImp": (elemental.create_lava_imp_model, 1.5),
    "magmaHound": (elemental.create_magma_hound_model, 1.5),
    "ashWraith": (elemental.create_ash_wraith_model, 2.6),
    "volcanicGolem": (elemental.create_volcanic_golem_model, 3.6),
    "fireDrake": (elemental.create_fire_drake_model, 4.5),
    # Frozen
    "frostWisp": (elemental.create_frost_wisp_model, 1.9),
    "iceWolf": (elemental.create_ice_wolf_model, 1.6),
    "frozenRevenant": (elemental.create_frozen_revenant_model, 2.3),
    "iceElemental": (elemental.create_ice_elemental_model, 3.2),
    "blizzardTitan": (elemental.create_blizzard_titan_model, 5.2),
}

NATURE_MODELS: Dict[str, Dict[str, Callable[..., VoxelModel]]] = {
    "trees": {
        "oak": nature.create_oak_tree_model,
        "pine": nature.create_pine_tree_model,
        "willow": nature.create_willow_tree_model,
        "cyberTree": nature.create_cyber_tree_model,
        "corruptedTree": nature.create_corrupted_tree_model,
    },
    "crystals": {
        "cluster": nature.create_crystal_cluster_model,
        "spire": nature.create_crystal_spire_model,
        "floating": nature.create_floating_crystal_model,
        "dataShard": nature.create_data_shard_model,
    },
    "mushrooms": {
        "giant": nature.create_giant_mushroom_model,
        "corrupted": nature.create_corrupted_mushroom_model,
    },
    "volcanic": {
        "lavaPillar": nature.create_lava_pillar_model,
        "obsidianSpire": nature.create_obsidian_spire_model,
        "volcanicVent": nature.create_volcanic_vent_model,
        "magmaPool": nature.create_magma_pool_model,
        "ashMound": nature.create_ash_mound_model,
        "lavaRock": nature.create_lava_rock_model,
    },
    "frozen": {
        "iceSpire": nature.create_ice_spire_model,
        "glacier": nature.create_glacier_model,
        "snowMound": nature.create_snow_mound_model,
        "frozenPillar": nature.create_frozen_pillar_model,
        "iceCrystal": nature.create_ice_crystal_model,
        "snowdrift": nature.create_snowdrift_model,
    },
    "ruins": {
        "pillar": nature.create_pillar_ruin_model,
        "techPillar": nature.create_tech_pillar_model,
        "arch": nature.create_arch_ruin_model,
        "wall": nature.create_wall_ruin_model,
        "temple": nature.create_temple_piece_model,
        "techTemple": nature.create_tech_temple_model,
        "statue": nature.create_statue_ruin_model,
    },
}

CHARACTER_MODELS: Dict[str, Tuple[Callable[..., VoxelModel], float]] = {
    "npc": (characters.create_npc_model, 2.0),
    "player": (characters.create_player_model, 1.9),
}

PROP_MODELS: Dict[str, Tuple[Callable[..., VoxelModel], float]] = {
    "streetlight": (props.create_streetlight_model, 3.5),
    "terminal": (props.create_terminal_model, 1.4),
    "holoAd": (props.create_holo_ad_model, 1.8),
    "vehicle": (props.create_vehicle_model, 1.0),
    "trash": (props.create_trash_model, 0.4),
    "barrel": (props.create_barrel_model, 1.0),
    "crate": (props.create_crate_model, 0.7),
    "bench": (props.create_bench_model, 0.75),
    "vending": (props.create_vending_model, 2.0),
    "dronePad": (props.create_drone_pad_model, 0.35),
    "powerNode": (props.create_power_node_model, 1.55),
    "pipe": (props.create_pipe_model, 0.68),
    "vent": (props.create_vent_model, 0.6),
}


def _register(
    registry: Dict[str, Archetype],
    category: str,
    type_name: str,
    name: str,
    create: Callable[..., VoxelModel],
    height: Optional[float]
) -> None:
    key = f"{category}/{type_name}"
    registry[key] = Archetype(
        key=key,
        name=name,
        category=category,
        create=create,
        height=height,
        colors=get_theme_colors(key),
        randomized="rng" in inspect.signature(create).parameters,
    )


def _build_registry() -> Dict[str, Archetype]:
    registry: Dict[str, Archetype] = {}
    for type_name, (create, height) in ENEMY_MODELS.items():
        _register(registry, "enemies", type_name, f"Enemy: {format_name(type_name)}", create, height)
    for sub, models in NATURE_MODELS.items():
        for type_name, create in models.items():
            _register(registry, f"nature/{sub}", type_name,
                      f"{format_name(sub)}: {format_name(type_name)}", create, None)
    for type_name, (create, height) in CHARACTER_MODELS.items():
        _register(registry, "characters", type_name, f"Character: {format_name(type_name)}", create, height)
    for type_name, (create, height) in PROP_MODELS.items():
        _register(registry, "props", type_name, f"Prop: {format_name(type_name)}", create, height)
    return registry


TEMPLATES: Dict[str, Archetype] = _build_registry()


def list_templates() -> List[Tuple[str, str, str]]:
    """
    All registered archetypes in registry order.

    Returns:
        (category, type, display name) triples
    """
    return [(a.category, a.type_name, a.name) for a in TEMPLATES.values()]


def get_archetype(key: str) -> Archetype:
    """
    Look up an archetype.

    Raises:
        UnknownArchetypeError: if nothing is registered under `key`
    """
    try:
        return TEMPLATES[key]
    except KeyError:
        raise UnknownArchetypeError(f"Unknown archetype '{key}'") from None


def create_model(
    key: str,
    scale: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
    **kwargs
) -> VoxelModel:
    """
    Generate a model by registry key.

    Args:
        key: Registry key, e.g. "enemies/direWolf"
        scale: Model scale; None keeps the generator default
        rng: Random generator, used by randomized archetypes only
        **kwargs: Extra generator arguments (ruins take width/height/depth)

    Returns:
        VoxelModel

    Raises:
        UnknownArchetypeError: for an unregistered key
        TypeError: for arguments the generator does not accept
    """
    archetype = get_archetype(key)
    params = archetype.parameters

    unknown = sorted(set(kwargs) - set(params))
    if unknown:
        raise TypeError(f"{key} does not accept {', '.join(unknown)}")

    if scale is not None:
        kwargs["scale"] = sanitize_scale(scale)
    if archetype.randomized and rng is not None:
        kwargs["rng"] = rng

    logger.debug("Generating %s with %s", key, kwargs)
    return archetype.create(**kwargs)


__all__ = [
    "Archetype",
    "TEMPLATES",
    "ENEMY_MODELS",
    "NATURE_MODELS",
    "CHARACTER_MODELS",
    "PROP_MODELS",
    "DEFAULT_THEME",
    "ENEMY_COLORS",
    "NATURE_COLORS",
    "PROP_COLORS",
    "MIN_EXTENT",
    "MIN_SCALE",
    "ModelBuilder",
    "format_name",
    "list_templates",
    "get_archetype",
    "create_model",
    "get_theme_colors",
    "sanitize_scale",
]
