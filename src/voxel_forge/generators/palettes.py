"""
Default theme colors per archetype, as used by the game.

Keys are the registry type names ("direWolf", "holoAd"); `get_theme_colors`
also accepts full registry keys ("enemies/direWolf") and the game's kebab-case
ids ("dire-wolf"). Nature pieces are keyed by "sub/type" ("trees/oak") since
their type names repeat across sub-categories.
"""

from typing import Dict
import re

from ..color import ThemeColors


# Editor defaults for a new asset
DEFAULT_THEME = ThemeColors("#4a4a5a", "#3a3a4a", "#00ffff")


def _t(primary: str, secondary: str, glow: str) -> ThemeColors:
    return ThemeColors(primary, secondary, glow)


ENEMY_COLORS: Dict[str, ThemeColors] = {
    # Digital
    "corpSecurity": _t("#1a3a5c", "#2a5a8c", "#00aaff"),
    "streetPunk": _t("#4a2a4a", "#6a3a6a", "#ff00ff"),
    "netrunner": _t("#0a2a2a", "#00ffff", "#00ffff"),
    "enforcer": _t("#2a2a3a", "#4a4a6a", "#ff3333"),
    "drone": _t("#3a3a3a", "#5a5a5a", "#ffaa00"),
    "mech": _t("#1a1a2a", "#3a3a5a", "#ff0000"),
    "defaultHumanoid": _t("#555555", "#777777", "#00ff00"),
    # Fantasy
    "forestSprite": _t("#88ff88", "#44aa44", "#aaffaa"),
    "direWolf": _t("#4a4a5a", "#3a3a4a", "#ffaa00"),
    "crystalGolem": _t("#aa66ff", "#8844cc", "#ff88ff"),
    "mushroomTender": _t("#ff8866", "#cc6644", "#ffaa88"),
    "ruinWraith": _t("#aaaacc", "#8888aa", "#ddddff"),
    "ancientGuardian": _t("#ddaa66", "#aa8844", "#ffdd88"),
    "beast": _t("#4a3a2a", "#6a5a4a", "#ff6600"),
    "spirit": _t("#6666aa", "#8888cc", "#aaaaff"),
    "golem": _t("#555566", "#777788", "#00ff88"),
    "wraith": _t("#2a2a3a", "#4a4a5a", "#8866ff"),
    # Mixed
    "glitchSprite": _t("#00ff88", "#00aa55", "#00ffff"),
    "corruptedBeast": _t("#ff0066", "#aa0044", "#ff00ff"),
    "dataPhantom": _t("#8888ff", "#6666cc", "#aaaaff"),
    "technoElemental": _t("#00ffaa", "#00aa77", "#88ffdd"),
    "virusSwarm": _t("#ff3366", "#cc2244", "#ff6699"),
    "systemOverlord": _t("#220033", "#440055", "#ff00ff"),
    "hybrid": _t("#3a4a3a", "#5a6a5a", "#00ffaa"),
    # Volcanic
    "lavaImp": _t("#ff4400", "#aa2200", "#ffaa00"),
    "magmaHound": _t("#cc3300", "#992200", "#ff6600"),
    "ashWraith": _t("#444444", "#666666", "#ff8800"),
    "volcanicGolem": _t("#331100", "#551100", "#ff4400"),
    "fireDrake": _t("#aa1100", "#771100", "#ff0000"),
    # Frozen
    "frostWisp": _t("#aaddff", "#88bbdd", "#ffffff"),
    "iceWolf": _t("#6699cc", "#4477aa", "#88ddff"),
    "frozenRevenant": _t("#334455", "#556677", "#aaccff"),
    "iceElemental": _t("#88ccff", "#66aadd", "#ffffff"),
    "blizzardTitan": _t("#2244aa", "#113388", "#aaddff"),
}

PROP_COLORS: Dict[str, ThemeColors] = {
    "streetlight": _t("#3a3a4a", "#5a5a6a", "#ffaa44"),
    "terminal": _t("#2a2a3a", "#4a4a5a", "#00ffff"),
    "holoAd": _t("#1a1a2a", "#3a3a4a", "#ff00ff"),
    "vehicle": _t("#2a3a4a", "#4a5a6a", "#ff3333"),
    "trash": _t("#3a3a2a", "#4a4a3a", "#66aa66"),
    "barrel": _t("#4a3a2a", "#5a4a3a", "#ff6600"),
    "crate": _t("#5a4a3a", "#6a5a4a", "#ffaa00"),
    "bench": _t("#4a4a5a", "#5a5a6a", "#0088ff"),
    "vending": _t("#2a2a4a", "#4a4a6a", "#00ff88"),
    "dronePad": _t("#3a3a3a", "#5a5a5a", "#00aaff"),
    "powerNode": _t("#1a2a3a", "#3a4a5a", "#00ffff"),
    "pipe": _t("#4a4a4a", "#5a5a5a", "#88ff88"),
    "vent": _t("#3a3a3a", "#4a4a4a", "#ffaa00"),
}

NATURE_COLORS: Dict[str, ThemeColors] = {
    # Trees
    "trees/oak": _t("#2d6a2d", "#331e0d", "#88ff88"),
    "trees/pine": _t("#0d331a", "#331e0d", "#88ff88"),
    "trees/willow": _t("#6b8e3a", "#4a3520", "#ccff88"),
    "trees/cyberTree": _t("#0d1a14", "#1a3326", "#00ffaa"),
    "trees/corruptedTree": _t("#26050d", "#660026", "#ff0066"),
    # Crystals
    "crystals/cluster": _t("#8844cc", "#6633aa", "#aa66ff"),
    "crystals/spire": _t("#cc44cc", "#aa33aa", "#ff66ff"),
    "crystals/floating": _t("#4444cc", "#3333aa", "#6666ff"),
    "crystals/dataShard": _t("#00aa77", "#007755", "#00ffaa"),
    # Mushrooms
    "mushrooms/giant": _t("#aa3344", "#e6d9bf", "#66ffcc"),
    "mushrooms/corrupted": _t("#ff0088", "#3d2626", "#ff00ff"),
    # Volcanic
    "volcanic/lavaPillar": _t("#331100", "#221100", "#ff4400"),
    "volcanic/obsidianSpire": _t("#1a0d26", "#0d0614", "#8844ff"),
    "volcanic/volcanicVent": _t("#442200", "#33261a", "#ff6600"),
    "volcanic/magmaPool": _t("#261408", "#1a0d05", "#ff5500"),
    "volcanic/ashMound": _t("#333333", "#222222", "#ff6600"),
    "volcanic/lavaRock": _t("#2a1a0d", "#1a1008", "#ff4400"),
    # Frozen
    "frozen/iceSpire": _t("#88bbdd", "#6699bb", "#ffffff"),
    "frozen/glacier": _t("#88aacc", "#6688aa", "#ddeeff"),
    "frozen/snowMound": _t("#f2f2ff", "#ddddee", "#ffffff"),
    "frozen/frozenPillar": _t("#6699bb", "#4477aa", "#aaddff"),
    "frozen/iceCrystal": _t("#aaddff", "#88bbdd", "#ffffff"),
    "frozen/snowdrift": _t("#f0f0f8", "#ddddee", "#ffffff"),
    # Ruins
    "ruins/pillar": _t("#8a8070", "#6a6050", "#ffaa44"),
    "ruins/techPillar": _t("#6a6a70", "#4a4a50", "#ffff00"),
    "ruins/arch": _t("#8a8070", "#6a6050", "#ffaa44"),
    "ruins/wall": _t("#7a7060", "#5a5040", "#ffaa44"),
    "ruins/temple": _t("#9a9080", "#7a7060", "#ffaa44"),
    "ruins/techTemple": _t("#7a7a80", "#5a5a60", "#00ffaa"),
    "ruins/statue": _t("#8a8a80", "#6a6a60", "#ffaa44"),
}

# Game ids that differ from the registry names
_ALIASES = {
    "corpGrunt": "corpSecurity",
    "combatDrone": "drone",
    "mechBoss": "mech",
    "vendingMachine": "vending",
}


def _camel(name: str) -> str:
    return re.sub(r"-([a-z0-9])", lambda m: m.group(1).upper(), name)


def get_theme_colors(key: str) -> ThemeColors:
    """
    Default theme colors of an archetype.

    Args:
        key: "direWolf", "enemies/direWolf", "dire-wolf" or "nature/trees/oak"

    Returns:
        ThemeColors; the editor defaults for unknown keys
    """
    parts = key.split("/")
    if len(parts) >= 2 and "/".join(parts[-2:]) in NATURE_COLORS:
        return NATURE_COLORS["/".join(parts[-2:])]
    name = _camel(parts[-1])
    name = _ALIASES.get(name, name)
    return ENEMY_COLORS.get(name) or PROP_COLORS.get(name) or DEFAULT_THEME
