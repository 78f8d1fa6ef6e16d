from __future__ import annotations

import math
from collections import namedtuple

from .linalg import Vec3
from .plants import ColorPalette, PlantCategory

PlantEntry = namedtuple(
    "PlantEntry",
    ["id", "name", "latin_name", "chinese_name", "feature", "category", "palette", "position"],
)
# position: Vec3 in world units, always on the ground plane (y == 0).

T = PlantCategory

# name, latin name, chinese name, feature, category, (primary, secondary, foliage)
_PLANTS = (
    ("Bird of Paradise", "Strelitzia reginae", "鹤望兰",
     "Iconic orange and blue flowers resembling a crane.",
     T.TALL_FLOWER, ("#FF6600", "#0000FF", "#006400")),
    ("Hibiscus", "Hibiscus rosa-sinensis", "扶桑",
     "Large trumpet-shaped flowers with prominent stamens.",
     T.BUSH_FLOWER, ("#FF0033", "#FFFF00", "#004d00")),
    ("Frangipani", "Plumeria rubra", "鸡蛋花",
     "Fragrant, spiral-shaped waxy flowers.",
     T.TREE_SMALL, ("#FFFACD", "#FFD700", "#228B22")),
    ("Bougainvillea", "Bougainvillea spectabilis", "三角梅",
     "Vigorous climber with paper-like colorful bracts.",
     T.VINE, ("#FF00FF", None, "#006400")),
    ("Flamingo Flower", "Anthurium andraeanum", "红掌",
     "Glossy, heart-shaped red spathes.",
     T.BROAD_LEAF, ("#DC143C", "#FFFFE0", "#004d00")),
    ("Lobster Claw", "Heliconia rostrata", "垂花赫蕉",
     "Hanging beak-like bracts like lobster claws.",
     T.TALL_FLOWER, ("#FF4500", "#FFFF00", "#2E8B57")),
    ("Moth Orchid", "Phalaenopsis aphrodite", "蝴蝶兰",
     "Elegant flowers resembling butterflies in flight.",
     T.ORCHID, ("#DA70D6", "#FFFFFF", "#556B2F")),
    ("Canna Lily", "Canna indica", "美人蕉",
     "Tall spikes of iris-like flowers and banana-like leaves.",
     T.TALL_FLOWER, ("#FF8C00", None, "#6B8E23")),
    ("Jungle Geranium", "Ixora coccinea", "龙船花",
     "Dense clusters of fiery red or orange flowers.",
     T.BUSH_FLOWER, ("#FF4500", None, "#005000")),
    ("Golden Trumpet", "Allamanda cathartica", "软枝黄蝉",
     "Climbing shrub with bright yellow trumpet blossoms.",
     T.VINE, ("#FFD700", None, "#32CD32")),
    ("White Ginger Lily", "Hedychium coronarium", "姜花",
     "Fragrant white flowers that look like butterflies.",
     T.TALL_FLOWER, ("#F0F8FF", None, "#228B22")),
    ("Passion Flower", "Passiflora caerulea", "西番莲",
     "Intricate flowers with a unique central crown.",
     T.VINE, ("#9400D3", "#FFFFFF", "#006400")),
    ("Lotus", "Nelumbo nucifera", "荷花",
     "Sacred aquatic plant with large round leaves.",
     T.BROAD_LEAF, ("#FF69B4", "#FFFFE0", "#2E8B57")),
    ("Monstera", "Monstera deliciosa", "龟背竹",
     "Huge, glossy leaves with natural holes.",
     T.BROAD_LEAF, ("#004d00", None, "#004d00")),
    ("Croton", "Codiaeum variegatum", "变叶木",
     "Leathery leaves with spectacular variegation.",
     T.BUSH_FLOWER, ("#FF8C00", "#FF0000", "#006400")),
    ("Elephant Ear", "Alocasia macrorrhizos", "海芋",
     "Dramatic, giant arrow-shaped leaves.",
     T.BROAD_LEAF, ("#006400", None, "#006400")),
    ("Silver Vase Bromeliad", "Aechmea fasciata", "蜻蜓凤梨",
     "Rosette of silver-banded leaves with pink spike.",
     T.ORCHID, ("#FF1493", None, "#708090")),
    ("Rubber Fig", "Ficus elastica", "橡皮树",
     "Thick, shiny, dark green structural leaves.",
     T.TREE_SMALL, ("#1a1a1a", None, "#2F4F4F")),
    ("Peace Lily", "Spathiphyllum wallisii", "白掌",
     "Dark green foliage with white spoon-shaped flowers.",
     T.BROAD_LEAF, ("#FFFFFF", None, "#004d00")),
    ("Golden Pothos", "Epipremnum aureum", "绿萝",
     "Hardy trailing vine with marbled heart leaves.",
     T.VINE, ("#ADFF2F", None, "#006400")),
)

SPIRAL_BASE = 4.0
SPIRAL_STEP = 1.0
SPIRAL_ANGLE = 2.4


def spiral_position(i: int) -> Vec3:
    # Radius grows with the index so larger plants further out get room.
    r = SPIRAL_BASE + i * SPIRAL_STEP
    theta = i * SPIRAL_ANGLE
    return Vec3(r * math.cos(theta), 0.0, r * math.sin(theta))


def build_catalog(plants=_PLANTS) -> tuple[PlantEntry, ...]:
    entries = []
    for i, (name, latin, chinese, feature, category, (primary, secondary, foliage)) in enumerate(plants):
        entries.append(
            PlantEntry(
                id=i,
                name=name,
                latin_name=latin,
                chinese_name=chinese,
                feature=feature,
                category=category,
                palette=ColorPalette.from_hex(primary, foliage, secondary),
                position=spiral_position(i),
            )
        )
    return tuple(entries)


GARDEN = build_catalog()


def find(catalog, plant_id: int):
    for entry in catalog:
        if entry.id == plant_id:
            return entry
    return None
