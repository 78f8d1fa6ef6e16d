from __future__ import annotations

WIDTH = 960
HEIGHT = 640
FPS_LIMIT = 60

# World units per voxel cell.
VOXEL_SIZE = 0.15

# Avatar locomotion.
SPEED = 4.0
AVATAR_RADIUS = 0.4
ARRIVE_EPSILON = 0.1
BOB_FREQUENCY = 12.0
BOB_HEIGHT = 0.15

# Planar exclusion radius per plant category name.
OBSTACLE_RADII = {
    "BUSH_FLOWER": 1.5,
    "BROAD_LEAF": 1.2,
    "TREE_SMALL": 1.0,
    "VINE": 0.8,
}
DEFAULT_OBSTACLE_RADIUS = 0.8
# Direction used when the avatar sits exactly on an obstacle center.
COLLISION_FALLBACK_AXIS = (1.0, 0.0)

# Nearest plant closer than this is surfaced in the info panel.
INTERACTION_RADIUS = 4.0

# Fixed structural colors used by the plant recipes.
STEM_BROWN = (0x4A, 0x3C, 0x31)
BARK_BROWN = (0x5D, 0x40, 0x37)
POT_BROWN = (0x8B, 0x45, 0x13)
ORCHID_STEM = (0x55, 0x6B, 0x2F)
SPATHE_STALK = (0x2E, 0x8B, 0x57)
FLOWER_CENTER = (0xFF, 0xFF, 0x00)

# Avatar palette.
SKIN = (0xFF, 0xDC, 0xB1)
HAIR = (0x1A, 0x1A, 0x1A)
SHIRT = (0xFF, 0xFF, 0xFF)
SHORTS = (0x1A, 0x1A, 0x1A)
SHOES = (0x33, 0x33, 0x33)

# Fixed orbit camera.
CAM_POS = (20.0, 20.0, 20.0)
CAM_TARGET = (0.0, 0.0, 0.0)
FOV = 28.0
NEAR = 0.1
FAR = 200.0

SKY_COLOR = (77, 182, 172)
GROUND_COLOR = (45, 76, 30)
GROUND_RADIUS = 38.0
SHADOW_COLOR = (30, 52, 20)
PLANT_SHADOW_RADIUS = 1.2
AVATAR_SHADOW_RADIUS = 0.35
HUD_BG = (255, 248, 231)
HUD_FG = (6, 78, 59)
# System fonts tried in order for the plants' chinese names.
CJK_FONTS = "notosanscjksc,notosanscjk,wenquanyimicrohei,microsoftyahei,simhei,pingfangsc,arialunicodems"
