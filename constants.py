#   Y
#   |
#   |
#   |
#   /\
#  /  \
# /    \
#X      Z


# Map block layout
NODES_PER_BLOCK = 16
NODES_PER_BLOCK_VOLUME = NODES_PER_BLOCK * NODES_PER_BLOCK * NODES_PER_BLOCK
NODE_SIZE_IN_BYTES = 4
MAP_BLOCK_VERSION = 29

# u8 flags, u16 lighting_complete, u32 timestamp, u8 name-id mapping version
MAP_BLOCK_HEADER_SIZE = 1 + 2 + 4 + 1
# u8 content_width, u8 params_width
MAP_BLOCK_WIDTHS_SIZE = 1 + 1
NODE_DATA_SIZE = NODES_PER_BLOCK_VOLUME * NODE_SIZE_IN_BYTES

# Offsets of the node data planes
ID_HIGH_PLANE = 0
PARAM1_PLANE = 2 * NODES_PER_BLOCK_VOLUME
PARAM2_PLANE = 3 * NODES_PER_BLOCK_VOLUME

# Packed sqlite position key
BLOCK_KEY_RANGE = 4096
BLOCK_KEY_MAX_POSITIVE = 2048

AIR = "air"

# Rendering, in pixels
NODE_SIZE = 24
MAX_LIGHT = 15
MIN_BRIGHTNESS = 0.3
