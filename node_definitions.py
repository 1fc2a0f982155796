# node name -> (top, side, bottom) texture file names
# only a bottom texture: flat node, only a side texture: sprite
NODE_TEXTURES = {
    "default:stone": ("default_stone.png", "default_stone.png", "default_stone.png"),
    "default:cobble": ("default_cobble.png", "default_cobble.png", "default_cobble.png"),
    "default:mossycobble": ("default_mossycobble.png", "default_mossycobble.png", "default_mossycobble.png"),
    "default:desert_stone": ("default_desert_stone.png", "default_desert_stone.png", "default_desert_stone.png"),
    "default:dirt": ("default_dirt.png", "default_dirt.png", "default_dirt.png"),
    "default:dirt_with_grass": ("default_grass.png", "default_grass_side.png", "default_dirt.png"),
    "default:dirt_with_snow": ("default_snow.png", "default_snow_side.png", "default_dirt.png"),
    "default:snowblock": ("default_snow.png", "default_snow.png", "default_snow.png"),
    "default:sand": ("default_sand.png", "default_sand.png", "default_sand.png"),
    "default:desert_sand": ("default_desert_sand.png", "default_desert_sand.png", "default_desert_sand.png"),
    "default:gravel": ("default_gravel.png", "default_gravel.png", "default_gravel.png"),
    "default:clay": ("default_clay.png", "default_clay.png", "default_clay.png"),
    "default:tree": ("default_tree_top.png", "default_tree.png", "default_tree_top.png"),
    "default:wood": ("default_wood.png", "default_wood.png", "default_wood.png"),
    "default:leaves": ("default_leaves.png", "default_leaves.png", "default_leaves.png"),
    "default:brick": ("default_brick.png", "default_brick.png", "default_brick.png"),
    "default:glass": ("default_glass.png", "default_glass.png", "default_glass.png"),
    "default:water_source": ("default_water.png", "default_water.png", "default_water.png"),
    "default:river_water_source": ("default_river_water.png", "default_river_water.png", "default_river_water.png"),
    "default:lava_source": ("default_lava.png", "default_lava.png", "default_lava.png"),
    "default:junglegrass": ("", "default_junglegrass.png", ""),
    "default:grass_1": ("", "default_grass_1.png", ""),
    "flowers:rose": ("", "flowers_rose.png", ""),
    "flowers:dandelion_yellow": ("", "flowers_dandelion_yellow.png", ""),
}

# node name -> (mesh file name, texture file name)
NODE_MESHES = {
    "doors:door_wood_a": ("door_a.obj", "doors_door_wood.png"),
    "doors:door_wood_b": ("door_b.obj", "doors_door_wood.png"),
    "beds:bed_bottom": ("beds_bed.obj", "beds_bed.png"),
}

# Nodes that are never drawn and never hide their neighbors
INVISIBLE_NODES = {
    "air",
    "ignore",
    "",
}

# Nodes that are drawn but do not hide the nodes behind them
TRANSPARENT_NODES = {
    "default:glass",
    "default:leaves",
    "default:water_source",
    "default:river_water_source",
    "default:junglegrass",
    "default:grass_1",
    "flowers:rose",
    "flowers:dandelion_yellow",
} | set(NODE_MESHES)
