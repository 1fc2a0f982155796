#!/usr/bin/env python3
"""Render an isometric view of an area of a Minetest world"""
import argparse
import logging
import sys
import time

from PIL import Image

from map import Map, World, BlockCache
from media import MediaCache
from neighborhood import BlockNeighborhood
from spatial import BlockPos
from blocks import build_block, build_flat, build_sprite, build_mesh, shade, alpha_over
from constants import *
import node_definitions


log = logging.getLogger(__name__)

# faces of a node that face the viewer
VIEW_FACES = ((1, 0, 0), (0, 1, 0), (0, 0, 1))


class Mapper:
    def __init__(self, world, media):
        self.world = world
        self.media = media
        self.cache = BlockCache(world)
        self.node_images = {}
        self.shaded_images = {}

    def buildNodeImage(self, node_name):
        """Generate the unshaded image of a node from its textures or mesh"""
        if node_name in node_definitions.NODE_MESHES:
            mesh_name, texture_name = node_definitions.NODE_MESHES[node_name]
            texture = self.media.image(texture_name)
            mesh = self.media.mesh(mesh_name)
            if mesh is None:
                return build_block(texture, texture)
            return build_mesh(mesh, texture)

        if node_name not in node_definitions.NODE_TEXTURES:
            log.info("no textures for node %s", node_name)
            dummy = self.media.dummy_image
            return build_block(dummy, dummy)

        texture_top, texture_side, texture_bottom = node_definitions.NODE_TEXTURES[node_name]
        top = self.media.image(texture_top) if texture_top != "" else None
        side = self.media.image(texture_side) if texture_side != "" else None
        bottom = self.media.image(texture_bottom) if texture_bottom != "" else None
        # only bottom texture, means it is a flat block, like lily pads
        if bottom is not None and top is None and side is None:
            return build_flat(bottom)
        # only side texture, means it is a sprite, like flowers
        if side is not None and top is None and bottom is None:
            return build_sprite(side)
        return build_block(top, side)

    def nodeImage(self, node_name, light=MAX_LIGHT):
        key = (node_name, light)
        if key not in self.shaded_images:
            if node_name not in self.node_images:
                self.node_images[node_name] = self.buildNodeImage(node_name)
            self.shaded_images[key] = shade(self.node_images[node_name], light)
        return self.shaded_images[key]

    @staticmethod
    def isOpaque(node_name):
        return (node_name not in node_definitions.INVISIBLE_NODES
                and node_name not in node_definitions.TRANSPARENT_NODES)

    def isVisible(self, neighborhood, x, y, z):
        """A node is hidden when all faces facing the viewer are covered"""
        for dx, dy, dz in VIEW_FACES:
            name, param1, param2 = neighborhood.getNode((x + dx, y + dy, z + dz))
            if not self.isOpaque(name):
                return True
        return False

    @staticmethod
    def lightAt(neighborhood, x, y, z):
        above = (x, y + 1, z)
        # nothing stored above, open sky
        if not neighborhood.isLoaded(above):
            return MAX_LIGHT
        return neighborhood.getParam1(above) & 0x0F

    def drawNode(self, canvas, x, y, z, image, start):
        """Draw the three sides of a single node"""
        alpha_over(
            canvas,
            image,
            (
                start[0] + NODE_SIZE // 2 * (z - x),
                start[1] + NODE_SIZE // 4 * (x + z - 2 * y),
            ),
        )

    def drawBlock(self, canvas, pos, start):
        """ returns max y of visible node, or None when nothing was drawn """
        pos = BlockPos(*pos)
        if not self.cache.fetchBlock(pos).present:
            return None
        neighborhood = BlockNeighborhood.assemble(self.cache, pos)
        origin = pos.toNodePos()
        maxy = None
        for y in range(NODES_PER_BLOCK):
            for z in range(NODES_PER_BLOCK):
                for x in range(NODES_PER_BLOCK):
                    node_name, param1, param2 = neighborhood.getNode((x, y, z))
                    if node_name in node_definitions.INVISIBLE_NODES:
                        continue
                    if not self.isVisible(neighborhood, x, y, z):
                        continue
                    image = self.nodeImage(node_name, self.lightAt(neighborhood, x, y, z))
                    self.drawNode(canvas, origin.x + x, origin.y + y, origin.z + z, image, start)
                    # y is drawn in ascending order
                    maxy = origin.y + y
        return maxy

    @staticmethod
    def canvasBounds(cx, cz, radius, ymin, ymax):
        """Canvas size and screen position of node (0, 0, 0) for an area"""
        xmin = (cx - radius) * NODES_PER_BLOCK
        xmax = (cx + radius + 1) * NODES_PER_BLOCK - 1
        zmin = (cz - radius) * NODES_PER_BLOCK
        zmax = (cz + radius + 1) * NODES_PER_BLOCK - 1
        nymin = ymin * NODES_PER_BLOCK
        nymax = (ymax + 1) * NODES_PER_BLOCK - 1
        left = NODE_SIZE // 2 * (zmin - xmax)
        right = NODE_SIZE // 2 * (zmax - xmin) + NODE_SIZE
        top = NODE_SIZE // 4 * (xmin + zmin - 2 * nymax)
        bottom = NODE_SIZE // 4 * (xmax + zmax - 2 * nymin) + NODE_SIZE
        return (right - left, bottom - top), (-left, -top)

    def mapArea(self, cx, cz, radius=5, ymin=-2, ymax=9):
        """Render the blocks around column (cx, cz), from layer ymin to ymax"""
        size, start = self.canvasBounds(cx, cz, radius, ymin, ymax)
        canvas = Image.new("RGBA", size)
        maxy = None
        for y in range(ymin, ymax + 1):
            print("Mapping y=%d" % y)
            for z in range(cz - radius, cz + radius + 1):
                for x in range(cx - radius, cx + radius + 1):
                    drawn = self.drawBlock(canvas, (x, y, z), start)
                    if drawn is not None:
                        maxy = drawn if maxy is None else max(maxy, drawn)
            # blocks of the layer below are no longer needed
            self.cache.discardBelow(y)
        self.cache.clear()
        log.info("highest visible node: %s", maxy)
        return canvas


def defaultCenter(positions):
    """Median block column of the stored blocks, (0, 0) for an empty map"""
    if not positions:
        return 0, 0
    xs = sorted(pos.x for pos in positions)
    zs = sorted(pos.z for pos in positions)
    return xs[len(xs) // 2], zs[len(zs) // 2]


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--map_folder", help="Path to the folder with the map.sqlite file", default="."
    )
    parser.add_argument(
        "--media", help="Folder searched recursively for textures and meshes", default=None
    )
    parser.add_argument(
        "--center", help="Block column to center on, defaults to the middle of the stored blocks", nargs=2, type=int, default=None, metavar=("X", "Z")
    )
    parser.add_argument("--radius", help="Blocks drawn around the center", type=int, default=5)
    parser.add_argument("--ymin", help="Lowest block layer", type=int, default=-2)
    parser.add_argument("--ymax", help="Highest block layer", type=int, default=9)
    parser.add_argument("--output", help="Output image", default="map.png")
    parser.add_argument("-v", "--verbose", help="More logging, repeat for debug output", action="count", default=0)
    args = parser.parse_args(argv)
    if args.radius < 0:
        parser.error("--radius must not be negative")
    if args.ymin > args.ymax:
        parser.error("--ymin must not be above --ymax")
    return args


def main(argv=None):
    args = parse_arguments(argv)
    logging.basicConfig(
        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        backend = Map(args.map_folder)
    except FileNotFoundError as e:
        print(e, file=sys.stderr)
        return 1

    media = MediaCache()
    if args.media:
        media.fetchMedia(args.media)

    time_start = time.perf_counter()
    with World(backend) as world:
        mapper = Mapper(world, media)
        cx, cz = args.center if args.center else defaultCenter(backend.getBlockPositions())
        canvas = mapper.mapArea(cx, cz, args.radius, args.ymin, args.ymax)
        canvas.save(args.output)
        print(
            "saved %s in %.1fs, %d blocks missing, %d corrupt, %d unreadable"
            % (args.output, time.perf_counter() - time_start, world.missing, world.corrupt, world.failed)
        )
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
