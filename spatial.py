from collections import namedtuple

from constants import NODES_PER_BLOCK
from util import floorDiv, floorMod


class BlockPos(namedtuple("BlockPos", "x y z")):
    """Position of a map block, in units of whole blocks"""
    __slots__ = ()

    def __add__(self, other):
        return BlockPos(self.x + other[0], self.y + other[1], self.z + other[2])

    def toNodePos(self):
        """Position of the block's lowest corner node"""
        return NodePos(self.x * NODES_PER_BLOCK, self.y * NODES_PER_BLOCK, self.z * NODES_PER_BLOCK)


class NodePos(namedtuple("NodePos", "x y z")):
    """Position of a single node, in world-wide node units"""
    __slots__ = ()

    def __add__(self, other):
        return NodePos(self.x + other[0], self.y + other[1], self.z + other[2])

    def toBlockPos(self):
        return BlockPos(
            floorDiv(self.x, NODES_PER_BLOCK),
            floorDiv(self.y, NODES_PER_BLOCK),
            floorDiv(self.z, NODES_PER_BLOCK),
        )

    def localPos(self):
        """Position inside the owning block, each axis in [0, NODES_PER_BLOCK)"""
        return NodePos(
            floorMod(self.x, NODES_PER_BLOCK),
            floorMod(self.y, NODES_PER_BLOCK),
            floorMod(self.z, NODES_PER_BLOCK),
        )


# Offsets of the center block and its 26 neighbors
NEIGHBOR_OFFSETS = tuple(
    BlockPos(dx, dy, dz)
    for dz in (-1, 0, 1)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
)
