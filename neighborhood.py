from constants import AIR
from spatial import BlockPos, NodePos, NEIGHBOR_OFFSETS


NEIGHBORHOOD_CENTER = BlockPos(1, 1, 1)


def _cellIndex(x, y, z):
    if not (0 <= x < 3 and 0 <= y < 3 and 0 <= z < 3):
        return None
    return z * 9 + y * 3 + x


class BlockNeighborhood(object):
    """A block and its 26 neighbors, queried by node position.

    Node positions are relative to the center block, so (0, 0, 0) is the
    first node of the center block and (-1, 0, 0) the last node along x of
    the neighbor at offset (-1, 0, 0). Absent blocks read as air.
    """

    def __init__(self):
        self.blocks = [None] * 27

    @classmethod
    def assemble(cls, world, pos):
        neighborhood = cls()
        for offset in NEIGHBOR_OFFSETS:
            neighborhood.fetchBlock(world, offset, pos)
        return neighborhood

    def fetchBlock(self, world, offset, pos):
        # missing, unreadable and corrupt blocks all leave the cell absent
        result = world.fetchBlock(BlockPos(*pos) + offset)
        if not result.present:
            return
        self.setBlock(offset, result.block)

    def setBlock(self, offset, block):
        index = _cellIndex(*(NEIGHBORHOOD_CENTER + offset))
        if index is None:
            raise IndexError("neighbor offset out of range: %r" % (offset, ))
        self.blocks[index] = block

    def getBlock(self, offset):
        index = _cellIndex(*(NEIGHBORHOOD_CENTER + offset))
        if index is None:
            raise IndexError("neighbor offset out of range: %r" % (offset, ))
        return self.blocks[index]

    def _blockAt(self, pos):
        index = _cellIndex(*(NEIGHBORHOOD_CENTER + pos.toBlockPos()))
        if index is None:
            return None
        return self.blocks[index]

    def _locate(self, pos):
        pos = NodePos(*pos)
        block = self._blockAt(pos)
        if block is None:
            return None
        return block, block.getNode(*pos.localPos())

    def isLoaded(self, pos):
        """Whether the block owning the node at pos is present"""
        return self._blockAt(NodePos(*pos)) is not None

    def getNode(self, pos):
        """(name, param1, param2) of the node at pos"""
        found = self._locate(pos)
        if found is None:
            return AIR, 0, 0
        block, node = found
        return block.resolveName(node.id), node.param1, node.param2

    def getParam1(self, pos):
        found = self._locate(pos)
        if found is None:
            return 0
        return found[1].param1
