import enum
import logging
import os.path
import sqlite3
from collections import namedtuple

from errors import MapBlockError
from mapblock import decodeMapBlock
from spatial import BlockPos
from util import getBlockAsInteger, getIntegerAsBlock


log = logging.getLogger(__name__)


class Map(object):
    """Raw block storage in a world's map.sqlite"""

    def __init__(self, path):
        if os.path.isdir(path):
            path = os.path.join(path, "map.sqlite")
        if not os.path.exists(path):
            raise FileNotFoundError("no map database at %s" % path)
        self.conn = sqlite3.connect(path)

    def close(self):
        self.conn.close()

    def getBlockData(self, x, y, z):
        """Compressed block bytes, or None when the block was never saved"""
        cur = self.conn.cursor()
        cur.execute("SELECT `data` FROM `blocks` WHERE `pos`==? LIMIT 1", (getBlockAsInteger(x, y, z), ))
        r = cur.fetchone()
        if not r:
            return None
        return bytes(r[0])

    def getBlockPositions(self):
        cur = self.conn.cursor()
        cur.execute("SELECT `pos` FROM `blocks`")
        return [BlockPos(*getIntegerAsBlock(r[0])) for r in cur]


class MemoryBackend(object):
    """Block storage in a dict, keyed by (x, y, z)"""

    def __init__(self, blocks=None):
        self.blocks = {}
        for pos, data in (blocks or {}).items():
            self.setBlockData(pos, data)

    def close(self):
        pass

    def setBlockData(self, pos, data):
        self.blocks[BlockPos(*pos)] = bytes(data)

    def getBlockData(self, x, y, z):
        return self.blocks.get(BlockPos(x, y, z))

    def getBlockPositions(self):
        return list(self.blocks)


class BlockStatus(enum.Enum):
    PRESENT = "present"
    NOT_FOUND = "not found"
    FETCH_ERROR = "fetch error"
    DECODE_ERROR = "decode error"


class BlockResult(namedtuple("BlockResult", "status block reason")):
    __slots__ = ()

    @property
    def present(self):
        return self.status is BlockStatus.PRESENT


class World(object):
    """Fetches raw blocks from a backend and decodes them.

    Missing, unreadable and corrupt blocks are reported through BlockResult
    and counted, never raised.
    """

    def __init__(self, backend):
        self.backend = backend
        self.missing = 0
        self.corrupt = 0
        self.failed = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.backend.close()

    def fetchBlock(self, pos):
        x, y, z = pos
        try:
            data = self.backend.getBlockData(x, y, z)
        except (OSError, sqlite3.Error) as e:
            self.failed += 1
            log.error("failed to fetch block (%d, %d, %d): %s", x, y, z, e)
            return BlockResult(BlockStatus.FETCH_ERROR, None, str(e))

        if data is None:
            self.missing += 1
            log.debug("block (%d, %d, %d) not found", x, y, z)
            return BlockResult(BlockStatus.NOT_FOUND, None, None)

        try:
            block = decodeMapBlock(data)
        except MapBlockError as e:
            self.corrupt += 1
            log.warning("corrupt block (%d, %d, %d): %s: %s", x, y, z, type(e).__name__, e)
            return BlockResult(BlockStatus.DECODE_ERROR, None, str(e))

        return BlockResult(BlockStatus.PRESENT, block, None)


class BlockCache(object):
    """Fetch results of one render pass, so every block is fetched once"""

    def __init__(self, world):
        self.world = world
        self.blocks = {}

    def fetchBlock(self, pos):
        pos = BlockPos(*pos)
        if pos not in self.blocks:
            self.blocks[pos] = self.world.fetchBlock(pos)
        return self.blocks[pos]

    def discardBelow(self, y):
        self.blocks = {pos: result for pos, result in self.blocks.items() if pos.y >= y}

    def clear(self):
        self.blocks.clear()
