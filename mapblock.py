import io
from collections import namedtuple

import zstandard

from constants import (
    MAP_BLOCK_VERSION, MAP_BLOCK_HEADER_SIZE, MAP_BLOCK_WIDTHS_SIZE,
    NODES_PER_BLOCK, NODE_DATA_SIZE,
    ID_HIGH_PLANE, PARAM1_PLANE, PARAM2_PLANE,
)
from errors import CorruptData, TruncatedData, UnsupportedVersion
from util import readBytes, readString, readU8, readU16, skipBytes


Node = namedtuple("Node", "id param1 param2")


def decompress(data):
    """Decompress a whole zstd stream held in memory"""
    dctx = zstandard.ZstdDecompressor()
    dobj = dctx.decompressobj()
    try:
        decompressed = dobj.decompress(data)
    except zstandard.ZstdError as e:
        raise CorruptData("zstd: %s" % e) from e
    if not dobj.eof:
        raise CorruptData("zstd stream ended before the end of the frame")
    return decompressed


def decodeMapBlock(data):
    """Decode the raw bytes of a version 29 map block.

    Layout, big endian:
        u8 version
        zstd stream:
            u8 flags, u16 lighting_complete, u32 timestamp,
            u8 name-id mapping version
            u16 mapping count, then per mapping: u16 id, u16 length, name
            u8 content_width, u8 params_width
            node data as four planes of 4096 bytes:
                id high bytes, id low bytes, param1, param2

    Anything after the node data (metadata, static objects, timers) is
    not needed for rendering and is ignored.
    """
    f = io.BytesIO(data)
    version = readU8(f)
    if version != MAP_BLOCK_VERSION:
        raise UnsupportedVersion(version)

    f = io.BytesIO(decompress(f.read()))

    skipBytes(f, MAP_BLOCK_HEADER_SIZE)

    id_to_name = {}
    num_name_id_mappings = readU16(f)
    for i in range(num_name_id_mappings):
        node_id = readU16(f)
        id_to_name[node_id] = readString(f)

    skipBytes(f, MAP_BLOCK_WIDTHS_SIZE)

    try:
        mapdata = readBytes(f, NODE_DATA_SIZE)
    except TruncatedData as e:
        raise TruncatedData("node data: %s" % e) from e

    return MapBlock(id_to_name, mapdata)


class MapBlock(object):
    """A decoded block of 16x16x16 nodes.

    Node ids are only meaningful together with this block's id_to_name
    mapping. The block does not know its own position.
    """

    __slots__ = ("_id_to_name", "_mapdata")

    def __init__(self, id_to_name, mapdata):
        if len(mapdata) != NODE_DATA_SIZE:
            raise ValueError("node data must be %d bytes" % NODE_DATA_SIZE)
        self._id_to_name = dict(id_to_name)
        self._mapdata = bytes(mapdata)

    def resolveName(self, node_id):
        return self._id_to_name.get(node_id, "")

    def getNode(self, x, y, z):
        datapos = z * NODES_PER_BLOCK * NODES_PER_BLOCK + y * NODES_PER_BLOCK + x
        mapdata = self._mapdata
        id_hi = mapdata[ID_HIGH_PLANE + 2 * datapos]
        id_lo = mapdata[ID_HIGH_PLANE + 2 * datapos + 1]
        return Node(
            (id_hi << 8) | id_lo,
            mapdata[PARAM1_PLANE + datapos],
            mapdata[PARAM2_PLANE + datapos],
        )
