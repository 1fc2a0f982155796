"""Builders for synthetic map blocks and worlds used across the tests."""
import sqlite3
import struct

import zstandard

from constants import NODES_PER_BLOCK_VOLUME
from util import getBlockAsInteger


def encodePayload(mappings, ids, param1=None, param2=None, trailer=b"\x02\x00\x00"):
    """Uncompressed version 29 payload.

    mappings is a list of (id, name) pairs so duplicates can be written.
    """
    if param1 is None:
        param1 = [0] * NODES_PER_BLOCK_VOLUME
    if param2 is None:
        param2 = [0] * NODES_PER_BLOCK_VOLUME
    out = bytearray()
    # flags, lighting_complete, timestamp, name-id mapping version
    out += struct.pack(">BHIB", 0x08, 0xFFFF, 1234, 0)
    out += struct.pack(">H", len(mappings))
    for node_id, name in mappings:
        raw = name.encode("utf-8")
        out += struct.pack(">HH", node_id, len(raw)) + raw
    # content_width, params_width
    out += struct.pack(">BB", 2, 2)
    out += struct.pack(">%dH" % NODES_PER_BLOCK_VOLUME, *ids)
    out += bytes(param1)
    out += bytes(param2)
    # node metadata version and count, never read
    out += trailer
    return bytes(out)


def compress(payload, version=29):
    return bytes([version]) + zstandard.ZstdCompressor().compress(payload)


def encodeMapBlock(mappings, ids, param1=None, param2=None, version=29):
    return compress(encodePayload(mappings, ids, param1, param2), version)


def uniformBlock(name, node_id=1, param1=0, param2=0):
    """Raw bytes of a block filled with one node"""
    return encodeMapBlock(
        [(node_id, name)],
        [node_id] * NODES_PER_BLOCK_VOLUME,
        [param1] * NODES_PER_BLOCK_VOLUME,
        [param2] * NODES_PER_BLOCK_VOLUME,
    )


def writeSqliteMap(path, blocks):
    """Create a map.sqlite at path holding {(x, y, z): raw bytes}"""
    conn = sqlite3.connect(str(path))
    conn.execute("CREATE TABLE `blocks` (`pos` INT PRIMARY KEY, `data` BLOB)")
    for (x, y, z), data in blocks.items():
        conn.execute("INSERT INTO `blocks` VALUES (?, ?)", (getBlockAsInteger(x, y, z), data))
    conn.commit()
    conn.close()
