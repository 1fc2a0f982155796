import struct

from constants import BLOCK_KEY_RANGE, BLOCK_KEY_MAX_POSITIVE
from errors import TruncatedData


def readBytes(f, count):
    """Read exactly count bytes or raise TruncatedData"""
    data = f.read(count)
    if len(data) != count:
        raise TruncatedData("expected %d bytes, got %d" % (count, len(data)))
    return data


def skipBytes(f, count):
    readBytes(f, count)


def readU8(f):
    return readBytes(f, 1)[0]


def readU16(f):
    return struct.unpack(">H", readBytes(f, 2))[0]


def readString(f):
    """u16 length followed by that many bytes of text"""
    length = readU16(f)
    return readBytes(f, length).decode("utf-8", "replace")


def floorDiv(a, b):
    return divmod(a, b)[0]


def floorMod(a, b):
    # always in [0, b) for positive b, unlike a truncating remainder
    return divmod(a, b)[1]


def unsignedToSigned(i, max_positive):
    if i < max_positive:
        return i
    return i - 2 * max_positive


def getBlockAsInteger(x, y, z):
    return z * BLOCK_KEY_RANGE * BLOCK_KEY_RANGE + y * BLOCK_KEY_RANGE + x


def getIntegerAsBlock(i):
    x = unsignedToSigned(floorMod(i, BLOCK_KEY_RANGE), BLOCK_KEY_MAX_POSITIVE)
    i = (i - x) // BLOCK_KEY_RANGE
    y = unsignedToSigned(floorMod(i, BLOCK_KEY_RANGE), BLOCK_KEY_MAX_POSITIVE)
    i = (i - y) // BLOCK_KEY_RANGE
    z = unsignedToSigned(floorMod(i, BLOCK_KEY_RANGE), BLOCK_KEY_MAX_POSITIVE)
    return x, y, z
