class MapBlockError(Exception):
    """Base class for failures decoding a single map block"""


class UnsupportedVersion(MapBlockError):
    def __init__(self, version):
        super().__init__("unsupported block version: %d" % version)
        self.version = version


class CorruptData(MapBlockError):
    pass


class TruncatedData(MapBlockError):
    pass
